from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, cast

from clinic_console.application.dto.staff_dto import StaffCreateRequest, StaffResponse
from clinic_console.application.errors import NotFoundError
from clinic_console.application.services.storage import storage_errors, validate_request
from clinic_console.domain.constants import StaffRole
from clinic_console.infrastructure.db.models_sqlalchemy import StaffMember
from clinic_console.infrastructure.db.repositories.staff_repo import StaffRepository
from clinic_console.infrastructure.db.session import session_scope

logger = logging.getLogger(__name__)


def _not_found(staff_id: int) -> NotFoundError:
    return NotFoundError(f"Staff with ID {staff_id} doesn't exist")


class StaffService:
    def __init__(
        self,
        staff_repo: StaffRepository | None = None,
        session_factory: Callable = session_scope,
    ) -> None:
        self.staff_repo = staff_repo or StaffRepository()
        self.session_factory = session_factory

    def _to_response(self, member: StaffMember) -> StaffResponse:
        obj = cast(Any, member)
        return StaffResponse(
            id=cast(int, obj.id),
            name=cast(str, obj.name),
            role=StaffRole(obj.role),
            phone_number=cast(str, obj.phone_number),
            email=obj.email,
            address=cast(str, obj.address),
        )

    def list_all(self) -> list[StaffResponse]:
        with storage_errors("list staff"), self.session_factory() as session:
            return [self._to_response(m) for m in self.staff_repo.list_all(session)]

    def get_by_id(self, staff_id: int) -> StaffResponse:
        with storage_errors("get staff"), self.session_factory() as session:
            member = self.staff_repo.get_by_id(session, staff_id)
            if not member:
                raise _not_found(staff_id)
            return self._to_response(member)

    def create(self, request: StaffCreateRequest) -> int:
        with storage_errors("create staff"), self.session_factory() as session:
            member = self.staff_repo.create(
                session,
                name=request.name,
                role=request.role.value,
                phone_number=request.phone_number,
                email=request.email,
                address=request.address,
            )
            staff_id = cast(int, member.id)
        logger.info("Staff member %s created", staff_id)
        return staff_id

    def update(self, record: StaffResponse) -> None:
        request: StaffCreateRequest = validate_request(StaffCreateRequest, record.model_dump(exclude={"id"}))
        with storage_errors("update staff"), self.session_factory() as session:
            updated = self.staff_repo.update_details(
                session,
                record.id,
                name=request.name,
                role=request.role.value,
                phone_number=request.phone_number,
                email=request.email,
                address=request.address,
            )
            if updated is None:
                raise _not_found(record.id)
        logger.info("Staff member %s updated", record.id)

    def delete(self, staff_id: int) -> None:
        with storage_errors("delete staff"), self.session_factory() as session:
            if not self.staff_repo.delete(session, staff_id):
                raise _not_found(staff_id)
        logger.info("Staff member %s deleted", staff_id)
