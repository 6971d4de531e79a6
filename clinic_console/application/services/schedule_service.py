from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, cast

from clinic_console.application.dto.schedule_dto import ShiftAssignmentResponse
from clinic_console.application.errors import NotFoundError
from clinic_console.application.services.storage import storage_errors
from clinic_console.domain.constants import ShiftKind
from clinic_console.infrastructure.db.repositories.schedule_repo import ScheduleRepository
from clinic_console.infrastructure.db.repositories.staff_repo import StaffRepository
from clinic_console.infrastructure.db.session import session_scope

logger = logging.getLogger(__name__)


class ScheduleService:
    """Append-only shift assignments for staff members."""

    def __init__(
        self,
        schedule_repo: ScheduleRepository | None = None,
        staff_repo: StaffRepository | None = None,
        session_factory: Callable = session_scope,
    ) -> None:
        self.schedule_repo = schedule_repo or ScheduleRepository()
        self.staff_repo = staff_repo or StaffRepository()
        self.session_factory = session_factory

    def assign_shift(self, staff_id: int, shift_date: date, shift_kind: ShiftKind) -> None:
        kind = ShiftKind(shift_kind)
        with storage_errors("assign shift"), self.session_factory() as session:
            if self.staff_repo.get_by_id(session, staff_id) is None:
                raise NotFoundError(f"Staff with ID {staff_id} doesn't exist")
            self.schedule_repo.add(session, staff_id=staff_id, shift_date=shift_date, shift_kind=kind.value)
        logger.info("Assigned %s shift on %s to staff %s", kind.value, shift_date.isoformat(), staff_id)

    def list_assignments(self, staff_id: int) -> list[ShiftAssignmentResponse]:
        with storage_errors("list assignments"), self.session_factory() as session:
            rows = self.schedule_repo.list_for_staff(session, staff_id)
            results: list[ShiftAssignmentResponse] = []
            for row in rows:
                obj = cast(Any, row)
                results.append(
                    ShiftAssignmentResponse(
                        id=cast(int, obj.id),
                        staff_id=cast(int, obj.staff_id),
                        shift_date=cast(date, obj.shift_date),
                        shift_kind=ShiftKind(obj.shift_kind),
                    )
                )
            return results
