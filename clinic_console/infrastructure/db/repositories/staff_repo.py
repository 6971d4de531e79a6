from __future__ import annotations

from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.orm import Session

from clinic_console.infrastructure.db.models_sqlalchemy import StaffMember


class StaffRepository:
    def get_by_id(self, session: Session, staff_id: int) -> StaffMember | None:
        return session.get(StaffMember, staff_id)

    def list_all(self, session: Session) -> list[StaffMember]:
        stmt = select(StaffMember).order_by(StaffMember.id)
        return list(session.execute(stmt).scalars())

    def create(
        self,
        session: Session,
        *,
        name: str,
        role: str,
        phone_number: str,
        email: str | None,
        address: str,
    ) -> StaffMember:
        member = StaffMember(name=name, role=role, phone_number=phone_number, email=email, address=address)
        session.add(member)
        session.flush()
        return member

    def update_details(self, session: Session, staff_id: int, **fields: Any) -> StaffMember | None:
        member = session.get(StaffMember, staff_id)
        if member:
            member_obj = cast(Any, member)
            for name, value in fields.items():
                setattr(member_obj, name, value)
        return member

    def delete(self, session: Session, staff_id: int) -> bool:
        member = session.get(StaffMember, staff_id)
        if not member:
            return False
        session.delete(member)
        return True
