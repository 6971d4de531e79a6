from __future__ import annotations

from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from clinic_console.infrastructure.db.models_sqlalchemy import ShiftAssignment


class ScheduleRepository:
    def add(self, session: Session, *, staff_id: int, shift_date: date, shift_kind: str) -> ShiftAssignment:
        assignment = ShiftAssignment(staff_id=staff_id, shift_date=shift_date, shift_kind=shift_kind)
        session.add(assignment)
        session.flush()
        return assignment

    def list_for_staff(self, session: Session, staff_id: int) -> list[ShiftAssignment]:
        stmt = (
            select(ShiftAssignment)
            .where(ShiftAssignment.staff_id == staff_id)
            .order_by(ShiftAssignment.shift_date, ShiftAssignment.id)
        )
        return list(session.execute(stmt).scalars())
