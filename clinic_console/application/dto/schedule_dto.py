from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from clinic_console.domain.constants import ShiftKind


class ShiftAssignmentResponse(BaseModel):
    id: int
    staff_id: int
    shift_date: date
    shift_kind: ShiftKind
