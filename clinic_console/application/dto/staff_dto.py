from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from clinic_console.domain.constants import StaffRole


class StaffCreateRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    role: StaffRole = StaffRole.DOCTOR
    phone_number: str = Field(..., min_length=1)
    email: str | None = None
    address: str = Field(..., min_length=1)


class StaffResponse(BaseModel):
    id: int
    name: str
    role: StaffRole
    phone_number: str
    email: str | None = None
    address: str
