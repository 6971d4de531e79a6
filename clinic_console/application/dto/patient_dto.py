from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from clinic_console.domain.constants import Gender


class PatientCreateRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    date_of_birth: date
    gender: Gender = Gender.OTHER
    address: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    email: str | None = None
    medical_history: str | None = None
    allergies: str | None = None
    current_medications: str | None = None


class PatientResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Gender
    address: str
    phone_number: str
    email: str | None = None
    medical_history: str | None = None
    allergies: str | None = None
    current_medications: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
