from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MedicalRecordCreateRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    patient_id: int = Field(..., gt=0)
    doctor_notes: str = Field(..., min_length=1)
    nurse_notes: str | None = None
    diagnosis: str = Field(..., min_length=1)
    prescription: str | None = None


class MedicalRecordResponse(BaseModel):
    id: int
    patient_id: int
    doctor_notes: str
    nurse_notes: str | None = None
    diagnosis: str
    prescription: str | None = None
