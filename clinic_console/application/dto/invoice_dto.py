from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InvoiceCreateRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    patient_id: int = Field(..., gt=0)
    item: str = Field(..., min_length=1)
    quantity: int
    cost: float


class InvoiceResponse(BaseModel):
    id: int
    patient_id: int
    item: str
    quantity: int
    cost: float
