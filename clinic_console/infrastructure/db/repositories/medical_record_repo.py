from __future__ import annotations

from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.orm import Session

from clinic_console.infrastructure.db.models_sqlalchemy import MedicalRecord


class MedicalRecordRepository:
    def get_by_id(self, session: Session, record_id: int) -> MedicalRecord | None:
        return session.get(MedicalRecord, record_id)

    def list_all(self, session: Session) -> list[MedicalRecord]:
        stmt = select(MedicalRecord).order_by(MedicalRecord.id)
        return list(session.execute(stmt).scalars())

    def create(
        self,
        session: Session,
        *,
        patient_id: int,
        doctor_notes: str,
        nurse_notes: str | None,
        diagnosis: str,
        prescription: str | None,
    ) -> MedicalRecord:
        record = MedicalRecord(
            patient_id=patient_id,
            doctor_notes=doctor_notes,
            nurse_notes=nurse_notes,
            diagnosis=diagnosis,
            prescription=prescription,
        )
        session.add(record)
        session.flush()
        return record

    def update_details(self, session: Session, record_id: int, **fields: Any) -> MedicalRecord | None:
        record = session.get(MedicalRecord, record_id)
        if record:
            record_obj = cast(Any, record)
            for name, value in fields.items():
                setattr(record_obj, name, value)
        return record

    def delete(self, session: Session, record_id: int) -> bool:
        record = session.get(MedicalRecord, record_id)
        if not record:
            return False
        session.delete(record)
        return True
