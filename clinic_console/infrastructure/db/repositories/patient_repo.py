from __future__ import annotations

from datetime import date
from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.orm import Session

from clinic_console.infrastructure.db.models_sqlalchemy import Patient


class PatientRepository:
    def get_by_id(self, session: Session, patient_id: int) -> Patient | None:
        return session.get(Patient, patient_id)

    def list_all(self, session: Session) -> list[Patient]:
        stmt = select(Patient).order_by(Patient.id)
        return list(session.execute(stmt).scalars())

    def names_by_id(self, session: Session) -> dict[int, str]:
        rows = session.execute(select(Patient.id, Patient.first_name, Patient.last_name)).all()
        return {cast(int, row.id): f"{row.first_name} {row.last_name}" for row in rows}

    def create(
        self,
        session: Session,
        *,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        gender: str,
        address: str,
        phone_number: str,
        email: str | None,
        medical_history: str | None,
        allergies: str | None,
        current_medications: str | None,
    ) -> Patient:
        patient = Patient(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            gender=gender,
            address=address,
            phone_number=phone_number,
            email=email,
            medical_history=medical_history,
            allergies=allergies,
            current_medications=current_medications,
        )
        session.add(patient)
        session.flush()
        return patient

    def update_details(self, session: Session, patient_id: int, **fields: Any) -> Patient | None:
        patient = session.get(Patient, patient_id)
        if patient:
            patient_obj = cast(Any, patient)
            for name, value in fields.items():
                setattr(patient_obj, name, value)
        return patient

    def delete(self, session: Session, patient_id: int) -> bool:
        patient = session.get(Patient, patient_id)
        if not patient:
            return False
        session.delete(patient)
        return True
