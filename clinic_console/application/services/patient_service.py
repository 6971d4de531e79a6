from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, cast

from clinic_console.application.dto.patient_dto import PatientCreateRequest, PatientResponse
from clinic_console.application.errors import NotFoundError
from clinic_console.application.services.storage import storage_errors, validate_request
from clinic_console.domain.constants import Gender
from clinic_console.infrastructure.db.models_sqlalchemy import Patient
from clinic_console.infrastructure.db.repositories.patient_repo import PatientRepository
from clinic_console.infrastructure.db.session import session_scope

logger = logging.getLogger(__name__)


def _not_found(patient_id: int) -> NotFoundError:
    return NotFoundError(f"Patient with ID {patient_id} doesn't exist")


class PatientService:
    def __init__(
        self,
        patient_repo: PatientRepository | None = None,
        session_factory: Callable = session_scope,
    ) -> None:
        self.patient_repo = patient_repo or PatientRepository()
        self.session_factory = session_factory

    def _to_response(self, patient: Patient) -> PatientResponse:
        obj = cast(Any, patient)
        return PatientResponse(
            id=cast(int, obj.id),
            first_name=cast(str, obj.first_name),
            last_name=cast(str, obj.last_name),
            date_of_birth=cast(date, obj.date_of_birth),
            gender=Gender(obj.gender),
            address=cast(str, obj.address),
            phone_number=cast(str, obj.phone_number),
            email=obj.email,
            medical_history=obj.medical_history,
            allergies=obj.allergies,
            current_medications=obj.current_medications,
        )

    def list_all(self) -> list[PatientResponse]:
        with storage_errors("list patients"), self.session_factory() as session:
            return [self._to_response(p) for p in self.patient_repo.list_all(session)]

    def patient_names(self) -> dict[int, str]:
        with storage_errors("list patient names"), self.session_factory() as session:
            return self.patient_repo.names_by_id(session)

    def get_by_id(self, patient_id: int) -> PatientResponse:
        with storage_errors("get patient"), self.session_factory() as session:
            patient = self.patient_repo.get_by_id(session, patient_id)
            if not patient:
                raise _not_found(patient_id)
            return self._to_response(patient)

    def create(self, request: PatientCreateRequest) -> int:
        with storage_errors("create patient"), self.session_factory() as session:
            patient = self.patient_repo.create(
                session,
                first_name=request.first_name,
                last_name=request.last_name,
                date_of_birth=request.date_of_birth,
                gender=request.gender.value,
                address=request.address,
                phone_number=request.phone_number,
                email=request.email,
                medical_history=request.medical_history,
                allergies=request.allergies,
                current_medications=request.current_medications,
            )
            patient_id = cast(int, patient.id)
        logger.info("Patient %s created", patient_id)
        return patient_id

    def update(self, record: PatientResponse) -> None:
        request: PatientCreateRequest = validate_request(
            PatientCreateRequest, record.model_dump(exclude={"id"})
        )
        with storage_errors("update patient"), self.session_factory() as session:
            updated = self.patient_repo.update_details(
                session,
                record.id,
                first_name=request.first_name,
                last_name=request.last_name,
                date_of_birth=request.date_of_birth,
                gender=request.gender.value,
                address=request.address,
                phone_number=request.phone_number,
                email=request.email,
                medical_history=request.medical_history,
                allergies=request.allergies,
                current_medications=request.current_medications,
            )
            if updated is None:
                raise _not_found(record.id)
        logger.info("Patient %s updated", record.id)

    def delete(self, patient_id: int) -> None:
        with storage_errors("delete patient"), self.session_factory() as session:
            if not self.patient_repo.delete(session, patient_id):
                raise _not_found(patient_id)
        logger.info("Patient %s deleted", patient_id)
