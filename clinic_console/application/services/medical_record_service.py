from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, cast

from clinic_console.application.dto.medical_record_dto import (
    MedicalRecordCreateRequest,
    MedicalRecordResponse,
)
from clinic_console.application.errors import NotFoundError
from clinic_console.application.services.storage import storage_errors, validate_request
from clinic_console.infrastructure.db.models_sqlalchemy import MedicalRecord
from clinic_console.infrastructure.db.repositories.medical_record_repo import MedicalRecordRepository
from clinic_console.infrastructure.db.repositories.patient_repo import PatientRepository
from clinic_console.infrastructure.db.session import session_scope

logger = logging.getLogger(__name__)


def _not_found(record_id: int) -> NotFoundError:
    return NotFoundError(f"Record with ID {record_id} doesn't exist")


class MedicalRecordService:
    def __init__(
        self,
        record_repo: MedicalRecordRepository | None = None,
        patient_repo: PatientRepository | None = None,
        session_factory: Callable = session_scope,
    ) -> None:
        self.record_repo = record_repo or MedicalRecordRepository()
        self.patient_repo = patient_repo or PatientRepository()
        self.session_factory = session_factory

    def _to_response(self, record: MedicalRecord) -> MedicalRecordResponse:
        obj = cast(Any, record)
        return MedicalRecordResponse(
            id=cast(int, obj.id),
            patient_id=cast(int, obj.patient_id),
            doctor_notes=cast(str, obj.doctor_notes),
            nurse_notes=obj.nurse_notes,
            diagnosis=cast(str, obj.diagnosis),
            prescription=obj.prescription,
        )

    def _ensure_patient(self, session, patient_id: int) -> None:
        if self.patient_repo.get_by_id(session, patient_id) is None:
            raise NotFoundError("Patient with given ID does not exist.")

    def list_all(self) -> list[MedicalRecordResponse]:
        with storage_errors("list records"), self.session_factory() as session:
            return [self._to_response(r) for r in self.record_repo.list_all(session)]

    def patient_names(self) -> dict[int, str]:
        with storage_errors("list patient names"), self.session_factory() as session:
            return self.patient_repo.names_by_id(session)

    def get_by_id(self, record_id: int) -> MedicalRecordResponse:
        with storage_errors("get record"), self.session_factory() as session:
            record = self.record_repo.get_by_id(session, record_id)
            if not record:
                raise _not_found(record_id)
            return self._to_response(record)

    def create(self, request: MedicalRecordCreateRequest) -> int:
        with storage_errors("create record"), self.session_factory() as session:
            self._ensure_patient(session, request.patient_id)
            record = self.record_repo.create(
                session,
                patient_id=request.patient_id,
                doctor_notes=request.doctor_notes,
                nurse_notes=request.nurse_notes,
                diagnosis=request.diagnosis,
                prescription=request.prescription,
            )
            record_id = cast(int, record.id)
        logger.info("Medical record %s created for patient %s", record_id, request.patient_id)
        return record_id

    def update(self, record: MedicalRecordResponse) -> None:
        request: MedicalRecordCreateRequest = validate_request(
            MedicalRecordCreateRequest, record.model_dump(exclude={"id"})
        )
        with storage_errors("update record"), self.session_factory() as session:
            self._ensure_patient(session, request.patient_id)
            updated = self.record_repo.update_details(
                session,
                record.id,
                patient_id=request.patient_id,
                doctor_notes=request.doctor_notes,
                nurse_notes=request.nurse_notes,
                diagnosis=request.diagnosis,
                prescription=request.prescription,
            )
            if updated is None:
                raise _not_found(record.id)
        logger.info("Medical record %s updated", record.id)

    def delete(self, record_id: int) -> None:
        with storage_errors("delete record"), self.session_factory() as session:
            if not self.record_repo.delete(session, record_id):
                raise _not_found(record_id)
        logger.info("Medical record %s deleted", record_id)
