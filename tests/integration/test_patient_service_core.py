from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from datetime import date
from pathlib import Path

import pytest
from sqlalchemy.orm import Session, sessionmaker

from clinic_console.application.dto.invoice_dto import InvoiceCreateRequest
from clinic_console.application.dto.medical_record_dto import MedicalRecordCreateRequest
from clinic_console.application.dto.patient_dto import PatientCreateRequest
from clinic_console.application.errors import NotFoundError, ValidationError
from clinic_console.application.services.invoice_service import InvoiceService
from clinic_console.application.services.medical_record_service import MedicalRecordService
from clinic_console.application.services.patient_service import PatientService
from clinic_console.domain.constants import Gender
from clinic_console.infrastructure.db import models_sqlalchemy as models
from clinic_console.infrastructure.db.engine import get_engine
from clinic_console.infrastructure.db.models_sqlalchemy import Base


def make_session_factory(db_path: Path) -> Callable[[], AbstractContextManager[Session]]:
    engine = get_engine(f"sqlite:///{db_path.as_posix()}")
    Base.metadata.create_all(engine)
    session_local = sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True
    )

    @contextmanager
    def _session_scope() -> Iterator[Session]:
        session: Session = session_local()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return _session_scope


def _patient_request(first_name: str = "Ada", last_name: str = "Lovelace") -> PatientCreateRequest:
    return PatientCreateRequest(
        first_name=first_name,
        last_name=last_name,
        date_of_birth=date(1815, 12, 10),
        gender=Gender.FEMALE,
        address="12 St James's Square",
        phone_number="555-1815",
    )


def test_create_list_and_get_patient(tmp_path: Path) -> None:
    service = PatientService(session_factory=make_session_factory(tmp_path / "patients.db"))

    first_id = service.create(_patient_request())
    second_id = service.create(_patient_request("Alan", "Turing"))

    assert [patient.id for patient in service.list_all()] == [first_id, second_id]
    loaded = service.get_by_id(second_id)
    assert loaded.full_name == "Alan Turing"
    assert loaded.gender is Gender.FEMALE
    assert service.patient_names() == {first_id: "Ada Lovelace", second_id: "Alan Turing"}


def test_get_missing_patient_raises_not_found(tmp_path: Path) -> None:
    service = PatientService(session_factory=make_session_factory(tmp_path / "patients_missing.db"))

    with pytest.raises(NotFoundError, match="Patient with ID 42 doesn't exist"):
        service.get_by_id(42)


def test_update_patient_persists_fields(tmp_path: Path) -> None:
    service = PatientService(session_factory=make_session_factory(tmp_path / "patients_update.db"))
    patient_id = service.create(_patient_request())
    record = service.get_by_id(patient_id)

    service.update(record.model_copy(update={"phone_number": "555-0000", "allergies": "dust"}))

    updated = service.get_by_id(patient_id)
    assert updated.phone_number == "555-0000"
    assert updated.allergies == "dust"


def test_update_rejects_blank_required_field(tmp_path: Path) -> None:
    service = PatientService(session_factory=make_session_factory(tmp_path / "patients_blank.db"))
    patient_id = service.create(_patient_request())
    record = service.get_by_id(patient_id)

    with pytest.raises(ValidationError, match="cannot be empty"):
        service.update(record.model_copy(update={"last_name": "  "}))
    assert service.get_by_id(patient_id).last_name == "Lovelace"


def test_delete_patient_cascades_to_records_and_invoices(tmp_path: Path) -> None:
    session_factory = make_session_factory(tmp_path / "patients_cascade.db")
    patients = PatientService(session_factory=session_factory)
    records = MedicalRecordService(session_factory=session_factory)
    invoices = InvoiceService(session_factory=session_factory)
    keep_id = patients.create(_patient_request("Alan", "Turing"))
    patient_id = patients.create(_patient_request())
    records.create(MedicalRecordCreateRequest(patient_id=patient_id, doctor_notes="rest", diagnosis="Flu"))
    invoices.create(InvoiceCreateRequest(patient_id=patient_id, item="Bandage", quantity=2, cost=4.5))
    invoices.create(InvoiceCreateRequest(patient_id=keep_id, item="Gauze", quantity=1, cost=1.0))

    patients.delete(patient_id)

    with session_factory() as session:
        assert session.query(models.Patient).count() == 1
        assert session.query(models.MedicalRecord).count() == 0
        remaining = session.query(models.Invoice).all()
        assert [invoice.item for invoice in remaining] == ["Gauze"]


def test_delete_missing_patient_raises(tmp_path: Path) -> None:
    service = PatientService(session_factory=make_session_factory(tmp_path / "patients_delete_missing.db"))

    with pytest.raises(NotFoundError):
        service.delete(99999)
