from __future__ import annotations

from dataclasses import dataclass

from clinic_console.application.services.invoice_service import InvoiceService
from clinic_console.application.services.medical_record_service import MedicalRecordService
from clinic_console.application.services.patient_service import PatientService
from clinic_console.application.services.schedule_service import ScheduleService
from clinic_console.application.services.staff_service import StaffService
from clinic_console.infrastructure.db.repositories.invoice_repo import InvoiceRepository
from clinic_console.infrastructure.db.repositories.medical_record_repo import MedicalRecordRepository
from clinic_console.infrastructure.db.repositories.patient_repo import PatientRepository
from clinic_console.infrastructure.db.repositories.schedule_repo import ScheduleRepository
from clinic_console.infrastructure.db.repositories.staff_repo import StaffRepository
from clinic_console.infrastructure.db.session import session_scope


@dataclass
class Container:
    patient_repo: PatientRepository
    staff_repo: StaffRepository
    medical_record_repo: MedicalRecordRepository
    invoice_repo: InvoiceRepository
    schedule_repo: ScheduleRepository

    patient_service: PatientService
    staff_service: StaffService
    medical_record_service: MedicalRecordService
    invoice_service: InvoiceService
    schedule_service: ScheduleService


def build_container(session_factory=session_scope) -> Container:
    patient_repo = PatientRepository()
    staff_repo = StaffRepository()
    medical_record_repo = MedicalRecordRepository()
    invoice_repo = InvoiceRepository()
    schedule_repo = ScheduleRepository()

    patient_service = PatientService(patient_repo=patient_repo, session_factory=session_factory)
    staff_service = StaffService(staff_repo=staff_repo, session_factory=session_factory)
    medical_record_service = MedicalRecordService(
        record_repo=medical_record_repo,
        patient_repo=patient_repo,
        session_factory=session_factory,
    )
    invoice_service = InvoiceService(
        invoice_repo=invoice_repo,
        patient_repo=patient_repo,
        session_factory=session_factory,
    )
    schedule_service = ScheduleService(
        schedule_repo=schedule_repo,
        staff_repo=staff_repo,
        session_factory=session_factory,
    )

    return Container(
        patient_repo=patient_repo,
        staff_repo=staff_repo,
        medical_record_repo=medical_record_repo,
        invoice_repo=invoice_repo,
        schedule_repo=schedule_repo,
        patient_service=patient_service,
        staff_service=staff_service,
        medical_record_service=medical_record_service,
        invoice_service=invoice_service,
        schedule_service=schedule_service,
    )
