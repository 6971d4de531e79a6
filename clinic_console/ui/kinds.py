from __future__ import annotations

from collections.abc import Mapping

from clinic_console.application.dto.invoice_dto import InvoiceResponse
from clinic_console.application.dto.medical_record_dto import MedicalRecordResponse
from clinic_console.application.dto.patient_dto import PatientResponse
from clinic_console.application.dto.staff_dto import StaffResponse
from clinic_console.application.errors import ValidationError
from clinic_console.domain.constants import Gender, StaffRole
from clinic_console.ui.engine.record_kind import (
    FieldSpec,
    RecordKind,
    format_cost,
    format_date,
    id_reference,
    optional_text,
    parse_cost,
    parse_date_of_birth,
    parse_quantity,
    read_only_field,
    required_text,
)


def parse_gender(raw: str) -> Gender:
    return Gender.parse(raw)


def parse_role(raw: str) -> StaffRole:
    role = StaffRole.parse(raw)
    if role is None:
        raise ValidationError("Invalid role. Use Doctor, Nurse, Admin or Technician.")
    return role


def _patient_terms(record: PatientResponse, _names: Mapping[int, str]) -> tuple:
    return (record.first_name, record.last_name, record.id, record.phone_number)


def _staff_terms(record: StaffResponse, _names: Mapping[int, str]) -> tuple:
    return (record.name, record.id, record.phone_number)


def _medical_record_terms(record: MedicalRecordResponse, names: Mapping[int, str]) -> tuple:
    return (record.patient_id, record.doctor_notes, record.diagnosis, names.get(record.patient_id, ""))


def _invoice_terms(record: InvoiceResponse, names: Mapping[int, str]) -> tuple:
    return (record.patient_id, record.item, names.get(record.patient_id, ""))


PATIENT_KIND = RecordKind(
    entity="patient",
    title="Patient",
    singular="patient",
    plural="patients",
    fields=(
        read_only_field("id", "ID"),
        FieldSpec("first_name", "First Name", required_text("First Name")),
        FieldSpec("last_name", "Last Name", required_text("Last Name")),
        FieldSpec("date_of_birth", "Date of Birth", parse_date_of_birth, format_date),
        FieldSpec("gender", "Gender", parse_gender),
        FieldSpec("address", "Address", required_text("Address")),
        FieldSpec("phone_number", "Phone Number", required_text("Phone Number")),
        FieldSpec("email", "Email", optional_text),
        FieldSpec("medical_history", "Medical History", optional_text),
        FieldSpec("allergies", "Allergies", optional_text),
        FieldSpec("current_medications", "Current Medications", optional_text),
    ),
    search_terms=_patient_terms,
    list_columns=("id", "first_name", "last_name", "phone_number"),
)

STAFF_KIND = RecordKind(
    entity="staff",
    title="Staff",
    singular="staff member",
    plural="staff members",
    fields=(
        read_only_field("id", "ID"),
        FieldSpec("name", "Name", required_text("Name")),
        FieldSpec("role", "Role", parse_role),
        FieldSpec("phone_number", "Phone Number", required_text("Phone Number")),
        FieldSpec("email", "Email", optional_text),
        FieldSpec("address", "Address", required_text("Address")),
    ),
    search_terms=_staff_terms,
    list_columns=("id", "name", "role", "phone_number"),
)

MEDICAL_RECORD_KIND = RecordKind(
    entity="medical_record",
    title="Record",
    singular="record",
    plural="records",
    fields=(
        read_only_field("id", "ID"),
        FieldSpec("patient_id", "Patient ID", id_reference("Patient")),
        FieldSpec("doctor_notes", "Doctor Notes", required_text("Doctor Notes")),
        FieldSpec("nurse_notes", "Nurse Notes", optional_text),
        FieldSpec("diagnosis", "Diagnosis", required_text("Diagnosis")),
        FieldSpec("prescription", "Prescription", optional_text),
    ),
    search_terms=_medical_record_terms,
    list_columns=("id", "patient_id", "diagnosis"),
    uses_patient_names=True,
)

INVOICE_KIND = RecordKind(
    entity="invoice",
    title="Invoice",
    singular="invoice",
    plural="invoices",
    fields=(
        read_only_field("id", "ID"),
        FieldSpec("patient_id", "Patient ID", id_reference("Patient")),
        FieldSpec("item", "Item", required_text("Item")),
        FieldSpec("quantity", "Quantity", parse_quantity),
        FieldSpec("cost", "Cost", parse_cost, format_cost),
    ),
    search_terms=_invoice_terms,
    list_columns=("id", "patient_id", "item", "quantity", "cost"),
    uses_patient_names=True,
)

ALL_KINDS: tuple[RecordKind, ...] = (PATIENT_KIND, STAFF_KIND, MEDICAL_RECORD_KIND, INVOICE_KIND)
