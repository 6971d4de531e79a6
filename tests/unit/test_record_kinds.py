from __future__ import annotations

from datetime import date

import pytest

from clinic_console.application.dto.patient_dto import PatientResponse
from clinic_console.application.errors import ValidationError
from clinic_console.domain.constants import Gender, StaffRole
from clinic_console.ui.kinds import INVOICE_KIND, MEDICAL_RECORD_KIND, PATIENT_KIND, STAFF_KIND
from tests.fakes import make_invoice, make_staff


def _patient() -> PatientResponse:
    return PatientResponse(
        id=4,
        first_name="Grace",
        last_name="Hopper",
        date_of_birth=date(1906, 12, 9),
        gender=Gender.FEMALE,
        address="Arlington",
        phone_number="555-0199",
        email=None,
    )


def _parse(kind, name: str, raw: str):
    return kind.fields[kind.field_index(name)].parse(raw)


def test_patient_projection_keeps_fields_separate() -> None:
    projection = PATIENT_KIND.projection(_patient())

    assert projection == "grace\nhopper\n4\n555-0199"
    assert "gracehopper" not in projection


def test_formatting_of_dates_enums_and_missing_values() -> None:
    patient = _patient()

    assert PATIENT_KIND.format_field(patient, PATIENT_KIND.field_index("date_of_birth")) == "1906-12-09"
    assert PATIENT_KIND.format_field(patient, PATIENT_KIND.field_index("gender")) == "Female"
    assert PATIENT_KIND.format_field(patient, PATIENT_KIND.field_index("email")) == ""


def test_required_and_optional_text() -> None:
    with pytest.raises(ValidationError, match="First Name cannot be empty"):
        _parse(PATIENT_KIND, "first_name", "   ")
    assert _parse(PATIENT_KIND, "allergies", "  ") is None
    assert _parse(PATIENT_KIND, "allergies", " penicillin ") == "penicillin"


def test_date_of_birth_parse() -> None:
    assert _parse(PATIENT_KIND, "date_of_birth", "1990-02-03") == date(1990, 2, 3)
    with pytest.raises(ValidationError, match="Invalid date of birth"):
        _parse(PATIENT_KIND, "date_of_birth", "03/02/1990")


@pytest.mark.parametrize(("raw", "expected"), [("m", Gender.MALE), ("FEMALE", Gender.FEMALE), ("x", Gender.OTHER)])
def test_gender_parse_is_lenient(raw: str, expected: Gender) -> None:
    assert _parse(PATIENT_KIND, "gender", raw) is expected


def test_role_parse_is_strict() -> None:
    assert _parse(STAFF_KIND, "role", "t") is StaffRole.TECHNICIAN
    assert _parse(STAFF_KIND, "role", "nurse") is StaffRole.NURSE
    with pytest.raises(ValidationError, match="Invalid role"):
        _parse(STAFF_KIND, "role", "surgeon")


def test_patient_id_reference_parse() -> None:
    assert _parse(MEDICAL_RECORD_KIND, "patient_id", " 12 ") == 12
    with pytest.raises(ValidationError, match="Invalid Patient ID format."):
        _parse(MEDICAL_RECORD_KIND, "patient_id", "twelve")
    with pytest.raises(ValidationError, match="Invalid Patient ID format."):
        _parse(INVOICE_KIND, "patient_id", "0")


@pytest.mark.parametrize("raw", ["abc", "nan", "inf"])
def test_cost_rejects_non_numbers(raw: str) -> None:
    with pytest.raises(ValidationError, match="Invalid cost. Please enter a valid number."):
        _parse(INVOICE_KIND, "cost", raw)


def test_invoice_projection_includes_patient_name() -> None:
    projection = INVOICE_KIND.projection(make_invoice(3, patient_id=8), {8: "Grace Hopper"})

    assert "grace hopper" in projection
    assert projection.startswith("8\nbandage")


def test_count_labels_pluralize() -> None:
    assert MEDICAL_RECORD_KIND.count_label(1) == "1 record"
    assert MEDICAL_RECORD_KIND.count_label(0) == "0 records"
    assert STAFF_KIND.count_label(2) == "2 staff members"


def test_with_field_returns_updated_copy() -> None:
    staff = make_staff(1, "Dana Reyes")

    updated = STAFF_KIND.with_field(staff, STAFF_KIND.field_index("name"), "Dana R.")

    assert updated.name == "Dana R."
    assert staff.name == "Dana Reyes"
