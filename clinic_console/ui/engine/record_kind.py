"""Record-kind descriptors that parameterize the workflow engine per entity."""
from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from clinic_console.application.errors import ValidationError

Parser = Callable[[str], Any]
Formatter = Callable[[Any], str]


def format_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def format_cost(value: Any) -> str:
    if value is None:
        return ""
    return f"{float(value):.2f}"


def format_date(value: Any) -> str:
    if value is None:
        return ""
    return value.isoformat()


def required_text(label: str) -> Parser:
    def _parse(raw: str) -> str:
        value = raw.strip()
        if not value:
            raise ValidationError(f"{label} cannot be empty")
        return value

    return _parse


def optional_text(raw: str) -> str | None:
    value = raw.strip()
    return value or None


def id_reference(title: str) -> Parser:
    def _parse(raw: str) -> int:
        try:
            value = int(raw.strip())
        except ValueError:
            raise ValidationError(f"Invalid {title} ID format.") from None
        if value <= 0:
            raise ValidationError(f"Invalid {title} ID format.")
        return value

    return _parse


def parse_quantity(raw: str) -> int:
    if not raw.strip():
        raise ValidationError("Quantity cannot be empty")
    try:
        return int(raw.strip())
    except ValueError:
        raise ValidationError("Invalid quantity. Please enter a valid number.") from None


def parse_cost(raw: str) -> float:
    if not raw.strip():
        raise ValidationError("Cost cannot be empty")
    try:
        value = float(raw.strip())
    except ValueError:
        raise ValidationError("Invalid cost. Please enter a valid number.") from None
    if not math.isfinite(value):
        raise ValidationError("Invalid cost. Please enter a valid number.")
    return value


def parse_date_of_birth(raw: str) -> date:
    if not raw.strip():
        raise ValidationError("Date of Birth cannot be empty")
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        raise ValidationError("Invalid date of birth. Use YYYY-MM-DD.") from None


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    parse: Parser
    format: Formatter = format_text
    editable: bool = True


def read_only_field(name: str, label: str) -> FieldSpec:
    def _reject(_raw: str) -> Any:
        raise ValidationError(f"{label} cannot be edited")

    return FieldSpec(name=name, label=label, parse=_reject, editable=False)


@dataclass(frozen=True)
class RecordKind:
    """How the engine reads, searches and edits one entity type.

    ``title`` is used in sentence-initial messages ("Patient updated
    successfully!"); ``singular``/``plural`` in counts and prompts.
    ``search_terms`` receives the record and the patient-name lookup so
    records owned by a patient can be found by the patient's name.
    """

    entity: str
    title: str
    singular: str
    plural: str
    fields: tuple[FieldSpec, ...]
    search_terms: Callable[[Any, Mapping[int, str]], Iterable[Any]]
    list_columns: tuple[str, ...]
    uses_patient_names: bool = False

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def record_id(self, record: Any) -> int:
        return int(record.id)

    def projection(self, record: Any, patient_names: Mapping[int, str] | None = None) -> str:
        terms = self.search_terms(record, patient_names or {})
        return "\n".join(format_text(term).lower() for term in terms)

    def field_index(self, name: str) -> int:
        for index, spec in enumerate(self.fields):
            if spec.name == name:
                return index
        raise KeyError(name)

    def format_field(self, record: Any, index: int) -> str:
        spec = self.fields[index]
        return spec.format(getattr(record, spec.name))

    def with_field(self, record: Any, index: int, value: Any) -> Any:
        spec = self.fields[index]
        return record.model_copy(update={spec.name: value})

    def column_values(self, record: Any) -> list[str]:
        return [self.fields[self.field_index(name)].format(getattr(record, name)) for name in self.list_columns]

    def count_label(self, count: int) -> str:
        return f"{count} {self.singular if count == 1 else self.plural}"
