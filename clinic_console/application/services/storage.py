"""Storage contract the workflow engine talks to.

Each entity service binds the contract to one table, so the engine never
passes an entity name around: it holds the service for the kind it edits.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import date
from typing import Any, Protocol

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from clinic_console.application.dto.schedule_dto import ShiftAssignmentResponse
from clinic_console.application.errors import StorageError, ValidationError
from clinic_console.domain.constants import ShiftKind


class RecordStorage(Protocol):
    def list_all(self) -> list[Any]: ...

    def get_by_id(self, record_id: int) -> Any: ...

    def create(self, request: Any) -> int: ...

    def update(self, record: Any) -> None: ...

    def delete(self, record_id: int) -> None: ...


class ScheduleStorage(Protocol):
    def assign_shift(self, staff_id: int, shift_date: date, shift_kind: ShiftKind) -> None: ...

    def list_assignments(self, staff_id: int) -> list[ShiftAssignmentResponse]: ...


class PatientNameLookup(Protocol):
    def patient_names(self) -> dict[int, str]: ...


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logging.getLogger(__name__).exception("Storage call failed: %s", action)
        raise StorageError(str(exc.__cause__ or exc)) from exc


def validate_request(model: type[BaseModel], payload: dict[str, Any]) -> Any:
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(_first_error_message(exc.errors())) from exc


def _first_error_message(errors: Sequence[Any]) -> str:
    if not errors:
        return "Invalid input"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    label = loc.replace("_", " ").capitalize() if loc else "Value"
    if first.get("type") in {"string_too_short", "missing"}:
        return f"{label} cannot be empty"
    return f"{label}: {first.get('msg', 'invalid value')}"
