from __future__ import annotations

from datetime import date

from clinic_console.application.dto.invoice_dto import InvoiceResponse
from clinic_console.application.dto.schedule_dto import ShiftAssignmentResponse
from clinic_console.application.dto.staff_dto import StaffResponse
from clinic_console.application.errors import NotFoundError, StorageError
from clinic_console.domain.constants import ShiftKind, StaffRole


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeStorage:
    """In-memory RecordStorage keyed by ``record.id``."""

    def __init__(self, records=(), names: dict[int, str] | None = None) -> None:
        self.rows = {record.id: record for record in records}
        self.names = names or {}
        self.fail_delete_on: set[int] = set()
        self.fail_update = False
        self.deleted: list[int] = []
        self.updated: list = []
        self.list_calls = 0

    def list_all(self) -> list:
        self.list_calls += 1
        return [self.rows[key] for key in sorted(self.rows)]

    def patient_names(self) -> dict[int, str]:
        return dict(self.names)

    def get_by_id(self, record_id: int):
        if record_id not in self.rows:
            raise NotFoundError(f"Invoice with ID {record_id} doesn't exist")
        return self.rows[record_id]

    def create(self, request) -> int:
        new_id = max(self.rows, default=0) + 1
        self.rows[new_id] = request.model_copy(update={"id": new_id})
        return new_id

    def update(self, record) -> None:
        if self.fail_update:
            raise StorageError("disk I/O error")
        self.updated.append(record)
        self.rows[record.id] = record

    def delete(self, record_id: int) -> None:
        if record_id in self.fail_delete_on:
            raise StorageError(f"cannot delete {record_id}")
        self.deleted.append(record_id)
        self.rows.pop(record_id, None)


class FakeSchedule:
    def __init__(self) -> None:
        self.assigned: list[tuple[int, date, ShiftKind]] = []
        self.fail_list = False

    def assign_shift(self, staff_id: int, shift_date: date, shift_kind: ShiftKind) -> None:
        self.assigned.append((staff_id, shift_date, shift_kind))

    def list_assignments(self, staff_id: int) -> list[ShiftAssignmentResponse]:
        if self.fail_list:
            raise StorageError("database is locked")
        return [
            ShiftAssignmentResponse(id=index + 1, staff_id=sid, shift_date=day, shift_kind=kind)
            for index, (sid, day, kind) in enumerate(self.assigned)
            if sid == staff_id
        ]


def make_invoice(invoice_id: int, patient_id: int = 1, item: str = "Bandage", quantity: int = 2, cost: float = 4.5):
    return InvoiceResponse(id=invoice_id, patient_id=patient_id, item=item, quantity=quantity, cost=cost)


def make_staff(staff_id: int, name: str, role: StaffRole = StaffRole.NURSE) -> StaffResponse:
    return StaffResponse(
        id=staff_id,
        name=name,
        role=role,
        phone_number=f"555-01{staff_id:02d}",
        email=None,
        address="1 Main St",
    )
