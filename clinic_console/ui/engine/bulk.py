from __future__ import annotations

import logging

from clinic_console.application.errors import AppError, ValidationError
from clinic_console.application.services.storage import RecordStorage
from clinic_console.ui.engine.confirmation import ConfirmationGate
from clinic_console.ui.engine.notice import TransientNotice
from clinic_console.ui.engine.record_kind import RecordKind
from clinic_console.ui.engine.selector import SearchableSelector

logger = logging.getLogger(__name__)


class BulkSelectionSet:
    """Ordered marks over the selector's filtered view, deleted in one pass.

    Any filter change (new query or refetched records) drops the marks.
    Deletion runs in mark order and stops at the first failure; rows
    already deleted stay deleted.
    """

    def __init__(
        self,
        kind: RecordKind,
        storage: RecordStorage,
        selector: SearchableSelector,
        gate: ConfirmationGate,
        notice: TransientNotice,
    ) -> None:
        self.kind = kind
        self.storage = storage
        self.selector = selector
        self.gate = gate
        self.notice = notice
        self.marks: list[int] = []
        selector.on_filter_change(self.clear)

    def __len__(self) -> int:
        return len(self.marks)

    def is_marked(self, record_id: int) -> bool:
        return record_id in self.marks

    def clear(self) -> None:
        self.marks.clear()

    def toggle(self, record_id: int) -> None:
        if record_id in self.marks:
            self.marks.remove(record_id)
        else:
            self.marks.append(record_id)

    def toggle_current(self) -> None:
        current = self.selector.current()
        if current is not None:
            self.toggle(self.kind.record_id(current))

    def select_all_or_clear(self) -> None:
        visible = [self.kind.record_id(record) for record in self.selector.filtered]
        if all(record_id in self.marks for record_id in visible):
            self.marks.clear()
        else:
            self.marks = visible

    def submit(self) -> None:
        if not self.marks:
            self.selector.refresh()
            self.clear()
            raise ValidationError(f"No {self.kind.plural} selected for deletion.")
        count = self.kind.count_label(len(self.marks))
        self.gate.request(f"Are you sure you want to delete {count}?", self._delete_marked)

    def mark_current_and_submit(self) -> None:
        current = self.selector.current()
        if current is None:
            return
        record_id = self.kind.record_id(current)
        if record_id not in self.marks:
            self.marks.append(record_id)
        self.submit()

    def _delete_marked(self) -> None:
        deleted = 0
        failed = False
        for record_id in list(self.marks):
            try:
                self.storage.delete(record_id)
            except AppError as exc:
                logger.warning("Bulk delete of %s %s failed: %s", self.kind.entity, record_id, exc)
                failed = True
                break
            deleted += 1
        if failed:
            self.notice.error(f"Error during deletion. {self.kind.count_label(deleted)} deleted successfully.")
        else:
            self.notice.success(f"{self.kind.count_label(deleted)} deleted successfully!")
        self.clear()
        self.selector.refresh()
