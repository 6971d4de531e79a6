from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from clinic_console.application.errors import StorageError, ValidationError
from clinic_console.application.services.storage import RecordStorage
from clinic_console.ui.engine.confirmation import ConfirmationGate
from clinic_console.ui.engine.keys import Key, KeyEvent
from clinic_console.ui.engine.notice import TransientNotice
from clinic_console.ui.engine.record_kind import RecordKind
from clinic_console.ui.engine.selector import SearchableSelector

logger = logging.getLogger(__name__)


class EditMode(StrEnum):
    NAVIGATING = "navigating"
    EDITING = "editing"


@dataclass
class EditSession:
    record: Any
    field_index: int = 0
    buffer: str = ""
    mode: EditMode = EditMode.NAVIGATING


class RecordEditor:
    """Field-by-field editor over one loaded record.

    Field edits stay local to the session until a confirmed save; only the
    gate's "Yes" reaches ``storage.update``.
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
        self.session: EditSession | None = None

    @property
    def is_open(self) -> bool:
        return self.session is not None

    @property
    def editing(self) -> bool:
        return self.session is not None and self.session.mode is EditMode.EDITING

    def load(self, record_id: int) -> None:
        record = self.storage.get_by_id(record_id)
        self.session = EditSession(record=record, buffer=self.kind.format_field(record, 0))
        logger.debug("Loaded %s %s for editing", self.kind.entity, record_id)

    def load_typed(self, raw: str) -> None:
        try:
            record_id = int(raw.strip())
        except ValueError:
            raise ValidationError(f"Invalid {self.kind.title} ID format.") from None
        self.load(record_id)

    def load_selected(self) -> None:
        current = self.selector.current()
        if current is None:
            raise ValidationError(f"No {self.kind.singular} selected")
        self.load(self.kind.record_id(current))

    def close(self) -> None:
        self.session = None

    def _require_session(self) -> EditSession:
        if self.session is None:
            raise ValidationError(f"No {self.kind.singular} selected")
        return self.session

    def move_field(self, step: int) -> None:
        session = self._require_session()
        if session.mode is EditMode.EDITING:
            return
        index = min(max(session.field_index + step, 0), self.kind.field_count - 1)
        session.field_index = index
        session.buffer = self.kind.format_field(session.record, index)

    def begin_edit(self) -> None:
        session = self._require_session()
        spec = self.kind.fields[session.field_index]
        if not spec.editable:
            raise ValidationError(f"{spec.label} cannot be edited")
        session.buffer = self.kind.format_field(session.record, session.field_index)
        session.mode = EditMode.EDITING

    def push_char(self, char: str) -> None:
        session = self._require_session()
        if session.mode is EditMode.EDITING:
            session.buffer += char

    def pop_char(self) -> None:
        session = self._require_session()
        if session.mode is EditMode.EDITING:
            session.buffer = session.buffer[:-1]

    def commit_field(self) -> None:
        session = self._require_session()
        spec = self.kind.fields[session.field_index]
        # a parse failure leaves mode and buffer as typed
        value = spec.parse(session.buffer)
        session.record = self.kind.with_field(session.record, session.field_index, value)
        session.buffer = self.kind.format_field(session.record, session.field_index)
        session.mode = EditMode.NAVIGATING

    def discard_edit(self) -> None:
        session = self._require_session()
        session.buffer = self.kind.format_field(session.record, session.field_index)
        session.mode = EditMode.NAVIGATING

    def request_save(self) -> None:
        self._require_session()
        self.gate.request(f"Are you sure you want to update this {self.kind.singular}?", self._save)

    def _save(self) -> None:
        session = self._require_session()
        try:
            self.storage.update(session.record)
        except StorageError as exc:
            self.notice.error(f"Database error: {exc}")
            return
        self.notice.success(f"{self.kind.title} updated successfully!")
        self.selector.refresh()

    def handle_key(self, event: KeyEvent) -> bool:
        session = self.session
        if session is None:
            return False
        if session.mode is EditMode.EDITING:
            if event.is_text:
                self.push_char(event.char)
            elif event.key is Key.BACKSPACE:
                self.pop_char()
            elif event.key is Key.ENTER:
                self.commit_field()
            elif event.key is Key.ESC:
                self.discard_edit()
            else:
                return False
            return True
        if event.is_save:
            self.request_save()
        elif event.key is Key.UP:
            self.move_field(-1)
        elif event.key is Key.DOWN:
            self.move_field(1)
        elif event.key is Key.ENTER or event.is_char("e", "E"):
            self.begin_edit()
        elif event.key is Key.ESC:
            self.close()
        else:
            return False
        return True
