from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any

from clinic_console.application.errors import AppError
from clinic_console.ui.engine.confirmation import ConfirmationGate
from clinic_console.ui.engine.keys import KeyEvent
from clinic_console.ui.engine.notice import TransientNotice
from clinic_console.ui.engine.record_kind import RecordKind
from clinic_console.ui.engine.selector import SearchableSelector

logger = logging.getLogger(__name__)


class ScreenSignal(StrEnum):
    BACK = "back"


class Screen:
    """One interactive screen; owns its notice and confirmation gate.

    Application errors raised while handling a key become error notices, so
    nothing from the storage layer reaches the event loop.
    """

    title = ""

    def __init__(
        self,
        notice: TransientNotice | None = None,
        gate: ConfirmationGate | None = None,
    ) -> None:
        self.notice = notice or TransientNotice()
        self.gate = gate or ConfirmationGate()

    def enter(self) -> None:
        try:
            self.on_enter()
        except AppError as exc:
            self.notice.report(exc)

    def on_enter(self) -> None:
        pass

    def handle_key(self, event: KeyEvent) -> ScreenSignal | None:
        try:
            if self.gate.is_open:
                self.gate.handle_key(event)
                return None
            return self.on_key(event)
        except AppError as exc:
            self.notice.report(exc)
            return None

    def on_key(self, event: KeyEvent) -> ScreenSignal | None:
        raise NotImplementedError

    def tick(self) -> None:
        self.notice.check_timeout()


class RecordScreen(Screen):
    """Screen over a list of one record kind, fetched from its storage."""

    action = ""

    def __init__(
        self,
        kind: RecordKind,
        storage: Any,
        notice: TransientNotice | None = None,
        gate: ConfirmationGate | None = None,
    ) -> None:
        super().__init__(notice=notice, gate=gate)
        self.kind = kind
        self.storage = storage
        self.patient_names: dict[int, str] = {}
        self.selector: SearchableSelector[Any] = SearchableSelector(self._project, source=self._fetch)

    @property
    def title(self) -> str:  # type: ignore[override]
        return f"{self.action} {self.kind.title}".strip()

    def _project(self, record: Any) -> str:
        return self.kind.projection(record, self.patient_names)

    def _fetch(self) -> list[Any]:
        if self.kind.uses_patient_names:
            self.patient_names = self.storage.patient_names()
        return self.storage.list_all()

    def on_enter(self) -> None:
        self.selector.refresh()

    def refresh(self) -> None:
        self.selector.refresh()
        logger.debug("Refreshed %s list: %d rows", self.kind.entity, len(self.selector.all))
