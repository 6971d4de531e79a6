from __future__ import annotations

from typing import Any

from clinic_console.ui.engine.keys import Key, KeyEvent
from clinic_console.ui.screens.base import RecordScreen, ScreenSignal


class BrowseScreen(RecordScreen):
    """Read-only list with a details view of the current record."""

    action = "View"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.details: Any | None = None

    def details_lines(self) -> list[tuple[str, str]]:
        if self.details is None:
            return []
        return [(spec.label, self.kind.format_field(self.details, index)) for index, spec in enumerate(self.kind.fields)]

    def on_key(self, event: KeyEvent) -> ScreenSignal | None:
        if self.details is not None:
            if event.key in (Key.ENTER, Key.ESC, Key.BACKSPACE):
                self.details = None
            return None
        if self.selector.handle_key(event):
            return None
        if event.key is Key.ENTER:
            self.details = self.selector.current()
        elif event.is_char("r", "R"):
            self.refresh()
        elif event.key is Key.ESC:
            return ScreenSignal.BACK
        return None
