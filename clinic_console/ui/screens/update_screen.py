from __future__ import annotations

from typing import Any

from clinic_console.ui.engine.editor import RecordEditor
from clinic_console.ui.engine.keys import Key, KeyEvent
from clinic_console.ui.screens.base import RecordScreen, ScreenSignal


class UpdateScreen(RecordScreen):
    """Select a record by typed id or from the list, then edit it field by field."""

    action = "Update"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.id_input = ""
        self.editor = RecordEditor(self.kind, self.storage, self.selector, self.gate, self.notice)

    def on_key(self, event: KeyEvent) -> ScreenSignal | None:
        if self.editor.is_open:
            self.editor.handle_key(event)
            return None
        if self.selector.handle_key(event):
            return None
        if event.is_text:
            self.id_input += event.char
        elif event.key is Key.BACKSPACE:
            self.id_input = self.id_input[:-1]
        elif event.key is Key.ENTER:
            self._load()
        elif event.key is Key.ESC:
            return ScreenSignal.BACK
        return None

    def _load(self) -> None:
        if self.id_input:
            self.editor.load_typed(self.id_input)
            self.id_input = ""
        elif self.selector.filtered:
            self.editor.load_selected()
