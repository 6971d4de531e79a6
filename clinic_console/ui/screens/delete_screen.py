from __future__ import annotations

from typing import Any

from clinic_console.ui.engine.bulk import BulkSelectionSet
from clinic_console.ui.engine.keys import Key, KeyEvent
from clinic_console.ui.screens.base import RecordScreen, ScreenSignal


class DeleteScreen(RecordScreen):
    action = "Delete"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.marks = BulkSelectionSet(self.kind, self.storage, self.selector, self.gate, self.notice)

    def on_key(self, event: KeyEvent) -> ScreenSignal | None:
        if self.selector.handle_key(event):
            return None
        if event.is_char(" "):
            self.marks.toggle_current()
        elif event.is_char("a", "A"):
            self.marks.select_all_or_clear()
        elif event.is_char("b", "B"):
            self.marks.submit()
        elif event.key is Key.ENTER:
            self.marks.mark_current_and_submit()
        elif event.is_char("r", "R"):
            self.refresh()
        elif event.key is Key.ESC:
            return ScreenSignal.BACK
        return None
