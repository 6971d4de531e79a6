from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import Generic, TypeVar

from clinic_console.ui.engine.keys import Key, KeyEvent

T = TypeVar("T")

SEARCH_KEYS = ("/", "s", "S")


class SelectorMode(StrEnum):
    BROWSING = "browsing"
    SEARCHING = "searching"


class SearchableSelector(Generic[T]):
    """Filtered list with a circular cursor.

    ``filtered`` is always the subsequence of ``all`` whose projection
    contains the lowercased query. The cursor is ``None`` exactly when
    ``filtered`` is empty.
    """

    def __init__(
        self,
        projection: Callable[[T], str],
        source: Callable[[], Sequence[T]] | None = None,
        records: Sequence[T] = (),
    ) -> None:
        self.projection = projection
        self.source = source
        self.all: list[T] = list(records)
        self.filtered: list[T] = []
        self.query = ""
        self.cursor: int | None = None
        self.mode = SelectorMode.BROWSING
        self._listeners: list[Callable[[], None]] = []
        self._refilter()

    @property
    def searching(self) -> bool:
        return self.mode is SelectorMode.SEARCHING

    def on_filter_change(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def refresh(self) -> None:
        if self.source is None:
            return
        self.set_records(self.source())

    def set_records(self, records: Sequence[T]) -> None:
        self.all = list(records)
        self._refilter()

    def set_query(self, query: str) -> None:
        self.query = query.lower()
        self._refilter()

    def _refilter(self) -> None:
        if not self.query:
            self.filtered = list(self.all)
        else:
            self.filtered = [item for item in self.all if self.query in self.projection(item).lower()]
        self._clamp_cursor()
        for callback in self._listeners:
            callback()

    def _clamp_cursor(self) -> None:
        if not self.filtered:
            self.cursor = None
        elif self.cursor is None or self.cursor >= len(self.filtered):
            self.cursor = 0

    def select(self, index: int) -> None:
        if 0 <= index < len(self.filtered):
            self.cursor = index

    def move_next(self) -> None:
        if not self.filtered:
            return
        self.cursor = 0 if self.cursor is None else (self.cursor + 1) % len(self.filtered)

    def move_previous(self) -> None:
        if not self.filtered:
            return
        self.cursor = 0 if self.cursor is None else (self.cursor - 1) % len(self.filtered)

    def current(self) -> T | None:
        if self.cursor is None:
            return None
        return self.filtered[self.cursor]

    def start_search(self) -> None:
        self.mode = SelectorMode.SEARCHING

    def push_char(self, char: str) -> None:
        self.set_query(self.query + char)

    def pop_char(self) -> None:
        if self.query:
            self.set_query(self.query[:-1])

    def finish_search(self) -> bool:
        if not self.filtered:
            return False
        self.mode = SelectorMode.BROWSING
        self.cursor = 0
        return True

    def cancel_search(self) -> None:
        self.mode = SelectorMode.BROWSING
        self.set_query("")
        if self.filtered:
            self.cursor = 0

    def handle_key(self, event: KeyEvent) -> bool:
        """Apply list/search keys; returns False for keys the caller should handle."""
        if self.mode is SelectorMode.SEARCHING:
            if event.is_text:
                self.push_char(event.char)
            elif event.key is Key.BACKSPACE:
                self.pop_char()
            elif event.key in (Key.ENTER, Key.DOWN):
                self.finish_search()
            elif event.key is Key.ESC:
                self.cancel_search()
            else:
                return False
            return True
        if event.is_char(*SEARCH_KEYS):
            self.start_search()
        elif event.key is Key.UP:
            self.move_previous()
        elif event.key is Key.DOWN:
            self.move_next()
        else:
            return False
        return True
