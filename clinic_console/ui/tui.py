"""Curses front end: main menu, key translation and the redraw loop."""
from __future__ import annotations

import curses
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from clinic_console.config import settings
from clinic_console.container import Container
from clinic_console.ui.engine.keys import Key, KeyEvent
from clinic_console.ui.kinds import INVOICE_KIND, MEDICAL_RECORD_KIND, PATIENT_KIND, STAFF_KIND
from clinic_console.ui.render import Line, LineStyle, render
from clinic_console.ui.screens.assign_shift_screen import AssignShiftScreen
from clinic_console.ui.screens.base import Screen, ScreenSignal
from clinic_console.ui.screens.browse_screen import BrowseScreen
from clinic_console.ui.screens.delete_screen import DeleteScreen
from clinic_console.ui.screens.update_screen import UpdateScreen

logger = logging.getLogger(__name__)

CTRL_S_CODE = 19

_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BTAB: Key.BACKTAB,
}

_CONTROL_CHARS = {
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\t": Key.TAB,
    "\x1b": Key.ESC,
    "\x7f": Key.BACKSPACE,
    "\b": Key.BACKSPACE,
}


def translate_key(raw: str | int) -> KeyEvent | None:
    """Map a ``get_wch`` result to a key event; None for keys the engine ignores."""
    if isinstance(raw, int):
        key = _SPECIAL_KEYS.get(raw)
        return KeyEvent(key) if key else None
    if raw in _CONTROL_CHARS:
        return KeyEvent(_CONTROL_CHARS[raw])
    if ord(raw) == CTRL_S_CODE:
        return KeyEvent(Key.CHAR, "s", ctrl=True)
    if not raw.isprintable():
        return None
    return KeyEvent.of(raw)


@dataclass(frozen=True)
class MenuEntry:
    label: str
    factory: Callable[[], Screen]


def build_menu(container: Container) -> list[MenuEntry]:
    patients = container.patient_service
    staff = container.staff_service
    records = container.medical_record_service
    invoices = container.invoice_service
    return [
        MenuEntry("List Patients", lambda: BrowseScreen(PATIENT_KIND, patients)),
        MenuEntry("Update Patient", lambda: UpdateScreen(PATIENT_KIND, patients)),
        MenuEntry("Delete Patients", lambda: DeleteScreen(PATIENT_KIND, patients)),
        MenuEntry("List Staff", lambda: BrowseScreen(STAFF_KIND, staff)),
        MenuEntry("Update Staff", lambda: UpdateScreen(STAFF_KIND, staff)),
        MenuEntry("Delete Staff", lambda: DeleteScreen(STAFF_KIND, staff)),
        MenuEntry("Assign Shift", lambda: AssignShiftScreen(staff, container.schedule_service)),
        MenuEntry("Retrieve Medical Records", lambda: BrowseScreen(MEDICAL_RECORD_KIND, records)),
        MenuEntry("Update Medical Record", lambda: UpdateScreen(MEDICAL_RECORD_KIND, records)),
        MenuEntry("Delete Medical Records", lambda: DeleteScreen(MEDICAL_RECORD_KIND, records)),
        MenuEntry("View Invoices", lambda: BrowseScreen(INVOICE_KIND, invoices)),
        MenuEntry("Update Invoice", lambda: UpdateScreen(INVOICE_KIND, invoices)),
        MenuEntry("Delete Invoices", lambda: DeleteScreen(INVOICE_KIND, invoices)),
    ]


class ConsoleApp:
    """Main menu plus at most one active screen."""

    def __init__(self, menu: list[MenuEntry]) -> None:
        self.menu = menu
        self.cursor = 0
        self.screen: Screen | None = None
        self.running = True

    def open(self, index: int) -> None:
        entry = self.menu[index]
        logger.info("Opening screen: %s", entry.label)
        self.screen = entry.factory()
        self.screen.enter()

    def handle_key(self, event: KeyEvent) -> None:
        if self.screen is not None:
            if self.screen.handle_key(event) is ScreenSignal.BACK:
                self.screen = None
            return
        if event.key is Key.UP:
            self.cursor = (self.cursor - 1) % len(self.menu)
        elif event.key is Key.DOWN:
            self.cursor = (self.cursor + 1) % len(self.menu)
        elif event.key is Key.ENTER:
            self.open(self.cursor)
        elif event.key is Key.ESC or event.is_char("q", "Q"):
            self.running = False

    def tick(self) -> None:
        if self.screen is not None:
            self.screen.tick()

    def frame(self) -> list[Line]:
        if self.screen is not None:
            return render(self.screen)
        lines = [Line("Hospital Management", LineStyle.HEADER), Line("")]
        for index, entry in enumerate(self.menu):
            selected = index == self.cursor
            lines.append(Line(f"{'>' if selected else ' '} {entry.label}", LineStyle.SELECTED if selected else LineStyle.NORMAL))
        return lines + [Line(""), Line("Up/Down move | Enter open | q quit", LineStyle.HINT)]


def _style_attrs() -> dict[LineStyle, int]:
    attrs = {
        LineStyle.NORMAL: curses.A_NORMAL,
        LineStyle.HEADER: curses.A_BOLD,
        LineStyle.SELECTED: curses.A_REVERSE,
        LineStyle.MARKED: curses.A_BOLD,
        LineStyle.HINT: curses.A_DIM,
        LineStyle.SUCCESS: curses.A_BOLD,
        LineStyle.ERROR: curses.A_BOLD,
    }
    if curses.has_colors():
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_GREEN, -1)
        curses.init_pair(2, curses.COLOR_RED, -1)
        curses.init_pair(3, curses.COLOR_CYAN, -1)
        attrs[LineStyle.SUCCESS] |= curses.color_pair(1)
        attrs[LineStyle.ERROR] |= curses.color_pair(2)
        attrs[LineStyle.HEADER] |= curses.color_pair(3)
    return attrs


def _draw(stdscr, lines: list[Line], attrs: dict[LineStyle, int]) -> None:
    stdscr.erase()
    height, width = stdscr.getmaxyx()
    for row, line in enumerate(lines[: max(0, height - 1)]):
        try:
            stdscr.addstr(row, 0, line.text[: max(0, width - 1)], attrs[line.style])
        except curses.error:
            pass
    stdscr.refresh()


def _loop(stdscr, app: ConsoleApp) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    stdscr.timeout(settings.tick_ms)
    attrs = _style_attrs()
    while app.running:
        app.tick()
        _draw(stdscr, app.frame(), attrs)
        try:
            raw = stdscr.get_wch()
        except curses.error:
            continue
        event = translate_key(raw)
        if event is not None:
            app.handle_key(event)


def run_tui(container: Container) -> None:
    os.environ.setdefault("ESCDELAY", "25")
    app = ConsoleApp(build_menu(container))
    curses.wrapper(_loop, app)
