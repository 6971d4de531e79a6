from __future__ import annotations

import curses

from clinic_console.ui.engine import keys
from clinic_console.ui.engine.keys import Key, KeyEvent
from clinic_console.ui.screens.base import Screen, ScreenSignal
from clinic_console.ui.tui import ConsoleApp, MenuEntry, translate_key


def test_translate_control_and_special_keys() -> None:
    assert translate_key("\n") == keys.ENTER
    assert translate_key("\x1b") == keys.ESC
    assert translate_key("\x7f") == keys.BACKSPACE
    assert translate_key("\t") == keys.TAB
    assert translate_key(curses.KEY_UP) == keys.UP
    assert translate_key(curses.KEY_BTAB) == keys.BACKTAB
    assert translate_key("\x13") == keys.CTRL_S
    assert translate_key("\x01") is None
    assert translate_key(curses.KEY_RESIZE) is None


def test_translate_printable_characters() -> None:
    assert translate_key("a") == KeyEvent.of("a")
    assert translate_key("é") == KeyEvent(Key.CHAR, "é")


class _EchoScreen(Screen):
    title = "Echo"

    def __init__(self) -> None:
        super().__init__()
        self.seen: list[KeyEvent] = []
        self.entered = False

    def on_enter(self) -> None:
        self.entered = True

    def on_key(self, event: KeyEvent) -> ScreenSignal | None:
        self.seen.append(event)
        return ScreenSignal.BACK if event.key is Key.ESC else None


def test_console_app_menu_and_screen_lifecycle() -> None:
    screens: list[_EchoScreen] = []

    def _factory() -> _EchoScreen:
        screens.append(_EchoScreen())
        return screens[-1]

    app = ConsoleApp([MenuEntry("First", _factory), MenuEntry("Second", _factory)])

    app.handle_key(keys.UP)
    assert app.cursor == 1
    app.handle_key(keys.ENTER)
    assert app.screen is screens[0]
    assert screens[0].entered

    app.handle_key(KeyEvent.of("q"))
    assert app.running
    assert screens[0].seen == [KeyEvent.of("q")]

    app.handle_key(keys.ESC)
    assert app.screen is None
    app.handle_key(KeyEvent.of("q"))
    assert not app.running


def test_menu_frame_highlights_cursor() -> None:
    app = ConsoleApp([MenuEntry("List Patients", _EchoScreen), MenuEntry("Assign Shift", _EchoScreen)])
    app.handle_key(keys.DOWN)

    texts = [line.text for line in app.frame()]

    assert "> Assign Shift" in texts
    assert "  List Patients" in texts
