from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Key(StrEnum):
    CHAR = "char"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TAB = "tab"
    BACKTAB = "backtab"
    ENTER = "enter"
    ESC = "esc"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""
    ctrl: bool = False

    @classmethod
    def of(cls, char: str, *, ctrl: bool = False) -> KeyEvent:
        return cls(Key.CHAR, char, ctrl)

    @property
    def is_text(self) -> bool:
        return self.key is Key.CHAR and not self.ctrl

    def is_char(self, *chars: str) -> bool:
        return self.is_text and self.char in chars

    @property
    def is_save(self) -> bool:
        return self.key is Key.CHAR and self.ctrl and self.char.lower() == "s"


UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
LEFT = KeyEvent(Key.LEFT)
RIGHT = KeyEvent(Key.RIGHT)
TAB = KeyEvent(Key.TAB)
BACKTAB = KeyEvent(Key.BACKTAB)
ENTER = KeyEvent(Key.ENTER)
ESC = KeyEvent(Key.ESC)
BACKSPACE = KeyEvent(Key.BACKSPACE)
CTRL_S = KeyEvent(Key.CHAR, "s", ctrl=True)
