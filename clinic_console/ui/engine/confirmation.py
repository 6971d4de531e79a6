from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from clinic_console.ui.engine.keys import Key, KeyEvent


class GateChoice(IntEnum):
    YES = 0
    NO = 1


@dataclass
class ConfirmationRequest:
    message: str
    action: Callable[[], Any]
    choice: GateChoice = GateChoice.NO


class ConfirmationGate:
    """Yes/No interstitial in front of a mutating action.

    Each ``request`` replaces whatever was pending. Only Enter on "Yes"
    (or the ``y`` shortcut) runs the bound action; errors raised by the
    action reach the caller after the gate has closed.
    """

    def __init__(self) -> None:
        self.pending: ConfirmationRequest | None = None

    @property
    def is_open(self) -> bool:
        return self.pending is not None

    @property
    def message(self) -> str:
        return self.pending.message if self.pending else ""

    @property
    def choice(self) -> GateChoice | None:
        return self.pending.choice if self.pending else None

    def request(self, message: str, action: Callable[[], Any]) -> None:
        self.pending = ConfirmationRequest(message=message, action=action)

    def toggle(self) -> None:
        if self.pending is None:
            return
        self.pending.choice = GateChoice.NO if self.pending.choice is GateChoice.YES else GateChoice.YES

    def cancel(self) -> None:
        self.pending = None

    def submit(self) -> bool:
        pending = self.pending
        if pending is None:
            return False
        self.pending = None
        if pending.choice is not GateChoice.YES:
            return False
        pending.action()
        return True

    def confirm(self) -> bool:
        if self.pending is None:
            return False
        self.pending.choice = GateChoice.YES
        return self.submit()

    def handle_key(self, event: KeyEvent) -> bool:
        if self.pending is None:
            return False
        if event.key in (Key.LEFT, Key.RIGHT):
            self.toggle()
        elif event.key is Key.ENTER:
            self.submit()
        elif event.key is Key.ESC or event.is_char("n", "N"):
            self.cancel()
        elif event.is_char("y", "Y"):
            self.confirm()
        return True
