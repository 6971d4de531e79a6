from __future__ import annotations

from collections.abc import Callable
from datetime import date

from clinic_console.application.services.storage import RecordStorage, ScheduleStorage
from clinic_console.ui.engine.confirmation import ConfirmationGate
from clinic_console.ui.engine.keys import Key, KeyEvent
from clinic_console.ui.engine.notice import TransientNotice
from clinic_console.ui.engine.shift_calendar import AssignState, ShiftCalendar
from clinic_console.ui.screens.base import Screen, ScreenSignal


class AssignShiftScreen(Screen):
    title = "Assign Shift"

    def __init__(
        self,
        staff_storage: RecordStorage,
        schedule_storage: ScheduleStorage,
        notice: TransientNotice | None = None,
        gate: ConfirmationGate | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        super().__init__(notice=notice, gate=gate)
        self.calendar = ShiftCalendar(staff_storage, schedule_storage, self.gate, self.notice, today=today)

    def on_enter(self) -> None:
        self.calendar.refresh_staff()

    def on_key(self, event: KeyEvent) -> ScreenSignal | None:
        if self.calendar.handle_key(event):
            return None
        if self.calendar.state is AssignState.SELECTING_STAFF and event.key is Key.ESC:
            return ScreenSignal.BACK
        return None
