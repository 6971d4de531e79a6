"""Staff → date → shift assignment workflow over a six-month calendar."""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from enum import StrEnum

from clinic_console.application.dto.schedule_dto import ShiftAssignmentResponse
from clinic_console.application.dto.staff_dto import StaffResponse
from clinic_console.application.errors import AppError, StorageError, ValidationError
from clinic_console.application.services.storage import RecordStorage, ScheduleStorage
from clinic_console.domain.calendar import Direction, focused_month_for, month_anchors, navigate_date
from clinic_console.domain.constants import SHIFT_ORDER, ShiftKind
from clinic_console.ui.engine.confirmation import ConfirmationGate
from clinic_console.ui.engine.keys import Key, KeyEvent
from clinic_console.ui.engine.notice import TransientNotice
from clinic_console.ui.engine.selector import SearchableSelector
from clinic_console.ui.kinds import STAFF_KIND

logger = logging.getLogger(__name__)

_ARROWS = {
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
}


class AssignState(StrEnum):
    SELECTING_STAFF = "selecting_staff"
    SELECTING_DATE = "selecting_date"
    SELECTING_SHIFT = "selecting_shift"
    VIEWING_ASSIGNMENTS = "viewing_assignments"


class ShiftCalendar:
    def __init__(
        self,
        staff_storage: RecordStorage,
        schedule_storage: ScheduleStorage,
        gate: ConfirmationGate,
        notice: TransientNotice,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.staff_storage = staff_storage
        self.schedule_storage = schedule_storage
        self.gate = gate
        self.notice = notice
        self.today = today
        self.staff = SearchableSelector[StaffResponse](STAFF_KIND.projection, source=staff_storage.list_all)
        self.state = AssignState.SELECTING_STAFF
        self.selected_staff: StaffResponse | None = None
        self.selected_date: date | None = None
        self.selected_shift: ShiftKind | None = None
        self.focused_month = 0
        self.assignments: list[ShiftAssignmentResponse] = []

    @property
    def anchors(self) -> list[date]:
        return month_anchors(self.today())

    def refresh_staff(self) -> None:
        self.staff.refresh()

    def reset(self) -> None:
        self.selected_staff = None
        self.selected_date = None
        self.selected_shift = None
        self.assignments = []
        self.focused_month = 0
        self.state = AssignState.SELECTING_STAFF
        self.refresh_staff()

    def select_staff(self) -> None:
        current = self.staff.current()
        if current is None:
            raise ValidationError("No staff selected")
        self.selected_staff = current
        if self.selected_date is None:
            self.selected_date = self.today()
        self.focused_month = 0
        self.state = AssignState.SELECTING_DATE

    def view_assignments(self) -> None:
        current = self.staff.current()
        if current is None:
            raise ValidationError("No staff selected")
        self.selected_staff = current
        try:
            self.assignments = self.schedule_storage.list_assignments(current.id)
        except AppError as exc:
            raise StorageError(f"Failed to load assignments: {exc}") from exc
        self.state = AssignState.VIEWING_ASSIGNMENTS

    def navigate(self, direction: Direction | str) -> None:
        if self.selected_date is None:
            return
        self.selected_date = navigate_date(self.selected_date, direction)
        self.focused_month = focused_month_for(self.selected_date, self.anchors)

    def cycle_month_focus(self) -> None:
        anchors = self.anchors
        self.focused_month = (self.focused_month + 1) % len(anchors)
        self.selected_date = anchors[self.focused_month]

    def choose_date(self) -> None:
        if self.selected_date is None:
            return
        self.selected_shift = ShiftKind.MORNING
        self.state = AssignState.SELECTING_SHIFT

    def cycle_shift(self, step: int) -> None:
        current = self.selected_shift or ShiftKind.MORNING
        index = (SHIFT_ORDER.index(current) + step) % len(SHIFT_ORDER)
        self.selected_shift = SHIFT_ORDER[index]

    def confirmation_message(self) -> str:
        assert self.selected_staff and self.selected_date and self.selected_shift
        shift = self.selected_shift
        return (
            f"Assign {shift.value} ({shift.time_range}) shift to {self.selected_staff.name} "
            f"on {self.selected_date.isoformat()}?"
        )

    def request_assignment(self) -> None:
        if not (self.selected_staff and self.selected_date and self.selected_shift):
            raise ValidationError("Please select staff, date, and shift.")
        self.gate.request(self.confirmation_message(), self._assign)

    def _assign(self) -> None:
        assert self.selected_staff and self.selected_date and self.selected_shift
        staff = self.selected_staff
        try:
            self.schedule_storage.assign_shift(staff.id, self.selected_date, self.selected_shift)
        except StorageError as exc:
            self.notice.error(f"Database error: {exc}")
            return
        logger.info("Assigned %s shift on %s to staff %s", self.selected_shift, self.selected_date, staff.id)
        self.reset()
        self.notice.success(f"Shift assigned to {staff.name} successfully!")

    def back(self) -> bool:
        """Step back one state; False when already at staff selection."""
        if self.state is AssignState.SELECTING_DATE:
            self.state = AssignState.SELECTING_STAFF
        elif self.state is AssignState.SELECTING_SHIFT:
            self.state = AssignState.SELECTING_DATE
        elif self.state is AssignState.VIEWING_ASSIGNMENTS:
            self.state = AssignState.SELECTING_STAFF
        else:
            return False
        return True

    def handle_key(self, event: KeyEvent) -> bool:
        if self.state is AssignState.SELECTING_STAFF:
            if self.staff.handle_key(event):
                return True
            if event.key is Key.ENTER:
                self.select_staff()
            elif event.is_char("v", "V"):
                self.view_assignments()
            else:
                return False
            return True
        if event.key is Key.ESC:
            return self.back()
        if self.state is AssignState.SELECTING_DATE:
            if event.key in _ARROWS:
                self.navigate(_ARROWS[event.key])
            elif event.key is Key.TAB:
                self.cycle_month_focus()
            elif event.key is Key.ENTER:
                self.choose_date()
            else:
                return False
            return True
        if self.state is AssignState.SELECTING_SHIFT:
            if event.key is Key.UP:
                self.cycle_shift(-1)
            elif event.key is Key.DOWN:
                self.cycle_shift(1)
            elif event.key is Key.ENTER:
                self.request_assignment()
            else:
                return False
            return True
        return False
