"""Plain-text frames for the curses runner.

Every screen is rendered to a list of ``Line`` values; the runner only maps
``LineStyle`` to curses attributes and writes the text.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any

from clinic_console.domain.calendar import days_in_month
from clinic_console.domain.constants import SHIFT_ORDER
from clinic_console.ui.engine.confirmation import ConfirmationGate, GateChoice
from clinic_console.ui.engine.editor import EditMode
from clinic_console.ui.engine.notice import TransientNotice
from clinic_console.ui.engine.selector import SearchableSelector
from clinic_console.ui.engine.shift_calendar import AssignState, ShiftCalendar
from clinic_console.ui.screens.assign_shift_screen import AssignShiftScreen
from clinic_console.ui.screens.base import RecordScreen, Screen
from clinic_console.ui.screens.browse_screen import BrowseScreen
from clinic_console.ui.screens.delete_screen import DeleteScreen
from clinic_console.ui.screens.update_screen import UpdateScreen


class LineStyle(StrEnum):
    NORMAL = "normal"
    HEADER = "header"
    SELECTED = "selected"
    MARKED = "marked"
    HINT = "hint"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Line:
    text: str
    style: LineStyle = LineStyle.NORMAL


_LIST_HINTS = "/ search | Up/Down move | Esc back"


def render(screen: Screen) -> list[Line]:
    lines = [Line(screen.title, LineStyle.HEADER), Line("")]
    if isinstance(screen, AssignShiftScreen):
        lines += render_calendar(screen.calendar)
    elif isinstance(screen, UpdateScreen):
        lines += _render_update(screen)
    elif isinstance(screen, DeleteScreen):
        lines += _render_delete(screen)
    elif isinstance(screen, BrowseScreen):
        lines += _render_browse(screen)
    lines += render_gate(screen.gate)
    lines += render_notice(screen.notice)
    return lines


def render_notice(notice: TransientNotice) -> list[Line]:
    if not notice.active:
        return []
    style = LineStyle.ERROR if notice.is_error else LineStyle.SUCCESS
    return [Line(""), Line(notice.message or "", style)]


def render_gate(gate: ConfirmationGate) -> list[Line]:
    if not gate.is_open:
        return []
    yes = "[Yes]" if gate.choice is GateChoice.YES else " Yes "
    no = "[No]" if gate.choice is GateChoice.NO else " No "
    return [Line(""), Line(gate.message, LineStyle.HEADER), Line(f"  {yes}   {no}", LineStyle.SELECTED)]


def render_search(selector: SearchableSelector) -> Line:
    marker = "_" if selector.searching else ""
    return Line(f"Search: {selector.query}{marker}", LineStyle.SELECTED if selector.searching else LineStyle.NORMAL)


def _rows(screen: RecordScreen, marks: Any = None) -> list[Line]:
    kind = screen.kind
    selector = screen.selector
    if not selector.filtered:
        return [Line(f"No {kind.plural} found", LineStyle.HINT)]
    lines = [Line("    " + " | ".join(kind.list_columns), LineStyle.HEADER)]
    for index, record in enumerate(selector.filtered):
        prefix = ">" if index == selector.cursor else " "
        mark = ""
        if marks is not None:
            mark = "[x]" if marks.is_marked(kind.record_id(record)) else "[ ]"
        text = f"{prefix} {mark} " + " | ".join(kind.column_values(record))
        if index == selector.cursor:
            style = LineStyle.SELECTED
        elif mark == "[x]":
            style = LineStyle.MARKED
        else:
            style = LineStyle.NORMAL
        lines.append(Line(text, style))
    return lines


def _render_browse(screen: BrowseScreen) -> list[Line]:
    if screen.details is not None:
        lines = [Line(f"{label}: {value}") for label, value in screen.details_lines()]
        return lines + [Line(""), Line("Enter/Esc back", LineStyle.HINT)]
    lines = [render_search(screen.selector), Line("")]
    lines += _rows(screen)
    return lines + [Line(""), Line(f"Enter details | r refresh | {_LIST_HINTS}", LineStyle.HINT)]


def _render_update(screen: UpdateScreen) -> list[Line]:
    session = screen.editor.session
    if session is None:
        lines = [Line(f"{screen.kind.title} ID: {screen.id_input}"), render_search(screen.selector), Line("")]
        lines += _rows(screen)
        return lines + [Line(""), Line(f"Type an ID or pick a row, Enter load | {_LIST_HINTS}", LineStyle.HINT)]
    lines = []
    for index, spec in enumerate(screen.kind.fields):
        active = index == session.field_index
        value = session.buffer if active else screen.kind.format_field(session.record, index)
        cursor = "_" if active and session.mode is EditMode.EDITING else ""
        lines.append(Line(f"{'>' if active else ' '} {spec.label}: {value}{cursor}", LineStyle.SELECTED if active else LineStyle.NORMAL))
    if session.mode is EditMode.EDITING:
        hint = "Enter apply | Esc discard"
    else:
        hint = "Up/Down field | Enter/e edit | Ctrl+S save | Esc back"
    return lines + [Line(""), Line(hint, LineStyle.HINT)]


def _render_delete(screen: DeleteScreen) -> list[Line]:
    lines = [render_search(screen.selector), Line(f"Marked: {len(screen.marks)}"), Line("")]
    lines += _rows(screen, marks=screen.marks)
    hint = f"Space mark | a all/none | b delete marked | Enter delete row | r refresh | {_LIST_HINTS}"
    return lines + [Line(""), Line(hint, LineStyle.HINT)]


def render_month(first: date, selected: date | None, focused: bool) -> list[Line]:
    header = first.strftime("%B %Y")
    lines = [Line(f"{header}{' *' if focused else ''}", LineStyle.HEADER), Line(" Mo  Tu  We  Th  Fr  Sa  Su ")]
    week = ["    "] * first.weekday()
    for day in range(1, days_in_month(first.year, first.month) + 1):
        current = first.replace(day=day)
        week.append(f"[{day:>2}]" if current == selected else f" {day:>2} ")
        if len(week) == 7:
            lines.append(Line("".join(week)))
            week = []
    if week:
        lines.append(Line("".join(week)))
    return lines


def render_calendar(calendar: ShiftCalendar) -> list[Line]:
    state = calendar.state
    if state is AssignState.SELECTING_STAFF:
        lines = [render_search(calendar.staff), Line("")]
        if not calendar.staff.filtered:
            lines.append(Line("No staff members found", LineStyle.HINT))
        for index, staff in enumerate(calendar.staff.filtered):
            selected = index == calendar.staff.cursor
            text = f"{'>' if selected else ' '} {staff.id} | {staff.name} | {staff.role} | {staff.phone_number}"
            lines.append(Line(text, LineStyle.SELECTED if selected else LineStyle.NORMAL))
        return lines + [Line(""), Line(f"Enter choose | v view shifts | {_LIST_HINTS}", LineStyle.HINT)]
    staff_name = calendar.selected_staff.name if calendar.selected_staff else ""
    if state is AssignState.VIEWING_ASSIGNMENTS:
        lines = [Line(f"Shifts for {staff_name}", LineStyle.HEADER)]
        if not calendar.assignments:
            lines.append(Line("No shifts assigned", LineStyle.HINT))
        for assignment in calendar.assignments:
            lines.append(Line(f"{assignment.shift_date.isoformat()}  {assignment.shift_kind.label}"))
        return lines + [Line(""), Line("Esc back", LineStyle.HINT)]
    if state is AssignState.SELECTING_DATE:
        lines = [Line(f"Staff: {staff_name}")]
        for index, anchor in enumerate(calendar.anchors):
            lines.append(Line(""))
            lines += render_month(anchor, calendar.selected_date, index == calendar.focused_month)
        return lines + [Line(""), Line("Arrows move | Tab next month | Enter choose | Esc back", LineStyle.HINT)]
    lines = [Line(f"Staff: {staff_name}"), Line(f"Date: {calendar.selected_date}"), Line("")]
    for shift in SHIFT_ORDER:
        selected = shift is calendar.selected_shift
        lines.append(Line(f"{'>' if selected else ' '} {shift.label}", LineStyle.SELECTED if selected else LineStyle.NORMAL))
    return lines + [Line(""), Line("Up/Down shift | Enter assign | Esc back", LineStyle.HINT)]
