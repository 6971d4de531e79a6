"""Date arithmetic for the shift calendar.

Navigation wraps inside the month that holds the selected date: stepping past
either end never rolls into the neighbouring month. The six month panels form
a window anchored at the current month.
"""
from __future__ import annotations

from datetime import date, timedelta
from enum import StrEnum

MONTH_WINDOW = 6
_ANCHOR_STEP = timedelta(days=32)


class Direction(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def days_in_month(year: int, month: int) -> int:
    first = date(year, month, 1)
    if month == 12:
        next_first = date(year + 1, 1, 1)
    else:
        next_first = date(year, month + 1, 1)
    return next_first.toordinal() - first.toordinal()


def month_anchors(today: date, count: int = MONTH_WINDOW) -> list[date]:
    """First day of each month in the window that starts at ``today``'s month."""
    current = today.replace(day=1)
    anchors = [current]
    for _ in range(count - 1):
        stepped = current + _ANCHOR_STEP
        current = stepped.replace(day=1)
        anchors.append(current)
    return anchors


def focused_month_for(selected: date, anchors: list[date]) -> int:
    for index, anchor in enumerate(anchors):
        if (anchor.year, anchor.month) == (selected.year, selected.month):
            return index
    return 0


def navigate_date(current: date, direction: Direction | str) -> date:
    direction = Direction(direction)
    last_day = days_in_month(current.year, current.month)
    day = current.day
    if direction is Direction.LEFT:
        new_day = day - 1 if day > 1 else last_day
    elif direction is Direction.RIGHT:
        new_day = day + 1 if day < last_day else 1
    elif direction is Direction.UP:
        new_day = day - 7 if day > 7 else last_day - day
    else:
        new_day = day + 7 if day + 7 <= last_day else day + 7 - last_day
    return current.replace(day=new_day)
