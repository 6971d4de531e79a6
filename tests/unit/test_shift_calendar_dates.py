from __future__ import annotations

from datetime import date

import pytest

from clinic_console.domain.calendar import (
    Direction,
    days_in_month,
    focused_month_for,
    month_anchors,
    navigate_date,
)


@pytest.mark.parametrize(
    ("year", "month", "expected"),
    [(2024, 2, 29), (2023, 2, 28), (2024, 12, 31), (2024, 4, 30), (2100, 2, 28), (2000, 2, 29)],
)
def test_days_in_month(year: int, month: int, expected: int) -> None:
    assert days_in_month(year, month) == expected


def test_navigate_right_wraps_within_month() -> None:
    assert navigate_date(date(2023, 2, 28), Direction.RIGHT) == date(2023, 2, 1)
    assert navigate_date(date(2024, 2, 28), Direction.RIGHT) == date(2024, 2, 29)


def test_navigate_left_wraps_to_last_day() -> None:
    assert navigate_date(date(2024, 2, 1), "left") == date(2024, 2, 29)
    assert navigate_date(date(2024, 3, 15), "left") == date(2024, 3, 14)


def test_navigate_up_wraps_to_days_in_month_minus_day() -> None:
    assert navigate_date(date(2024, 1, 20), Direction.UP) == date(2024, 1, 13)
    assert navigate_date(date(2024, 1, 3), Direction.UP) == date(2024, 1, 28)
    assert navigate_date(date(2023, 2, 7), Direction.UP) == date(2023, 2, 21)


def test_navigate_down_wraps_past_month_end() -> None:
    assert navigate_date(date(2024, 1, 20), Direction.DOWN) == date(2024, 1, 27)
    assert navigate_date(date(2024, 1, 28), Direction.DOWN) == date(2024, 1, 4)
    assert navigate_date(date(2023, 2, 22), Direction.DOWN) == date(2023, 2, 1)


def test_navigation_never_leaves_the_month() -> None:
    current = date(2024, 4, 30)
    for direction in [Direction.RIGHT, Direction.DOWN, Direction.UP, Direction.LEFT] * 20:
        current = navigate_date(current, direction)
        assert (current.year, current.month) == (2024, 4)


def test_month_anchors_start_at_current_month_and_roll_over_year() -> None:
    anchors = month_anchors(date(2024, 10, 31))

    assert anchors == [
        date(2024, 10, 1),
        date(2024, 11, 1),
        date(2024, 12, 1),
        date(2025, 1, 1),
        date(2025, 2, 1),
        date(2025, 3, 1),
    ]


def test_focused_month_for_selected_date() -> None:
    anchors = month_anchors(date(2024, 1, 15))

    assert focused_month_for(date(2024, 3, 9), anchors) == 2
    assert focused_month_for(date(2024, 1, 1), anchors) == 0
    assert focused_month_for(date(2025, 1, 1), anchors) == 0
