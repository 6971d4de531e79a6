from __future__ import annotations

from clinic_console.application.errors import UserCancelled, ValidationError
from clinic_console.ui.engine.notice import NoticeKind, TransientNotice
from tests.fakes import FakeClock


def test_notice_clears_only_after_timeout_elapses() -> None:
    clock = FakeClock()
    notice = TransientNotice(timeout_seconds=5.0, clock=clock)
    notice.success("Patient updated successfully!")

    clock.advance(5.0)
    assert notice.check_timeout() is False
    assert notice.message == "Patient updated successfully!"

    clock.advance(0.1)
    assert notice.check_timeout() is True
    assert notice.message is None
    assert notice.kind is None


def test_new_notice_replaces_previous_and_restarts_timer() -> None:
    clock = FakeClock()
    notice = TransientNotice(timeout_seconds=5.0, clock=clock)
    notice.success("saved")
    clock.advance(4.0)

    notice.error("Database error: locked")
    clock.advance(4.0)

    assert notice.check_timeout() is False
    assert notice.kind is NoticeKind.ERROR
    assert notice.is_error
    assert notice.message == "Database error: locked"


def test_report_shows_application_errors_but_not_cancellation() -> None:
    notice = TransientNotice(timeout_seconds=5.0, clock=FakeClock())

    notice.report(UserCancelled("cancelled"))
    assert not notice.active

    notice.report(ValidationError("Invalid Patient ID format."))
    assert notice.is_error
    assert notice.message == "Invalid Patient ID format."


def test_check_timeout_without_notice_is_noop() -> None:
    notice = TransientNotice(timeout_seconds=5.0, clock=FakeClock())

    assert notice.check_timeout() is False
