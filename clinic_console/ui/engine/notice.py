from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import StrEnum

from clinic_console.application.errors import AppError, UserCancelled
from clinic_console.config import settings

logger = logging.getLogger(__name__)


class NoticeKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


class TransientNotice:
    """Single success/error message that expires after a fixed timeout.

    There is no queue: setting a message of either kind replaces the current
    one and restarts the timer. ``check_timeout`` is polled once per tick.
    """

    def __init__(
        self,
        timeout_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeout_seconds = settings.notice_timeout_seconds if timeout_seconds is None else timeout_seconds
        self._clock = clock
        self.kind: NoticeKind | None = None
        self.message: str | None = None
        self.set_at: float | None = None

    @property
    def active(self) -> bool:
        return self.message is not None

    @property
    def is_error(self) -> bool:
        return self.kind is NoticeKind.ERROR

    @property
    def is_success(self) -> bool:
        return self.kind is NoticeKind.SUCCESS

    def _set(self, kind: NoticeKind, message: str) -> None:
        self.kind = kind
        self.message = message
        self.set_at = self._clock()

    def success(self, message: str) -> None:
        logger.info("%s", message)
        self._set(NoticeKind.SUCCESS, message)

    def error(self, message: str) -> None:
        logger.warning("%s", message)
        self._set(NoticeKind.ERROR, message)

    def report(self, exc: AppError) -> None:
        if isinstance(exc, UserCancelled):
            return
        self.error(str(exc))

    def clear(self) -> None:
        self.kind = None
        self.message = None
        self.set_at = None

    def check_timeout(self) -> bool:
        if self.set_at is None:
            return False
        if self._clock() - self.set_at > self.timeout_seconds:
            self.clear()
            return True
        return False
