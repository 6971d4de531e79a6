from __future__ import annotations


class AppError(RuntimeError):
    """Base application-level error."""


class NotFoundError(AppError):
    """Requested id does not resolve to a stored row."""


class ValidationError(AppError):
    """Input validation failure."""


class StorageError(AppError):
    """Storage call failed."""


class UserCancelled(AppError):
    """User backed out of an edit or a confirmation; not reported as an error."""
