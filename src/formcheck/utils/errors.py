"""Typed exceptions for date input and configuration errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from formcheck.dates.validation import DateErrorKind


class FormCheckError(ValueError):
    """Base class for formcheck errors."""


class DateInputError(FormCheckError):
    """Raised when rejected date input is unwrapped as if it were valid."""

    def __init__(self, message: str, kind: DateErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class ConfigError(FormCheckError):
    """Raised when configuration cannot be loaded or validated."""
