"""Validation of free-text day/month/year components.

:func:`validate_date_components` turns raw :class:`DateComponents` into a
:class:`DateValidationResult`.  Checks run in a fixed order and the first
failure wins:

1. any component empty
2. day not an integer
3. month neither a number 1-12 nor a three-letter abbreviation
4. year not an integer
5. components do not name a real calendar date

Failures are returned as data and never raised.  The resulting date is a plain
:class:`datetime.date`, so leap years follow the proleptic Gregorian rule of the
standard library rather than a separate rule.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum

from formcheck.utils.errors import DateInputError

from .months import parse_int, parse_month

__all__ = [
    "DateComponents",
    "DateErrorKind",
    "DateValidationResult",
    "is_after",
    "validate_date_components",
]

MONTH_HINT = "(e.g., Jan, Feb, or 1, 2)"


class DateErrorKind(Enum):
    """Reasons a date entry can be rejected."""

    MISSING_FIELD = "missing_field"
    NON_NUMERIC_DAY = "non_numeric_day"
    INVALID_MONTH = "invalid_month"
    NON_NUMERIC_YEAR = "non_numeric_year"
    UNREAL_DATE = "unreal_date"
    RANGE_VIOLATION = "range_violation"


@dataclass(slots=True, frozen=True)
class DateComponents:
    """Raw, unvalidated day/month/year text as entered by a user."""

    day: str = ""
    month: str = ""
    year: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.day or self.month or self.year)


@dataclass(slots=True, frozen=True)
class DateValidationResult:
    """Outcome of validating one date entry.

    Exactly one of ``date`` or ``error`` is set.  ``kind`` accompanies
    ``error`` and classifies the failure.
    """

    date: dt.date | None = None
    error: str | None = None
    kind: DateErrorKind | None = None

    def __post_init__(self) -> None:
        if (self.date is None) == (self.error is None):
            raise ValueError("exactly one of date or error must be set")
        if (self.error is None) != (self.kind is None):
            raise ValueError("error and kind must be set together")

    @classmethod
    def valid(cls, value: dt.date) -> DateValidationResult:
        return cls(date=value)

    @classmethod
    def invalid(cls, kind: DateErrorKind, message: str) -> DateValidationResult:
        return cls(error=message, kind=kind)

    @property
    def is_valid(self) -> bool:
        return self.date is not None

    def unwrap(self) -> dt.date:
        """Return the verified date or raise :class:`DateInputError`."""

        if self.date is None:
            assert self.error is not None and self.kind is not None
            raise DateInputError(self.error, self.kind)
        return self.date


def _real_date(year: int, month_index: int, day: int) -> dt.date | None:
    # date() refuses overflowing days instead of rolling them into the next
    # month, so a successful construction always round-trips.
    try:
        value = dt.date(year, month_index + 1, day)
    except (ValueError, OverflowError):
        return None
    if (value.year, value.month - 1, value.day) != (year, month_index, day):
        return None
    return value


def validate_date_components(components: DateComponents, field_label: str) -> DateValidationResult:
    """Validate ``components`` and return the date or a message for ``field_label``."""

    day_text, month_text, year_text = components.day, components.month, components.year

    if not day_text or not month_text or not year_text:
        return DateValidationResult.invalid(DateErrorKind.MISSING_FIELD, f"Enter a {field_label}")

    day = parse_int(day_text)
    if day is None:
        return DateValidationResult.invalid(
            DateErrorKind.NON_NUMERIC_DAY, f"{field_label} day must be a number"
        )

    month_index = parse_month(month_text)
    if month_index is None:
        return DateValidationResult.invalid(
            DateErrorKind.INVALID_MONTH,
            f"{field_label} month must be a valid month {MONTH_HINT}",
        )

    year = parse_int(year_text)
    if year is None:
        return DateValidationResult.invalid(
            DateErrorKind.NON_NUMERIC_YEAR, f"{field_label} year must be a number"
        )

    value = _real_date(year, month_index, day)
    if value is None:
        return DateValidationResult.invalid(
            DateErrorKind.UNREAL_DATE, f"{field_label} must be a real date"
        )

    return DateValidationResult.valid(value)


def is_after(start: dt.date, end: dt.date) -> bool:
    """Return ``True`` when ``end`` falls strictly after ``start``."""

    return end > start
