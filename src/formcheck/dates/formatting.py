"""Human-readable descriptions of the span between two dates.

The span is measured as an inclusive day count and rendered in one of four
tiers: days, weeks, approximate months and approximate years.  Months are a
fixed 30 days and years a fixed 365 days.  This is an accepted approximation,
so spans that cross February or a leap day are not adjusted.

=========== ==================================================
days        rendering
=========== ==================================================
1           ``1 day``
2-6         ``N days``
7-30        ``N weeks`` or ``N weeks and M days``
31-364      ``approximately N months`` (``and M days``)
365+        ``approximately N years`` (``and M months`` or ``and M days``)
=========== ==================================================
"""

from __future__ import annotations

import calendar
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

__all__ = [
    "DAYS_PER_MONTH",
    "DAYS_PER_WEEK",
    "DAYS_PER_YEAR",
    "IntervalDescription",
    "describe_days",
    "describe_interval",
    "format_date_with_month_name",
    "inclusive_days",
    "interval",
]

DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365


@dataclass(slots=True, frozen=True)
class IntervalDescription:
    """Inclusive day count with its rendered description."""

    days: int
    text: str


def format_date_with_month_name(d: date) -> str:
    """Format ``d`` as ``"5 December 2025"``."""

    return f"{d.day} {calendar.month_name[d.month]} {d.year}"


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days from ``start`` to ``end`` counting both ends.

    Callers are expected to pass ``end >= start``; otherwise the result is zero
    or negative.
    """

    return (end - start).days + 1


def _count(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def _days(d: int) -> str:
    return _count(d, "day")


def _weeks(d: int) -> str:
    weeks, rem = divmod(d, DAYS_PER_WEEK)
    if rem == 0:
        return _count(weeks, "week")
    return f"{_count(weeks, 'week')} and {_count(rem, 'day')}"


def _months(d: int) -> str:
    months, rem = divmod(d, DAYS_PER_MONTH)
    if rem == 0:
        return f"approximately {_count(months, 'month')}"
    return f"approximately {_count(months, 'month')} and {_count(rem, 'day')}"


def _years(d: int) -> str:
    years, residual = divmod(d, DAYS_PER_YEAR)
    if residual == 0:
        return f"approximately {_count(years, 'year')}"
    residual_months = residual // DAYS_PER_MONTH
    if residual_months > 0:
        return f"approximately {_count(years, 'year')} and {_count(residual_months, 'month')}"
    return f"approximately {_count(years, 'year')} and {_count(residual, 'day')}"


# Ordered tiers: the first whose exclusive upper bound exceeds the day count
# renders it.  ``None`` closes the table.
_TIERS: tuple[tuple[int | None, Callable[[int], str]], ...] = (
    (DAYS_PER_WEEK, _days),
    (31, _weeks),
    (DAYS_PER_YEAR, _months),
    (None, _years),
)


def describe_days(days: int) -> str:
    """Render an inclusive day count using the tier table."""

    for upper, render in _TIERS:
        if upper is None or days < upper:
            return render(days)
    raise AssertionError("unreachable")  # pragma: no cover


def describe_interval(start: date, end: date) -> str:
    """Describe the inclusive span between ``start`` and ``end``.

    >>> describe_interval(date(2024, 1, 1), date(2024, 1, 17))
    '2 weeks and 3 days'
    """

    return describe_days(inclusive_days(start, end))


def interval(start: date, end: date) -> IntervalDescription:
    """Return both the inclusive day count and its description."""

    days = inclusive_days(start, end)
    return IntervalDescription(days=days, text=describe_days(days))
