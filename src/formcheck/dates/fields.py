"""Validation of prefixed date fields in a submitted form.

A date field is entered as three inputs named ``{prefix}-day``,
``{prefix}-month`` and ``{prefix}-year``.  The helpers here pull those inputs
out of an arbitrary mapping, validate them and collect :class:`FieldError`
entries that a web layer can render as an error summary, each linking to the
offending input via ``href``.

Nothing here renders, redirects or stores anything.  Callers decide what to
do with the errors.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from formcheck.utils.logging import get_logger

from .validation import (
    DateComponents,
    DateErrorKind,
    DateValidationResult,
    is_after,
    validate_date_components,
)

__all__ = [
    "DateFieldConfig",
    "DateFieldResult",
    "DateRangeConfig",
    "DateRangeResult",
    "FieldError",
    "extract_date_components",
    "validate_date_field",
    "validate_date_range",
]

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class FieldError:
    """A single error message and the anchor of the field it refers to."""

    text: str
    href: str
    kind: DateErrorKind | None = field(default=None, compare=False)


@dataclass(slots=True, frozen=True)
class DateFieldConfig:
    """Describe one day/month/year group in a form."""

    prefix: str
    field_name: str
    field_id: str
    required: bool = True

    @property
    def href(self) -> str:
        return f"#{self.field_id}"


@dataclass(slots=True, frozen=True)
class DateRangeConfig:
    """A start/end pair of date fields."""

    start_field: DateFieldConfig
    end_field: DateFieldConfig
    validate_range: bool = True


@dataclass(slots=True)
class DateFieldResult:
    """Outcome of validating a single date field."""

    components: DateComponents
    date: dt.date | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(slots=True)
class DateRangeResult:
    """Outcome of validating a start/end pair of date fields."""

    start_components: DateComponents
    end_components: DateComponents
    start: dt.date | None = None
    end: dt.date | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _as_text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def extract_date_components(form: Mapping[str, Any], prefix: str) -> DateComponents:
    """Read ``{prefix}-day``, ``{prefix}-month`` and ``{prefix}-year`` from ``form``.

    Missing or empty values become ``""``; other non-string values are
    converted with :func:`str` and left for validation to judge.
    """

    return DateComponents(
        day=_as_text(form.get(f"{prefix}-day")),
        month=_as_text(form.get(f"{prefix}-month")),
        year=_as_text(form.get(f"{prefix}-year")),
    )


def _check(
    components: DateComponents, config: DateFieldConfig
) -> tuple[DateValidationResult | None, list[FieldError]]:
    if not config.required and components.is_empty:
        return None, []
    result = validate_date_components(components, config.field_name)
    if result.is_valid:
        return result, []
    assert result.error is not None
    log.debug("rejected %s: %s", config.prefix, result.kind)
    return result, [FieldError(text=result.error, href=config.href, kind=result.kind)]


def validate_date_field(form: Mapping[str, Any], config: DateFieldConfig) -> DateFieldResult:
    """Validate the single date field described by ``config``.

    An optional field left completely blank is accepted with ``date`` unset.
    """

    components = extract_date_components(form, config.prefix)
    result, errors = _check(components, config)
    return DateFieldResult(
        components=components,
        date=result.date if result is not None else None,
        errors=errors,
    )


def validate_date_range(form: Mapping[str, Any], config: DateRangeConfig) -> DateRangeResult:
    """Validate a start/end pair and, optionally, their ordering.

    Errors for both fields are reported together.  The ordering check only
    runs when both dates are present and valid; it requires the end date to
    fall strictly after the start date and reports against the end field.
    """

    start_cfg, end_cfg = config.start_field, config.end_field
    start_components = extract_date_components(form, start_cfg.prefix)
    end_components = extract_date_components(form, end_cfg.prefix)

    start_result, errors = _check(start_components, start_cfg)
    end_result, end_errors = _check(end_components, end_cfg)
    errors.extend(end_errors)

    start = start_result.date if start_result is not None else None
    end = end_result.date if end_result is not None else None

    if config.validate_range and start is not None and end is not None:
        if not is_after(start, end):
            errors.append(
                FieldError(
                    text=f"{end_cfg.field_name} must be after {start_cfg.field_name}",
                    href=end_cfg.href,
                    kind=DateErrorKind.RANGE_VIOLATION,
                )
            )

    return DateRangeResult(
        start_components=start_components,
        end_components=end_components,
        start=start,
        end=end,
        errors=errors,
    )
