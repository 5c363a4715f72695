"""Date entry validation and interval formatting."""

from .fields import (
    DateFieldConfig,
    DateFieldResult,
    DateRangeConfig,
    DateRangeResult,
    FieldError,
    extract_date_components,
    validate_date_field,
    validate_date_range,
)
from .formatting import (
    IntervalDescription,
    describe_interval,
    format_date_with_month_name,
    inclusive_days,
    interval,
)
from .months import MONTH_ABBREVIATIONS, parse_month
from .validation import (
    DateComponents,
    DateErrorKind,
    DateValidationResult,
    is_after,
    validate_date_components,
)

__all__ = [
    "MONTH_ABBREVIATIONS",
    "DateComponents",
    "DateErrorKind",
    "DateFieldConfig",
    "DateFieldResult",
    "DateRangeConfig",
    "DateRangeResult",
    "DateValidationResult",
    "FieldError",
    "IntervalDescription",
    "describe_interval",
    "extract_date_components",
    "format_date_with_month_name",
    "inclusive_days",
    "interval",
    "is_after",
    "parse_month",
    "validate_date_components",
    "validate_date_field",
    "validate_date_range",
]
