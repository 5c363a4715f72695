"""Generation and validation of PNC reference codes."""

from .codec import (
    ALPHABET,
    SERIAL_LENGTH,
    PncCode,
    PncGenerator,
    calc_check_char,
    compact,
    generate_long,
    generate_short,
    is_valid,
    split,
    validate,
    validate_format,
)
from .seed import rng_for

__all__ = [
    "ALPHABET",
    "SERIAL_LENGTH",
    "PncCode",
    "PncGenerator",
    "calc_check_char",
    "compact",
    "generate_long",
    "generate_short",
    "is_valid",
    "rng_for",
    "split",
    "validate",
    "validate_format",
]
