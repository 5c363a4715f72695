"""Month token parsing for day/month/year entry fields.

A month may be typed either as a number between ``1`` and ``12`` or as one of
the twelve English three-letter abbreviations.  Abbreviations are matched
case-insensitively after trimming surrounding whitespace; partial
abbreviations (``"Ja"``) and full names (``"January"``) are rejected.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

__all__ = ["MONTH_ABBREVIATIONS", "parse_int", "parse_month"]

MONTH_ABBREVIATIONS: Mapping[str, int] = MappingProxyType(
    {
        "jan": 0,
        "feb": 1,
        "mar": 2,
        "apr": 3,
        "may": 4,
        "jun": 5,
        "jul": 6,
        "aug": 7,
        "sep": 8,
        "oct": 9,
        "nov": 10,
        "dec": 11,
    }
)

# Leading zeros aside, at most nine digits: enough for any day or year and
# far below the limits of int() and datetime.date.
_RX_INT = re.compile(r"[+-]?0*[0-9]{1,9}")


def parse_int(token: str) -> int | None:
    """Return ``token`` as an integer or ``None`` if it is not one.

    Surrounding whitespace is ignored.  Only ASCII digits with an optional
    sign are accepted, so ``"1e3"``, ``"12abc"``, ``"½"`` and ``"٣"`` all fail.
    Tokens with more than nine significant digits are not treated as numbers.
    """

    stripped = token.strip()
    if not _RX_INT.fullmatch(stripped):
        return None
    return int(stripped)


def parse_month(token: str) -> int | None:
    """Resolve ``token`` to a zero-based month index.

    ``"3"``, ``"Mar"``, ``"mar"`` and ``" MAR "`` all return ``2``.  ``None`` is
    returned for anything else, including out of range numbers.
    """

    number = parse_int(token)
    if number is not None and 1 <= number <= 12:
        return number - 1
    return MONTH_ABBREVIATIONS.get(token.strip().lower())
