"""PNC (reference code) check character, validation and generation.

A PNC is a year prefix, a slash, a numeric serial and one check letter::

    2024/0012345K     long form, 4-digit year, serial padded to 7 digits
    24/12345K         short form, 2-digit year, 1 to 7 digit serial

The check letter is taken from a 23 letter alphabet that leaves out easily
confused letters such as ``I``, ``O`` and ``S``.  Its index is the integer
formed by the 2-digit year followed by the serial padded to 7 digits, modulo
23.  Long-form codes compute it from the last two digits of the year.

The module follows the ``python-stdnum`` layout: :func:`compact`,
:func:`calc_check_char`, :func:`validate` (raising
:class:`stdnum.exceptions.ValidationError` subclasses) and :func:`is_valid`.
:func:`validate_format` is the lighter shape-only check used while generating.
"""

from __future__ import annotations

import datetime as dt
import random
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from stdnum.exceptions import InvalidChecksum, InvalidFormat, ValidationError
from stdnum.util import clean

from formcheck.utils.logging import get_logger

from .seed import rng_for

if TYPE_CHECKING:  # pragma: no cover
    from formcheck.config import ConfigModel

__all__ = [
    "ALPHABET",
    "LONG_SERIAL_LIMIT",
    "MAX_ATTEMPTS",
    "SERIAL_LENGTH",
    "SHORT_SERIAL_MAX",
    "PncCode",
    "PncGenerator",
    "calc_check_char",
    "compact",
    "generate_long",
    "generate_short",
    "is_valid",
    "split",
    "validate",
    "validate_format",
]

log = get_logger(__name__)

ALPHABET = "ZABCDEFGHJKLMNPQRTUVWXY"
SERIAL_LENGTH = 7
MAX_ATTEMPTS = 5
LONG_SERIAL_LIMIT = 9_999_999
SHORT_SERIAL_MAX = 999_999

_RX_CODE = re.compile(
    rf"(?P<year>[0-9]{{2}}|[0-9]{{4}})/(?P<serial>[0-9]{{1,{SERIAL_LENGTH}}})(?P<check>[{ALPHABET}])"
)
_RX_FORMAT = re.compile(
    rf"(?:[0-9]{{2}}/[0-9]{{1,{SERIAL_LENGTH}}}|[0-9]{{4}}/[0-9]{{{SERIAL_LENGTH}}})[{ALPHABET}]"
)

Form = Literal["long", "short"]


@dataclass(slots=True, frozen=True)
class PncCode:
    """The parts of a PNC as they appear in its text form."""

    year_digits: str
    serial: str
    check_char: str

    def __str__(self) -> str:
        return f"{self.year_digits}/{self.serial}{self.check_char}"

    @property
    def short_year(self) -> str:
        """The two year digits the check character is computed from."""

        return self.year_digits[-2:]


def _pad_serial(serial: str) -> str:
    return serial.zfill(SERIAL_LENGTH)


def calc_check_char(year_digits: str, serial: str) -> str:
    """Return the check letter for a 2-digit year and a serial.

    The serial is padded to seven digits before the index is computed, so
    ``"42"`` and ``"0000042"`` yield the same letter.
    """

    index = int(year_digits + _pad_serial(serial)) % len(ALPHABET)
    return ALPHABET[index]


def compact(code: str) -> str:
    """Convert ``code`` to its minimal representation.

    Whitespace is removed and the check letter upper-cased.
    """

    return clean(code, " \t").strip().upper()


def validate_format(code: str) -> bool:
    """Check the shape and character set of ``code`` without the checksum.

    Accepts ``YY/N{1,7}L`` and ``YYYY/NNNNNNNL`` where ``L`` is a letter of
    :data:`ALPHABET`.  Input is not normalized first.
    """

    return _RX_FORMAT.fullmatch(code) is not None


def split(code: str) -> PncCode:
    """Split ``code`` into its year, serial and check letter parts."""

    code = compact(code)
    if not validate_format(code):
        raise InvalidFormat()
    m = _RX_CODE.fullmatch(code)
    assert m is not None
    return PncCode(year_digits=m["year"], serial=m["serial"], check_char=m["check"])


def validate(code: str) -> str:
    """Check that ``code`` is a well formed PNC with a matching check letter.

    Returns the compacted code.  Raises :class:`~stdnum.exceptions.InvalidFormat`
    for a malformed code and :class:`~stdnum.exceptions.InvalidChecksum` when
    the check letter does not match the year and serial.
    """

    parts = split(code)
    if calc_check_char(parts.short_year, parts.serial) != parts.check_char:
        raise InvalidChecksum()
    return str(parts)


def is_valid(code: str) -> bool:
    """Check that ``code`` is a valid PNC, checksum included."""

    try:
        return bool(validate(code))
    except ValidationError:
        return False


class PncGenerator:
    """Draw fresh PNC codes for the current year.

    Each code is checked with ``validator`` and redrawn up to
    ``max_attempts`` times.  If every attempt is rejected the last candidate is
    returned anyway, so generation never fails.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        today: Callable[[], dt.date] | None = None,
        validator: Callable[[str], bool] = validate_format,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.today: Callable[[], dt.date] = today if today is not None else dt.date.today
        self.validator = validator
        self.max_attempts = max_attempts

    @classmethod
    def from_config(
        cls, cfg: ConfigModel, *, today: Callable[[], dt.date] | None = None
    ) -> PncGenerator:
        """Build a generator honouring ``cfg.pnc`` settings and seed secret."""

        return cls(
            rng=rng_for("pnc", cfg=cfg),
            today=today,
            max_attempts=cfg.pnc.max_attempts,
        )

    def long(self) -> str:
        """Return a ``YYYY/NNNNNNNL`` code."""

        year = f"{self.today().year:04d}"
        short_year = year[-2:]
        candidate = ""
        for attempt in range(1, self.max_attempts + 1):
            serial = _pad_serial(str(self.rng.randrange(0, LONG_SERIAL_LIMIT)))
            candidate = f"{year}/{serial}{calc_check_char(short_year, serial)}"
            if self.validator(candidate):
                log.debug("generated long-form PNC on attempt %d", attempt)
                return candidate
        log.warning(
            "long-form PNC %s rejected after %d attempts; returning it unchecked",
            candidate,
            self.max_attempts,
        )
        return candidate

    def short(self) -> str:
        """Return a ``YY/NL`` code with an unpadded, non-zero serial."""

        short_year = f"{self.today().year % 100:02d}"
        serial = ""
        check = ""
        for attempt in range(1, self.max_attempts + 1):
            serial = str(self.rng.randint(1, SHORT_SERIAL_MAX))
            check = calc_check_char(short_year, serial)
            candidate = f"{short_year}/{serial}{check}"
            if self.validator(candidate):
                log.debug("generated short-form PNC on attempt %d", attempt)
                return candidate
        fallback = f"{short_year}/{_pad_serial(serial)}{check}"
        log.warning(
            "short-form PNC rejected after %d attempts; returning padded %s",
            self.max_attempts,
            fallback,
        )
        return fallback

    def generate(self, form: Form = "long") -> str:
        """Return a code of the requested ``form``."""

        if form == "long":
            return self.long()
        if form == "short":
            return self.short()
        raise ValueError(f"unsupported PNC form: {form}")


def generate_long(
    *, rng: random.Random | None = None, today: Callable[[], dt.date] | None = None
) -> str:
    """Return a fresh long-form PNC for the current year."""

    return PncGenerator(rng=rng, today=today).long()


def generate_short(
    *, rng: random.Random | None = None, today: Callable[[], dt.date] | None = None
) -> str:
    """Return a fresh short-form PNC for the current year."""

    return PncGenerator(rng=rng, today=today).short()
