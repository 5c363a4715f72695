import logging
import random
from datetime import date
from typing import cast

import pytest

from formcheck.config import ConfigModel, load_config
from formcheck.pnc import codec
from formcheck.pnc.codec import PncGenerator, calc_check_char, split, validate_format
from formcheck.pnc.seed import rng_for


class ScriptedRandom:
    """Random source returning pre-scripted draws."""

    def __init__(self, values: list[int]) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        return self.values.pop(0)

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.values.pop(0)


def scripted(values: list[int]) -> tuple[ScriptedRandom, random.Random]:
    rng = ScriptedRandom(values)
    return rng, cast(random.Random, rng)


def fixed_today() -> date:
    return date(2024, 5, 1)


def never(code: str) -> bool:
    return False


# ---------------------------------------------------------------------------
# Success path
# ---------------------------------------------------------------------------


def test_long_form() -> None:
    rng, source = scripted([12345])
    gen = PncGenerator(rng=source, today=fixed_today)
    assert gen.long() == "2024/0012345H"
    assert rng.calls == [(0, 9_999_999)]


def test_short_form() -> None:
    rng, source = scripted([12345])
    gen = PncGenerator(rng=source, today=fixed_today)
    assert gen.short() == "24/12345H"
    assert rng.calls == [(1, 999_999)]


def test_short_year_keeps_leading_zero() -> None:
    gen = PncGenerator(rng=scripted([1])[1], today=lambda: date(2005, 1, 1))
    code = gen.short()
    assert code.startswith("05/1")
    assert code[-1] == calc_check_char("05", "1")


def test_retry_redraws_serial() -> None:
    rng, source = scripted([1, 12345])
    gen = PncGenerator(
        rng=source, today=fixed_today, validator=lambda c: not c.startswith("2024/0000001")
    )
    assert gen.long() == "2024/0012345H"
    assert len(rng.calls) == 2


# ---------------------------------------------------------------------------
# Fallback path
# ---------------------------------------------------------------------------


def test_long_fallback_returns_last_candidate(caplog: pytest.LogCaptureFixture) -> None:
    rng, source = scripted([1, 2, 3, 4, 12345])
    gen = PncGenerator(rng=source, today=fixed_today, validator=never)
    with caplog.at_level(logging.WARNING, logger="formcheck"):
        assert gen.long() == "2024/0012345H"
    assert len(rng.calls) == 5
    assert "rejected after 5 attempts" in caplog.text


def test_short_fallback_pads_serial() -> None:
    rng, source = scripted([1, 2, 3, 4, 12345])
    gen = PncGenerator(rng=source, today=fixed_today, validator=never)
    assert gen.short() == "24/0012345H"
    assert not rng.values


def test_max_attempts_bounds_the_loop() -> None:
    rng, source = scripted([7, 8])
    gen = PncGenerator(rng=source, today=fixed_today, validator=never, max_attempts=2)
    assert gen.long() == f"2024/0000008{calc_check_char('24', '8')}"
    with pytest.raises(ValueError):
        PncGenerator(max_attempts=0)


# ---------------------------------------------------------------------------
# Properties of generated codes
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("form", ["long", "short"])
def test_generated_codes_validate(form: codec.Form) -> None:
    gen = PncGenerator(rng=random.Random(1234))
    for _ in range(200):
        code = gen.generate(form)
        assert validate_format(code)
        parts = split(code)
        assert calc_check_char(parts.short_year, parts.serial) == parts.check_char


def test_module_level_generators() -> None:
    long_code = codec.generate_long(today=fixed_today)
    short_code = codec.generate_short(today=fixed_today)
    assert long_code.startswith("2024/") and len(long_code) == 13
    assert short_code.startswith("24/")
    assert codec.is_valid(long_code)
    assert codec.is_valid(short_code)


def test_unknown_form() -> None:
    with pytest.raises(ValueError):
        PncGenerator().generate("medium")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Seeding from configuration
# ---------------------------------------------------------------------------


def cfg_with_secret(secret: str) -> ConfigModel:
    return load_config(env={"FORMCHECK_PNC_SEED": secret})


def test_seeded_generators_repeat() -> None:
    a = PncGenerator.from_config(cfg_with_secret("alpha"), today=fixed_today)
    b = PncGenerator.from_config(cfg_with_secret("alpha"), today=fixed_today)
    assert [a.long() for _ in range(3)] == [b.long() for _ in range(3)]


def test_secret_sensitivity() -> None:
    r1 = rng_for("pnc", cfg=cfg_with_secret("alpha"))
    r2 = rng_for("pnc", cfg=cfg_with_secret("beta"))
    assert [r1.random() for _ in range(3)] != [r2.random() for _ in range(3)]


def test_from_config_uses_max_attempts() -> None:
    cfg = load_config(env={})
    cfg.pnc.max_attempts = 3
    assert PncGenerator.from_config(cfg).max_attempts == 3
