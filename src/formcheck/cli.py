"""Typer-based command line interface for date and PNC checks.

Dates are given as a single argument with day, month and year separated by
``/``, ``-``, ``.`` or whitespace, e.g. ``27/Mar/2024`` or ``"27 3 2024"``.

Exit codes
----------
0 success
4 configuration error
5 date input rejected
6 PNC rejected
"""

from __future__ import annotations

import logging
import os
import re
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from stdnum.exceptions import InvalidChecksum, InvalidFormat

from .config import ConfigModel, load_config
from .dates.fields import (
    DateFieldConfig,
    DateRangeConfig,
    FieldError,
    validate_date_field,
    validate_date_range,
)
from .dates.formatting import format_date_with_month_name, interval
from .pnc.codec import PncGenerator, validate, validate_format
from .utils.errors import ConfigError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="formcheck",
    help="Check entered dates and generate or validate PNC codes.",
)

log = get_logger(__name__)

EXIT_CONFIG = 4
EXIT_DATE = 5
EXIT_PNC = 6

_RX_DATE_SEP = re.compile(r"[\s/.\-]+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _setup(config_path: Path | None, verbose: bool) -> ConfigModel:
    """Load configuration and install the package log handler."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, ConfigError, yaml.YAMLError, OSError) as exc:
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])
    configure_logging(logging.DEBUG if verbose else cfg.logging.level)
    log.debug("loaded config from %s", config_path or "defaults")
    return cfg


def _date_fields(prefix: str, text: str) -> dict[str, str]:
    """Split free text into the ``{prefix}-day/month/year`` form fields."""

    parts = _RX_DATE_SEP.split(text.strip(), maxsplit=2) if text.strip() else []
    parts += [""] * (3 - len(parts))
    day, month, year = parts
    return {f"{prefix}-day": day, f"{prefix}-month": month, f"{prefix}-year": year}


def _report(errors: list[FieldError]) -> None:
    for error in errors:
        typer.echo(error.text, err=True)
    _safe_exit(EXIT_DATE)


@app.callback()
def main() -> None:
    """Entry point for the formcheck command group."""
    pass


@app.command("interval")
def interval_cmd(
    start: str = typer.Option(..., "--start", help="Start date, e.g. 1/Jan/2024"),  # noqa: B008
    end: str = typer.Option(..., "--end", help="End date, e.g. 31/12/2024"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Validate a start and end date and describe the span between them."""

    cfg = _setup(config_path, verbose)
    form = {**_date_fields("start", start), **_date_fields("end", end)}
    config = DateRangeConfig(
        start_field=DateFieldConfig("start", cfg.dates.start_label, "start-date"),
        end_field=DateFieldConfig("end", cfg.dates.end_label, "end-date"),
        validate_range=cfg.dates.validate_range,
    )
    result = validate_date_range(form, config)
    if not result.is_valid:
        _report(result.errors)
    assert result.start is not None and result.end is not None

    span = interval(result.start, result.end)
    typer.echo(f"{cfg.dates.start_label.capitalize()}: {format_date_with_month_name(result.start)}")
    typer.echo(f"{cfg.dates.end_label.capitalize()}: {format_date_with_month_name(result.end)}")
    typer.echo(f"Total days: {span.days} {'day' if span.days == 1 else 'days'} (inclusive)")
    typer.echo(f"Interval: {span.text}")


@app.command("check-date")
def check_date(
    value: str = typer.Option(..., "--date", help="Date to check, e.g. 29/Feb/2024"),  # noqa: B008
    label: str = typer.Option("date", "--label", help="Field label used in messages"),  # noqa: B008
) -> None:
    """Validate a single date and print it in long form."""

    result = validate_date_field(
        _date_fields("date", value), DateFieldConfig("date", label, "date")
    )
    if not result.is_valid:
        _report(result.errors)
    assert result.date is not None
    typer.echo(format_date_with_month_name(result.date))


@app.command("pnc-generate")
def pnc_generate(
    short: Optional[bool] = typer.Option(  # noqa: B008
        None, "--short/--long", help="Code form; defaults to pnc.default_form"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of codes"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Print freshly generated PNC codes, one per line."""

    cfg = _setup(config_path, verbose)
    form = cfg.pnc.default_form if short is None else ("short" if short else "long")
    generator = PncGenerator.from_config(cfg)
    for _ in range(count):
        typer.echo(generator.generate(form))


@app.command("pnc-validate")
def pnc_validate(
    code: str = typer.Argument(..., help="PNC to check, e.g. 2024/0012345K"),  # noqa: B008
    checksum: bool = typer.Option(  # noqa: B008
        True, "--checksum/--no-checksum", help="Also verify the check letter"
    ),
) -> None:
    """Check a PNC and print it in compact form when valid."""

    if not checksum:
        if not validate_format(code):
            _safe_exit(EXIT_PNC, f"{code}: not a valid PNC format")
        typer.echo(code)
        return
    try:
        typer.echo(validate(code))
    except InvalidFormat:
        _safe_exit(EXIT_PNC, f"{code}: not a valid PNC format")
    except InvalidChecksum:
        _safe_exit(EXIT_PNC, f"{code}: check letter does not match")
