"""Typed configuration schema and loader for the formcheck package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, conint

from formcheck.utils.errors import ConfigError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class DateSettings(BaseModel):
    """Labels and checks applied to start/end date pairs."""

    start_label: str
    end_label: str
    validate_range: bool

    model_config = ConfigDict(extra="forbid")


class SeedSettings(BaseModel):
    """Settings for seeding the PNC random stream."""

    secret_env: str
    secret: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class PncSettings(BaseModel):
    """PNC generation settings."""

    max_attempts: conint(ge=1) = 5
    default_form: Literal["long", "short"]
    seed: SeedSettings

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Logging level used by the command line interface."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    dates: DateSettings
    pnc: PncSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < environment
    variable for the PNC seed secret.
    """

    with (
        importlib_resources.files("formcheck.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ConfigError(f"{path}: top-level YAML value must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    secret_env = cfg.pnc.seed.secret_env
    if environ.get(secret_env):
        cfg.pnc.seed.secret = SecretStr(environ[secret_env])

    return cfg


__all__ = [
    "ConfigModel",
    "DateSettings",
    "SeedSettings",
    "PncSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
