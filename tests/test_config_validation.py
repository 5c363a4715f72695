from pathlib import Path

import pytest
from pydantic import ValidationError

from formcheck.config import load_config
from formcheck.utils.errors import ConfigError


def test_override_merges_with_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("dates:\n  end_label: finish date\npnc:\n  default_form: short\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.dates.end_label == "finish date"
    assert cfg.dates.start_label == "start date"
    assert cfg.pnc.default_form == "short"
    assert cfg.pnc.max_attempts == 5


def test_unknown_key_rejected(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown: true\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


@pytest.mark.parametrize(
    "body",
    [
        "pnc:\n  max_attempts: 0\n",
        "pnc:\n  default_form: medium\n",
        "logging:\n  level: LOUD\n",
    ],
)
def test_invalid_values_rejected(tmp_path: Path, body: str) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text(body)
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_non_mapping_rejected(tmp_path: Path) -> None:
    cfg_file = tmp_path / "list.yml"
    cfg_file.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config(cfg_file, env={})


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("")
    assert load_config(cfg_file, env={}) == load_config(env={})
