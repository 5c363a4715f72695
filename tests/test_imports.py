"""Smoke tests for package import and version."""

import formcheck


def test_import_package() -> None:
    assert isinstance(formcheck, object)


def test_version() -> None:
    assert formcheck.__version__ == "0.1.0"
