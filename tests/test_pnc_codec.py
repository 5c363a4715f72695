import pytest
from stdnum.exceptions import InvalidChecksum, InvalidFormat

from formcheck.pnc.codec import (
    ALPHABET,
    PncCode,
    calc_check_char,
    compact,
    is_valid,
    split,
    validate,
    validate_format,
)


def test_alphabet_excludes_confusable_letters() -> None:
    assert len(ALPHABET) == 23
    assert len(set(ALPHABET)) == 23
    for letter in "IOS":
        assert letter not in ALPHABET


def test_check_char_known_values() -> None:
    assert calc_check_char("24", "12345") == "H"
    assert calc_check_char("24", "0000000") == "P"
    assert calc_check_char("25", "1") == "F"


def test_check_char_pads_serial() -> None:
    assert calc_check_char("24", "42") == calc_check_char("24", "0000042")


@pytest.mark.parametrize(
    "code",
    ["2024/0012345H", "24/12345H", "24/1H", "24/0012345H", "1999/9999999Z"],
)
def test_format_accepts(code: str) -> None:
    assert validate_format(code)


@pytest.mark.parametrize(
    "code",
    [
        "2024/12345H",  # long form serial must be 7 digits
        "2024/00123456H",
        "24/12345678H",
        "24/H",
        "2024/0012345I",  # outside the alphabet
        "2024/0012345O",
        "2024/0012345S",
        "2024/0012345h",
        "2024/00123459",
        "202/0012345H",
        "2024-0012345H",
        " 2024/0012345H",
        "",
    ],
)
def test_format_rejects(code: str) -> None:
    assert not validate_format(code)


def test_format_check_ignores_checksum() -> None:
    assert validate_format("2024/0012345Z")
    assert not is_valid("2024/0012345Z")


def test_compact() -> None:
    assert compact(" 2024 / 0012345h ") == "2024/0012345H"


def test_split() -> None:
    assert split("2024/0012345H") == PncCode("2024", "0012345", "H")
    assert split("24/12345H") == PncCode("24", "12345", "H")
    assert str(split("24/12345H")) == "24/12345H"
    assert split("2024/0012345H").short_year == "24"
    with pytest.raises(InvalidFormat):
        split("2024/12345H")


def test_validate() -> None:
    assert validate("2024/0012345H") == "2024/0012345H"
    assert validate("24/12345h") == "24/12345H"
    assert validate("2024/0000000P") == "2024/0000000P"
    with pytest.raises(InvalidChecksum):
        validate("2024/0012345Z")
    with pytest.raises(InvalidFormat):
        validate("not a pnc")


def test_is_valid() -> None:
    assert is_valid("24/12345H")
    assert not is_valid("24/12345J")
    assert not is_valid("24/12345")
