"""Tests for CoreVersion."""

import pytest

from projectversion import CoreVersion, InvalidVersionError


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1.2.3", (1, 2, 3)),
        ("0.0.0", (0, 0, 0)),
        ("  10.20.30  ", (10, 20, 30)),
        ("01.002.0003", (1, 2, 3)),
        ("12345678901234567890.0.1", (12345678901234567890, 0, 1)),
    ],
)
def test_parse_valid(text: str, expected: tuple[int, int, int]) -> None:
    """Test parsing valid core versions."""
    version = CoreVersion.parse(text)
    assert (version.major, version.minor, version.patch) == expected


@pytest.mark.parametrize(
    "text", ["", "  ", "1.2.a", "1.a.0", "a.2.0", "1.2", "1.2.3.4", "-1.2.3", "1.2.3-0"]
)
def test_parse_invalid(text: str) -> None:
    """Test that malformed core versions are rejected."""
    with pytest.raises(InvalidVersionError):
        CoreVersion.parse(text)


def test_parse_rejects_non_ascii_digits() -> None:
    """Test that only ASCII digits are accepted."""
    with pytest.raises(InvalidVersionError, match="three non-negative integers"):
        CoreVersion.parse("١.2.3")


def test_blank_error_message() -> None:
    """Test the error raised for a blank version."""
    with pytest.raises(InvalidVersionError, match="cannot be blank") as exc_info:
        CoreVersion.parse("   ")
    assert exc_info.value.version == "   "


def test_invalid_version_error_is_value_error() -> None:
    """Test that InvalidVersionError can be caught as ValueError."""
    with pytest.raises(ValueError):
        CoreVersion.parse("x.y.z")


def test_str_and_repr() -> None:
    """Test string representations."""
    version = CoreVersion(1, 2, 3)
    assert str(version) == "1.2.3"
    assert repr(version) == "CoreVersion(1, 2, 3)"


def test_ordering() -> None:
    """Test that core versions order by major, minor then patch."""
    versions = [CoreVersion.parse(v) for v in ["1.2.3", "0.9.9", "1.10.0", "1.2.10"]]
    assert [str(v) for v in sorted(versions)] == ["0.9.9", "1.2.3", "1.2.10", "1.10.0"]


def test_parse_component_too_large(int_digit_limit: int) -> None:
    """Test that a component past the int conversion limit is rejected."""
    text = "1" * (int_digit_limit + 1) + ".0.0"
    with pytest.raises(InvalidVersionError, match="component too large"):
        CoreVersion.parse(text)


def test_parse_component_at_limit(int_digit_limit: int) -> None:
    """Test that a component at the int conversion limit is accepted."""
    version = CoreVersion.parse("9" * int_digit_limit + ".0.1")
    assert version.major == 10**int_digit_limit - 1
    assert version.patch == 1
