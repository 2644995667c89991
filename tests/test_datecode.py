"""Tests for date code helpers."""

from datetime import date, datetime

import pytest

from filelist_streamer.datecode import extract_datecode, to_datecode


def test_to_datecode_none_is_unbounded() -> None:
    """Test that None stays None."""
    assert to_datecode(None) is None


def test_to_datecode_from_int_and_str() -> None:
    """Test numeric and string bounds share one canonical form."""
    assert to_datecode(20220101) == "20220101"
    assert to_datecode("20221231") == "20221231"


def test_to_datecode_from_date() -> None:
    """Test date and datetime bounds are rendered as YYYYMMDD."""
    assert to_datecode(date(2014, 2, 5)) == "20140205"
    assert to_datecode(datetime(2014, 2, 15, 12, 30)) == "20140215"


def test_to_datecode_rejects_unsupported_types() -> None:
    """Test that unsupported bound types raise TypeError."""
    with pytest.raises(TypeError, match="Unsupported date code type"):
        to_datecode(2014.0215)  # type: ignore[arg-type]

    with pytest.raises(TypeError):
        to_datecode(True)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("20140214_packets.vbus", "20140214"),
        ("20140214_.vbus", "20140214"),
        ("packets.vbus", None),
        ("2014021_packets.vbus", None),
        ("201402140_packets.vbus", None),
        ("20140214packets.vbus", None),
        ("x20140214_packets.vbus", None),
        ("\u0662\u0660\u0661\u0664\u0660\u0662\u0661\u0665_packets.vbus", None),
        ("\uff12\uff10\uff11\uff14\uff10\uff12\uff11\uff15_packets.vbus", None),
    ],
)
def test_extract_datecode(filename: str, expected: str | None) -> None:
    """Test extraction of the leading date code."""
    assert extract_datecode(filename) == expected
