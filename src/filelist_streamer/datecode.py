"""Date code helpers for ``YYYYMMDD_<rest>.<ext>`` file names."""

from datetime import date
import re

# Fixed-width date code followed by the delimiter, e.g. "20140214_packets.vbus"
DATECODE_PATTERN = re.compile(r"^([0-9]{8})_")

DatecodeInput = str | int | date | None


def to_datecode(value: DatecodeInput) -> str | None:
    """
    Coerce a bound to its canonical date code string.

    Date codes are compared as strings, which matches numeric order because
    they are fixed-width and zero-padded.

    Args:
        value: Date code as string, integer or date. ``None`` means unbounded.

    Returns:
        str | None: Canonical date code, or None if unbounded.

    Raises:
        TypeError: If the value has an unsupported type.
    """
    if value is None:
        return None
    # bool is an int subclass but never a meaningful date code
    if isinstance(value, bool):
        raise TypeError(f"Unsupported date code type: {type(value).__name__}")
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    if isinstance(value, (str, int)):
        return str(value)
    raise TypeError(f"Unsupported date code type: {type(value).__name__}")


def extract_datecode(filename: str) -> str | None:
    """Return the leading date code of ``filename``, or None if it has none."""
    match = DATECODE_PATTERN.match(filename)
    return match.group(1) if match else None
