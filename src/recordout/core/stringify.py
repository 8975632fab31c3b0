# topmark:header:start
#
#   project      : RecordOut
#   file         : stringify.py
#   file_relpath : src/recordout/core/stringify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar-to-text conversion for tabular output.

`stringify` is total: it never raises. The policy, first match wins:

| Value kind                         | Output                                        |
|------------------------------------|-----------------------------------------------|
| `NO_VALUE`                         | ``<invalid Value>``                           |
| ``str`` (and subclasses)           | the text itself                               |
| ``bool``                           | ``true`` / ``false``                          |
| ``int`` (and subclasses)           | base-10 digits                                |
| ``float``                          | fixed-point, two decimals (``NaN``, ``±Inf``) |
| ``datetime``                       | ``2006-01-02 15:04:05.5 +0000 UTC`` style     |
| anything else (including ``None``) | empty string                                  |

``bool`` is tested before ``int`` because it subclasses ``int``; the two kinds never
overlap in the output.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Final

from recordout.constants import INVALID_VALUE_TEXT


class _NoValue:
    """Sentinel type for a value that does not exist at all."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE: Final[_NoValue] = _NoValue()


# Below the smallest limit accepted by sys.set_int_max_str_digits().
_INT_CHUNK_DIGITS: Final[int] = 500
_INT_CHUNK: Final[int] = 10**_INT_CHUNK_DIGITS


def format_int(value: int) -> str:
    """Render an integer in base 10, however many digits it has.

    Integers beyond the interpreter's string-conversion limit are converted in
    fixed-width chunks instead of raising.
    """
    try:
        return int.__repr__(value)
    except ValueError:
        sign: str = "-" if value < 0 else ""
        rest: int = abs(int(value))
        chunks: list[int] = []
        while rest:
            rest, low = divmod(rest, _INT_CHUNK)
            chunks.append(low)
        head, *tail = reversed(chunks)
        return sign + str(head) + "".join(f"{c:0{_INT_CHUNK_DIGITS}d}" for c in tail)


def format_float(value: float) -> str:
    """Render a float with exactly two decimals, rounding half to even on the binary value."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.2f}"


def format_timestamp(value: datetime) -> str:
    """Render a timestamp in long form: date, time, numeric offset and zone name.

    Fractional seconds are shown only when non-zero, without trailing zeros. Naive
    timestamps are taken to be UTC.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=timezone.utc)
    text: str = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    offset: str = value.strftime("%z")
    zone: str = value.tzname() or offset
    if zone.startswith("UTC") and zone != "UTC":
        # datetime.timezone names fixed offsets "UTC+01:00"; show the bare offset instead.
        zone = offset
    return f"{text} {offset} {zone}"


def stringify(value: object) -> str:
    """Convert a single field value to its tabular cell text.

    Args:
        value (object): The field value, or `NO_VALUE` if the field does not exist.

    Returns:
        str: The cell text; unsupported and composite values yield ``""``.
    """
    if value is NO_VALUE:
        return INVALID_VALUE_TEXT
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return format_int(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    return ""
