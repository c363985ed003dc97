"""Leading-prefix integer parsing for loosely typed event fields."""

import json
import math
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import Any

_DECIMAL_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"


@contextmanager
def unbounded_int_digits() -> Iterator[None]:
    """Lift the interpreter's int/str conversion digit limit for the block.

    Operands of any length are valid input, so parsing them and rendering
    their sum must not stop at the default 4300 digits.
    """
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def _float_text(value: float) -> str:
    """Render a float the way a JavaScript number prints as text."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if magnitude >= 1e21 or (magnitude < 1e-6 and value != 0):
        mantissa, _, exponent = repr(value).partition("e")
        return f"{mantissa}e{int(exponent):+d}"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def as_text(value: Any) -> str:
    """Render an event field the way it would appear in a JSON document."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        with unbounded_int_digits():
            return str(value)
    if isinstance(value, float):
        return _float_text(value)
    return json.dumps(value, default=str, separators=(",", ":"))


def parse_int(value: Any) -> int | None:
    """Parse the leading integer of ``value``.

    Leading whitespace is skipped, then an optional sign, an optional
    ``0x`` prefix, and the longest run of digits that follows. Anything after
    the digits is ignored, so ``"12abc"`` parses as 12 and ``"3.9"`` as 3.
    Floats are read from their JavaScript text form, so ``1e21`` parses as 1.

    Returns None when no digits are found.
    """
    text = as_text(value).lstrip()

    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    base, digits = 10, _DECIMAL_DIGITS
    if text[:2] in ("0x", "0X"):
        base, digits = 16, _HEX_DIGITS
        text = text[2:]

    end = 0
    while end < len(text) and text[end] in digits:
        end += 1

    if end == 0:
        return None
    with unbounded_int_digits():
        return sign * int(text[:end], base)
