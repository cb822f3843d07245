"""Reading and writing numbers the way the option parser expects them.

Reading accepts a number at the start of the text and reports how many
characters it used.  A leading ``+`` or whitespace is not accepted.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal

_FLOAT_PATTERN = re.compile(
    r"-?(?:"
    r"(?P<inf>inf(?:inity)?)"
    r"|(?P<nan>nan(?:\([0-9A-Za-z_]*\))?)"
    r"|(?P<num>(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)"
    r")",
    re.IGNORECASE,
)

_INT_PATTERN = re.compile(r"-?\d+")


@dataclass(frozen=True)
class CharsResult:
    """A number read from text and the count of characters it took."""

    value: float | int
    consumed: int


def float_from_chars(text: str) -> CharsResult:
    """Read a floating point number from the start of ``text``.

    Raises ``ValueError`` when no number starts the text and
    ``OverflowError`` when the number does not fit into a float.
    """
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"No number at the start of {text!r}")

    matched = match.group(0)
    negative = matched.startswith("-")

    if match.group("nan") is not None:
        value = math.nan
        if negative:
            value = -value
    elif match.group("inf") is not None:
        value = -math.inf if negative else math.inf
    else:
        value = float(matched)
        if math.isinf(value):
            raise OverflowError(f"{matched!r} is too large for a float")
        if value == 0.0 and any(c in "123456789" for c in _mantissa(matched)):
            raise OverflowError(f"{matched!r} is too small for a float")

    return CharsResult(value, match.end())


def _mantissa(number: str) -> str:
    return re.split(r"[eE]", number, maxsplit=1)[0]


def int_from_chars(text: str) -> CharsResult:
    """Read a decimal integer from the start of ``text``.

    Raises ``ValueError`` when no integer starts the text.
    """
    match = _INT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"No integer at the start of {text!r}")
    return CharsResult(int(match.group(0)), match.end())


def float_to_chars(value: float) -> str:
    """Write ``value`` in the shortest form that reads back to the same float.

    Of the fixed and the scientific notation the shorter one is used,
    the fixed one when both are equally long.
    """
    if math.isnan(value):
        return "-nan" if math.copysign(1.0, value) < 0 else "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"

    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"

    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent

    if exponent >= 0:
        fixed = digits + "0" * exponent
    elif point > 0:
        fixed = f"{digits[:point]}.{digits[point:]}"
    else:
        fixed = "0." + "0" * (-point) + digits

    scientific_exponent = point - 1
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    exponent_sign = "+" if scientific_exponent >= 0 else "-"
    scientific = f"{mantissa}e{exponent_sign}{abs(scientific_exponent):02d}"

    return sign + (fixed if len(fixed) <= len(scientific) else scientific)