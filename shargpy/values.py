"""Turning command line text into typed option values."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Any, get_args, get_origin

from .charconv import float_from_chars, int_from_chars
from .errors import DesignError, UserInputError


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type with its value range."""

    bits: int
    signed: bool

    @property
    def minimum(self) -> int:
        """The smallest value of the type."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        """The largest value of the type."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Return whether ``value`` fits into the type."""
        return self.minimum <= value <= self.maximum

    def __str__(self) -> str:
        return f"{'signed' if self.signed else 'unsigned'} {self.bits} bit integer"


INT8 = IntType(8, True)
INT16 = IntType(16, True)
INT32 = IntType(32, True)
INT64 = IntType(64, True)
UINT8 = IntType(8, False)
UINT16 = IntType(16, False)
UINT32 = IntType(32, False)
UINT64 = IntType(64, False)


class ParseResult(Enum):
    """Outcome of reading a value from text."""

    SUCCESS = "success"
    ERROR = "error"
    OVERFLOW_ERROR = "overflow_error"


_QUOTED = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)


def _normalise(kind: Any) -> Any:
    """Map a plain ``int`` to a signed 32 bit integer."""
    return INT32 if kind is int else kind


def _split_list(kind: Any) -> tuple[Any, bool]:
    if get_origin(kind) is list:
        args = get_args(kind)
        return _normalise(args[0] if args else str), True
    return _normalise(kind), False


def _is_subclass(kind: Any, base: type) -> bool:
    return isinstance(kind, type) and issubclass(kind, base)


def type_name(kind: Any) -> str:
    """Return the name of a value type as shown on help pages and in errors."""
    element, is_list = _split_list(kind)
    if is_list:
        return "List of " + type_name(element)
    if element is bool:
        return "bool"
    if isinstance(element, IntType):
        return str(element)
    if element is float:
        return "double"
    if element is str:
        return "std::string"
    if _is_subclass(element, PurePath):
        return "std::filesystem::path"
    return getattr(element, "__name__", repr(element))


def _parse_int(kind: IntType, text: str) -> tuple[ParseResult, Any]:
    if not kind.signed and text.startswith("-"):
        return ParseResult.ERROR, None
    try:
        result = int_from_chars(text)
    except ValueError:
        return ParseResult.ERROR, None
    if not kind.contains(result.value):
        return ParseResult.OVERFLOW_ERROR, None
    if result.consumed != len(text):
        return ParseResult.ERROR, None
    return ParseResult.SUCCESS, result.value


def _parse_float(text: str) -> tuple[ParseResult, Any]:
    try:
        result = float_from_chars(text)
    except OverflowError:
        return ParseResult.OVERFLOW_ERROR, None
    except ValueError:
        return ParseResult.ERROR, None
    if result.consumed != len(text):
        return ParseResult.ERROR, None
    return ParseResult.SUCCESS, float(result.value)


def _parse_bool(text: str) -> tuple[ParseResult, Any]:
    values = {"0": False, "1": True, "true": True, "false": False}
    if text in values:
        return ParseResult.SUCCESS, values[text]
    return ParseResult.ERROR, None


def _parse_path(kind: type, text: str) -> tuple[ParseResult, Any]:
    """Read one whitespace-free word or one quoted string, and nothing else."""
    stripped = text.lstrip()
    if not stripped:
        return ParseResult.ERROR, None
    if stripped.startswith('"'):
        match = _QUOTED.fullmatch(stripped)
        if match is None:
            return ParseResult.ERROR, None
        return ParseResult.SUCCESS, kind(_ESCAPE.sub(r"\1", match.group(1)))
    if any(char.isspace() for char in stripped):
        return ParseResult.ERROR, None
    return ParseResult.SUCCESS, kind(stripped)


def _parse_enum(kind: type[Enum], text: str) -> tuple[ParseResult, Any]:
    members = kind.__members__
    if text in members:
        return ParseResult.SUCCESS, members[text]

    try:
        ordered = sorted(members.items(), key=lambda item: (item[1].value, item[0]))
    except TypeError:
        ordered = sorted(members.items(), key=lambda item: item[0])
    keys = "[" + ", ".join(name for name, _ in ordered) + "]"
    raise UserInputError(f"You have chosen an invalid input value: {text}. Please use one of: {keys}")


def parse_value(kind: Any, text: str) -> tuple[ParseResult, Any]:
    """Read ``text`` as a value of ``kind``.

    Returns the outcome and the value (``None`` unless the outcome is
    ``ParseResult.SUCCESS``).  For a list kind the element type is read.
    An unknown name for an enumeration raises ``UserInputError``.
    """
    element, _ = _split_list(kind)
    if element is bool:
        return _parse_bool(text)
    if isinstance(element, IntType):
        return _parse_int(element, text)
    if element is float:
        return _parse_float(text)
    if element is str:
        return ParseResult.SUCCESS, text
    if _is_subclass(element, PurePath):
        return _parse_path(element, text)
    if _is_subclass(element, Enum):
        return _parse_enum(element, text)
    raise DesignError(f"Values of type {type_name(element)} cannot be read from the command line.")


def _value_range(element: Any) -> tuple[str, str]:
    if isinstance(element, IntType):
        return str(element.minimum), str(element.maximum)
    return f"{sys.float_info.min:f}", f"{sys.float_info.max:f}"


def convert_value(kind: Any, text: str, option_name: str) -> Any:
    """Read ``text`` as a value of ``kind`` and raise ``UserInputError`` on failure."""
    result, value = parse_value(kind, text)
    message = f"Value parse failed for {option_name}: "

    if result is ParseResult.ERROR:
        raise UserInputError(f"{message}Argument {text} could not be parsed as type {type_name(kind)}.")
    if result is ParseResult.OVERFLOW_ERROR:
        element, _ = _split_list(kind)
        low, high = _value_range(element)
        raise UserInputError(f"{message}Numeric argument {text} is not in the valid range [{low},{high}].")
    return value