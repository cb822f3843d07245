from enum import Enum
from pathlib import Path

import pytest

from shargpy.errors import DesignError, UserInputError
from shargpy.values import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntType,
    ParseResult,
    convert_value,
    parse_value,
    type_name,
)

ALL_INTS = [INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64]


class Foo(Enum):
    one = 0
    two = 1
    three = 2


@pytest.mark.parametrize(
    "bits, signed, low, high",
    [
        (8, True, -128, 127),
        (16, True, -32768, 32767),
        (32, True, -2147483648, 2147483647),
        (64, True, -9223372036854775808, 9223372036854775807),
        (8, False, 0, 255),
        (16, False, 0, 65535),
        (32, False, 0, 4294967295),
        (64, False, 0, 18446744073709551615),
    ],
)
def test_int_type_range_edges(bits, signed, low, high):
    kind = IntType(bits, signed)
    assert (kind.minimum, kind.maximum) == (low, high)
    assert kind.contains(low) is True
    assert kind.contains(high) is True
    assert kind.contains(high + 1) is False
    assert kind.contains(low - 1) is False


@pytest.mark.parametrize("kind", [UINT8, UINT16, UINT32, UINT64])
def test_unsigned_types_start_at_zero(kind):
    assert kind.minimum == 0


def test_int_type_range_grows_with_width():
    assert IntType(8, True).contains(200) is False
    assert IntType(8, False).contains(200) is True
    assert IntType(16, True).contains(40000) is False
    assert IntType(32, True).contains(40000) is True
    assert IntType(64, True).contains(2**40) is True
    assert IntType(32, True).contains(2**40) is False


def test_type_names():
    assert type_name(INT32) == "signed 32 bit integer"
    assert type_name(INT8) == "signed 8 bit integer"
    assert type_name(UINT8) == "unsigned 8 bit integer"
    assert type_name(int) == "signed 32 bit integer"
    assert type_name(str) == "std::string"
    assert type_name(Path) == "std::filesystem::path"
    assert type_name(list[str]) == "List of std::string"
    assert type_name(list[Path]) == "List of std::filesystem::path"
    assert type_name(Foo) == "Foo"


@pytest.mark.parametrize("kind", ALL_INTS)
def test_int_round_trip_at_limits(kind):
    for number in (kind.minimum, kind.maximum, 0):
        assert parse_value(kind, str(number)) == (ParseResult.SUCCESS, number)


@pytest.mark.parametrize("text", ["12abc", "", "+5", "abc", " 5", "5 "])
def test_int_parse_errors(text):
    assert parse_value(INT32, text) == (ParseResult.ERROR, None)


def test_unsigned_rejects_minus():
    assert parse_value(UINT32, "-1")[0] is ParseResult.ERROR
    assert parse_value(UINT32, "-0")[0] is ParseResult.ERROR


@pytest.mark.parametrize("kind", ALL_INTS)
def test_int_overflow(kind):
    assert parse_value(kind, str(kind.maximum + 1))[0] is ParseResult.OVERFLOW_ERROR
    if kind.signed:
        assert parse_value(kind, str(kind.minimum - 1))[0] is ParseResult.OVERFLOW_ERROR


def test_float_values():
    assert parse_value(float, "1.2e3") == (ParseResult.SUCCESS, 1200.0)
    assert parse_value(float, "-1.2e3") == (ParseResult.SUCCESS, -1200.0)
    assert parse_value(float, "inf") == (ParseResult.SUCCESS, float("inf"))


def test_float_errors_and_overflow():
    assert parse_value(float, "4em")[0] is ParseResult.ERROR
    assert parse_value(float, "+1.2e3")[0] is ParseResult.ERROR
    assert parse_value(float, "e3")[0] is ParseResult.ERROR
    assert parse_value(float, "1e999")[0] is ParseResult.OVERFLOW_ERROR


@pytest.mark.parametrize("text, expected", [("0", False), ("1", True), ("true", True), ("false", False)])
def test_bool_values(text, expected):
    assert parse_value(bool, text) == (ParseResult.SUCCESS, expected)


@pytest.mark.parametrize("text", ["yes", "True", "2", ""])
def test_bool_errors(text):
    assert parse_value(bool, text)[0] is ParseResult.ERROR


@pytest.mark.parametrize("text", ["", "some string", "-o", "  spaced  "])
def test_strings_are_taken_as_they_are(text):
    assert parse_value(str, text) == (ParseResult.SUCCESS, text)


def test_paths():
    assert parse_value(Path, "/some/path") == (ParseResult.SUCCESS, Path("/some/path"))
    assert parse_value(Path, '"a b"') == (ParseResult.SUCCESS, Path("a b"))
    assert parse_value(Path, "a b")[0] is ParseResult.ERROR
    assert parse_value(Path, "")[0] is ParseResult.ERROR
    assert parse_value(Path, '"unterminated')[0] is ParseResult.ERROR


def test_enum_by_name():
    assert parse_value(Foo, "two") == (ParseResult.SUCCESS, Foo.two)


def test_enum_unknown_name_lists_choices():
    with pytest.raises(UserInputError) as info:
        parse_value(Foo, "four")
    assert str(info.value) == (
        "You have chosen an invalid input value: four. Please use one of: [one, two, three]"
    )


def test_list_kind_parses_element():
    assert parse_value(list[INT32], "7") == (ParseResult.SUCCESS, 7)
    assert convert_value(list[str], "x", "-s") == "x"


def test_unsupported_kind():
    with pytest.raises(DesignError):
        parse_value(dict, "x")


def test_convert_value_success():
    assert convert_value(int, "42", "-i") == 42
    assert convert_value(bool, "true", "-b") is True


def test_convert_value_parse_error_message():
    with pytest.raises(UserInputError) as info:
        convert_value(INT32, "abc", "-i")
    assert str(info.value) == (
        "Value parse failed for -i: Argument abc could not be parsed as type signed 32 bit integer."
    )


def test_convert_value_list_error_names_list_type():
    with pytest.raises(UserInputError) as info:
        convert_value(list[INT32], "abc", "positional option1")
    assert str(info.value) == (
        "Value parse failed for positional option1: Argument abc could not be parsed as type "
        "List of signed 32 bit integer."
    )


def test_convert_value_overflow_message():
    text = str(INT8.maximum + 1)
    with pytest.raises(UserInputError) as info:
        convert_value(INT8, text, "-i")
    assert str(info.value) == (
        f"Value parse failed for -i: Numeric argument {text} is not in the valid range "
        f"[{INT8.minimum},{INT8.maximum}]."
    )


def test_convert_value_float_overflow_message():
    with pytest.raises(UserInputError) as info:
        convert_value(float, "1e999", "-d")
    assert str(info.value).startswith(
        "Value parse failed for -d: Numeric argument 1e999 is not in the valid range ["
    )


def test_int_type_str_matches_type_name():
    custom = IntType(16, False)
    assert str(custom) == type_name(custom) == type_name(UINT16)