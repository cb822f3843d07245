import math

import pytest

from shargpy.charconv import (
    CharsResult,
    float_from_chars,
    float_to_chars,
    int_from_chars,
)


@pytest.mark.parametrize(
    "text, expected, consumed",
    [
        ("1234", 1234.0, 4),
        ("1.2e3", 1200.0, 5),
        ("1.2e-3", 0.0012, 6),
        ("1.e2", 100.0, 4),
        ("1.", 1.0, 2),
        (".2e3", 200.0, 4),
        ("2e3", 2000.0, 3),
        ("2", 2.0, 1),
        ("4em", 4.0, 1),
        ("-1.2e3", -1200.0, 6),
        ("-.3", -0.3, 3),
        ("1.2e", 1.2, 3),
        ("0.0", 0.0, 3),
        ("3.19abc", 3.19, 4),
    ],
)
def test_real_numbers(text, expected, consumed):
    result = float_from_chars(text)
    assert result.value == pytest.approx(expected)
    assert result.consumed == consumed


def test_read_only_until_a_certain_position():
    text = "3.194357"
    result = float_from_chars(text[:4])
    assert result.value == pytest.approx(3.19)
    assert result.consumed == 4


@pytest.mark.parametrize("text", ["inf", "infinity", "INF", "INFINITY"])
def test_infinity_value(text):
    result = float_from_chars(text)
    assert result.value == math.inf
    assert result.consumed == len(text)


@pytest.mark.parametrize("text", ["nan", "NAN", "nan(abc)", "NAN(abc)"])
def test_nan_value(text):
    result = float_from_chars(text)
    assert math.isnan(result.value)
    assert result.consumed == len(text)


@pytest.mark.parametrize("text", ["e3", "+1.2e3"])
def test_non_valid_strings(text):
    with pytest.raises(ValueError):
        float_from_chars(text)


def test_empty_text_is_invalid():
    with pytest.raises(ValueError):
        float_from_chars("")


def test_too_large_float_overflows():
    with pytest.raises(OverflowError):
        float_from_chars("1e400")


def test_too_small_float_is_out_of_range():
    with pytest.raises(OverflowError):
        float_from_chars("1e-400")


def test_negative_infinity():
    result = float_from_chars("-inf")
    assert result == CharsResult(-math.inf, 4)


@pytest.mark.parametrize(
    "text, expected, consumed",
    [("1234", 1234, 4), ("-17", -17, 3), ("12abc", 12, 2), ("007", 7, 3)],
)
def test_int_from_chars(text, expected, consumed):
    assert int_from_chars(text) == CharsResult(expected, consumed)


@pytest.mark.parametrize("text", ["", "+5", "abc", "-", " 5"])
def test_int_from_chars_invalid(text):
    with pytest.raises(ValueError):
        int_from_chars(text)


def test_to_chars():
    text = float_to_chars(120.25)
    assert text == "120.25"
    assert len(text) == 6


@pytest.mark.parametrize(
    "value",
    [120.25, 0.1, 1e20, 1e-7, -3.5, 123456789.0, 2.5e-300, 1.7976931348623157e308, 0.0012],
)
def test_to_chars_round_trips(value):
    text = float_to_chars(value)
    result = float_from_chars(text)
    assert result.value == value
    assert result.consumed == len(text)


def test_to_chars_special_values():
    assert float_from_chars(float_to_chars(math.inf)).value == math.inf
    assert float_from_chars(float_to_chars(-math.inf)).value == -math.inf
    assert math.isnan(float_from_chars(float_to_chars(math.nan)).value)


def test_to_chars_zero_keeps_sign():
    assert float_to_chars(0.0) == "0"
    assert float_to_chars(-0.0) == "-0"


def test_to_chars_prefers_shorter_notation():
    assert float_to_chars(1e20) == "1e+20"
    assert float_to_chars(100.0) == "100"