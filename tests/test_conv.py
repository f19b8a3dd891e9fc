import math
from fractions import Fraction
from ipaddress import IPv4Address

import pytest

from ggkit.conv import UnsupportedConversionError, to, to_e, to_optional


class MyInt(int):
    pass


class MyFloat(float):
    pass


class MyComplex(complex):
    pass


class MyStr(str):
    pass


class MyBytes(bytes):
    pass


UNSUPPORTED_INPUTS = [[], (), {}, set(), (lambda: None), object(), [1, 2]]

BOOL_CASES = [
    (False, False),
    (True, True),
    (None, False),
    (0, False),
    (1, True),
    (MyInt(0), False),
    (MyInt(1), True),
    (0.0, False),
    (1.0, True),
    (MyFloat(0), False),
    (MyFloat(1), True),
    (0j, False),
    (1 + 0j, True),
    (1j, True),
    (MyComplex(0), False),
    (MyComplex(1), True),
    (MyComplex(1j), True),
    ("false", False),
    ("true", True),
    (MyStr("false"), False),
    (MyStr("true"), True),
    (b"false", False),
    (b"true", True),
    (bytearray(b"true"), True),
    (MyBytes(b"false"), False),
    (MyBytes(b"true"), True),
]

NUMBER_CASES = [
    (False, 0),
    (True, 1),
    (None, 0),
    (0, 0),
    (1, 1),
    (MyInt(0), 0),
    (MyInt(1), 1),
    (0.0, 0),
    (1.0, 1),
    (MyFloat(0), 0),
    (MyFloat(1), 1),
    (Fraction(1), 1),
    ("0", 0),
    ("1", 1),
    ("0.0", 0),
    ("1.0", 1),
    (MyStr("0"), 0),
    (MyStr("1"), 1),
    (MyStr("0.0"), 0),
    (MyStr("1.0"), 1),
    (b"0.0", 0),
    (b"1.0", 1),
    (MyBytes(b"0.0"), 0),
    (MyBytes(b"1.0"), 1),
]

STRING_CASES = [
    (False, "false"),
    (True, "true"),
    (None, ""),
    (0, "0"),
    (1, "1"),
    (MyInt(0), "0"),
    (MyInt(1), "1"),
    (0.0, "0"),
    (1.0, "1"),
    (MyFloat(0), "0"),
    (MyFloat(1), "1"),
    ("xxx", "xxx"),
    (MyStr("xxx"), "xxx"),
    (b"xxx", "xxx"),
    (MyBytes(b"xxx"), "xxx"),
    (IPv4Address("8.8.8.8"), "8.8.8.8"),
    (ValueError("zzz"), "zzz"),
]


@pytest.mark.parametrize("value, expected", BOOL_CASES)
def test_to_bool(value, expected):
    assert to(bool, value) is expected
    assert to_optional(bool, value) is expected
    assert to_e(bool, value) is expected


@pytest.mark.parametrize("target", [int, float, MyInt, MyFloat])
@pytest.mark.parametrize("value, expected", NUMBER_CASES)
def test_to_number(target, value, expected):
    result = to(target, value)
    assert result == expected
    assert type(result) is target
    assert to_optional(target, value) == expected
    assert to_e(target, value) == expected


@pytest.mark.parametrize("target", [str, MyStr])
@pytest.mark.parametrize("value, expected", STRING_CASES)
def test_to_string(target, value, expected):
    result = to(target, value)
    assert result == expected
    assert type(result) is target
    assert to_optional(target, value) == expected
    assert to_e(target, value) == expected


@pytest.mark.parametrize("target, zero", [(bool, False), (int, 0), (float, 0.0), (str, "")])
@pytest.mark.parametrize("value", UNSUPPORTED_INPUTS)
def test_unsupported_inputs(target, zero, value):
    assert to(target, value) == zero
    assert to_optional(target, value) is None
    with pytest.raises(UnsupportedConversionError):
        to_e(target, value)


@pytest.mark.parametrize("target", [int, float])
def test_complex_to_number_is_unsupported(target):
    with pytest.raises(UnsupportedConversionError):
        to_e(target, 1j)


def test_examples():
    assert to(str, 1) == "1"
    assert to(int, "1") == 1
    assert to(int, "x") == 0
    assert to(bool, "true") is True
    assert to(bool, "x") is False
    assert to(MyInt, MyStr("1")) == 1
    assert to(MyStr, MyInt(1)) == "1"


def test_parse_error_message():
    with pytest.raises(ValueError, match='parsing "x": invalid syntax') as excinfo:
        to_e(int, "x")
    assert not isinstance(excinfo.value, UnsupportedConversionError)


@pytest.mark.parametrize(
    "text, expected",
    [("-1", -1), ("+7", 7), (".0", 0), ("1.", 1), ("12.000", 12), ("-3.0", -3)],
)
def test_int_parsing_accepts(text, expected):
    assert to_e(int, text) == expected


@pytest.mark.parametrize("text", ["1.5", "1.50", " 1", "1_0", "", "0x10", "abc"])
def test_int_parsing_rejects(text):
    with pytest.raises(ValueError):
        to_e(int, text)
    assert to_optional(int, text) is None


@pytest.mark.parametrize(
    "text, expected",
    [("1e3", 1000.0), ("-2.5", -2.5), (".5", 0.5), ("inf", math.inf), ("-Infinity", -math.inf)],
)
def test_float_parsing_accepts(text, expected):
    assert to_e(float, text) == expected


def test_float_parsing_nan():
    result = to_e(float, "NaN")
    assert math.isnan(result) is True
    assert to(str, result) == "NaN"


@pytest.mark.parametrize("text", ["1_0", " 1.0", "1.0.0", "e5", ""])
def test_float_parsing_rejects(text):
    with pytest.raises(ValueError):
        to_e(float, text)


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_bool_true_words(text):
    assert to_e(bool, text) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_bool_false_words(text):
    assert to_e(bool, text) is False


@pytest.mark.parametrize("text", ["yes", "tRuE", "2", ""])
def test_bool_rejects(text):
    with pytest.raises(ValueError):
        to_e(bool, text)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.5, "0.5"),
        (-0.25, "-0.25"),
        (100.0, "100"),
        (1e21, "1000000000000000000000"),
        (1.5e-7, "0.00000015"),
        (math.nan, "NaN"),
        (math.inf, "+Inf"),
        (-math.inf, "-Inf"),
    ],
)
def test_float_formatting(value, expected):
    assert to(str, value) == expected


def test_float_truncates_to_int():
    assert to(int, 2.9) == 2
    assert to(int, -2.9) == -2


def test_non_finite_float_to_int_fails():
    assert to_optional(int, math.inf) is None
    with pytest.raises(ValueError):
        to_e(int, math.nan)


def test_bool_to_string_round_trip():
    for flag in (True, False):
        assert to(bool, to(str, flag)) is flag


def test_int_to_string_round_trip():
    for number in (-12345, 0, 7, 10**30):
        assert to(int, to(str, number)) == number


@pytest.mark.parametrize("target", [list, dict, complex, bytes, "int"])
def test_unsupported_target(target):
    with pytest.raises(TypeError):
        to(target, 1)
    with pytest.raises(TypeError):
        to_e(target, 1)
    with pytest.raises(TypeError):
        to_optional(target, 1)