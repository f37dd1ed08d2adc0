"""Tests de la aritmética y del formateo/lectura de números."""

import math

import pytest

from calculadora_teclado.core.numbers import (
    InvalidInputError,
    apply_operator,
    format_number,
    parse_number,
)


# --- apply_operator ---

def test_basic_operations():
    assert apply_operator("+", 3.0, 4.0) == 7.0
    assert apply_operator("-", 3.0, 4.0) == -1.0
    assert apply_operator("*", 3.0, 4.0) == 12.0
    assert apply_operator("/", 3.0, 4.0) == 0.75


def test_division_by_zero_is_zero():
    assert apply_operator("/", 5.0, 0.0) == 0
    assert apply_operator("/", 5.0, -0.0) == 0


def test_unknown_operator_returns_right():
    assert apply_operator("%", 5.0, 2.0) == 2.0


# --- format_number ---

@pytest.mark.parametrize("value, expected", [
    (7.0, "7"),
    (-3.0, "-3"),
    (0.25, "0.25"),
    (100.0, "100"),
    (123.456, "123.456"),
    (0.1 + 0.2, "0.30000000000000004"),
    (1 / 3, "0.3333333333333333"),
    (1e20, "100000000000000000000"),
    (1e21, "1e+21"),
    (1.5e21, "1.5e+21"),
    (123456789012345680000.0, "123456789012345680000"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
    (1.5e-7, "1.5e-7"),
    (-2.5e-10, "-2.5e-10"),
    (0.0, "0"),
    (-0.0, "0"),
    (math.inf, "Infinity"),
    (-math.inf, "-Infinity"),
    (math.nan, "NaN"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


# --- parse_number ---

@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("0.", 0.0),
    ("12.5", 12.5),
    ("-3", -3.0),
    (".5", 0.5),
    ("1e+21", 1e21),
    ("1.5e-7", 1.5e-7),
    ("1e+", 1.0),
    ("Infinity", math.inf),
    ("-Infinity", -math.inf),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_nan():
    assert math.isnan(parse_number("NaN"))


@pytest.mark.parametrize("text", ["", "abc", ".", "-", "e5"])
def test_parse_rejects_non_numeric(text):
    with pytest.raises(InvalidInputError):
        parse_number(text)


@pytest.mark.parametrize("value", [7.0, 0.1 + 0.2, 1e21, 1.5e-7, -123.456, 2 ** 60])
def test_format_then_parse_returns_same_float(value):
    assert parse_number(format_number(value)) == value
