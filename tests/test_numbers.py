from __future__ import annotations

import math

import pytest

from flipside.utils.numbers import parse_float, parse_int, to_str


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("12.50", 12.5), (" 3 ", 3.0), ("7.5kg", 7.5), ("-0.3", -0.3), (".5", 0.5), (4, 4.0)],
)
def test_parse_float_reads_leading_number(raw: object, expected: float) -> None:
    assert parse_float(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", None, "$5"])
def test_parse_float_unparsable_is_nan(raw: object) -> None:
    assert math.isnan(parse_float(raw))


@pytest.mark.parametrize(("raw", "expected"), [("3", 3), ("3.9", 3), ("12 units", 12), (2, 2)])
def test_parse_int_truncates(raw: object, expected: int) -> None:
    assert parse_int(raw) == expected


def test_parse_int_unparsable_is_nan() -> None:
    assert math.isnan(parse_int("none"))


def test_to_str_drops_integral_float_suffix() -> None:
    assert to_str(97201.0) == "97201"
    assert to_str(97201) == "97201"
    assert to_str("OR") == "OR"
    assert to_str(1.5) == "1.5"


def test_to_str_keeps_missing_values_missing() -> None:
    assert to_str(None) is None
