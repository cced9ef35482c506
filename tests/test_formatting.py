import math

import pytest

from complexplane import InvalidArgument, to_pretty_string


@pytest.mark.parametrize("value, digits, expected", [
    (1.0986841134678, 4, "1.0987"),
    (0.45508986056222, 4, "0.4551"),
    (0.45508986056222, 6, "0.45509"),
    (2.0, 4, "2"),
    (-2.5, 4, "-2.5"),
    (1234567.125, 2, "1234567.12"),
    (0.125, 2, "0.12"),
    (0.375, 2, "0.38"),
    (2.5, 0, "2"),
    (3.5, 0, "4"),
    (1e20, 4, "100000000000000000000"),
    (1e-7, 4, "0"),
])
def test_rounds_half_even_and_trims(value, digits, expected):
    assert to_pretty_string(value, digits) == expected


def test_default_digits():
    assert to_pretty_string(math.pi) == "3.1416"


def test_negative_zero_renders_as_zero():
    assert to_pretty_string(-0.0) == "0"
    assert to_pretty_string(-0.00001) == "0"


def test_non_finite():
    assert to_pretty_string(math.nan) == "nan"
    assert to_pretty_string(math.inf) == "inf"
    assert to_pretty_string(-math.inf) == "-inf"


def test_huge_value_keeps_every_integer_digit():
    text = to_pretty_string(1.7976931348623157e308, 4)
    assert len(text) == 309
    assert text.startswith("17976931348623157")


def test_negative_digits_rejected():
    with pytest.raises(InvalidArgument):
        to_pretty_string(1.0, -1)


def test_non_integer_digits_rejected():
    with pytest.raises(TypeError):
        to_pretty_string(1.0, 2.5)
