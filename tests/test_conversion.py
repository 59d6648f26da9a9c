import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from apmath.conversion import from_float, to_float
from apmath.number import Apm, ApmError


def test_exact_value_of_one_tenth():
    value = from_float(0.1)
    assert value.digits == "1000000000000000055511151231257827021181583404541015625"
    assert value.exponent == 0


def test_rounded_conversion_of_one_tenth():
    assert from_float(0.1, 14) == Apm("0.1")


def test_exact_binary_fractions():
    assert from_float(0.5) == Apm(".5")
    assert from_float(-0.75) == Apm("-0.75")
    assert from_float(1024.0) == Apm(1024)


def test_zero_round_trip():
    assert from_float(0.0) == Apm(0)
    assert from_float(-0.0).sign == 0
    assert to_float(Apm(0)) == 0.0


def test_simple_values_to_float():
    assert to_float(Apm("0.1")) == 0.1
    assert to_float(Apm("-2.5")) == -2.5
    assert to_float("1e22") == 1e22


def test_overflow_gives_infinity():
    assert to_float(Apm("1e400")) == math.inf
    assert to_float(Apm("-1e400")) == -math.inf


def test_underflow_gives_signed_zero():
    result = to_float(Apm("-1e-400"))
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0


def test_subnormal_round_trip():
    tiny = 5e-324
    assert to_float(from_float(tiny)) == tiny
    assert to_float(from_float(2.2250738585072014e-308)) == 2.2250738585072014e-308


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_input_rejected(bad):
    with pytest.raises(ApmError):
        from_float(bad)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_exact_round_trip(d):
    assert to_float(from_float(d)) == d


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_seventeen_digit_round_trip(d):
    assert to_float(from_float(d, 16)) == d


@given(st.floats(allow_nan=False, allow_infinity=False, min_value=-1e300, max_value=1e300))
def test_sign_is_preserved(d):
    value = from_float(d)
    assert value.sign == (d > 0) - (d < 0)