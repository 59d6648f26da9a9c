import pytest
from hypothesis import given, strategies as st

from apmath.number import Apm
from apmath.powers import cbrt, integer_pow


def test_cbrt_of_perfect_cube():
    assert cbrt(27, 10) == Apm(3)


def test_cbrt_of_negative_cube():
    assert cbrt(-8, 5) == Apm(-2)


def test_cbrt_of_zero():
    assert cbrt(0, 10) == Apm(0)


def test_cbrt_of_small_fraction():
    assert cbrt("0.000125", 8) == Apm("0.05")


def test_cbrt_of_two_is_accurate():
    r = cbrt(2, 30)
    assert r.significant_digits <= 31
    err = abs(r * r * r - 2)
    assert err < Apm("1e-29")


def test_cbrt_negative_places_rejected():
    with pytest.raises(ValueError):
        cbrt(2, -1)


@given(st.integers(min_value=-10**12, max_value=10**12).filter(lambda v: v != 0))
def test_cbrt_of_integer_cubes(v):
    assert cbrt(v**3, 40) == Apm(v)


@given(st.integers(min_value=1, max_value=10**9), st.integers(min_value=5, max_value=40))
def test_cbrt_cubed_is_close(v, places):
    r = cbrt(v, places)
    rel = abs(r * r * r - v).divide(v, 5)
    assert rel < Apm(f"1e-{places - 1}")


def test_integer_pow_positive():
    assert integer_pow(2, 20, 10) == Apm(1024)


def test_integer_pow_negative_exponent():
    assert integer_pow(2, 20, -2) == Apm("0.25")


def test_integer_pow_fractional_base():
    assert integer_pow("1.5", 50, 3) == Apm("3.375")


def test_integer_pow_zero_exponent():
    assert integer_pow(7, 10, 0) == Apm(1)


def test_integer_pow_zero_base():
    assert integer_pow(0, 5, 3) == Apm(0)
    assert integer_pow(0, 5, -3) == Apm(0)


def test_integer_pow_rounds_result():
    r = integer_pow(3, 4, 40)
    assert r.significant_digits <= 5
    assert r == Apm(3**40).round(4)


@given(st.integers(min_value=-50, max_value=50).filter(lambda v: v != 0),
       st.integers(min_value=0, max_value=12))
def test_integer_pow_matches_exact_integer(base, n):
    assert integer_pow(base, 60, n) == Apm(base**n)


def test_integer_pow_bad_exponent():
    with pytest.raises(ValueError):
        integer_pow(2, 10, 1.5)