import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from apmath.fft import fft_multiply, next_pow2, rdft_forward, rdft_inverse


def _digits_to_int(digits):
    value = 0
    for d in digits:
        value = value * 100 + d
    return value


@given(st.integers(min_value=1, max_value=1 << 40))
def test_next_pow2_is_smallest_power_not_below(v):
    p = next_pow2(v)
    assert p & (p - 1) == 0
    assert p >= v
    assert p // 2 < v


@pytest.mark.parametrize("exponent", [0, 1, 5, 12, 31])
def test_next_pow2_keeps_powers_of_two(exponent):
    assert next_pow2(1 << exponent) == 1 << exponent


def test_next_pow2_zero():
    assert next_pow2(0) == 0


def test_next_pow2_negative_raises():
    with pytest.raises(ValueError):
        next_pow2(-3)


@pytest.mark.parametrize("n", [4, 8, 16, 32, 64, 256, 1024])
def test_rdft_round_trip(n):
    data = [math.sin(1.7 * k) * 50 + k % 7 for k in range(n)]
    back = rdft_inverse(rdft_forward(data))
    assert len(back) == n
    for got, want in zip(back, data):
        assert got * 2.0 / n == pytest.approx(want, abs=1e-9)


@pytest.mark.parametrize("n", [4, 8, 16, 64, 512])
def test_rdft_forward_dc_and_nyquist(n):
    data = [float((3 * k * k + 1) % 11) for k in range(n)]
    out = rdft_forward(data)
    assert out[0] == pytest.approx(sum(data))
    alternating = sum(x if k % 2 == 0 else -x for k, x in enumerate(data))
    assert out[1] == pytest.approx(alternating, abs=1e-9)


def test_rdft_forward_does_not_modify_input():
    data = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    copy = list(data)
    rdft_forward(data)
    assert data == copy


@pytest.mark.parametrize("n", [0, 2, 6, 12])
def test_rdft_rejects_bad_length(n):
    with pytest.raises(ValueError):
        rdft_forward([0.0] * n)
    with pytest.raises(ValueError):
        rdft_inverse([0.0] * n)


@settings(max_examples=60, deadline=None)
@given(
    st.sampled_from([4, 8, 16, 32, 64, 128]).flatmap(
        lambda n: st.tuples(
            st.lists(st.integers(0, 99), min_size=n, max_size=n),
            st.lists(st.integers(0, 99), min_size=n, max_size=n),
        )
    )
)
def test_fft_multiply_matches_integer_product(pair):
    u, v = pair
    result = fft_multiply(u, v)
    assert len(result) == 2 * len(u)
    assert all(0 <= d <= 99 for d in result)
    assert _digits_to_int(result) == _digits_to_int(u) * _digits_to_int(v)


@pytest.mark.parametrize("n", [4, 256, 2048])
def test_fft_multiply_worst_case_all_nines(n):
    u = [99] * n
    result = fft_multiply(u, u)
    assert _digits_to_int(result) == _digits_to_int(u) ** 2


def test_fft_multiply_is_commutative():
    u = [12, 34, 56, 78, 90, 11, 22, 33]
    v = [98, 76, 54, 32, 10, 1, 2, 3]
    assert fft_multiply(u, v) == fft_multiply(v, u)


def test_fft_multiply_by_zero():
    u = [5, 6, 7, 8]
    assert fft_multiply(u, [0, 0, 0, 0]) == [0] * 8


def test_fft_multiply_length_mismatch():
    with pytest.raises(ValueError):
        fft_multiply([1, 2, 3, 4], [1, 2, 3, 4, 5, 6, 7, 8])


def test_fft_multiply_non_power_of_two():
    with pytest.raises(ValueError):
        fft_multiply([1] * 6, [1] * 6)


def test_fft_multiply_digit_out_of_range():
    with pytest.raises(ValueError):
        fft_multiply([1, 2, 100, 4], [1, 2, 3, 4])