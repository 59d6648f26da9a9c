"""Real discrete Fourier transform and FFT-based multiplication of base-100 digit strings.

Digit strings are most-significant first, each element a base-100 digit (0..99).
The transform routines follow the split-radix layout of a packed real FFT:
for an input of length ``n`` the output holds ``R[0], R[n/2]`` in the first
two slots followed by the complex bins ``1 .. n/2 - 1`` as (re, im) pairs.
"""

from __future__ import annotations

import math
from typing import List, Sequence

__all__ = ["next_pow2", "rdft_forward", "rdft_inverse", "fft_multiply"]

_HALF_PI = 1.5707963267948966
_SQRT2R = 0.7071067811865476
_RDFT_LOOP = 64


def next_pow2(v: int) -> int:
    """Return the smallest power of two that is >= v (0 for 0)."""
    if v < 0:
        raise ValueError("next_pow2 needs a non-negative integer")
    if v == 0:
        return 0
    return 1 << (v - 1).bit_length()


def _is_pow2(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _rev_step(x: int, top: int) -> int:
    """Advance a bit-reversed counter ``x`` whose highest bit is ``top``."""
    while True:
        x ^= top
        if top <= x:
            return x
        top >>= 1


def _swap_pair(a: List[float], i: int, j: int) -> None:
    a[i], a[j] = a[j], a[i]
    a[i + 1], a[j + 1] = a[j + 1], a[i + 1]


def _bitrv2(n: int, a: List[float]) -> None:
    i = n >> 2
    half = n >> 1
    m = 2
    while m < i:
        i >>= 1
        m <<= 1
    j0 = 0
    if m == i:
        for k0 in range(0, m, 2):
            k = k0
            j = j0
            while j < j0 + k0:
                _swap_pair(a, j, k)
                _swap_pair(a, j + m, k + 2 * m)
                _swap_pair(a, j + 2 * m, k + m)
                _swap_pair(a, j + 3 * m, k + 3 * m)
                k = _rev_step(k, half)
                j += 2
            k = j0 + k0 + m
            _swap_pair(a, k, k + m)
            j0 = _rev_step(j0, half)
    else:
        for k0 in range(2, m, 2):
            j0 = _rev_step(j0, half)
            k = k0
            j = j0
            while j < j0 + k0:
                _swap_pair(a, j, k)
                _swap_pair(a, j + m, k + m)
                k = _rev_step(k, half)
                j += 2


def _radix4_plain(a: List[float], j: int, l: int) -> None:
    """Radix-4 butterfly with unit twiddles."""
    j1 = j + l
    j2 = j1 + l
    j3 = j2 + l
    x0i = a[j + 1] + a[j1 + 1]
    x1i = a[j + 1] - a[j1 + 1]
    x0r = a[j] + a[j1]
    x1r = a[j] - a[j1]
    x2i = a[j2 + 1] + a[j3 + 1]
    x3i = a[j2 + 1] - a[j3 + 1]
    x2r = a[j2] + a[j3]
    x3r = a[j2] - a[j3]
    a[j] = x0r + x2r
    a[j + 1] = x0i + x2i
    a[j2] = x0r - x2r
    a[j2 + 1] = x0i - x2i
    a[j1] = x1r - x3i
    a[j1 + 1] = x1i + x3r
    a[j3] = x1r + x3i
    a[j3 + 1] = x1i - x3r


def _radix4_eighth(a: List[float], j: int, l: int) -> None:
    """Radix-4 butterfly with the pi/4 twiddle set."""
    j1 = j + l
    j2 = j1 + l
    j3 = j2 + l
    x0i = a[j + 1] + a[j1 + 1]
    x1i = a[j + 1] - a[j1 + 1]
    x0r = a[j] + a[j1]
    x1r = a[j] - a[j1]
    x2i = a[j2 + 1] + a[j3 + 1]
    x3i = a[j2 + 1] - a[j3 + 1]
    x2r = a[j2] + a[j3]
    x3r = a[j2] - a[j3]
    a[j] = x0r + x2r
    a[j + 1] = x0i + x2i
    a[j2] = x2i - x0i
    a[j2 + 1] = x0r - x2r
    x0r = x1r - x3i
    x0i = x1i + x3r
    a[j1] = _SQRT2R * (x0r - x0i)
    a[j1 + 1] = _SQRT2R * (x0r + x0i)
    x0r = x3i + x1r
    x0i = x3r - x1i
    a[j3] = _SQRT2R * (x0i - x0r)
    a[j3 + 1] = _SQRT2R * (x0i + x0r)


def _radix4_twiddled(
    a: List[float],
    j: int,
    l: int,
    w1: tuple,
    w2: tuple,
    w3: tuple,
) -> None:
    """Radix-4 butterfly with general twiddle factors."""
    w1r, w1i = w1
    w2r, w2i = w2
    w3r, w3i = w3
    j1 = j + l
    j2 = j1 + l
    j3 = j2 + l
    x0i = a[j + 1] + a[j1 + 1]
    x1i = a[j + 1] - a[j1 + 1]
    x0r = a[j] + a[j1]
    x1r = a[j] - a[j1]
    x2i = a[j2 + 1] + a[j3 + 1]
    x3i = a[j2 + 1] - a[j3 + 1]
    x2r = a[j2] + a[j3]
    x3r = a[j2] - a[j3]
    a[j] = x0r + x2r
    a[j + 1] = x0i + x2i
    x0r -= x2r
    x0i -= x2i
    a[j2] = w2r * x0r - w2i * x0i
    a[j2 + 1] = w2r * x0i + w2i * x0r
    x0r = x1r - x3i
    x0i = x1i + x3r
    a[j1] = w1r * x0r - w1i * x0i
    a[j1 + 1] = w1r * x0i + w1i * x0r
    x0r = x1r + x3i
    x0i = x1i - x3r
    a[j3] = w3r * x0r - w3i * x0i
    a[j3 + 1] = w3r * x0i + w3i * x0r


def _twiddles(angle: float):
    """Return the two twiddle sets used by one stride of a radix-4 stage."""
    wk1i = math.sin(angle)
    wk1r = math.cos(angle)
    wk2i = 2 * wk1i * wk1r
    wk2r = 1 - 2 * wk1i * wk1i
    wk3i = 2 * wk2i * wk1r - wk1i
    wk3r = wk1r - 2 * wk2i * wk1i
    first = ((wk1r, wk1i), (wk2r, wk2i), (wk3r, wk3i))
    x0r = _SQRT2R * (wk1r - wk1i)
    wk1i = _SQRT2R * (wk1r + wk1i)
    wk1r = x0r
    wk3i = 2 * wk2r * wk1r - wk1i
    wk3r = wk1r - 2 * wk2r * wk1i
    second = ((wk1r, wk1i), (-wk2i, wk2r), (wk3r, wk3i))
    return first, second


def _cft1st(n: int, a: List[float]) -> None:
    _radix4_plain(a, 0, 2)
    _radix4_eighth(a, 8, 2)
    ew = _HALF_PI / n
    kr = 0
    for j in range(16, n, 16):
        kr = _rev_step(kr, n >> 2)
        first, second = _twiddles(ew * kr)
        _radix4_twiddled(a, j, 2, *first)
        _radix4_twiddled(a, j + 8, 2, *second)


def _cftmdl(n: int, l: int, a: List[float]) -> None:
    m = l << 2
    for j in range(0, l, 2):
        _radix4_plain(a, j, l)
    for j in range(m, l + m, 2):
        _radix4_eighth(a, j, l)
    ew = _HALF_PI / n
    kr = 0
    m2 = 2 * m
    for k in range(m2, n, m2):
        kr = _rev_step(kr, n >> 2)
        first, second = _twiddles(ew * kr)
        for j in range(k, l + k, 2):
            _radix4_twiddled(a, j, l, *first)
        for j in range(k + m, l + k + m, 2):
            _radix4_twiddled(a, j, l, *second)


def _cft_stages(n: int, a: List[float]) -> int:
    l = 2
    if n > 8:
        _cft1st(n, a)
        l = 8
        while (l << 2) < n:
            _cftmdl(n, l, a)
            l <<= 2
    return l


def _cftfsub(n: int, a: List[float]) -> None:
    l = _cft_stages(n, a)
    if (l << 2) == n:
        for j in range(0, l, 2):
            _radix4_plain(a, j, l)
    else:
        for j in range(0, l, 2):
            j1 = j + l
            x0i = a[j + 1] - a[j1 + 1]
            x0r = a[j] - a[j1]
            a[j] += a[j1]
            a[j + 1] += a[j1 + 1]
            a[j1] = x0r
            a[j1 + 1] = x0i


def _cftbsub(n: int, a: List[float]) -> None:
    l = _cft_stages(n, a)
    if (l << 2) == n:
        for j in range(0, l, 2):
            j1 = j + l
            j2 = j1 + l
            j3 = j2 + l
            x0i = -a[j + 1] - a[j1 + 1]
            x1i = -a[j + 1] + a[j1 + 1]
            x0r = a[j] + a[j1]
            x1r = a[j] - a[j1]
            x2i = a[j2 + 1] + a[j3 + 1]
            x3i = a[j2 + 1] - a[j3 + 1]
            x2r = a[j2] + a[j3]
            x3r = a[j2] - a[j3]
            a[j] = x0r + x2r
            a[j + 1] = x0i - x2i
            a[j2] = x0r - x2r
            a[j2 + 1] = x0i + x2i
            a[j1] = x1r - x3i
            a[j1 + 1] = x1i - x3r
            a[j3] = x1r + x3i
            a[j3 + 1] = x1i + x3r
    else:
        for j in range(0, l, 2):
            j1 = j + l
            x0i = -a[j + 1] + a[j1 + 1]
            x0r = a[j] - a[j1]
            a[j] += a[j1]
            a[j + 1] = -a[j + 1] - a[j1 + 1]
            a[j1] = x0r
            a[j1 + 1] = x0i


def _rft_sub(n: int, a: List[float], inverse: bool) -> None:
    """Post-processing (forward) or pre-processing (inverse) of the packed real FFT."""
    ec = 2 * _HALF_PI / n
    wkr = 0.0
    wki = 0.0
    wdr = math.sin(ec)
    wdi = math.cos(ec)
    wdi *= wdr
    wdr *= wdr
    w1i = 2 * wdi
    w1r = 1 - 2 * wdr
    ss = 2 * w1i
    i = n >> 1
    if inverse:
        a[i + 1] = -a[i + 1]

    def mix(p: int, q: int, cr: float, ci: float) -> None:
        xi = a[p + 1] + a[q + 1]
        xr = a[p] - a[q]
        if inverse:
            yi = cr * xi - ci * xr
            yr = cr * xr + ci * xi
            a[p] -= yr
            a[p + 1] = yi - a[p + 1]
            a[q] += yr
            a[q + 1] = yi - a[q + 1]
        else:
            yi = cr * xi + ci * xr
            yr = cr * xr - ci * xi
            a[p] -= yr
            a[p + 1] -= yi
            a[q] += yr
            a[q + 1] -= yi

    while True:
        i0 = max(i - 4 * _RDFT_LOOP, 4)
        for j in range(i - 4, i0 - 1, -4):
            k = n - j
            mix(j + 2, k - 2, wdr, wdi)
            wkr += ss * wdi
            wki += ss * (0.5 - wdr)
            mix(j, k, wkr, wki)
            wdr += ss * wki
            wdi += ss * (0.5 - wkr)
        if i0 == 4:
            break
        wkr = math.sin(ec * i0)
        wki = math.cos(ec * i0)
        wki *= 0.5
        wkr *= 0.5
        wdi = wkr * w1i + wki * w1r
        wdr = 0.5 - (wkr * w1r - wki * w1i)
        wkr = 0.5 - wkr
        i = i0
    mix(2, n - 2, wdr, wdi)
    if inverse:
        a[1] = -a[1]


def _checked_copy(values: Sequence[float]) -> List[float]:
    a = [float(x) for x in values]
    if len(a) < 4 or not _is_pow2(len(a)):
        raise ValueError("transform length must be a power of two and at least 4")
    return a


def rdft_forward(a: Sequence[float]) -> List[float]:
    """Forward real DFT; returns a new list in packed layout."""
    out = _checked_copy(a)
    n = len(out)
    if n > 4:
        _bitrv2(n, out)
        _cftfsub(n, out)
        _rft_sub(n, out, inverse=False)
    else:
        _cftfsub(n, out)
    out[0], out[1] = out[0] + out[1], out[0] - out[1]
    return out


def rdft_inverse(a: Sequence[float]) -> List[float]:
    """Inverse of rdft_forward, unnormalised: the result is scaled by n/2."""
    out = _checked_copy(a)
    n = len(out)
    out[1] = 0.5 * (out[0] - out[1])
    out[0] -= out[1]
    if n > 4:
        _rft_sub(n, out, inverse=True)
        _bitrv2(n, out)
        _cftbsub(n, out)
    else:
        _cftfsub(n, out)
    return out


def _to_base10000(digits: Sequence[int]) -> List[float]:
    return [float(100 * hi + lo) for hi, lo in zip(digits[0::2], digits[1::2])]


def fft_multiply(u: Sequence[int], v: Sequence[int]) -> List[int]:
    """Multiply two equal-length base-100 digit strings; returns 2*len digits."""
    size = len(u)
    if len(v) != size:
        raise ValueError("operands must have the same number of digits")
    if size < 4 or not _is_pow2(size):
        raise ValueError("operand length must be a power of two and at least 4")
    for digit in (*u, *v):
        if not 0 <= digit <= 99:
            raise ValueError(f"base-100 digit out of range: {digit!r}")

    padding = [0.0] * (size // 2)
    fa = rdft_forward(_to_base10000(u) + padding)
    fb = rdft_forward(_to_base10000(v) + padding)

    product = [fb[0] * fa[0], fb[1] * fa[1]]
    for br, bi, ar, ai in zip(fb[2::2], fb[3::2], fa[2::2], fa[3::2]):
        product.append(br * ar - bi * ai)
        product.append(br * ai + bi * ar)

    conv = rdft_inverse(product)
    scale = 2.0 / size
    carry = 0
    low_first: List[int] = []
    for value in reversed(conv[: size - 1]):
        carry, limb = divmod(round(scale * value) + carry, 10000)
        high, low = divmod(limb, 100)
        low_first.extend((low, high))
    high, low = divmod(carry, 100)
    low_first.extend((low, high))
    return low_first[::-1]