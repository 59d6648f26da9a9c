"""Conversion between :class:`~apmath.number.Apm` numbers and binary floats."""

from __future__ import annotations

import math

from .number import Apm, ApmError

__all__ = ["to_float", "from_float"]

# 0.1e-323 and below becomes zero; 0.9e+309 and above becomes infinity.
_EXP_MIN = -323
_EXP_MAX = 309


def to_float(x: object) -> float:
    """Return the float nearest to ``x`` (round half to even).

    Numbers too large give a signed infinity, numbers too small a signed zero.
    """
    value = Apm(x)
    if not value.sign:
        return 0.0
    if value.exponent > _EXP_MAX:
        return math.copysign(math.inf, value.sign)
    if value.exponent < _EXP_MIN:
        return math.copysign(0.0, value.sign)
    sign = "-" if value.sign < 0 else ""
    return float(f"{sign}0.{value.digits}e{value.exponent}")


def from_float(d: float, places: int = -1) -> Apm:
    """Return the exact value of ``d`` rounded to ``places + 1`` significant digits.

    A negative ``places`` keeps the exact binary value. NaN and infinities
    raise :class:`ApmError`.
    """
    d = float(d)
    if not math.isfinite(d):
        raise ApmError("invalid input (likely a NAN or INF)")
    if d == 0.0:
        return Apm(0)
    numerator, denominator = d.as_integer_ratio()
    k = denominator.bit_length() - 1
    exact = Apm(numerator * 5**k)
    if k:
        exact = exact * Apm(f"1e-{k}")
    return exact.round(places)