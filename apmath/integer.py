"""Integer-oriented operations: truncation, rounding toward infinities,
GCD/LCM, factorial, exact powers, binary shifts and modular powers."""

from __future__ import annotations

import math

from .number import Apm, ApmError, _digits_to_int

__all__ = [
    "away",
    "integer_part",
    "fraction",
    "floor",
    "ceil",
    "gcd",
    "lcm",
    "factorial",
    "integer_pow_nr",
    "ishift",
    "powmod",
]


def _to_int(x: Apm) -> int:
    """Exact Python integer of an integral Apm."""
    if not x.sign:
        return 0
    magnitude = _digits_to_int(x.digits) * 10 ** (x.exponent - len(x.digits))
    return x.sign * magnitude


def integer_part(x: object) -> Apm:
    """Return ``x`` truncated toward zero."""
    return Apm(x).integer_divide(1)


def away(x: object) -> Apm:
    """Return ``x`` rounded to an integer away from zero."""
    value = Apm(x)
    if value.is_integer():
        return value
    return integer_part(value) + value.sign


def fraction(x: object) -> Apm:
    """Return the fractional part of ``x``, carrying the sign of ``x``."""
    value = Apm(x)
    return value - integer_part(value)


def floor(x: object) -> Apm:
    """Return the largest integer not above ``x``."""
    value = Apm(x)
    return away(value) if value.sign < 0 else integer_part(value)


def ceil(x: object) -> Apm:
    """Return the smallest integer not below ``x``."""
    value = Apm(x)
    return away(value) if value.sign > 0 else integer_part(value)


def gcd(u: object, v: object) -> Apm:
    """Greatest common divisor of two integers (non-negative)."""
    a, b = Apm(u), Apm(v)
    if not a.is_integer() or not b.is_integer():
        raise ApmError("gcd: non-integer input")
    return Apm(math.gcd(_to_int(a), _to_int(b)))


def lcm(u: object, v: object) -> Apm:
    """Least common multiple, computed as (u / gcd(u, v)) * v."""
    a, b = Apm(u), Apm(v)
    return a.integer_divide(gcd(a, b)) * b


def factorial(x: object) -> Apm:
    """Return ``x!`` for an integer 0 <= x < 10**8."""
    value = Apm(x)
    if value.sign < 0 or value.exponent > 8 or not value.is_integer():
        raise ApmError("factorial: invalid input")
    return Apm(math.factorial(_to_int(value)))


def integer_pow_nr(x: object, n: int) -> Apm:
    """Return ``x ** n`` exactly, without rounding, for an integer n >= 0."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"exponent must be a non-negative integer, got {n!r}")
    base = Apm(x)
    result = Apm(1)
    while n:
        if n & 1:
            result = result * base
        n >>= 1
        if n:
            base = base.square()
    return result


def ishift(x: object, bits: int) -> Apm:
    """Return ``x * 2 ** bits`` exactly."""
    value = Apm(x)
    if bits >= 0:
        return value * (1 << bits)
    k = -bits
    return value * 5**k * Apm(f"1e-{k}")


def powmod(x: object, n: object, m: object) -> Apm:
    """Return ``x ** n mod m`` with 0 <= result < |m|, for integers x, n >= 0, m != 0.

    An exponent below one gives 1.
    """
    base, power, modulus = Apm(x), Apm(n), Apm(m)
    if power.exponent <= 0:
        return Apm(1)
    if not (base.is_integer() and power.is_integer() and modulus.is_integer()):
        raise ApmError("powmod: non-integer input")
    if power.sign < 0:
        raise ApmError("powmod: negative exponent")
    if not modulus.sign:
        raise ApmError("powmod: modulus is 0")
    return Apm(pow(_to_int(base), _to_int(power), abs(_to_int(modulus))))