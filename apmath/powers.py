"""Cube roots and integer powers rounded to a number of places."""

from __future__ import annotations

from .number import Apm, _digits_to_int, _int_to_digits

__all__ = ["cbrt", "integer_pow"]

# Extra digits carried through the intermediate results.
_GUARD = 12


def _icbrt(n: int) -> int:
    """Largest integer r with r**3 <= n, for n >= 0."""
    if n == 0:
        return 0
    x = 1 << ((n.bit_length() + 2) // 3)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y


def _check_places(places: int) -> None:
    if isinstance(places, bool) or not isinstance(places, int) or places < 0:
        raise ValueError(f"places must be a non-negative integer, got {places!r}")


def cbrt(x: object, places: int) -> Apm:
    """Return the cube root of ``x`` rounded to ``places + 1`` significant digits.

    Negative inputs give negative roots.
    """
    _check_places(places)
    value = Apm(x)
    if not value.sign:
        return Apm(0)
    digits = value.digits
    coeff = _digits_to_int(digits)
    scale = value.exponent - len(digits)

    extra = max(0, 3 * (places + _GUARD) - len(digits))
    extra += (scale - extra) % 3
    scaled = coeff * 10**extra
    root = _icbrt(scaled)
    root_digits = _int_to_digits(root)
    root_scale = (scale - extra) // 3
    if root**3 != scaled:
        # Mark the discarded remainder so that rounding never sees a false tie.
        root_digits += "1"
        root_scale -= 1
    sign = "-" if value.sign < 0 else ""
    return Apm(f"{sign}{root_digits}e{root_scale}").round(places)


def _positive_pow(x: Apm, dplaces: int, n: int) -> Apm:
    """x ** n with every intermediate product rounded to ``dplaces``."""
    if n < 2:
        return x if n else Apm(1)
    half = _positive_pow(x, dplaces, n >> 1).round(dplaces)
    if n & 1:
        return half * (x * half).round(dplaces)
    return half.square()


def integer_pow(x: object, places: int, n: int) -> Apm:
    """Return ``x ** n`` for an integer ``n``, rounded to ``places + 1`` significant digits.

    A zero base gives zero for every exponent.
    """
    _check_places(places)
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"exponent must be an integer, got {n!r}")
    value = Apm(x)
    if not value.sign:
        return Apm(0)
    if n >= 0:
        return _positive_pow(value, places + 8, n).round(places)
    return _positive_pow(value, places + 8, -n).reciprocal(places)