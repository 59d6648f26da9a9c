"""Stored mathematical constants, known to 120 decimal places."""

from __future__ import annotations

from typing import Dict

from .number import Apm

__all__ = ["constant", "VALID_DECIMAL_PLACES"]

VALID_DECIMAL_PLACES = 120

_PI = Apm(
    "3.14159265358979323846264338327950288419716939937510582097494"
    "4592307816406286208998628034825342117067982148086513282306647094"
)
_E = Apm(
    "2.71828182845904523536028747135266249775724709369995957496696"
    "7627724076630353547594571382178525166427427466391932003059921817"
)
_LOG_10 = Apm(
    "2.30258509299404568401799145468436420760110148862877297603332"
    "7900967572609677352480235997205089598298341967784042286248633410"
)
_LOG_10R = Apm(
    ".434294481903251827651128918916605082294397005803666566114453"
    "7831658646492088707747292249493384317483187061067447663037336417"
)

_CONSTANTS: Dict[str, Apm] = {
    "pi": _PI,
    "half_pi": _PI * Apm(".5"),
    "two_pi": _PI * 2,
    "e": _E,
    "log_10": _LOG_10,
    "log_10r": _LOG_10R,
}


def constant(name: str, places: int = VALID_DECIMAL_PLACES) -> Apm:
    """Return the named constant rounded to ``places + 1`` significant digits.

    Names: pi, half_pi, two_pi, e, log_10 (natural log of 10) and log_10r
    (its reciprocal). ``places`` may be at most 120.
    """
    try:
        value = _CONSTANTS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown constant: {name!r}") from None
    if isinstance(places, bool) or not isinstance(places, int) or places < 0:
        raise ValueError(f"places must be a non-negative integer, got {places!r}")
    if places > VALID_DECIMAL_PLACES:
        raise ValueError(f"constants are known to {VALID_DECIMAL_PLACES} places only")
    return value.round(places)