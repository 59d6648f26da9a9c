"""Prime testing by trial division and a command listing primes."""

from __future__ import annotations

import math
import sys
from typing import List, Optional, Sequence

from .number import Apm, ApmError, _digits_to_int

__all__ = ["is_prime", "primes_from", "main"]

# Steps between successive candidates coprime to 2, 3, 5 and 7, from 11.
_INCREMENTS = (
    2, 4, 2, 4, 6, 2, 6, 4, 2, 4, 6, 6, 2, 6, 4, 2,
    6, 4, 6, 8, 4, 2, 4, 2, 4, 8, 6, 4, 6, 2, 4, 6,
    2, 6, 6, 4, 2, 4, 6, 2, 6, 4, 2, 4, 2, 10, 2, 10,
)


def _to_int(value: Apm) -> int:
    if not value.is_integer():
        raise ValueError(f"integer expected, got {value}")
    if not value.sign:
        return 0
    digits = value.digits
    return value.sign * _digits_to_int(digits) * 10 ** (value.exponent - len(digits))


def _integer_string(value: Apm) -> str:
    if not value.sign:
        return "0"
    digits = value.digits
    sign = "-" if value.sign < 0 else ""
    return sign + digits + "0" * (value.exponent - len(digits))


def is_prime(n: object) -> bool:
    """True if the integer ``n`` is prime."""
    value = _to_int(Apm(n))
    if value <= 10:
        return value in (2, 3, 5, 7)
    if any(value % p == 0 for p in (2, 3, 5, 7)):
        return False
    limit = math.isqrt(value) + 2
    divisor = 11
    index = 0
    while divisor < limit:
        if value % divisor == 0:
            return False
        divisor += _INCREMENTS[index]
        index = (index + 1) % len(_INCREMENTS)
    return True


def primes_from(start: object, count: int = 10) -> List[Apm]:
    """Return the first ``count`` odd primes not below ``start`` (3 at least)."""
    begin = Apm(start)
    if begin < 3:
        begin = Apm(3)
    candidate = begin.integer_divide(2) * 2 + 1
    found: List[Apm] = []
    while len(found) < count:
        if is_prime(candidate):
            found.append(candidate)
        candidate = candidate + 2
    return found


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the first ten primes starting at the number given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: primenum number")
        print("       find the first 10 prime numbers starting with 'number'")
        return 4
    try:
        primes = primes_from(args[0])
    except ApmError as exc:
        print(f"primenum: {exc}", file=sys.stderr)
        return 1
    for prime in primes:
        print(_integer_string(prime))
    return 0