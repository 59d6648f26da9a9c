"""Linear congruential random numbers in [0, 1).

X = (a * X + a) mod 10**15 with a = 716805947629621, a prime with
a mod 200 = 21, so every residue appears before the sequence repeats.
"""

from __future__ import annotations

import time
from typing import Iterator, Optional, Union

from .integer import fraction
from .number import Apm

__all__ = ["RandomGenerator"]

_MULTIPLIER = Apm(".716805947629621")
_MODULUS_DIGITS = 15


class RandomGenerator:
    """Generator of decimal random numbers with 15 digits."""

    def __init__(self, seed: Optional[Union[Apm, int, str]] = None) -> None:
        self._state = Apm(0)
        self.set_seed(int(time.time()) if seed is None else seed)

    def set_seed(self, seed: Union[Apm, int, str]) -> None:
        """Restart the sequence from ``seed``."""
        self._state = Apm(seed)

    def next(self) -> Apm:
        """Return the next number of the sequence."""
        value = fraction(self._state * _MULTIPLIER + _MULTIPLIER)
        self._state = value * Apm(f"1e{_MODULUS_DIGITS}")
        return value

    def __iter__(self) -> Iterator[Apm]:
        return self

    def __next__(self) -> Apm:
        return self.next()