"""Arbitrary precision decimal numbers with integer helpers, rounded powers and FFT multiplication."""

__version__ = "0.1.0"
__all__ = [
    "conversion",
    "constants",
    "fft",
    "integer",
    "number",
    "powers",
    "primes",
    "rng",
]