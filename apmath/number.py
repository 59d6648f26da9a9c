"""Arbitrary-precision signed decimal numbers.

An :class:`Apm` holds ``sign * 0.DDDD... * 10**exponent`` exactly. Addition,
subtraction and multiplication are exact. Division, reciprocals and
:meth:`Apm.round` take a ``places`` argument: the number of digits kept after
the first significant digit, so the result carries ``places + 1``
significant digits. Rounding is half-to-even.
"""

from __future__ import annotations

import functools
import re
import sys
from typing import List, Optional, Sequence, Tuple, Union

from .fft import fft_multiply, next_pow2

__all__ = ["ApmError", "Apm", "fast_multiply"]

# Largest operand, in base-100 digits, handed to the FFT product at once.
_MAX_FFT_BYTES = 524288
# Decimal strings longer than this are split before int/str conversion.
_CHUNK = 1000
_HASH_MODULUS = sys.hash_info.modulus

_NUMBER = re.compile(r"\s*([+-]?)(\d*)(?:\.(\d*))?(?:[eE]([+-]?\d+))?\s*\Z")


class ApmError(ArithmeticError, ValueError):
    """Raised for invalid input such as a malformed string or division by zero."""


@functools.lru_cache(maxsize=512)
def _pow10(n: int) -> int:
    return 10**n


def _ndigits(c: int) -> int:
    """Number of decimal digits of a non-negative integer (0 for 0)."""
    if c == 0:
        return 0
    t = max(1, (c.bit_length() * 1233) >> 12)
    while c >= _pow10(t):
        t += 1
    while t > 1 and c < _pow10(t - 1):
        t -= 1
    return t


def _int_to_digits(c: int) -> str:
    """Decimal digits of a non-negative integer, without a size limit."""
    if c < _pow10(_CHUNK):
        return str(c)
    half = _ndigits(c) // 2
    hi, lo = divmod(c, _pow10(half))
    return _int_to_digits(hi) + _int_to_digits(lo).rjust(half, "0")


def _digits_to_int(s: str) -> int:
    """Integer value of a string of decimal digits, without a size limit."""
    if len(s) <= _CHUNK:
        return int(s) if s else 0
    half = len(s) // 2
    return _digits_to_int(s[:-half]) * _pow10(half) + _digits_to_int(s[-half:])


def _strip_zeros(c: int, scale: int) -> Tuple[int, int]:
    """Remove trailing decimal zeros of ``c``, moving them into ``scale``."""
    k = 1
    while c % _pow10(k) == 0:
        c //= _pow10(k)
        scale += k
        k *= 2
    while k > 1:
        k //= 2
        if c % _pow10(k) == 0:
            c //= _pow10(k)
            scale += k
    return c, scale


def _round_half_even(c: int, drop: int, sticky: bool = False) -> int:
    """Drop the last ``drop`` digits of ``c`` rounding half to even.

    ``sticky`` tells that non-zero digits lie beyond those of ``c``.
    """
    if drop <= 0:
        return c
    q, r = divmod(c, _pow10(drop))
    half = 5 * _pow10(drop - 1)
    if r > half or (r == half and (sticky or q & 1)):
        q += 1
    return q


def _normalize(sign: int, coeff: int, scale: int) -> Tuple[int, int, int, int]:
    if sign == 0 or coeff == 0:
        return 0, 0, 0, 0
    coeff, scale = _strip_zeros(coeff, scale)
    return (1 if sign > 0 else -1), coeff, scale, _ndigits(coeff)


def _parse(text: str) -> Tuple[int, int, int]:
    match = _NUMBER.match(text)
    if match is None:
        raise ApmError(f"invalid number: {text!r}")
    sign_text, whole, frac, exp_text = match.groups()
    frac = frac or ""
    if not whole and not frac:
        raise ApmError(f"invalid number: {text!r}")
    coeff = _digits_to_int((whole + frac).lstrip("0"))
    scale = (int(exp_text) if exp_text else 0) - len(frac)
    return (-1 if sign_text == "-" else 1), coeff, scale


Operand = Union["Apm", int, str]


@functools.total_ordering
class Apm:
    """An immutable arbitrary-precision decimal number."""

    __slots__ = ("_sign", "_coeff", "_scale", "_ndig")

    def __init__(self, value: Operand = 0) -> None:
        if isinstance(value, Apm):
            sign, coeff, scale = value._sign, value._coeff, value._scale
        elif isinstance(value, int):
            sign, coeff, scale = (value > 0) - (value < 0), abs(value), 0
        elif isinstance(value, str):
            sign, coeff, scale = _parse(value)
        else:
            raise TypeError(f"cannot build Apm from {type(value).__name__}")
        self._sign, self._coeff, self._scale, self._ndig = _normalize(sign, coeff, scale)

    @classmethod
    def _make(cls, sign: int, coeff: int, scale: int) -> "Apm":
        obj = object.__new__(cls)
        obj._sign, obj._coeff, obj._scale, obj._ndig = _normalize(sign, coeff, scale)
        return obj

    @classmethod
    def _from_signed(cls, value: int, scale: int) -> "Apm":
        return cls._make((value > 0) - (value < 0), abs(value), scale)

    @staticmethod
    def _coerce(other: object) -> Optional["Apm"]:
        if isinstance(other, Apm):
            return other
        if isinstance(other, (int, str)):
            return Apm(other)
        return None

    @classmethod
    def _operand(cls, other: object) -> "Apm":
        value = cls._coerce(other)
        if value is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        return value

    # -- read-only views -------------------------------------------------

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        return self._sign

    @property
    def exponent(self) -> int:
        """Exponent of the form 0.DDDD... * 10**exponent (0 for zero)."""
        return self._scale + self._ndig if self._sign else 0

    @property
    def significant_digits(self) -> int:
        """Number of significant decimal digits (1 for zero)."""
        return self._ndig or 1

    @property
    def digits(self) -> str:
        """The significant decimal digits, most significant first."""
        return _int_to_digits(self._coeff)

    # -- arithmetic ------------------------------------------------------

    def _add(self, other: "Apm", other_sign: int) -> "Apm":
        if not other._sign:
            return self
        if not self._sign:
            return Apm._make(other_sign * other._sign, other._coeff, other._scale)
        scale = min(self._scale, other._scale)
        a = self._sign * self._coeff * _pow10(self._scale - scale)
        b = other_sign * other._sign * other._coeff * _pow10(other._scale - scale)
        return Apm._from_signed(a + b, scale)

    def __add__(self, other: object) -> "Apm":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._add(value, 1)

    def __radd__(self, other: object) -> "Apm":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Apm":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._add(value, -1)

    def __rsub__(self, other: object) -> "Apm":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return value._add(self, -1)

    def __mul__(self, other: object) -> "Apm":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Apm._make(
            self._sign * value._sign,
            self._coeff * value._coeff,
            self._scale + value._scale,
        )

    def __rmul__(self, other: object) -> "Apm":
        return self.__mul__(other)

    def __neg__(self) -> "Apm":
        return Apm._make(-self._sign, self._coeff, self._scale)

    def __abs__(self) -> "Apm":
        return Apm._make(abs(self._sign), self._coeff, self._scale)

    def __bool__(self) -> bool:
        return self._sign != 0

    def square(self) -> "Apm":
        """Return self * self."""
        return self * self

    def mul_digit(self, digit: int) -> "Apm":
        """Return self * digit for a digit from 0 to 99."""
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 99:
            raise ValueError(f"digit must be an integer from 0 to 99, got {digit!r}")
        return Apm._make(self._sign, self._coeff * digit, self._scale)

    def round(self, places: int) -> "Apm":
        """Round to ``places + 1`` significant digits; negative places keeps all."""
        if places < 0 or not self._sign:
            return self
        drop = self._ndig - (places + 1)
        if drop <= 0:
            return self
        return Apm._make(self._sign, _round_half_even(self._coeff, drop), self._scale + drop)

    # -- comparison ------------------------------------------------------

    def compare_absolute(self, other: Operand) -> int:
        """Return -1, 0 or 1 as |self| is less than, equal to or above |other|."""
        value = self._operand(other)
        if not self._sign or not value._sign:
            return bool(self._sign) - bool(value._sign)
        ea, eb = self.exponent, value.exponent
        if ea != eb:
            return 1 if ea > eb else -1
        width = max(self._ndig, value._ndig)
        a = self._coeff * _pow10(width - self._ndig)
        b = value._coeff * _pow10(width - value._ndig)
        return (a > b) - (a < b)

    def _compare(self, other: "Apm") -> int:
        if self._sign != other._sign:
            return 1 if self._sign > other._sign else -1
        return self._sign * self.compare_absolute(other)

    def __eq__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return (self._sign, self._coeff, self._scale) == (value._sign, value._coeff, value._scale)

    def __lt__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._compare(value) < 0

    def __le__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._compare(value) <= 0

    def __hash__(self) -> int:
        if not self._sign:
            return 0
        h = self._coeff % _HASH_MODULUS * pow(10, self._scale, _HASH_MODULUS) % _HASH_MODULUS
        if self._sign < 0:
            h = -h
        return -2 if h == -1 else h

    def is_integer(self) -> bool:
        """True if the value has no fractional part."""
        return self._scale >= 0

    # -- formatting ------------------------------------------------------

    def __str__(self) -> str:
        if not self._sign:
            return "0.0E+0"
        text = _int_to_digits(self._coeff)
        sign = "-" if self._sign < 0 else ""
        return f"{sign}{text[0]}.{text[1:] or '0'}E{self.exponent - 1:+d}"

    def __repr__(self) -> str:
        return f"Apm('{self}')"

    # -- division --------------------------------------------------------

    def divide(self, other: Operand, places: int) -> "Apm":
        """Return self / other rounded to ``places + 1`` significant digits."""
        value = self._operand(other)
        if places < 0:
            raise ValueError("places must not be negative")
        if not value._sign:
            raise ApmError("Divide by 0")
        if not self._sign:
            return Apm(0)
        keep = places + 1
        shift = keep + 1 + value._ndig - self._ndig
        if shift >= 0:
            num, den = self._coeff * _pow10(shift), value._coeff
        else:
            num, den = self._coeff, value._coeff * _pow10(-shift)
        q, r = divmod(num, den)
        drop = _ndigits(q) - keep
        q = _round_half_even(q, drop, sticky=r != 0)
        return Apm._make(
            self._sign * value._sign,
            q,
            self._scale - value._scale - shift + max(drop, 0),
        )

    def reciprocal(self, places: int) -> "Apm":
        """Return 1 / self rounded to ``places + 1`` significant digits."""
        if not self._sign:
            raise ApmError("Reciprocal of 0")
        return Apm(1).divide(self, places)

    def integer_divide(self, other: Operand) -> "Apm":
        """Return self / other truncated toward zero to an integer."""
        value = self._operand(other)
        if not value._sign:
            raise ApmError("Divide by 0")
        if value.compare_absolute(self) > 0:
            return Apm(0)
        shift = self._scale - value._scale
        if shift >= 0:
            q = self._coeff * _pow10(shift) // value._coeff
        else:
            q = self._coeff // (value._coeff * _pow10(-shift))
        return Apm._make(self._sign * value._sign, q, 0)

    def integer_div_rem(self, other: Operand) -> Tuple["Apm", "Apm"]:
        """Return (quotient truncated toward zero, self - quotient * other)."""
        value = self._operand(other)
        quotient = self.integer_divide(value)
        return quotient, self - quotient * value


def _base100(digits: str) -> List[int]:
    it = iter(digits)
    return [10 * int(hi) + int(lo) for hi, lo in zip(it, it)]


def _pairs_to_int(pairs: Sequence[int]) -> int:
    return _digits_to_int("".join(f"{d:02d}" for d in pairs))


def _int_to_pairs(value: int, count: int) -> List[int]:
    return _base100(_int_to_digits(value).rjust(2 * count, "0"))


def _multiply_pairs(u: Sequence[int], v: Sequence[int]) -> List[int]:
    """Product of two equal-length base-100 digit lists, 2*len digits long."""
    size = len(u)
    if size <= _MAX_FFT_BYTES:
        return fft_multiply(u, v)
    # ab = (B^2 + B) A1B1 + B (A1 - A0)(B0 - B1) + (B + 1) A0B0
    mi = size // 2
    a1, a0, b1, b0 = u[:mi], u[mi:], v[:mi], v[mi:]
    high = _pairs_to_int(_multiply_pairs(a1, b1))
    low = _pairs_to_int(_multiply_pairs(a0, b0))
    d1 = _pairs_to_int(a1) - _pairs_to_int(a0)
    d2 = _pairs_to_int(b0) - _pairs_to_int(b1)
    cross = 0
    if d1 and d2:
        cross = _pairs_to_int(
            _multiply_pairs(_int_to_pairs(abs(d1), mi), _int_to_pairs(abs(d2), mi))
        )
        if (d1 < 0) != (d2 < 0):
            cross = -cross
    base = _pow10(2 * mi)
    total = (base * base + base) * high + base * cross + (base + 1) * low
    return _int_to_pairs(total, 2 * size)


def fast_multiply(a: Operand, b: Operand) -> Apm:
    """Multiply two numbers through the FFT product of their digit strings."""
    x, y = Apm(a), Apm(b)
    if not x.sign or not y.sign:
        return Apm(0)
    dx, dy = x.digits, y.digits
    n = max(8, next_pow2(max(len(dx), len(dy))))
    product = _multiply_pairs(_base100(dx.ljust(n, "0")), _base100(dy.ljust(n, "0")))
    return Apm._make(x.sign * y.sign, _pairs_to_int(product), x.exponent + y.exponent - 2 * n)