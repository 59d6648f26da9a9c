# apmath

Arbitrary precision signed decimal numbers in pure Python.

An `Apm` (in `apmath.number`) holds `sign * 0.DDDD... * 10**exponent`
exactly. Addition, subtraction and multiplication are exact. Division,
reciprocals and rounding take a `places` argument: the number of digits kept
after the first significant digit, so a result carries `places + 1`
significant digits. Rounding is half to even.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Numbers

```python
from apmath.number import Apm

a = Apm("3978381489565057925092524867")
b = Apm("53828048319274")

q, r = a.integer_div_rem(b)    # quotient truncated toward zero, remainder
print(q, r)

x = Apm(2).divide(Apm(3), 30)  # 2/3 to 31 significant digits
print(x.round(10))
```

`Apm` is built from an `int`, a string such as `"-4.987e-12"`, or another
`Apm`, and is immutable and hashable. It supports `+`, `-`, `*` (also with
`int` and `str` operands), unary `-`, `abs()` and the comparison operators.
Other members: `square()`, `mul_digit(digit)` for a digit 0..99,
`round(places)`, `compare_absolute(other)`, `is_integer()`,
`divide(other, places)`, `reciprocal(places)`, `integer_divide(other)`,
`integer_div_rem(other)`, and the read-only properties `sign`, `exponent`,
`significant_digits` and `digits`. `str()` gives scientific notation such as
`3.14E+0`.

`apmath.number.fast_multiply(a, b)` multiplies through an FFT product of the
base-100 digit strings; it gives the same value as `a * b`. The transform
itself is in `apmath.fft`: `next_pow2`, `rdft_forward`, `rdft_inverse` and
`fft_multiply` (for equal-length base-100 digit lists whose length is a power
of two, at least 4).

## Integer helpers

```python
from apmath.number import Apm
from apmath.integer import gcd, lcm, factorial, powmod, floor, ceil

print(gcd(Apm(8 * 3 * 7 * 19 * 53), Apm(16 * 3 * 5 * 19 * 23 * 137)))
print(factorial(Apm(30)))
print(powmod(Apm(13), Apm(17), Apm(1000)))
print(floor(Apm("-100.5")), ceil(Apm("100.5")))
```

`apmath.integer` also has `away`, `integer_part`, `fraction`,
`integer_pow_nr(x, n)` (exact power, n >= 0) and `ishift(x, bits)`
(`x * 2**bits`, exact).

## Powers, conversion, constants, random numbers

```python
from apmath.number import Apm
from apmath.powers import cbrt, integer_pow
from apmath.conversion import to_float, from_float
from apmath.constants import constant
from apmath.rng import RandomGenerator

print(cbrt(Apm(27), 20))
print(integer_pow(Apm("-3.12"), 25, -5))
print(to_float(Apm("0.1")), from_float(0.1, -1))
print(constant("pi", 50))     # pi, half_pi, two_pi, e, log_10, log_10r; up to 120 places

rng = RandomGenerator("12345")
print(rng.next())             # a 15-digit value in [0, 1); the generator is also iterable
```

Without a seed, `RandomGenerator` seeds itself from the current time.

## Errors

Division by zero, malformed number strings and invalid inputs to
`gcd`, `factorial`, `powmod` and `from_float` raise `ApmError`, a subclass of
both `ArithmeticError` and `ValueError`. Bad `places` or exponent arguments
raise `ValueError`.

## Prime finder

The package installs a command that prints the first ten primes starting
from a given number (3 at least):

```
apmath-primes 1000000000000
```

The same is available as `apmath.primes.primes_from(start, count)` and
`apmath.primes.is_prime(n)`.

## What it does not do

There are no square roots, logarithms, exponentials, real-valued powers, or
trigonometric and hyperbolic functions, and no fixed-point string formatting;
only the cube root, integer powers and the stored constants above.