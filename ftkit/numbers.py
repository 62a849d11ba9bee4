"""Integer parsing, formatting and small arithmetic helpers.

Several functions reproduce fixed-width machine arithmetic: ``atoi``
yields a 32-bit signed result, the power functions wrap modulo 2**64.
"""

from __future__ import annotations

import operator

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_U64_MASK = (1 << 64) - 1
# A shifted 32-bit signed one at bit 31 widens to every bit from 31 up.
_BIT31_MASK = _U64_MASK & ~((1 << 31) - 1)
_NEWTON_STEPS = 24


def _to_signed(value: int, bits: int) -> int:
    """Wrap ``value`` into a two's-complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit. Text without digits gives 0.
    When the 64-bit accumulator overflows the result is -1 for positive
    numbers and 0 for negative ones; otherwise the value is wrapped to a
    32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest[:1] not in tuple(_DIGITS):
        return 0
    number = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        previous = number
        number = _to_signed(number * 10 + _DIGITS.index(ch), 64)
        if previous > number:
            return 0 if sign == -1 else -1
    return _to_signed(number * sign, 32)


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(operator.index(n))


def absolute(a: int) -> int:
    """Return the absolute value of ``a``."""
    return a if a >= 0 else -a


def _c_remainder(a: int, b: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Euclid's greatest common divisor with truncating remainders.

    For negative arguments the result may carry a sign.
    """
    while b != 0:
        a, b = b, _c_remainder(a, b)
    return a


def _newton_root(nb: int) -> int:
    """Approximate integer square root after a fixed number of steps."""
    if nb <= 0:
        return 0
    xn = 2
    for _ in range(_NEWTON_STEPS):
        xn = (xn + nb // xn) // 2
    return xn


def int_sqrt(nb: int) -> int:
    """Return the exact integer square root of ``nb``, or 0 if there is none."""
    root = _newton_root(nb)
    return root if root * root == nb else 0


def is_prime(nb: int) -> bool:
    """Trial-division primality check.

    Values below 2 have no divisor to test and are reported as prime.
    """
    last = _newton_root(nb)
    return all(nb % divisor for divisor in range(2, last + 1))


def fast_bin_pow(a: int, b: int) -> int:
    """``a ** b`` modulo 2**64 by right-to-left binary exponentiation."""
    a &= _U64_MASK
    b &= _U64_MASK
    result = 1
    while b:
        if b & 1:
            result = (result * a) & _U64_MASK
        a = (a * a) & _U64_MASK
        b >>= 1
    return result


def fast_bit_pow(a: int, b: int) -> int:
    """``a ** b`` modulo 2**64 by left-to-right binary exponentiation.

    Only exponent bits 0 to 31 are examined; any bit from 31 upward
    counts as bit 31.
    """
    a &= _U64_MASK
    b &= _U64_MASK
    result = 1
    for i in range(31, 0, -1):
        bit = _BIT31_MASK if i == 31 else 1 << i
        if b & bit:
            result = (result * a) & _U64_MASK
        result = (result * result) & _U64_MASK
    if b & 1:
        result = (result * a) & _U64_MASK
    return result