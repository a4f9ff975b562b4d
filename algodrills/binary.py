"""Binary number conversions and bit tricks."""

from __future__ import annotations

import math


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def binary_to_decimal(digits: int) -> int:
    """Read the decimal digits of ``digits`` as a binary number.

    Each decimal digit is weighted by a power of two, lowest first; a value of
    zero or below yields zero.
    """
    value = 0
    weight = 1
    while digits > 0:
        digits, digit = divmod(digits, 10)
        value += digit * weight
        weight *= 2
    return value


def decimal_to_binary_recursive(n: int) -> str:
    """Return the binary digits of ``n`` as a string, built recursively."""
    _require_non_negative(n)
    if n // 2 == 0:
        return str(n % 2)
    return decimal_to_binary_recursive(n // 2) + str(n % 2)


def decimal_to_binary_loop(n: int) -> int:
    """Return an integer whose decimal digits are the binary digits of ``n``."""
    _require_non_negative(n)
    result = 0
    place = 1
    while n > 0:
        n, bit = divmod(n, 2)
        result += bit * place
        place *= 10
    return result


def reverse_bits(n: int) -> int:
    """Reverse the bits of ``n``, placing each bit in its own hex digit.

    The lowest bit of ``n`` becomes the highest hex digit of the result.
    """
    _require_non_negative(n)
    result = 0
    while n:
        result = (result << 4) | (n & 1)
        n >>= 1
    return result


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a power of two, using a logarithm instead of a loop."""
    if n <= 0:
        return False
    return (8 << int(math.log2(n))) == 8 * n