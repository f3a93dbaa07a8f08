"""Small number-theory helpers: divisor sums and digit reversal."""

from math import isqrt

__all__ = ["divisor_sum", "sum_of_divisors", "reverse_digits"]


def divisor_sum(n):
    """Return the sum of all positive divisors of ``n`` (0 for ``n < 1``)."""
    if n < 1:
        return 0
    total = 0
    for i in range(1, isqrt(n) + 1):
        if n % i == 0:
            total += i
            partner = n // i
            if partner != i:
                total += partner
    return total


def sum_of_divisors(n):
    """Return the sum of ``divisor_sum(i)`` for every ``i`` from 1 to ``n``."""
    return sum(divisor_sum(i) for i in range(1, n + 1))


def reverse_digits(n):
    """Return ``n`` with its decimal digits reversed, keeping its sign.

    Trailing zeros vanish: 120 becomes 21.
    """
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    reversed_value = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value