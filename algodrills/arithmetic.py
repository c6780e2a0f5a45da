"""Digit-array addition and fast modular exponentiation."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import zip_longest

__all__ = ["digit_array_sum", "modular_exponentiation"]


def digit_array_sum(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two numbers given as most-significant-first digit lists."""
    digits: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    digits.reverse()
    return digits


def modular_exponentiation(x: int, n: int, m: int) -> int:
    """Return ``x ** n % m`` by repeated squaring; ``n == 0`` gives 1."""
    result = 1
    while n > 0:
        if n & 1:
            result = result * x % m
        x = x * x % m
        n >>= 1
    return result