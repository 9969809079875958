"""Integer exercises: digit reversal, searches, factorisation, base conversion."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any

from .linked_list import ListNode


class LinkedStack:
    """A stack kept as a chain of linked nodes."""

    def __init__(self) -> None:
        self._top: ListNode | None = None

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = ListNode(value, self._top)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.next
        return node.value

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._top is None


def reverse_int(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def find_sequences(total: int) -> list[tuple[int, int, int, int, int]]:
    """Find five positive integers summing to ``total``, each a multiple (at
    least double) of the one before it."""
    found = []
    for a in range(1, total + 1):
        for j in range(2, total // a + 1):
            b = a * j
            for k in range(2, total // b + 1):
                c = b * k
                for m in range(2, total // c + 1):
                    d = c * m
                    for q in range(2, total // d + 1):
                        e = d * q
                        if a + b + c + d + e == total:
                            found.append((a, b, c, d, e))
    return found


def get_number() -> int:
    """Return the natural number whose successive division remainders are
    1, 1, 7 by 8 (quotient ``a``) and 4, 15 by 17 (quotient ``2 * a``)."""
    a = 0
    while True:
        current = ((a * 8 + 7) * 8 + 1) * 8 + 1
        if (
            current % 17 == 4
            and current // 17 % 17 == 15
            and current // 17 // 17 == 2 * a
        ):
            return current
        a += 1


def symmetric_numbers(limit: int) -> list[int]:
    """Return every number from 0 to ``limit`` that reads the same reversed."""
    return [number for number in range(limit + 1) if number == reverse_int(number)]


def prime_factors(target: int) -> list[int]:
    """Return the prime factors of ``target`` in ascending order.

    Numbers below 2 have no factors.
    """
    if target < 0:
        raise ValueError("target must not be negative")
    factors = []
    divisor = 2
    while divisor <= target:
        if target % divisor == 0:
            factors.append(divisor)
            target //= divisor
        else:
            divisor += 1
    return factors


def _digits_reversed(value: int, base: int) -> int:
    """Read the base-``base`` digits of ``value``, lowest first, as a decimal."""
    result = 0
    while value:
        value, digit = divmod(value, base)
        result = result * 10 + digit
    return result


def find_number() -> int:
    """Search 343 to 2400 for a number whose reversed base-7 digits match its
    base-9 digits as re-read by a masked reversal; return -1 if none does."""
    for candidate in range(7**3, 7**4):
        in_seven = _digits_reversed(candidate, 7)
        in_nine = _digits_reversed(candidate, 9)
        restored = 0
        while in_nine:
            restored = restored * 10 + (in_nine & 10)
            in_nine //= 10
        if restored == in_seven:
            return candidate
    return -1


def _product_digits() -> Iterator[int]:
    previous, current = 2, 3
    yield previous
    yield current
    while True:
        product = previous * current
        digits = divmod(product, 10) if product >= 10 else (product,)
        for digit in digits:
            yield digit
            previous, current = current, digit


def get_in_list(position: int) -> int:
    """Return the ``position``-th term (from 1) of the sequence that starts
    2, 3 and continues with the digits of the product of the last two terms."""
    if position < 1:
        raise ValueError("position must be at least 1")
    return next(islice(_product_digits(), position - 1, None))


def to_octal(n: int) -> str:
    """Return the octal digits of ``n``, built through a linked stack.

    Zero gives an empty string.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    stack = LinkedStack()
    while n:
        n, digit = divmod(n, 8)
        stack.push(digit)
    digits = []
    while not stack.is_empty():
        digits.append(str(stack.pop()))
    return "".join(digits)