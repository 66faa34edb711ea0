"""Small number and string exercises: primality, splitting, brackets, tribonacci."""

from __future__ import annotations

import math


def is_prime(n: int) -> bool:
    """Report whether no divisor lies between 2 and the square root of ``n``.

    Values below 2 have no candidate divisor and are reported as prime.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``.

    Empty text gives no pieces, and a delimiter at the very end does not
    start a further, empty piece.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if not text:
        return []
    pieces = text.split(delimiter)
    if text.endswith(delimiter):
        pieces.pop()
    return pieces


def brackets_balanced(text: str) -> bool:
    """Check that round brackets in ``text`` open and close in order."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def tribonacci(n: int) -> int:
    """Return the n-th term of the sequence 0, 0, 1, 1, 2, 4, 7, ... (1-based)."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n <= 2:
        return 0
    if n <= 4:
        return 1
    a, b, c = 0, 1, 1
    for _ in range(n - 4):
        a, b, c = b, c, a + b + c
    return c