"""Signed integers of any size, held as base 10**9 digits."""

from __future__ import annotations

import re
from functools import total_ordering
from itertools import zip_longest
from typing import Union

RADIX = 10**9
DIGITS_PER_LIMB = 9
KARATSUBA_NUM = 60

_NUMBER_PATTERN = re.compile(r"\s*(-?)(\d+)\s*")

_Limbs = list[int]


def _normalize(limbs: _Limbs) -> _Limbs:
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs or [0]


def _limbs_of(value: int) -> _Limbs:
    value = abs(value)
    limbs: _Limbs = []
    while value:
        value, limb = divmod(value, RADIX)
        limbs.append(limb)
    return limbs or [0]


def _compare(a: _Limbs, b: _Limbs) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add(a: _Limbs, b: _Limbs) -> _Limbs:
    result: _Limbs = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, limb = divmod(x + y + carry, RADIX)
        result.append(limb)
    if carry:
        result.append(carry)
    return _normalize(result)


def _subtract(a: _Limbs, b: _Limbs) -> _Limbs:
    """Return a - b for magnitudes with a >= b."""
    result: _Limbs = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        limb = x - y - borrow
        borrow = 1 if limb < 0 else 0
        result.append(limb + RADIX * borrow)
    return _normalize(result)


def _multiply_small(a: _Limbs, factor: int) -> _Limbs:
    result: _Limbs = []
    carry = 0
    for x in a:
        carry, limb = divmod(x * factor + carry, RADIX)
        result.append(limb)
    while carry:
        carry, limb = divmod(carry, RADIX)
        result.append(limb)
    return _normalize(result)


def _shifted(a: _Limbs, count: int) -> _Limbs:
    if a == [0]:
        return [0]
    return [0] * count + a


def _multiply(a: _Limbs, b: _Limbs) -> _Limbs:
    if min(len(a), len(b)) <= KARATSUBA_NUM:
        result = [0] * (len(a) + len(b))
        for i, x in enumerate(a):
            if x == 0:
                continue
            carry = 0
            for j, y in enumerate(b):
                carry, result[i + j] = divmod(result[i + j] + x * y + carry, RADIX)
            result[i + len(b)] += carry
        return _normalize(result)

    half = max(len(a), len(b)) // 2
    a_low, a_high = _normalize(a[:half]), _normalize(a[half:])
    b_low, b_high = _normalize(b[:half]), _normalize(b[half:])
    low = _multiply(a_low, b_low)
    high = _multiply(a_high, b_high)
    middle = _subtract(
        _multiply(_add(a_low, a_high), _add(b_low, b_high)), _add(low, high)
    )
    return _add(_add(low, _shifted(middle, half)), _shifted(high, 2 * half))


def _divmod(a: _Limbs, b: _Limbs) -> tuple[_Limbs, _Limbs]:
    if _compare(a, b) < 0:
        return [0], list(a)
    quotient: _Limbs = []
    remainder: _Limbs = [0]
    for limb in reversed(a):
        remainder = _normalize([limb] + remainder)
        lo, hi = 0, RADIX - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if _compare(_multiply_small(b, mid), remainder) <= 0:
                lo = mid
            else:
                hi = mid - 1
        quotient.append(lo)
        remainder = _subtract(remainder, _multiply_small(b, lo))
    quotient.reverse()
    return _normalize(quotient), remainder


_Operand = Union["LongNum", int]


@total_ordering
class LongNum:
    """An immutable signed integer of unbounded size.

    Division truncates toward zero and the remainder takes the sign of the
    dividend. Shifts move whole base 10**9 digits.
    """

    __slots__ = ("_negative", "_limbs")

    def __init__(self, value: _Operand = 0) -> None:
        if isinstance(value, LongNum):
            self._negative = value._negative
            self._limbs: tuple[int, ...] = value._limbs
        elif isinstance(value, int):
            self._negative = value < 0
            self._limbs = tuple(_limbs_of(value))
        else:
            raise TypeError(f"cannot make a LongNum from {type(value).__name__}")

    @classmethod
    def _make(cls, negative: bool, limbs: _Limbs) -> LongNum:
        number = cls.__new__(cls)
        limbs = _normalize(list(limbs))
        number._limbs = tuple(limbs)
        number._negative = negative and limbs != [0]
        return number

    @classmethod
    def parse(cls, text: str) -> LongNum:
        """Read an optionally negative decimal integer."""
        match = _NUMBER_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not an integer: {text!r}")
        sign, digits = match.groups()
        limbs = [
            int(digits[max(0, end - DIGITS_PER_LIMB) : end])
            for end in range(len(digits), 0, -DIGITS_PER_LIMB)
        ]
        return cls._make(sign == "-", limbs)

    def __str__(self) -> str:
        top, *rest = reversed(self._limbs)
        body = str(top) + "".join(f"{limb:0{DIGITS_PER_LIMB}d}" for limb in rest)
        return "-" + body if self._negative else body

    def __repr__(self) -> str:
        return f"LongNum({self})"

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * RADIX + limb
        return -value if self._negative else value

    def __bool__(self) -> bool:
        return self._limbs != (0,)

    @staticmethod
    def _coerce(other: object) -> LongNum | None:
        if isinstance(other, LongNum):
            return other
        if isinstance(other, int):
            return LongNum(other)
        return None

    def __add__(self, other: object) -> LongNum:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        a, b = list(self._limbs), list(rhs._limbs)
        if self._negative == rhs._negative:
            return self._make(self._negative, _add(a, b))
        if _compare(a, b) >= 0:
            return self._make(self._negative, _subtract(a, b))
        return self._make(rhs._negative, _subtract(b, a))

    def __radd__(self, other: object) -> LongNum:
        return self.__add__(other)

    def __sub__(self, other: object) -> LongNum:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> LongNum:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> LongNum:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._make(
            self._negative != rhs._negative,
            _multiply(list(self._limbs), list(rhs._limbs)),
        )

    def __rmul__(self, other: object) -> LongNum:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> LongNum:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if not rhs:
            raise ZeroDivisionError("division by zero")
        quotient, _ = _divmod(list(self._limbs), list(rhs._limbs))
        return self._make(self._negative != rhs._negative, quotient)

    def __mod__(self, other: object) -> LongNum:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self - (self // rhs) * rhs

    def __neg__(self) -> LongNum:
        return self._make(not self._negative, list(self._limbs))

    def __abs__(self) -> LongNum:
        return self._make(False, list(self._limbs))

    def __lshift__(self, count: int) -> LongNum:
        if count < 0:
            return self >> -count
        return self._make(self._negative, _shifted(list(self._limbs), count))

    def __rshift__(self, count: int) -> LongNum:
        if count < 0:
            return self << -count
        return self._make(self._negative, list(self._limbs[count:]))

    def __pow__(self, exponent: int) -> LongNum:
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result: _Limbs = [1]
        base = list(self._limbs)
        remaining = exponent
        while remaining:
            if remaining & 1:
                result = _multiply(result, base)
            remaining >>= 1
            if remaining:
                base = _multiply(base, base)
        return self._make(self._negative and exponent % 2 == 1, result)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._negative == rhs._negative and self._limbs == rhs._limbs

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self._negative != rhs._negative:
            return self._negative
        order = _compare(list(self._limbs), list(rhs._limbs))
        return order > 0 if self._negative else order < 0

    def __hash__(self) -> int:
        return hash(int(self))


def factorial(n: int) -> LongNum:
    """Return n! as a LongNum."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = LongNum(1)
    for factor in range(2, n + 1):
        result = result * factor
    return result