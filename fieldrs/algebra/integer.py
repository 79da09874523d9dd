"""The ring of integers, dressed up with the Field interface.

This is NOT a field: only 1 has a multiplicative inverse, and division is
only defined when it is exact. It exists to exercise code that is generic
over the Field contract (matrix multiplication, addition-only paths) with
plain arbitrary-precision ints. Do not hand it to the Reed-Solomon codec.
"""

from __future__ import annotations


class IntegerRing:
    """Python ints with ordinary ring operations.

    Two operations depart from the Field contract. reciprocal() only
    succeeds for 1, and divide() is exact integer division rather than
    multiply(x, reciprocal(y)): it raises ValueError when y does not
    divide x.
    """

    def __repr__(self) -> str:
        return "IntegerRing()"

    def _check(self, x: int) -> int:
        if not isinstance(x, int) or isinstance(x, bool):
            raise ValueError(f"Not an integer: {x!r}")
        return x

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def equals(self, x: int, y: int) -> bool:
        return self._check(x) == self._check(y)

    def negate(self, x: int) -> int:
        return -self._check(x)

    def add(self, x: int, y: int) -> int:
        return self._check(x) + self._check(y)

    def subtract(self, x: int, y: int) -> int:
        return self._check(x) - self._check(y)

    def multiply(self, x: int, y: int) -> int:
        return self._check(x) * self._check(y)

    def reciprocal(self, x: int) -> int:
        if self._check(x) != 1:
            raise ZeroDivisionError(f"{x} has no reciprocal in the integers")
        return x

    def divide(self, x: int, y: int) -> int:
        x = self._check(x)
        y = self._check(y)
        if y == 0:
            raise ZeroDivisionError("Division by zero")
        quotient, remainder = divmod(x, y)
        if remainder:
            raise ValueError(f"{x} is not divisible by {y}")
        return quotient


INTEGER_RING = IntegerRing()
