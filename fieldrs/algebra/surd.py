"""The quadratic field Q(sqrt(d)).

Every element is stored as a reduced fraction (a + b*sqrt(d)) / c. Since d
is not a perfect square, that representation is unique once the signs are
normalised and gcd(a, b, c) is divided out, so equality is plain tuple
equality.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, init=False)
class QuadraticSurd:
    """An immutable value (a + b*sqrt(d)) / c in canonical form."""
    a: int
    b: int
    c: int
    d: int

    def __init__(self, a: int, b: int, c: int, d: int):
        if c == 0:
            raise ZeroDivisionError("Division by zero")
        if c < 0:
            a, b, c = -a, -b, -c
        gcd = math.gcd(a, b, c)
        if gcd != 0:
            a, b, c = a // gcd, b // gcd, c // gcd
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "d", d)

    def __str__(self) -> str:
        return f"({self.a} + {self.b}*sqrt({self.d})) / {self.c}"


class QuadraticSurdField:
    """Field of QuadraticSurd values sharing the radicand *d*."""

    def __init__(self, d: int):
        if not isinstance(d, int):
            raise ValueError(f"Radicand must be an integer: {d!r}")
        if d >= 0 and math.isqrt(d) ** 2 == d:
            raise ValueError(f"Radicand must not be a perfect square: {d}")
        self._d = d

    @property
    def d(self) -> int:
        return self._d

    def __repr__(self) -> str:
        return f"QuadraticSurdField({self._d})"

    def element(self, a: int, b: int = 0, c: int = 1) -> QuadraticSurd:
        """Build (a + b*sqrt(d)) / c in this field."""
        return QuadraticSurd(a, b, c, self._d)

    def _check(self, x: QuadraticSurd) -> None:
        if not isinstance(x, QuadraticSurd):
            raise ValueError(f"Not an element of this field: {x!r}")
        if x.d != self._d:
            raise ValueError(
                "The value under the square root must match that of the field")

    def zero(self) -> QuadraticSurd:
        return QuadraticSurd(0, 0, 1, self._d)

    def one(self) -> QuadraticSurd:
        return QuadraticSurd(1, 0, 1, self._d)

    def equals(self, x: QuadraticSurd, y: QuadraticSurd) -> bool:
        self._check(x)
        self._check(y)
        return x == y

    def negate(self, x: QuadraticSurd) -> QuadraticSurd:
        self._check(x)
        return QuadraticSurd(-x.a, -x.b, x.c, self._d)

    def add(self, x: QuadraticSurd, y: QuadraticSurd) -> QuadraticSurd:
        self._check(x)
        self._check(y)
        return QuadraticSurd(
            x.a * y.c + y.a * x.c,
            x.b * y.c + y.b * x.c,
            x.c * y.c,
            self._d,
        )

    def subtract(self, x: QuadraticSurd, y: QuadraticSurd) -> QuadraticSurd:
        return self.add(x, self.negate(y))

    def reciprocal(self, x: QuadraticSurd) -> QuadraticSurd:
        # multiply through by the conjugate; a zero x gives a zero denominator
        self._check(x)
        return QuadraticSurd(
            -x.a * x.c,
            x.b * x.c,
            x.b * x.b * self._d - x.a * x.a,
            self._d,
        )

    def multiply(self, x: QuadraticSurd, y: QuadraticSurd) -> QuadraticSurd:
        self._check(x)
        self._check(y)
        return QuadraticSurd(
            x.a * y.a + x.b * y.b * self._d,
            x.a * y.b + y.a * x.b,
            x.c * y.c,
            self._d,
        )

    def divide(self, x: QuadraticSurd, y: QuadraticSurd) -> QuadraticSurd:
        return self.multiply(x, self.reciprocal(y))
