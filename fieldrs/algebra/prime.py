"""Prime fields: integers modulo a prime p."""

from __future__ import annotations


class PrimeField:
    """Arithmetic modulo *modulus*.

    The modulus is assumed to be prime; this is not verified. With a
    composite modulus reciprocal() silently returns wrong answers.
    """

    def __init__(self, modulus: int):
        if not isinstance(modulus, int) or modulus < 2:
            raise ValueError(f"Modulus must be prime: {modulus!r}")
        self._modulus = modulus

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def size(self) -> int:
        return self._modulus

    def __repr__(self) -> str:
        return f"PrimeField({self._modulus})"

    def _check(self, x: int) -> int:
        if not isinstance(x, int) or not 0 <= x < self._modulus:
            raise ValueError(f"Not an element of this field: {x!r}")
        return x

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def equals(self, x: int, y: int) -> bool:
        return self._check(x) == self._check(y)

    def negate(self, x: int) -> int:
        return (self._modulus - self._check(x)) % self._modulus

    def add(self, x: int, y: int) -> int:
        return (self._check(x) + self._check(y)) % self._modulus

    def subtract(self, x: int, y: int) -> int:
        return (self._check(x) - self._check(y)) % self._modulus

    def multiply(self, x: int, y: int) -> int:
        return (self._check(x) * self._check(y)) % self._modulus

    def reciprocal(self, w: int) -> int:
        x = self._check(w)
        if x == 0:
            raise ZeroDivisionError("Reciprocal of zero")
        # Fermat's little theorem
        return pow(x, self._modulus - 2, self._modulus)

    def divide(self, x: int, y: int) -> int:
        return self.multiply(x, self.reciprocal(y))
