"""The Field contract shared by every algebra in the package.

A field here is anything with the nine operations below. The matrix engine
and the Reed-Solomon codec only ever talk to their algebra through this
interface, so the same elimination and decoding code runs over GF(2^n),
prime fields, quadratic surds, and so on.

Implementations must raise:
  - ValueError if an operand is not an element of the field's domain
  - ZeroDivisionError from reciprocal() / divide() when dividing by zero
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")


class Field(Protocol[T]):
    """Protocol for a commutative ring with identities and inverses."""
    def zero(self) -> T: ...
    def one(self) -> T: ...
    def equals(self, x: T, y: T) -> bool: ...
    def negate(self, x: T) -> T: ...
    def add(self, x: T, y: T) -> T: ...
    def subtract(self, x: T, y: T) -> T: ...
    def reciprocal(self, x: T) -> T: ...
    def multiply(self, x: T, y: T) -> T: ...
    def divide(self, x: T, y: T) -> T: ...


def power(field: Field[T], base: T, exponent: int) -> T:
    """Raise *base* to a non-negative integer *exponent* in *field*."""
    if exponent < 0:
        raise ValueError(f"Unsupported negative exponent: {exponent}")
    result = field.one()
    while exponent:
        if exponent & 1:
            result = field.multiply(result, base)
        base = field.multiply(base, base)
        exponent >>= 1
    return result
