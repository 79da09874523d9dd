"""Binary extension fields GF(2^n).

Elements are polynomials over GF(2) of degree < n, packed into the bits of
an int (bit i is the coefficient of x^i). The field is defined by a modulus
polynomial of degree n, given the same way: 0x11D is
x^8 + x^4 + x^3 + x^2 + 1, the usual polynomial for byte-oriented codes.
"""

from __future__ import annotations


class BinaryField:
    """GF(2^n) with carry-less arithmetic reduced by *modulus*.

    The modulus is not checked for irreducibility up front. A reducible
    modulus still gives a valid ring, and the problem only shows up when
    reciprocal() meets an element sharing a factor with it.
    """

    def __init__(self, modulus: int):
        if not isinstance(modulus, int) or modulus <= 1:
            raise ValueError(f"Invalid modulus: {modulus!r}")
        self._modulus = modulus
        self._size = 1 << (modulus.bit_length() - 1)

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def size(self) -> int:
        """Number of elements, 2**n."""
        return self._size

    def __repr__(self) -> str:
        return f"BinaryField(0x{self._modulus:X})"

    def _check(self, x: int) -> int:
        if not isinstance(x, int) or not 0 <= x < self._size:
            raise ValueError(f"Not an element of this field: {x!r}")
        return x

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def equals(self, x: int, y: int) -> bool:
        return self._check(x) == self._check(y)

    def negate(self, x: int) -> int:
        return self._check(x)

    def add(self, x: int, y: int) -> int:
        return self._check(x) ^ self._check(y)

    def subtract(self, x: int, y: int) -> int:
        return self.add(x, y)

    def multiply(self, x: int, y: int) -> int:
        x = self._check(x)
        y = self._check(y)
        result = 0
        while y:
            if y & 1:
                result ^= x
            x <<= 1
            if x >= self._size:
                x ^= self._modulus
            y >>= 1
        return result

    def reciprocal(self, w: int) -> int:
        # Extended Euclid on (modulus, w), tracking only w's Bezout coefficient
        x = self._modulus
        y = self._check(w)
        if y == 0:
            raise ZeroDivisionError("Reciprocal of zero")
        a, b = 0, 1
        while y:
            q, r = _divmod_poly(x, y)
            if q >= self._size:
                # only the first step can see a full-degree quotient (w == 1)
                q ^= self._modulus
            x, y = y, r
            a, b = b, a ^ self.multiply(q, b)
        if x != 1:
            raise ValueError("Field modulus is not irreducible")
        return a

    def divide(self, x: int, y: int) -> int:
        return self.multiply(x, self.reciprocal(y))


def _divmod_poly(x: int, y: int) -> tuple[int, int]:
    """Long division of GF(2) polynomials packed into ints."""
    if y == 0:
        raise ZeroDivisionError("Polynomial division by zero")
    quotient = 0
    ylen = y.bit_length()
    for i in range(x.bit_length() - ylen, -1, -1):
        if x >> (ylen + i - 1) & 1:
            x ^= y << i
            quotient |= 1 << i
    return quotient, x
