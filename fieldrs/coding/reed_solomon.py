"""Reed-Solomon codec generic over any Field.

Polynomials are lists of coefficients, constant term first. A codeword of
length message_len + ecc_len is laid out as

    [ecc_0, ..., ecc_{E-1}, msg_0, ..., msg_{K-1}]

so read as a polynomial it is x^E * m(x) - r(x), where r(x) is the
remainder of x^E * m(x) divided by the generator polynomial
g(x) = (x - a^0)(x - a^1)...(x - a^{E-1}) and a is the generator element.
Every valid codeword therefore vanishes at a^0 .. a^{E-1}.

Decoding does not use Berlekamp-Massey or Forney. Both the error locator
and the error magnitudes are found by solving linear systems with the
generic Matrix engine:

  1. Syndromes S_i = c(a^i).
  2. Locator coefficients from the Hankel system built out of S.
  3. Brute-force root search over a^-i for each codeword position i.
  4. Magnitudes from the Vandermonde system of the located positions.
  5. Subtract the magnitudes and re-check the syndromes.

Exceeding the correction capacity is an ordinary outcome and is returned
as a DecodeResult, never raised.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..algebra.field import Field, power
from ..linalg.matrix import Matrix

logger = logging.getLogger(__name__)


class DecodeStatus(enum.Enum):
    OK = "ok"
    # more corruption than the code can correct
    UNCORRECTABLE = "uncorrectable"
    # syndromes still non-zero after a correction. The magnitude system is
    # checked for consistency first, so this is an internal safety net.
    INVARIANT_VIOLATION = "invariant_violation"


@dataclass
class DecodeResult:
    """Outcome of ReedSolomon.decode()."""
    status: DecodeStatus
    message: Optional[list] = None
    error_locations: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.OK


class ReedSolomon:
    """Systematic Reed-Solomon encoder/decoder.

    *generator* should be a primitive element of *field* (or at least have
    multiplicative order >= message_len + ecc_len). This is not checked; a
    bad choice shows up as failed decodes.

    Instances hold no mutable state and can be shared freely.
    """

    def __init__(self, field: Field, generator: Any, message_len: int,
                 ecc_len: int):
        if message_len <= 0 or ecc_len <= 0:
            raise ValueError(
                f"Invalid message or ECC length: {message_len}, {ecc_len}")
        if field.equals(generator, field.zero()):
            raise ValueError("Generator must be a non-zero field element")
        self.field = field
        self.generator = generator
        self.message_len = message_len
        self.ecc_len = ecc_len
        self.codeword_len = message_len + ecc_len
        self._genpoly = tuple(self._make_generator_polynomial())

    def __repr__(self) -> str:
        return (f"ReedSolomon({self.field!r}, generator={self.generator}, "
                f"message_len={self.message_len}, ecc_len={self.ecc_len})")

    @property
    def generator_polynomial(self) -> tuple:
        """Coefficients of g(x), constant term first; the last is one."""
        return self._genpoly

    def _make_generator_polynomial(self) -> list:
        f = self.field
        result = [f.one()] + [f.zero()] * self.ecc_len
        genpow = f.one()
        for i in range(self.ecc_len):
            # result *= (x - genpow); only the low i+2 coefficients are live
            neg = f.negate(genpow)
            for j in range(i + 1, 0, -1):
                result[j] = f.add(result[j - 1], f.multiply(neg, result[j]))
            result[0] = f.multiply(neg, result[0])
            genpow = f.multiply(self.generator, genpow)
        return result

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, message: Sequence[Any]) -> list:
        """Return ecc_symbols + message as a new list."""
        if len(message) != self.message_len:
            raise ValueError(
                f"Invalid message length: expected {self.message_len}, "
                f"got {len(message)}")
        f = self.field
        genpoly = self._genpoly
        ecc = [f.zero()] * self.ecc_len

        # LFSR division of x^E * m(x) by g(x), most significant symbol first
        for symbol in reversed(message):
            factor = f.add(symbol, ecc[-1])
            ecc = [f.zero()] + ecc[:-1]
            for j in range(self.ecc_len):
                ecc[j] = f.subtract(ecc[j], f.multiply(genpoly[j], factor))

        return [f.negate(x) for x in ecc] + list(message)

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode(self, codeword: Sequence[Any],
               errors_to_correct: int | None = None) -> DecodeResult:
        """Recover the message from a possibly corrupted codeword.

        Corrects up to *errors_to_correct* symbol errors (default
        ecc_len // 2). Raises ValueError for malformed arguments; a
        codeword that cannot be corrected gives an UNCORRECTABLE result.
        """
        if len(codeword) != self.codeword_len:
            raise ValueError(
                f"Invalid codeword length: expected {self.codeword_len}, "
                f"got {len(codeword)}")
        if errors_to_correct is None:
            errors_to_correct = self.ecc_len // 2
        if not 0 <= errors_to_correct <= self.ecc_len // 2:
            raise ValueError(
                f"Number of errors to correct is out of range: {errors_to_correct}")

        f = self.field
        codeword = list(codeword)
        syndromes = self.syndromes(codeword)
        if self._all_zero(syndromes):
            return DecodeResult(DecodeStatus.OK, codeword[self.ecc_len:])

        logger.debug("Non-zero syndromes, attempting to correct up to %d errors",
                     errors_to_correct)
        if errors_to_correct == 0:
            return self._uncorrectable("no correction capacity requested")

        errlocpoly = self.error_locator_polynomial(syndromes, errors_to_correct)
        if errlocpoly is None:
            return self._uncorrectable("error locator system is inconsistent")

        errlocs = self._find_error_locations(errlocpoly, errors_to_correct)
        if not errlocs:
            return self._uncorrectable("no usable error locations")
        logger.debug("Error locations: %s", errlocs)

        errvals = self._calculate_error_values(errlocs, syndromes)
        if errvals is None:
            return self._uncorrectable("error value system is inconsistent")

        corrected = list(codeword)
        zero = f.zero()
        fixed = []
        for loc, val in zip(errlocs, errvals):
            # spurious locator roots solve to a zero magnitude
            if f.equals(val, zero):
                continue
            corrected[loc] = f.subtract(corrected[loc], val)
            fixed.append(loc)

        if not self._all_zero(self.syndromes(corrected)):
            logger.error("Syndromes non-zero after correcting %s", fixed)
            return DecodeResult(DecodeStatus.INVARIANT_VIOLATION,
                                error_locations=fixed)

        return DecodeResult(DecodeStatus.OK, corrected[self.ecc_len:], fixed)

    def syndromes(self, codeword: Sequence[Any]) -> list:
        """Evaluate *codeword* at generator^i for i in [0, ecc_len)."""
        f = self.field
        result = []
        genpow = f.one()
        for _ in range(self.ecc_len):
            result.append(self._evaluate(codeword, genpow))
            genpow = f.multiply(self.generator, genpow)
        return result

    def error_locator_polynomial(self, syndromes: Sequence[Any],
                                 errors_to_correct: int) -> list | None:
        """Solve for the error locator Lambda(x), constant term first.

        Row r of the system reads
            sum_c S[r+c] * Lambda[t-c] = -S[r+t]    for c in [0, t)
        with t = errors_to_correct. Returns None if it has no solution.
        """
        f = self.field
        t = errors_to_correct
        matrix = Matrix(t, t + 1, f)
        for r in range(t):
            for c in range(t + 1):
                index = r + c
                val = syndromes[index] if index < len(syndromes) else f.zero()
                if c == t:
                    val = f.negate(val)
                matrix.set(r, c, val)

        matrix.reduced_row_echelon_form()

        zero = f.zero()
        result = [f.one()] + [zero] * t
        for row in range(t):
            col = 0
            while col < t and f.equals(matrix.get(row, col), zero):
                col += 1
            if col == t:
                # 0 = rhs; any non-zero rhs means there is no solution
                if not f.equals(matrix.get(row, t), zero):
                    return None
            else:
                # free variables are left at zero
                result[t - col] = matrix.get(row, t)
        return result

    def _find_error_locations(self, errlocpoly: Sequence[Any],
                              max_solutions: int) -> list[int] | None:
        f = self.field
        zero = f.zero()
        genrec = f.reciprocal(self.generator)
        genrecpow = f.one()
        locations = []
        for i in range(self.codeword_len):
            if f.equals(self._evaluate(errlocpoly, genrecpow), zero):
                if len(locations) >= max_solutions:
                    logger.debug("Locator has more than %d roots", max_solutions)
                    return None
                locations.append(i)
            genrecpow = f.multiply(genrec, genrecpow)
        return locations

    def _calculate_error_values(self, errlocs: Sequence[int],
                                syndromes: Sequence[Any]) -> list | None:
        """Solve S_r = sum_c e_c * (a^loc_c)^r for the magnitudes e_c."""
        f = self.field
        n = len(errlocs)
        matrix = Matrix(self.ecc_len, n + 1, f)
        for c, loc in enumerate(errlocs):
            genpow = power(f, self.generator, loc)
            genpowpow = f.one()
            for r in range(self.ecc_len):
                matrix.set(r, c, genpowpow)
                genpowpow = f.multiply(genpow, genpowpow)
        for r in range(self.ecc_len):
            matrix.set(r, n, syndromes[r])

        matrix.reduced_row_echelon_form()

        zero = f.zero()
        one = f.one()
        for i in range(n):
            for j in range(n):
                expected = one if i == j else zero
                if not f.equals(matrix.get(i, j), expected):
                    return None
        # rows past the identity block must read 0 = 0
        for r in range(n, self.ecc_len):
            if not f.equals(matrix.get(r, n), zero):
                return None
        return [matrix.get(i, n) for i in range(n)]

    def _evaluate(self, polynomial: Sequence[Any], point: Any) -> Any:
        # Horner, constant term first
        f = self.field
        result = f.zero()
        for coef in reversed(polynomial):
            result = f.add(coef, f.multiply(point, result))
        return result

    def _all_zero(self, values: Sequence[Any]) -> bool:
        zero = self.field.zero()
        return all(self.field.equals(v, zero) for v in values)

    def _uncorrectable(self, reason: str) -> DecodeResult:
        logger.debug("Uncorrectable codeword: %s", reason)
        return DecodeResult(DecodeStatus.UNCORRECTABLE)
