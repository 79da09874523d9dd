"""Dense matrices over an arbitrary Field.

Elements are opaque to this module: every bit of arithmetic goes through
the field object, so the same elimination code works for GF(2^n), prime
fields, surds and anything else implementing the contract. Storage is a
numpy object array, which gives cheap row swaps and slicing without
constraining the element type.

A matrix never changes shape. Operations that need a bigger working area
(inversion) allocate a new matrix and copy into it.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ..algebra.field import Field


class Matrix:
    """A rows x cols grid of field elements, mutated in place."""

    def __init__(self, rows: int, cols: int, field: Field):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid number of rows or columns: {rows}x{cols}")
        self._field = field
        self._values = np.empty((rows, cols), dtype=object)
        self._values.fill(field.zero())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], field: Field) -> Matrix:
        """Build a matrix from a list of equally long rows."""
        if not rows or not rows[0]:
            raise ValueError("Matrix needs at least one row and one column")
        width = len(rows[0])
        result = cls(len(rows), width, field)
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} entries, expected {width}")
            for j, value in enumerate(row):
                result._values[i, j] = value
        return result

    @classmethod
    def identity(cls, n: int, field: Field) -> Matrix:
        result = cls(n, n, field)
        for i in range(n):
            result._values[i, i] = field.one()
        return result

    # ------------------------------------------------------------------
    # Basic access
    # ------------------------------------------------------------------

    @property
    def field(self) -> Field:
        return self._field

    @property
    def row_count(self) -> int:
        return self._values.shape[0]

    @property
    def column_count(self) -> int:
        return self._values.shape[1]

    def get(self, row: int, col: int) -> Any:
        return self._values[row, col]

    def set(self, row: int, col: int, value: Any) -> None:
        self._values[row, col] = value

    def clone(self) -> Matrix:
        result = Matrix(self.row_count, self.column_count, self._field)
        result._values[:, :] = self._values
        return result

    def transpose(self) -> Matrix:
        result = Matrix(self.column_count, self.row_count, self._field)
        result._values[:, :] = self._values.T
        return result

    def to_list(self) -> list[list[Any]]:
        return [list(row) for row in self._values]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._values.shape != other._values.shape:
            return False
        return all(
            self._field.equals(x, y)
            for x, y in zip(self._values.flat, other._values.flat)
        )

    def __repr__(self) -> str:
        return f"<Matrix {self.row_count}x{self.column_count} over {self._field!r}>"

    def __str__(self) -> str:
        rows = ("[" + ", ".join(str(x) for x in row) + "]" for row in self._values)
        return "[" + ",\n ".join(rows) + "]"

    # ------------------------------------------------------------------
    # Elementary row operations
    # ------------------------------------------------------------------

    def swap_rows(self, row0: int, row1: int) -> None:
        self._values[[row0, row1]] = self._values[[row1, row0]]

    def multiply_row(self, row: int, factor: Any) -> None:
        """Scale *row* by *factor*."""
        mul = self._field.multiply
        self._values[row, :] = _object_row([mul(x, factor) for x in self._values[row]])

    def add_rows(self, src_row: int, dest_row: int, factor: Any) -> None:
        """dest_row += src_row * factor."""
        f = self._field
        self._values[dest_row, :] = _object_row([
            f.add(dest, f.multiply(src, factor))
            for src, dest in zip(self._values[src_row], self._values[dest_row])
        ])

    # ------------------------------------------------------------------
    # Matrix algebra
    # ------------------------------------------------------------------

    def multiply(self, other: Matrix) -> Matrix:
        """Return self * other."""
        if self.column_count != other.row_count:
            raise ValueError(
                f"Matrix dimensions mismatch: {self.row_count}x{self.column_count}"
                f" * {other.row_count}x{other.column_count}")
        f = self._field
        result = Matrix(self.row_count, other.column_count, f)
        for i in range(self.row_count):
            for j in range(other.column_count):
                total = f.zero()
                for k in range(self.column_count):
                    total = f.add(total, f.multiply(self._values[i, k], other._values[k, j]))
                result._values[i, j] = total
        return result

    def reduced_row_echelon_form(self) -> int:
        """Reduce this matrix to RREF in place. Returns the number of pivots.

        Columns without a usable pivot are skipped, so singular and
        rectangular systems are fine.
        """
        f = self._field
        zero = f.zero()
        rows, cols = self._values.shape

        num_pivots = 0
        for j in range(cols):
            if num_pivots >= rows:
                break
            pivot_row = num_pivots
            while pivot_row < rows and f.equals(self._values[pivot_row, j], zero):
                pivot_row += 1
            if pivot_row == rows:
                continue
            self.swap_rows(num_pivots, pivot_row)
            pivot_row = num_pivots
            num_pivots += 1

            self.multiply_row(pivot_row, f.reciprocal(self._values[pivot_row, j]))
            for i in range(pivot_row + 1, rows):
                self.add_rows(pivot_row, i, f.negate(self._values[i, j]))

        # Back substitution: clear each pivot column above its pivot
        for i in range(num_pivots - 1, -1, -1):
            pivot_col = 0
            while pivot_col < cols and f.equals(self._values[i, pivot_col], zero):
                pivot_col += 1
            if pivot_col == cols:
                continue
            for k in range(i):
                self.add_rows(i, k, f.negate(self._values[k, pivot_col]))

        return num_pivots

    def invert(self) -> None:
        """Replace this square matrix by its inverse.

        Raises ValueError if the matrix is not square or not invertible.
        """
        rows, cols = self._values.shape
        if rows != cols:
            raise ValueError("Matrix must be square")
        f = self._field

        augmented = Matrix(rows, cols * 2, f)
        augmented._values[:, :cols] = self._values
        for i in range(rows):
            augmented._values[i, cols + i] = f.one()
        augmented.reduced_row_echelon_form()

        for i in range(rows):
            for j in range(cols):
                expected = f.one() if i == j else f.zero()
                if not f.equals(augmented._values[i, j], expected):
                    raise ValueError("Matrix is not invertible")
        self._values[:, :] = augmented._values[:, cols:]

    def determinant(self) -> Any:
        """Determinant by forward elimination on a copy.

        A singular matrix yields field.zero(); no exception is raised.
        """
        rows, cols = self._values.shape
        if rows != cols:
            raise ValueError("Matrix must be square")
        f = self._field
        zero = f.zero()
        work = self.clone()

        det = f.one()
        num_pivots = 0
        for j in range(cols):
            pivot_row = num_pivots
            while pivot_row < rows and f.equals(work._values[pivot_row, j], zero):
                pivot_row += 1
            if pivot_row == rows:
                continue
            if pivot_row != num_pivots:
                work.swap_rows(num_pivots, pivot_row)
                det = f.negate(det)

            pivot_value = work._values[num_pivots, j]
            det = f.multiply(det, pivot_value)
            work.multiply_row(num_pivots, f.reciprocal(pivot_value))
            for i in range(num_pivots + 1, rows):
                work.add_rows(num_pivots, i, f.negate(work._values[i, j]))
            num_pivots += 1

        if num_pivots < rows:
            return zero
        return det


def _object_row(values: list[Any]) -> np.ndarray:
    """Wrap *values* without letting numpy coerce ints to fixed-width types."""
    row = np.empty(len(values), dtype=object)
    row[:] = values
    return row
