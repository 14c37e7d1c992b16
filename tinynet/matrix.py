"""A small dense two-dimensional matrix of floats."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from numbers import Real


class Matrix:
    """A row-major matrix backed by a list of float rows."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]] | None = None) -> None:
        self._rows: list[list[float]] = (
            [] if rows is None else [[float(v) for v in row] for row in rows]
        )

    @property
    def rows(self) -> list[list[float]]:
        """A copy of the matrix contents as a list of rows."""
        return [list(row) for row in self._rows]

    def add_row(self, row: Iterable[float]) -> None:
        """Append a row to the bottom of the matrix."""
        self._rows.append([float(v) for v in row])

    @staticmethod
    def dot(vec1: Sequence[float], vec2: Sequence[float]) -> float:
        """Dot product of two vectors of equal length."""
        if len(vec1) != len(vec2):
            raise ValueError("Vectors have different size.")
        return float(sum(a * b for a, b in zip(vec1, vec2)))

    def transpose(self) -> Matrix:
        """Return the transposed matrix; an empty matrix stays empty."""
        return Matrix(zip(*self._rows))

    def matvec(self, vec: Sequence[float]) -> list[float]:
        """Multiply the matrix by a vector."""
        if len(self._rows) != len(vec):
            raise ValueError("Matrix & Vector have different sizes.")
        return [self.dot(row, vec) for row in self._rows]

    def apply(self, func: Callable[[float], float]) -> None:
        """Replace every element with func(element), in place."""
        self._rows = [[func(v) for v in row] for row in self._rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Real):
            factor = float(other)
            return Matrix([v * factor for v in row] for row in self._rows)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def _matmul(self, other: Matrix) -> Matrix:
        if not self._rows or not other._rows:
            return Matrix()
        if len(self._rows[0]) != len(other._rows):
            raise ValueError(
                "Matrix A's column amount not equal to Matrix B's row amount. "
                "Unable to multiply."
            )
        columns = [list(col) for col in zip(*other._rows)]
        return Matrix(
            [self.dot(row, col) for col in columns] for row in self._rows
        )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self._rows) != len(other._rows):
            raise ValueError("Matrices have different size.")
        result = Matrix()
        for mine, theirs in zip(self._rows, other._rows):
            if len(mine) != len(theirs):
                raise ValueError("Row size mismatch")
            result.add_row(a + b for a, b in zip(mine, theirs))
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self._rows) != len(other._rows):
            raise ValueError("Matrices have different size.")
        result = Matrix()
        for mine, theirs in zip(self._rows, other._rows):
            if len(mine) != len(theirs):
                raise ValueError("Row size mismatch")
            result.add_row(a - b for a, b in zip(mine, theirs))
        return result

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[float]]:
        return (list(row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"