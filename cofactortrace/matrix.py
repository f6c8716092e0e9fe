from dataclasses import dataclass
from numbers import Real
from typing import Any, Tuple

Rows = Tuple[Tuple[Real, ...], ...]
MatrixKey = Tuple[Tuple[Real, ...], ...]


class CofactorTraceError(Exception):
    """Base class for errors raised by cofactortrace."""


class MatrixValidationError(CofactorTraceError, ValueError):
    """The input is missing, empty, non-square or not numeric."""


def _as_rows(raw: Any) -> Rows:
    if raw is None:
        raise MatrixValidationError("Matrix must be a non-empty square (n x n).")
    try:
        rows = tuple(tuple(row) for row in raw)
    except TypeError as exc:
        raise MatrixValidationError(
            "Matrix must be a sequence of rows."
        ) from exc

    n = len(rows)
    if n == 0 or any(len(row) != n for row in rows):
        raise MatrixValidationError("Matrix must be a non-empty square (n x n).")

    for i, row in enumerate(rows):
        for j, x in enumerate(row):
            if isinstance(x, bool) or not isinstance(x, Real):
                raise MatrixValidationError(
                    f"Entry ({i}, {j}) is not a real number: {x!r}"
                )
    return rows


@dataclass(frozen=True)
class Matrix:
    rows: Rows

    def __post_init__(self):
        object.__setattr__(self, "rows", _as_rows(self.rows))

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.size, self.size

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls([[1 if i == j else 0 for j in range(n)] for i in range(n)])

    def key(self) -> MatrixKey:
        """Structural cache key.

        Entries keep their exact values; numeric hashing already makes
        ``1``/``1.0`` and ``0.0``/``-0.0`` collide.
        """
        return tuple(tuple(row) for row in self.rows)

    def minor(self, row_to_remove: int, col_to_remove: int) -> "Matrix":
        return minor(self, row_to_remove, col_to_remove)

    def transpose(self) -> "Matrix":
        return Matrix(list(zip(*self.rows)))

    def tolist(self):
        return [list(row) for row in self.rows]

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(self.tolist())


def minor(matrix: Matrix, row_to_remove: int, col_to_remove: int) -> Matrix:
    """Return ``matrix`` with one row and one column deleted.

    The input is never modified. Indices outside ``[0, n)`` are a caller
    bug, not a user error.
    """
    n = matrix.size
    assert n >= 2, "minor of a 1x1 matrix is undefined"
    assert 0 <= row_to_remove < n and 0 <= col_to_remove < n, (
        f"({row_to_remove}, {col_to_remove}) out of range for {n}x{n}"
    )
    rows = [
        [x for j, x in enumerate(row) if j != col_to_remove]
        for i, row in enumerate(matrix.rows)
        if i != row_to_remove
    ]
    return Matrix(rows)


def as_matrix(raw: Any) -> Matrix:
    if isinstance(raw, Matrix):
        return raw
    return Matrix(raw)
