"""Choice of the row or column used for a cofactor expansion.

Expanding along the line with the most zero entries keeps the number of
non-trivial sub-determinants small: a zero coefficient contributes nothing
and its minor is never evaluated.

The tie-break is part of the observable trace. Rows are scanned before
columns and a line only replaces the current choice when it has strictly
more zeros, so the earliest row wins any tie, and a row beats a column with
the same count.
"""

from enum import Enum
from typing import Iterator, NamedTuple, Tuple

from .matrix import Matrix


class LineKind(str, Enum):
    ROW = "row"
    COLUMN = "col"


class ExpansionLine(NamedTuple):
    kind: LineKind
    index: int

    def positions(self, n: int) -> Iterator[Tuple[int, int]]:
        """Yield the ``(row, col)`` cells along this line in order."""
        for k in range(n):
            if self.kind is LineKind.ROW:
                yield self.index, k
            else:
                yield k, self.index


def count_zeros(values) -> int:
    return sum(1 for x in values if x == 0)


def select_expansion(matrix: Matrix) -> ExpansionLine:
    """Pick the expansion line with the most zero entries.

    Args:
        matrix: Square matrix to expand.

    Returns:
        The chosen line. An all-zero matrix yields row 0.
    """
    n = matrix.size
    rows = matrix.rows

    max_zeros = -1
    best = ExpansionLine(LineKind.ROW, 0)

    for r in range(n):
        zeros = count_zeros(rows[r])
        if zeros > max_zeros:
            max_zeros = zeros
            best = ExpansionLine(LineKind.ROW, r)

    for c in range(n):
        zeros = count_zeros(rows[r][c] for r in range(n))
        if zeros > max_zeros:
            max_zeros = zeros
            best = ExpansionLine(LineKind.COLUMN, c)

    return best
