import pytest

from cofactortrace.expansion import ExpansionLine, LineKind, select_expansion
from cofactortrace.matrix import Matrix


def test_zero_row_selected_over_columns():
    # Row 0 holds three zeros, every column holds one.
    A = Matrix([[0, 0, 0], [1, 2, 3], [4, 5, 6]])
    assert select_expansion(A) == ExpansionLine(LineKind.ROW, 0)


def test_row_wins_tie_against_column():
    # Row 1 and column 2 both hold two zeros.
    A = Matrix([[1, 2, 0], [0, 3, 0], [4, 5, 6]])
    line = select_expansion(A)
    assert line.kind is LineKind.ROW
    assert line.index == 1


def test_earliest_row_wins_tie_among_rows():
    A = Matrix([[1, 2, 3], [0, 4, 5], [6, 0, 7]])
    assert select_expansion(A) == ExpansionLine(LineKind.ROW, 1)


def test_column_selected_when_strictly_better():
    A = Matrix([[1, 0, 2], [3, 0, 4], [5, 6, 7]])
    assert select_expansion(A) == ExpansionLine(LineKind.COLUMN, 1)


def test_earliest_column_wins_tie_among_columns():
    # Columns 0 and 2 both hold three zeros; every row holds at most two.
    B = Matrix([[0, 1, 0, 2], [0, 3, 0, 4], [0, 5, 0, 6], [7, 8, 9, 1]])
    assert select_expansion(B) == ExpansionLine(LineKind.COLUMN, 0)


def test_no_zeros_defaults_to_first_row():
    A = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert select_expansion(A) == ExpansionLine(LineKind.ROW, 0)


def test_all_zero_matrix_selects_row_zero():
    A = Matrix([[0] * 4 for _ in range(4)])
    assert select_expansion(A) == ExpansionLine(LineKind.ROW, 0)


@pytest.mark.parametrize(
    "line, expected",
    [
        (ExpansionLine(LineKind.ROW, 1), [(1, 0), (1, 1), (1, 2)]),
        (ExpansionLine(LineKind.COLUMN, 2), [(0, 2), (1, 2), (2, 2)]),
    ],
)
def test_positions_walk_the_line(line, expected):
    assert list(line.positions(3)) == expected
