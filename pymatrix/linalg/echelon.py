"""
Echelon forms over a field.

    row_echelon: forward Gaussian elimination (not reduced)
    column_echelon: transpose of the row echelon form of the transpose
    reduced_row_echelon: row echelon form with every pivot scaled to one
    rank: number of nonzero rows of the row echelon form

Entries are compared exactly against zero; for floats this reproduces
plain Gaussian elimination without partial pivoting.

Every function takes a keyword-only stacklevel for the warnings it emits,
with the warnings.warn meaning: 2 points at the direct caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pymatrix.core.elements import is_zero, zero_of
from pymatrix.core.protocols import T
from pymatrix.core.validation import check_field_elements
from pymatrix.linalg._common import divide_row, find_pivot, subtract_row, swap_rows

if TYPE_CHECKING:
    from pymatrix.core.matrix import Matrix


def _row_echelon_rows(matrix: Matrix[T]) -> list[list[T]]:
    rows = matrix.rows()
    zero = zero_of(matrix.element_type)
    h = matrix.height()
    w = matrix.width()
    # Number of all-zero columns skipped so far; row i pivots in column i + offset.
    offset = 0

    for i in range(h - 1):
        pivot = None
        while i + offset < w:
            pivot = find_pivot(rows, i, i + offset, zero)
            if pivot is not None:
                break
            offset += 1
        if pivot is None:
            break
        if pivot != i:
            swap_rows(rows, i, pivot)

        col = i + offset
        for j in range(i + 1, h):
            ratio = rows[j][col] / rows[i][col]
            subtract_row(rows, j, i, ratio, start=col)
    return rows


def row_echelon(matrix: Matrix[T], *, stacklevel: int = 2) -> Matrix[T]:
    """
    Row echelon form of a matrix over a field.

    Columns that are zero from the working row downwards are skipped, so
    each row's leading nonzero entry lies strictly right of the one above.

    Raises:
        ElementTypeError: If the entries do not support division

    Example:
        >>> m = Matrix.from_rows([[1.0, 2.0, 3.0], [3.0, 4.0, 5.0]])
        >>> row_echelon(m)
        Matrix([[1.0, 2.0, 3.0], [0.0, -2.0, -4.0]])
    """
    from pymatrix.core.matrix import Matrix

    check_field_elements(matrix, 'row_echelon', stacklevel=stacklevel)
    return Matrix._wrap(_row_echelon_rows(matrix))


def column_echelon(matrix: Matrix[T], *, stacklevel: int = 2) -> Matrix[T]:
    """Column echelon form: row_echelon of the transpose, transposed back."""
    return row_echelon(matrix.transpose(), stacklevel=stacklevel + 1).transpose()


def reduced_row_echelon(matrix: Matrix[T], *, stacklevel: int = 2) -> Matrix[T]:
    """
    Reduced row echelon form of a matrix over a field.

    Takes the row echelon form and divides each row by its leading
    nonzero entry. Trailing all-zero rows are left as they are.

    Example:
        >>> m = Matrix.from_rows([[1.0, 2.0, 3.0], [3.0, 4.0, 5.0]])
        >>> reduced_row_echelon(m)
        Matrix([[1.0, 2.0, 3.0], [0.0, 1.0, 2.0]])
    """
    from pymatrix.core.matrix import Matrix

    check_field_elements(matrix, 'reduced_row_echelon', stacklevel=stacklevel)
    rows = _row_echelon_rows(matrix)
    zero = zero_of(matrix.element_type)
    w = matrix.width()

    offset = 0
    for i, row in enumerate(rows):
        while offset < w and is_zero(row[offset], zero):
            offset += 1
        if offset == w:
            break
        divide_row(rows, i, row[offset], start=offset)
        offset += 1
    return Matrix._wrap(rows)


def rank(matrix: Matrix[T], *, stacklevel: int = 2) -> int:
    """
    Rank of a matrix over a field.

    Counts the rows of the row echelon form that hold a nonzero entry.
    """
    check_field_elements(matrix, 'rank', stacklevel=stacklevel)
    zero = zero_of(matrix.element_type)
    return sum(
        1 for row in _row_echelon_rows(matrix)
        if not all(is_zero(entry, zero) for entry in row)
    )
