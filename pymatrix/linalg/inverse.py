"""
Matrix inversion by Gauss-Jordan elimination.

The matrix is reduced alongside an identity matrix of the same size,
in effect working on the augmented matrix [A | I]. Every row operation
applied to A is mirrored onto the companion; when A has become the
identity, the companion is A^-1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pymatrix.core.elements import is_zero, zero_of
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.protocols import T
from pymatrix.core.validation import check_field_elements, check_square
from pymatrix.linalg._common import divide_row, find_pivot, subtract_row, swap_rows

if TYPE_CHECKING:
    from pymatrix.core.matrix import Matrix


def inverse(matrix: Matrix[T], *, stacklevel: int = 2) -> Matrix[T]:
    """
    Inverse of a square matrix over a field.

    Args:
        matrix: Square matrix over a field element type
        stacklevel: Stack level for IntegerDivisionWarning (2 = our caller)

    Returns:
        New matrix B with matrix * B == identity

    Raises:
        NotSquareError: If the matrix is not square
        ElementTypeError: If the entries do not support division
        SingularMatrixError: If the matrix has no inverse

    Example:
        >>> inverse(Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]]))
        Matrix([[-2.0, 1.0], [1.5, -0.5]])
    """
    from pymatrix.core.matrix import Matrix

    check_square(matrix, 'inverse')
    check_field_elements(matrix, 'inverse', stacklevel=stacklevel)

    rows = matrix.rows()
    n = matrix.height()
    zero = zero_of(matrix.element_type)
    out = Matrix.identity(n, matrix.element_type).rows()

    # Forward elimination to upper triangular form
    for i in range(n - 1):
        if is_zero(rows[i][i], zero):
            pivot = find_pivot(rows, i + 1, i, zero)
            if pivot is None:
                raise SingularMatrixError(
                    f"inverse: matrix is singular (no pivot in column {i})",
                    pivot_index=i,
                    size=n,
                )
            swap_rows(rows, i, pivot)
            swap_rows(out, i, pivot)
        for j in range(i + 1, n):
            ratio = rows[j][i] / rows[i][i]
            subtract_row(rows, j, i, ratio, start=i)
            # The companion can be nonzero anywhere in row i.
            subtract_row(out, j, i, ratio)

    # Scale every pivot to one
    for i in range(n):
        divisor = rows[i][i]
        if is_zero(divisor, zero):
            raise SingularMatrixError(
                f"inverse: matrix is singular (zero pivot at ({i}, {i}) after elimination)",
                pivot_index=i,
                size=n,
            )
        divide_row(rows, i, divisor, start=i)
        divide_row(out, i, divisor)

    # Back substitution, bottom row first
    for i in range(n - 1, 0, -1):
        for j in range(i - 1, -1, -1):
            subtract_row(out, j, i, rows[j][i])

    return Matrix._wrap(out)
