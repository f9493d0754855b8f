"""
Determinant computation.

Two algorithms with different requirements on the element type:

    det_cofactor: Laplace expansion along the first row. Only needs ring
        operations, so it works for integers, polynomials, modular
        arithmetic without inverses, ... It does O(n!) work.
    det_elimination: Gaussian elimination with row swaps. Needs division
        (a field element type) and does O(n^3) work. Preferred whenever
        the entries can be divided.

Both return exactly the same value for exact field types such as Fraction.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

from pymatrix.core.elements import is_zero, one_of, zero_of
from pymatrix.core.exceptions import CofactorCostWarning
from pymatrix.core.protocols import T
from pymatrix.core.tolerances import COFACTOR_WARN_SIZE
from pymatrix.core.validation import check_field_elements, check_square
from pymatrix.linalg._common import find_pivot, subtract_row, swap_rows

if TYPE_CHECKING:
    from pymatrix.core.matrix import Matrix


def det_cofactor(matrix: Matrix[T], *, stacklevel: int = 2) -> T:
    """
    Determinant of a square matrix by cofactor expansion.

    Args:
        matrix: Square matrix over any ring element type
        stacklevel: Stack level for CofactorCostWarning (2 = our caller)

    Returns:
        The determinant, of the matrix's element type

    Raises:
        NotSquareError: If the matrix is not square

    Example:
        >>> det_cofactor(Matrix.from_rows([[1, 2], [3, 4]]))
        -2
    """
    check_square(matrix, 'det')
    if matrix.width() > COFACTOR_WARN_SIZE:
        warnings.warn(
            f"det: cofactor expansion of a {matrix.width()}x{matrix.width()} matrix "
            f"takes factorial time; use det_in_field() for field element types",
            CofactorCostWarning,
            stacklevel=stacklevel,
        )
    return _expand(matrix)


def _expand(matrix: Matrix[T]) -> T:
    first = matrix.rows()[0]
    if matrix.width() == 1:
        return first[0]

    out = zero_of(matrix.element_type)
    for i, entry in enumerate(first):
        minor = _expand(matrix.submatrix(0, i))
        if i % 2 == 0:
            out = out + entry * minor
        else:
            out = out - entry * minor
    return out


def det_elimination(matrix: Matrix[T], *, stacklevel: int = 2) -> T:
    """
    Determinant of a square matrix by row reduction.

    Reduces a copy of the entries to upper triangular form. Every row swap
    flips the sign of a running multiplier; the determinant is the
    multiplier times the product of the diagonal. A column with no nonzero
    pivot candidate means the determinant is zero.

    The result always has the type of a quotient of entries, so int
    entries give a float on every path, including the singular one.

    Args:
        matrix: Square matrix over a field element type
        stacklevel: Stack level for IntegerDivisionWarning (2 = our caller)

    Returns:
        The determinant

    Raises:
        NotSquareError: If the matrix is not square
        ElementTypeError: If the entries do not support division

    Example:
        >>> det_elimination(Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]]))
        -2.0
    """
    check_square(matrix, 'det_in_field')
    check_field_elements(matrix, 'det_in_field', stacklevel=stacklevel)

    # Row operations happen on the copy returned by rows().
    rows = matrix.rows()
    zero = zero_of(matrix.element_type)
    one = one_of(matrix.element_type)
    multiplier = one
    h = matrix.height()

    for i in range(h - 1):
        if is_zero(rows[i][i], zero):
            pivot = find_pivot(rows, i + 1, i, zero)
            if pivot is None:
                return zero / one
            swap_rows(rows, i, pivot)
            multiplier = -multiplier
        for j in range(i + 1, h):
            ratio = rows[j][i] / rows[i][i]
            subtract_row(rows, j, i, ratio, start=i)

    for i, row in enumerate(rows):
        multiplier = multiplier * row[i]
    return multiplier / one
