"""
Elimination algorithms for PyMatrix.

All functions take a Matrix and return a new value; none of them modify
their input. Each is also available as a Matrix method.

Submodules:
    determinant: Cofactor expansion and row-reduction determinants
    echelon: Row, column and reduced row echelon forms; rank
    inverse: Gauss-Jordan inversion
"""

from pymatrix.linalg.determinant import det_cofactor, det_elimination
from pymatrix.linalg.echelon import (
    column_echelon,
    rank,
    reduced_row_echelon,
    row_echelon,
)
from pymatrix.linalg.inverse import inverse

__all__ = [
    # Determinants
    "det_cofactor",
    "det_elimination",
    # Echelon forms
    "row_echelon",
    "column_echelon",
    "reduced_row_echelon",
    "rank",
    # Inverse
    "inverse",
]
