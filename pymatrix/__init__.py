"""
PyMatrix: generic dense matrices for Python.

Matrices over any ring element type (int, float, complex, Fraction,
Decimal, numpy scalars, user-defined types) with determinants, echelon
forms, inverses and element-type conversion.

Submodules:
    core: Matrix type, element protocols, validation, exceptions
    linalg: Determinant, echelon form and inverse algorithms
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pymatrix.core import (
    Matrix,
    convert,
    RingElement,
    FieldElement,
    PyMatrixError,
    ValidationError,
    EmptyMatrixError,
    UnequalRowsError,
    NotSquareError,
    ElementTypeError,
    ConversionError,
    NumericalError,
    SingularMatrixError,
    ContractError,
    DimensionError,
    MatrixIndexError,
)
from pymatrix import linalg

__all__ = [
    "__version__",
    "Matrix",
    "convert",
    "linalg",
    "RingElement",
    "FieldElement",
    "PyMatrixError",
    "ValidationError",
    "EmptyMatrixError",
    "UnequalRowsError",
    "NotSquareError",
    "ElementTypeError",
    "ConversionError",
    "NumericalError",
    "SingularMatrixError",
    "ContractError",
    "DimensionError",
    "MatrixIndexError",
]
