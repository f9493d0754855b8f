"""
Core infrastructure for PyMatrix.

Key components:
    matrix: The Matrix type and its structural and arithmetic operations
    protocols: RingElement, FieldElement element protocols
    elements: Additive/multiplicative identities per element type
    conversion: Element-type conversion between matrices
    exceptions: Exception and warning hierarchy
    validation: Input validators
    tolerances: Tolerance tiers and tunable thresholds
"""

from pymatrix.core.protocols import RingElement, FieldElement
from pymatrix.core.matrix import Matrix
from pymatrix.core.conversion import convert
from pymatrix.core.exceptions import (
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
    PyMatrixWarning,
    CofactorCostWarning,
    IntegerDivisionWarning,
)

__all__ = [
    # Matrix
    "Matrix",
    "convert",
    # Protocols
    "RingElement",
    "FieldElement",
    # Exceptions
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
    # Warnings
    "PyMatrixWarning",
    "CofactorCostWarning",
    "IntegerDivisionWarning",
]
