"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of entries
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Recoverable input problems raise ValidationError subclasses;
      operator precondition violations raise ContractError subclasses
"""

from __future__ import annotations

import warnings
from typing import Any, Sequence, TYPE_CHECKING

import numpy as np

from pymatrix.core.exceptions import (
    DimensionError,
    ElementTypeError,
    EmptyMatrixError,
    IntegerDivisionWarning,
    MatrixIndexError,
    NotSquareError,
    UnequalRowsError,
)
from pymatrix.core.protocols import FieldElement, RingElement

if TYPE_CHECKING:
    from pymatrix.core.matrix import Matrix


def check_rows(rows: Sequence[Sequence[Any]], name: str) -> list[list[Any]]:
    """
    Validate row data and copy it into fresh lists.

    Args:
        rows: Ordered collection of rows
        name: Parameter name for error messages

    Returns:
        A list of row lists that shares no list objects with the input

    Raises:
        EmptyMatrixError: If there are no rows or the rows are empty
        UnequalRowsError: If the rows do not all share the same length
    """
    copied = [list(row) for row in rows]
    if len(copied) == 0:
        raise EmptyMatrixError(f"{name}: a matrix needs at least one row, got none")

    lengths = tuple(len(row) for row in copied)
    if len(set(lengths)) > 1:
        raise UnequalRowsError(
            f"{name}: all rows must have the same length, got lengths {list(lengths)}",
            row_lengths=lengths,
        )
    if lengths[0] == 0:
        raise EmptyMatrixError(
            f"{name}: a matrix needs at least one column, got {len(copied)} empty row(s)"
        )
    return copied


def check_ring_elements(rows: list[list[Any]], name: str) -> None:
    """
    Verify every entry supports +, -, * and unary -.

    Raises:
        ElementTypeError: On the first entry that is not a ring element
    """
    for i, row in enumerate(rows):
        for j, entry in enumerate(row):
            if not isinstance(entry, RingElement):
                raise ElementTypeError(
                    f"{name}: entry ({i}, {j}) of type {type(entry).__name__} "
                    f"does not support +, -, * and unary -",
                    element_type=type(entry),
                    required='ring',
                )


def check_field_elements(matrix: Matrix, operation: str, stacklevel: int = 2) -> None:
    """
    Verify a matrix's entries can be divided.

    Warns with IntegerDivisionWarning when the entries are integers (Python
    int or numpy integer scalars), since true division silently turns them
    into floats.

    Args:
        matrix: Matrix whose entries are checked
        operation: Operation name for messages
        stacklevel: Warning stack level as seen from the calling routine
            (2 points at whoever called that routine)

    Raises:
        ElementTypeError: If an entry does not support /
    """
    for i, row in enumerate(matrix.rows()):
        for j, entry in enumerate(row):
            if not isinstance(entry, FieldElement):
                raise ElementTypeError(
                    f"{operation}: entry ({i}, {j}) of type {type(entry).__name__} "
                    f"does not support division",
                    element_type=type(entry),
                    required='field',
                )

    element_type = matrix.element_type
    is_integer = issubclass(element_type, (int, np.integer))
    if is_integer and not issubclass(element_type, (bool, np.bool_)):
        warnings.warn(
            f"{operation}: int entries are divided with true division and the "
            f"result holds floats; convert to fractions.Fraction for exact results",
            IntegerDivisionWarning,
            stacklevel=stacklevel + 1,
        )


def check_square(matrix: Matrix, operation: str) -> None:
    """
    Verify a matrix is square.

    Args:
        matrix: Matrix to check
        operation: Operation name for error messages

    Raises:
        NotSquareError: If height != width
    """
    if not matrix.is_square():
        raise NotSquareError(
            f"{operation}: requires a square matrix, got shape "
            f"{matrix.height()}x{matrix.width()}",
            shape=matrix.shape,
            operation=operation,
        )


def check_same_shape(left: Matrix, right: Matrix, operation: str) -> None:
    """
    Verify two matrices have identical dimensions.

    Raises:
        DimensionError: If the shapes differ
    """
    if left.shape != right.shape:
        raise DimensionError(
            f"{operation}: operands have different dimensions "
            f"({left.height()}x{left.width()} vs {right.height()}x{right.width()})",
            left_shape=left.shape,
            right_shape=right.shape,
            operation=operation,
        )


def check_inner_dimensions(left: Matrix, right: Matrix) -> None:
    """
    Verify left.width() == right.height() for a matrix product.

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if left.width() != right.height():
        raise DimensionError(
            f"mul: row length of first matrix ({left.width()}) != "
            f"column length of second matrix ({right.height()})",
            left_shape=left.shape,
            right_shape=right.shape,
            operation='mul',
        )


def check_index(index: int, bound: int, axis: str) -> None:
    """
    Verify 0 <= index < bound.

    Negative indices are rejected rather than wrapped.

    Raises:
        MatrixIndexError: If the index is out of range
    """
    if not 0 <= index < bound:
        raise MatrixIndexError(
            f"{axis} index {index} out of range for {bound} {axis}(s)",
            index=index,
            bound=bound,
            axis=axis,
        )
