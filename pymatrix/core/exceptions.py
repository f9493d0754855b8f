"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. There are three branches:

    ValidationError: the caller handed us data we cannot work with
        (ragged rows, non-square input to a square-only operation, ...).
        These are recoverable input errors.
    NumericalError: the input was well-formed but the computation has no
        answer (a singular matrix has no inverse).
    ContractError: the caller broke a documented precondition of an
        operator (adding matrices of different shapes, indexing outside
        the matrix). These indicate a bug in the calling code.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class EmptyMatrixError(ValidationError):
    """
    A matrix with no rows or no columns was requested.

    Every matrix has height >= 1 and width >= 1.
    """
    pass


class UnequalRowsError(ValidationError):
    """
    Rows passed to a constructor have differing lengths.

    Attributes:
        row_lengths: Length of every row that was supplied
    """

    def __init__(self, message: str, row_lengths: tuple[int, ...] | None = None):
        super().__init__(message)
        self.row_lengths = row_lengths


class NotSquareError(ValidationError):
    """
    A square-only operation was given a non-square matrix.

    Attributes:
        shape: (height, width) of the offending matrix
        operation: Name of the operation that required a square matrix
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.operation = operation


class ElementTypeError(ValidationError, TypeError):
    """
    An entry does not support the arithmetic an operation needs.

    Ring operations need +, -, * and unary -; field operations also need /.

    Attributes:
        element_type: The offending Python type
        required: 'ring' or 'field'
    """

    def __init__(
        self,
        message: str,
        element_type: type | None = None,
        required: str | None = None,
    ):
        super().__init__(message)
        self.element_type = element_type
        self.required = required


class ConversionError(ValidationError):
    """
    Converting an entry to the target element type failed.

    Attributes:
        position: (row, column) of the entry that failed to convert
        target: The converter that was applied
    """

    def __init__(
        self,
        message: str,
        position: tuple[int, int] | None = None,
        target: object | None = None,
    ):
        super().__init__(message)
        self.position = position
        self.target = target


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from the mathematics of the input rather
    than its shape.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix has no multiplicative inverse.

    Attributes:
        pivot_index: Column at which elimination found no usable pivot
        size: Dimension of the (square) matrix
    """

    def __init__(
        self,
        message: str,
        pivot_index: int | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.pivot_index = pivot_index
        self.size = size


class ContractError(PyMatrixError):
    """
    A documented precondition of an operation was violated.

    Unlike ValidationError these are programmer errors: the calling code
    should have checked shapes or indices before making the call.
    """
    pass


class DimensionError(ContractError, ValueError):
    """
    Matrix dimensions are incompatible for an arithmetic operator.

    Raised by +, - and * when shapes do not line up.

    Attributes:
        left_shape: (height, width) of the left operand
        right_shape: (height, width) of the right operand
        operation: Operator name ('add', 'sub', 'mul')
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class MatrixIndexError(ContractError, IndexError):
    """
    A row or column index lies outside the matrix.

    Attributes:
        index: The index that was supplied
        bound: Exclusive upper bound for the index
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class PyMatrixWarning(UserWarning):
    """Base class for non-fatal PyMatrix diagnostics."""
    pass


class CofactorCostWarning(PyMatrixWarning):
    """Cofactor expansion was requested for a matrix large enough to be slow."""
    pass


class IntegerDivisionWarning(PyMatrixWarning):
    """A field-only routine ran on int entries; results are promoted to float."""
    pass
