"""
Matrix: a dense matrix over any ring element type.

A Matrix is an ordered, non-empty sequence of equally long rows. Entries
can be anything satisfying RingElement (int, float, complex, Fraction,
Decimal, numpy scalars, user-defined types); routines that divide also
need FieldElement.

Matrices behave as values: every operation returns a new Matrix with its
own row lists, and no Matrix ever shares a row list with another Matrix
or with the caller. The one exception is mul_scalar(), which scales the
receiver in place.

Construction:
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.zero(2, 3, float)
    Matrix.identity(3, Fraction)
    Matrix.diagonal_matrix([1, 2, 3])
    Matrix.from_array(np.eye(3))
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.elements import one_of, zero_of
from pymatrix.core.exceptions import EmptyMatrixError, ValidationError
from pymatrix.core.protocols import S, T
from pymatrix.core.tolerances import ToleranceTier, looser, select_tolerance
from pymatrix.core.validation import (
    check_index,
    check_inner_dimensions,
    check_ring_elements,
    check_rows,
    check_same_shape,
    check_square,
)


class Matrix(Generic[T]):
    """
    Dense row-major matrix over a ring element type T.

    Invariants:
        - height >= 1 and width >= 1
        - every row has exactly width entries
        - row lists are owned by this instance alone

    Equality is element-wise and requires equal dimensions. Because
    mul_scalar() mutates, matrices are not hashable.
    """

    __slots__ = ('_entries',)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Sequence[T]]):
        entries = check_rows(list(rows), 'rows')
        check_ring_elements(entries, 'rows')
        self._entries: list[list[T]] = entries

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]) -> Matrix[T]:
        """
        Build a matrix from row data.

        Args:
            rows: Ordered collection of equally long rows

        Returns:
            New Matrix; the input rows are copied

        Raises:
            UnequalRowsError: If rows have differing lengths
            EmptyMatrixError: If there are no rows or no columns
            ElementTypeError: If an entry is not a ring element

        Example:
            >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).shape
            (2, 3)
        """
        return cls(rows)

    @classmethod
    def _wrap(cls, entries: list[list[T]]) -> Matrix[T]:
        """Adopt already-validated row lists without copying them."""
        out = cls.__new__(cls)
        out._entries = entries
        return out

    @classmethod
    def zero(cls, height: int, width: int, element_type: type = int) -> Matrix[Any]:
        """
        Zero matrix of a given size.

        Args:
            height: Number of rows (>= 1)
            width: Number of columns (>= 1)
            element_type: Type whose additive identity fills the matrix
        """
        if height < 1 or width < 1:
            raise EmptyMatrixError(
                f"zero: height and width must be >= 1, got {height}x{width}"
            )
        zero = zero_of(element_type)
        check_ring_elements([[zero]], 'element_type')
        return cls._wrap([[zero for _ in range(width)] for _ in range(height)])

    @classmethod
    def identity(cls, size: int, element_type: type = int) -> Matrix[Any]:
        """Square matrix with one on the diagonal and zero elsewhere."""
        out = cls.zero(size, size, element_type)
        one = one_of(element_type)
        for i, row in enumerate(out._entries):
            row[i] = one
        return out

    @classmethod
    def diagonal_matrix(
        cls,
        diag: Sequence[T],
        element_type: type | None = None,
    ) -> Matrix[T]:
        """
        Square matrix with the given diagonal and zero elsewhere.

        Args:
            diag: Diagonal entries, in order
            element_type: Type supplying the off-diagonal zero. Defaults to
                the type of diag[0].

        Example:
            >>> Matrix.diagonal_matrix([1, 2, 3]) == Matrix.from_rows(
            ...     [[1, 0, 0], [0, 2, 0], [0, 0, 3]])
            True
        """
        diag = list(diag)
        if len(diag) == 0:
            raise EmptyMatrixError("diagonal_matrix: diagonal must have at least one entry")
        check_ring_elements([diag], 'diag')
        out = cls.zero(len(diag), len(diag), element_type or type(diag[0]))
        for i, row in enumerate(out._entries):
            row[i] = diag[i]
        return out

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a matrix from a 2D array-like.

        numpy arrays are converted with tolist(), so entries become
        Python scalars (float, int, complex, bool).

        Raises:
            ValidationError: If the input is not 2-dimensional
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValidationError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )
        return cls(arr.tolist())

    # ------------------------------------------------------------------
    # Structural accessors
    # ------------------------------------------------------------------

    def height(self) -> int:
        """Number of rows."""
        return len(self._entries)

    def width(self) -> int:
        """Number of columns."""
        return len(self._entries[0])

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self._entries), len(self._entries[0]))

    @property
    def element_type(self) -> type:
        """Type of the entry at (0, 0)."""
        return type(self._entries[0][0])

    def is_square(self) -> bool:
        return self.height() == self.width()

    def rows(self) -> list[list[T]]:
        """Row-major copy of the entries."""
        return [list(row) for row in self._entries]

    def columns(self) -> list[list[T]]:
        """Column-major copy of the entries, computed by transposition."""
        return self.transpose()._entries

    def entry(self, row: int, col: int) -> T:
        """Entry at zero-based (row, col)."""
        check_index(row, self.height(), 'row')
        check_index(col, self.width(), 'column')
        return self._entries[row][col]

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, col = key
        return self.entry(row, col)

    def copy(self) -> Matrix[T]:
        return Matrix._wrap(self.rows())

    def transpose(self) -> Matrix[T]:
        """New matrix with out[j][i] == self[i][j]."""
        return Matrix._wrap([list(column) for column in zip(*self._entries)])

    def submatrix(self, row: int, col: int) -> Matrix[T]:
        """
        Matrix with one row and one column removed.

        Row and column numbers are 0-indexed.

        Raises:
            MatrixIndexError: If row or col is out of range
            EmptyMatrixError: If removing them would leave no entries

        Example:
            >>> m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
            >>> m.submatrix(0, 0) == Matrix.from_rows([[5, 6]])
            True
        """
        check_index(row, self.height(), 'row')
        check_index(col, self.width(), 'column')
        if self.height() == 1 or self.width() == 1:
            raise EmptyMatrixError(
                f"submatrix: removing a row and a column from a "
                f"{self.height()}x{self.width()} matrix leaves it empty"
            )
        return Matrix._wrap([
            [entry for n, entry in enumerate(row_entries) if n != col]
            for m, row_entries in enumerate(self._entries)
            if m != row
        ])

    # ------------------------------------------------------------------
    # Scalars: trace and scaling
    # ------------------------------------------------------------------

    def trace(self) -> T:
        """
        Sum of the diagonal entries.

        Raises:
            NotSquareError: If the matrix is not square

        Example:
            >>> Matrix.from_rows([[1, 2], [3, 4]]).trace()
            5
        """
        check_square(self, 'trace')
        out = self._entries[0][0]
        for i in range(1, self.height()):
            out = out + self._entries[i][i]
        return out

    def mul_scalar(self, scalar: T) -> None:
        """
        Multiply every entry by a scalar, in place.

        This is the only operation that modifies a Matrix. Use scaled()
        for a new matrix instead.
        """
        for row in self._entries:
            for j, entry in enumerate(row):
                row[j] = entry * scalar

    def scaled(self, scalar: T) -> Matrix[T]:
        """New matrix with every entry multiplied by scalar."""
        out = self.copy()
        out.mul_scalar(scalar)
        return out

    # ------------------------------------------------------------------
    # Elimination algorithms (see pymatrix.linalg)
    # ------------------------------------------------------------------

    def det(self) -> T:
        """Determinant by cofactor expansion; works over any ring."""
        from pymatrix.linalg.determinant import det_cofactor
        return det_cofactor(self, stacklevel=3)

    def det_in_field(self) -> T:
        """Determinant by row reduction; needs a field element type."""
        from pymatrix.linalg.determinant import det_elimination
        return det_elimination(self, stacklevel=3)

    def row_echelon(self) -> Matrix[T]:
        from pymatrix.linalg.echelon import row_echelon
        return row_echelon(self, stacklevel=3)

    def column_echelon(self) -> Matrix[T]:
        from pymatrix.linalg.echelon import column_echelon
        return column_echelon(self, stacklevel=3)

    def reduced_row_echelon(self) -> Matrix[T]:
        from pymatrix.linalg.echelon import reduced_row_echelon
        return reduced_row_echelon(self, stacklevel=3)

    def rank(self) -> int:
        from pymatrix.linalg.echelon import rank
        return rank(self, stacklevel=3)

    def inverse(self) -> Matrix[T]:
        from pymatrix.linalg.inverse import inverse
        return inverse(self, stacklevel=3)

    # ------------------------------------------------------------------
    # Arithmetic operators
    # ------------------------------------------------------------------

    def __add__(self, other: Matrix[T]) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self, other, 'add')
        return Matrix._wrap([
            [a + b for a, b in zip(left, right)]
            for left, right in zip(self._entries, other._entries)
        ])

    def __neg__(self) -> Matrix[T]:
        return Matrix._wrap([[-entry for entry in row] for row in self._entries])

    def __sub__(self, other: Matrix[T]) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self, other, 'sub')
        return self + (-other)

    def __mul__(self, other: Matrix[T]) -> Matrix[T]:
        """
        Matrix product.

        Each entry is accumulated starting from the first term, so no
        additive identity is needed.

        Raises:
            DimensionError: If self.width() != other.height()
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        check_inner_dimensions(self, other)
        width = self.width()
        columns = other.columns()
        out = []
        for row in self._entries:
            new_row = []
            for col in columns:
                prod = row[0] * col[0]
                for k in range(1, width):
                    prod = prod + row[k] * col[k]
                new_row.append(prod)
            out.append(new_row)
        return Matrix._wrap(out)

    __matmul__ = __mul__

    # ------------------------------------------------------------------
    # Comparison, conversion, display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and all(
            a == b
            for left, right in zip(self._entries, other._entries)
            for a, b in zip(left, right)
        )

    def allclose(self, other: Matrix[Any], tolerance: ToleranceTier | None = None) -> bool:
        """
        Approximate equality for floating-point entries.

        Args:
            other: Matrix to compare against
            tolerance: Tier to use. If None, the looser of the tiers selected
                from the two element types, so a.allclose(b) == b.allclose(a)

        Returns:
            False on differing shapes, otherwise numpy.allclose on the entries

        Raises:
            TypeError: If other is not a Matrix
        """
        if not isinstance(other, Matrix):
            raise TypeError(
                f"allclose: expected a Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        tier = tolerance or looser(
            select_tolerance(self.element_type), select_tolerance(other.element_type)
        )
        if tier.rtol == 0.0 and tier.atol == 0.0:
            return self == other
        dtype = np.complex128 if (self._has_complex() or other._has_complex()) else np.float64
        return bool(np.allclose(
            self.to_numpy(dtype), other.to_numpy(dtype), rtol=tier.rtol, atol=tier.atol
        ))

    def _has_complex(self) -> bool:
        return any(
            isinstance(entry, (complex, np.complexfloating))
            for row in self._entries
            for entry in row
        )

    def convert(self, into: Callable[[T], S]) -> Matrix[S]:
        """
        Convert every entry with `into`, e.g. m.convert(float).

        See pymatrix.core.conversion.convert.
        """
        from pymatrix.core.conversion import convert
        return convert(self, into)

    def to_numpy(self, dtype: DTypeLike = None) -> NDArray[Any]:
        """Entries as a 2D numpy array (dtype inferred if None)."""
        return np.array(self._entries, dtype=dtype)

    def __repr__(self) -> str:
        return f"Matrix({self._entries!r})"

    def __str__(self) -> str:
        return repr(self._entries)
