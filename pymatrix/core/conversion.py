"""
Element-type conversion between matrices.

There is one conversion interface: a converter is any callable taking an
entry of the source type and returning an entry of the target type. A
type is the common case (int -> float via ``float``, int -> Fraction via
``Fraction``), but any total function works, e.g. a numpy scalar type or
``lambda x: Mod7(x)``.

The converter is applied to every entry; dimensions are preserved exactly.
"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from pymatrix.core.exceptions import ConversionError
from pymatrix.core.protocols import RingElement, S, T

if TYPE_CHECKING:
    from pymatrix.core.matrix import Matrix


def convert(matrix: Matrix[T], into: Callable[[T], S]) -> Matrix[S]:
    """
    Convert a matrix to a new element type.

    Args:
        matrix: Source matrix
        into: Per-entry converter (usually the target type itself)

    Returns:
        New matrix of the same shape with into(entry) at every position

    Raises:
        ConversionError: If `into` rejects an entry or yields a value that
            is not a ring element

    Example:
        >>> a = Matrix.from_rows([[1, 2, 3], [0, 1, 2]])
        >>> convert(a, float) == Matrix.from_rows([[1.0, 2.0, 3.0], [0.0, 1.0, 2.0]])
        True
    """
    from pymatrix.core.matrix import Matrix

    name = getattr(into, '__name__', repr(into))
    out = []
    for i, row in enumerate(matrix.rows()):
        new_row = []
        for j, entry in enumerate(row):
            try:
                value = into(entry)
            except (TypeError, ValueError, ArithmeticError) as e:
                raise ConversionError(
                    f"convert: cannot convert entry ({i}, {j}) = {entry!r} with {name}: {e}",
                    position=(i, j),
                    target=into,
                ) from e
            if not isinstance(value, RingElement):
                raise ConversionError(
                    f"convert: {name} turned entry ({i}, {j}) into "
                    f"{type(value).__name__}, which is not a ring element",
                    position=(i, j),
                    target=into,
                )
            new_row.append(value)
        out.append(new_row)
    return Matrix._wrap(out)
