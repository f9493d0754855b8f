"""
Identity elements for matrix entry types.

Python numbers have no static zero()/one() the way a numeric trait would
provide them, so we derive them from the element type:

    1. If the type defines a callable ``zero`` (resp. ``one``) attribute,
       it is called with no arguments. User-defined ring types (polynomials,
       modular integers, ...) use this hook.
    2. Otherwise the type is called with the integer 0 (resp. 1). This
       covers int, float, complex, Fraction, Decimal and numpy scalars.
"""

from __future__ import annotations

from typing import Any

from pymatrix.core.exceptions import ElementTypeError


def _identity(element_type: type, hook: str, value: int) -> Any:
    factory = getattr(element_type, hook, None)
    if callable(factory):
        return factory()
    try:
        return element_type(value)
    except (TypeError, ValueError) as e:
        raise ElementTypeError(
            f"cannot build {hook} for element type {element_type.__name__}: "
            f"define a {hook}() classmethod or accept {element_type.__name__}({value})",
            element_type=element_type,
        ) from e


def zero_of(element_type: type) -> Any:
    """
    Additive identity of an element type.

    Args:
        element_type: Type of the matrix entries

    Returns:
        The zero of element_type

    Raises:
        ElementTypeError: If no zero can be constructed
    """
    return _identity(element_type, 'zero', 0)


def one_of(element_type: type) -> Any:
    """
    Multiplicative identity of an element type.

    Args:
        element_type: Type of the matrix entries

    Returns:
        The one of element_type

    Raises:
        ElementTypeError: If no one can be constructed
    """
    return _identity(element_type, 'one', 1)


def is_zero(value: Any, zero: Any) -> bool:
    """Exact comparison against the additive identity (no tolerance)."""
    return bool(value == zero)
