"""
Element protocols for PyMatrix.

A matrix entry only needs to behave like an element of a ring for most
operations; a handful of routines (row reduction, inversion) additionally
divide and therefore need a field. We use Protocol (structural typing)
rather than ABC (nominal typing) so that int, float, complex,
fractions.Fraction, decimal.Decimal, numpy scalars and user-defined types
all qualify without registration.

Additive and multiplicative identities are not part of the protocols:
they are looked up per element type by pymatrix.core.elements, which
honours optional zero()/one() hooks on user types.
"""

from typing import Protocol, TypeVar, runtime_checkable

# Element type variables
T = TypeVar('T')
S = TypeVar('S')


@runtime_checkable
class RingElement(Protocol):
    """
    Anything supporting +, -, * and unary -.

    Sufficient for construction, arithmetic, transpose, trace and the
    cofactor determinant.
    """

    def __add__(self, other, /): ...

    def __sub__(self, other, /): ...

    def __mul__(self, other, /): ...

    def __neg__(self): ...


@runtime_checkable
class FieldElement(RingElement, Protocol):
    """
    A ring element that can also be divided.

    Required by det_in_field, the echelon forms, rank and inverse.
    Equality is inherited from object and compared against the additive
    identity during pivot search.
    """

    def __truediv__(self, other, /): ...
