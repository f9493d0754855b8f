"""
Tolerance tiers and tunable thresholds.

Every matrix routine in PyMatrix compares entries exactly, which is correct
for exact element types (int, Fraction) and reproduces textbook elimination
for floats. Approximate comparison is opt-in through Matrix.allclose, which
uses the tiers defined here:

- EXACT: int, Fraction, Decimal and user-defined types
- FP64: float, complex and 64-bit numpy scalars
- FP32: 32-bit and smaller numpy floating scalars

Used by the test suite and by Matrix.allclose.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact element types: only equal values compare equal
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic: entries must compare equal',
)

# Double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision: a few ulps of elimination error',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision: relaxed for float32 numpy scalars',
)

# Cofactor expansion does n! work. Above this size det() warns and
# points at det_in_field().
COFACTOR_WARN_SIZE = 9


def select_tolerance(element_type: type) -> ToleranceTier:
    """Select appropriate tolerance tier for a given element type."""
    if issubclass(element_type, np.floating) or issubclass(element_type, np.complexfloating):
        if np.finfo(element_type).bits < 64:
            return FP32
        return FP64
    if issubclass(element_type, (float, complex)):
        return FP64
    return EXACT


def looser(first: ToleranceTier, second: ToleranceTier) -> ToleranceTier:
    """The more permissive of two tiers, so comparisons are symmetric."""
    if (second.rtol, second.atol) > (first.rtol, first.atol):
        return second
    return first
