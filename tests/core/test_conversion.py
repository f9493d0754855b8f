"""
Tests for element-type conversion.

Validates:
    - int -> float / Fraction / complex conversion preserves values and shape
    - Matrix.convert and convert() agree
    - numpy scalar types as converters
    - Failing converters raise ConversionError with the entry position
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix, convert
from pymatrix.core.exceptions import ConversionError


class TestConvert:

    def test_int_to_float(self):
        a = Matrix.from_rows([[1, 2, 3], [0, 1, 2]])
        b = Matrix.from_rows([[1.0, 2.0, 3.0], [0.0, 1.0, 2.0]])
        c = a.convert(float)
        assert c == b
        assert c.element_type is float

    def test_function_and_method_agree(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        assert convert(a, Fraction) == a.convert(Fraction)

    def test_shape_preserved(self, random_int_matrix):
        a = random_int_matrix(3, 5)
        assert a.convert(complex).shape == (3, 5)

    def test_source_untouched(self):
        a = Matrix.from_rows([[1, 2]])
        a.convert(float)
        assert a.element_type is int

    def test_numpy_scalar_type(self):
        c = Matrix.from_rows([[1, 2]]).convert(np.float32)
        assert c.element_type is np.float32

    def test_lambda_converter(self):
        c = Matrix.from_rows([[1, 2]]).convert(lambda x: Fraction(x, 3))
        assert c == Matrix.from_rows([[Fraction(1, 3), Fraction(2, 3)]])

    def test_failing_converter(self):
        a = Matrix.from_rows([[1.0, float('nan')]])
        with pytest.raises(ConversionError) as exc_info:
            a.convert(Fraction)
        assert exc_info.value.position == (0, 1)
        assert exc_info.value.target is Fraction

    def test_non_ring_result(self):
        with pytest.raises(ConversionError, match="not a ring element"):
            Matrix.from_rows([[1]]).convert(str)
