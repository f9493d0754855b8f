"""
Tests for determinant computation.

Validates:
    - Cofactor expansion over integers (exact ring arithmetic)
    - Row-reduction determinant, including row swaps and singular input
    - Both algorithms agree on exact field types
    - Row-reduction matches LAPACK (scipy.linalg.det) on floats
    - NotSquareError, size warning, int promotion warning
    - Warnings are attributed to the calling line
"""

from fractions import Fraction

import numpy as np
import pytest
from scipy import linalg as sp_linalg

from pymatrix import Matrix
from pymatrix.core.exceptions import (
    CofactorCostWarning,
    IntegerDivisionWarning,
    NotSquareError,
)
from pymatrix.core.tolerances import COFACTOR_WARN_SIZE
from pymatrix.linalg import det_cofactor, det_elimination


class TestCofactor:

    def test_two_by_two(self):
        assert Matrix.from_rows([[1, 2], [3, 4]]).det() == -2

    def test_upper_triangular(self):
        a = Matrix.from_rows([[1, 2, 0], [0, 3, 5], [0, 0, 10]])
        assert a.det() == 30

    def test_one_by_one(self):
        assert Matrix.from_rows([[7]]).det() == 7

    def test_result_stays_int(self):
        result = Matrix.from_rows([[2, 1], [1, 2]]).det()
        assert result == 3
        assert type(result) is int

    def test_not_square(self):
        b = Matrix.from_rows([[1, 2, 0], [0, 3, 5]])
        with pytest.raises(NotSquareError) as exc_info:
            b.det()
        assert exc_info.value.operation == 'det'

    def test_function_form(self):
        assert det_cofactor(Matrix.identity(3)) == 1

    def test_large_matrix_warns(self, monkeypatch):
        # Skip the factorial expansion itself; only the size check matters here.
        monkeypatch.setattr("pymatrix.linalg.determinant._expand", lambda m: 0)
        m = Matrix.identity(COFACTOR_WARN_SIZE + 1)
        with pytest.warns(CofactorCostWarning, match="det_in_field"):
            m.det()

    def test_threshold_size_does_not_warn(self, recwarn):
        Matrix.identity(4).det()
        assert not any(isinstance(w.message, CofactorCostWarning) for w in recwarn)


class TestElimination:

    def test_row_swap_flips_sign(self):
        c = Matrix.from_rows([
            [0.0, 0.0, 10.0],
            [0.0, 3.0, 5.0],
            [1.0, 2.0, 0.0],
        ])
        assert c.det_in_field() == -30.0

    def test_two_by_two(self):
        assert Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]]).det_in_field() == -2.0

    def test_one_by_one(self):
        assert Matrix.from_rows([[Fraction(3, 4)]]).det_in_field() == Fraction(3, 4)

    def test_singular_column_is_zero(self):
        m = Matrix.from_rows([[0.0, 1.0], [0.0, 2.0]])
        assert m.det_in_field() == 0.0

    def test_dependent_rows(self):
        m = Matrix.from_rows([[Fraction(1), Fraction(2)], [Fraction(2), Fraction(4)]])
        assert m.det_in_field() == 0

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix.zero(2, 3, float).det_in_field()

    def test_int_entries_warn(self):
        with pytest.warns(IntegerDivisionWarning):
            result = Matrix.from_rows([[1, 2], [3, 4]]).det_in_field()
        assert result == pytest.approx(-2.0)

    def test_numpy_int_entries_warn(self):
        m = Matrix.from_rows(np.array([[1, 2], [3, 4]]))
        with pytest.warns(IntegerDivisionWarning):
            result = m.det_in_field()
        assert result == pytest.approx(-2.0)

    def test_int_result_type_same_when_singular(self):
        with pytest.warns(IntegerDivisionWarning):
            singular = Matrix.from_rows([[0, 1], [0, 2]]).det_in_field()
            regular = Matrix.from_rows([[1, 2], [3, 4]]).det_in_field()
        assert singular == 0
        assert type(singular) is float
        assert type(regular) is float

    def test_input_untouched(self):
        m = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
        det_elimination(m)
        assert m == Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])


class TestAgreement:

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
    def test_cofactor_matches_elimination_exactly(self, random_fraction_matrix, size):
        m = random_fraction_matrix(size, size)
        assert m.det() == m.det_in_field()

    def test_matches_lapack(self, rng):
        arr = rng.standard_normal((6, 6))
        m = Matrix.from_array(arr)
        np.testing.assert_allclose(m.det_in_field(), sp_linalg.det(arr), rtol=1e-8)


# ═══════════════════════════════════════════════════════════════════════
# Warning locations
# ═══════════════════════════════════════════════════════════════════════


class TestWarningLocation:
    """Warnings point at the line that called into the library."""

    def test_method_call(self):
        with pytest.warns(IntegerDivisionWarning) as record:
            Matrix.from_rows([[1, 2], [3, 4]]).det_in_field()
        assert record[0].filename == __file__

    def test_function_call(self):
        with pytest.warns(IntegerDivisionWarning) as record:
            det_elimination(Matrix.from_rows([[1, 2], [3, 4]]))
        assert record[0].filename == __file__

    def test_cofactor_method_and_function(self, monkeypatch):
        monkeypatch.setattr("pymatrix.linalg.determinant._expand", lambda m: 0)
        m = Matrix.identity(COFACTOR_WARN_SIZE + 1)
        with pytest.warns(CofactorCostWarning) as record:
            m.det()
            det_cofactor(m)
        assert [w.filename for w in record] == [__file__, __file__]
