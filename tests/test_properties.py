"""
Algebraic identities that must hold for any valid input.

Checked on random matrices with exact entries (int for ring identities,
Fraction for field identities) so every comparison is exact.
"""

from fractions import Fraction

import pytest

from pymatrix import Matrix


SHAPES = [(1, 1), (2, 3), (3, 2), (4, 4)]


class TestAdditiveGroup:

    @pytest.mark.parametrize("shape", SHAPES)
    def test_associative(self, random_int_matrix, shape):
        a, b, c = (random_int_matrix(*shape) for _ in range(3))
        assert (a + b) + c == a + (b + c)

    @pytest.mark.parametrize("shape", SHAPES)
    def test_commutative(self, random_int_matrix, shape):
        a, b = random_int_matrix(*shape), random_int_matrix(*shape)
        assert a + b == b + a

    @pytest.mark.parametrize("shape", SHAPES)
    def test_inverse(self, random_int_matrix, shape):
        a = random_int_matrix(*shape)
        assert a + (-a) == Matrix.zero(a.height(), a.width())

    @pytest.mark.parametrize("shape", SHAPES)
    def test_sub_is_add_neg(self, random_int_matrix, shape):
        a, b = random_int_matrix(*shape), random_int_matrix(*shape)
        assert a - b == a + (-b)


class TestMultiplication:

    @pytest.mark.parametrize("shape", SHAPES)
    def test_identity_both_sides(self, random_int_matrix, shape):
        a = random_int_matrix(*shape)
        assert a * Matrix.identity(a.width()) == a
        assert Matrix.identity(a.height()) * a == a

    def test_associative(self, random_int_matrix):
        a, b, c = random_int_matrix(2, 3), random_int_matrix(3, 4), random_int_matrix(4, 2)
        assert (a * b) * c == a * (b * c)

    def test_transpose_of_product(self, random_int_matrix):
        a, b = random_int_matrix(2, 3), random_int_matrix(3, 4)
        assert (a * b).transpose() == b.transpose() * a.transpose()


class TestDeterminant:

    def test_multiplicative(self, random_int_matrix):
        a, b = random_int_matrix(3, 3), random_int_matrix(3, 3)
        assert (a * b).det() == a.det() * b.det()

    def test_transpose_invariant(self, random_int_matrix):
        a = random_int_matrix(4, 4)
        assert a.det() == a.transpose().det()

    def test_diagonal_product(self):
        assert Matrix.diagonal_matrix([2, 3, 5]).det() == 30

    def test_trace_of_diagonal(self):
        assert Matrix.diagonal_matrix([2, 3, 5]).trace() == 10


class TestInverseIdentities:

    def test_inverse_of_inverse(self, invertible_fraction_matrix):
        a = invertible_fraction_matrix
        assert a.inverse().inverse() == a

    def test_det_of_inverse(self, invertible_fraction_matrix):
        a = invertible_fraction_matrix
        assert a.inverse().det_in_field() == Fraction(1) / a.det_in_field()
