"""Unit tests for affine transform builders."""

import math

import pytest

from raycore import (
    Matrix,
    Point,
    Vector,
    chain,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)

HALF_ROOT2 = math.sqrt(2) / 2


class TestTranslation:
    """Tests for translation."""

    def test_moves_point(self):
        assert translation(5, -3, 2) @ Point(-3, 4, 5) == Point(2, 1, 7)

    def test_inverse_moves_back(self):
        assert translation(5, -3, 2).inverse() @ Point(-3, 4, 5) == Point(-8, 7, 3)

    def test_leaves_vector_unchanged(self):
        v = Vector(-3, 4, 5)
        assert translation(5, -3, 2) @ v == v


class TestScaling:
    """Tests for scaling and reflection."""

    def test_scales_point(self):
        assert scaling(2, 3, 4) @ Point(-4, 6, 8) == Point(-8, 18, 32)

    def test_scales_vector(self):
        assert scaling(2, 3, 4) @ Vector(-4, 6, 8) == Vector(-8, 18, 32)

    def test_inverse_shrinks(self):
        assert scaling(2, 3, 4).inverse() @ Vector(-4, 6, 8) == Vector(-2, 2, 2)

    def test_reflection(self):
        assert scaling(-1, 1, 1) @ Point(2, 3, 4) == Point(-2, 3, 4)

    def test_zero_scale_is_singular(self):
        assert not scaling(0, 1, 1).is_invertible()


class TestRotation:
    """Tests for rotations around each axis."""

    def test_rotation_x(self):
        p = Point(0, 1, 0)
        assert rotation_x(math.pi / 4) @ p == Point(0, HALF_ROOT2, HALF_ROOT2)
        assert rotation_x(math.pi / 2) @ p == Point(0, 0, 1)

    def test_rotation_x_inverse(self):
        p = Point(0, 1, 0)
        assert rotation_x(math.pi / 4).inverse() @ p == Point(0, HALF_ROOT2, -HALF_ROOT2)

    def test_rotation_y(self):
        p = Point(0, 0, 1)
        assert rotation_y(math.pi / 4) @ p == Point(HALF_ROOT2, 0, HALF_ROOT2)
        assert rotation_y(math.pi / 2) @ p == Point(1, 0, 0)

    def test_rotation_z(self):
        p = Point(0, 1, 0)
        assert rotation_z(math.pi / 4) @ p == Point(-HALF_ROOT2, HALF_ROOT2, 0)
        assert rotation_z(math.pi / 2) @ p == Point(-1, 0, 0)

    def test_inverse_is_transpose(self):
        r = rotation_y(0.7)
        assert r.inverse() == r.transpose()


class TestShearing:
    """Tests for shearing."""

    @pytest.mark.parametrize(
        "factors, expected",
        [
            ((1, 0, 0, 0, 0, 0), Point(5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), Point(6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), Point(2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), Point(2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), Point(2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), Point(2, 3, 7)),
        ],
    )
    def test_shear_moves_one_axis(self, factors, expected):
        assert shearing(*factors) @ Point(2, 3, 4) == expected


class TestChain:
    """Tests for composing transforms."""

    def test_individual_steps(self):
        p = Point(1, 0, 1)
        p2 = rotation_x(math.pi / 2) @ p
        assert p2 == Point(1, -1, 0)
        p3 = scaling(5, 5, 5) @ p2
        assert p3 == Point(5, -5, 0)
        p4 = translation(10, 5, 7) @ p3
        assert p4 == Point(15, 0, 7)

    def test_chained_in_reverse_order(self):
        p = Point(1, 0, 1)
        t = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
        assert t @ p == Point(15, 0, 7)

    def test_chain_applies_first_argument_first(self):
        composed = chain(rotation_x(math.pi / 2), scaling(5, 5, 5), translation(10, 5, 7))
        assert composed @ Point(1, 0, 1) == Point(15, 0, 7)

    def test_empty_chain_is_identity(self):
        assert chain() == Matrix.identity(4)
