"""Unit tests for tuples, points, vectors and colors.

Tests cover:
- Point/vector construction and the w component
- Arithmetic operators and their named equivalents
- Magnitude, normalization, dot, cross and reflection
- Approximate equality with an explicit tolerance
- Color arithmetic
"""

import math

import pytest

from tracer.errors import ZeroMagnitudeError
from tracer.tuples import EPSILON, Color, Tuple, equal, point, vector


class TestConstruction:
    """Tests for tuple kinds."""

    def test_tuple_with_w_1_is_a_point(self):
        a = Tuple(4.3, -4.2, 3.1, 1.0)
        assert (a.x, a.y, a.z, a.w) == (4.3, -4.2, 3.1, 1.0)
        assert a.is_point()
        assert not a.is_vector()

    def test_tuple_with_w_0_is_a_vector(self):
        a = Tuple(4.3, -4.2, 3.1, 0.0)
        assert a.is_vector()
        assert not a.is_point()

    def test_point_and_vector_factories(self):
        assert point(4, -4, 3) == Tuple(4, -4, 3, 1)
        assert vector(4, -4, 3) == Tuple(4, -4, 3, 0)


class TestEquality:
    """Tests for epsilon comparisons."""

    def test_equal_within_epsilon(self):
        assert equal(1.0, 1.0 + EPSILON / 2)
        assert not equal(1.0, 1.0 + EPSILON * 2)

    def test_explicit_tolerance(self):
        a = point(1, 2, 3)
        b = point(1.001, 2, 3)
        assert a != b
        assert a.equals(b, epsilon=1e-2)

    def test_tuples_are_not_hashable(self):
        with pytest.raises(TypeError):
            hash(point(0, 0, 0))


class TestArithmetic:
    """Tests for tuple operators."""

    def test_adding_two_tuples(self):
        a1 = Tuple(3, -2, 5, 1)
        a2 = Tuple(-2, 3, 1, 0)
        assert a1 + a2 == Tuple(1, 1, 6, 1)
        assert a1.add(a2) == Tuple(1, 1, 6, 1)

    def test_subtracting_two_points_gives_a_vector(self):
        assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)

    def test_subtracting_a_vector_from_a_point(self):
        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_subtracting_two_vectors(self):
        assert vector(3, 2, 1).subtract(vector(5, 6, 7)) == vector(-2, -4, -6)

    def test_subtracting_from_the_zero_vector(self):
        assert vector(0, 0, 0) - vector(1, -2, 3) == vector(-1, 2, -3)

    def test_negating_a_tuple(self):
        assert -Tuple(1, -2, 3, -4) == Tuple(-1, 2, -3, 4)
        assert Tuple(1, -2, 3, -4).negate() == Tuple(-1, 2, -3, 4)

    def test_multiplying_by_a_scalar(self):
        a = Tuple(1, -2, 3, -4)
        assert a * 3.5 == Tuple(3.5, -7, 10.5, -14)
        assert 0.5 * a == Tuple(0.5, -1, 1.5, -2)
        assert a.scale(0.5) == Tuple(0.5, -1, 1.5, -2)

    def test_dividing_by_a_scalar(self):
        assert Tuple(1, -2, 3, -4) / 2 == Tuple(0.5, -1, 1.5, -2)
        assert Tuple(1, -2, 3, -4).divide(2) == Tuple(0.5, -1, 1.5, -2)

    def test_component_wise_product(self):
        assert Tuple(1, 2, 3, 4) * Tuple(2, 2, 2, 0) == Tuple(2, 4, 6, 0)

    @pytest.mark.parametrize("a,b", [
        (Tuple(1, 2, 3, 1), Tuple(-4.5, 0.25, 7, 0)),
        (Tuple(0.1, 0.2, 0.3, 0), Tuple(100, -100, 1e-3, 0)),
        (Tuple(-7, 3.3, 8, 1), Tuple(-7, 3.3, 8, 1)),
    ])
    def test_add_and_subtract_are_inverses(self, a, b):
        assert (a + b) - b == a


class TestVectorOperations:
    """Tests for magnitude, normalize, dot, cross and reflect."""

    @pytest.mark.parametrize("v,expected", [
        (vector(1, 0, 0), 1.0),
        (vector(0, 1, 0), 1.0),
        (vector(0, 0, 1), 1.0),
        (vector(1, 2, 3), math.sqrt(14)),
        (vector(-1, -2, -3), math.sqrt(14)),
    ])
    def test_magnitude(self, v, expected):
        assert v.magnitude() == pytest.approx(expected)

    def test_normalizing(self):
        assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
        assert vector(1, 2, 3).normalize() == vector(0.26726, 0.53452, 0.80178)

    @pytest.mark.parametrize("v", [
        vector(1, 2, 3),
        vector(-0.001, 0.5, 12),
        vector(1e3, -1e3, 1),
    ])
    def test_normalized_vector_has_unit_magnitude(self, v):
        assert equal(v.normalize().magnitude(), 1.0)

    def test_normalizing_zero_vector_raises(self):
        with pytest.raises(ZeroMagnitudeError):
            vector(0, 0, 0).normalize()

    def test_zero_magnitude_error_is_arithmetic(self):
        with pytest.raises(ArithmeticError):
            vector(0, 0, 0).normalize()

    def test_dot_product(self):
        assert vector(1, 2, 3).dot(vector(2, 3, 4)) == pytest.approx(20.0)

    def test_cross_product(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert a.cross(b) == vector(-1, 2, -1)
        assert b.cross(a) == vector(1, -2, 1)

    @pytest.mark.parametrize("a,b", [
        (vector(1, 2, 3), vector(2, 3, 4)),
        (vector(-1, 0.5, 9), vector(0, 0, 1)),
        (vector(3, 3, 3), vector(3, 3, 3)),
    ])
    def test_cross_is_anticommutative(self, a, b):
        assert a.cross(b) == -b.cross(a)

    def test_cross_always_returns_a_vector(self):
        assert point(1, 2, 3).cross(point(2, 3, 4)).is_vector()

    def test_reflecting_approaching_at_45_degrees(self):
        v = vector(1, -1, 0)
        n = vector(0, 1, 0)
        assert v.reflect(n) == vector(1, 1, 0)

    def test_reflecting_off_a_slanted_surface(self):
        v = vector(0, -1, 0)
        n = vector(math.sqrt(2) / 2, math.sqrt(2) / 2, 0)
        assert v.reflect(n) == vector(1, 0, 0)


class TestColor:
    """Tests for color arithmetic."""

    def test_colors_are_rgb_triples(self):
        c = Color(-0.5, 0.4, 1.7)
        assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)

    def test_adding_colors(self):
        assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)

    def test_subtracting_colors(self):
        assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)

    def test_multiplying_by_a_scalar(self):
        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        c = Color(1, 0.2, 0.4).component_multiply(Color(0.9, 1, 0.1))
        assert c == Color(0.9, 0.2, 0.04)

    def test_black_and_white(self):
        assert Color.black() == Color(0, 0, 0)
        assert Color.white() == Color(1, 1, 1)

    def test_color_is_not_equal_to_tuple(self):
        assert Color(1, 1, 1) != Tuple(1, 1, 1, 0)
