"""Unit tests for points, vectors and colors.

Tests cover:
- Point/vector construction and the w component
- Arithmetic through NumPy (add, subtract, negate, scale)
- Magnitude, normalization, dot and cross products
- Reflection about a normal
- Float comparison helpers including infinities
"""

import math

import pytest

from conftest import assert_tuple_close


class TestConstruction:
    """Tests for point/vector/color factories."""

    def test_point_has_w_one(self):
        from whitted.core.tuples import is_point, is_vector, point

        p = point(4.3, -4.2, 3.1)
        assert p[3] == 1.0
        assert is_point(p)
        assert not is_vector(p)

    def test_vector_has_w_zero(self):
        from whitted.core.tuples import is_point, is_vector, vector

        v = vector(4.3, -4.2, 3.1)
        assert v[3] == 0.0
        assert is_vector(v)
        assert not is_point(v)

    def test_color_components(self):
        from whitted.core.tuples import color

        c = color(-0.5, 0.4, 1.7)
        assert c.shape == (3,)
        assert_tuple_close(c, [-0.5, 0.4, 1.7])

    def test_black_and_white_are_fresh_arrays(self):
        """Mutating one result must not leak into the next call."""
        from whitted.core.tuples import black, white

        b = black()
        b[0] = 1.0
        assert black()[0] == 0.0
        assert_tuple_close(white(), [1.0, 1.0, 1.0])


class TestArithmetic:
    """Tests for tuple arithmetic semantics."""

    def test_point_minus_point_is_vector(self):
        from whitted.core.tuples import is_vector, point

        v = point(3, 2, 1) - point(5, 6, 7)
        assert is_vector(v)
        assert_tuple_close(v, [-2, -4, -6, 0])

    def test_point_minus_vector_is_point(self):
        from whitted.core.tuples import is_point, point, vector

        p = point(3, 2, 1) - vector(5, 6, 7)
        assert is_point(p)
        assert_tuple_close(p, [-2, -4, -6, 1])

    def test_negate_vector(self):
        from whitted.core.tuples import vector

        assert_tuple_close(-vector(1, -2, 3), [-1, 2, -3, 0])

    def test_color_hadamard_product(self):
        from whitted.core.tuples import color

        assert_tuple_close(color(1, 0.2, 0.4) * color(0.9, 1, 0.1), [0.9, 0.2, 0.04])


class TestVectorOperations:
    """Tests for magnitude, normalize, dot, cross and reflect."""

    @pytest.mark.parametrize(
        "components,expected",
        [
            ((1, 0, 0), 1.0),
            ((0, 1, 0), 1.0),
            ((1, 2, 3), math.sqrt(14)),
            ((-1, -2, -3), math.sqrt(14)),
        ],
    )
    def test_magnitude(self, components, expected):
        from whitted.core.tuples import magnitude, vector

        assert magnitude(vector(*components)) == pytest.approx(expected)

    def test_normalize(self):
        from whitted.core.tuples import magnitude, normalize, vector

        n = normalize(vector(1, 2, 3))
        assert_tuple_close(n, [0.26726, 0.53452, 0.80178, 0])
        assert magnitude(n) == pytest.approx(1.0)

    def test_normalize_zero_vector_does_not_divide_by_zero(self):
        from whitted.core.tuples import normalize, vector

        assert_tuple_close(normalize(vector(0, 0, 0)), [0, 0, 0, 0])

    def test_dot(self):
        from whitted.core.tuples import dot, vector

        assert dot(vector(1, 2, 3), vector(2, 3, 4)) == pytest.approx(20.0)

    def test_cross(self):
        from whitted.core.tuples import cross, vector

        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert_tuple_close(cross(a, b), [-1, 2, -1, 0])
        assert_tuple_close(cross(b, a), [1, -2, 1, 0])

    def test_reflect_at_45_degrees(self):
        from whitted.core.tuples import reflect, vector

        r = reflect(vector(1, -1, 0), vector(0, 1, 0))
        assert_tuple_close(r, [1, 1, 0, 0])

    def test_reflect_off_slanted_surface(self):
        from whitted.core.tuples import reflect, vector

        s = math.sqrt(2) / 2
        r = reflect(vector(0, -1, 0), vector(s, s, 0))
        assert_tuple_close(r, [1, 0, 0, 0])


class TestComparison:
    """Tests for EPSILON-based float comparison."""

    def test_equal_within_epsilon(self):
        from whitted.core.tuples import EPSILON, equal

        assert equal(1.0, 1.0 + EPSILON / 2)
        assert not equal(1.0, 1.0 + EPSILON * 2)

    def test_equal_infinities(self):
        from whitted.core.tuples import equal

        assert equal(math.inf, math.inf)
        assert equal(-math.inf, -math.inf)
        assert not equal(math.inf, -math.inf)
        assert not equal(math.inf, 1e300)

    def test_tuples_equal(self):
        from whitted.core.tuples import point, tuples_equal

        assert tuples_equal(point(1, 2, 3), point(1.000001, 2, 3))
        assert not tuples_equal(point(1, 2, 3), point(1.1, 2, 3))
