"""Unit tests for 4x4 transforms.

Tests cover:
- Translation, scaling, rotation and shearing matrices
- Chained transforms applied in reverse order
- The view transform
- Transform caching of inverse and inverse-transpose
"""

import math

import numpy as np
import pytest

from conftest import assert_tuple_close


class TestBasicTransforms:
    """Tests for the transform factories."""

    def test_translation_moves_points(self):
        from whitted.core.matrix import translation
        from whitted.core.tuples import point

        assert_tuple_close(translation(5, -3, 2) @ point(-3, 4, 5), [2, 1, 7, 1])

    def test_translation_does_not_move_vectors(self):
        from whitted.core.matrix import translation
        from whitted.core.tuples import vector

        v = vector(-3, 4, 5)
        assert_tuple_close(translation(5, -3, 2) @ v, v)

    def test_inverse_translation(self):
        from whitted.core.matrix import translation
        from whitted.core.tuples import point

        inv = np.linalg.inv(translation(5, -3, 2))
        assert_tuple_close(inv @ point(-3, 4, 5), [-8, 7, 3, 1])

    def test_scaling_reflects_with_negative_factor(self):
        from whitted.core.matrix import scaling
        from whitted.core.tuples import point

        assert_tuple_close(scaling(-1, 1, 1) @ point(2, 3, 4), [-2, 3, 4, 1])

    def test_rotation_x(self):
        from whitted.core.matrix import rotation_x
        from whitted.core.tuples import point

        s = math.sqrt(2) / 2
        p = point(0, 1, 0)
        assert_tuple_close(rotation_x(math.pi / 4) @ p, [0, s, s, 1])
        assert_tuple_close(rotation_x(math.pi / 2) @ p, [0, 0, 1, 1])

    def test_rotation_y(self):
        from whitted.core.matrix import rotation_y
        from whitted.core.tuples import point

        s = math.sqrt(2) / 2
        p = point(0, 0, 1)
        assert_tuple_close(rotation_y(math.pi / 4) @ p, [s, 0, s, 1])
        assert_tuple_close(rotation_y(math.pi / 2) @ p, [1, 0, 0, 1])

    def test_rotation_z(self):
        from whitted.core.matrix import rotation_z
        from whitted.core.tuples import point

        s = math.sqrt(2) / 2
        p = point(0, 1, 0)
        assert_tuple_close(rotation_z(math.pi / 4) @ p, [-s, s, 0, 1])
        assert_tuple_close(rotation_z(math.pi / 2) @ p, [-1, 0, 0, 1])

    @pytest.mark.parametrize(
        "params,expected",
        [
            ((1, 0, 0, 0, 0, 0), (5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), (6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), (2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), (2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), (2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), (2, 3, 7)),
        ],
    )
    def test_shearing(self, params, expected):
        from whitted.core.matrix import shearing
        from whitted.core.tuples import point

        assert_tuple_close(shearing(*params) @ point(2, 3, 4), [*expected, 1])

    def test_chained_transforms_apply_in_reverse_order(self):
        from whitted.core.matrix import rotation_x, scaling, translation
        from whitted.core.tuples import point

        m = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
        assert_tuple_close(m @ point(1, 0, 1), [15, 0, 7, 1])


class TestViewTransform:
    """Tests for view_transform."""

    def test_default_orientation_is_identity(self):
        from whitted.core.matrix import identity, matrices_equal, view_transform
        from whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        assert matrices_equal(t, identity())

    def test_looking_in_positive_z_mirrors(self):
        from whitted.core.matrix import matrices_equal, scaling, view_transform
        from whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        assert matrices_equal(t, scaling(-1, 1, -1))

    def test_moves_the_world(self):
        from whitted.core.matrix import matrices_equal, translation, view_transform
        from whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        assert matrices_equal(t, translation(0, 0, -8))

    def test_arbitrary_view(self):
        from whitted.core.matrix import view_transform
        from whitted.core.tuples import point, vector

        t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
        expected = np.array(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.00000],
                [0.00000, 0.00000, 0.00000, 1.00000],
            ]
        )
        np.testing.assert_allclose(t, expected, atol=1e-4)


class TestTransform:
    """Tests for the cached Transform record."""

    def test_inverse_is_cached(self):
        from whitted.core.matrix import Transform, scaling

        t = Transform.of(scaling(2, 4, 8))
        np.testing.assert_allclose(t.inverse, scaling(0.5, 0.25, 0.125))
        np.testing.assert_allclose(t.inverse_transpose, t.inverse.T)

    def test_singular_matrix_raises(self):
        from whitted.core.matrix import Transform, scaling

        with pytest.raises(ValueError, match="not invertible"):
            Transform.of(scaling(0, 1, 1))

    def test_wrong_shape_raises(self):
        from whitted.core.matrix import Transform

        with pytest.raises(ValueError, match="4x4"):
            Transform.of(np.eye(3))

    def test_matrix_is_read_only(self):
        from whitted.core.matrix import Transform, translation

        t = Transform.of(translation(1, 2, 3))
        with pytest.raises(ValueError):
            t.matrix[0, 0] = 5.0

    def test_is_invertible(self):
        from whitted.core.matrix import is_invertible, scaling, translation

        assert is_invertible(translation(1, 2, 3))
        assert not is_invertible(scaling(1, 0, 1))

    def test_tiny_uniform_scaling_is_invertible(self):
        from whitted.core.matrix import Transform, is_invertible, scaling

        m = scaling(1e-4, 1e-4, 1e-4)
        assert is_invertible(m)
        np.testing.assert_allclose(Transform.of(m).inverse, scaling(1e4, 1e4, 1e4))
