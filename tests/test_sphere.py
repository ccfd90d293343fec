"""Tests for the sphere primitive and the shared shape record.

Tests cover:
- Ray/sphere intersection including tangents, misses and rays from inside
- Intersecting transformed spheres
- Surface normals in object and world space
- Shape defaults and transform assignment
"""

import math

import pytest

from conftest import assert_tuple_close


class TestShapeRecord:
    """Tests for the state every shape carries."""

    def test_defaults(self):
        from whitted.core.matrix import identity, matrices_equal
        from whitted.geometry.shape import ShapeKind
        from whitted.geometry.sphere import Sphere
        from whitted.materials.material import DEFAULT_MATERIAL

        s = Sphere()
        assert s.kind == ShapeKind.SPHERE
        assert matrices_equal(s.transform, identity())
        assert s.material == DEFAULT_MATERIAL
        assert s.casts_shadow
        assert not s.is_composite

    def test_assign_transform_updates_inverse(self):
        import numpy as np

        from whitted.core.matrix import translation
        from whitted.geometry.sphere import Sphere

        s = Sphere()
        s.transform = translation(2, 3, 4)
        np.testing.assert_allclose(s.inverse, translation(-2, -3, -4), atol=1e-9)

    def test_singular_transform_raises(self):
        from whitted.core.matrix import scaling
        from whitted.geometry.sphere import Sphere

        with pytest.raises(ValueError):
            Sphere(transform=scaling(1, 0, 1))

    def test_glass_sphere(self):
        from whitted.geometry.sphere import glass_sphere

        s = glass_sphere()
        assert s.material.transparency == 1.0
        assert s.material.refractive_index == 1.5


class TestIntersectSphere:
    """Tests for ray/sphere intersection."""

    @pytest.mark.parametrize(
        "origin,expected",
        [
            ((0, 0, -5), [4.0, 6.0]),
            ((0, 1, -5), [5.0, 5.0]),
            ((0, 2, -5), []),
            ((0, 0, 0), [-1.0, 1.0]),
            ((0, 0, 5), [-6.0, -4.0]),
        ],
    )
    def test_ray_along_z(self, origin, expected):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.operations import intersect
        from whitted.geometry.sphere import Sphere

        s = Sphere()
        xs = intersect(s, Ray(point(*origin), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx(expected)
        assert all(i.object is s for i in xs)

    def test_scaled_sphere(self, z_ray):
        from whitted.core.matrix import scaling
        from whitted.geometry.operations import intersect
        from whitted.geometry.sphere import Sphere

        xs = intersect(Sphere(transform=scaling(2, 2, 2)), z_ray)
        assert [i.t for i in xs] == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self, z_ray):
        from whitted.core.matrix import translation
        from whitted.geometry.operations import intersect
        from whitted.geometry.sphere import Sphere

        assert intersect(Sphere(transform=translation(5, 0, 0)), z_ray) == []

    def test_top_level_hits_have_empty_path(self, z_ray):
        from whitted.geometry.operations import intersect
        from whitted.geometry.sphere import Sphere

        xs = intersect(Sphere(), z_ray)
        assert all(i.path == () for i in xs)


class TestSphereNormal:
    """Tests for sphere normals."""

    @pytest.mark.parametrize(
        "p,expected",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 1, 0), (0, 1, 0)),
            ((0, 0, 1), (0, 0, 1)),
        ],
    )
    def test_axis_normals(self, p, expected):
        from whitted.core.tuples import point
        from whitted.geometry.operations import normal_at
        from whitted.geometry.sphere import Sphere

        assert_tuple_close(normal_at(Sphere(), point(*p)), [*expected, 0])

    def test_nonaxial_normal_is_normalized(self):
        from whitted.core.tuples import magnitude, point
        from whitted.geometry.operations import normal_at
        from whitted.geometry.sphere import Sphere

        k = math.sqrt(3) / 3
        n = normal_at(Sphere(), point(k, k, k))
        assert_tuple_close(n, [k, k, k, 0])
        assert magnitude(n) == pytest.approx(1.0)

    def test_translated_normal(self):
        from whitted.core.matrix import translation
        from whitted.core.tuples import point
        from whitted.geometry.operations import normal_at
        from whitted.geometry.sphere import Sphere

        s = Sphere(transform=translation(0, 1, 0))
        n = normal_at(s, point(0, 1.70711, -0.70711))
        assert_tuple_close(n, [0, 0.70711, -0.70711, 0])

    def test_transformed_normal(self):
        from whitted.core.matrix import rotation_z, scaling
        from whitted.core.tuples import point
        from whitted.geometry.operations import normal_at
        from whitted.geometry.sphere import Sphere

        s = Sphere(transform=scaling(1, 0.5, 1) @ rotation_z(math.pi / 5))
        k = math.sqrt(2) / 2
        n = normal_at(s, point(0, k, -k))
        assert_tuple_close(n, [0, 0.97014, -0.24254, 0])
