"""Tests for flat and smooth triangles.

Tests cover:
- Precomputed edges and normal
- Moller-Trumbore hits and misses, with barycentric (u, v)
- Normal interpolation on smooth triangles
- Bounds
"""

import pytest

from conftest import assert_tuple_close


def make_triangle():
    from whitted.core.tuples import point
    from whitted.geometry.triangle import Triangle

    return Triangle(point(0, 1, 0), point(-1, 0, 0), point(1, 0, 0))


def make_smooth_triangle():
    from whitted.core.tuples import point, vector
    from whitted.geometry.triangle import SmoothTriangle

    return SmoothTriangle(
        point(0, 1, 0),
        point(-1, 0, 0),
        point(1, 0, 0),
        vector(0, 1, 0),
        vector(-1, 0, 0),
        vector(1, 0, 0),
    )


class TestTriangle:
    """Tests for flat triangles."""

    def test_precomputed_fields(self):
        t = make_triangle()
        assert_tuple_close(t.e1, [-1, -1, 0, 0])
        assert_tuple_close(t.e2, [1, -1, 0, 0])
        assert_tuple_close(t.normal, [0, 0, -1, 0])

    def test_normal_is_same_everywhere(self):
        from whitted.core.tuples import point
        from whitted.geometry.operations import local_normal

        t = make_triangle()
        for p in (point(0, 0.5, 0), point(-0.5, 0.75, 0), point(0.5, 0.25, 0)):
            assert_tuple_close(local_normal(t, p), t.normal)

    @pytest.mark.parametrize(
        "origin,direction",
        [
            ((0, -1, -2), (0, 1, 0)),
            ((1, 1, -2), (0, 0, 1)),
            ((-1, 1, -2), (0, 0, 1)),
            ((0, -1, -2), (0, 0, 1)),
        ],
    )
    def test_misses(self, origin, direction):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.operations import local_intersect

        r = Ray(point(*origin), vector(*direction))
        assert local_intersect(make_triangle(), r) == []

    def test_hit(self):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.operations import local_intersect

        t = make_triangle()
        xs = local_intersect(t, Ray(point(0, 0.5, -2), vector(0, 0, 1)))
        assert len(xs) == 1
        assert xs[0].t == pytest.approx(2.0)
        assert xs[0].object is t

    def test_bounds(self):
        from whitted.core.tuples import point
        from whitted.geometry.operations import bounds
        from whitted.geometry.triangle import Triangle

        t = Triangle(point(-3, 7, 2), point(6, 2, -4), point(2, -1, -1))
        box = bounds(t)
        assert_tuple_close(box.min, [-3, -1, -4, 1])
        assert_tuple_close(box.max, [6, 7, 2, 1])

    def test_bounds_are_a_copy(self):
        from whitted.core.tuples import point
        from whitted.geometry.operations import bounds

        t = make_triangle()
        bounds(t).add_point(point(100, 100, 100))
        assert bounds(t).max[0] == pytest.approx(1.0)


class TestSmoothTriangle:
    """Tests for smooth triangles."""

    def test_intersection_stores_uv(self):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.operations import local_intersect

        xs = local_intersect(make_smooth_triangle(), Ray(point(-0.2, 0.3, -2), vector(0, 0, 1)))
        assert xs[0].u == pytest.approx(0.45)
        assert xs[0].v == pytest.approx(0.25)

    def test_normal_interpolates_vertex_normals(self):
        from whitted.core.tuples import point
        from whitted.geometry.intersection import Intersection
        from whitted.geometry.operations import normal_at

        tri = make_smooth_triangle()
        i = Intersection(1.0, tri, u=0.45, v=0.25)
        n = normal_at(tri, point(0, 0, 0), i)
        assert_tuple_close(n, [-0.5547, 0.83205, 0, 0])

    def test_prepare_computations_uses_interpolated_normal(self):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.computations import prepare_computations
        from whitted.geometry.intersection import Intersection

        tri = make_smooth_triangle()
        i = Intersection(1.0, tri, u=0.45, v=0.25)
        r = Ray(point(-0.2, 0.3, -2), vector(0, 0, 1))
        comps = prepare_computations(i, r, [i])
        assert_tuple_close(comps.normalv, [-0.5547, 0.83205, 0, 0])

    def test_normal_without_uv_raises(self):
        from whitted.core.tuples import point
        from whitted.geometry.operations import normal_at

        with pytest.raises(ValueError):
            normal_at(make_smooth_triangle(), point(0, 0, 0))
