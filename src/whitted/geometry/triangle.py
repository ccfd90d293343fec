"""Flat and smooth triangle primitives.

Triangles are the building block of imported meshes. Intersection uses the
Moller-Trumbore algorithm, which yields the barycentric coordinates (u, v)
of the hit as a by-product:

    hit point = p1 + u * (p2 - p1) + v * (p3 - p1)

A flat triangle has one precomputed normal. A smooth triangle stores a
normal per vertex and interpolates them with the recorded (u, v), which is
why the normal computation needs the intersection and not just the point.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.triangle import Triangle, intersect_triangle
    >>> tri = Triangle(point(0, 1, 0), point(-1, 0, 0), point(1, 0, 0))
    >>> xs = intersect_triangle(tri, Ray(point(0, 0.5, -2), vector(0, 0, 1)))
    >>> xs[0].t
    2.0
"""

from __future__ import annotations

from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple4, cross, dot, normalize
from whitted.geometry.bounds import BoundingBox
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape, ShapeKind
from whitted.materials.material import Material


class Triangle(Shape):
    """A flat triangle given by three points.

    Attributes:
        p1, p2, p3: Vertices.
        e1: Edge p2 - p1.
        e2: Edge p3 - p1.
        normal: normalize(e2 x e1), shared by every point of the triangle.
    """

    kind = ShapeKind.TRIANGLE

    def __init__(
        self,
        p1: Tuple4,
        p2: Tuple4,
        p3: Tuple4,
        transform: Matrix | None = None,
        material: Material | None = None,
        casts_shadow: bool = True,
    ) -> None:
        super().__init__(transform=transform, material=material, casts_shadow=casts_shadow)
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        self.normal = normalize(cross(self.e2, self.e1))

        self.bounds = BoundingBox()
        for p in (p1, p2, p3):
            self.bounds.add_point(p)


class SmoothTriangle(Triangle):
    """A triangle with per-vertex normals n1, n2, n3."""

    kind = ShapeKind.SMOOTH_TRIANGLE

    def __init__(
        self,
        p1: Tuple4,
        p2: Tuple4,
        p3: Tuple4,
        n1: Tuple4,
        n2: Tuple4,
        n3: Tuple4,
        transform: Matrix | None = None,
        material: Material | None = None,
        casts_shadow: bool = True,
    ) -> None:
        super().__init__(
            p1, p2, p3, transform=transform, material=material, casts_shadow=casts_shadow
        )
        self.n1 = n1
        self.n2 = n2
        self.n3 = n3


def intersect_triangle(
    triangle: Triangle, ray: Ray, path: tuple[Shape, ...] = ()
) -> list[Intersection]:
    """Moller-Trumbore ray/triangle intersection.

    A ray parallel to the triangle's plane (|det| < EPSILON) misses, as does
    any hit whose barycentric coordinates fall outside the triangle.

    Returns:
        At most one intersection, carrying (u, v).
    """
    dir_cross_e2 = cross(ray.direction, triangle.e2)
    det = dot(triangle.e1, dir_cross_e2)
    if abs(det) < EPSILON:
        return []

    f = 1.0 / det
    p1_to_origin = ray.origin - triangle.p1
    u = f * dot(p1_to_origin, dir_cross_e2)
    if u < 0.0 or u > 1.0:
        return []

    origin_cross_e1 = cross(p1_to_origin, triangle.e1)
    v = f * dot(ray.direction, origin_cross_e1)
    if v < 0.0 or u + v > 1.0:
        return []

    t = f * dot(triangle.e2, origin_cross_e1)
    return [Intersection(t, triangle, u=u, v=v, path=path)]


def triangle_normal(triangle: Triangle) -> Tuple4:
    return triangle.normal


def smooth_triangle_normal(triangle: SmoothTriangle, hit: Intersection) -> Tuple4:
    """Blend the vertex normals with the hit's barycentric coordinates."""
    if hit.u is None or hit.v is None:
        raise ValueError("Smooth triangle normals need an intersection with (u, v)")
    u, v = hit.u, hit.v
    return triangle.n2 * u + triangle.n3 * v + triangle.n1 * (1.0 - u - v)


def triangle_bounds(triangle: Triangle) -> BoundingBox:
    return triangle.bounds.copy()
