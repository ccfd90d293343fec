"""Infinite xz plane primitive.

The plane passes through the object-space origin with normal +y. It has no
thickness, so a ray parallel to it never hits, even a ray lying inside it.
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple4, point, vector
from whitted.geometry.bounds import BoundingBox
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape, ShapeKind


class Plane(Shape):
    """The y = 0 plane in object space."""

    kind = ShapeKind.PLANE


def intersect_plane(plane: Plane, ray: Ray, path: tuple[Shape, ...] = ()) -> list[Intersection]:
    if abs(ray.direction[1]) < EPSILON:
        return []
    t = -ray.origin[1] / ray.direction[1]
    return [Intersection(float(t), plane, path=path)]


def plane_normal(local_point: Tuple4) -> Tuple4:
    return vector(0.0, 1.0, 0.0)


def plane_bounds() -> BoundingBox:
    return BoundingBox(point(-math.inf, 0.0, -math.inf), point(math.inf, 0.0, math.inf))
