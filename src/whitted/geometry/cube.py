"""Axis-aligned unit cube primitive.

The cube spans [-1, 1] on every axis in object space. Intersection uses the
slab method: each axis yields the interval of t where the ray lies between
that axis's two faces, and the ray hits the cube where all three intervals
overlap.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.cube import Cube, intersect_cube
    >>> xs = intersect_cube(Cube(), Ray(point(5.0, 0.5, 0.0), vector(-1.0, 0.0, 0.0)))
    >>> [i.t for i in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple4, point, vector
from whitted.geometry.bounds import BoundingBox, check_axis
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape, ShapeKind


class Cube(Shape):
    """Axis-aligned cube from (-1, -1, -1) to (1, 1, 1)."""

    kind = ShapeKind.CUBE


def intersect_cube(cube: Cube, ray: Ray, path: tuple[Shape, ...] = ()) -> list[Intersection]:
    """Intersect an object-space ray with the unit cube.

    Returns:
        Both slab-interval endpoints when the intervals overlap, else nothing.
    """
    xtmin, xtmax = check_axis(float(ray.origin[0]), float(ray.direction[0]), -1.0, 1.0)
    ytmin, ytmax = check_axis(float(ray.origin[1]), float(ray.direction[1]), -1.0, 1.0)
    ztmin, ztmax = check_axis(float(ray.origin[2]), float(ray.direction[2]), -1.0, 1.0)

    tmin = max(xtmin, ytmin, ztmin)
    tmax = min(xtmax, ytmax, ztmax)
    if tmin > tmax:
        return []
    return [Intersection(tmin, cube, path=path), Intersection(tmax, cube, path=path)]


def cube_normal(local_point: Tuple4) -> Tuple4:
    """Normal of the face the point lies on: the axis of largest magnitude."""
    x, y, z = float(local_point[0]), float(local_point[1]), float(local_point[2])
    maxc = max(abs(x), abs(y), abs(z))
    if maxc == abs(x):
        return vector(x, 0.0, 0.0)
    elif maxc == abs(y):
        return vector(0.0, y, 0.0)
    return vector(0.0, 0.0, z)


def cube_bounds() -> BoundingBox:
    return BoundingBox(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))
