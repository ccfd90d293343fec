"""Unit sphere primitive with ray-sphere intersection.

The sphere is centered at the object-space origin with radius 1; position
and size come from the shape's transform.

Ray-sphere intersection solves the quadratic equation:
    |O + tD|^2 = 1

Where:
    - O is the ray origin (object space)
    - D is the ray direction (object space, not normalized)
    - t is the ray parameter

Expanding gives at^2 + bt + c = 0 with:
    a = D . D
    b = 2 * (D . O)
    c = O . O - 1

A negative discriminant means the ray misses. A tangent ray yields the same
t twice.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.sphere import Sphere, intersect_sphere
    >>> xs = intersect_sphere(Sphere(), Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [i.t for i in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import replace

from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple4, dot, point, vector
from whitted.geometry.bounds import BoundingBox
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape, ShapeKind
from whitted.materials.material import DEFAULT_MATERIAL, GLASS


class Sphere(Shape):
    """Unit sphere centered at the origin."""

    kind = ShapeKind.SPHERE


def glass_sphere(transform: Matrix | None = None, refractive_index: float = GLASS) -> Sphere:
    """Create a fully transparent sphere with a glass-like refractive index."""
    material = replace(DEFAULT_MATERIAL, transparency=1.0, refractive_index=refractive_index)
    return Sphere(transform=transform, material=material)


def intersect_sphere(
    sphere: Sphere, ray: Ray, path: tuple[Shape, ...] = ()
) -> list[Intersection]:
    """Intersect an object-space ray with the unit sphere.

    Args:
        sphere: The sphere being hit.
        ray: Ray already transformed into the sphere's object space.
        path: Composite ancestors to record on each intersection.

    Returns:
        Zero or two intersections, in increasing t.
    """
    sphere_to_ray = ray.origin - point(0.0, 0.0, 0.0)
    a = dot(ray.direction, ray.direction)
    b = 2.0 * dot(ray.direction, sphere_to_ray)
    c = dot(sphere_to_ray, sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    sqrt_d = math.sqrt(discriminant)
    t1 = (-b - sqrt_d) / (2.0 * a)
    t2 = (-b + sqrt_d) / (2.0 * a)
    return [Intersection(t1, sphere, path=path), Intersection(t2, sphere, path=path)]


def sphere_normal(local_point: Tuple4) -> Tuple4:
    return vector(local_point[0], local_point[1], local_point[2])


def sphere_bounds() -> BoundingBox:
    return BoundingBox(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))

