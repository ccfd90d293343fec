"""Unit-radius cylinder around the y axis.

The cylinder is infinite by default. `minimum` and `maximum` truncate it
(both limits exclusive for the side wall), and `closed` adds unit discs at
the two ends.

Side intersection solves the quadratic in x and z only:
    a = Dx^2 + Dz^2
    b = 2 * (Ox * Dx + Oz * Dz)
    c = Ox^2 + Oz^2 - 1

A ray parallel to the y axis (a ~ 0) can only hit the caps. An infinite
limit has no cap.
"""

from __future__ import annotations

import math

from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple4, point, vector
from whitted.geometry.bounds import BoundingBox
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape, ShapeKind
from whitted.materials.material import Material


class Cylinder(Shape):
    """Cylinder of radius 1 around the y axis.

    Attributes:
        minimum: Lower y limit (exclusive).
        maximum: Upper y limit (exclusive).
        closed: Whether the ends are capped.
    """

    kind = ShapeKind.CYLINDER

    def __init__(
        self,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
        transform: Matrix | None = None,
        material: Material | None = None,
        casts_shadow: bool = True,
    ) -> None:
        super().__init__(transform=transform, material=material, casts_shadow=casts_shadow)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed


def check_cap(ray: Ray, t: float, radius: float) -> bool:
    """Is the ray's point at t within `radius` of the y axis?"""
    x = ray.origin[0] + t * ray.direction[0]
    z = ray.origin[2] + t * ray.direction[2]
    return bool(x * x + z * z <= radius * radius)


def _intersect_caps(
    cylinder: Cylinder, ray: Ray, path: tuple[Shape, ...]
) -> list[Intersection]:
    if not cylinder.closed or abs(ray.direction[1]) < EPSILON:
        return []

    xs = []
    for limit in (cylinder.minimum, cylinder.maximum):
        if not math.isfinite(limit):
            continue
        t = float((limit - ray.origin[1]) / ray.direction[1])
        if check_cap(ray, t, 1.0):
            xs.append(Intersection(t, cylinder, path=path))
    return xs


def intersect_cylinder(
    cylinder: Cylinder, ray: Ray, path: tuple[Shape, ...] = ()
) -> list[Intersection]:
    """Intersect an object-space ray with the cylinder's wall and caps."""
    dx, dy, dz = float(ray.direction[0]), float(ray.direction[1]), float(ray.direction[2])
    ox, oy, oz = float(ray.origin[0]), float(ray.origin[1]), float(ray.origin[2])

    xs: list[Intersection] = []
    a = dx * dx + dz * dz
    if abs(a) >= EPSILON:
        b = 2.0 * ox * dx + 2.0 * oz * dz
        c = ox * ox + oz * oz - 1.0
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        for t in (t0, t1):
            y = oy + t * dy
            if cylinder.minimum < y < cylinder.maximum:
                xs.append(Intersection(t, cylinder, path=path))

    xs.extend(_intersect_caps(cylinder, ray, path))
    return xs


def cylinder_normal(cylinder: Cylinder, local_point: Tuple4) -> Tuple4:
    x, y, z = float(local_point[0]), float(local_point[1]), float(local_point[2])
    dist = x * x + z * z
    if dist < 1.0 and y >= cylinder.maximum - EPSILON:
        return vector(0.0, 1.0, 0.0)
    elif dist < 1.0 and y <= cylinder.minimum + EPSILON:
        return vector(0.0, -1.0, 0.0)
    return vector(x, 0.0, z)


def cylinder_bounds(cylinder: Cylinder) -> BoundingBox:
    return BoundingBox(point(-1.0, cylinder.minimum, -1.0), point(1.0, cylinder.maximum, 1.0))
