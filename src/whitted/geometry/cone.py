"""Double-napped cone around the y axis.

The cone is the surface x^2 + z^2 = y^2: two nappes meeting at the origin,
with radius |y| at height y. Like the cylinder it can be truncated and capped;
each cap is a disc whose radius is the |y| of its end.

Side intersection solves:
    a = Dx^2 - Dy^2 + Dz^2
    b = 2 * (Ox * Dx - Oy * Dy + Oz * Dz)
    c = Ox^2 - Oy^2 + Oz^2

When a ~ 0 the ray is parallel to one nappe. It then crosses the other nappe
exactly once, at t = -c / (2b), clipped to (minimum, maximum) like every side
hit, unless b ~ 0 as well, in which case only the caps can be hit. Caps at an
infinite limit do not exist.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.cone import Cone, intersect_cone
    >>> xs = intersect_cone(Cone(), Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [i.t for i in xs]
    [5.0, 5.0]
"""

from __future__ import annotations

import math

from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple4, point, vector
from whitted.geometry.bounds import BoundingBox
from whitted.geometry.cylinder import check_cap
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape, ShapeKind
from whitted.materials.material import Material


class Cone(Shape):
    """Double cone around the y axis.

    Attributes:
        minimum: Lower y limit (exclusive).
        maximum: Upper y limit (exclusive).
        closed: Whether the ends are capped.
    """

    kind = ShapeKind.CONE

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


def _intersect_caps(cone: Cone, ray: Ray, path: tuple[Shape, ...]) -> list[Intersection]:
    if not cone.closed or abs(ray.direction[1]) < EPSILON:
        return []

    xs = []
    for limit in (cone.minimum, cone.maximum):
        if not math.isfinite(limit):
            continue
        t = float((limit - ray.origin[1]) / ray.direction[1])
        if check_cap(ray, t, abs(limit)):
            xs.append(Intersection(t, cone, path=path))
    return xs


def intersect_cone(cone: Cone, ray: Ray, path: tuple[Shape, ...] = ()) -> list[Intersection]:
    """Intersect an object-space ray with the cone's nappes and caps.

    Args:
        cone: The cone being hit.
        ray: Ray in the cone's object space.
        path: Composite ancestors to record on each intersection.

    Returns:
        Side hits within (minimum, maximum) followed by cap hits. The list
        is not sorted.
    """
    dx, dy, dz = float(ray.direction[0]), float(ray.direction[1]), float(ray.direction[2])
    ox, oy, oz = float(ray.origin[0]), float(ray.origin[1]), float(ray.origin[2])

    a = dx * dx - dy * dy + dz * dz
    b = 2.0 * ox * dx - 2.0 * oy * dy + 2.0 * oz * dz
    c = ox * ox - oy * oy + oz * oz

    xs: list[Intersection] = []
    if abs(a) < EPSILON:
        if abs(b) >= EPSILON:
            t = -c / (2.0 * b)
            y = oy + t * dy
            if cone.minimum < y < cone.maximum:
                xs.append(Intersection(t, cone, path=path))
        xs.extend(_intersect_caps(cone, ray, path))
        return xs

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    sqrt_d = math.sqrt(discriminant)
    t0 = (-b - sqrt_d) / (2.0 * a)
    t1 = (-b + sqrt_d) / (2.0 * a)
    for t in (t0, t1):
        y = oy + t * dy
        if cone.minimum < y < cone.maximum:
            xs.append(Intersection(t, cone, path=path))

    xs.extend(_intersect_caps(cone, ray, path))
    return xs


def cone_normal(cone: Cone, local_point: Tuple4) -> Tuple4:
    x, y, z = float(local_point[0]), float(local_point[1]), float(local_point[2])
    dist = x * x + z * z
    if dist < y * y and y >= cone.maximum - EPSILON:
        return vector(0.0, 1.0, 0.0)
    elif dist < y * y and y <= cone.minimum + EPSILON:
        return vector(0.0, -1.0, 0.0)

    ny = math.sqrt(dist)
    if y > 0.0:
        ny = -ny
    return vector(x, ny, z)


def cone_bounds(cone: Cone) -> BoundingBox:
    limit = max(abs(cone.minimum), abs(cone.maximum))
    return BoundingBox(point(-limit, cone.minimum, -limit), point(limit, cone.maximum, limit))
