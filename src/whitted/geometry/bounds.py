"""Axis-aligned bounding boxes.

A `BoundingBox` is the acceleration primitive: Groups and CSG shapes test a
ray against their box before visiting any child, and `divide` uses box
containment to build the hierarchy.

The default box is empty, with min at +inf and max at -inf, so adding the
first point or box fixes both corners. Plane-like shapes have infinite
extents; every operation here keeps those infinities intact instead of
turning them into NaN.

The per-axis slab helper `check_axis` is shared with the cube primitive.

Example:
    >>> from whitted.core.tuples import point
    >>> from whitted.geometry.bounds import BoundingBox
    >>> box = BoundingBox(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))
    >>> box.contains_point(point(0.5, 0.0, 0.0))
    True
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple4, point, tuples_equal

INF = math.inf


def check_axis(origin: float, direction: float, lo: float, hi: float) -> tuple[float, float]:
    """Compute the interval of t for which a ray lies between two slab planes.

    Args:
        origin: Ray origin component along the axis.
        direction: Ray direction component along the axis.
        lo: Lower slab plane.
        hi: Upper slab plane.

    Returns:
        (tmin, tmax). A ray parallel to the slab gets (-inf, inf) when its
        origin lies between the planes and an empty (inf, -inf) interval
        otherwise.
    """
    if abs(direction) < EPSILON:
        if lo <= origin <= hi:
            return -INF, INF
        return INF, -INF

    tmin = (lo - origin) / direction
    tmax = (hi - origin) / direction
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class BoundingBox:
    """An axis-aligned box given by its min and max corner points.

    Attributes:
        min: Lower corner (a point).
        max: Upper corner (a point).
    """

    def __init__(self, minimum: Tuple4 | None = None, maximum: Tuple4 | None = None) -> None:
        self.min = (
            point(INF, INF, INF) if minimum is None else np.array(minimum, dtype=np.float64)
        )
        self.max = (
            point(-INF, -INF, -INF) if maximum is None else np.array(maximum, dtype=np.float64)
        )

    def copy(self) -> BoundingBox:
        return BoundingBox(self.min.copy(), self.max.copy())

    def is_empty(self) -> bool:
        return bool(np.any(self.min[:3] > self.max[:3]))

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.min[:3])) and np.all(np.isfinite(self.max[:3])))

    def add_point(self, p: Tuple4) -> None:
        """Grow the box in place so it contains p."""
        self.min[:3] = np.minimum(self.min[:3], p[:3])
        self.max[:3] = np.maximum(self.max[:3], p[:3])

    def add_box(self, other: BoundingBox) -> None:
        """Grow the box in place so it contains another box."""
        if other.is_empty():
            return
        self.add_point(other.min)
        self.add_point(other.max)

    def union(self, other: BoundingBox) -> BoundingBox:
        """Return a new box containing both boxes."""
        result = self.copy()
        result.add_box(other)
        return result

    def contains_point(self, p: Tuple4) -> bool:
        return bool(np.all(self.min[:3] <= p[:3]) and np.all(p[:3] <= self.max[:3]))

    def contains_box(self, other: BoundingBox) -> bool:
        return self.contains_point(other.min) and self.contains_point(other.max)

    def transform(self, matrix: Matrix) -> BoundingBox:
        """Return the axis-aligned box around this box after a transform.

        The result equals transforming all eight corners and boxing them
        again. It is computed per matrix entry (Arvo's method) so that a
        zero entry times an infinite extent contributes 0, not NaN.
        """
        if self.is_empty():
            return BoundingBox()

        linear = matrix[:3, :3]
        with np.errstate(invalid="ignore"):
            from_min = np.where(linear == 0.0, 0.0, linear * self.min[:3])
            from_max = np.where(linear == 0.0, 0.0, linear * self.max[:3])

        offset = matrix[:3, 3]
        lo = offset + np.minimum(from_min, from_max).sum(axis=1)
        hi = offset + np.maximum(from_min, from_max).sum(axis=1)
        return BoundingBox(point(*lo), point(*hi))

    def intersects(self, ray: Ray) -> bool:
        """Slab test: does the ray's line pass through the box?"""
        if self.is_empty():
            return False
        tmin, tmax = -INF, INF
        for axis in range(3):
            lo, hi = check_axis(
                float(ray.origin[axis]),
                float(ray.direction[axis]),
                float(self.min[axis]),
                float(self.max[axis]),
            )
            tmin = max(tmin, lo)
            tmax = min(tmax, hi)
            if tmin > tmax:
                return False
        return True

    def split(self) -> tuple[BoundingBox, BoundingBox]:
        """Halve the box at the midpoint of its longest axis.

        Ties prefer x, then y.

        Returns:
            (left, right) half-boxes.
        """
        extents = self.max[:3] - self.min[:3]
        greatest = max(extents)
        if extents[0] == greatest:
            axis = 0
        elif extents[1] == greatest:
            axis = 1
        else:
            axis = 2

        mid = self.min[axis] + extents[axis] / 2.0

        left_max = self.max.copy()
        left_max[axis] = mid
        right_min = self.min.copy()
        right_min[axis] = mid
        return BoundingBox(self.min.copy(), left_max), BoundingBox(right_min, self.max.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return tuples_equal(self.min, other.min) and tuples_equal(self.max, other.max)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundingBox(min={self.min[:3].tolist()}, max={self.max[:3].tolist()})"
