"""Ray data structure.

A ray is an origin point and a direction vector. Rays are immutable: moving
a ray into a shape's object space produces a new ray.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> ray = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
    >>> ray.position(5.0)  # the origin
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple4


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not normalized
            by the ray itself: object-space rays carry the scale of the
            inverse transform, which keeps `t` comparable across spaces.
    """

    origin: Tuple4
    direction: Tuple4

    def position(self, t: float) -> Tuple4:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> Ray:
        """Return this ray with both origin and direction multiplied by m."""
        return Ray(m @ self.origin, m @ self.direction)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin[:3].tolist()}, direction={self.direction[:3].tolist()})"
