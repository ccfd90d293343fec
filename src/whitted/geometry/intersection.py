"""Intersection records and hit selection.

An `Intersection` is a candidate hit: the ray parameter `t`, the leaf shape
that was hit, optional barycentric (u, v) for triangles, and the chain of
composite shapes (outermost first) the ray passed through to reach the leaf.
The chain replaces parent back-pointers: it is all `normal_at` needs to carry
points and normals between world and object space.

Example:
    >>> from whitted.geometry.intersection import Intersection, hit, intersections
    >>> from whitted.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = intersections(Intersection(2.0, s), Intersection(-1.0, s))
    >>> hit(xs).t
    2.0
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


@dataclass(frozen=True, eq=False)
class Intersection:
    """A single ray/shape intersection.

    Attributes:
        t: Ray parameter of the hit.
        object: The leaf shape that was hit.
        u: First barycentric coordinate (triangles only).
        v: Second barycentric coordinate (triangles only).
        path: Composite ancestors of `object`, outermost first.
    """

    t: float
    object: Shape
    u: float | None = None
    v: float | None = None
    path: tuple[Shape, ...] = ()

    def casts_shadow(self) -> bool:
        """A hit occludes light unless its leaf or any ancestor opts out."""
        return self.object.casts_shadow and all(node.casts_shadow for node in self.path)

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, object={self.object!r})"


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a list sorted by t (stable)."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Return the visible hit: the intersection with the lowest t >= 0.

    Returns:
        The hit, or None when every intersection is behind the ray origin.
    """
    return min((i for i in xs if i.t >= 0.0), key=lambda i: i.t, default=None)


def shadow_hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Like `hit`, but ignores shapes that do not cast shadows."""
    return min(
        (i for i in xs if i.t >= 0.0 and i.casts_shadow()),
        key=lambda i: i.t,
        default=None,
    )
