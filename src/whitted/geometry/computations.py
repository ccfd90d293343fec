"""Per-hit shading state and Fresnel reflectance.

`prepare_computations` turns an intersection into everything shading needs:
the surface point, offset points just above and below the surface, the eye
and normal vectors, the reflection vector, and the refractive indices on
either side of the surface.

Refractive indices (n1 = medium being left, n2 = medium being entered) come
from replaying the sorted intersection list with a containment stack. Each
intersection toggles its shape in the stack: a shape already in the stack
is being exited, otherwise it is being entered. The hit reads the top of
the stack before (n1) and after (n2) its own toggle; an empty stack means
vacuum (1.0).

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.computations import prepare_computations
    >>> from whitted.geometry.operations import intersect
    >>> from whitted.geometry.sphere import glass_sphere
    >>> ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    >>> xs = intersect(glass_sphere(), ray)
    >>> comps = prepare_computations(xs[0], ray, xs)
    >>> comps.n1, comps.n2
    (1.0, 1.5)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple4, dot, reflect
from whitted.geometry.intersection import Intersection
from whitted.geometry.operations import normal_at
from whitted.geometry.shape import Shape

VACUUM_INDEX = 1.0


@dataclass(frozen=True, eq=False)
class Computations:
    """Precomputed values for shading one intersection.

    Attributes:
        t: Ray parameter of the hit.
        object: Leaf shape that was hit.
        intersection: The hit itself.
        point: World-space surface point.
        over_point: `point` nudged EPSILON along the normal (shadow and
            reflection rays start here).
        under_point: `point` nudged EPSILON against the normal (refraction
            rays start here).
        eyev: Unit vector toward the eye.
        normalv: Unit normal, flipped to face the eye.
        inside: True if the hit is on the inside of the surface.
        reflectv: Ray direction reflected about the normal.
        n1: Refractive index of the medium being exited.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Shape
    intersection: Intersection
    point: Tuple4
    over_point: Tuple4
    under_point: Tuple4
    eyev: Tuple4
    normalv: Tuple4
    inside: bool
    reflectv: Tuple4
    n1: float
    n2: float

    @property
    def path(self) -> tuple[Shape, ...]:
        return self.intersection.path


def _refractive_indices(hit: Intersection, xs: list[Intersection]) -> tuple[float, float]:
    containers: list[Shape] = []
    n1 = n2 = VACUUM_INDEX

    for i in xs:
        if i is hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        for index, shape in enumerate(containers):
            if shape is i.object:
                del containers[index]
                break
        else:
            containers.append(i.object)

        if i is hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break

    return n1, n2


def prepare_computations(
    hit: Intersection, ray: Ray, xs: list[Intersection] | None = None
) -> Computations:
    """Derive the shading state for a hit.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        xs: All intersections along the ray, sorted by t and containing
            `hit` itself. Defaults to just `[hit]`.

    Returns:
        The Computations for the hit.
    """
    if xs is None:
        xs = [hit]

    position = ray.position(hit.t)
    eyev = -ray.direction
    normalv = normal_at(hit.object, position, hit)

    inside = dot(normalv, eyev) < 0.0
    if inside:
        normalv = -normalv

    n1, n2 = _refractive_indices(hit, xs)

    return Computations(
        t=hit.t,
        object=hit.object,
        intersection=hit,
        point=position,
        over_point=position + normalv * EPSILON,
        under_point=position - normalv * EPSILON,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=reflect(ray.direction, normalv),
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    """Schlick's approximation of the Fresnel reflectance.

    Returns:
        Fraction of light reflected, in [0, 1]. Exactly 1.0 under total
        internal reflection.
    """
    cos = dot(comps.eyev, comps.normalv)

    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
