"""World container and recursive Whitted shading.

The World holds the top-level shapes (conceptually the children of an
implicit root group) and the point lights. Shading is recursive:

    color_at(ray)
      -> hit = nearest visible intersection
      -> shade_hit(comps)
           surface    = sum over lights of Phong(material, light, shadowed?)
           reflected  = color_at(reflection ray) * reflective
           refracted  = color_at(refraction ray) * transparency
           result     = surface + reflected + refracted
                        (reflected/refracted blended by Schlick when the
                         material is both reflective and transparent)

Every recursive call lowers `remaining` by one and a call with remaining == 0
contributes black, so facing mirrors always terminate.

The World is read-only while rendering. Call `prepare()` after building or
editing the scene: it refreshes every cached composite bounding box so that
worker threads never write to the scene.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.scene.world import default_world
    >>> world = default_world()
    >>> world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from whitted.core.matrix import scaling
from whitted.core.ray import Ray
from whitted.core.tuples import Color, Tuple4, black, color, dot, magnitude, normalize, point
from whitted.geometry.computations import Computations, prepare_computations, schlick
from whitted.geometry.intersection import Intersection, hit, intersections, shadow_hit
from whitted.geometry.operations import (
    bounds,
    divide,
    intersect,
    invalidate_bounds,
    world_to_object,
)
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.material import DEFAULT_MATERIAL, lighting
from whitted.scene.light import PointLight

logger = logging.getLogger(__name__)

# Default number of reflection/refraction bounces per primary ray
MAX_RECURSION_DEPTH = 5


class World:
    """A collection of shapes and lights.

    Attributes:
        objects: Top-level shapes.
        lights: Point lights.
    """

    def __init__(
        self,
        objects: list[Shape] | None = None,
        lights: list[PointLight] | None = None,
    ) -> None:
        self.objects: list[Shape] = [] if objects is None else list(objects)
        self.lights: list[PointLight] = [] if lights is None else list(lights)

    def add_object(self, shape: Shape) -> None:
        self.objects.append(shape)

    def add_light(self, light: PointLight) -> None:
        self.lights.append(light)

    # =========================================================================
    # Scene preparation
    # =========================================================================

    def divide(self, threshold: int) -> None:
        """Subdivide every top-level composite into a bounding-volume hierarchy."""
        for shape in self.objects:
            divide(shape, threshold)
        logger.info("Divided %d top-level objects (threshold=%d)", len(self.objects), threshold)

    def prepare(self) -> None:
        """Recompute every cached composite bounding box."""
        for shape in self.objects:
            invalidate_bounds(shape)
            bounds(shape)

    # =========================================================================
    # Ray queries
    # =========================================================================

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with every object, sorted by t."""
        xs: list[Intersection] = []
        for shape in self.objects:
            xs.extend(intersect(shape, ray))
        return intersections(*xs)

    def is_shadowed(self, position: Tuple4, light: PointLight) -> bool:
        """Is anything that casts shadows between the point and the light?"""
        v = light.position - position
        distance = magnitude(v)
        ray = Ray(position, normalize(v))
        h = shadow_hit(self.intersect(ray))
        return h is not None and h.t < distance

    # =========================================================================
    # Shading
    # =========================================================================

    def color_at(self, ray: Ray, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Color seen along a ray, or black if it hits nothing."""
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return black()
        comps = prepare_computations(h, ray, xs)
        return self.shade_hit(comps, remaining)

    def shade_hit(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Direct lighting plus recursive reflection and refraction at a hit."""
        material = comps.object.material
        object_point = world_to_object(comps.object, comps.over_point, comps.path)

        surface = black()
        for light in self.lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            surface = surface + lighting(
                material,
                light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                shadowed,
                object_point,
            )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Color arriving along the reflection vector, scaled by reflectivity."""
        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return black()

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Color arriving through the surface by Snell's law, scaled by transparency.

        Returns black under total internal reflection.
        """
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return black()

        n_ratio = comps.n1 / comps.n2
        cos_i = dot(comps.eyev, comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return black()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def __repr__(self) -> str:
        return f"World(objects={len(self.objects)}, lights={len(self.lights)})"


def default_world() -> World:
    """The standard two-sphere test world.

    A light at (-10, 10, -10), a unit sphere with a green-ish material and
    a concentric sphere of radius 0.5 with the default material.
    """
    light = PointLight(point(-10.0, 10.0, -10.0), color(1.0, 1.0, 1.0))

    outer = Sphere(
        material=replace(
            DEFAULT_MATERIAL,
            color=color(0.8, 1.0, 0.6),
            diffuse=0.7,
            specular=0.2,
        )
    )
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

    return World(objects=[outer, inner], lights=[light])
