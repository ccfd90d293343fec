"""Showcase scene configuration.

This module provides a factory for a small scene that exercises every part
of the shading engine at once:

- A checkered floor plane and a striped back wall
- A mirror sphere (reflection)
- A hollow glass sphere: a glass sphere with an air bubble (refraction,
  Fresnel blending)
- A CSG "rounded cube": a cube intersected with a sphere, minus a cylinder
  (boolean combination)
- A closed cone and a hexagon of capped cylinders and spheres in a Group
  (composites, subdivision)

The camera looks at the group of objects from slightly above.

Example:
    >>> from whitted.core.renderer import RenderOptions, render
    >>> from whitted.scene.showcase import ShowcaseParams, create_showcase_scene
    >>> world, camera = create_showcase_scene(ShowcaseParams(width=200, height=100))
    >>> canvas = render(camera, world, RenderOptions(threads=4))
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from whitted.camera.pinhole import Camera
from whitted.core.matrix import (
    Matrix,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    translation,
    view_transform,
)
from whitted.core.tuples import color, point, vector
from whitted.geometry.cone import Cone
from whitted.geometry.csg import Csg, Operation
from whitted.geometry.cube import Cube
from whitted.geometry.cylinder import Cylinder
from whitted.geometry.group import Group
from whitted.geometry.plane import Plane
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.material import AIR, DEFAULT_MATERIAL, GLASS, Material
from whitted.materials.pattern import checkers_pattern, stripe_pattern
from whitted.scene.light import PointLight
from whitted.scene.world import World

# =============================================================================
# Showcase Parameters
# =============================================================================


@dataclass
class ShowcaseParams:
    """Parameters for configuring the showcase scene.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        field_of_view: Camera angle of view in radians.
        light_position: World-space light position (x, y, z).
        light_color: RGB intensity of the light.
        subdivision_threshold: Passed to `World.divide`; 0 disables it.

    Example:
        >>> params = ShowcaseParams()
        >>> params.width
        400
        >>> small = ShowcaseParams(width=100, height=50)
    """

    width: int = 400
    height: int = 200
    field_of_view: float = math.pi / 3
    light_position: tuple[float, float, float] = (-4.9, 4.9, -1.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    subdivision_threshold: int = 4


# =============================================================================
# Showcase Materials
# =============================================================================

FLOOR_MATERIAL = replace(
    DEFAULT_MATERIAL,
    pattern=checkers_pattern(color(0.35, 0.35, 0.35), color(0.65, 0.65, 0.65)),
    specular=0.0,
    reflective=0.1,
)

WALL_MATERIAL = replace(
    DEFAULT_MATERIAL,
    pattern=stripe_pattern(
        color(0.45, 0.45, 0.45),
        color(0.55, 0.55, 0.55),
        transform=rotation_y(math.pi / 2) @ scaling(0.25, 0.25, 0.25),
    ),
    ambient=0.0,
    diffuse=0.4,
    specular=0.0,
    reflective=0.3,
)

MIRROR_MATERIAL = replace(
    DEFAULT_MATERIAL,
    color=color(0.1, 0.1, 0.1),
    diffuse=0.1,
    specular=1.0,
    shininess=300.0,
    reflective=0.9,
)

GLASS_MATERIAL = replace(
    DEFAULT_MATERIAL,
    color=color(0.0, 0.0, 0.0),
    ambient=0.0,
    diffuse=0.1,
    specular=1.0,
    shininess=300.0,
    reflective=0.9,
    transparency=0.9,
    refractive_index=GLASS,
)

BUBBLE_MATERIAL = replace(GLASS_MATERIAL, refractive_index=AIR)

RED_MATERIAL = replace(DEFAULT_MATERIAL, color=color(0.8, 0.1, 0.1), specular=0.4)
BLUE_MATERIAL = replace(DEFAULT_MATERIAL, color=color(0.2, 0.3, 0.9), shininess=50.0)
GOLD_MATERIAL = replace(
    DEFAULT_MATERIAL,
    color=color(0.8, 0.6, 0.2),
    diffuse=0.6,
    specular=0.6,
    reflective=0.2,
)


# =============================================================================
# Showcase Pieces
# =============================================================================


def _hexagon_corner(material: Material) -> Shape:
    return Sphere(
        transform=translation(0.0, 0.0, -1.0) @ scaling(0.25, 0.25, 0.25),
        material=material,
    )


def _hexagon_edge(material: Material) -> Shape:
    return Cylinder(
        minimum=0.0,
        maximum=1.0,
        closed=True,
        transform=translation(0.0, 0.0, -1.0)
        @ rotation_y(-math.pi / 6)
        @ rotation_z(-math.pi / 2)
        @ scaling(0.25, 1.0, 0.25),
        material=material,
    )


def create_hexagon(
    material: Material = GOLD_MATERIAL, transform: Matrix | None = None
) -> Group:
    """Six corner spheres joined by capped cylinders, one Group per side."""
    hexagon = Group(transform=transform)
    for n in range(6):
        side = Group([_hexagon_corner(material), _hexagon_edge(material)])
        side.transform = rotation_y(n * math.pi / 3)
        hexagon.add_child(side)
    return hexagon


def create_rounded_cube(
    material: Material = RED_MATERIAL, transform: Matrix | None = None
) -> Csg:
    """A cube intersected with a sphere, with a cylinder drilled through it."""
    body = Csg(
        Operation.INTERSECTION,
        Cube(material=material),
        Sphere(transform=scaling(1.35, 1.35, 1.35), material=material),
    )
    drill = Cylinder(
        minimum=-2.0,
        maximum=2.0,
        closed=True,
        transform=rotation_x(math.pi / 2) @ scaling(0.5, 1.0, 0.5),
        material=material,
    )
    return Csg(Operation.DIFFERENCE, body, drill, transform=transform)


# =============================================================================
# Showcase Factory
# =============================================================================


def create_showcase_scene(params: ShowcaseParams | None = None) -> tuple[World, Camera]:
    """Create the showcase world and a camera framing it.

    Args:
        params: Optional ShowcaseParams; defaults to ShowcaseParams().

    Returns:
        A tuple of (World, Camera).
    """
    if params is None:
        params = ShowcaseParams()

    world = World()
    world.add_light(PointLight(point(*params.light_position), color(*params.light_color)))

    world.add_object(Plane(material=FLOOR_MATERIAL))
    world.add_object(
        Plane(
            transform=translation(0.0, 0.0, 7.0) @ rotation_x(math.pi / 2),
            material=WALL_MATERIAL,
        )
    )

    world.add_object(
        Sphere(
            transform=translation(-2.6, 1.0, 2.5),
            material=MIRROR_MATERIAL,
        )
    )

    # Hollow glass sphere; neither surface blocks the light
    world.add_object(
        Sphere(transform=translation(0.0, 1.0, 0.0), material=GLASS_MATERIAL, casts_shadow=False)
    )
    world.add_object(
        Sphere(
            transform=translation(0.0, 1.0, 0.0) @ scaling(0.5, 0.5, 0.5),
            material=BUBBLE_MATERIAL,
            casts_shadow=False,
        )
    )

    world.add_object(
        create_rounded_cube(
            transform=translation(2.4, 0.75, 1.5)
            @ rotation_y(math.pi / 5)
            @ scaling(0.75, 0.75, 0.75)
        )
    )

    world.add_object(
        Cone(
            minimum=-1.0,
            maximum=0.0,
            closed=True,
            transform=translation(-1.2, 1.0, -1.6) @ scaling(0.5, 1.0, 0.5),
            material=BLUE_MATERIAL,
        )
    )

    world.add_object(
        create_hexagon(transform=translation(0.8, 0.25, 4.0) @ scaling(1.2, 1.2, 1.2))
    )

    if params.subdivision_threshold > 0:
        world.divide(params.subdivision_threshold)

    camera = Camera(params.width, params.height, params.field_of_view)
    camera.transform = view_transform(
        point(0.0, 2.5, -6.0), point(0.0, 0.8, 1.5), vector(0.0, 1.0, 0.0)
    )

    return world, camera
