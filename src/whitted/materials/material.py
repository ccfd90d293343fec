"""Phong surface material and the lighting model.

This module implements the surface description attached to every shape and
the Phong reflection model used for direct lighting.

Key physics:
    - Ambient term: constant fraction of the light color, always applied
    - Diffuse term: Lambert's cosine law, light . normal
    - Specular term: (reflect . eye) ^ shininess highlight
    - Shadowed points receive only the ambient term

The reflective, transparency and refractive_index fields do not take part in
`lighting`; the world's recursive shading reads them to spawn reflected and
refracted rays.

Example:
    >>> from dataclasses import replace
    >>> from whitted.materials.material import Material
    >>> glass = replace(Material(), transparency=1.0, refractive_index=1.5)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.tuples import Color, Tuple4, black, dot, normalize, reflect, white
from whitted.materials.pattern import Pattern, pattern_at_object

if TYPE_CHECKING:
    from whitted.scene.light import PointLight


# Refractive indices of common media
VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.5
DIAMOND = 2.417


@dataclass(frozen=True, eq=False)
class Material:
    """Immutable surface properties.

    Attributes:
        color: Base surface color, used when no pattern is set.
        pattern: Optional procedural pattern overriding `color`.
        ambient: Fraction of light reflected regardless of orientation.
        diffuse: Weight of the Lambertian term.
        specular: Weight of the highlight.
        shininess: Highlight exponent; larger values give tighter highlights.
        reflective: 0.0 (matte) to 1.0 (perfect mirror).
        transparency: 0.0 (opaque) to 1.0 (fully transparent).
        refractive_index: Index of refraction of the medium inside the shape.
    """

    color: Color = field(default_factory=white)
    pattern: Pattern | None = None
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM


DEFAULT_MATERIAL = Material()


def lighting(
    material: Material,
    light: PointLight,
    position: Tuple4,
    eyev: Tuple4,
    normalv: Tuple4,
    in_shadow: bool = False,
    object_point: Tuple4 | None = None,
) -> Color:
    """Compute the Phong color at a surface point for a single light.

    Args:
        material: Surface material.
        light: The point light illuminating the surface.
        position: World-space surface point.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal (already flipped toward the eye).
        in_shadow: Whether the light is occluded from this point.
        object_point: The same point in the shape's object space, used to
            evaluate the material's pattern. Defaults to `position`.

    Returns:
        The lit color (ambient + diffuse + specular).
    """
    if material.pattern is not None:
        surface = pattern_at_object(
            material.pattern, position if object_point is None else object_point
        )
    else:
        surface = material.color

    effective_color = surface * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    lightv = normalize(light.position - position)
    light_dot_normal = dot(lightv, normalv)
    if light_dot_normal < 0.0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = dot(reflectv, eyev)
    if reflect_dot_eye <= 0.0:
        specular = black()
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
