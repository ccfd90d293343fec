"""Materials module for surface shading.

This module implements the surface side of Whitted-style shading:

Components:
    material: Immutable Phong material and the `lighting` function
    pattern: Procedural two-color patterns (stripe, gradient, ring, checkers)

Each material provides:
    - Phong coefficients (ambient, diffuse, specular, shininess)
    - Coefficients consumed by recursive shading (reflective, transparency)
    - The refractive index of the medium it encloses
"""

from .material import (
    AIR,
    DEFAULT_MATERIAL,
    DIAMOND,
    GLASS,
    VACUUM,
    WATER,
    Material,
    lighting,
)
from .pattern import (
    Pattern,
    PatternKind,
    checkers_pattern,
    coordinate_pattern,
    gradient_pattern,
    pattern_at,
    pattern_at_object,
    ring_pattern,
    stripe_pattern,
)

__all__ = [
    # Material
    "Material",
    "DEFAULT_MATERIAL",
    "lighting",
    # Refractive indices
    "VACUUM",
    "AIR",
    "WATER",
    "GLASS",
    "DIAMOND",
    # Patterns
    "Pattern",
    "PatternKind",
    "pattern_at",
    "pattern_at_object",
    "stripe_pattern",
    "gradient_pattern",
    "ring_pattern",
    "checkers_pattern",
    "coordinate_pattern",
]
