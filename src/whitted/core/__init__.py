"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Points, vectors and colors as NumPy arrays, plus vector utilities
    matrix: 4x4 transform builders and the cached Transform record
    ray: Ray data structure
    canvas: The pixel grid a render writes into
    renderer: Row-partitioned, thread-pooled rendering loop

All math runs in float64 on the CPU. Scene data is never mutated during a
render, so worker threads share it without locking.
"""

from .canvas import Canvas
from .matrix import (
    IDENTITY,
    Matrix,
    Transform,
    identity,
    matrices_equal,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .ray import Ray
from .tuples import (
    EPSILON,
    Color,
    Tuple4,
    black,
    color,
    cross,
    dot,
    equal,
    magnitude,
    normalize,
    point,
    reflect,
    tuples_equal,
    vector,
    white,
)

# Note: renderer is NOT imported here to avoid circular imports.
# Import directly from whitted.core.renderer when needed.

__all__ = [
    "EPSILON",
    "Canvas",
    "Color",
    "IDENTITY",
    "Matrix",
    "Ray",
    "Transform",
    "Tuple4",
    "black",
    "color",
    "cross",
    "dot",
    "equal",
    "identity",
    "magnitude",
    "matrices_equal",
    "normalize",
    "point",
    "reflect",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "scaling",
    "shearing",
    "translation",
    "tuples_equal",
    "vector",
    "view_transform",
    "white",
]
