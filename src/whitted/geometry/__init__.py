"""Geometry module for shapes, intersections and spatial acceleration.

This module provides the shape kinds and the algorithms that operate on them:

Components:
    shape: Shared base record (transform, material) and the ShapeKind tag
    sphere, plane, cube, cylinder, cone, triangle: Primitive shapes
    group: Group composite with cached bounds
    csg: Boolean combination of two shapes
    bounds: Axis-aligned bounding boxes and the slab test
    intersection: Intersection records and hit selection
    operations: Kind dispatch for intersect/normal/bounds and subdivision
    computations: Per-hit shading state and Schlick reflectance

All intersection routines work in object space. Ray-object intersection
follows the pattern:
    xs = intersect(shape, ray)   # unsorted, each carrying its ancestor path
"""

from .bounds import BoundingBox, check_axis
from .computations import Computations, prepare_computations, schlick
from .cone import Cone
from .csg import Csg, Operation, filter_intersections, includes, intersection_allowed
from .cube import Cube
from .cylinder import Cylinder
from .group import Group, make_subgroup
from .intersection import Intersection, hit, intersections, shadow_hit
from .operations import (
    bounds,
    divide,
    intersect,
    invalidate_bounds,
    local_intersect,
    local_normal,
    normal_at,
    normal_to_world,
    parent_space_bounds,
    partition_children,
    set_material,
    world_to_object,
)
from .plane import Plane
from .shape import Shape, ShapeKind
from .sphere import Sphere, glass_sphere
from .triangle import SmoothTriangle, Triangle

__all__ = [
    # Shapes
    "Shape",
    "ShapeKind",
    "Sphere",
    "glass_sphere",
    "Plane",
    "Cube",
    "Cylinder",
    "Cone",
    "Triangle",
    "SmoothTriangle",
    "Group",
    "make_subgroup",
    "Csg",
    "Operation",
    # CSG filtering
    "intersection_allowed",
    "filter_intersections",
    "includes",
    # Bounds
    "BoundingBox",
    "check_axis",
    "bounds",
    "parent_space_bounds",
    "invalidate_bounds",
    # Intersections
    "Intersection",
    "intersections",
    "hit",
    "shadow_hit",
    "intersect",
    "local_intersect",
    # Normals
    "normal_at",
    "local_normal",
    "world_to_object",
    "normal_to_world",
    # Hierarchy
    "divide",
    "partition_children",
    "set_material",
    # Shading state
    "Computations",
    "prepare_computations",
    "schlick",
]
