"""Operations over the closed set of shape kinds.

Every shape kind supports the same capability set: intersect a ray, compute
a surface normal, report bounds. This module is the single place that
dispatches on `Shape.kind` to the kind-specific functions, and it implements
the recursive parts (Group and CSG traversal, subdivision) on top of them.

Transforms compose along the traversal path:

    intersect(shape, ray)  ->  ray' = shape.inverse @ ray
                               local_intersect(shape, ray')
                                 composites: intersect(child, ray') for each child

so each intersection records the composite ancestors it passed through.
`normal_at` replays that path to move the point into the leaf's object space
and to move the normal back out.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.operations import intersect, normal_at
    >>> from whitted.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = intersect(s, Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> normal_at(s, point(0, 0, -1), xs[0])  # vector(0, 0, -1)
"""

from __future__ import annotations

import logging

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple4, normalize
from whitted.geometry.bounds import BoundingBox
from whitted.geometry.cone import cone_bounds, cone_normal, intersect_cone
from whitted.geometry.csg import Csg, filter_intersections
from whitted.geometry.cube import cube_bounds, cube_normal, intersect_cube
from whitted.geometry.cylinder import cylinder_bounds, cylinder_normal, intersect_cylinder
from whitted.geometry.group import Group, make_subgroup
from whitted.geometry.intersection import Intersection, intersections
from whitted.geometry.plane import intersect_plane, plane_bounds, plane_normal
from whitted.geometry.shape import Shape, ShapeKind
from whitted.geometry.sphere import intersect_sphere, sphere_bounds, sphere_normal
from whitted.geometry.triangle import (
    intersect_triangle,
    smooth_triangle_normal,
    triangle_bounds,
    triangle_normal,
)
from whitted.materials.material import Material

logger = logging.getLogger(__name__)


# =============================================================================
# Intersection
# =============================================================================


def intersect(shape: Shape, ray: Ray, path: tuple[Shape, ...] = ()) -> list[Intersection]:
    """Intersect a ray given in the shape's parent space.

    Args:
        shape: Any shape.
        ray: Ray in the space of the shape's parent.
        path: Composite ancestors of `shape`, outermost first.

    Returns:
        Unsorted intersections with the leaves under `shape`.
    """
    return local_intersect(shape, ray.transform(shape.inverse), path)


def local_intersect(
    shape: Shape, local_ray: Ray, path: tuple[Shape, ...] = ()
) -> list[Intersection]:
    """Intersect a ray already in the shape's object space."""
    kind = shape.kind
    if kind == ShapeKind.SPHERE:
        return intersect_sphere(shape, local_ray, path)
    elif kind == ShapeKind.PLANE:
        return intersect_plane(shape, local_ray, path)
    elif kind == ShapeKind.CUBE:
        return intersect_cube(shape, local_ray, path)
    elif kind == ShapeKind.CYLINDER:
        return intersect_cylinder(shape, local_ray, path)
    elif kind == ShapeKind.CONE:
        return intersect_cone(shape, local_ray, path)
    elif kind in (ShapeKind.TRIANGLE, ShapeKind.SMOOTH_TRIANGLE):
        return intersect_triangle(shape, local_ray, path)
    elif kind == ShapeKind.GROUP:
        if not bounds(shape).intersects(local_ray):
            return []
        child_path = path + (shape,)
        xs: list[Intersection] = []
        for child in shape.children:
            xs.extend(intersect(child, local_ray, child_path))
        return xs
    elif kind == ShapeKind.CSG:
        if not bounds(shape).intersects(local_ray):
            return []
        child_path = path + (shape,)
        xs = intersect(shape.left, local_ray, child_path)
        xs.extend(intersect(shape.right, local_ray, child_path))
        return filter_intersections(shape, intersections(*xs))
    raise ValueError(f"Unknown shape kind: {kind}")


# =============================================================================
# Normals and space conversion
# =============================================================================


def world_to_object(shape: Shape, world_point: Tuple4, path: tuple[Shape, ...] = ()) -> Tuple4:
    """Convert a world-space point into the object space of `shape`.

    Args:
        shape: The shape whose object space is wanted.
        world_point: Point in world space.
        path: Composite ancestors of `shape`, outermost first.
    """
    p = world_point
    for ancestor in path:
        p = ancestor.inverse @ p
    return shape.inverse @ p


def normal_to_world(shape: Shape, object_normal: Tuple4, path: tuple[Shape, ...] = ()) -> Tuple4:
    """Convert an object-space normal of `shape` into a unit world-space normal."""
    n = object_normal
    for node in (shape, *reversed(path)):
        n = node.inverse_transpose @ n
        n[3] = 0.0
        n = normalize(n)
    return n


def local_normal(shape: Shape, local_point: Tuple4, hit: Intersection | None = None) -> Tuple4:
    """Object-space normal of a leaf shape (not necessarily unit length).

    Raises:
        TypeError: For composite shapes, which have no surface of their own.
        ValueError: For a smooth triangle without a hit carrying (u, v).
    """
    kind = shape.kind
    if kind == ShapeKind.SPHERE:
        return sphere_normal(local_point)
    elif kind == ShapeKind.PLANE:
        return plane_normal(local_point)
    elif kind == ShapeKind.CUBE:
        return cube_normal(local_point)
    elif kind == ShapeKind.CYLINDER:
        return cylinder_normal(shape, local_point)
    elif kind == ShapeKind.CONE:
        return cone_normal(shape, local_point)
    elif kind == ShapeKind.TRIANGLE:
        return triangle_normal(shape)
    elif kind == ShapeKind.SMOOTH_TRIANGLE:
        if hit is None:
            raise ValueError("Smooth triangle normals need an intersection with (u, v)")
        return smooth_triangle_normal(shape, hit)
    elif kind in (ShapeKind.GROUP, ShapeKind.CSG):
        raise TypeError(f"{type(shape).__name__} has no local normal; ask the leaf that was hit")
    raise ValueError(f"Unknown shape kind: {kind}")


def normal_at(shape: Shape, world_point: Tuple4, hit: Intersection | None = None) -> Tuple4:
    """Unit world-space normal of `shape` at a world-space point.

    Args:
        shape: The leaf shape that was hit.
        world_point: Point on the surface in world space.
        hit: The intersection that produced the point. Its path places the
            leaf inside any composites, and smooth triangles read its (u, v).
    """
    path = () if hit is None else hit.path
    local_point = world_to_object(shape, world_point, path)
    n = local_normal(shape, local_point, hit)
    return normal_to_world(shape, n, path)


# =============================================================================
# Bounds
# =============================================================================


def bounds(shape: Shape) -> BoundingBox:
    """Bounding box of a shape in its own object space.

    Composite boxes are cached on the shape; treat the returned box as
    read-only.
    """
    kind = shape.kind
    if kind == ShapeKind.SPHERE:
        return sphere_bounds()
    elif kind == ShapeKind.PLANE:
        return plane_bounds()
    elif kind == ShapeKind.CUBE:
        return cube_bounds()
    elif kind == ShapeKind.CYLINDER:
        return cylinder_bounds(shape)
    elif kind == ShapeKind.CONE:
        return cone_bounds(shape)
    elif kind in (ShapeKind.TRIANGLE, ShapeKind.SMOOTH_TRIANGLE):
        return triangle_bounds(shape)
    elif kind in (ShapeKind.GROUP, ShapeKind.CSG):
        if shape.cached_bounds is None:
            box = BoundingBox()
            for child in shape.children:
                box.add_box(parent_space_bounds(child))
            shape.cached_bounds = box
        return shape.cached_bounds
    raise ValueError(f"Unknown shape kind: {kind}")


def parent_space_bounds(shape: Shape) -> BoundingBox:
    """Bounding box of a shape in its parent's space."""
    return bounds(shape).transform(shape.transform)


def invalidate_bounds(shape: Shape) -> None:
    """Drop every cached composite box in the subtree rooted at `shape`."""
    if isinstance(shape, (Group, Csg)):
        shape.cached_bounds = None
        for child in shape.children:
            invalidate_bounds(child)


# =============================================================================
# Hierarchy editing
# =============================================================================


def set_material(shape: Shape, material: Material) -> None:
    """Assign a material to a shape and every shape nested inside it."""
    shape.material = material
    if isinstance(shape, (Group, Csg)):
        for child in shape.children:
            set_material(child, material)


def partition_children(group: Group) -> tuple[list[Shape], list[Shape]]:
    """Remove and return the children that fit in either half of the group's box.

    The box is split at the midpoint of its longest axis. Children whose
    parent-space box fits the left half are taken first, then those that fit
    the right half; everything else stays in the group.

    Returns:
        (left, right) lists of removed children.
    """
    left_box, right_box = bounds(group).split()

    left: list[Shape] = []
    right: list[Shape] = []
    for child in group.children:
        child_box = parent_space_bounds(child)
        if left_box.contains_box(child_box):
            left.append(child)
        elif right_box.contains_box(child_box):
            right.append(child)

    group.remove_children(left + right)
    return left, right


def _can_partition(box: BoundingBox) -> bool:
    if box.is_empty() or not box.is_finite():
        return False
    return bool((box.max[:3] - box.min[:3]).max() > 0.0)


def divide(shape: Shape, threshold: int) -> None:
    """Build a bounding-volume hierarchy under `shape` in place.

    A group with at least `threshold` children moves the children that fit
    either half of its box into new sub-groups. Then every child (groups and
    CSG operands alike) is divided the same way. Groups with infinite or
    flat bounds are not partitioned, but their children still are.

    Args:
        shape: Root of the subtree to divide. Leaves are left alone.
        threshold: Minimum child count that triggers a partition.

    Raises:
        ValueError: If threshold is less than 1.
    """
    if threshold < 1:
        raise ValueError(f"Subdivision threshold must be >= 1, got {threshold}")

    if isinstance(shape, Group):
        if len(shape.children) >= threshold and _can_partition(bounds(shape)):
            left, right = partition_children(shape)
            if left:
                make_subgroup(shape, left)
            if right:
                make_subgroup(shape, right)
            logger.debug(
                "Partitioned group: %d left, %d right, %d kept",
                len(left),
                len(right),
                len(shape.children) - bool(left) - bool(right),
            )
        for child in shape.children:
            divide(child, threshold)
    elif isinstance(shape, Csg):
        divide(shape.left, threshold)
        divide(shape.right, threshold)
        shape.cached_bounds = None
