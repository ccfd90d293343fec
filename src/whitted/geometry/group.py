"""Group composite: an ordered collection of child shapes.

A group places its children with its own transform. Children keep only
their local transform; placement is composed along the path while
intersecting, so changing a group's transform never rewrites its children.

The group's bounding box (the union of its children's boxes in group space)
is cached. `add_child` and subdivision drop the cache; mutating a child
after insertion does not, so call `operations.invalidate_bounds` on the
root (or `World.prepare`) after editing a built hierarchy.

Example:
    >>> from whitted.core.matrix import translation
    >>> from whitted.geometry.group import Group
    >>> from whitted.geometry.sphere import Sphere
    >>> g = Group(transform=translation(0.0, 1.0, 0.0))
    >>> g.add_child(Sphere())
"""

from __future__ import annotations

from collections.abc import Iterable

from whitted.core.matrix import Matrix
from whitted.geometry.bounds import BoundingBox
from whitted.geometry.shape import Shape, ShapeKind
from whitted.materials.material import Material


class Group(Shape):
    """A composite holding any number of child shapes.

    Attributes:
        children: Child shapes in insertion order.
        cached_bounds: Group-space bounds, or None when stale.
    """

    kind = ShapeKind.GROUP

    def __init__(
        self,
        children: Iterable[Shape] = (),
        transform: Matrix | None = None,
        material: Material | None = None,
        casts_shadow: bool = True,
    ) -> None:
        super().__init__(transform=transform, material=material, casts_shadow=casts_shadow)
        self.children: list[Shape] = []
        self.cached_bounds: BoundingBox | None = None
        for child in children:
            self.add_child(child)

    def add_child(self, child: Shape) -> None:
        """Append a child shape.

        Raises:
            ValueError: If the child is the group itself.
        """
        if child is self:
            raise ValueError("A group cannot contain itself")
        self.children.append(child)
        self.cached_bounds = None

    def add_children(self, children: Iterable[Shape]) -> None:
        for child in children:
            self.add_child(child)

    def remove_children(self, children: Iterable[Shape]) -> None:
        """Remove the given children (by identity)."""
        doomed = {id(c) for c in children}
        self.children = [c for c in self.children if id(c) not in doomed]
        self.cached_bounds = None

    def is_empty(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"Group(children={len(self.children)})"


def make_subgroup(group: Group, shapes: Iterable[Shape]) -> Group:
    """Wrap shapes in a new group and append that group to `group`.

    The shapes are not removed from `group`; callers moving children do
    that first.

    Returns:
        The new sub-group.
    """
    subgroup = Group(shapes)
    group.add_child(subgroup)
    return subgroup
