"""Constructive solid geometry.

A `Csg` shape combines exactly two operands with a boolean operation. Its
intersections are the operands' intersections, sorted and then filtered by
walking them in order while tracking whether the ray is currently inside the
left and inside the right operand:

    | operation    | keep the hit when                                 |
    |--------------|---------------------------------------------------|
    | UNION        | (lhit and not in_right) or (not lhit and not in_left) |
    | INTERSECTION | (lhit and in_right) or (not lhit and in_left)     |
    | DIFFERENCE   | (lhit and not in_right) or (not lhit and in_left) |

After each hit, in_left flips if the hit belongs to the left operand,
in_right otherwise.

Example:
    >>> from whitted.geometry.csg import Csg, Operation
    >>> from whitted.geometry.cube import Cube
    >>> from whitted.geometry.sphere import Sphere
    >>> rounded = Csg(Operation.INTERSECTION, Sphere(), Cube())
"""

from __future__ import annotations

from enum import IntEnum

from whitted.core.matrix import Matrix
from whitted.geometry.bounds import BoundingBox
from whitted.geometry.group import Group
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape, ShapeKind
from whitted.materials.material import Material


class Operation(IntEnum):
    """Boolean operation applied by a CSG shape."""

    UNION = 0
    INTERSECTION = 1
    DIFFERENCE = 2


class Csg(Shape):
    """Boolean combination of a left and a right shape.

    Attributes:
        operation: The boolean operation.
        left: Left operand.
        right: Right operand.
        cached_bounds: CSG-space bounds, or None when stale.
    """

    kind = ShapeKind.CSG

    def __init__(
        self,
        operation: Operation,
        left: Shape,
        right: Shape,
        transform: Matrix | None = None,
        material: Material | None = None,
        casts_shadow: bool = True,
    ) -> None:
        super().__init__(transform=transform, material=material, casts_shadow=casts_shadow)
        if left is right:
            raise ValueError("CSG operands must be distinct shapes")
        self.operation = operation
        self.left = left
        self.right = right
        self.cached_bounds: BoundingBox | None = None

    @property
    def children(self) -> tuple[Shape, Shape]:
        return (self.left, self.right)

    def __repr__(self) -> str:
        return f"Csg({self.operation.name}, left={self.left!r}, right={self.right!r})"


def intersection_allowed(op: Operation, lhit: bool, in_left: bool, in_right: bool) -> bool:
    """Decide whether a hit survives the boolean operation.

    Args:
        op: The CSG operation.
        lhit: True if the hit is on the left operand.
        in_left: True if the ray is currently inside the left operand.
        in_right: True if the ray is currently inside the right operand.

    Raises:
        ValueError: For an unknown operation.
    """
    if op == Operation.UNION:
        return (lhit and not in_right) or (not lhit and not in_left)
    elif op == Operation.INTERSECTION:
        return (lhit and in_right) or (not lhit and in_left)
    elif op == Operation.DIFFERENCE:
        return (lhit and not in_right) or (not lhit and in_left)
    raise ValueError(f"Unknown CSG operation: {op}")


def includes(shape: Shape, target: Shape) -> bool:
    """True if `target` is `shape` or any shape nested inside it (by identity)."""
    if shape is target:
        return True
    if isinstance(shape, Group):
        return any(includes(child, target) for child in shape.children)
    if isinstance(shape, Csg):
        return includes(shape.left, target) or includes(shape.right, target)
    return False


def filter_intersections(csg: Csg, xs: list[Intersection]) -> list[Intersection]:
    """Keep the hits of a sorted list that lie on the combined surface."""
    in_left = False
    in_right = False
    result = []

    for i in xs:
        lhit = includes(csg.left, i.object)
        if intersection_allowed(csg.operation, lhit, in_left, in_right):
            result.append(i)

        if lhit:
            in_left = not in_left
        else:
            in_right = not in_right

    return result
