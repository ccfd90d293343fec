"""Shared base state for every shape kind.

Shapes form a closed set of kinds identified by `ShapeKind`. Each concrete
class carries its kind-specific fields on top of the shared base record
(transform, material, shadow flag); the kind-specific algorithms are plain
functions in the primitive modules, and `whitted.geometry.operations`
dispatches on `kind` to reach them.

The transform is stored as a `Transform` record, so assigning a new matrix
replaces the matrix, its inverse and its inverse-transpose together.

Example:
    >>> from whitted.core.matrix import translation
    >>> from whitted.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> s.transform = translation(2.0, 3.0, 4.0)
    >>> s.inverse  # translation(-2, -3, -4)
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

from whitted.core.matrix import IDENTITY, Matrix, Transform
from whitted.materials.material import DEFAULT_MATERIAL, Material


class ShapeKind(IntEnum):
    """Enumeration of shape kinds, used for dispatch."""

    SPHERE = 0
    PLANE = 1
    CUBE = 2
    CYLINDER = 3
    CONE = 4
    TRIANGLE = 5
    SMOOTH_TRIANGLE = 6
    GROUP = 7
    CSG = 8


COMPOSITE_KINDS = frozenset({ShapeKind.GROUP, ShapeKind.CSG})


class Shape:
    """Base record shared by all shape kinds.

    Attributes:
        material: Surface material. Assigning it on a composite only changes
            the composite itself; use `operations.set_material` to propagate.
        casts_shadow: Whether the shape occludes light in shadow tests.
    """

    kind: ClassVar[ShapeKind]

    def __init__(
        self,
        transform: Matrix | None = None,
        material: Material | None = None,
        casts_shadow: bool = True,
    ) -> None:
        self._placement = IDENTITY if transform is None else Transform.of(transform)
        self.material = DEFAULT_MATERIAL if material is None else material
        self.casts_shadow = casts_shadow

    @property
    def transform(self) -> Matrix:
        """Object-to-parent matrix."""
        return self._placement.matrix

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._placement = Transform.of(matrix)

    @property
    def placement(self) -> Transform:
        """The full Transform record (matrix, inverse, inverse-transpose)."""
        return self._placement

    @property
    def inverse(self) -> Matrix:
        return self._placement.inverse

    @property
    def inverse_transpose(self) -> Matrix:
        return self._placement.inverse_transpose

    @property
    def is_composite(self) -> bool:
        return self.kind in COMPOSITE_KINDS

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id=0x{id(self):x})"
