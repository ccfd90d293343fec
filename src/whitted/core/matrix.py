"""4x4 transform builders and the cached Transform record.

Every shape, pattern and camera owns a `Transform`: the matrix together with
its inverse and inverse-transpose. The three are computed once, together,
and the record is immutable, so a holder can only ever swap the whole thing.
Normals must be carried back to world space with the inverse-transpose, and
rays into object space with the inverse, so both are needed on every hit.

Example:
    >>> import math
    >>> from whitted.core.matrix import Transform, rotation_y, translation
    >>> m = translation(0.0, 1.0, 0.0) @ rotation_y(math.pi / 4)
    >>> t = Transform.of(m)
    >>> t.inverse @ t.matrix  # approximately the identity
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EPSILON, Tuple4, cross, normalize

Matrix = npt.NDArray[np.float64]


def identity() -> Matrix:
    """Return a new 4x4 identity matrix."""
    return np.eye(4, dtype=np.float64)


def translation(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def scaling(x: float, y: float, z: float) -> Matrix:
    return np.diag([x, y, z, 1.0]).astype(np.float64)


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[1, 1] = c
    m[1, 2] = -s
    m[2, 1] = s
    m[2, 2] = c
    return m


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0] = c
    m[0, 2] = s
    m[2, 0] = -s
    m[2, 2] = c
    return m


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Build a shearing matrix; `xy` moves x in proportion to y, and so on."""
    m = identity()
    m[0, 1] = xy
    m[0, 2] = xz
    m[1, 0] = yx
    m[1, 2] = yz
    m[2, 0] = zx
    m[2, 1] = zy
    return m


def view_transform(from_point: Tuple4, to_point: Tuple4, up: Tuple4) -> Matrix:
    """Build the world-to-camera transform for an eye looking from -> to.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction; it need not be orthogonal to the
            view direction.

    Returns:
        A matrix that orients the world relative to the eye (the camera
        looks down -z in its own space).
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = np.array(
        [
            [left[0], left[1], left[2], 0.0],
            [true_up[0], true_up[1], true_up[2], 0.0],
            [-forward[0], -forward[1], -forward[2], 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    return orientation @ translation(-from_point[0], -from_point[1], -from_point[2])


def is_invertible(m: Matrix) -> bool:
    """Is `m` far enough from singular to invert in float64?"""
    return bool(np.linalg.cond(m) < 1.0 / np.finfo(np.float64).eps)


def matrices_equal(a: Matrix, b: Matrix) -> bool:
    """Compare two matrices element-wise within EPSILON."""
    return bool(np.allclose(a, b, rtol=0.0, atol=EPSILON))


@dataclass(frozen=True, eq=False)
class Transform:
    """A transform matrix with its cached inverse and inverse-transpose.

    Attributes:
        matrix: Object-to-parent transform.
        inverse: Parent-to-object transform (applied to rays and points).
        inverse_transpose: Carries object-space normals to parent space.
    """

    matrix: Matrix
    inverse: Matrix
    inverse_transpose: Matrix

    @classmethod
    def of(cls, matrix: Matrix) -> Transform:
        """Build a Transform, deriving the inverse matrices in one step.

        Raises:
            ValueError: If the matrix is not 4x4 or is singular.
        """
        m = np.array(matrix, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"Transform must be a 4x4 matrix, got shape {m.shape}")
        if not is_invertible(m):
            raise ValueError("Transform matrix is not invertible")
        inverse = np.linalg.inv(m)
        # Read-only so shared instances cannot be edited through a reference
        for a in (m, inverse):
            a.setflags(write=False)
        inverse_transpose = inverse.T
        return cls(matrix=m, inverse=inverse, inverse_transpose=inverse_transpose)

    @classmethod
    def identity(cls) -> Transform:
        return cls.of(identity())

    def __repr__(self) -> str:
        return f"Transform({self.matrix.tolist()})"


IDENTITY = Transform.identity()
