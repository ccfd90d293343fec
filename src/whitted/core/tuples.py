"""Point, vector and color helpers built on NumPy arrays.

Points and vectors are homogeneous 4-element float64 arrays: points carry
w = 1 so translations move them, vectors carry w = 0 so they only rotate and
scale. Colors are plain 3-element arrays in linear RGB.

All helpers return fresh arrays; nothing in the renderer mutates a tuple in
place, which is what lets worker threads share scene data freely.

Example:
    >>> from whitted.core.tuples import point, vector, normalize, dot
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = normalize(vector(0.0, 3.0, 4.0))
    >>> dot(v, vector(0.0, 0.0, 1.0))
    0.8
"""

import math

import numpy as np
import numpy.typing as npt

# Type aliases for the array flavours used across the package
Tuple4 = npt.NDArray[np.float64]
Color = npt.NDArray[np.float64]

# Tolerance for float comparisons and surface offsets
EPSILON = 1e-5


def point(x: float, y: float, z: float) -> Tuple4:
    """Create a point (w = 1)."""
    return np.array([x, y, z, 1.0], dtype=np.float64)


def vector(x: float, y: float, z: float) -> Tuple4:
    """Create a vector (w = 0)."""
    return np.array([x, y, z, 0.0], dtype=np.float64)


def color(r: float, g: float, b: float) -> Color:
    """Create a linear RGB color."""
    return np.array([r, g, b], dtype=np.float64)


def black() -> Color:
    """Return a new black color."""
    return np.zeros(3, dtype=np.float64)


def white() -> Color:
    """Return a new white color."""
    return np.ones(3, dtype=np.float64)


def is_point(t: Tuple4) -> bool:
    return bool(t[3] == 1.0)


def is_vector(t: Tuple4) -> bool:
    return bool(t[3] == 0.0)


def equal(a: float, b: float) -> bool:
    """Compare two floats within EPSILON.

    Two infinities of the same sign compare equal, which bounding boxes
    with unbounded extents rely on.
    """
    if math.isinf(a) or math.isinf(b):
        return a == b
    return abs(a - b) < EPSILON


def tuples_equal(a: npt.NDArray[np.float64], b: npt.NDArray[np.float64]) -> bool:
    """Component-wise `equal` for two arrays of the same shape."""
    return all(equal(float(x), float(y)) for x, y in zip(a, b))


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Tuple4, b: Tuple4) -> float:
    """Compute the dot product of two tuples."""
    return float(a @ b)


def magnitude(v: Tuple4) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(float(v @ v))


def normalize(v: Tuple4) -> Tuple4:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v. A zero-length vector is
        returned unchanged rather than dividing by zero.
    """
    length = magnitude(v)
    if length == 0.0:
        return v.copy()
    return v / length


def cross(a: Tuple4, b: Tuple4) -> Tuple4:
    """Compute the cross product of two vectors (w of the result is 0)."""
    return vector(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def reflect(incident: Tuple4, normal: Tuple4) -> Tuple4:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident - normal * (2.0 * dot(incident, normal))
