"""Pinhole camera model for perspective projection ray generation.

The camera sits at the origin of its own space looking down -z at a canvas
one unit away. The view transform (see `core.matrix.view_transform`) places
that space in the world, and its cached inverse carries the generated rays
back out.

The canvas is sized from the horizontal/vertical pixel counts and the field
of view:

    half_view = tan(field_of_view / 2)
    aspect    = hsize / vsize
    aspect >= 1 : half_width = half_view,          half_height = half_view / aspect
    aspect <  1 : half_width = half_view * aspect, half_height = half_view
    pixel_size  = 2 * half_width / hsize

Anti-aliasing shoots several rays per pixel at fixed sub-pixel offsets
(`AASamples`) instead of random jitter, so renders are deterministic.

Example:
    >>> import math
    >>> from whitted.camera.pinhole import Camera
    >>> from whitted.core.matrix import view_transform
    >>> from whitted.core.tuples import point, vector
    >>> camera = Camera(160, 120, math.pi / 3)
    >>> camera.transform = view_transform(
    ...     point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)
    ... )
    >>> ray = camera.ray_for_pixel(80, 60)
"""

from __future__ import annotations

import math
from enum import IntEnum

from whitted.core.matrix import IDENTITY, Matrix, Transform
from whitted.core.ray import Ray
from whitted.core.tuples import normalize, point

# =============================================================================
# Anti-aliasing
# =============================================================================


class AASamples(IntEnum):
    """Number of rays traced per pixel."""

    X1 = 1
    X2 = 2
    X4 = 4
    X8 = 8
    X16 = 16


# Sub-pixel (dx, dy) offsets in [0, 1) for each sampling level
OFFSETS: dict[AASamples, tuple[tuple[float, float], ...]] = {
    AASamples.X1: ((0.5, 0.5),),
    AASamples.X2: ((0.25, 0.5), (0.75, 0.5)),
    AASamples.X4: ((0.25, 0.25), (0.75, 0.25), (0.25, 0.75), (0.75, 0.75)),
    AASamples.X8: (
        (0.25, 0.25),
        (0.5, 0.25),
        (0.75, 0.25),
        (0.25, 0.5),
        (0.75, 0.5),
        (0.25, 0.75),
        (0.5, 0.75),
        (0.75, 0.75),
    ),
    AASamples.X16: tuple(
        (0.125 + 0.25 * i, 0.125 + 0.25 * j) for j in range(4) for i in range(4)
    ),
}


# =============================================================================
# Camera
# =============================================================================


class Camera:
    """A pinhole camera producing one or more rays per pixel.

    Attributes:
        hsize: Canvas width in pixels.
        vsize: Canvas height in pixels.
        field_of_view: Horizontal angle of view in radians (of the wider axis).
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        """Create a camera.

        Args:
            hsize: Canvas width in pixels.
            vsize: Canvas height in pixels.
            field_of_view: Angle of view in radians, in (0, pi).
            transform: View transform; defaults to the identity.

        Raises:
            ValueError: If a size is not positive or the field of view is
                outside (0, pi).
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {field_of_view}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self._placement = IDENTITY if transform is None else Transform.of(transform)

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

    @property
    def transform(self) -> Matrix:
        """World-to-camera view transform."""
        return self._placement.matrix

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._placement = Transform.of(matrix)

    @property
    def inverse(self) -> Matrix:
        return self._placement.inverse

    def ray_through(self, x: float, y: float) -> Ray:
        """Ray through a fractional canvas position, e.g. (10.5, 3.5).

        Args:
            x: Column coordinate, 0 at the left edge.
            y: Row coordinate, 0 at the top edge.
        """
        world_x = self.half_width - x * self.pixel_size
        world_y = self.half_height - y * self.pixel_size

        inverse = self._placement.inverse
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ point(0.0, 0.0, 0.0)
        return Ray(origin, normalize(pixel - origin))

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Ray through the center of pixel (px, py)."""
        return self.ray_through(px + 0.5, py + 0.5)

    def rays_for_pixel(self, px: int, py: int, samples: AASamples = AASamples.X1) -> list[Ray]:
        """Rays through the fixed sub-pixel offsets of a sampling level."""
        return [self.ray_through(px + dx, py + dy) for dx, dy in OFFSETS[AASamples(samples)]]

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self.hsize}, vsize={self.vsize}, "
            f"field_of_view={self.field_of_view:.4f})"
        )
