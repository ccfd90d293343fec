"""Canvas: the in-memory pixel grid a render produces.

Pixels are linear float RGB stored in a NumPy array of shape
(height, width, 3), the same layout the preview and export utilities work
on. Values are not clamped here; clamping to the displayable range happens
on export.

Example:
    >>> from whitted.core.canvas import Canvas
    >>> from whitted.core.tuples import color
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, color(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
"""

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import Color


class Canvas:
    """A width x height grid of RGB colors, initialised to black.

    Attributes:
        width: Number of pixel columns.
        height: Number of pixel rows.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a black canvas.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> npt.NDArray[np.float64]:
        """The underlying (height, width, 3) array."""
        return self._pixels

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside canvas of size {self._width}x{self._height}"
            )

    def pixel_at(self, x: int, y: int) -> Color:
        """Return a copy of the color at column x, row y."""
        self._check(x, y)
        return self._pixels[y, x].copy()

    def write_pixel(self, x: int, y: int, c: Color) -> None:
        self._check(x, y)
        self._pixels[y, x] = c

    def write_row(self, y: int, colors: npt.ArrayLike) -> None:
        """Write a full row of colors (shape (width, 3))."""
        self._check(0, y)
        self._pixels[y, :, :] = colors

    def fill(self, c: Color) -> None:
        self._pixels[:, :] = c

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return a float32 copy suitable for the preview utilities."""
        return self._pixels.astype(np.float32)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
