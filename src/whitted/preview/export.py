"""Image export for rendered canvases.

Supported formats:
    - PNG (8-bit RGB via Pillow)
    - PPM (plain-text P3)

Both go through `image_to_uint8`, which applies the display pipeline and
maps [0, 1] to 0..255 rounding half up (0.5 -> 128).

Example:
    >>> from whitted.preview.export import save_png, save_ppm
    >>> save_png(canvas, "render.png", tone_map="reinhard")
    >>> save_ppm(canvas, "render.ppm")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.core.canvas import Canvas
from whitted.preview.display import ToneMapMethod, process_image_for_display

# Maximum line length of a plain PPM file
PPM_LINE_LIMIT = 70


def _as_array(image: Canvas | npt.ArrayLike) -> npt.NDArray[np.float64]:
    if isinstance(image, Canvas):
        return image.pixels
    return np.asarray(image, dtype=np.float64)


def image_to_uint8(
    image: Canvas | npt.ArrayLike,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a canvas or linear float image to 8-bit RGB.

    Args:
        image: A Canvas or an array of shape (H, W, 3).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma encoding value.
        exposure: Exposure for the "exposure" tone map.

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    processed = process_image_for_display(
        _as_array(image),
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )
    return np.floor(processed * 255.0 + 0.5).astype(np.uint8)


def save_png(
    image: Canvas | npt.ArrayLike,
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> None:
    """Save a canvas or float image as an 8-bit PNG."""
    image_uint8 = image_to_uint8(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    PILImage.fromarray(image_uint8).save(filepath)


def canvas_to_ppm(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> str:
    """Encode a canvas as plain PPM (P3) text.

    Every pixel row starts a new line, and no line is longer than 70
    characters. The text ends with a newline.
    """
    values = image_to_uint8(canvas, tone_map=tone_map, gamma=gamma, exposure=exposure)

    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]
    for row in values:
        line = ""
        for token in (str(int(v)) for v in row.reshape(-1)):
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_LINE_LIMIT:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(
    canvas: Canvas,
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> None:
    """Write a canvas to a plain PPM file."""
    text = canvas_to_ppm(canvas, tone_map=tone_map, gamma=gamma, exposure=exposure)
    Path(filepath).write_text(text)


def compute_rmse(image_a: npt.ArrayLike, image_b: npt.ArrayLike) -> float:
    """Root mean squared error between two images.

    Raises:
        ValueError: If the shapes differ.
    """
    a = np.asarray(image_a, dtype=np.float64)
    b = np.asarray(image_b, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"Image shapes must match: {a.shape} vs {b.shape}")
    return float(np.sqrt(np.mean((a - b) ** 2)))
