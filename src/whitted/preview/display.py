"""Matplotlib-based preview of rendered canvases.

The renderer writes linear float colors that may exceed 1.0 where several
highlights and reflections add up. Before display (or export) they go
through an optional tone-mapping step and a gamma step, then are clamped
to [0, 1].

Features:
    - Tone mapping (Reinhard, exposure-based) for overbright renders
    - Gamma correction
    - A blocking or non-blocking preview window

matplotlib is an optional dependency (the `preview` extra) and is only
imported when a window is actually shown.

Example:
    >>> from whitted.preview.display import show_preview
    >>> show_preview(canvas, tone_map="reinhard")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from whitted.core.canvas import Canvas


# Type alias for tone mapping options
ToneMapMethod = Literal["none", "reinhard", "exposure"]

FloatImage = npt.NDArray[np.float64]


def tone_map_reinhard(image: FloatImage) -> FloatImage:
    """Reinhard operator c / (1 + c), applied per channel.

    Args:
        image: Linear image of shape (H, W, 3).

    Returns:
        Image with every channel in [0, 1).
    """
    image = np.maximum(image, 0.0)
    return image / (1.0 + image)


def tone_map_exposure(image: FloatImage, exposure: float = 1.0) -> FloatImage:
    """Exposure operator 1 - exp(-c * exposure).

    Args:
        image: Linear image of shape (H, W, 3).
        exposure: Brightness multiplier applied before the curve.
    """
    image = np.maximum(image, 0.0)
    return 1.0 - np.exp(-image * exposure)


def apply_gamma(image: FloatImage, gamma: float = 1.0) -> FloatImage:
    """Encode an image with out = in ^ (1 / gamma).

    The image is clamped to [0, 1] first. A gamma of 1.0 returns the image
    unchanged.
    """
    if gamma == 1.0:
        return image
    if gamma <= 0.0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    return np.power(np.clip(image, 0.0, 1.0), 1.0 / gamma)


def process_image_for_display(
    image: npt.ArrayLike,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> FloatImage:
    """Run the display pipeline: tone map, gamma, clamp.

    Args:
        image: Linear image of shape (H, W, 3).
        tone_map: "none", "reinhard" or "exposure".
        gamma: Gamma encoding value. Shading is authored for direct output,
            so the default leaves colors as they are.
        exposure: Exposure for the "exposure" tone map.

    Returns:
        A new float64 image in [0, 1].

    Raises:
        ValueError: For an unknown tone mapping method.
    """
    result = np.array(image, dtype=np.float64)

    if tone_map == "reinhard":
        result = tone_map_reinhard(result)
    elif tone_map == "exposure":
        result = tone_map_exposure(result, exposure)
    elif tone_map != "none":
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    result = apply_gamma(result, gamma)
    return np.clip(result, 0.0, 1.0)


def show_preview(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Show a rendered canvas in a Matplotlib window.

    Args:
        canvas: The rendered canvas.
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma encoding value.
        exposure: Exposure for the "exposure" tone map.
        title: Window title; defaults to the canvas size.
        figsize: Figure size in inches (width, height).
        block: Whether to block until the window is closed.
    """
    import matplotlib.pyplot as plt

    display_image = process_image_for_display(
        canvas.pixels,
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")

    if title is None:
        title = f"Render Preview - {canvas.width}x{canvas.height}"
        if tone_map != "none":
            title += f" ({tone_map})"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
