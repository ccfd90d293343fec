"""Preview module for output and visualization.

This module turns rendered canvases into something to look at:

Components:
    display: Tone mapping, gamma and the Matplotlib preview window
    export: PNG and PPM export

Features:
    - Tone mapping for overbright renders (Reinhard, exposure-based)
    - Optional gamma encoding
    - 8-bit PNG export via Pillow
    - Plain-text PPM export

Example:
    >>> from whitted.preview import save_png, show_preview
    >>> show_preview(canvas, tone_map="reinhard")
    >>> save_png(canvas, "output.png")
"""

from whitted.preview.display import (
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    show_preview,
    tone_map_exposure,
    tone_map_reinhard,
)
from whitted.preview.export import (
    canvas_to_ppm,
    compute_rmse,
    image_to_uint8,
    save_png,
    save_ppm,
)

__all__ = [
    # Display functions
    "show_preview",
    # Tone mapping
    "tone_map_reinhard",
    "tone_map_exposure",
    "apply_gamma",
    "process_image_for_display",
    "ToneMapMethod",
    # Export functions
    "save_png",
    "save_ppm",
    "canvas_to_ppm",
    "image_to_uint8",
    "compute_rmse",
]
