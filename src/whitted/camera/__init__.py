"""Camera module for view and ray generation.

This module provides the camera model for generating primary rays:

Components:
    pinhole: Pinhole (perspective) camera with fixed-offset supersampling

Camera responsibilities:
    - Size the canvas from pixel counts and field of view
    - Transform pixel coordinates to world-space rays through the view transform
    - Produce 1, 2, 4, 8 or 16 sub-pixel rays for anti-aliasing

Pixel coordinates:
    x in [0, hsize): left to right across the image
    y in [0, vsize): top to bottom down the image
"""

from .pinhole import OFFSETS, AASamples, Camera

__all__ = [
    "AASamples",
    "Camera",
    "OFFSETS",
]
