"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.tuples import Color, Tuple4, color, point


@dataclass(frozen=True, eq=False)
class PointLight:
    """An infinitely small light with no size, emitting equally in all directions.

    Attributes:
        position: World-space position (a point).
        intensity: Light color and brightness.
    """

    position: Tuple4
    intensity: Color

    @classmethod
    def at(
        cls,
        x: float,
        y: float,
        z: float,
        rgb: tuple[float, float, float] = (1.0, 1.0, 1.0),
    ) -> PointLight:
        """Convenience constructor from plain coordinates and an RGB tuple."""
        return cls(point(x, y, z), color(*rgb))
