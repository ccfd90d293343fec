"""Procedural color patterns.

A pattern maps a point in pattern space to a color. Pattern space is reached
from object space through the pattern's own transform, so a pattern can be
scaled or rotated independently of the shape it decorates.

Supported kinds:
    - STRIPE: alternates a/b on integer steps of x
    - GRADIENT: blends a -> b across each unit of x
    - RING: alternates a/b on concentric rings in the xz plane
    - CHECKERS: alternates a/b on unit cubes
    - TEST: returns the pattern-space point itself as a color

Example:
    >>> from whitted.core.matrix import scaling
    >>> from whitted.core.tuples import black, point, white
    >>> from whitted.materials.pattern import pattern_at_object, stripe_pattern
    >>> stripes = stripe_pattern(white(), black(), transform=scaling(0.5, 1.0, 1.0))
    >>> pattern_at_object(stripes, point(0.75, 0.0, 0.0))  # black
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from whitted.core.matrix import IDENTITY, Matrix, Transform
from whitted.core.tuples import Color, Tuple4, black, color, white


class PatternKind(IntEnum):
    """Enumeration of supported pattern kinds, used for pattern dispatch."""

    TEST = 0
    STRIPE = 1
    GRADIENT = 2
    RING = 3
    CHECKERS = 4


@dataclass(frozen=True, eq=False)
class Pattern:
    """An immutable two-color procedural pattern.

    Attributes:
        kind: Which pattern function to evaluate.
        a: First color.
        b: Second color.
        transform: Object-to-pattern placement of the pattern.
    """

    kind: PatternKind
    a: Color = field(default_factory=white)
    b: Color = field(default_factory=black)
    transform: Transform = IDENTITY


def _make(kind: PatternKind, a: Color, b: Color, transform: Matrix | None) -> Pattern:
    return Pattern(
        kind=kind,
        a=a,
        b=b,
        transform=IDENTITY if transform is None else Transform.of(transform),
    )


def stripe_pattern(a: Color, b: Color, transform: Matrix | None = None) -> Pattern:
    return _make(PatternKind.STRIPE, a, b, transform)


def gradient_pattern(a: Color, b: Color, transform: Matrix | None = None) -> Pattern:
    return _make(PatternKind.GRADIENT, a, b, transform)


def ring_pattern(a: Color, b: Color, transform: Matrix | None = None) -> Pattern:
    return _make(PatternKind.RING, a, b, transform)


def checkers_pattern(a: Color, b: Color, transform: Matrix | None = None) -> Pattern:
    return _make(PatternKind.CHECKERS, a, b, transform)


def coordinate_pattern(transform: Matrix | None = None) -> Pattern:
    """Pattern whose color is the pattern-space point itself."""
    return _make(PatternKind.TEST, white(), black(), transform)


def pattern_at(pattern: Pattern, p: Tuple4) -> Color:
    """Evaluate a pattern at a point already in pattern space."""
    kind = pattern.kind
    if kind == PatternKind.STRIPE:
        return pattern.a if math.floor(p[0]) % 2 == 0 else pattern.b
    elif kind == PatternKind.GRADIENT:
        fraction = p[0] - math.floor(p[0])
        return pattern.a + (pattern.b - pattern.a) * fraction
    elif kind == PatternKind.RING:
        distance = math.floor(math.sqrt(p[0] * p[0] + p[2] * p[2]))
        return pattern.a if distance % 2 == 0 else pattern.b
    elif kind == PatternKind.CHECKERS:
        total = math.floor(p[0]) + math.floor(p[1]) + math.floor(p[2])
        return pattern.a if total % 2 == 0 else pattern.b
    elif kind == PatternKind.TEST:
        return color(p[0], p[1], p[2])
    raise ValueError(f"Unknown pattern kind: {kind}")


def pattern_at_object(pattern: Pattern, object_point: Tuple4) -> Color:
    """Evaluate a pattern at a point given in the decorated shape's object space."""
    return pattern_at(pattern, pattern.transform.inverse @ object_point)
