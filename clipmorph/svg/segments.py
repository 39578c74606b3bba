"""Path segment types — Line, QuadraticBezier, CubicBezier.

Each segment carries its length, computed once at construction: exact for
lines, a fixed-step chord-length approximation for curves.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from clipmorph.utils.math_helpers import lerp

Point = tuple[float, float]

# Chord-length subdivisions used for Bezier length estimates.
DEFAULT_BEZIER_STEPS = 20


def quadratic_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate a quadratic Bezier at t."""
    mt = 1 - t
    x = mt * mt * p0[0] + 2 * mt * t * p1[0] + t * t * p2[0]
    y = mt * mt * p0[1] + 2 * mt * t * p1[1] + t * t * p2[1]
    return (x, y)


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate a cubic Bezier at t."""
    mt = 1 - t
    a = mt * mt * mt
    b = 3 * mt * mt * t
    c = 3 * mt * t * t
    d = t * t * t
    x = a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0]
    y = a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1]
    return (x, y)


def chord_length(evaluate, start: Point, steps: int) -> float:
    """Sum of chord lengths of a curve evaluated at `steps` even t-values."""
    length = 0.0
    prev = start
    for i in range(1, steps + 1):
        pt = evaluate(i / steps)
        length += math.hypot(pt[0] - prev[0], pt[1] - prev[1])
        prev = pt
    return length


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    length: float = field(init=False)

    def __post_init__(self) -> None:
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        object.__setattr__(self, "length", math.hypot(dx, dy))

    def point(self, t: float) -> Point:
        return (lerp(self.start[0], self.end[0], t), lerp(self.start[1], self.end[1], t))

    @property
    def end_point(self) -> Point:
        return self.end


@dataclass(frozen=True)
class QuadraticBezier:
    p0: Point
    p1: Point
    p2: Point
    steps: int = DEFAULT_BEZIER_STEPS
    length: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", chord_length(self.point, self.p0, self.steps))

    def point(self, t: float) -> Point:
        return quadratic_point(self.p0, self.p1, self.p2, t)

    @property
    def end_point(self) -> Point:
        return self.p2


@dataclass(frozen=True)
class CubicBezier:
    p0: Point
    p1: Point
    p2: Point
    p3: Point
    steps: int = DEFAULT_BEZIER_STEPS
    length: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", chord_length(self.point, self.p0, self.steps))

    def point(self, t: float) -> Point:
        return cubic_point(self.p0, self.p1, self.p2, self.p3, t)

    @property
    def end_point(self) -> Point:
        return self.p3


Segment = Union[Line, QuadraticBezier, CubicBezier]


@dataclass(frozen=True)
class PathShape:
    """Parsed path: ordered segments plus the bookkeeping the sampler needs."""

    segments: tuple[Segment, ...] = ()
    start_point: Point = (0.0, 0.0)
    # Command letters the parser ignored, in source order
    skipped_commands: tuple[str, ...] = ()

    @property
    def total_length(self) -> float:
        return sum(seg.length for seg in self.segments)

    @property
    def is_degenerate(self) -> bool:
        return self.total_length <= 0
