"""Smooth curve and area path construction.

The curve starts at a synthetic lead-in point placed left of the drawing
area and just below its bottom edge, enters the first sample with a fixed
Bezier handle pair, then joins consecutive samples with cubic segments whose
handles follow a Catmull-Rom style tangent ``(p[i+1] - p[i-1]) * smoothness``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .config import ENTRY_HANDLE, LEAD_IN_HANDLE, LayoutParams
from .mapping import map_value_to_y, sample_x
from .utils import fmt_point

MOVE = "M"
CURVE = "C"
LINE = "L"
CLOSE = "Z"


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class PathCommand:
    op: str
    points: Tuple[Point, ...] = ()

    def to_svg(self) -> str:
        if not self.points:
            return self.op
        operands = ", ".join(fmt_point(p.x, p.y) for p in self.points)
        return f"{self.op} {operands}"


@dataclass(frozen=True)
class PathDescriptor:
    """Immutable list of drawing commands, serialisable as an SVG ``d`` string."""

    commands: Tuple[PathCommand, ...] = ()

    def __len__(self) -> int:
        return len(self.commands)

    def __bool__(self) -> bool:
        return bool(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def __str__(self) -> str:
        return self.to_svg()

    def to_svg(self) -> str:
        return " ".join(cmd.to_svg() for cmd in self.commands)

    def extend(self, commands: Iterable[PathCommand]) -> "PathDescriptor":
        return PathDescriptor(self.commands + tuple(commands))

    def points(self) -> List[Point]:
        return [p for cmd in self.commands for p in cmd.points]

    def endpoints(self) -> List[Point]:
        """On-curve points: the last operand of every non-close command."""
        return [cmd.points[-1] for cmd in self.commands if cmd.points]


EMPTY_PATH = PathDescriptor()


def lead_in_point(layout: LayoutParams) -> Point:
    return Point(layout.lead_in_x, layout.lead_in_y)


def sample_points(samples: Sequence[float], layout: LayoutParams) -> List[Point]:
    n = len(samples)
    return [Point(sample_x(i, n, layout), map_value_to_y(v, layout)) for i, v in enumerate(samples)]


def _entry_segment(start: Point, first: Point) -> PathCommand:
    cp1 = Point(start.x + LEAD_IN_HANDLE[0], start.y + LEAD_IN_HANDLE[1])
    cp2 = Point(first.x + ENTRY_HANDLE[0], first.y + ENTRY_HANDLE[1])
    return PathCommand(CURVE, (cp1, cp2, first))


def _interior_segment(
    prev: Point, p0: Point, p1: Point, next2: Point, smoothness: float
) -> PathCommand:
    cp1 = Point(p0.x + (p1.x - prev.x) * smoothness, p0.y + (p1.y - prev.y) * smoothness)
    cp2 = Point(p1.x - (next2.x - p0.x) * smoothness, p1.y - (next2.y - p0.y) * smoothness)
    return PathCommand(CURVE, (cp1, cp2, p1))


def build_smooth_path(samples: Sequence[float], layout: LayoutParams) -> PathDescriptor:
    """Return the curve through every sample, preceded by the lead-in entry."""
    if not len(samples):
        return EMPTY_PATH

    pts = sample_points(samples, layout)
    start = lead_in_point(layout)
    commands = [PathCommand(MOVE, (start,)), _entry_segment(start, pts[0])]

    n = len(pts)
    for i in range(n - 1):
        prev = start if i == 0 else pts[i - 1]
        next2 = pts[i + 1] if i + 2 >= n else pts[i + 2]
        commands.append(_interior_segment(prev, pts[i], pts[i + 1], next2, layout.smoothness))
    return PathDescriptor(tuple(commands))


def build_area_path(samples: Sequence[float], layout: LayoutParams) -> PathDescriptor:
    """Close the curve down to the surface bottom and back to the lead-in x."""
    curve = build_smooth_path(samples, layout)
    if not curve:
        return EMPTY_PATH
    n = len(samples)
    bottom = layout.surface_height
    last_x = sample_x(n - 1, n, layout)
    return curve.extend((
        PathCommand(LINE, (Point(last_x, bottom),)),
        PathCommand(LINE, (Point(layout.lead_in_x, bottom),)),
        PathCommand(CLOSE),
    ))


__all__ = [
    "CLOSE",
    "CURVE",
    "EMPTY_PATH",
    "LINE",
    "MOVE",
    "PathCommand",
    "PathDescriptor",
    "Point",
    "build_area_path",
    "build_smooth_path",
    "lead_in_point",
    "sample_points",
]
