"""Geometric primitives and pure helpers used throughout the editor."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point(BaseModel):
    """Point on the plan (inches in document space, pixels on the canvas)."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def lerp(self, other: Point, t: float) -> Point:
        return Point(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )


def distance(a: Point, b: Point) -> float:
    return a.distance_to(b)


def line_angle(start: Point, end: Point) -> float:
    """Angle of the line start→end in degrees, measured from +x."""
    return math.degrees(math.atan2(end.y - start.y, end.x - start.x))


def point_at_fraction(start: Point, end: Point, t: float) -> Point:
    """Point at fraction `t` along start→end (0 = start, 1 = end)."""
    return start.lerp(end, t)


def snap_value(value: float, increment: float) -> float:
    """Round to the nearest multiple of `increment`."""
    if increment <= 0:
        return value
    return round(value / increment) * increment


def snap_point(point: Point, increment: float) -> Point:
    # Each axis independently; never snaps diagonally to a grid node.
    return Point(x=snap_value(point.x, increment), y=snap_value(point.y, increment))


def project_fraction(start: Point, end: Point, point: Point) -> float:
    """Fraction along start→end of the closest point to `point`, clamped to [0, 1]."""
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq < 1e-10:
        return 0.0
    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    return max(0.0, min(1.0, t))


def distance_to_segment(start: Point, end: Point, point: Point) -> float:
    t = project_fraction(start, end, point)
    return point.distance_to(point_at_fraction(start, end, t))
