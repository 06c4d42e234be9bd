"""Closest pair of points in the plane by divide and conquer."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


def _as_point(value: Point | Sequence[float]) -> Point:
    return value if isinstance(value, Point) else Point(*value)


def distance(first: Point | Sequence[float], second: Point | Sequence[float]) -> float:
    """Return the Euclidean distance between two points."""
    a, b = _as_point(first), _as_point(second)
    return math.sqrt((a.x - b.x) * (a.x - b.x) + (a.y - b.y) * (a.y - b.y))


def _strip_closest(strip: list[Point], best: float) -> float:
    strip.sort(key=lambda p: p.y)
    for i, lower in enumerate(strip):
        for upper in strip[i + 1 :]:
            if upper.y - lower.y >= best:
                break
            best = min(best, distance(lower, upper))
    return best


def _closest(points: list[Point], left: int, right: int) -> float:
    if right - left <= 2:
        chunk = points[left:right]
        return min(
            (distance(a, b) for i, a in enumerate(chunk) for b in chunk[i + 1 :]),
            default=math.inf,
        )

    mid = (left + right) // 2
    mid_x = points[mid].x
    best = min(_closest(points, left, mid), _closest(points, mid, right))
    strip = [p for p in points[left:right] if abs(p.x - mid_x) < best]
    return min(best, _strip_closest(strip, best))


def closest_pair_distance(points: Iterable[Point | Sequence[float]]) -> float:
    """Return the smallest distance between any two of the given points."""
    ordered = sorted((_as_point(p) for p in points), key=lambda p: p.x)
    if len(ordered) < 2:
        raise ValueError("at least two points are needed")
    return _closest(ordered, 0, len(ordered))