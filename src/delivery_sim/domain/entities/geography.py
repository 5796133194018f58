import math
from dataclasses import dataclass


# Core geometry types used by mechanics
@dataclass(frozen=True)
class Point:
    x: float  # drawing-surface units (pixels)
    y: float


@dataclass(frozen=True)
class Road:
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return distance(self.start, self.end)


@dataclass(frozen=True)
class Node:
    id: int  # unique within one graph build only
    pos: Point


@dataclass(frozen=True)
class Neighbor:
    id: int
    dist: float


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def lerp(a: Point, b: Point, f: float) -> Point:
    return Point(a.x + f * (b.x - a.x), a.y + f * (b.y - a.y))
