from dataclasses import dataclass

from delivery_sim.domain.entities.geography import Node, Point

Pt = Point | tuple[float, float]


def to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


@dataclass
class Stroke:
    """An in-progress draw gesture: where the pointer went down and where it is now."""

    start: Point
    cursor: Point


@dataclass
class Vehicle:
    pos: Point
    speed: float  # distance units per tick
    path: list[Node] | None = None
    seg_index: int = 0
    progress: float = 0.0  # fraction of the current segment, in [0, 1)
    seg_ticks: int = 0  # ticks spent on the current segment

    def reset_to(self, origin: Point) -> None:
        self.pos = origin
        self.start_segment(0)

    def start_segment(self, index: int) -> None:
        self.seg_index = index
        self.seg_ticks = 0
        self.progress = 0.0
