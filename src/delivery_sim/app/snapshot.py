# delivery_sim/app/snapshot.py
from dataclasses import dataclass

from delivery_sim.domain.entities.geography import Point, Road
from delivery_sim.domain.state import SimulationState


@dataclass(frozen=True)
class DrawableState:
    """Everything a renderer needs for one frame. Nothing is read back from the renderer."""

    frame: int
    roads: tuple[Road, ...]
    stroke: tuple[Point, Point] | None  # (start, cursor) of the gesture in progress
    origin: Point
    destination: Point
    vehicle: Point
    path: tuple[Point, ...] | None
    score: int


def build_snapshot(state: SimulationState) -> DrawableState:
    v = state.vehicle
    return DrawableState(
        frame=state.frame,
        roads=tuple(state.roads),
        stroke=(state.stroke.start, state.stroke.cursor) if state.drawing else None,
        origin=state.origin,
        destination=state.destination,
        vehicle=v.pos,
        path=tuple(n.pos for n in v.path) if v.path is not None else None,
        score=state.score,
    )
