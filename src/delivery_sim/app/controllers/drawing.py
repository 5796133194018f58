# delivery_sim/app/controllers/drawing.py
from delivery_sim.app.events import PointerDown, PointerMove, PointerUp, RoadAdded
from delivery_sim.domain.entities.geography import Road, distance
from delivery_sim.domain.entities.motion import Stroke
from delivery_sim.domain.state import SimulationState


class DrawingHandler:
    """Turns pointer gestures into roads. Drags no longer than `min_drag` count as clicks."""

    def __init__(self, state: SimulationState, min_drag: float = 5.0):
        self.state = state
        self.min_drag = min_drag

    def on_pointer_down(self, ev: PointerDown):
        self.state.stroke = Stroke(start=ev.pos, cursor=ev.pos)
        return []

    def on_pointer_move(self, ev: PointerMove):
        if self.state.stroke is not None:
            self.state.stroke.cursor = ev.pos
        return []

    def on_pointer_up(self, ev: PointerUp):
        stroke = self.state.stroke
        if stroke is None:
            return []
        self.state.stroke = None

        length = distance(stroke.start, ev.pos)
        if length <= self.min_drag:
            return []

        road = Road(start=stroke.start, end=ev.pos)
        self.state.add_road(road)
        return [
            RoadAdded(
                t=ev.t,
                road_index=len(self.state.roads) - 1,
                start=road.start,
                end=road.end,
                length=road.length,
            )
        ]
