# delivery_sim/app/controllers/vehicle.py
from delivery_sim.app.events import DeliveryCompleted, RouteChanged, Tick
from delivery_sim.domain.entities.geography import Node
from delivery_sim.domain.mechanics.mechanics_core import Mechanics
from delivery_sim.domain.mechanics.mechanics_routers import path_length
from delivery_sim.domain.state import SimulationState


class VehicleHandler:
    def __init__(self, state: SimulationState, mechanics: Mechanics):
        self.state = state
        self.mechanics = mechanics
        self._had_route: bool | None = None

    def on_tick(self, ev: Tick):
        s = self.state
        # full rebuild every tick: node ids from the previous frame are meaningless now
        path = self.mechanics.route(s.roads, s.origin, s.destination)
        s.vehicle.path = path

        out = self._route_transition(ev, path)

        if self.mechanics.step(s.vehicle, path):
            score = s.record_arrival()
            out.append(DeliveryCompleted(t=ev.t, score=score, frame=ev.frame))
        return out

    def _route_transition(self, ev: Tick, path: list[Node] | None) -> list:
        available = path is not None
        if available == self._had_route:
            return []
        self._had_route = available
        if not available:
            return [RouteChanged(t=ev.t, available=False)]
        return [
            RouteChanged(
                t=ev.t,
                available=True,
                hops=len(path) - 1,
                length=path_length(path),
                eta_ticks=self.mechanics.path_traverser.ticks_to_traverse(
                    path, self.state.vehicle.speed
                ),
            )
        ]
