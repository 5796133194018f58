# delivery_sim/domain/state.py
from dataclasses import dataclass, field

from delivery_sim.domain.entities.geography import Point, Road
from delivery_sim.domain.entities.motion import Stroke, Vehicle


@dataclass
class SimulationState:
    origin: Point  # warehouse anchor
    destination: Point  # delivery anchor
    vehicle: Vehicle
    roads: list[Road] = field(default_factory=list)  # append-only, in draw order
    score: int = 0
    stroke: Stroke | None = None
    frame: int = 0

    @property
    def drawing(self) -> bool:
        return self.stroke is not None

    def add_road(self, road: Road) -> None:
        self.roads.append(road)

    def record_arrival(self) -> int:
        self.score += 1
        self.vehicle.reset_to(self.origin)
        return self.score
