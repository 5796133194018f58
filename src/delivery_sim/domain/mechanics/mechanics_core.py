# delivery_sim/domain/mechanics/mechanics_core.py
from collections.abc import Sequence
from dataclasses import dataclass

from delivery_sim.app.protocols import (
    GraphBuilder,
    Mechanics,
    PathTraverser,
    RoutePlanner,
)
from delivery_sim.domain.entities.geography import Node, Point, Road
from delivery_sim.domain.entities.motion import Vehicle
from delivery_sim.domain.entities.network import RoadGraph


@dataclass
class Mechanics(Mechanics):
    graph_builder: GraphBuilder
    route_planner: RoutePlanner
    path_traverser: PathTraverser

    def graph(self, roads: Sequence[Road], origin: Point, destination: Point) -> RoadGraph:
        return self.graph_builder.build(roads, origin, destination)

    def route(self, roads: Sequence[Road], origin: Point, destination: Point) -> list[Node] | None:
        return self.route_planner.find_path(self.graph(roads, origin, destination))

    def step(self, vehicle: Vehicle, path: list[Node] | None) -> bool:
        return self.path_traverser.advance(vehicle, path)
