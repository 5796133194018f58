from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from delivery_sim.domain.entities.geography import Node, Point, Road
from delivery_sim.domain.entities.motion import Vehicle
from delivery_sim.domain.entities.network import RoadGraph


# ------------- Mechanics --------------------
@runtime_checkable
class GraphBuilder(Protocol):
    """
    Responsibilities:
      • Snap road endpoints and anchors into shared nodes.
      • Produce a fresh node/adjacency graph from the current road list.
    Anchors are always registered before any road, every build.
    """

    snap_threshold: float

    def build(self, roads: Sequence[Road], origin: Point, destination: Point) -> RoadGraph: ...


@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Return the node sequence from graph.origin to graph.destination.
      • Return None when the two anchors are not connected.
    """

    def find_path(self, graph: RoadGraph) -> list[Node] | None: ...


@runtime_checkable
class PathTraverser(Protocol):
    """
    Advance a vehicle one tick along a path.
    Returns True when the vehicle reached the last node on this tick.
    Must never index past the end of the path or produce a non-finite position.
    """

    def advance(self, vehicle: Vehicle, path: list[Node] | None) -> bool: ...
    def ticks_to_traverse(self, path: list[Node] | None, speed: float) -> int | None:
        """Ticks needed to run the whole path from its head; None when there is no path."""


@runtime_checkable
class Mechanics(Protocol):
    """
    Convenience façade bundling the core mechanics components.
    Provides common helpers so call sites don’t need to juggle pieces.
    """

    graph_builder: GraphBuilder
    route_planner: RoutePlanner
    path_traverser: PathTraverser

    def graph(self, roads: Sequence[Road], origin: Point, destination: Point) -> RoadGraph: ...

    def route(
        self, roads: Sequence[Road], origin: Point, destination: Point
    ) -> list[Node] | None: ...

    def step(self, vehicle: Vehicle, path: list[Node] | None) -> bool: ...
