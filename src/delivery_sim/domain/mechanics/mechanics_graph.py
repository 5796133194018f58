from collections.abc import Sequence

from delivery_sim.app.protocols import GraphBuilder
from delivery_sim.domain.entities.geography import Point, Road
from delivery_sim.domain.entities.network import RoadGraph
from delivery_sim.domain.mechanics.mechanics_snapping import SNAP_THRESHOLD, get_or_create_node


class SnappingGraphBuilder(GraphBuilder):
    def __init__(self, snap_threshold: float = SNAP_THRESHOLD):
        self.snap_threshold = snap_threshold

    def _node(self, g: RoadGraph, p: Point):
        return g.register(get_or_create_node(p, g.nodes, self.snap_threshold))

    def build(self, roads: Sequence[Road], origin: Point, destination: Point) -> RoadGraph:
        g = RoadGraph()
        # anchors first so they exist with zero roads and win merges at their location
        g.origin = self._node(g, origin)
        g.destination = self._node(g, destination)
        for r in roads:
            a = self._node(g, r.start)
            b = self._node(g, r.end)
            g.add_edge(a, b)
        return g


def build_graph(
    roads: Sequence[Road],
    origin: Point,
    destination: Point,
    snap_threshold: float = SNAP_THRESHOLD,
) -> RoadGraph:
    return SnappingGraphBuilder(snap_threshold).build(roads, origin, destination)
