from collections import deque

from delivery_sim.app.protocols import RoutePlanner
from delivery_sim.domain.entities.geography import Node, distance
from delivery_sim.domain.entities.network import RoadGraph


class BfsRouter(RoutePlanner):
    """
    Fewest-hops route over the road graph.

    Ties between equal-hop routes go to the first one discovered: FIFO expansion
    over adjacency lists kept in road insertion order. Edge distances are ignored.
    """

    def find_path(self, graph: RoadGraph) -> list[Node] | None:
        start, goal = graph.origin.id, graph.destination.id
        queue = deque([start])
        came_from: dict[int, int | None] = {start: None}

        while queue:
            current = queue.popleft()
            if current == goal:
                return self._reconstruct(graph, came_from, current)
            for nb in graph.neighbors(current):
                if nb.id not in came_from:
                    came_from[nb.id] = current
                    queue.append(nb.id)
        return None

    @staticmethod
    def _reconstruct(graph: RoadGraph, came_from: dict[int, int | None], end: int) -> list[Node]:
        path = []
        cur: int | None = end
        while cur is not None:
            path.append(graph.node(cur))
            cur = came_from[cur]
        path.reverse()
        return path


def path_length(path: list[Node] | None) -> float:
    if not path:
        return 0.0
    return sum(distance(a.pos, b.pos) for a, b in zip(path, path[1:]))
