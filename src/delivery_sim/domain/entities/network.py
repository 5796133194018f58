from dataclasses import dataclass, field

from delivery_sim.domain.entities.geography import Neighbor, Node, distance


@dataclass
class RoadGraph:
    """
    Node arena plus undirected adjacency lists for one build.
    Node ids index into `nodes`; they mean nothing outside this instance.
    """

    nodes: list[Node] = field(default_factory=list)
    adj: dict[int, list[Neighbor]] = field(default_factory=dict)
    origin: Node | None = None
    destination: Node | None = None

    def register(self, node: Node) -> Node:
        # every known node gets an adjacency entry, even before it has edges
        self.adj.setdefault(node.id, [])
        return node

    def add_edge(self, a: Node, b: Node) -> float:
        d = distance(a.pos, b.pos)
        self.adj.setdefault(a.id, []).append(Neighbor(b.id, d))
        self.adj.setdefault(b.id, []).append(Neighbor(a.id, d))
        return d

    def node(self, node_id: int) -> Node:
        return self.nodes[node_id]

    def neighbors(self, node_id: int) -> list[Neighbor]:
        return self.adj.get(node_id, [])
