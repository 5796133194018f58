from delivery_sim.domain.entities.geography import Node, Point, distance

SNAP_THRESHOLD = 10.0


def get_or_create_node(p: Point, nodes: list[Node], threshold: float = SNAP_THRESHOLD) -> Node:
    """
    Return the first node in `nodes` closer than `threshold` to `p`, else append a new one.

    `nodes` must be the list of the build in progress: the first node registered at a
    location is the canonical one, so merge results depend on registration order.
    """
    for node in nodes:
        if distance(node.pos, p) < threshold:
            return node
    node = Node(id=len(nodes), pos=p)
    nodes.append(node)
    return node
