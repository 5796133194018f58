# tests/domain/test_path_finder.py
import pytest

from delivery_sim.domain.entities.geography import Point, Road
from delivery_sim.domain.mechanics.mechanics_graph import build_graph
from delivery_sim.domain.mechanics.mechanics_routers import BfsRouter, path_length

O = Point(0.0, 0.0)
D = Point(100.0, 0.0)
TOP = Point(50.0, 50.0)
BOTTOM = Point(50.0, -50.0)


@pytest.fixture
def router() -> BfsRouter:
    return BfsRouter()


def _positions(path):
    return [n.pos for n in path]


def test_no_roads_means_no_path(router):
    assert router.find_path(build_graph([], O, D)) is None


def test_disconnected_components_return_none(router):
    roads = [Road(O, Point(40.0, 0.0)), Road(Point(60.0, 0.0), D)]  # 20 unit gap
    assert router.find_path(build_graph(roads, O, D)) is None


def test_direct_road(router):
    path = router.find_path(build_graph([Road(O, D)], O, D))
    assert _positions(path) == [O, D]
    assert path_length(path) == pytest.approx(100.0)


def test_coincident_anchors_give_single_node_path(router):
    g = build_graph([], Point(10.0, 10.0), Point(12.0, 11.0))
    path = router.find_path(g)
    assert len(path) == 1
    assert path[0] is g.origin
    assert path_length(path) == 0.0


def test_road_direction_does_not_matter(router):
    path = router.find_path(build_graph([Road(D, TOP), Road(TOP, O)], O, D))
    assert _positions(path) == [O, TOP, D]


def test_tie_break_follows_road_insertion_order(router):
    top = [Road(O, TOP), Road(TOP, D)]
    bottom = [Road(O, BOTTOM), Road(BOTTOM, D)]

    assert _positions(router.find_path(build_graph(top + bottom, O, D))) == [O, TOP, D]
    assert _positions(router.find_path(build_graph(bottom + top, O, D))) == [O, BOTTOM, D]


def test_same_input_same_path_every_run(router):
    roads = [Road(O, TOP), Road(O, BOTTOM), Road(TOP, D), Road(BOTTOM, D)]
    runs = {tuple(_positions(router.find_path(build_graph(roads, O, D)))) for _ in range(20)}
    assert len(runs) == 1


def test_fewest_hops_wins_over_shorter_distance(router):
    far = Point(50.0, 400.0)
    roads = [
        # three short hops along the x axis
        Road(O, Point(30.0, 0.0)),
        Road(Point(30.0, 0.0), Point(60.0, 0.0)),
        Road(Point(60.0, 0.0), D),
        # two long hops via a far detour
        Road(O, far),
        Road(far, D),
    ]
    path = router.find_path(build_graph(roads, O, D))
    assert _positions(path) == [O, far, D]
    assert path_length(path) > 700.0


def test_path_nodes_are_consecutive_neighbors(router):
    roads = [
        Road(O, Point(20.0, 30.0)),
        Road(Point(20.0, 30.0), Point(70.0, 30.0)),
        Road(Point(70.0, 30.0), Point(20.0, 30.0)),
        Road(Point(70.0, 30.0), D),
    ]
    g = build_graph(roads, O, D)
    path = router.find_path(g)
    assert path[0] is g.origin and path[-1] is g.destination
    for a, b in zip(path, path[1:]):
        assert b.id in {nb.id for nb in g.neighbors(a.id)}
