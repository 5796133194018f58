# tests/config/test_models.py
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from delivery_sim.config.models import ScenarioModel, WorldModel
from delivery_sim.runtime.registries import make_path_traverser, make_route_planner


def test_defaults_match_the_sandbox_layout():
    m = ScenarioModel()
    assert m.world.origin == (80.0, 80.0)
    assert m.world.destination == (720.0, 520.0)
    assert m.world.min_drag == 5.0
    assert m.vehicle.speed == 2.0
    assert m.mechanics.graph_builder.snap_threshold == 10.0
    assert m.mechanics.route_planner.kind == "bfs"
    assert m.mechanics.path_traverser.kind == "fixed_step"


def test_explicit_anchors_are_kept():
    w = WorldModel(origin=(1, 2), destination=(3, 4))
    assert w.origin == (1.0, 2.0) and w.destination == (3.0, 4.0)


@pytest.mark.parametrize(
    "patch",
    [
        {"vehicle": {"speed": 0}},
        {"vehicle": {"speed": -1.5}},
        {"vehicle": {"speed": float("nan")}},
        {"vehicle": {"speed": float("inf")}},
        {"world": {"min_drag": -1}},
        {"world": {"width": 0}},
        {"world": {"origin": [float("nan"), 80.0]}},
        {"sim": {"fps": float("inf")}},
        {"sim": {"fps": 0}},
        {"log": {"sample_every": 0}},
        {"mechanics": {"graph_builder": {"kind": "snapping", "snap_threshold": 0}}},
        {"mechanics": {"route_planner": {"kind": "dijkstra"}}},
        {"mechanics": {"path_traverser": {"kind": "fixed_step", "speed": 2}}},
        {"mechanics": {"path_traverser": {"kind": "fixed_step", "tolerance": 1e-9}}},
        {"unexpected": True},
    ],
)
def test_invalid_config_is_rejected(patch):
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(patch)


def test_registries_reject_unknown_kinds():
    with pytest.raises(ValueError, match="route planner"):
        make_route_planner(SimpleNamespace(kind="astar"))
    with pytest.raises(ValueError, match="path traverser"):
        make_path_traverser(SimpleNamespace(kind="teleport"))
