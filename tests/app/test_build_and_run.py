# tests/app/test_build_and_run.py
import pytest
from pydantic import ValidationError

import main
from delivery_sim.app.build import build
from delivery_sim.config.models import ScenarioModel
from delivery_sim.domain.mechanics.mechanics_graph import SnappingGraphBuilder
from delivery_sim.domain.mechanics.mechanics_path_traversers import FixedStepTraverser
from delivery_sim.domain.mechanics.mechanics_routers import BfsRouter


def test_build_runs():
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "sim": {"fps": 30},
        "world": {"width": 640, "height": 480},
        "vehicle": {"speed": 3.0},
        "mechanics": {
            "graph_builder": {"kind": "snapping", "snap_threshold": 12.0},
            "route_planner": {"kind": "bfs"},
            "path_traverser": {"kind": "fixed_step"},
        },
    }
    app = build(cfg, use_logging=False)
    app.run(120)  # four seconds at 30 fps

    assert app.state.frame == 120
    assert app.kernel.now == 120
    assert app.kernel.pending == 0
    assert app.clock.to_seconds(app.state.frame) == 4.0


def test_build_wires_configured_mechanics():
    app = build(
        ScenarioModel.model_validate(
            {"mechanics": {"graph_builder": {"kind": "snapping", "snap_threshold": 4.0}}}
        ),
        use_logging=False,
    )
    m = app.mechanics
    assert isinstance(m.graph_builder, SnappingGraphBuilder)
    assert m.graph_builder.snap_threshold == 4.0
    assert isinstance(m.route_planner, BfsRouter)
    assert isinstance(m.path_traverser, FixedStepTraverser)


def test_default_anchors_follow_world_size():
    app = build({"world": {"width": 640, "height": 480}}, use_logging=False)
    snap = app.snapshot()
    assert (snap.origin.x, snap.origin.y) == (80.0, 80.0)
    assert (snap.destination.x, snap.destination.y) == (560.0, 400.0)
    assert snap.vehicle == snap.origin


def test_build_with_logging_enabled(capsys):
    app = build({"run_id": "log-1"})
    app.draw_road(80, 80, 720, 520)
    app.run(3)
    out = capsys.readouterr().out
    assert '"RoadDrawn"' in out  # analytics record on stdout
    assert app.state.frame == 3


@pytest.mark.parametrize("speed", [float("nan"), float("inf")])
def test_build_rejects_non_finite_speed(speed):
    with pytest.raises(ValidationError, match="speed"):
        build({"vehicle": {"speed": speed}}, use_logging=False)


def test_tiny_speed_tick_reports_eta_without_stepping_through_it():
    speed = 2.0**-20
    world = {"origin": (0.0, 0.0), "destination": (800.0, 0.0)}
    app = build({"world": world, "vehicle": {"speed": speed}}, use_logging=False)
    app.draw_road(0, 0, 800, 0)
    app.tick()

    (change,) = [e for e in app.recorder.sinks[0].events if e.name == "RouteChanged"]
    assert change.eta_ticks == 800 * 2**20
    assert app.snapshot().vehicle.x == pytest.approx(speed)


def test_demo_script_runs_for_the_requested_duration():
    snap = main.run(seconds=1.5)
    assert snap.frame == 90  # 1.5 s at the default 60 fps
    assert len(snap.roads) == 2  # the click added nothing
    assert snap.path is not None and len(snap.path) == 3
