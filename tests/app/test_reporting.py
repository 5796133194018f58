# tests/app/test_reporting.py
import logging

import pytest

from delivery_sim.app.build import build
from delivery_sim.io.business_events import (
    DeliveryCompletedBiz,
    RoadDrawnBiz,
    RouteChangedBiz,
)
from delivery_sim.io.recorder import MemorySink, Recorder


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


def _app(sink):
    cfg = {
        "run_id": "r-1",
        "sim": {"fps": 50},
        "world": {"origin": (0.0, 0.0), "destination": (100.0, 0.0)},
        "vehicle": {"speed": 2.0},
    }
    return build(cfg, use_logging=False, recorder=Recorder(sink))


def test_delivery_lifecycle_is_recorded(sink):
    app = _app(sink)
    app.draw_road(0.0, 0.0, 100.0, 0.0)
    app.run(50)

    names = [ev.name for ev in sink.events]
    assert names == ["RoadDrawn", "RouteChanged", "DeliveryCompleted"]

    road, route, done = sink.events
    assert isinstance(road, RoadDrawnBiz)
    assert road.t == 0 and road.road_index == 0 and road.length == pytest.approx(100.0)

    assert isinstance(route, RouteChangedBiz)
    assert route.available and route.hops == 1 and route.eta_ticks == 50

    assert isinstance(done, DeliveryCompletedBiz)
    assert done.run_id == "r-1"
    assert done.score == 1
    assert done.t == 50 and done.elapsed_s == pytest.approx(1.0)


def test_route_loss_reported_once(sink):
    app = _app(sink)
    app.run(10)
    routes = [ev for ev in sink.events if ev.name == "RouteChanged"]
    assert len(routes) == 1
    assert routes[0].available is False and routes[0].eta_ticks is None


def test_clicks_are_not_recorded(sink):
    app = _app(sink)
    app.draw_road(10.0, 10.0, 12.0, 12.0)
    assert sink.events == []


class _BrokenSink:
    def write(self, ev):
        raise OSError("disk full")


def test_failing_sink_does_not_break_the_sim(sink, caplog):
    app = build(
        {"world": {"origin": (0.0, 0.0), "destination": (100.0, 0.0)}},
        use_logging=False,
        recorder=Recorder(_BrokenSink(), sink),
    )
    with caplog.at_level(logging.ERROR, logger="delivery_sim.io.recorder"):
        app.draw_road(0.0, 0.0, 100.0, 0.0)
        app.run(50)

    assert app.state.score == 1
    assert [ev.name for ev in sink.events][-1] == "DeliveryCompleted"
    assert any("_BrokenSink" in r.getMessage() for r in caplog.records)
