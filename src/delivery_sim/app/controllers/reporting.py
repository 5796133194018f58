# delivery_sim/app/controllers/reporting.py
from delivery_sim.app.events import DeliveryCompleted, RoadAdded, RouteChanged
from delivery_sim.io.business_events import DeliveryCompletedBiz, RoadDrawnBiz, RouteChangedBiz
from delivery_sim.io.recorder import Recorder
from delivery_sim.sim.clock import FrameClock


class ReportingHandler:
    """Mirrors domain events into analytics records. Never feeds back into the sim."""

    def __init__(self, recorder: Recorder, clock: FrameClock, run_id: str = "local"):
        self.recorder = recorder
        self.clock = clock
        self.run_id = run_id

    def _base(self, ev, name: str) -> dict:
        return {
            "run_id": self.run_id,
            "t": ev.t,
            "elapsed_s": self.clock.to_seconds(ev.t),
            "name": name,
        }

    def on_road_added(self, ev: RoadAdded):
        self.recorder.emit(
            RoadDrawnBiz(
                **self._base(ev, "RoadDrawn"),
                road_index=ev.road_index,
                start=(ev.start.x, ev.start.y),
                end=(ev.end.x, ev.end.y),
                length=ev.length,
            )
        )

    def on_route_changed(self, ev: RouteChanged):
        self.recorder.emit(
            RouteChangedBiz(
                **self._base(ev, "RouteChanged"),
                available=ev.available,
                hops=ev.hops,
                length=ev.length,
                eta_ticks=ev.eta_ticks,
            )
        )

    def on_delivery_completed(self, ev: DeliveryCompleted):
        self.recorder.emit(
            DeliveryCompletedBiz(**self._base(ev, "DeliveryCompleted"), score=ev.score)
        )
