# delivery_sim/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from delivery_sim.app.controllers.drawing import DrawingHandler
from delivery_sim.app.controllers.reporting import ReportingHandler
from delivery_sim.app.controllers.vehicle import VehicleHandler
from delivery_sim.app.events import PointerDown, PointerMove, PointerUp, Tick
from delivery_sim.app.snapshot import DrawableState, build_snapshot
from delivery_sim.app.wiring import wire
from delivery_sim.config.models import ScenarioModel
from delivery_sim.domain.entities.geography import Point
from delivery_sim.domain.entities.motion import Vehicle, to_point
from delivery_sim.domain.mechanics.mechanics_core import Mechanics
from delivery_sim.domain.mechanics.mechanics_factory import build_mechanics
from delivery_sim.domain.state import SimulationState
from delivery_sim.io.kernel_logging import KernelLogging  # JSON logs
from delivery_sim.io.recorder import JsonlSink, MemorySink, Recorder
from delivery_sim.sim.clock import FrameClock
from delivery_sim.sim.hooks import NoopHooks
from delivery_sim.sim.kernel import Kernel


@dataclass
class App:
    kernel: Kernel
    clock: FrameClock
    state: SimulationState
    mechanics: Mechanics
    drawing: DrawingHandler
    vehicle: VehicleHandler
    reporting: ReportingHandler
    recorder: Recorder

    # ---- clock / scheduler

    def tick(self) -> None:
        """Advance one frame: rebuild the graph, re-route and move the vehicle."""
        self.state.frame += 1
        f = self.state.frame
        self.kernel.schedule(Tick(t=f, frame=f))
        self.kernel.run(until=f)

    def run(self, n: int) -> int:
        for _ in range(n):
            self.tick()
        return self.state.score

    # ---- renderer

    def snapshot(self) -> DrawableState:
        return build_snapshot(self.state)

    # ---- input source (applied immediately, before the next tick)

    def _input(self, ev) -> None:
        self.kernel.schedule(ev)
        self.kernel.run(until=self.state.frame)

    def pointer_down(self, x: float, y: float) -> None:
        self._input(PointerDown(t=self.state.frame, pos=Point(x, y)))

    def pointer_move(self, x: float, y: float) -> None:
        self._input(PointerMove(t=self.state.frame, pos=Point(x, y)))

    def pointer_up(self, x: float, y: float) -> None:
        self._input(PointerUp(t=self.state.frame, pos=Point(x, y)))

    def draw_road(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Full drag gesture from (x1, y1) to (x2, y2)."""
        self.pointer_down(x1, y1)
        self.pointer_move(x2, y2)
        self.pointer_up(x2, y2)


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Clock
    clock = FrameClock(fps=model.sim.fps)

    # 2) Kernel (with hooks)

    # Recorder for analytics
    if recorder is None:
        recorder = Recorder(JsonlSink()) if use_logging else Recorder(MemorySink())

    hooks = (
        KernelLogging(
            run_id=model.run_id,
            clock=clock,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=hooks)

    # 3) State & mechanics
    origin = to_point(model.world.origin)
    destination = to_point(model.world.destination)
    state = SimulationState(
        origin=origin,
        destination=destination,
        vehicle=Vehicle(pos=origin, speed=model.vehicle.speed),
    )
    mechanics = build_mechanics(model.mechanics)

    # 4) Handlers (inject deps explicitly)
    drawing = DrawingHandler(state=state, min_drag=model.world.min_drag)
    vehicle = VehicleHandler(state=state, mechanics=mechanics)
    reporting = ReportingHandler(recorder=recorder, clock=clock, run_id=model.run_id)

    # 5) Wiring
    wire(kernel, drawing=drawing, vehicle=vehicle, reporting=reporting)

    return App(kernel, clock, state, mechanics, drawing, vehicle, reporting, recorder)
