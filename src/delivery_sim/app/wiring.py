# delivery_sim/app/wiring.py
from delivery_sim.app.controllers.drawing import DrawingHandler
from delivery_sim.app.controllers.reporting import ReportingHandler
from delivery_sim.app.controllers.vehicle import VehicleHandler
from delivery_sim.app.events import (
    DeliveryCompleted,
    PointerDown,
    PointerMove,
    PointerUp,
    RoadAdded,
    RouteChanged,
    Tick,
)
from delivery_sim.sim.kernel import Kernel


def wire(
    kernel: Kernel,
    *,
    drawing: DrawingHandler,
    vehicle: VehicleHandler,
    reporting: ReportingHandler | None = None,
) -> None:
    k = kernel

    # input
    k.on(PointerDown, drawing.on_pointer_down)
    k.on(PointerMove, drawing.on_pointer_move)
    k.on(PointerUp, drawing.on_pointer_up)  # may emit RoadAdded

    # clock: rebuild graph, route, advance; may emit RouteChanged / DeliveryCompleted
    k.on(Tick, vehicle.on_tick)

    # analytics
    if reporting:
        k.on(RoadAdded, reporting.on_road_added)
        k.on(RouteChanged, reporting.on_route_changed)
        k.on(DeliveryCompleted, reporting.on_delivery_completed)
