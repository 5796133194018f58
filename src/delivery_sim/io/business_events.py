# delivery_sim/io/business_events.py

from dataclasses import dataclass


# Base type for analytics events (not scheduled in the kernel!)
@dataclass
class BizEvent:
    run_id: str
    t: int  # frame index
    elapsed_s: float  # frame converted through the session clock
    name: str  # stable event name


@dataclass
class RoadDrawnBiz(BizEvent):
    road_index: int
    start: tuple[float, float]
    end: tuple[float, float]
    length: float


@dataclass
class RouteChangedBiz(BizEvent):
    available: bool
    hops: int
    length: float
    eta_ticks: int | None = None


@dataclass
class DeliveryCompletedBiz(BizEvent):
    score: int
