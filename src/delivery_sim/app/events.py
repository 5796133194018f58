# app/events.py
from dataclasses import dataclass

from delivery_sim.domain.entities.geography import Point
from delivery_sim.sim.event import BaseEvent


# Input source
@dataclass(order=True)
class PointerDown(BaseEvent):
    pos: Point


@dataclass(order=True)
class PointerMove(BaseEvent):
    pos: Point


@dataclass(order=True)
class PointerUp(BaseEvent):
    pos: Point


# Clock
@dataclass(order=True)
class Tick(BaseEvent):
    frame: int


# Observability
@dataclass(order=True)
class RoadAdded(BaseEvent):
    road_index: int
    start: Point
    end: Point
    length: float


@dataclass(order=True)
class RouteChanged(BaseEvent):
    available: bool
    hops: int = 0  # edges on the new route; 0 when unavailable
    length: float = 0.0
    eta_ticks: int | None = None


@dataclass(order=True)
class DeliveryCompleted(BaseEvent):
    score: int
    frame: int
