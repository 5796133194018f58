# sim/hooks.py
from typing import Protocol

from delivery_sim.sim.event import BaseEvent


class KernelHooks(Protocol):
    """Observer of the kernel's run loop. Frames are integers; `qsize` is the queue length after the step."""

    def run_start(self, *, until: int | None, max_events: int | None, qsize: int): ...
    def run_end(self, *, processed: int, last_frame: int, qsize: int, wall_ms: float): ...
    def schedule(self, ev: BaseEvent, *, frame: int, qsize: int): ...
    def dispatch_start(self, ev: BaseEvent, *, seq: int, qsize: int, handlers: int): ...
    def dispatch_end(self, ev: BaseEvent, *, out_events: int, qsize: int, ms: float): ...
    def error(self, ev: BaseEvent, *, reason: str, **kw): ...


class NoopHooks(KernelHooks):
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def schedule(self, *_, **__):
        pass

    def dispatch_start(self, *_, **__):
        pass

    def dispatch_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
