# sim/kernel.py

import heapq
import time
from collections.abc import Callable, Iterable

from .event import BaseEvent
from .hooks import KernelHooks, NoopHooks

Handler = Callable[[BaseEvent], Iterable[BaseEvent] | None]


class Kernel:
    """
    Frame-ordered event dispatcher.

    Time is an integer frame counter. Events at the same frame are dispatched
    FIFO in scheduling order, and every handler subscribed to an event type runs
    to completion before the next event. Nothing may be scheduled into a frame
    that has already been dispatched.
    """

    def __init__(self, hooks: KernelHooks | None = None):
        self._frame = 0
        self._q: list[tuple[int, int, BaseEvent]] = []
        self._seq = 0
        self._subs: dict[type[BaseEvent], list[Handler]] = {}
        self._hooks = hooks or NoopHooks()

    @property
    def now(self) -> int:
        return self._frame

    @property
    def pending(self) -> int:
        return len(self._q)

    def on(self, etype: type[BaseEvent], handler: Handler) -> None:
        self._subs.setdefault(etype, []).append(handler)

    def schedule(self, ev: BaseEvent) -> None:
        if ev.t < self._frame:
            self._hooks.error(ev, reason="scheduled_past", frame=self._frame)
            raise RuntimeError(f"event {type(ev).__name__} at frame {ev.t} < now {self._frame}")
        self._seq += 1
        heapq.heappush(self._q, (ev.t, self._seq, ev))
        self._hooks.schedule(ev, frame=self._frame, qsize=len(self._q))

    def run(self, until: int | None = None, max_events: int | None = None) -> int:
        """Dispatch queued events up to and including frame `until`; returns how many ran."""
        t0 = time.perf_counter()
        self._hooks.run_start(until=until, max_events=max_events, qsize=len(self._q))
        processed = 0
        while self._q and (until is None or self._q[0][0] <= until):
            frame, seq, ev = heapq.heappop(self._q)
            self._frame = frame
            self._dispatch(ev, seq)
            processed += 1
            if max_events and processed >= max_events:
                break
        self._hooks.run_end(
            processed=processed,
            last_frame=self._frame,
            qsize=len(self._q),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return processed

    def _dispatch(self, ev: BaseEvent, seq: int) -> None:
        handlers = self._subs.get(type(ev), ())
        t1 = time.perf_counter()
        self._hooks.dispatch_start(ev, seq=seq, qsize=len(self._q), handlers=len(handlers))
        fan_out = 0
        for h in handlers:
            for nxt in h(ev) or ():
                self.schedule(nxt)
                fan_out += 1
        ms = (time.perf_counter() - t1) * 1000
        self._hooks.dispatch_end(ev, out_events=fan_out, qsize=len(self._q), ms=ms)
