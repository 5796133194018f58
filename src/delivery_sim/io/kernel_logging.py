# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from delivery_sim.sim.clock import FrameClock
from delivery_sim.sim.hooks import NoopHooks


class _StdoutHandler(logging.StreamHandler):
    # follows sys.stdout when it is swapped (capture, redirection)
    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)


def _default_json_logger(name="delivery_sim.kernel", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = _StdoutHandler()

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class KernelLogging(NoopHooks):
    """
    One place to shape and emit structured logs for both engine and business events.
    The kernel runs once per frame, so engine-level lines are debug-only and sampled.
    """

    BUSINESS = {
        "RoadAdded",
        "RouteChanged",
        "DeliveryCompleted",
    }

    def __init__(
        self,
        run_id: str = "local",
        clock: FrameClock | None = None,
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 60,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.clock, self.debug, self.sample_every = (
            run_id,
            clock,
            debug,
            max(1, sample_every),
        )
        self.log = logger or _default_json_logger(level=level)
        self._processed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        if self.clock and extra.get("t") is not None:
            payload["elapsed_s"] = round(self.clock.to_seconds(extra["t"]), 6)
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _sampled(self, t) -> bool:
        return t is not None and int(t) % self.sample_every == 0

    def _shape_event(self, ev, want_name: bool = False):
        # Normalize a few common fields to keep logs compact & consistent
        name = type(ev).__name__
        base = {"t": getattr(ev, "t", None)}
        for f in ("frame", "score", "road_index", "available"):
            if hasattr(ev, f):
                base[f] = getattr(ev, f)
        if is_dataclass(ev):
            evd = asdict(ev)
            # remove already copied keys to avoid duplication
            for k in list(base.keys()):
                evd.pop(k, None)
            if evd:
                base["data"] = evd
        return (name, base) if want_name else base

    # --------------------------------------------------------

    # engine lifecycle

    def run_start(self, *, until: int | None, max_events: int | None, qsize: int | None):
        if self.debug and self._sampled(until):
            self._emit("DEBUG", "run_start", until=until, max_events=max_events, qsize=qsize)

    def run_end(self, *, processed: int, last_frame: int, **extra):
        if self.debug and self._sampled(last_frame):
            self._emit("DEBUG", "run_end", processed=processed, last_frame=last_frame, **extra)

    def schedule(self, ev, *, frame: int, qsize: int):
        if self.debug and self._sampled(ev.t):
            self._emit("DEBUG", "schedule", **self._shape_event(ev), now=frame, qsize=qsize)

    def dispatch_start(self, ev, *, seq: int, qsize: int, handlers: int):
        self._processed += 1
        name, extra = self._shape_event(ev, want_name=True)
        if name in self.BUSINESS:
            level = "INFO"
        elif self.debug and self._sampled(ev.t):
            level = "DEBUG"
        else:
            return
        self._emit(level, name, **extra, seq=seq, qsize=qsize, handlers=handlers)

    def dispatch_end(self, ev, *, out_events: int, qsize: int, **extra):
        if self.debug and self._sampled(ev.t):
            self._emit("DEBUG", "dispatch_done", out_events=out_events, qsize=qsize, **extra)

    def error(self, ev, *, reason: str, **extra):
        name, shaped = self._shape_event(ev, want_name=True)
        self._emit("ERROR", "kernel_error", event=name, reason=reason, **{**shaped, **extra})
