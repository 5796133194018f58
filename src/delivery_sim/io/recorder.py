# delivery_sim/io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

log = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    def __init__(self, fp=None):
        self.fp = fp  # None => whatever sys.stdout is at write time

    def write(self, ev) -> None:
        fp = sys.stdout if self.fp is None else self.fp
        fp.write(json.dumps(asdict(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # never break the sim
                log.exception("sink %s failed on %s", type(s).__name__, type(ev).__name__)
