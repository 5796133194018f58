# sim/event.py
from dataclasses import dataclass


@dataclass(order=True)
class BaseEvent:
    t: int  # frame the event fires at
