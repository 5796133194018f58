# sim/clock.py
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FPS = 60.0


def frames(seconds: float, fps: float = DEFAULT_FPS) -> int:
    return int(round(seconds * fps))


@dataclass(frozen=True)
class FrameClock:
    fps: float = DEFAULT_FPS  # display refresh rate driving one tick per frame

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be > 0, got {self.fps}")

    # frame -> elapsed seconds
    def to_seconds(self, frame: float) -> float:
        return frame / self.fps

    # elapsed seconds -> frame
    def to_frame(self, seconds: float) -> int:
        return frames(seconds, self.fps)
