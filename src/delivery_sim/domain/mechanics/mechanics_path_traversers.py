from math import ceil

from delivery_sim.app.protocols import PathTraverser
from delivery_sim.domain.entities.geography import Node, distance, lerp
from delivery_sim.domain.entities.motion import Vehicle


def segment_ticks(seg_len: float, speed: float) -> int:
    """Smallest k >= 1 with k * speed >= seg_len, i.e. ceil(seg_len / speed) for a moving vehicle."""
    n = max(1, ceil(seg_len / speed))
    # the division rounds; settle on the same product test advance() applies
    if n > 1 and (n - 1) * speed >= seg_len:
        n -= 1
    elif n * speed < seg_len:
        n += 1
    return n


class FixedStepTraverser(PathTraverser):
    """
    Moves the vehicle `vehicle.speed` units along the current path segment per tick.

    Progress on a segment is derived from the whole number of ticks spent on it
    (`seg_ticks * speed / L`) rather than accumulated, so a segment of length L
    always takes exactly ceil(L / speed) ticks.

    The path is recomputed every tick, so the stored segment index is only a
    best-effort carry-over and is reset when it no longer fits the new path.
    """

    def advance(self, vehicle: Vehicle, path: list[Node] | None) -> bool:
        if not path:
            return False  # no route: hold position
        if len(path) == 1:
            return True  # origin and destination share a node

        if vehicle.seg_index >= len(path) - 1:
            vehicle.start_segment(0)

        a, b = path[vehicle.seg_index].pos, path[vehicle.seg_index + 1].pos
        seg_len = distance(a, b)
        vehicle.seg_ticks += 1
        travelled = vehicle.seg_ticks * vehicle.speed

        if travelled >= seg_len:  # zero-length segments complete on their first tick
            vehicle.start_segment(vehicle.seg_index + 1)
            if vehicle.seg_index >= len(path) - 1:
                return True
        else:
            vehicle.progress = travelled / seg_len

        i = vehicle.seg_index
        vehicle.pos = lerp(path[i].pos, path[i + 1].pos, vehicle.progress)
        return False

    def ticks_to_traverse(self, path: list[Node] | None, speed: float) -> int | None:
        """Ticks a vehicle starting at the path head needs to arrive; None if it never will."""
        if not path:
            return None
        if len(path) == 1:
            return 1
        if speed <= 0:
            raise ValueError(f"speed must be > 0, got {speed}")
        return sum(segment_ticks(distance(a.pos, b.pos), speed) for a, b in zip(path, path[1:]))
