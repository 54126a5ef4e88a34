from __future__ import annotations

from typing import List

from config import OFFSCREEN_CULL_X
from core.entity import Entity


class LifecycleCleaner:
    """Drops boxes and pills that scrolled past the left edge.

    Lists are filtered in place so every holder of the list sees the same
    survivors. Dropped entities are destroyed, and the physics world releases
    them on its next step.
    """

    def __init__(self, threshold: float = OFFSCREEN_CULL_X) -> None:
        self.threshold = float(threshold)

    def keep(self, entity: Entity) -> bool:
        return entity.alive and entity.pos.x > self.threshold

    def sweep(self, *collections: List[Entity]) -> int:
        """Filter each collection; returns how many entities were dropped."""
        dropped = 0
        for items in collections:
            kept = []
            for e in items:
                if self.keep(e):
                    kept.append(e)
                else:
                    e.destroy()
                    dropped += 1
            items[:] = kept
        return dropped


__all__ = ["LifecycleCleaner"]
