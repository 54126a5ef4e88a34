"""Fixed-period loop timers driven by the frame delta.

A `LoopTimer` accumulates elapsed time and fires its callback once per full
interval, so a long frame that spans two intervals fires twice. The first fire
happens one interval after creation, never at t=0.
"""

from __future__ import annotations

from typing import Callable


class LoopTimer:
    def __init__(self, interval: float, callback: Callable[[], object]) -> None:
        if interval <= 0.0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = float(interval)
        self.callback = callback
        self._elapsed = 0.0

    def advance(self, dt: float) -> int:
        """Advance by `dt` seconds; return how many times the callback fired."""
        if dt <= 0.0:
            return 0
        self._elapsed += dt
        fired = 0
        while self._elapsed >= self.interval:
            self._elapsed -= self.interval
            self.callback()
            fired += 1
        return fired

    def reset(self) -> None:
        self._elapsed = 0.0


__all__ = ["LoopTimer"]
