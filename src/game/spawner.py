"""Timed spawning of boxes and pills for the game scene.

Two independent loop timers drive spawning: one box every
`OBSTACLE_SPAWN_INTERVAL` seconds, and a coin flip for a pill every
`PILL_SPAWN_INTERVAL` seconds. New entities go both into the physics world (so
they move and draw) and into the spawner's tracked lists (so the judge and the
cleaner can see them).

Each list is capped; when a cap is reached the spawn is skipped, which keeps the
world bounded even if the cleaner falls behind.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from config import (
    MAX_OBSTACLES,
    MAX_PILLS,
    OBSTACLE_SPAWN_INTERVAL,
    OBSTACLE_SPEEDS,
    PILL_MAX_Y,
    PILL_MIN_Y,
    PILL_SPAWN_CHANCE,
    PILL_SPAWN_INTERVAL,
)
from core.entity import Entity
from core.physics import PhysicsWorld
from core.timers import LoopTimer
from game.assets import GameAssets
from game.entities import make_obstacle, make_pill


class Spawner:
    def __init__(
        self,
        world: PhysicsWorld,
        assets: GameAssets,
        *,
        rng: Optional[random.Random] = None,
        speeds: Sequence[float] = OBSTACLE_SPEEDS,
        pill_chance: float = PILL_SPAWN_CHANCE,
    ) -> None:
        self.world = world
        self.assets = assets
        self.rng = rng or random.Random()
        self.speeds = tuple(speeds)
        self.pill_chance = float(pill_chance)
        self.obstacles: List[Entity] = []
        self.pills: List[Entity] = []
        self._obstacle_timer = LoopTimer(OBSTACLE_SPAWN_INTERVAL, self.spawn_obstacle)
        self._pill_timer = LoopTimer(PILL_SPAWN_INTERVAL, self.maybe_spawn_pill)
        self._cap_warned = False

    def update(self, dt: float) -> None:
        self._obstacle_timer.advance(dt)
        self._pill_timer.advance(dt)

    def reset(self) -> None:
        for e in self.obstacles + self.pills:
            self.world.remove(e)
        self.obstacles.clear()
        self.pills.clear()
        self._obstacle_timer.reset()
        self._pill_timer.reset()

    # ------------------------------------------------------------------
    def _at_cap(self, tracked: List[Entity], cap: int) -> bool:
        if sum(1 for e in tracked if e.alive) < cap:
            return False
        if not self._cap_warned:
            print(f"[Spawner] Entity cap of {cap} reached; skipping spawns")
            self._cap_warned = True
        return True

    def spawn_obstacle(self) -> Optional[Entity]:
        if self._at_cap(self.obstacles, MAX_OBSTACLES):
            return None
        speed = self.rng.choice(self.speeds)
        obstacle = self.world.add(make_obstacle(self.assets, speed))
        self.obstacles.append(obstacle)
        return obstacle

    def maybe_spawn_pill(self) -> Optional[Entity]:
        if self.rng.random() >= self.pill_chance:
            return None
        return self.spawn_pill()

    def spawn_pill(self) -> Optional[Entity]:
        if self._at_cap(self.pills, MAX_PILLS):
            return None
        base_y = PILL_MIN_Y + self.rng.random() * (PILL_MAX_Y - PILL_MIN_Y)
        pill = self.world.add(make_pill(self.assets, base_y, self.world.time))
        self.pills.append(pill)
        return pill


__all__ = ["Spawner"]
