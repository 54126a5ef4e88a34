"""Per-tick scoring: boxes the player got past and pills the player touched.

Pass rule: a box counts once the player's horizontal center is strictly to the
right of the box's scaled right edge (`x + width * scale`). Equal edges are not
a pass yet. The box's `passed` flag makes the rule idempotent, so re-checking
the same box on later ticks never scores it again.
"""

from __future__ import annotations

from typing import List, Optional

from config import COLLECT_VOLUME, OBSTACLE_POINTS, PILL_POINTS
from core.entity import Entity
from core.physics import PhysicsWorld
from game.session import GameSession
from sound.sound_utils import Sounds


def has_passed(player: Entity, obstacle: Entity) -> bool:
    return player.center_x > obstacle.right


class ScoringJudge:
    def __init__(self, session: GameSession, world: Optional[PhysicsWorld] = None) -> None:
        self.session = session
        self.world = world

    def evaluate(self, player: Entity, obstacles: List[Entity], pills: List[Entity]) -> bool:
        """Score this tick; returns True when the score changed."""
        assert player is not None, "scoring needs a player"
        before = self.session.score
        self._score_passes(player, obstacles)
        self._collect_pills(player, pills)
        return self.session.score != before

    def _score_passes(self, player: Entity, obstacles: List[Entity]) -> None:
        for obstacle in obstacles:
            if not obstacle.alive or obstacle.data.get("passed"):
                continue
            if has_passed(player, obstacle):
                obstacle.data["passed"] = True
                self.session.add_points(OBSTACLE_POINTS)

    def _collect_pills(self, player: Entity, pills: List[Entity]) -> None:
        kept = []
        for pill in pills:
            if not pill.alive:
                continue
            if player.is_colliding(pill):
                self.session.add_points(PILL_POINTS)
                if self.world is not None:
                    self.world.remove(pill)
                else:
                    pill.destroy()
                Sounds.play("collect", volume=COLLECT_VOLUME)
                continue
            kept.append(pill)
        pills[:] = kept


__all__ = ["ScoringJudge", "has_passed"]
