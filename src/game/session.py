"""Score and high score for one run of the application.

`GameSession` is the explicit context the scenes share. Score belongs to a single
game-scene activation (`reset()` on each start); the high score lives for the
whole process and is written through to the store the moment it grows.
"""

from __future__ import annotations

from typing import Optional

from game.persistence import HighScoreStore


class GameSession:
    def __init__(self, store: Optional[HighScoreStore] = None) -> None:
        self.store = store if store is not None else HighScoreStore()
        self.score = 0
        self.high_score = self.store.load()

    def reset(self) -> None:
        self.score = 0

    def add_points(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"score only grows, got {points}")
        self.score += points
        self._sync_high_score()

    def finalize(self) -> None:
        """Make sure the high score reflects the run that just ended."""
        self._sync_high_score()

    def _sync_high_score(self) -> bool:
        if self.score <= self.high_score:
            return False
        self.high_score = self.score
        self.store.save(self.high_score)
        return True

    # --------------------------- display --------------------------------
    def score_text(self) -> str:
        return f"SCORE: {self.score} | HIGH SCORE: {self.high_score}"

    def summary_text(self) -> str:
        return (
            "Maybe Next Time Sooner! \n"
            f"Final Score: {self.score} \n"
            f"High Score: {self.high_score} \n"
            "Press R to restart"
        )


__all__ = ["GameSession"]
