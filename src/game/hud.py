"""Score label shown at the top of the game scene."""

from __future__ import annotations

from config import SCORE_FONT_SIZE, SCORE_LABEL_Y, WIDTH
from game.assets import FONT
from game.session import GameSession


class ScoreHud:
    def __init__(self, session: GameSession) -> None:
        self.session = session
        self.text = session.score_text()

    def refresh(self) -> None:
        self.text = self.session.score_text()

    def draw(self, text) -> None:  # pragma: no cover - visual
        text.draw_text(
            self.text,
            WIDTH / 2,
            SCORE_LABEL_Y,
            font=FONT,
            size=SCORE_FONT_SIZE,
            key="score",
            align="center",
        )


__all__ = ["ScoreHud"]
