from __future__ import annotations

import json
import os
import secrets
from pathlib import Path

from config import HIGH_SCORE_KEY, STATE_DIR_ENV


def state_dir() -> Path:
    """
    Directory for the small persistent game state.

    Override for tests/dev via `SOONER_STATE_DIR`.
    """

    override = os.environ.get(STATE_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".sooner"


def state_path() -> Path:
    return state_dir() / "highscore.json"


class HighScoreStore:
    """Durable key-value home of the single `highScore` integer."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else state_path()

    def load(self) -> int:
        p = self.path
        if not p.exists():
            return 0
        try:
            payload = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return 0
        if not isinstance(payload, dict):
            return 0
        value = payload.get(HIGH_SCORE_KEY)
        # bool is an int subclass; a stored `true` is not a score
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return 0
        try:
            score = int(value)
        except (ValueError, OverflowError):
            return 0
        return max(0, score)

    def save(self, score: int) -> None:
        p = self.path
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_name(f"{p.name}.{os.getpid()}.{secrets.token_hex(6)}.tmp")
            tmp.write_text(
                json.dumps({HIGH_SCORE_KEY: max(0, int(score))}, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
            tmp.replace(p)
        except OSError as e:
            print(f"[HighScore] Could not save {score} to {p}: {e}")


class MemoryHighScoreStore(HighScoreStore):
    """In-process store; also records every save for inspection."""

    def __init__(self, initial: int = 0) -> None:
        super().__init__()
        self.value = max(0, int(initial))
        self.saves: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        self.value = max(0, int(score))
        self.saves.append(self.value)


__all__ = ["HighScoreStore", "MemoryHighScoreStore", "state_dir", "state_path"]
