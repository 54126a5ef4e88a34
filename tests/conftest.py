from __future__ import annotations

import os
import random

import pytest

# Headless SDL for anything that touches pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from game.assets import GameAssets  # noqa: E402
from game.persistence import MemoryHighScoreStore  # noqa: E402
from game.session import GameSession  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_state_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SOONER_STATE_DIR", str(tmp_path / "state"))


@pytest.fixture
def assets() -> GameAssets:
    return GameAssets.placeholder()


@pytest.fixture
def store() -> MemoryHighScoreStore:
    return MemoryHighScoreStore()


@pytest.fixture
def session(store) -> GameSession:
    return GameSession(store)


class FixedRandom(random.Random):
    """`random()` returns queued values; `choice` takes the first element."""

    def __init__(self, *values: float) -> None:
        super().__init__(0)
        self.values = list(values)

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return 0.0

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def fixed_random():
    return FixedRandom


class _Channel:
    def __init__(self) -> None:
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def sound_calls(monkeypatch):
    """Record `Sounds.play` and `Sounds.stop_music` calls instead of playing audio."""
    from sound.sound_utils import Sounds

    calls = []
    monkeypatch.setattr(Sounds, "_music_channel", None)
    monkeypatch.setattr(Sounds, "_music_key", None)
    stop_music = Sounds.stop_music

    def play(key, *, volume=None, loops=0):
        calls.append(("play", key, volume, loops))
        return _Channel()

    def record_stop_music():
        calls.append(("stop_music",))
        stop_music()

    monkeypatch.setattr(Sounds, "play", play)
    monkeypatch.setattr(Sounds, "stop_music", record_stop_music)
    return calls
