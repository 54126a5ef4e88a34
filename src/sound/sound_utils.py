"""Sound registry and playback on top of pygame.mixer.

Sounds are registered under a logical name and played by that name:

    Sounds.ensure_init()
    Sounds.load_optional("jump", JUMP_SOUND_PATH)
    Sounds.play("jump", volume=0.2)

One looping background track is tracked separately through `play_music()` so a
scene can restart it without knowing what was playing before.

Nothing here raises during play: without a mixer (headless, no device) or with a
missing file every call quietly does nothing after printing a single note.
"""

from __future__ import annotations

from typing import Dict, Optional, Set
import os
import pygame
from config import MUTE


def _clamp_volume(volume: float) -> float:
    return max(0.0, min(1.0, float(volume)))


class Sounds:
    """Static manager for SFX and the single looping music track."""

    _inited: bool = False
    _failed_init: bool = False
    _sounds: Dict[str, pygame.mixer.Sound] = {}
    _missing_warned: Set[str] = set()
    _music_key: Optional[str] = None
    _music_channel: Optional[pygame.mixer.Channel] = None

    @classmethod
    def ensure_init(
        cls,
        *,
        frequency: int = 44100,
        size: int = -16,
        channels: int = 2,
        buffer: int = 512,
    ) -> bool:
        """Initialize pygame.mixer once. Returns True when audio is usable."""
        if cls._inited:
            return True
        if cls._failed_init:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(
                    frequency=frequency, size=size, channels=channels, buffer=buffer
                )
            cls._inited = pygame.mixer.get_init() is not None
            return cls._inited
        except pygame.error as e:  # pragma: no cover - environment dependent
            print(f"[Sounds] Mixer init failed: {e}")
            cls._failed_init = True
            return False

    @classmethod
    def is_available(cls) -> bool:
        return cls._inited and (pygame.mixer.get_init() is not None)

    @classmethod
    def load(
        cls, key: str, path: str, *, volume: Optional[float] = None
    ) -> Optional[pygame.mixer.Sound]:
        """Load `path` under `key`. Raises FileNotFoundError for a missing file."""
        if not os.path.exists(path):
            raise FileNotFoundError(path)
        if not cls.ensure_init():
            return None
        try:
            snd = pygame.mixer.Sound(path)
        except pygame.error as e:  # pragma: no cover - codec dependent
            print(f"[Sounds] Failed to load '{key}' from {path}: {e}")
            return None
        if volume is not None:
            snd.set_volume(_clamp_volume(volume))
        cls._sounds[key] = snd
        return snd

    @classmethod
    def load_optional(
        cls, key: str, path: str, *, volume: Optional[float] = None
    ) -> Optional[pygame.mixer.Sound]:
        if not os.path.exists(path):
            print(f"[Sounds] Skipping missing file for '{key}': {path}")
            return None
        return cls.load(key, path, volume=volume)

    @classmethod
    def clear(cls) -> None:
        cls.stop_music()
        cls._sounds.clear()
        cls._missing_warned.clear()

    @classmethod
    def is_loaded(cls, key: str) -> bool:
        return key in cls._sounds

    @classmethod
    def play(
        cls,
        key: str,
        *,
        volume: Optional[float] = None,
        loops: int = 0,
    ) -> Optional[pygame.mixer.Channel]:
        """Play a registered sound; `loops=-1` repeats until stopped.

        Volume is applied to the channel so the Sound's base volume is kept.
        """
        if MUTE or not cls.is_available():
            return None
        snd = cls._sounds.get(key)
        if snd is None:
            if key not in cls._missing_warned:
                print(f"[Sounds] Warning: sound '{key}' not loaded")
                cls._missing_warned.add(key)
            return None

        ch = pygame.mixer.find_channel(True)
        if ch is None:
            return None
        if volume is not None:
            ch.set_volume(_clamp_volume(volume))
        ch.play(snd, loops=loops)
        return ch

    # --------------------------- music ----------------------------------
    @classmethod
    def play_music(cls, key: str, *, volume: float = 1.0) -> None:
        """Stop the current track (if any) and loop `key` from the start."""
        cls.stop_music()
        cls._music_channel = cls.play(key, volume=volume, loops=-1)
        if cls._music_channel is not None:
            cls._music_key = key

    @classmethod
    def stop_music(cls) -> None:
        if cls._music_channel is not None:
            cls._music_channel.stop()
        cls._music_channel = None
        cls._music_key = None

    @classmethod
    def current_music(cls) -> Optional[str]:
        return cls._music_key


__all__ = ["Sounds"]
