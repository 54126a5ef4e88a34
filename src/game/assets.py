"""Centralized asset loading for the runner.

`load_game_assets()` registers every sprite, the font and the sound clips under
their logical names and returns a `GameAssets` holding texture ids and pixel
sizes. Scenes size their entities from `GameAssets.size_of()` and never touch
OpenGL themselves, which also lets tests build a `GameAssets` by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from textures.resourcepath import *

PLAYER = "sooner"
BOX = "customBox"
BACKGROUND = "background"
PILL = "pill"
FONT = "mania"

# Used for generated placeholders when an image is missing
EXPECTED_SIZES: Dict[str, Tuple[int, int]] = {
    PLAYER: (64, 64),
    BOX: (640, 640),
    BACKGROUND: (1280, 720),
    PILL: (40, 40),
}
PLACEHOLDER_COLORS: Dict[str, Tuple[int, int, int]] = {
    PLAYER: (230, 180, 40),
    BOX: (150, 100, 50),
    BACKGROUND: (60, 120, 200),
    PILL: (220, 30, 30),
}


@dataclass
class GameAssets:
    textures: Dict[str, int] = field(default_factory=dict)
    sizes: Dict[str, Tuple[int, int]] = field(default_factory=dict)

    def size_of(self, name: str) -> Tuple[int, int]:
        return self.sizes.get(name) or EXPECTED_SIZES.get(name, (0, 0))

    @classmethod
    def placeholder(cls) -> "GameAssets":
        """Sizes only, no GL textures; enough to run the simulation."""
        return cls(textures={}, sizes=dict(EXPECTED_SIZES))


def load_game_assets(text=None) -> GameAssets:  # pragma: no cover - needs GL
    from sound.sound_utils import Sounds
    from textures.texture_utils import get_texture_size, load_texture

    print("[Assets] Loading game assets...")
    paths = {
        PLAYER: PLAYER_TEXTURE_PATH,
        BOX: BOX_TEXTURE_PATH,
        BACKGROUND: BACKGROUND_TEXTURE_PATH,
        PILL: PILL_TEXTURE_PATH,
    }
    assets = GameAssets()
    for name, path in paths.items():
        tex = load_texture(
            path,
            fallback_size=EXPECTED_SIZES[name],
            fallback_color=PLACEHOLDER_COLORS[name],
        )
        assets.textures[name] = tex
        assets.sizes[name] = get_texture_size(tex) or EXPECTED_SIZES[name]

    if text is not None:
        text.register_font(FONT, MANIA_FONT_PATH)

    Sounds.ensure_init()
    Sounds.load_optional("racing", RACING_SOUND_PATH)
    Sounds.load_optional("destroy", DESTROY_SOUND_PATH)
    Sounds.load_optional("jump", JUMP_SOUND_PATH)
    Sounds.load_optional("collect", COLLECT_SOUND_PATH)
    print("[Assets] Asset loading complete.")
    return assets


__all__ = [
    "PLAYER",
    "BOX",
    "BACKGROUND",
    "PILL",
    "FONT",
    "GameAssets",
    "load_game_assets",
]
