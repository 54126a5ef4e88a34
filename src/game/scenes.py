"""The three runner scenes: start, game and game over.

All three scroll the same looping background through `ScrollingScene`. The game
scene runs its tick in a fixed order:

    spawner timers -> physics -> scoring -> cleanup -> background -> HUD
    -> exit-screen check
"""

from __future__ import annotations

from typing import List, Optional

import pygame

from config import *
from core.entity import Bounds, Entity
from core.physics import PhysicsWorld
from core.scene import Scene, SceneRequest
from game.assets import FONT, GameAssets
from game.background import BackgroundLooper
from game.cleaner import LifecycleCleaner
from game.entities import make_background_tile, make_ground, make_player
from game.hud import ScoreHud
from game.judge import ScoringJudge
from game.session import GameSession
from game.spawner import Spawner
from sound.sound_utils import Sounds

START = "start"
GAME = "game"
GAME_OVER = "gameover"

INSTRUCTIONS = (
    'Press the "Spacebar" to jump over the boxes \n'
    'Collect "The Red Pill" to get extra points \n'
    "If you get pushed offscreen, you lose the game"
)

VIEWPORT = Bounds(0.0, 0.0, float(WIDTH), float(HEIGHT))


class ScrollingScene(Scene):
    def __init__(
        self,
        session: GameSession,
        assets: GameAssets,
        request_scene: Optional[SceneRequest] = None,
    ) -> None:
        super().__init__(request_scene)
        self.session = session
        self.assets = assets
        tiles = [
            make_background_tile(assets, 0.0),
            make_background_tile(assets, BACKGROUND_TILE_WIDTH),
        ]
        self.background = BackgroundLooper(tiles, BACKGROUND_TILE_WIDTH, BACKGROUND_SCROLL_SPEED)
        self.updaters.append(self.background.update)

    def on_key_press(self, key: str, keycode: Optional[int] = None) -> None:
        if key == RESTART_KEY or keycode == pygame.K_r:
            self.on_restart()

    def on_restart(self) -> None:
        pass

    def render(self, sprites, text) -> None:  # pragma: no cover - visual
        sprites.begin_frame(BACKGROUND_COLOR)
        for tile in self.background.tiles:
            sprites.draw_entity(tile)


class StartScene(ScrollingScene):
    name = START

    def on_restart(self) -> None:
        self.request_scene(GAME)

    def render(self, sprites, text) -> None:  # pragma: no cover - visual
        super().render(sprites, text)
        text.draw_text(
            "Press R to Start",
            WIDTH / 2,
            HEIGHT / 2,
            font=FONT,
            size=TITLE_FONT_SIZE,
            align="center",
        )
        text.draw_block(INSTRUCTIONS, WIDTH / 2, HEIGHT / 2 + 100, font=FONT, size=BODY_FONT_SIZE)


class GameScene(ScrollingScene):
    name = GAME

    def __init__(
        self,
        session: GameSession,
        assets: GameAssets,
        request_scene: Optional[SceneRequest] = None,
        *,
        spawner: Optional[Spawner] = None,
    ) -> None:
        super().__init__(session, assets, request_scene)
        self.world = PhysicsWorld(GRAVITY)
        self.player: Optional[Entity] = None
        self.ground: Optional[Entity] = None
        self.spawner = spawner or Spawner(self.world, assets)
        self.spawner.world = self.world
        self.judge = ScoringJudge(session, self.world)
        self.cleaner = LifecycleCleaner()
        self.hud = ScoreHud(session)
        self.over = False

    @property
    def obstacles(self) -> List[Entity]:
        return self.spawner.obstacles

    @property
    def pills(self) -> List[Entity]:
        return self.spawner.pills

    def enter(self) -> None:
        self.session.reset()
        self.world.clear()
        self.spawner.reset()
        self.over = False
        self.player = self.world.add(make_player(self.assets))
        self.ground = self.world.add(make_ground())
        self.hud.refresh()
        Sounds.play_music("racing", volume=MUSIC_VOLUME)

    def exit(self) -> None:
        self.world.clear()
        self.spawner.reset()

    def on_key_press(self, key: str, keycode: Optional[int] = None) -> None:
        if keycode == pygame.K_SPACE or key == " ":
            self.jump()

    def jump(self) -> bool:
        if self.player is None or self.over:
            return False
        if self.player.jump(JUMP_FORCE):
            Sounds.play("jump", volume=JUMP_VOLUME)
            return True
        return False

    def update(self, dt: float) -> None:
        if self.over:
            return
        self.elapsed += dt
        self.spawner.update(dt)
        self.world.integrate(dt)
        if self.judge.evaluate(self.player, self.obstacles, self.pills):
            self.hud.refresh()
        self.cleaner.sweep(self.obstacles, self.pills)
        self.background.update(dt)
        if not self.player.bounds().overlaps(VIEWPORT):
            self.on_exit_screen()

    def on_exit_screen(self) -> None:
        self.over = True
        Sounds.play("destroy")
        self.request_scene(GAME_OVER)

    def render(self, sprites, text) -> None:  # pragma: no cover - visual
        super().render(sprites, text)
        if self.ground is not None:
            sprites.draw_rect(self.ground, outline=GROUND_OUTLINE)
        for e in self.world:
            if e is not self.ground:
                sprites.draw_entity(e)
        self.hud.draw(text)


class GameOverScene(ScrollingScene):
    name = GAME_OVER

    def __init__(
        self,
        session: GameSession,
        assets: GameAssets,
        request_scene: Optional[SceneRequest] = None,
    ) -> None:
        super().__init__(session, assets, request_scene)
        self.summary = ""

    def enter(self) -> None:
        self.session.finalize()
        self.summary = self.session.summary_text()
        print(f"[Scenes] Game over: score {self.session.score}, best {self.session.high_score}")

    def on_restart(self) -> None:
        self.session.reset()
        self.request_scene(GAME)

    def render(self, sprites, text) -> None:  # pragma: no cover - visual
        super().render(sprites, text)
        text.draw_block(self.summary, WIDTH / 2, HEIGHT / 2, font=FONT, size=BODY_FONT_SIZE)


__all__ = [
    "START",
    "GAME",
    "GAME_OVER",
    "ScrollingScene",
    "StartScene",
    "GameScene",
    "GameOverScene",
]
