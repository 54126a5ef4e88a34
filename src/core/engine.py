"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the centered window and GL state, runs the main loop.
- SceneController: owns the active scene and scene switching.
- Renderers: sprite quads and text, handed to the active scene each frame.
"""

from __future__ import annotations

import os

import pygame
from OpenGL.GL import (
    glDisable,
    glEnable,
    glBlendFunc,
    GL_DEPTH_TEST,
    GL_CULL_FACE,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
)

from config import *
from game.assets import load_game_assets
from game.controller import build_controller
from game.session import GameSession
from render.sprite_renderer import SpriteRenderer
from ui.text_renderer import TextRenderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, session: GameSession | None = None):
        # Must be set before the window exists for SDL to center it
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        pygame.init()
        pygame.display.set_caption(TITLE)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        try:
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame builds reject the vsync kwarg, or vsync is unavailable
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # 2D state: no depth, alpha-blended sprites
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

        self.text = TextRenderer()
        self.assets = load_game_assets(self.text)
        self.sprites = SpriteRenderer(WIDTH, HEIGHT, self.assets.textures)
        self.session = session or GameSession()
        self.controller = build_controller(self.session, self.assets)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.controller.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float):
        self.controller.update(dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.controller.render(self.sprites, self.text)
        if SHOW_FPS:
            self.text.draw_text(f"FPS: {self.clock.get_fps():.0f}", 10, 10, key="fps")
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            # Cap both the frame rate and the step so a stall can't tunnel bodies
            dt = min(self.clock.tick(FPS) / 1000.0, MAX_FRAME_DT)
            running = self.handle_events()
            if not running:
                break
            self.update(dt)
            self.render()
        pygame.quit()
