"""Immediate-mode 2D drawing for the runner: textured entities and rectangles.

`begin_frame()` clears the window and sets a pixel-space orthographic projection
with the origin at the top-left, matching the entity coordinate system.
"""

from __future__ import annotations

from typing import Dict, Tuple

from OpenGL.GL import (
    glClear,
    glClearColor,
    glMatrixMode,
    glLoadIdentity,
    glOrtho,
    glEnable,
    glDisable,
    glBlendFunc,
    glBindTexture,
    glBegin,
    glEnd,
    glColor4f,
    glTexCoord2f,
    glVertex2f,
    glLineWidth,
    GL_COLOR_BUFFER_BIT,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_DEPTH_TEST,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_TEXTURE_2D,
    GL_QUADS,
    GL_LINE_LOOP,
)

from core.entity import Entity

RGBA = Tuple[float, float, float, float]


class SpriteRenderer:  # pragma: no cover - visual
    def __init__(self, width: int, height: int, textures: Dict[str, int]) -> None:
        self.width = width
        self.height = height
        self.textures = textures

    def begin_frame(self, clear_color: RGBA = (0.0, 0.0, 0.0, 1.0)) -> None:
        glClearColor(*clear_color)
        glClear(GL_COLOR_BUFFER_BIT)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)

    def draw_entity(self, entity: Entity) -> None:
        if not entity.alive or entity.sprite is None:
            return
        tex = self.textures.get(entity.sprite)
        if tex is None:
            return
        left, top, right, bottom = entity.bounds()
        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, tex)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(left, top)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(right, top)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(right, bottom)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(left, bottom)
        glEnd()

    def draw_rect(
        self,
        entity: Entity,
        fill: RGBA = (1.0, 1.0, 1.0, 1.0),
        *,
        outline: float = 0.0,
        outline_color: RGBA = (0.0, 0.0, 0.0, 1.0),
    ) -> None:
        left, top, right, bottom = entity.bounds()
        glDisable(GL_TEXTURE_2D)
        glColor4f(*fill)
        glBegin(GL_QUADS)
        glVertex2f(left, top)
        glVertex2f(right, top)
        glVertex2f(right, bottom)
        glVertex2f(left, bottom)
        glEnd()
        if outline > 0:
            glLineWidth(outline)
            glColor4f(*outline_color)
            glBegin(GL_LINE_LOOP)
            glVertex2f(left, top)
            glVertex2f(right, top)
            glVertex2f(right, bottom)
            glVertex2f(left, bottom)
            glEnd()
        glEnable(GL_TEXTURE_2D)
        glColor4f(1.0, 1.0, 1.0, 1.0)


__all__ = ["SpriteRenderer"]
