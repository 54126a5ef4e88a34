"""Screen-space text for the OpenGL window, rendered with pygame fonts.

Fonts are registered under a logical name ("mania") and requested by name and
pixel size. A missing font file falls back to pygame's default font so text is
always visible.

Dynamic labels (score, FPS) pass a `key` so one texture is reused and only
re-uploaded when the string changes; static strings are cached by content.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_QUADS,
)

Color = Tuple[int, int, int, int]
WHITE: Color = (255, 255, 255, 255)


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]
    last_text: Optional[str] = None


class TextRenderer:
    """Draws text into the 2D frame set up by `SpriteRenderer.begin_frame()`."""

    def __init__(self, default_size: int = 24) -> None:
        self.default_size = default_size
        self._font_paths: Dict[str, Optional[str]] = {}
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}
        self._cache: Dict[Tuple[str, int, str, Color], _TexSlot] = {}
        self._slots: Dict[str, _TexSlot] = {}

    # --------------------------- fonts ----------------------------------
    def register_font(self, name: str, path: Optional[str]) -> None:
        if path is not None and not os.path.exists(path):
            print(f"[Text] Font '{name}' missing at {path}; using default font")
            path = None
        self._font_paths[name] = path

    def font(self, name: Optional[str], size: int) -> pygame.font.Font:
        key = (name or "", size)
        font = self._fonts.get(key)
        if font is None:
            font = pygame.font.Font(self._font_paths.get(name or ""), size)
            self._fonts[key] = font
        return font

    # --------------------------- rendering ------------------------------
    def _upload(self, slot: _TexSlot, surf: pygame.Surface) -> None:
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def _slot(
        self, text: str, font_name: Optional[str], size: int, color: Color, key: Optional[str]
    ) -> _TexSlot:
        if key is not None:
            slot = self._slots.get(key)
            if slot is None:
                slot = _TexSlot(id=int(glGenTextures(1)), size=(0, 0))
                self._slots[key] = slot
            if slot.last_text != text:
                self._upload(slot, self.font(font_name, size).render(text, True, color))
                slot.last_text = text
            return slot

        cache_key = (font_name or "", size, text, color)
        slot = self._cache.get(cache_key)
        if slot is None:
            slot = _TexSlot(id=int(glGenTextures(1)), size=(0, 0), last_text=text)
            self._upload(slot, self.font(font_name, size).render(text, True, color))
            self._cache[cache_key] = slot
        return slot

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        font: Optional[str] = None,
        size: Optional[int] = None,
        color: Color = WHITE,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw one line at screen coords; `align` is 'topleft' or 'center'."""
        slot = self._slot(text, font, size or self.default_size, color, key)
        w, h = slot.size
        if align == "center":
            draw_x, draw_y = x - w / 2, y - h / 2
        else:
            draw_x, draw_y = x, y

        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # tostring(..., True) flips rows, so v runs bottom-up
        glTexCoord2f(0.0, 1.0)
        glVertex2f(draw_x, draw_y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(draw_x + w, draw_y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(draw_x + w, draw_y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(draw_x, draw_y + h)
        glEnd()
        return w, h

    def draw_block(
        self,
        text: str,
        cx: float,
        cy: float,
        *,
        font: Optional[str] = None,
        size: Optional[int] = None,
        color: Color = WHITE,
        line_spacing: float = 1.2,
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw multi-line text centered on (cx, cy), each line centered."""
        size = size or self.default_size
        lines = [line.strip() for line in text.splitlines()] or [""]
        line_h = self.font(font, size).get_height() * line_spacing
        total_h = line_h * len(lines)
        top = cy - total_h / 2
        max_w = 0
        for i, line in enumerate(lines):
            if not line:
                continue
            w, _ = self.draw_text(
                line,
                cx,
                top + i * line_h + line_h / 2,
                font=font,
                size=size,
                color=color,
                align="center",
            )
            max_w = max(max_w, w)
        return int(max_w), int(total_h)
