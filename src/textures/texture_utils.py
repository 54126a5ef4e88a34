"""Texture loading utilities for OpenGL.

Keeps a small registry of texture sizes so sprites can be sized from a texture
id without holding on to pygame surfaces. A missing or unreadable image never
stops the game: `load_texture` prints a note and returns a generated placeholder
of the expected size instead.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

import numpy as np
import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_LINEAR,
    GL_CLAMP_TO_EDGE,
)

_TEXTURE_SIZES: Dict[int, Tuple[int, int]] = {}


def get_texture_size(tex_id: int) -> Optional[Tuple[int, int]]:
    """Return (width, height) for a loaded texture ID, if known."""
    return _TEXTURE_SIZES.get(int(tex_id))


def upload_surface(surface: pygame.Surface) -> int:
    """Upload an RGBA copy of `surface` into a new GL texture and return its id."""
    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
    # Clamp so the edges of looping background tiles don't bleed into each other
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    _TEXTURE_SIZES[int(texture_id)] = (int(width), int(height))
    return int(texture_id)


def load_texture(
    filename: str,
    *,
    fallback_size: Tuple[int, int] = (64, 64),
    fallback_color: Tuple[int, int, int] = (255, 0, 255),
) -> int:
    """Load an image file as a GL texture.

    Parameters
    ----------
    filename : str
        Path to the image file.
    fallback_size, fallback_color
        Used for the generated placeholder when the file can't be loaded.

    Returns
    -------
    int
        OpenGL texture ID.
    """
    if not os.path.exists(filename):
        print(f"[Textures] Missing {filename}; using placeholder")
        return create_placeholder_texture(fallback_size, fallback_color)
    try:
        surface = pygame.image.load(filename).convert_alpha()
    except pygame.error as e:
        print(f"[Textures] Failed to load {filename}: {e}")
        return create_placeholder_texture(fallback_size, fallback_color)
    return upload_surface(surface)


def placeholder_pixels(
    size: Tuple[int, int], color: Tuple[int, int, int]
) -> np.ndarray:
    """Build a (w, h, 3) uint8 array: `color` fading to half brightness downwards."""
    w, h = max(1, int(size[0])), max(1, int(size[1]))
    shade = np.linspace(1.0, 0.5, h, dtype=np.float32)
    rgb = np.asarray(color, dtype=np.float32)
    column = shade[:, np.newaxis] * rgb[np.newaxis, :]
    pixels = np.broadcast_to(column[np.newaxis, :, :], (w, h, 3))
    return np.clip(pixels, 0, 255).astype(np.uint8)


def create_placeholder_texture(
    size: Tuple[int, int], color: Tuple[int, int, int] = (255, 0, 255)
) -> int:
    surface = pygame.surfarray.make_surface(placeholder_pixels(size, color))
    return upload_surface(surface.convert_alpha())


__all__ = [
    "get_texture_size",
    "upload_surface",
    "load_texture",
    "placeholder_pixels",
    "create_placeholder_texture",
]
