"""Factories for every kind of entity the runner puts in the world."""

from __future__ import annotations

from pygame.math import Vector2

from config import *
from core.entity import Body, Entity, FloatMotion, Motion
from game.assets import BACKGROUND, BOX, PILL, PLAYER, GameAssets


def make_player(assets: GameAssets) -> Entity:
    return Entity(
        PLAYER_START,
        assets.size_of(PLAYER),
        sprite=PLAYER,
        tags={"player"},
        body=Body(collides_with={"obstacle"}),
    )


def make_ground() -> Entity:
    return Entity(
        (0.0, GROUND_Y),
        (WIDTH, GROUND_HEIGHT),
        tags={"ground"},
        body=Body(is_static=True),
    )


def make_background_tile(assets: GameAssets, x: float) -> Entity:
    # Stretched to one tile width so the looper's spacing is exact
    w, h = assets.size_of(BACKGROUND)
    scale = BACKGROUND_TILE_WIDTH / w if w else 1.0
    return Entity((x, 0.0), (w, h), scale=scale, sprite=BACKGROUND, tags={"background"})


def make_obstacle(assets: GameAssets, speed: float) -> Entity:
    w, h = assets.size_of(BOX)
    # Rest the scaled box on the ground line
    y = GROUND_Y - h * OBSTACLE_SCALE
    return Entity(
        (OBSTACLE_SPAWN_X, y),
        (w, h),
        scale=OBSTACLE_SCALE,
        sprite=BOX,
        tags={"obstacle"},
        body=Body(),
        motion=Motion(Vector2(-1, 0), speed),
        passed=False,
    )


def make_pill(assets: GameAssets, base_y: float, t: float = 0.0) -> Entity:
    floating = FloatMotion(base_y, PILL_FLOAT_AMPLITUDE, PILL_FLOAT_FREQUENCY)
    return Entity(
        (PILL_SPAWN_X, base_y + floating.offset_at(t)),
        assets.size_of(PILL),
        scale=PILL_SCALE,
        sprite=PILL,
        tags={"pill", "floating"},
        motion=Motion(Vector2(-1, 0), PILL_SPEED),
        float_motion=floating,
    )


__all__ = [
    "make_player",
    "make_ground",
    "make_background_tile",
    "make_obstacle",
    "make_pill",
]
