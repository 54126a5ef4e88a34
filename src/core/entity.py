"""Entities composed from small optional parts.

An `Entity` always has a position, an unscaled size and a scale; the collision
area is the scaled rectangle anchored at the top-left corner. Extra behavior is
attached by setting one of the part slots:

- `body`   -> gravity / solid collision (see `core.physics`)
- `motion` -> constant-velocity scroll
- `floating` -> vertical bobbing on top of the scroll

Tags are plain strings ("player", "obstacle", ...). Game-specific fields such as
an obstacle's `passed` flag live in `data`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Optional, Set, Tuple

from pygame.math import Vector2


class Bounds(NamedTuple):
    left: float
    top: float
    right: float
    bottom: float

    def overlaps(self, other: "Bounds") -> bool:
        # Touching edges do not count as overlap
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


@dataclass
class Body:
    is_static: bool = False
    vel_y: float = 0.0
    grounded: bool = False
    # Dynamic bodies always collide with static ones; these tags add more solids
    collides_with: Set[str] = field(default_factory=set)


@dataclass
class Motion:
    direction: Vector2 = field(default_factory=lambda: Vector2(-1, 0))
    speed: float = 0.0

    def velocity(self) -> Vector2:
        if self.direction.length_squared() == 0:
            return Vector2(0, 0)
        return self.direction.normalize() * self.speed


@dataclass
class FloatMotion:
    base_y: float
    amplitude: float
    frequency: float

    def offset_at(self, t: float) -> float:
        return self.amplitude * math.sin(self.frequency * t)


class Entity:
    def __init__(
        self,
        position: Tuple[float, float] | Vector2 = (0.0, 0.0),
        size: Tuple[float, float] = (0.0, 0.0),
        *,
        scale: float = 1.0,
        sprite: Optional[str] = None,
        tags: Optional[Set[str]] = None,
        body: Optional[Body] = None,
        motion: Optional[Motion] = None,
        float_motion: Optional[FloatMotion] = None,
        **data: Any,
    ) -> None:
        self.pos = Vector2(position)
        self.width, self.height = float(size[0]), float(size[1])
        self.scale = float(scale)
        self.sprite = sprite
        self.tags: Set[str] = set(tags or ())
        self.body = body
        self.motion = motion
        self.floating = float_motion
        self.data: Dict[str, Any] = dict(data)
        self.alive = True

    def __repr__(self) -> str:
        tags = ",".join(sorted(self.tags)) or "-"
        return f"Entity({tags} @ {self.pos.x:.1f},{self.pos.y:.1f})"

    # --------------------------- geometry -------------------------------
    @property
    def scaled_width(self) -> float:
        return self.width * self.scale

    @property
    def scaled_height(self) -> float:
        return self.height * self.scale

    @property
    def right(self) -> float:
        return self.pos.x + self.scaled_width

    @property
    def center_x(self) -> float:
        return self.pos.x + self.scaled_width / 2

    def bounds(self) -> Bounds:
        return Bounds(
            self.pos.x,
            self.pos.y,
            self.pos.x + self.scaled_width,
            self.pos.y + self.scaled_height,
        )

    def move_to(self, x: float, y: float) -> None:
        self.pos.update(x, y)

    # --------------------------- queries --------------------------------
    def is_grounded(self) -> bool:
        return self.body is not None and self.body.grounded

    def is_colliding(self, other: "Entity") -> bool:
        if not (self.alive and other.alive):
            return False
        return self.bounds().overlaps(other.bounds())

    # --------------------------- actions --------------------------------
    def jump(self, force: float) -> bool:
        """Apply an upward impulse; only works while standing on something."""
        if not self.is_grounded():
            return False
        self.body.vel_y = -float(force)
        self.body.grounded = False
        return True

    def destroy(self) -> None:
        self.alive = False


__all__ = ["Bounds", "Body", "Motion", "FloatMotion", "Entity"]
