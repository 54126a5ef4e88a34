from __future__ import annotations

from typing import Sequence, Tuple

from core.entity import Entity


class BackgroundLooper:
    """Two side-by-side tiles scrolling left forever.

    The leading tile is the left one. Once it has fully left the screen
    (x < -tile_width) it jumps to just behind the trailing tile and the roles swap,
    so the pair always stays exactly one tile width apart.
    """

    def __init__(self, tiles: Sequence[Entity], tile_width: float, speed: float) -> None:
        if len(tiles) != 2:
            raise ValueError(f"expected 2 background tiles, got {len(tiles)}")
        self.tile_width = float(tile_width)
        self.speed = float(speed)
        self.leading, self.trailing = tiles

    @property
    def tiles(self) -> Tuple[Entity, Entity]:
        return self.leading, self.trailing

    def update(self, dt: float) -> None:
        step = self.speed * dt
        for tile in self.tiles:
            tile.pos.x -= step

        if self.leading.pos.x < -self.tile_width:
            self.leading.move_to(self.trailing.pos.x + self.tile_width, self.leading.pos.y)
            self.leading, self.trailing = self.trailing, self.leading

    def spacing(self) -> float:
        return self.trailing.pos.x - self.leading.pos.x


__all__ = ["BackgroundLooper"]
