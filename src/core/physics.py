"""Minimal 2D physics for the runner: gravity, scrolling and box resolution.

`PhysicsWorld.integrate(dt)` advances every live entity in insertion order:

1. non-static bodies accelerate by gravity and move vertically,
2. entities with `motion` move at their constant velocity,
3. entities with `floating` get their y set from the bob curve,
4. dynamic bodies are pushed out of any solid they overlap along the axis of
   least penetration. Landing on top of a solid marks the body grounded.

Dead entities (see `Entity.destroy`) are dropped at the end of the step, which is
how the world releases anything the game no longer tracks.
"""

from __future__ import annotations

from typing import Iterator, List

from core.entity import Entity


class PhysicsWorld:
    def __init__(self, gravity: float = 0.0) -> None:
        self.gravity = float(gravity)
        self.time = 0.0
        self._entities: List[Entity] = []

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __contains__(self, entity: Entity) -> bool:
        return entity in self._entities

    # ------------------------------------------------------------------
    def add(self, entity: Entity) -> Entity:
        self._entities.append(entity)
        return entity

    def remove(self, entity: Entity) -> None:
        entity.destroy()
        try:
            self._entities.remove(entity)
        except ValueError:
            pass

    def clear(self) -> None:
        for e in self._entities:
            e.destroy()
        self._entities.clear()

    # ------------------------------------------------------------------
    def integrate(self, dt: float) -> None:
        if dt <= 0.0:
            return
        self.time += dt
        for e in self._entities:
            if not e.alive:
                continue
            body = e.body
            if body is not None and not body.is_static:
                body.vel_y += self.gravity * dt
                e.pos.y += body.vel_y * dt
            if e.motion is not None:
                e.pos += e.motion.velocity() * dt
            if e.floating is not None:
                e.pos.y = e.floating.base_y + e.floating.offset_at(self.time)
            if body is not None and not body.is_static:
                body.grounded = False
                self._resolve(e)
        self._entities = [e for e in self._entities if e.alive]

    def _solids_for(self, entity: Entity) -> Iterator[Entity]:
        wanted = entity.body.collides_with
        for other in self._entities:
            if other is entity or not other.alive or other.body is None:
                continue
            if other.body.is_static or (wanted and other.tags & wanted):
                yield other

    def _resolve(self, entity: Entity) -> None:
        body = entity.body
        for solid in self._solids_for(entity):
            a = entity.bounds()
            b = solid.bounds()
            if not a.overlaps(b):
                continue
            push_up = a.bottom - b.top
            push_down = b.bottom - a.top
            push_left = a.right - b.left
            push_right = b.right - a.left
            smallest = min(push_up, push_down, push_left, push_right)
            if smallest == push_up:
                entity.pos.y -= push_up
                if body.vel_y > 0:
                    body.vel_y = 0.0
                body.grounded = True
            elif smallest == push_down:
                entity.pos.y += push_down
                if body.vel_y < 0:
                    body.vel_y = 0.0
            elif smallest == push_left:
                entity.pos.x -= push_left
            else:
                entity.pos.x += push_right


__all__ = ["PhysicsWorld"]
