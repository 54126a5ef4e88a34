from __future__ import annotations

import random

import pytest

from config import (
    GROUND_Y,
    MAX_OBSTACLES,
    MAX_PILLS,
    OBSTACLE_SPAWN_X,
    OBSTACLE_SPEEDS,
    PILL_MAX_Y,
    PILL_MIN_Y,
    PILL_SPAWN_X,
)
from core.physics import PhysicsWorld
from game.spawner import Spawner


def test_obstacle_spawns_at_the_right_edge_on_the_ground(assets) -> None:
    world = PhysicsWorld()
    spawner = Spawner(world, assets, rng=random.Random(7))
    box = spawner.spawn_obstacle()

    assert box in world
    assert spawner.obstacles == [box]
    assert box.pos.x == OBSTACLE_SPAWN_X
    assert box.bounds().bottom == pytest.approx(GROUND_Y)
    assert box.data["passed"] is False
    assert box.motion.speed in OBSTACLE_SPEEDS


def test_obstacle_speeds_come_from_the_fixed_set(assets) -> None:
    spawner = Spawner(PhysicsWorld(), assets, rng=random.Random(1))
    speeds = {spawner.spawn_obstacle().motion.speed for _ in range(30)}
    assert speeds <= set(OBSTACLE_SPEEDS)
    assert len(speeds) > 1


def test_timers_fire_independently(assets, fixed_random) -> None:
    spawner = Spawner(PhysicsWorld(), assets, rng=fixed_random(0.1))
    spawner.update(0.5)
    assert spawner.obstacles == []

    spawner.update(0.5)
    assert len(spawner.obstacles) == 1
    assert spawner.pills == []

    spawner.update(4.5)
    assert len(spawner.obstacles) == 5
    assert len(spawner.pills) == 1


def test_pill_is_a_coin_flip(assets, fixed_random) -> None:
    spawner = Spawner(PhysicsWorld(), assets, rng=fixed_random(0.6, 0.4, 0.5))
    assert spawner.maybe_spawn_pill() is None
    pill = spawner.maybe_spawn_pill()
    assert pill is not None
    assert spawner.pills == [pill]


def test_pill_height_stays_in_band(assets) -> None:
    world = PhysicsWorld()
    spawner = Spawner(world, assets, rng=random.Random(3))
    for _ in range(MAX_PILLS):
        pill = spawner.spawn_pill()
        assert pill.pos.x == PILL_SPAWN_X
        assert PILL_MIN_Y <= pill.floating.base_y < PILL_MAX_Y
        assert pill.body is None


def test_spawns_stop_at_the_cap(assets) -> None:
    spawner = Spawner(PhysicsWorld(), assets, rng=random.Random(2))
    for _ in range(MAX_OBSTACLES + 5):
        spawner.spawn_obstacle()
    assert len(spawner.obstacles) == MAX_OBSTACLES

    spawner.obstacles[0].destroy()
    assert spawner.spawn_obstacle() is not None


def test_reset_clears_lists_and_world(assets) -> None:
    world = PhysicsWorld()
    spawner = Spawner(world, assets, rng=random.Random(4))
    spawner.spawn_obstacle()
    spawner.spawn_pill()
    spawner.reset()
    assert spawner.obstacles == []
    assert spawner.pills == []
    assert len(world) == 0
