from __future__ import annotations

import pygame
import pytest

from game.controller import SceneController, build_controller
from game.persistence import MemoryHighScoreStore
from game.scenes import GAME, GAME_OVER, START, GameOverScene, GameScene, StartScene
from game.session import GameSession

DT = 1.0 / 60.0


@pytest.fixture
def controller(session, assets) -> SceneController:
    return build_controller(session, assets)


def _start_game(controller: SceneController) -> GameScene:
    controller.on_key_press("r")
    assert controller.active_name == GAME
    return controller.active


def _settle(controller: SceneController, ticks: int = 60) -> None:
    for _ in range(ticks):
        controller.update(DT)


def _pass_boxes(scene: GameScene, count: int) -> None:
    for _ in range(count):
        box = scene.spawner.spawn_obstacle()
        box.pos.x = 100
    scene.update(0.001)


def _collect_pill(scene: GameScene) -> None:
    pill = scene.spawner.spawn_pill()
    pill.floating.base_y = scene.player.pos.y
    pill.pos.x = scene.player.pos.x
    scene.update(0.001)


def test_starts_on_the_start_scene(controller) -> None:
    assert controller.active_name == START
    assert isinstance(controller.active, StartScene)
    assert set(controller.scene_names) == {START, GAME, GAME_OVER}


def test_only_the_restart_key_starts_the_game(controller) -> None:
    controller.on_key_press("x")
    controller.on_key_press(" ", pygame.K_SPACE)
    assert controller.active_name == START
    _start_game(controller)


def test_uppercase_r_event_starts_the_game(controller) -> None:
    controller.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r, unicode="R"))
    assert controller.active_name == GAME


def test_start_scene_scrolls_its_background(controller) -> None:
    scene = controller.active
    controller.update(1.0)
    assert scene.background.leading.pos.x == pytest.approx(-100.0)


def test_game_entry_resets_score_and_builds_player(controller, session) -> None:
    session.score = 99
    scene = _start_game(controller)
    assert session.score == 0
    assert scene.player is not None
    assert scene.player in scene.world
    assert scene.obstacles == [] and scene.pills == []
    assert scene.hud.text == "SCORE: 0 | HIGH SCORE: 0"


def test_space_jumps_only_when_grounded(controller, sound_calls) -> None:
    scene = _start_game(controller)
    assert not scene.jump()
    assert ("play", "jump", 0.2, 0) not in sound_calls
    _settle(controller, 60)
    assert scene.player.is_grounded()
    controller.on_key_press(" ", pygame.K_SPACE)
    assert scene.player.body.vel_y < 0
    assert sound_calls[-1] == ("play", "jump", 0.2, 0)


def test_game_spawns_boxes_every_second(controller) -> None:
    scene = _start_game(controller)
    _settle(controller, 61)
    assert len(scene.obstacles) == 1


def test_leaving_the_screen_ends_the_game(controller, session, sound_calls) -> None:
    scene = _start_game(controller)
    _settle(controller, 30)
    scene.player.pos.x = -500
    controller.update(DT)
    assert controller.active_name == GAME_OVER
    assert isinstance(controller.active, GameOverScene)
    assert ("play", "destroy", None, 0) in sound_calls
    # the old world was torn down with its scene
    assert len(scene.world) == 0


def test_scenario_below_high_score(assets, sound_calls) -> None:
    store = MemoryHighScoreStore(50)
    session = GameSession(store)
    controller = build_controller(session, assets)
    scene = _start_game(controller)
    _settle(controller, 30)

    _pass_boxes(scene, 3)
    assert session.score == 3
    assert session.high_score == 50
    assert scene.hud.text == "SCORE: 3 | HIGH SCORE: 50"

    _collect_pill(scene)
    assert session.score == 13
    assert scene.pills == []
    assert sound_calls[-1] == ("play", "collect", 1.0, 0)

    scene.player.pos.x = -500
    controller.update(DT)
    assert controller.active_name == GAME_OVER
    assert "Final Score: 13" in controller.active.summary
    assert session.high_score == 50
    assert store.saves == []


def test_scenario_new_high_score_survives_restart(assets) -> None:
    store = MemoryHighScoreStore(50)
    session = GameSession(store)
    controller = build_controller(session, assets)
    scene = _start_game(controller)
    _settle(controller, 30)

    session.score = 50
    _pass_boxes(scene, 1)
    assert session.score == 51
    assert session.high_score == 51
    assert store.value == 51

    scene.player.pos.x = -500
    controller.update(DT)
    assert controller.active_name == GAME_OVER
    assert session.high_score >= session.score

    controller.on_key_press("r")
    assert controller.active_name == GAME
    assert session.score == 0
    assert session.high_score == 51
    assert controller.active.hud.text == "SCORE: 0 | HIGH SCORE: 51"


def test_restart_key_is_ignored_during_play(controller) -> None:
    scene = _start_game(controller)
    controller.on_key_press("r")
    assert controller.active is scene


def test_unknown_scene_is_an_error() -> None:
    controller = SceneController()
    with pytest.raises(KeyError):
        controller.go("credits")


def test_game_entry_restarts_the_racing_track(controller, sound_calls) -> None:
    from sound.sound_utils import Sounds

    scene = _start_game(controller)
    assert sound_calls[-2:] == [("stop_music",), ("play", "racing", 0.5, -1)]
    assert Sounds.current_music() == "racing"

    scene.player.pos.x = -500
    controller.update(DT)
    assert controller.active_name == GAME_OVER
    del sound_calls[:]

    controller.on_key_press("r")
    assert controller.active_name == GAME
    assert sound_calls == [("stop_music",), ("play", "racing", 0.5, -1)]
    assert Sounds.current_music() == "racing"


def test_game_over_summary_is_built_on_entry(session, assets) -> None:
    scene = GameOverScene(session, assets)
    assert scene.summary == ""
    session.add_points(4)
    scene.enter()
    assert "Final Score: 4" in scene.summary
