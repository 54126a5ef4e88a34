"""Scene state machine: start -> game -> gameover -> game ...

Scenes are built fresh from a factory on every activation, so whatever the old
scene owned (world, spawner timers, background) goes away with it. A switch
requested while a scene is updating is queued and applied after the update.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from core.scene import Scene, SceneRequest
from game.assets import GameAssets
from game.scenes import GAME, GAME_OVER, START, GameOverScene, GameScene, StartScene
from game.session import GameSession

SceneFactory = Callable[[SceneRequest], Scene]


class SceneController:
    def __init__(self) -> None:
        self._factories: Dict[str, SceneFactory] = {}
        self.active: Optional[Scene] = None
        self.active_name: Optional[str] = None
        self._pending: Optional[str] = None

    def register(self, name: str, factory: SceneFactory) -> None:
        self._factories[name] = factory

    @property
    def scene_names(self) -> list[str]:
        return list(self._factories)

    def request(self, name: str) -> None:
        if name not in self._factories:
            raise KeyError(f"unknown scene '{name}'")
        self._pending = name

    def go(self, name: str) -> Scene:
        """Switch immediately: exit the old scene, build and enter the new one."""
        factory = self._factories.get(name)
        if factory is None:
            raise KeyError(f"unknown scene '{name}'")
        if self.active is not None:
            self.active.exit()
        self._pending = None
        scene = factory(self.request)
        self.active = scene
        self.active_name = name
        print(f"[Scenes] -> {name}")
        scene.enter()
        return scene

    def _apply_pending(self) -> None:
        if self._pending is not None:
            self.go(self._pending)

    # ------------------------------------------------------------------
    def handle_event(self, event) -> None:
        if self.active is not None:
            self.active.handle_event(event)
        self._apply_pending()

    def on_key_press(self, key: str, keycode: Optional[int] = None) -> None:
        if self.active is not None:
            self.active.on_key_press(key, keycode)
        self._apply_pending()

    def update(self, dt: float) -> None:
        if self.active is not None:
            self.active.update(dt)
        self._apply_pending()

    def render(self, sprites, text) -> None:  # pragma: no cover - visual
        if self.active is not None:
            self.active.render(sprites, text)


def build_controller(session: GameSession, assets: GameAssets) -> SceneController:
    """Register the three runner scenes and activate the start scene."""
    controller = SceneController()
    controller.register(START, lambda req: StartScene(session, assets, req))
    controller.register(GAME, lambda req: GameScene(session, assets, req))
    controller.register(GAME_OVER, lambda req: GameOverScene(session, assets, req))
    controller.go(START)
    return controller


__all__ = ["SceneController", "build_controller"]
