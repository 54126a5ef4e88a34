from typing import List, Callable, Optional

import pygame

UpdateFn = Callable[[float], None]
SceneRequest = Callable[[str], None]


class Scene:
    """Base scene: per-tick updaters, key dispatch and a render hook.

    Scenes ask for a transition through `request_scene(name)`; the controller
    applies it once the current tick is over, so a scene never disappears in
    the middle of its own update.
    """

    name: str = "scene"

    def __init__(self, request_scene: Optional[SceneRequest] = None) -> None:
        self.updaters: List[UpdateFn] = []
        self._request_scene = request_scene
        self.elapsed = 0.0

    def request_scene(self, name: str) -> None:
        if self._request_scene is not None:
            self._request_scene(name)

    # ------------------------------------------------------------------
    def enter(self) -> None:
        """Scene-entry side effects (music, text); called once on activation."""

    def exit(self) -> None:
        """Called when the controller switches away from this scene."""

    def update(self, dt: float) -> None:
        self.elapsed += dt
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override on_key_press instead)
    def handle_event(self, event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        key = getattr(event, "unicode", "") or ""
        if not key:
            try:
                key = pygame.key.name(event.key)
            except pygame.error:
                key = ""
        self.on_key_press(key.lower(), getattr(event, "key", None))

    def on_key_press(self, key: str, keycode: Optional[int] = None) -> None:
        pass

    # Scenes own their full draw pass; the engine hands them the renderers
    def render(self, sprites, text) -> None:  # pragma: no cover - visual
        pass
