"""
transitions.py
--------------
Scene transition effects.

SceneManager calls update(dt) once per fixed step until it returns True,
and draw() every frame in place of the scenes themselves.
"""

from abc import ABC, abstractmethod

import pygame

from gameshell.core.runtime.game_settings import Display, Layers


class Transition(ABC):
    """Timed effect between the outgoing and incoming scene."""

    def __init__(self, duration: float = 0.0):
        self.duration = duration
        self.elapsed = 0.0
        self.complete = False

    def update(self, dt: float) -> bool:
        """Advance the clock; True once the duration has passed."""
        self.elapsed += dt
        if self.elapsed >= self.duration:
            self.complete = True
        return self.complete

    @abstractmethod
    def draw(self, draw_manager, old_scene, new_scene):
        """Queue this frame's visuals. old_scene is None on the first switch."""

    def reset(self):
        self.elapsed = 0.0
        self.complete = False


class InstantTransition(Transition):
    """No animation - switch on the next update."""

    def draw(self, draw_manager, old_scene, new_scene):
        if new_scene:
            new_scene.draw(draw_manager)


class FadeTransition(Transition):
    """Fade old scene → color → new scene."""

    def __init__(self, duration: float = 0.5, color=(0, 0, 0)):
        super().__init__(duration)
        self.color = color
        self._overlay = None
        self._half = duration / 2

    def alpha(self) -> int:
        """Overlay opacity: rises to 255 at the midpoint, then falls back to 0."""
        if self._half <= 0:
            return 0
        if self.elapsed < self._half:
            return int(min(self.elapsed / self._half, 1.0) * 255)
        progress = min((self.elapsed - self._half) / self._half, 1.0)
        return int((1.0 - progress) * 255)

    def draw(self, draw_manager, old_scene, new_scene):
        if self._overlay is None:
            self._overlay = pygame.Surface(
                (Display.WIDTH, Display.HEIGHT), pygame.SRCALPHA
            )

        # First half shows the old scene, second half the new one
        scene = old_scene if self.elapsed < self._half else new_scene
        if scene:
            scene.draw(draw_manager)

        self._overlay.fill((*self.color[:3], self.alpha()))
        draw_manager.queue_draw(self._overlay, self._overlay.get_rect(), layer=Layers.TRANSITION)
