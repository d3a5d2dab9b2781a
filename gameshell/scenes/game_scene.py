"""
game_scene.py
-------------
Placeholder gameplay: a survival timer that ends on request.
"""

import pygame

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.base_scene import BaseScene
from gameshell.core.runtime.game_settings import Display, Layers, MenuStyle
from gameshell.graphics.text import render_text
from gameshell.scenes.transitions import FadeTransition


class GameScene(BaseScene):
    """Counts survival time until the player ends the run."""

    HINT = "Press [ESC] or [ENTER] to end the run"

    def __init__(self, services):
        super().__init__(services)
        self.input_context = "gameplay"
        self.elapsed = 0.0
        self.ended = False

    def on_load(self, **scene_data):
        self.hint_surf = render_text(self.HINT, MenuStyle.INSTRUCTION)

    def on_enter(self):
        DebugLogger.state("Run started", category="game_state")

    def update(self, dt: float):
        if not self.ended:
            self.elapsed += dt

    def end_run(self):
        if self.ended:
            return
        self.ended = True
        DebugLogger.state(f"Run ended after {self.elapsed:.1f}s", category="game_state")
        self.scene_manager.set_scene(
            "GameOver", transition=FadeTransition(0.5), survived=self.elapsed
        )

    def draw(self, draw_manager):
        timer = render_text(f"{self.elapsed:.1f}s", MenuStyle.TITLE)
        draw_manager.queue_draw(
            timer, timer.get_rect(center=(Display.WIDTH // 2, Display.HEIGHT // 2)), layer=Layers.UI
        )
        draw_manager.queue_draw(
            self.hint_surf,
            self.hint_surf.get_rect(center=(Display.WIDTH // 2, Display.HEIGHT - MenuStyle.INSTRUCTION_BOTTOM_MARGIN)),
            layer=Layers.UI,
        )

    def handle_event(self, event):
        if event.type != pygame.KEYDOWN:
            return
        if self.input_manager.action_for_key(event.key) == "end_run":
            self.end_run()
