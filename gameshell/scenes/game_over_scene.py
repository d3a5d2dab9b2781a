"""
game_over_scene.py
------------------
Shows the survival time; any key or click returns to the menu.
"""

from gameshell.core.runtime.base_scene import BaseScene
from gameshell.core.runtime.game_settings import Display, Layers, MenuStyle
from gameshell.graphics.text import render_text
from gameshell.scenes.info_scene import is_dismiss_event
from gameshell.scenes.transitions import FadeTransition


class GameOverScene(BaseScene):
    """Final score screen."""

    RETURN_SCENE = "Menu"

    def on_load(self, survived: float = 0.0, **scene_data):
        self.survived = survived
        self.leaving = False
        self.title_surf = render_text("Game Over", MenuStyle.TITLE)
        self.score_surf = render_text(f"You survived {survived:.1f} seconds", MenuStyle.INACTIVE)
        self.hint_surf = render_text("Press any key to return to the menu", MenuStyle.INSTRUCTION)

    def update(self, dt: float):
        pass

    def draw(self, draw_manager):
        cx = Display.WIDTH // 2
        draw_manager.queue_draw(
            self.title_surf,
            self.title_surf.get_rect(center=(cx, int(Display.HEIGHT * MenuStyle.TITLE_Y_RATIO))),
            layer=Layers.UI,
        )
        draw_manager.queue_draw(
            self.score_surf, self.score_surf.get_rect(center=(cx, Display.HEIGHT // 2)), layer=Layers.UI
        )
        draw_manager.queue_draw(
            self.hint_surf,
            self.hint_surf.get_rect(center=(cx, Display.HEIGHT - MenuStyle.INSTRUCTION_BOTTOM_MARGIN)),
            layer=Layers.UI,
        )

    def handle_event(self, event):
        if self.leaving:
            return
        if is_dismiss_event(event):
            self.leaving = True
            self.scene_manager.set_scene(self.RETURN_SCENE, transition=FadeTransition(0.4))
