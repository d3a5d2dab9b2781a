"""
info_scene.py
-------------
Informational pages reachable from the main menu (How to Play, Credits).
"""

import pygame

from gameshell.core.runtime.base_scene import BaseScene
from gameshell.core.runtime.game_settings import Display, Input, Layers, MenuStyle
from gameshell.graphics.text import render_lines, render_text
from gameshell.menu.menu_config import DEFAULT_MENU_SCREEN, get_page
from gameshell.scenes.transitions import FadeTransition


def is_dismiss_event(event) -> bool:
    """Any key press, or a press of the pointer button (not the wheel)."""
    if event.type == pygame.KEYDOWN:
        return True
    return event.type == pygame.MOUSEBUTTONDOWN and event.button == Input.POINTER_BUTTON


class InfoScene(BaseScene):
    """Title plus lines of text from the menu screen `pages` section."""

    PAGE_KEY = None
    RETURN_SCENE = "Menu"

    def on_load(self, **scene_data):
        screen = self.services.get_global("menu_screen", DEFAULT_MENU_SCREEN)
        self.page = get_page(screen, self.PAGE_KEY)
        self.leaving = False

        self.title_surf = render_text(self.page["title"], MenuStyle.TITLE)
        self.body_surf = render_lines(self.page["lines"], MenuStyle.INSTRUCTION, line_spacing=12)

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
            self.body_surf, self.body_surf.get_rect(center=(cx, Display.HEIGHT // 2)), layer=Layers.UI
        )

    def handle_event(self, event):
        if self.leaving:
            return
        if is_dismiss_event(event):
            self.leaving = True
            self.scene_manager.set_scene(self.RETURN_SCENE, transition=FadeTransition(0.3))


class HowToScene(InfoScene):
    PAGE_KEY = "how_to"


class CreditsScene(InfoScene):
    PAGE_KEY = "credits"
