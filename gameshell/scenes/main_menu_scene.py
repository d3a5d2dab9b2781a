"""
main_menu_scene.py
------------------
Main menu - title, selectable entries, instruction text.

Input flows pygame event -> MenuEventTranslator -> MenuInputRouter ->
MenuController; confirmed commands come back through _on_command and
become scene switches.
"""

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.base_scene import BaseScene
from gameshell.core.runtime.game_settings import Display, Layers, MenuStyle
from gameshell.graphics.text import render_lines, render_text
from gameshell.menu.menu_config import DEFAULT_MENU_SCREEN, build_menu_entries, get_instruction
from gameshell.menu.menu_controller import MenuController, NavigationCommand
from gameshell.menu.menu_input import MenuEventTranslator, MenuInputRouter
from gameshell.menu.menu_presenter import TextMenuPresenter
from gameshell.scenes.transitions import FadeTransition


COMMAND_SCENES = {
    NavigationCommand.START_GAME: "Game",
    NavigationCommand.HOW_TO: "HowTo",
    NavigationCommand.CREDITS: "Credits",
}


class MainMenuScene(BaseScene):
    """Main menu scene with keyboard and pointer navigation."""

    TRANSITION_TIME = 0.4

    def __init__(self, services):
        super().__init__(services)
        self.input_context = "ui"
        self.controller = None
        self.presenter = None
        self.router = None
        self.translator = None

    def on_load(self, **scene_data):
        """Build a fresh menu; selection starts at the first entry."""
        screen = self.services.get_global("menu_screen", DEFAULT_MENU_SCREEN)
        options = self.services.get_global("game_options", {})

        entries = self.services.get_global("menu_entries") or build_menu_entries(screen)
        self.presenter = TextMenuPresenter([entry.label for entry in entries])
        self.controller = MenuController(entries, self.presenter, self._on_command)
        self.router = MenuInputRouter(self.controller)
        self.translator = MenuEventTranslator(self.input_manager, self.presenter.hit_test)

        self._build_static_text(options.get("title", Display.CAPTION), get_instruction(screen))

    def _build_static_text(self, title: str, instruction: str):
        self.title_surf = render_text(title, MenuStyle.TITLE)
        self.title_rect = self.title_surf.get_rect(
            center=(Display.WIDTH // 2, int(Display.HEIGHT * MenuStyle.TITLE_Y_RATIO))
        )

        self.instruction_surf = render_lines(instruction.splitlines(), MenuStyle.INSTRUCTION)
        self.instruction_rect = self.instruction_surf.get_rect(
            center=(Display.WIDTH // 2, Display.HEIGHT - MenuStyle.INSTRUCTION_BOTTOM_MARGIN)
        )

    def on_exit(self):
        """Discard the menu state."""
        self.controller = None
        self.router = None
        self.translator = None

    # ===========================================================
    # Navigation
    # ===========================================================

    def _on_command(self, command: NavigationCommand):
        """Switch to the scene bound to a confirmed command."""
        target = COMMAND_SCENES.get(command)
        if target is None:
            DebugLogger.warn(f"No scene bound to {command}", category="menu")
            return

        self.scene_manager.set_scene(target, transition=FadeTransition(self.TRANSITION_TIME))

    # ===========================================================
    # Frame Methods
    # ===========================================================

    def update(self, dt: float):
        pass

    def draw(self, draw_manager):
        draw_manager.queue_draw(self.title_surf, self.title_rect, layer=Layers.UI)
        draw_manager.queue_draw(self.instruction_surf, self.instruction_rect, layer=Layers.UI)
        self.presenter.draw(draw_manager)

    def handle_event(self, event):
        if self.translator is None:
            return

        menu_event = self.translator.translate(event)
        if menu_event is not None:
            self.router.dispatch(menu_event)
