"""
boot_scene.py
-------------
First scene: loads configuration and shares it through the service locator.

The menu definition is turned into MenuEntry objects here, so a bad
command name or an empty entry list stops the game at boot instead of
when the menu first loads.
"""

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.base_scene import BaseScene
from gameshell.core.runtime.game_settings import Display
from gameshell.core.services.config_manager import build_file_index, load_config
from gameshell.menu.menu_config import DEFAULT_MENU_SCREEN, build_menu_entries


DEFAULT_GAME_OPTIONS = {
    "title": Display.CAPTION,
    "fps": Display.FPS,
    "window_size": Display.DEFAULT_WINDOW_SIZE,
}

DEFAULT_ASSET_MANIFEST = {"images": []}


class BootScene(BaseScene):
    """Loads game options, asset manifest and menu screen, then hands off to Loading."""

    NEXT_SCENE = "Loading"

    def on_enter(self):
        """
        Raises:
            ValueError: If the menu screen has no entries, an entry without
                a label, or an unknown command
        """
        build_file_index()

        options = load_config("game_options.json", DEFAULT_GAME_OPTIONS)
        manifest = load_config("assets.json", DEFAULT_ASSET_MANIFEST)
        menu_screen = load_config("screens/main_menu.yaml", DEFAULT_MENU_SCREEN)

        entries = build_menu_entries(menu_screen)
        if not entries:
            raise ValueError("Menu screen defines no entries")

        self.services.register_global("game_options", options)
        self.services.register_global("asset_manifest", manifest)
        self.services.register_global("menu_screen", menu_screen)
        self.services.register_global("menu_entries", entries)

        if self.display:
            self.display.set_caption(options["title"])

        DebugLogger.system(
            f"Boot complete: '{options['title']}', {len(entries)} menu entries",
            category="loading",
        )

    def update(self, dt: float):
        """Switch on the first update so the boot scene is fully entered first."""
        self.scene_manager.set_scene(self.NEXT_SCENE)

    def draw(self, draw_manager):
        pass

    def handle_event(self, event):
        pass
