"""
service_locator.py
------------------
What every scene gets handed on construction: the scene manager, the
three core managers, and the data BootScene shares with later scenes.

Shared data keys:
    game_options     dict from game_options.json
    asset_manifest   dict from assets.json
    menu_screen      dict from screens/main_menu.yaml
    menu_entries     List[MenuEntry] built and checked at boot
"""

from typing import Any


class ServiceLocator:
    """Per-SceneManager container passed to every BaseScene."""

    __slots__ = (
        "scene_manager",
        "display_manager",
        "input_manager",
        "draw_manager",
        "_shared",
    )

    def __init__(self, scene_manager):
        self.scene_manager = scene_manager
        self.display_manager = None
        self.input_manager = None
        self.draw_manager = None
        self._shared = {}

    def register_managers(self, display=None, input_mgr=None, draw=None):
        """Attach core managers; None leaves the current one in place."""
        if display:
            self.display_manager = display
        if input_mgr:
            self.input_manager = input_mgr
        if draw:
            self.draw_manager = draw

    # ===========================================================
    # Shared Data
    # ===========================================================

    def register_global(self, name: str, value: Any) -> None:
        """Share `value` with every scene created afterwards."""
        self._shared[name] = value

    def get_global(self, name: str, default: Any = None) -> Any:
        return self._shared.get(name, default)
