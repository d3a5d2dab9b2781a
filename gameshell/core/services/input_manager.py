"""
input_manager.py
----------------
Context-aware key binding lookup for event-driven scenes.

Provides:
- Context-based bindings (gameplay, ui, system)
- O(1) key -> action lookup for the active context
- Pointer position conversion into game space
- Global hotkeys (fullscreen toggle)
"""

import pygame

from gameshell.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "end_run": [pygame.K_ESCAPE, pygame.K_RETURN],
    },
    "ui": {
        "navigate_up": [pygame.K_UP, pygame.K_w],
        "navigate_down": [pygame.K_DOWN, pygame.K_s],
        "confirm": [pygame.K_RETURN, pygame.K_SPACE, pygame.K_KP_ENTER],
    },
    "system": {
        "toggle_fullscreen": [pygame.K_F11],
    },
}


class InputManager:
    """
    Resolves raw key codes into named actions for the active context.

    Usage:
        action = input_manager.action_for_key(event.key)
        if action == "confirm":
            menu.confirm()
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None, display_manager=None):
        """
        Initialize input system.

        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
            display_manager: Reference for mouse coordinate conversion
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.display_manager = display_manager
        self.context = "ui"

        self._init_lookup_tables()
        self._validate_bindings()

    def _init_lookup_tables(self):
        """Build key -> action tables per context."""
        self._key_to_action_cache = {}

        for context_name, actions in self.key_bindings.items():
            key_to_action = {}
            for action_name, keys in actions.items():
                for key in keys:
                    key_to_action[key] = action_name
            self._key_to_action_cache[context_name] = key_to_action

        self._active_lookup = self._key_to_action_cache.get(self.context, {})

    def _validate_bindings(self):
        """Warn if system keys overlap with gameplay/ui contexts."""
        system_keys = set()
        for keys in self.key_bindings.get("system", {}).values():
            system_keys.update(keys)

        other_keys = set()
        for ctx in ("gameplay", "ui"):
            for keys in self.key_bindings.get(ctx, {}).values():
                other_keys.update(keys)

        overlap = system_keys & other_keys
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}")

    # ===========================================================
    # Context Management
    # ===========================================================

    def set_context(self, name: str):
        """
        Switch input context.

        Args:
            name: Context name ("gameplay", "ui")
        """
        if name not in self.key_bindings:
            DebugLogger.warn(f"Unknown context: {name}")
            return

        self.context = name
        self._active_lookup = self._key_to_action_cache[name]
        DebugLogger.state(f"Context switched to [{name.upper()}]", category="input")

    # ===========================================================
    # Public API: Action Queries
    # ===========================================================

    def action_for_key(self, key: int):
        """Return the action bound to `key` in the active context, or None."""
        return self._active_lookup.get(key)

    def to_game_pos(self, screen_pos) -> tuple:
        """
        Convert a window-space position into game coordinates.

        Returns:
            (x, y) tuple in game space (accounts for display scaling)
        """
        if self.display_manager:
            return self.display_manager.screen_to_game_pos(*screen_pos)
        return tuple(screen_pos)

    # ===========================================================
    # System Input (Global Hotkeys)
    # ===========================================================

    def handle_system_input(self, event, display) -> bool:
        """
        Handle global hotkeys independent of context.

        Args:
            event: pygame event to process
            display: DisplayManager for fullscreen toggle

        Returns:
            True if the event was consumed
        """
        if event.type != pygame.KEYDOWN:
            return False

        system_bindings = self.key_bindings.get("system", {})

        if event.key in system_bindings.get("toggle_fullscreen", ()):
            display.toggle_fullscreen()
            DebugLogger.action("Toggled fullscreen")
            return True

        return False
