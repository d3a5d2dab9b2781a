"""
display_manager.py
------------------
Window management and letterboxed scaling of a fixed-size game surface.

Responsibilities:
- Window creation and fullscreen toggling
- Aspect ratio preservation with letterboxing
- Screen-to-game coordinate conversion (pointer hit testing)
- Present the game surface each frame
"""

import pygame

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.game_settings import Display


class DisplayManager:
    """
    Renders a logical game surface into a window of any size.

    The game surface keeps its logical resolution; it is scaled uniformly
    to fit the window and centered, with black bars filling the rest.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, game_width=Display.WIDTH, game_height=Display.HEIGHT,
                 window_size=Display.DEFAULT_WINDOW_SIZE):
        """
        Args:
            game_width: Logical game resolution width
            game_height: Logical game resolution height
            window_size: Initial window preset ("small", "medium", "large")
        """
        DebugLogger.init_entry("DisplayManager")

        self.game_width = game_width
        self.game_height = game_height
        self.game_surface = pygame.Surface((game_width, game_height))

        self.window = None
        self.window_size_preset = window_size
        self.is_fullscreen = False

        # Scaling state (see _calculate_scale)
        self.scale = 1.0
        self.offset_x = 0
        self.offset_y = 0
        self.scaled_size = (game_width, game_height)

        self._create_window()

    # ===========================================================
    # Window Management
    # ===========================================================

    def toggle_fullscreen(self):
        """Toggle between windowed and fullscreen modes."""
        self._create_window(fullscreen=not self.is_fullscreen)
        state = "ON" if self.is_fullscreen else "OFF"
        DebugLogger.state(f"Toggled fullscreen → {state}", category="display")

    def set_caption(self, caption: str):
        pygame.display.set_caption(caption)

    def _create_window(self, fullscreen: bool = False):
        """Create pygame window and recompute scaling."""
        if fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            size = Display.WINDOW_SIZES.get(
                self.window_size_preset, (self.game_width, self.game_height)
            )
            self.window = pygame.display.set_mode(size)
        self.is_fullscreen = fullscreen

        self._calculate_scale()

        mode = "Fullscreen" if fullscreen else "Windowed ({}x{})".format(*self.window.get_size())
        DebugLogger.init_sub(f"Display Mode: {mode}", level=1)

    def _calculate_scale(self):
        """Fit the game surface inside the window, centered."""
        window_width, window_height = self.window.get_size()

        self.scale = min(window_width / self.game_width, window_height / self.game_height)
        self.scaled_size = (
            int(self.game_width * self.scale),
            int(self.game_height * self.scale),
        )
        self.offset_x = (window_width - self.scaled_size[0]) // 2
        self.offset_y = (window_height - self.scaled_size[1]) // 2

        DebugLogger.trace(
            f"Scale={self.scale:.3f}, Offset=({self.offset_x},{self.offset_y})",
            category="display"
        )

    # ===========================================================
    # Rendering Pipeline
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        """Get the logical game surface."""
        return self.game_surface

    def render(self):
        """Scale the game surface into the window and flip."""
        self.window.fill((0, 0, 0))
        if self.scaled_size == (self.game_width, self.game_height):
            self.window.blit(self.game_surface, (self.offset_x, self.offset_y))
        else:
            scaled = pygame.transform.scale(self.game_surface, self.scaled_size)
            self.window.blit(scaled, (self.offset_x, self.offset_y))
        pygame.display.flip()

    # ===========================================================
    # Coordinate Conversion
    # ===========================================================

    def screen_to_game_pos(self, screen_x: float, screen_y: float) -> tuple:
        """
        Convert window coordinates to game-space coordinates.

        Accounts for letterboxing offset and scale factor.
        """
        game_x = (screen_x - self.offset_x) / self.scale
        game_y = (screen_y - self.offset_y) / self.scale
        return game_x, game_y

    def is_in_game_area(self, screen_x: float, screen_y: float) -> bool:
        """False for positions on the letterbox bars."""
        game_x, game_y = self.screen_to_game_pos(screen_x, screen_y)
        return 0 <= game_x <= self.game_width and 0 <= game_y <= self.game_height
