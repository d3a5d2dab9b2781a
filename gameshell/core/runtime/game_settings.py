"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Game Shell"
    BACKGROUND_COLOR = (0, 0, 0)

    WINDOW_SIZES = {
        "small": (1280, 720),
        "medium": (1920, 1080),
        "large": (2560, 1440),
    }
    DEFAULT_WINDOW_SIZE: str = "small"


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DIR: str = "assets/fonts"
    DEFAULT: str = None  # None = pygame default font
    FALLBACK: str = None


# ===========================================================
# Timing
# ===========================================================

class Physics:
    """Update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Input Configuration
# ===========================================================

class Input:
    """Pointer configuration."""
    POINTER_BUTTON: int = 1  # Left mouse button


# ===========================================================
# Render Layers
# ===========================================================

class Layers:
    """Draw order for layered rendering (lower = first)."""
    BACKGROUND: int = 0
    MENU: int = 100
    UI: int = 200
    TRANSITION: int = 9999


# ===========================================================
# Menu Styles
# ===========================================================

class MenuStyle:
    """
    Text styles for the main menu.

    Each style is (font_size, color, bold).
    """
    TITLE = (70, (255, 255, 0), True)
    INACTIVE = (40, (255, 255, 0), False)
    ACTIVE = (50, (0, 0, 255), True)
    INSTRUCTION = (20, (39, 255, 0), False)

    TITLE_Y_RATIO: float = 0.2     # Title center as fraction of screen height
    ENTRY_GAP_RATIO: float = 0.2   # Gap between title and first entry
    ENTRY_SPACING_RATIO: float = 0.1
    INSTRUCTION_BOTTOM_MARGIN: int = 46


# ===========================================================
# Debug Configuration
# ===========================================================

class Debug:
    """Debug and profiling options."""
    PROFILING_ENABLED: bool = False
    FRAME_TIME_WARNING: float = 16.67  # ms
