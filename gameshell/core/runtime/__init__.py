"""
Runtime configuration exports.

Provides game-wide constants. All exports are lightweight class constants
with no initialization overhead.
"""

from gameshell.core.runtime.game_settings import (
    Display,
    Fonts,
    Physics,
    Input,
    Layers,
    MenuStyle,
    Debug,
)

__all__ = [
    # Display & Rendering
    'Display',
    'Layers',
    'Fonts',
    'MenuStyle',
    # Configuration
    'Physics',
    'Input',
    # Debug
    'Debug',
]
