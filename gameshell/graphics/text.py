"""
text.py
-------
Cached pygame font lookup and styled text rendering.

Styles are (font_size, color, bold) tuples as defined in MenuStyle.
"""

import os
from typing import Dict, Tuple

import pygame

from gameshell.core.runtime.game_settings import Fonts


_font_cache: Dict[Tuple[str, int, bool], pygame.font.Font] = {}


def get_font(size: int, bold: bool = False, font_name: str = None) -> pygame.font.Font:
    """Get or create cached font by name, size and weight."""
    if font_name is None:
        font_name = Fonts.DEFAULT

    font_path = os.path.join(Fonts.DIR, font_name) if font_name else None

    cache_key = (font_path, size, bold)
    if cache_key not in _font_cache:
        try:
            font = pygame.font.Font(font_path, size)
        except (FileNotFoundError, pygame.error):
            font = pygame.font.Font(Fonts.FALLBACK, size)
        font.set_bold(bold)
        _font_cache[cache_key] = font
    return _font_cache[cache_key]


def render_text(text: str, style) -> pygame.Surface:
    """Render a single line of text in the given style."""
    size, color, bold = style
    return get_font(size, bold).render(text, True, color)


def render_lines(lines, style, line_spacing: int = 6) -> pygame.Surface:
    """Render multiple lines centered on one transparent surface."""
    rendered = [render_text(line, style) for line in lines]
    if not rendered:
        return pygame.Surface((1, 1), pygame.SRCALPHA)

    width = max(s.get_width() for s in rendered)
    height = sum(s.get_height() for s in rendered) + line_spacing * (len(rendered) - 1)

    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    y = 0
    for line_surf in rendered:
        surface.blit(line_surf, line_surf.get_rect(midtop=(width // 2, y)))
        y += line_surf.get_height() + line_spacing
    return surface


def clear_font_cache():
    """Drop cached fonts (required after pygame.font.quit())."""
    _font_cache.clear()
