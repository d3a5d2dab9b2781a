"""
menu_presenter.py
-----------------
Presentation layer for menu entries.

The menu controller only ever calls set_active(index). Presenters decide
how the active entry looks; every other entry is drawn in one uniform
inactive style.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import pygame

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.game_settings import Display, Layers, MenuStyle
from gameshell.graphics.text import render_text


class MenuPresenter(ABC):
    """Interface between the selection state machine and rendering."""

    @abstractmethod
    def set_active(self, index: int):
        """Mark entry `index` active and every other entry inactive."""
        pass

    def draw(self, draw_manager):
        """Queue entry visuals for this frame."""
        pass

    def hit_test(self, pos) -> Optional[int]:
        """Return the entry index under `pos`, or None."""
        return None


class RecordingPresenter(MenuPresenter):
    """Headless presenter that records every highlight refresh."""

    def __init__(self, count: int = 0):
        self.count = count
        self.calls: List[int] = []
        self.active_index: Optional[int] = None

    def set_active(self, index: int):
        self.calls.append(index)
        self.active_index = index

    def active_flags(self) -> List[bool]:
        """One flag per entry; exactly one is True once set_active ran."""
        return [i == self.active_index for i in range(self.count)]


class TextMenuPresenter(MenuPresenter):
    """
    Renders menu labels as centered, vertically stacked pygame text.

    The active entry uses MenuStyle.ACTIVE (larger, bold, blue); all
    others use MenuStyle.INACTIVE.
    """

    def __init__(
        self,
        labels: Sequence[str],
        center_x: float = Display.WIDTH / 2,
        start_y: float = None,
        spacing: float = None,
        active_style=MenuStyle.ACTIVE,
        inactive_style=MenuStyle.INACTIVE,
    ):
        """
        Args:
            labels: Entry labels in display order
            center_x: Horizontal center for all entries
            start_y: Vertical center of the first entry
            spacing: Vertical distance between entry centers
            active_style: (font_size, color, bold) for the active entry
            inactive_style: (font_size, color, bold) for inactive entries
        """
        self.labels = tuple(labels)
        self.center_x = center_x

        if start_y is None:
            start_y = Display.HEIGHT * (MenuStyle.TITLE_Y_RATIO + MenuStyle.ENTRY_GAP_RATIO)
        if spacing is None:
            spacing = Display.HEIGHT * MenuStyle.ENTRY_SPACING_RATIO
        self.start_y = start_y
        self.spacing = spacing

        self.active_style = active_style
        self.inactive_style = inactive_style

        self.active_index: Optional[int] = None
        self._surfaces: List[pygame.Surface] = []
        self._rects: List[pygame.Rect] = []

        # Everything starts inactive until the controller picks an entry
        self._rebuild()

    # ===========================================================
    # MenuPresenter
    # ===========================================================

    def set_active(self, index: int):
        """Restyle entries so only `index` is active."""
        if not 0 <= index < len(self.labels):
            raise IndexError(f"No menu entry at index {index}")

        self.active_index = index
        self._rebuild()
        DebugLogger.trace(f"Highlighted '{self.labels[index]}'", category="render")

    def draw(self, draw_manager):
        for surface, rect in zip(self._surfaces, self._rects):
            draw_manager.queue_draw(surface, rect, layer=Layers.MENU)

    def hit_test(self, pos) -> Optional[int]:
        if pos is None:
            return None
        for i, rect in enumerate(self._rects):
            if rect.collidepoint(pos):
                return i
        return None

    # ===========================================================
    # Rendering
    # ===========================================================

    def is_active(self, index: int) -> bool:
        return index == self.active_index

    def entry_rect(self, index: int) -> pygame.Rect:
        return self._rects[index]

    def _rebuild(self):
        """Render every label in its current style and re-center it."""
        self._surfaces.clear()
        self._rects.clear()

        for i, label in enumerate(self.labels):
            style = self.active_style if self.is_active(i) else self.inactive_style
            surface = render_text(label, style)
            center = (int(self.center_x), int(self.start_y + i * self.spacing))
            self._surfaces.append(surface)
            self._rects.append(surface.get_rect(center=center))
