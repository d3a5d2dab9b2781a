"""
menu_input.py
-------------
Maps input to menu operations.

Two stages:
1. MenuEventTranslator turns pygame events into logical MenuInputEvents
   (keyboard bindings come from InputManager, pointer hits from the presenter).
2. MenuInputRouter dispatches logical events through a fixed
   input -> operation table built once per controller.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

import pygame

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.game_settings import Input


# ===========================================================
# Logical Input Events
# ===========================================================

class MenuInput(Enum):
    """Discrete menu inputs, independent of device."""
    NEXT = auto()
    PREVIOUS = auto()
    SELECT = auto()    # Pointer entered entry `index`
    CONFIRM = auto()
    CLICK = auto()     # Pointer pressed on entry `index`


_INDEXED_INPUTS = (MenuInput.SELECT, MenuInput.CLICK)


@dataclass(frozen=True)
class MenuInputEvent:
    """One logical menu input, optionally targeting an entry."""
    kind: MenuInput
    index: Optional[int] = None

    def __post_init__(self):
        if self.kind in _INDEXED_INPUTS and self.index is None:
            raise ValueError(f"{self.kind.name} requires an entry index")


# ===========================================================
# Router
# ===========================================================

class MenuInputRouter:
    """Dispatches MenuInputEvents to MenuController operations."""

    def __init__(self, controller):
        self.controller = controller
        self._operations = {
            MenuInput.NEXT: lambda event: controller.select_next(),
            MenuInput.PREVIOUS: lambda event: controller.select_previous(),
            MenuInput.SELECT: lambda event: controller.select_specific(event.index),
            MenuInput.CONFIRM: lambda event: controller.confirm(),
            MenuInput.CLICK: self._click,
        }

    def _click(self, event):
        """Select the clicked entry (even if already selected), then confirm."""
        self.controller.select_specific(event.index)
        return self.controller.confirm()

    def dispatch(self, event: MenuInputEvent):
        """
        Run the operation bound to `event.kind`.

        Returns:
            The emitted NavigationCommand for CONFIRM/CLICK, else None
        """
        operation = self._operations.get(event.kind)
        if operation is None:
            DebugLogger.warn(f"No menu operation bound to {event.kind}", category="menu")
            return None
        return operation(event)

    def bound_inputs(self):
        return frozenset(self._operations)


# ===========================================================
# pygame Event Translation
# ===========================================================

KEY_ACTION_TO_INPUT = {
    "navigate_down": MenuInput.NEXT,
    "navigate_up": MenuInput.PREVIOUS,
    "confirm": MenuInput.CONFIRM,
}


class MenuEventTranslator:
    """
    Converts raw pygame events into MenuInputEvents.

    Hover produces SELECT only when the pointer enters an entry, so moving
    within one entry does not re-select it.
    """

    def __init__(self, input_manager, hit_test: Callable[[tuple], Optional[int]]):
        """
        Args:
            input_manager: InputManager used for key bindings and pointer scaling
            hit_test: Maps a game-space position to an entry index or None
        """
        self.input_manager = input_manager
        self.hit_test = hit_test
        self._hovered: Optional[int] = None

    def translate(self, event) -> Optional[MenuInputEvent]:
        if event.type == pygame.KEYDOWN:
            return self._translate_key(event)
        if event.type == pygame.MOUSEMOTION:
            return self._translate_motion(event)
        if event.type == pygame.MOUSEBUTTONDOWN:
            return self._translate_press(event)
        return None

    def _translate_key(self, event) -> Optional[MenuInputEvent]:
        action = self.input_manager.action_for_key(event.key)
        kind = KEY_ACTION_TO_INPUT.get(action)
        if kind is None:
            return None
        return MenuInputEvent(kind)

    def _translate_motion(self, event) -> Optional[MenuInputEvent]:
        index = self.hit_test(self.input_manager.to_game_pos(event.pos))
        entered = index is not None and index != self._hovered
        self._hovered = index
        if entered:
            return MenuInputEvent(MenuInput.SELECT, index)
        return None

    def _translate_press(self, event) -> Optional[MenuInputEvent]:
        if event.button != Input.POINTER_BUTTON:
            return None
        index = self.hit_test(self.input_manager.to_game_pos(event.pos))
        if index is None:
            return None
        self._hovered = index
        return MenuInputEvent(MenuInput.CLICK, index)
