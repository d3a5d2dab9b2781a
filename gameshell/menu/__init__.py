"""
Main menu core exports.

Selection state machine, input routing and presentation interface.
"""

from gameshell.menu.menu_controller import (
    MenuController,
    MenuEntry,
    MenuSelectionError,
    NavigationCommand,
)
from gameshell.menu.menu_input import (
    MenuEventTranslator,
    MenuInput,
    MenuInputEvent,
    MenuInputRouter,
)
from gameshell.menu.menu_presenter import (
    MenuPresenter,
    RecordingPresenter,
    TextMenuPresenter,
)

__all__ = [
    # Core
    'MenuController',
    'MenuEntry',
    'MenuSelectionError',
    'NavigationCommand',
    # Input
    'MenuEventTranslator',
    'MenuInput',
    'MenuInputEvent',
    'MenuInputRouter',
    # Presentation
    'MenuPresenter',
    'RecordingPresenter',
    'TextMenuPresenter',
]
