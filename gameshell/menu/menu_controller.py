"""
menu_controller.py
------------------
Selection state machine for the main menu.

Responsibilities
----------------
- Own the fixed list of menu entries and the single selected index.
- Move the selection with wraparound (next/previous) or directly (pointer).
- Refresh the presentation layer exactly once after every selection change.
- Emit the navigation command mapped to the selected entry on confirm.

The controller has no pygame dependency; rendering happens behind the
MenuPresenter interface and scene switching behind a plain callable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Tuple

from gameshell.core.debug.debug_logger import DebugLogger


# ===========================================================
# Data Types
# ===========================================================

class NavigationCommand(Enum):
    """Closed set of commands the menu can emit."""
    START_GAME = "StartGame"
    HOW_TO = "HowTo"
    CREDITS = "Credits"

    @classmethod
    def from_name(cls, name: str) -> "NavigationCommand":
        """
        Resolve a config name ("start_game") or value ("StartGame").

        Raises:
            ValueError: If the name matches no command
        """
        key = name.strip()
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        for command in cls:
            if command.value == key:
                return command
        raise ValueError(f"Unknown navigation command: '{name}'")


@dataclass(frozen=True)
class MenuEntry:
    """One selectable menu item."""
    label: str
    command: Optional[NavigationCommand] = None


class MenuSelectionError(IndexError):
    """Raised when a selection index falls outside the entry range."""


# ===========================================================
# Menu Controller
# ===========================================================

class MenuController:
    """
    Maintains the selected entry and turns navigation calls into commands.

    Usage:
        controller = MenuController(entries, presenter, scene.on_command)
        controller.select_next()
        controller.confirm()   # -> command_sink(NavigationCommand.HOW_TO)
    """

    def __init__(
        self,
        entries: Iterable[MenuEntry],
        presenter,
        command_sink: Callable[[NavigationCommand], None],
        default_command: NavigationCommand = NavigationCommand.START_GAME,
    ):
        """
        Args:
            entries: Ordered menu entries (at least one)
            presenter: Object exposing set_active(index)
            command_sink: Receives the command emitted by confirm()
            default_command: Emitted when the selected entry has no command

        Raises:
            ValueError: If entries is empty
        """
        self._entries: Tuple[MenuEntry, ...] = tuple(entries)
        if not self._entries:
            raise ValueError("MenuController requires at least one entry")

        self._presenter = presenter
        self._command_sink = command_sink
        self._default_command = default_command

        # Index -> command, fixed for the lifetime of the menu
        self._actions: Dict[int, NavigationCommand] = {
            i: entry.command
            for i, entry in enumerate(self._entries)
            if entry.command is not None
        }

        self._selected = 0
        self._highlight_selected()

        DebugLogger.state(
            f"Menu built with {len(self._entries)} entries", category="menu"
        )

    # ===========================================================
    # Read-only State
    # ===========================================================

    @property
    def selected(self) -> int:
        return self._selected

    @property
    def entries(self) -> Tuple[MenuEntry, ...]:
        return self._entries

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def selected_entry(self) -> MenuEntry:
        return self._entries[self._selected]

    # ===========================================================
    # Navigation
    # ===========================================================

    def select_next(self):
        """Select the next entry, wrapping from the last to the first."""
        self._selected = (self._selected + 1) % len(self._entries)
        self._highlight_selected()

    def select_previous(self):
        """Select the previous entry, wrapping from the first to the last."""
        self._selected = (self._selected - 1) % len(self._entries)
        self._highlight_selected()

    def select_specific(self, index: int):
        """
        Select an entry directly (pointer hover or click).

        Args:
            index: Entry index in [0, count)

        Raises:
            MenuSelectionError: If index is not a valid entry index.
                Selection and presentation are left unchanged.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise MenuSelectionError(f"Menu index must be an int, got {index!r}")
        if not 0 <= index < len(self._entries):
            raise MenuSelectionError(
                f"Menu index {index} out of range [0, {len(self._entries)})"
            )

        self._selected = index
        self._highlight_selected()

    # ===========================================================
    # Confirmation
    # ===========================================================

    def confirm(self) -> NavigationCommand:
        """
        Emit the command mapped to the selected entry.

        Falls back to the default command if the selected entry has no
        mapping. Selection is not changed.

        Returns:
            The emitted NavigationCommand
        """
        command = self._actions.get(self._selected)
        if command is None:
            command = self._default_command
            DebugLogger.warn(
                f"No command mapped for entry {self._selected} "
                f"('{self.selected_entry.label}') - using {command.name}",
                category="menu",
            )

        DebugLogger.action(
            f"Confirmed '{self.selected_entry.label}' -> {command.value}",
            category="menu",
        )
        self._command_sink(command)
        return command

    # ===========================================================
    # Presentation
    # ===========================================================

    def _highlight_selected(self):
        """Tell the presentation layer which single entry is active."""
        self._presenter.set_active(self._selected)
        DebugLogger.trace(f"Selected entry {self._selected}", category="navigation")
