"""
menu_config.py
--------------
Builds menu entries from the main menu screen definition.

The screen definition lives in config/screens/main_menu.yaml; the
defaults below are used when the file is missing.
"""

from typing import List

from gameshell.menu.menu_controller import MenuEntry, NavigationCommand


DEFAULT_MENU_SCREEN = {
    "main_menu": {
        "instruction": "Use arrow keys or W, S to select\nUse [SPACE] or [ENTER] to confirm",
        "entries": [
            {"label": "Start", "command": "start_game"},
            {"label": "How to Play", "command": "how_to"},
            {"label": "Credits", "command": "credits"},
        ],
    },
    "pages": {
        "how_to": {"title": "How to Play", "lines": []},
        "credits": {"title": "Credits", "lines": []},
    },
}


def build_menu_entries(screen_config: dict) -> List[MenuEntry]:
    """
    Turn the `main_menu.entries` list into MenuEntry objects.

    An entry without a `command` key is kept but left unmapped.

    Raises:
        ValueError: If an entry has no label or names an unknown command
    """
    entries = []
    for i, item in enumerate(screen_config.get("main_menu", {}).get("entries", [])):
        label = item.get("label")
        if not label:
            raise ValueError(f"Menu entry {i} has no label")

        command_name = item.get("command")
        command = NavigationCommand.from_name(command_name) if command_name else None
        entries.append(MenuEntry(label, command))
    return entries


def get_instruction(screen_config: dict) -> str:
    return screen_config.get("main_menu", {}).get("instruction", "")


def get_page(screen_config: dict, page_key: str) -> dict:
    """Title and lines for an informational page, with empty fallbacks."""
    page = screen_config.get("pages", {}).get(page_key, {})
    return {
        "title": page.get("title", page_key.replace("_", " ").title()),
        "lines": list(page.get("lines", [])),
    }
