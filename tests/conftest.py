"""
conftest.py
-----------
Shared pytest configuration and fixtures for the game shell tests.

Contains:
- Headless pygame setup (SDL dummy drivers, font module)
- Common mock fixtures used across test modules
- Pytest markers
"""

import os

# Must be set before pygame creates any display or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

from gameshell.core.services.input_manager import InputManager  # noqa: E402
from gameshell.core.services.service_locator import ServiceLocator  # noqa: E402
from gameshell.graphics.text import clear_font_cache  # noqa: E402
from gameshell.menu.menu_config import DEFAULT_MENU_SCREEN  # noqa: E402
from gameshell.menu.menu_controller import MenuEntry, NavigationCommand  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_fonts():
    """Text rendering needs the font module, not a window."""
    pygame.font.init()
    yield
    clear_font_cache()
    pygame.font.quit()


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with common methods."""
    draw_manager = MagicMock()
    draw_manager.queue_draw = MagicMock()
    draw_manager.queue_shape = MagicMock()
    draw_manager.load_image = MagicMock(return_value=True)
    return draw_manager


@pytest.fixture
def input_manager():
    """Real InputManager with default bindings and no display scaling."""
    return InputManager()


@pytest.fixture
def mock_scene_manager():
    scene_manager = MagicMock()
    scene_manager.set_scene.return_value = True
    return scene_manager


@pytest.fixture
def services(mock_scene_manager, input_manager, mock_draw_manager):
    """ServiceLocator wired to mocks, with the default menu screen registered."""
    locator = ServiceLocator(mock_scene_manager)
    locator.register_managers(
        display=MagicMock(),
        input_mgr=input_manager,
        draw=mock_draw_manager,
    )
    locator.register_global("menu_screen", DEFAULT_MENU_SCREEN)
    locator.register_global("game_options", {"title": "Test Shell"})
    return locator


@pytest.fixture
def three_entries():
    """Start / How to Play / Credits."""
    return [
        MenuEntry("Start", NavigationCommand.START_GAME),
        MenuEntry("How to Play", NavigationCommand.HOW_TO),
        MenuEntry("Credits", NavigationCommand.CREDITS),
    ]


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark scene-level tests as integration, everything else as unit."""
    for item in items:
        if "/scenes/" in item.nodeid or "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
