"""
test_shell_scenes.py
--------------------
Integration tests for the scenes around the menu: boot, loading,
gameplay placeholder, game over and the informational pages.
"""

import pygame
import pytest
from unittest.mock import ANY, MagicMock, patch

from gameshell.menu.menu_controller import MenuEntry, NavigationCommand
from gameshell.scenes.boot_scene import BootScene
from gameshell.scenes.game_over_scene import GameOverScene
from gameshell.scenes.game_scene import GameScene
from gameshell.scenes.info_scene import CreditsScene, HowToScene
from gameshell.scenes.loading_scene import LoadingScene


def key_event(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="")


# ===========================================================
# Boot
# ===========================================================

def test_boot_registers_config_and_moves_on(services, mock_scene_manager):
    boot = BootScene(services)
    boot.on_enter()

    options = services.get_global("game_options")
    assert options["title"] == "Game Shell"
    assert services.get_global("asset_manifest") == {"images": []}
    assert len(services.get_global("menu_screen")["main_menu"]["entries"]) == 3
    services.display_manager.set_caption.assert_called_once_with("Game Shell")

    boot.update(0.016)
    mock_scene_manager.set_scene.assert_called_once_with("Loading")


def boot_with_menu(services, menu_screen):
    """Run BootScene.on_enter with the menu screen file replaced."""
    def fake_load(filename, default_dict=None, strict=False):
        if filename == "screens/main_menu.yaml":
            return menu_screen
        return dict(default_dict or {})

    services.register_global("menu_screen", None)
    with patch("gameshell.scenes.boot_scene.load_config", side_effect=fake_load):
        BootScene(services).on_enter()


def test_boot_registers_menu_entries(services):
    BootScene(services).on_enter()

    entries = services.get_global("menu_entries")
    assert [e.command for e in entries] == [
        NavigationCommand.START_GAME, NavigationCommand.HOW_TO, NavigationCommand.CREDITS,
    ]


def test_boot_rejects_unknown_menu_command(services, mock_scene_manager):
    screen = {"main_menu": {"entries": [{"label": "Start", "command": "start_gmae"}]}}

    with pytest.raises(ValueError, match="start_gmae"):
        boot_with_menu(services, screen)

    assert services.get_global("menu_screen") is None
    assert services.get_global("menu_entries") is None
    mock_scene_manager.set_scene.assert_not_called()


def test_boot_rejects_empty_menu(services):
    with pytest.raises(ValueError):
        boot_with_menu(services, {"main_menu": {"entries": []}})
    assert services.get_global("menu_entries") is None


def test_boot_rejects_entry_without_label(services):
    with pytest.raises(ValueError):
        boot_with_menu(services, {"main_menu": {"entries": [{"command": "credits"}]}})


def test_boot_accepts_entry_without_command(services):
    boot_with_menu(services, {"main_menu": {"entries": [{"label": "Start"}]}})
    assert services.get_global("menu_entries") == [MenuEntry("Start", None)]


# ===========================================================
# Loading
# ===========================================================

def test_loading_with_empty_manifest(services, mock_scene_manager):
    services.register_global("asset_manifest", {"images": []})
    loading = LoadingScene(services)
    loading.on_load()

    assert loading.progress == 1.0
    loading.update(0.016)
    loading.update(0.016)

    mock_scene_manager.set_scene.assert_called_once_with("Menu", transition=ANY)


def test_loading_one_asset_per_frame(services, mock_scene_manager, mock_draw_manager):
    services.register_global("asset_manifest", {"images": [
        {"key": "logo", "path": "images/logo.png"},
        {"key": "bg", "path": "images/bg.png", "scale": 2.0},
        {"path": "images/no_key.png"},
    ]})
    mock_draw_manager.load_image.side_effect = [True, False]
    loading = LoadingScene(services)
    loading.on_load()

    loading.update(0.016)
    assert (loading.loaded, loading.failed) == (1, 0)
    mock_scene_manager.set_scene.assert_not_called()

    loading.update(0.016)
    loading.update(0.016)
    assert (loading.loaded, loading.failed) == (1, 2)
    assert loading.progress == 1.0
    mock_draw_manager.load_image.assert_any_call("bg", "images/bg.png", 2.0)

    loading.update(0.016)
    mock_scene_manager.set_scene.assert_called_once_with("Menu", transition=ANY)


def test_loading_draws_progress_bar(services, mock_draw_manager):
    loading = LoadingScene(services)
    loading.on_load()
    loading.draw(mock_draw_manager)

    assert mock_draw_manager.queue_shape.call_count == 2
    mock_draw_manager.queue_draw.assert_called_once()


# ===========================================================
# Game
# ===========================================================

@pytest.fixture
def game(services, input_manager):
    scene = GameScene(services)
    scene.on_load()
    input_manager.set_context(scene.input_context)
    return scene


def test_game_uses_gameplay_context(game):
    assert game.input_context == "gameplay"


def test_game_counts_time(game):
    game.update(0.5)
    game.update(0.25)
    assert game.elapsed == pytest.approx(0.75)


@pytest.mark.parametrize("key", [pygame.K_ESCAPE, pygame.K_RETURN])
def test_end_run_goes_to_game_over(game, mock_scene_manager, key):
    game.update(1.5)
    game.handle_event(key_event(key))
    game.handle_event(key_event(key))

    mock_scene_manager.set_scene.assert_called_once_with(
        "GameOver", transition=ANY, survived=pytest.approx(1.5)
    )


def test_game_stops_counting_after_end(game):
    game.update(1.0)
    game.end_run()
    game.update(1.0)
    assert game.elapsed == pytest.approx(1.0)


def test_other_keys_do_not_end_run(game, mock_scene_manager):
    game.handle_event(key_event(pygame.K_a))
    mock_scene_manager.set_scene.assert_not_called()


def test_game_draws_timer_and_hint(game, mock_draw_manager):
    game.draw(mock_draw_manager)
    assert mock_draw_manager.queue_draw.call_count == 2


# ===========================================================
# Game Over / Info Pages
# ===========================================================

def test_game_over_returns_to_menu_once(services, mock_scene_manager):
    scene = GameOverScene(services)
    scene.on_load(survived=3.2)
    assert scene.survived == 3.2

    scene.handle_event(key_event(pygame.K_a))
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=1))

    mock_scene_manager.set_scene.assert_called_once_with("Menu", transition=ANY)


def test_game_over_ignores_motion(services, mock_scene_manager):
    scene = GameOverScene(services)
    scene.on_load()
    scene.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 5), rel=(1, 1), buttons=(0, 0, 0)))
    mock_scene_manager.set_scene.assert_not_called()


@pytest.mark.parametrize("scene_class, title", [
    (HowToScene, "How to Play"),
    (CreditsScene, "Credits"),
])
def test_info_pages(services, mock_scene_manager, scene_class, title):
    scene = scene_class(services)
    scene.on_load()
    assert scene.page["title"] == title

    draw_manager = MagicMock()
    scene.draw(draw_manager)
    assert draw_manager.queue_draw.call_count == 2

    scene.handle_event(key_event(pygame.K_SPACE))
    scene.handle_event(key_event(pygame.K_SPACE))
    mock_scene_manager.set_scene.assert_called_once_with("Menu", transition=ANY)


@pytest.mark.parametrize("button", [3, 4, 5])
def test_game_over_ignores_other_buttons(services, mock_scene_manager, button):
    scene = GameOverScene(services)
    scene.on_load()
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=button))
    mock_scene_manager.set_scene.assert_not_called()


@pytest.mark.parametrize("button", [3, 4, 5])
def test_info_page_ignores_wheel_and_right_click(services, mock_scene_manager, button):
    scene = HowToScene(services)
    scene.on_load()

    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=button))
    mock_scene_manager.set_scene.assert_not_called()

    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=1))
    mock_scene_manager.set_scene.assert_called_once_with("Menu", transition=ANY)
