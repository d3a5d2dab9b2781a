"""
Scene exports.

Every scene takes a ServiceLocator and is registered by name in SceneManager.
"""

from gameshell.scenes.boot_scene import BootScene
from gameshell.scenes.loading_scene import LoadingScene
from gameshell.scenes.main_menu_scene import MainMenuScene
from gameshell.scenes.game_scene import GameScene
from gameshell.scenes.game_over_scene import GameOverScene
from gameshell.scenes.info_scene import CreditsScene, HowToScene, InfoScene

__all__ = [
    'BootScene',
    'LoadingScene',
    'MainMenuScene',
    'GameScene',
    'GameOverScene',
    'InfoScene',
    'HowToScene',
    'CreditsScene',
]
