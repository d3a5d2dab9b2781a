"""
scene_manager.py
----------------
Scene coordinator - direct class registration.

Responsibilities
----------------
- Map scene names to scene classes.
- Create a fresh scene instance on every switch and run its lifecycle hooks.
- Play optional transitions between the old and new scene.
- Forward events, updates, and draw calls to the active scene.
"""

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.scene_state import SceneState
from gameshell.core.services.service_locator import ServiceLocator

from gameshell.scenes.boot_scene import BootScene
from gameshell.scenes.loading_scene import LoadingScene
from gameshell.scenes.main_menu_scene import MainMenuScene
from gameshell.scenes.game_scene import GameScene
from gameshell.scenes.game_over_scene import GameOverScene
from gameshell.scenes.info_scene import HowToScene, CreditsScene


DEFAULT_SCENES = {
    "Boot": BootScene,
    "Loading": LoadingScene,
    "Menu": MainMenuScene,
    "Game": GameScene,
    "GameOver": GameOverScene,
    "HowTo": HowToScene,
    "Credits": CreditsScene,
}


class SceneManager:
    """Coordinates scene transitions and delegates update/draw logic."""

    def __init__(self, display_manager, input_manager, draw_manager,
                 scene_classes=None, initial_scene="Boot"):
        """
        Initialize scene manager with direct scene registration.

        Args:
            display_manager: DisplayManager instance
            input_manager: InputManager instance
            draw_manager: DrawManager instance
            scene_classes: Optional name -> class mapping (defaults to DEFAULT_SCENES)
            initial_scene: Scene to activate immediately, or None
        """
        self.display = display_manager
        self.input_manager = input_manager
        self.draw_manager = draw_manager
        DebugLogger.init_entry("SceneManager")

        self.services = ServiceLocator(self)
        self.services.register_managers(
            display=display_manager,
            input_mgr=input_manager,
            draw=draw_manager,
        )
        DebugLogger.init_sub("ServiceLocator initialized")

        self.scene_classes = dict(scene_classes or DEFAULT_SCENES)

        # Active scene tracking
        self._active_scene = None
        self._active_name = None

        # Transition system
        self._active_transition = None
        self._transition_old_scene = None
        self._transition_old_name = None
        self._transition_new_scene = None
        self._transition_new_name = None

        DebugLogger.init_sub(f"Registered scenes: {list(self.scene_classes.keys())}")

        if initial_scene:
            self.set_scene(initial_scene)

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def active_scene(self):
        return self._active_scene

    @property
    def active_name(self):
        return self._active_name

    @property
    def in_transition(self) -> bool:
        return self._active_transition is not None

    # ===========================================================
    # Scene Control
    # ===========================================================

    def register_scene(self, name: str, scene_class):
        """Add or replace a scene class."""
        self.scene_classes[name] = scene_class
        DebugLogger.state(f"Registered scene '{name}'", category="scene")

    def set_scene(self, name: str, transition=None, **scene_data) -> bool:
        """
        Switch to another scene.

        Args:
            name: Scene name ("Menu", "Game", etc.)
            transition: Transition instance (None = instant)
            **scene_data: Data to pass to on_load() hook

        Returns:
            True if the switch started, False if it was rejected
        """
        # Block new transitions while one is active
        if self._active_transition:
            DebugLogger.trace(f"Ignored switch to '{name}' during transition", category="scene")
            return False

        if name not in self.scene_classes:
            DebugLogger.warn(f"Unknown scene: '{name}'")
            return False

        prev_name = self._active_name or "None"
        DebugLogger.system(f"Transitioning [{prev_name}] → [{name}]", category="scene")

        # 1. Create new scene
        new_scene = self.scene_classes[name](self.services)

        # 2. Load new scene
        new_scene.state = SceneState.LOADING
        DebugLogger.state(f"Loading {name}", category="scene")
        new_scene.on_load(**scene_data)

        # 3. Handle transition
        if transition is not None:
            # Old scene keeps drawing but stops receiving input
            if self._active_scene:
                self._active_scene.state = SceneState.TRANSITIONING
            new_scene.state = SceneState.TRANSITIONING
            self._active_transition = transition
            self._transition_old_scene = self._active_scene
            self._transition_old_name = self._active_name
            self._transition_new_scene = new_scene
            self._transition_new_name = name
            DebugLogger.state(f"Starting transition: {transition.__class__.__name__}", category="scene")
            return True

        self._activate(new_scene, name, self._active_scene, self._active_name)
        return True

    def _activate(self, new_scene, name, old_scene, old_name):
        """Exit the old scene, then enter the new one."""
        if old_scene:
            DebugLogger.state(f"Exiting {old_name}", category="scene")
            old_scene.state = SceneState.EXITING
            old_scene.on_exit()

        self._active_scene = new_scene
        self._active_name = name
        new_scene.state = SceneState.ACTIVE
        DebugLogger.section(f"Active Scene: {name}")

        DebugLogger.state(f"Entering {name}", category="scene")
        new_scene.on_enter()

        self.input_manager.set_context(new_scene.input_context)

    # ===========================================================
    # Event, Update, Draw Delegation
    # ===========================================================

    def handle_event(self, event) -> bool:
        """
        Forward event to active scene.

        Returns:
            True if an active scene received the event
        """
        if self._active_scene and self._active_scene.state == SceneState.ACTIVE:
            self._active_scene.handle_event(event)
            return True
        return False

    def update(self, dt: float):
        """Update active scene or transition."""
        if self._active_transition:
            if self._active_transition.update(dt):
                DebugLogger.state("Transition complete", category="scene")
                new_scene = self._transition_new_scene
                new_name = self._transition_new_name
                old_scene = self._transition_old_scene
                old_name = self._transition_old_name

                self._active_transition = None
                self._transition_old_scene = None
                self._transition_old_name = None
                self._transition_new_scene = None
                self._transition_new_name = None

                self._activate(new_scene, new_name, old_scene, old_name)
            return

        if self._active_scene and self._active_scene.state == SceneState.ACTIVE:
            self._active_scene.update(dt)

    def draw(self, draw_manager):
        """Render active scene or transition."""
        if self._active_transition:
            self._active_transition.draw(
                draw_manager,
                self._transition_old_scene,
                self._transition_new_scene
            )
            return

        if self._active_scene:
            self._active_scene.draw(draw_manager)
