"""
base_scene.py
-------------
Abstract base class for all scenes.

Provides:
- Lifecycle hooks (load, enter, exit)
- Service locator access
- Abstract methods for update, draw, handle_event
"""

from abc import ABC, abstractmethod

from gameshell.core.runtime.scene_state import SceneState


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state
        input_context: Input context for this scene ("gameplay" or "ui")
        services: ServiceLocator for accessing managers and shared data
    """

    def __init__(self, services):
        """
        Args:
            services: ServiceLocator instance for dependency injection
        """
        self.services = services
        self.state = SceneState.INACTIVE
        self.input_context = "ui"  # Default to UI, override in subclasses

        self.scene_manager = services.scene_manager
        self.input_manager = services.input_manager
        self.draw_manager = services.draw_manager

    @property
    def display(self):
        """Access display manager."""
        return self.services.display_manager

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_load(self, **scene_data):
        """Called once after the scene is created, before any transition."""
        pass

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_exit(self):
        """Called before the scene is discarded."""
        pass

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Update scene logic."""
        pass

    @abstractmethod
    def draw(self, draw_manager):
        """Render the scene."""
        pass

    @abstractmethod
    def handle_event(self, event):
        """Handle input events."""
        pass
