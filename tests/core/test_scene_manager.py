"""
test_scene_manager.py
---------------------
Unit tests for SceneManager lifecycle and transition handling.

Responsibilities
----------------
- Verify on_load / on_exit / on_enter ordering on scene switches.
- Verify unknown scenes are rejected without side effects.
- Ensure scenes in a transition stop receiving input.
- Verify input context follows the active scene.
"""

import pytest
from unittest.mock import MagicMock

from gameshell.core.runtime.base_scene import BaseScene
from gameshell.core.runtime.scene_state import SceneState
from gameshell.core.services.scene_manager import DEFAULT_SCENES, SceneManager
from gameshell.scenes.transitions import FadeTransition, InstantTransition


# ===========================================================
# Fake Scenes
# ===========================================================

class RecordingScene(BaseScene):
    """Scene that records its lifecycle into a shared log."""

    log = None

    def on_load(self, **scene_data):
        self.scene_data = scene_data
        self.events = []
        self.log.append((type(self).__name__, "load"))

    def on_enter(self):
        self.log.append((type(self).__name__, "enter"))

    def on_exit(self):
        self.log.append((type(self).__name__, "exit"))

    def update(self, dt):
        self.log.append((type(self).__name__, "update"))

    def draw(self, draw_manager):
        draw_manager.queue_draw(type(self).__name__, None)

    def handle_event(self, event):
        self.events.append(event)


class SceneA(RecordingScene):
    pass


class SceneB(RecordingScene):
    def __init__(self, services):
        super().__init__(services)
        self.input_context = "gameplay"


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def lifecycle_log():
    log = []
    RecordingScene.log = log
    yield log
    RecordingScene.log = None


@pytest.fixture
def manager(lifecycle_log):
    return SceneManager(
        MagicMock(), MagicMock(), MagicMock(),
        scene_classes={"A": SceneA, "B": SceneB},
        initial_scene="A",
    )


# ===========================================================
# Instant Switching
# ===========================================================

def test_initial_scene_is_loaded_and_entered(manager, lifecycle_log):
    assert manager.active_name == "A"
    assert manager.active_scene.state == SceneState.ACTIVE
    assert lifecycle_log == [("SceneA", "load"), ("SceneA", "enter")]


def test_switch_order(manager, lifecycle_log):
    lifecycle_log.clear()

    assert manager.set_scene("B") is True

    assert lifecycle_log == [("SceneB", "load"), ("SceneA", "exit"), ("SceneB", "enter")]
    assert manager.active_name == "B"


def test_scene_data_reaches_on_load(manager):
    manager.set_scene("B", survived=12.5)
    assert manager.active_scene.scene_data == {"survived": 12.5}


def test_each_switch_creates_a_new_instance(manager):
    first = manager.active_scene
    manager.set_scene("A")
    assert manager.active_scene is not first
    assert first.state == SceneState.EXITING


def test_unknown_scene_is_rejected(manager, lifecycle_log):
    lifecycle_log.clear()
    active = manager.active_scene

    assert manager.set_scene("Nowhere") is False

    assert manager.active_scene is active
    assert lifecycle_log == []


def test_input_context_follows_scene(manager):
    manager.input_manager.set_context.assert_called_with("ui")
    manager.set_scene("B")
    manager.input_manager.set_context.assert_called_with("gameplay")


def test_register_scene(manager):
    manager.register_scene("C", SceneA)
    assert manager.set_scene("C") is True
    assert manager.active_name == "C"


def test_no_initial_scene(lifecycle_log):
    manager = SceneManager(MagicMock(), MagicMock(), MagicMock(),
                           scene_classes={"A": SceneA}, initial_scene=None)
    assert manager.active_scene is None
    assert manager.handle_event(object()) is False


def test_default_scene_table():
    assert set(DEFAULT_SCENES) == {"Boot", "Loading", "Menu", "Game", "GameOver", "HowTo", "Credits"}


# ===========================================================
# Delegation
# ===========================================================

def test_events_reach_active_scene(manager):
    event = object()
    assert manager.handle_event(event) is True
    assert manager.active_scene.events == [event]


def test_update_and_draw_delegate(manager, lifecycle_log):
    draw_manager = MagicMock()
    manager.update(0.016)
    manager.draw(draw_manager)

    assert lifecycle_log[-1] == ("SceneA", "update")
    draw_manager.queue_draw.assert_called_once_with("SceneA", None)


# ===========================================================
# Transitions
# ===========================================================

def test_transition_defers_activation(manager, lifecycle_log):
    old = manager.active_scene
    lifecycle_log.clear()

    manager.set_scene("B", transition=InstantTransition())

    assert manager.in_transition
    assert manager.active_scene is old
    assert lifecycle_log == [("SceneB", "load")]

    manager.update(0.016)

    assert not manager.in_transition
    assert manager.active_name == "B"
    assert lifecycle_log == [("SceneB", "load"), ("SceneA", "exit"), ("SceneB", "enter")]


def test_old_scene_stops_receiving_input_during_transition(manager):
    old = manager.active_scene
    manager.set_scene("B", transition=FadeTransition(1.0))

    assert old.state == SceneState.TRANSITIONING
    assert manager.handle_event(object()) is False
    assert old.events == []


def test_switch_rejected_during_transition(manager, lifecycle_log):
    manager.set_scene("B", transition=FadeTransition(1.0))
    lifecycle_log.clear()

    assert manager.set_scene("A") is False
    assert lifecycle_log == []


def test_fade_completes_after_duration(manager):
    manager.set_scene("B", transition=FadeTransition(0.5))

    manager.update(0.3)
    assert manager.in_transition

    manager.update(0.3)
    assert not manager.in_transition
    assert manager.active_name == "B"


def test_scenes_do_not_update_during_transition(manager, lifecycle_log):
    manager.set_scene("B", transition=FadeTransition(1.0))
    lifecycle_log.clear()

    manager.update(0.1)

    assert lifecycle_log == []


def test_transition_draws_through_effect(manager):
    transition = MagicMock()
    transition.update.return_value = False
    old = manager.active_scene
    manager.set_scene("B", transition=transition)
    draw_manager = MagicMock()

    manager.draw(draw_manager)

    args = transition.draw.call_args.args
    assert args[0] is draw_manager
    assert args[1] is old
    assert isinstance(args[2], SceneB)
