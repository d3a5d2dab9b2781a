"""Scene transition effects."""

from gameshell.scenes.transitions.transitions import FadeTransition, InstantTransition, Transition

__all__ = ['FadeTransition', 'InstantTransition', 'Transition']
