"""Game management layer.

Quick start::

    from checkie.game import GameController

    ctrl = GameController()
    ctrl.new_game(rows=2)
    result = ctrl.play_to_end()
"""

from checkie.game.controller import DEFAULT_MAX_TURNS, GameController, GameEvents

__all__ = [
    "DEFAULT_MAX_TURNS",
    "GameController",
    "GameEvents",
]
