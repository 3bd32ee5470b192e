"""Game layer — one decode, validate, apply, re-evaluate cycle per turn.

Quick start::

    from rookery.game import Game

    game = Game()
    state = game.apply_input("e2e4")
"""

from rookery.game.driver import run_text_game
from rookery.game.game import Game
from rookery.game.state import GameState

__all__ = [
    "Game",
    "GameState",
    "run_text_game",
]
