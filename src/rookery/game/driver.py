"""Interactive text driver: read moves from a line source until the game ends."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rookery.core.errors import ChessError
from rookery.game.game import Game
from rookery.game.state import GameState

_LOGGER = logging.getLogger(__name__)

_QUIT_COMMANDS = frozenset({"quit", "exit", "q"})

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def run_text_game(
    read_line: ReadLine = input,
    write: Write = print,
    game: Game | None = None,
    *,
    colored: bool = True,
) -> GameState:
    """Play one game on the terminal and return its final state.

    Stops at a terminal state, on a quit command or at end of input.
    """
    game = Game() if game is None else game
    while not game.state.is_terminal:
        write(f"It's {game.board.turn_color().name.capitalize()}'s turn")
        write(game.board.to_pretty_string(colored=colored))
        try:
            line = read_line("> ").strip()
        except EOFError:
            _LOGGER.info("Input closed, leaving game")
            break
        if line.lower() in _QUIT_COMMANDS:
            break
        if not line:
            continue

        try:
            state = game.apply_input(line)
        except ChessError as exc:
            write(f"Move failed with error: {exc}")
            continue

        if state is GameState.ONGOING:
            write("Move executed")
        elif state is GameState.STALEMATE:
            write(game.board.to_pretty_string(colored=colored))
            write("Game ended in stalemate!")
        else:
            write(game.board.to_pretty_string(colored=colored))
            write(f"{str(state.winner).capitalize()} has won!")
    return game.state
