"""Game — the point where user input meets the rules engine.

Each call runs one cycle: decode -> validate against the freshly generated
legal moves -> apply to the board -> re-evaluate -> :class:`GameState`.
"""

from __future__ import annotations

import logging

from rookery.core.board import Board
from rookery.core.errors import GameOverError, IllegalMoveError
from rookery.core.evaluation import BasicEvaluation
from rookery.core.step import StepKind, decode_step_kind
from rookery.core.step_computer import StepComputer
from rookery.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class Game:
    """A single game on one board.

    ``STALEMATE`` and the won states are absorbing: once reached, every
    further move raises :class:`GameOverError` and a new ``Game`` is needed.
    """

    __slots__ = ("_board", "_state", "_last_step")

    def __init__(self, board: Board | None = None) -> None:
        self._board = Board.standard() if board is None else board
        self._last_step: StepKind | None = None
        self._state = self._state_from(self.evaluate())

    @classmethod
    def from_description(cls, text: str) -> Game:
        """Start from a ``<square><kind><color>`` placement list."""
        return cls(Board.from_description(text))

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def last_step(self) -> StepKind | None:
        """The most recently applied move, if any."""
        return self._last_step

    # ── Queries ──────────────────────────────────────────────────────────

    def evaluate(self) -> BasicEvaluation:
        return StepComputer(self._board).evaluate_basic()

    def legal_moves(self) -> tuple[StepKind, ...]:
        return self.evaluate().possible_moves

    # ── Move application ─────────────────────────────────────────────────

    def apply_input(self, text: str) -> GameState:
        """Decode *text* for the side to move and apply it.

        Raises :class:`~rookery.core.errors.DecodeError` on malformed text,
        otherwise behaves like :meth:`apply_stepkind`.
        """
        step_kind = decode_step_kind(
            text,
            self._board.turn_color(),
            width=self._board.width,
            height=self._board.height,
        )
        return self.apply_stepkind(step_kind)

    def apply_stepkind(self, step_kind: StepKind) -> GameState:
        """Validate and apply a structured move, returning the new state."""
        if self._state.is_terminal:
            raise GameOverError(
                f"Game is over ({self._state.value}); start a new game"
            )

        mover = self._board.turn_color()
        evaluation = self.evaluate()
        if step_kind not in evaluation.possible_moves:
            _LOGGER.warning("%s tried illegal move %s", mover, step_kind.encode())
            raise IllegalMoveError(step_kind, evaluation.possible_moves)

        self._board.apply_step_kind(step_kind)
        self._last_step = step_kind
        _LOGGER.debug("%s played %s", mover, step_kind.encode())

        self._state = self._state_from(self.evaluate())
        if self._state.is_terminal:
            _LOGGER.info(
                "Game over after turn %d: %s", self._board.turn, self._state.value
            )
        return self._state

    # ── Internal helpers ─────────────────────────────────────────────────

    def _state_from(self, evaluation: BasicEvaluation) -> GameState:
        if evaluation.has_stalemate:
            return GameState.STALEMATE
        if evaluation.has_checkmate:
            # The side to move is mated, so the previous mover won.
            return GameState.won(self._board.turn_color().invert())
        return GameState.ONGOING
