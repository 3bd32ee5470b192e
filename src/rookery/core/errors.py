"""Exception hierarchy for the rules engine.

``ChessError`` and its subclasses are recoverable: the caller re-prompts or
shows a message. ``InvariantViolation`` signals corrupted engine state and is
not meant to be caught by shells.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rookery.core.step import StepKind


class ChessError(Exception):
    """Base class for user-facing engine errors."""


class DecodeError(ChessError, ValueError):
    """Malformed move, location, piece or board description text."""


class IllegalMoveError(ChessError):
    """A well-formed move that is not in the current legal-move list."""

    def __init__(self, step_kind: StepKind, legal_moves: Sequence[StepKind]) -> None:
        self.step_kind = step_kind
        self.legal_moves = tuple(legal_moves)
        alternatives = ", ".join(move.encode() for move in self.legal_moves)
        super().__init__(
            f"Illegal move {step_kind.encode()}; legal moves: [{alternatives}]"
        )


class GameOverError(ChessError):
    """A move was submitted after the game reached a terminal state."""


class InvariantViolation(RuntimeError):
    """Engine state is inconsistent (empty source square, missing king)."""
