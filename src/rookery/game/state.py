"""Game outcome state machine values."""

from __future__ import annotations

from enum import Enum

from rookery.core.enums import PieceColor


class GameState(Enum):
    """Outcome of a game. ``ONGOING`` is the only non-terminal value."""

    ONGOING = "ongoing"
    STALEMATE = "stalemate"
    WHITE_WON = "white_won"
    BLACK_WON = "black_won"

    @classmethod
    def won(cls, color: PieceColor) -> GameState:
        """State after *color* delivered checkmate."""
        return cls.WHITE_WON if color == PieceColor.WHITE else cls.BLACK_WON

    @property
    def winner(self) -> PieceColor | None:
        if self is GameState.WHITE_WON:
            return PieceColor.WHITE
        if self is GameState.BLACK_WON:
            return PieceColor.BLACK
        return None

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.ONGOING
