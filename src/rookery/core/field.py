"""Per-square content: empty, or a piece with its arrival turn."""

from __future__ import annotations

from dataclasses import dataclass

from rookery.core.enums import PieceColor
from rookery.core.piece import ColoredPiece

_ANSI_RESET = "\x1b[0m"
_ANSI_COLORS: dict[PieceColor, str] = {
    PieceColor.WHITE: "\x1b[33m",  # yellow
    PieceColor.BLACK: "\x1b[31m",  # red
}


@dataclass(frozen=True, slots=True)
class FieldContent:
    """Content of a single square.

    ``turn`` is the turn counter value after the move that brought the
    piece here (turn index + 1); 0 means it has not moved since the game
    started.
    """

    piece: ColoredPiece | None = None
    turn: int = 0

    @classmethod
    def occupied(cls, piece: ColoredPiece, turn: int = 0) -> FieldContent:
        return cls(piece, turn)

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    @property
    def is_unmoved(self) -> bool:
        return self.piece is not None and self.turn == 0

    def to_pretty_string(self, colored: bool = True) -> str:
        """One-character glyph, ANSI coloured when *colored* is set."""
        if self.piece is None:
            return " "
        if not colored:
            return self.piece.symbol
        return f"{_ANSI_COLORS[self.piece.color]}{self.piece.symbol}{_ANSI_RESET}"


EMPTY = FieldContent()
