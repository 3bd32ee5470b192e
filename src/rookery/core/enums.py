"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

from rookery.core.errors import DecodeError


class PieceColor(IntEnum):
    """Side color. White moves on even turns."""

    WHITE = 0
    BLACK = 1

    def invert(self) -> PieceColor:
        return PieceColor(1 - self.value)

    @property
    def letter(self) -> str:
        return "w" if self is PieceColor.WHITE else "b"

    @classmethod
    def decode(cls, char: str) -> PieceColor:
        """Parse a colour letter, e.g. 'w' -> WHITE (case-insensitive)."""
        try:
            return _COLOR_LETTERS[char.lower()]
        except KeyError:
            raise DecodeError(f"Invalid color: {char!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Upper-case notation letter, e.g. 'N' for a knight."""
        return _KIND_TO_LETTER[self]

    @classmethod
    def decode(cls, char: str) -> PieceKind:
        """Parse a piece letter, e.g. 'q' -> QUEEN (case-insensitive)."""
        try:
            return _LETTER_TO_KIND[char.upper()]
        except KeyError:
            raise DecodeError(f"Invalid piece kind: {char!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


_COLOR_LETTERS: dict[str, PieceColor] = {
    "w": PieceColor.WHITE,
    "b": PieceColor.BLACK,
}

_KIND_TO_LETTER: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}

_LETTER_TO_KIND: dict[str, PieceKind] = {v: k for k, v in _KIND_TO_LETTER.items()}
