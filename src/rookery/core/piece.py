"""Piece value object and the movement capability table."""

from __future__ import annotations

from dataclasses import dataclass

from rookery.core.enums import PieceColor, PieceKind

UNBOUNDED = -1

_UNICODE: dict[tuple[PieceColor, PieceKind], str] = {
    (PieceColor.WHITE, PieceKind.PAWN): "♙",
    (PieceColor.WHITE, PieceKind.KNIGHT): "♘",
    (PieceColor.WHITE, PieceKind.BISHOP): "♗",
    (PieceColor.WHITE, PieceKind.ROOK): "♖",
    (PieceColor.WHITE, PieceKind.QUEEN): "♕",
    (PieceColor.WHITE, PieceKind.KING): "♔",
    (PieceColor.BLACK, PieceKind.PAWN): "♟",
    (PieceColor.BLACK, PieceKind.KNIGHT): "♞",
    (PieceColor.BLACK, PieceKind.BISHOP): "♝",
    (PieceColor.BLACK, PieceKind.ROOK): "♜",
    (PieceColor.BLACK, PieceKind.QUEEN): "♛",
    (PieceColor.BLACK, PieceKind.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class MoveCapability:
    """One directional movement pattern of a piece kind.

    ``distance`` caps the number of cells walked (``UNBOUNDED`` slides until
    blocked). ``must_take`` only allows landing on an enemy piece;
    ``can_take`` allows, but does not require, a capture. Without
    ``can_take`` any occupied cell blocks. ``first_move_distance`` replaces
    ``distance`` while a pawn still stands on its home rank.
    """

    dx: int
    dy: int
    distance: int = UNBOUNDED
    must_take: bool = False
    can_take: bool = True
    first_move_distance: int | None = None

    def mirrored(self) -> MoveCapability:
        """Same pattern seen from the other side of the board."""
        return MoveCapability(
            self.dx,
            -self.dy,
            self.distance,
            self.must_take,
            self.can_take,
            self.first_move_distance,
        )


def _sliders(directions: tuple[tuple[int, int], ...]) -> tuple[MoveCapability, ...]:
    return tuple(MoveCapability(dx, dy) for dx, dy in directions)


def _single_steps(
    directions: tuple[tuple[int, int], ...],
) -> tuple[MoveCapability, ...]:
    return tuple(MoveCapability(dx, dy, distance=1) for dx, dy in directions)


_DIAGONALS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_ORTHOGONALS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
_KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)

# Written from White's point of view; "forward" is +y.
CAPABILITIES: dict[PieceKind, tuple[MoveCapability, ...]] = {
    PieceKind.PAWN: (
        MoveCapability(0, 1, distance=1, can_take=False, first_move_distance=2),
        MoveCapability(1, 1, distance=1, must_take=True),
        MoveCapability(-1, 1, distance=1, must_take=True),
    ),
    PieceKind.ROOK: _sliders(_ORTHOGONALS),
    PieceKind.KNIGHT: _single_steps(_KNIGHT_OFFSETS),
    PieceKind.BISHOP: _sliders(_DIAGONALS),
    PieceKind.QUEEN: _sliders(_DIAGONALS + _ORTHOGONALS),
    PieceKind.KING: _single_steps(_DIAGONALS + _ORTHOGONALS),
}

_COLORED_CAPABILITIES: dict[
    tuple[PieceKind, PieceColor], tuple[MoveCapability, ...]
] = {
    (kind, color): (
        caps if color == PieceColor.WHITE else tuple(cap.mirrored() for cap in caps)
    )
    for kind, caps in CAPABILITIES.items()
    for color in PieceColor
}


@dataclass(frozen=True, slots=True)
class ColoredPiece:
    """Immutable value object representing a chess piece."""

    kind: PieceKind
    color: PieceColor

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]

    def capabilities(self) -> tuple[MoveCapability, ...]:
        """Movement patterns of this piece, oriented for its colour."""
        return _COLORED_CAPABILITIES[(self.kind, self.color)]

    def __str__(self) -> str:
        """Kind letter followed by colour letter, e.g. 'Kw'."""
        return f"{self.kind.letter}{self.color.letter}"
