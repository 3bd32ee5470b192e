"""Board - field contents on a ``width`` x ``height`` grid plus a turn counter."""

from __future__ import annotations

from collections.abc import Iterable

from rookery.core.enums import PieceColor, PieceKind
from rookery.core.errors import DecodeError, InvariantViolation
from rookery.core.field import EMPTY, FieldContent
from rookery.core.location import Location
from rookery.core.piece import ColoredPiece
from rookery.core.step import Castle, GoTo, Promote, Step, StepKind

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable board. Fields are stored row-major: ``index = y * width + x``.

    The turn counter starts at 0; even turns belong to White.
    """

    __slots__ = ("width", "height", "_fields", "_turn", "_locations")

    def __init__(self, width: int = 8, height: int = 8) -> None:
        """Create an empty board."""
        self.width = width
        self.height = height
        self._fields: list[FieldContent] = [EMPTY] * (width * height)
        self._turn = 0
        self._locations: tuple[Location, ...] = tuple(
            Location(x, y) for y in range(height) for x in range(width)
        )

    # -- Factories ------------------------------------------------------------

    @classmethod
    def standard(cls) -> Board:
        """Standard 32-piece starting position."""
        board = cls(8, 8)
        white_pawn = ColoredPiece(PieceKind.PAWN, PieceColor.WHITE)
        black_pawn = ColoredPiece(PieceKind.PAWN, PieceColor.BLACK)
        for x, kind in enumerate(_BACK_RANK):
            board.put_piece(ColoredPiece(kind, PieceColor.WHITE), Location(x, 0))
            board.put_piece(white_pawn, Location(x, 1))
            board.put_piece(black_pawn, Location(x, 6))
            board.put_piece(ColoredPiece(kind, PieceColor.BLACK), Location(x, 7))
        return board

    @classmethod
    def from_description(cls, text: str, width: int = 8, height: int = 8) -> Board:
        """Build a board from ``<square><kind><color>`` lines.

        Example::

            a1kw
            a2rb
            b1rb

        Blank lines are skipped. Every piece is stamped with turn 0.
        """
        board = cls(width, height)
        for line_no, raw_line in enumerate(text.splitlines(), start=1):
            token = raw_line.strip()
            if not token:
                continue
            if len(token) < 4:
                raise DecodeError(f"Line {line_no}: invalid placement {token!r}")
            try:
                location = Location.decode(token[:-2])
                kind = PieceKind.decode(token[-2])
                color = PieceColor.decode(token[-1])
            except DecodeError as exc:
                raise DecodeError(f"Line {line_no}: {exc}") from exc
            if not board.in_bounds(location):
                raise DecodeError(f"Line {line_no}: {token[:-2]!r} is off the board")
            board.put_piece(ColoredPiece(kind, color), location)
        return board

    def to_description(self) -> str:
        """Inverse of :meth:`from_description` (turn stamps are not kept)."""
        lines = []
        for location in self._locations:
            piece = self[location].piece
            if piece is not None:
                kind = piece.kind.letter.lower()
                lines.append(f"{location.encode()}{kind}{piece.color.letter}")
        return "\n".join(lines)

    # -- Queries ----------------------------------------------------------------

    @property
    def turn(self) -> int:
        return self._turn

    def turn_color(self) -> PieceColor:
        return PieceColor.WHITE if self._turn % 2 == 0 else PieceColor.BLACK

    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.x < self.width and 0 <= location.y < self.height

    def locations(self) -> tuple[Location, ...]:
        """All squares, row-major from a1."""
        return self._locations

    def field_at_xy(self, x: int, y: int) -> FieldContent | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self._fields[y * self.width + x]

    def field_at(self, location: Location) -> FieldContent | None:
        return self.field_at_xy(location.x, location.y)

    def __getitem__(self, location: Location) -> FieldContent:
        field = self.field_at(location)
        if field is None:
            raise IndexError(f"{location!r} is off the board")
        return field

    def is_empty(self, location: Location) -> bool:
        return self[location].is_empty

    def is_unmoved(self, location: Location) -> bool:
        field = self.field_at(location)
        return field is not None and field.is_unmoved

    def contains_piece(
        self,
        location: Location,
        kinds: Iterable[PieceKind],
        color: PieceColor,
    ) -> bool:
        field = self.field_at(location)
        if field is None or field.piece is None:
            return False
        return field.piece.color == color and field.piece.kind in tuple(kinds)

    def find_king(self, color: PieceColor) -> Location | None:
        king = ColoredPiece(PieceKind.KING, color)
        for location in self._locations:
            if self._fields[location.y * self.width + location.x].piece == king:
                return location
        return None

    def pieces(self, color: PieceColor) -> list[tuple[Location, ColoredPiece]]:
        """All ``(location, piece)`` pairs of *color*, row-major."""
        result: list[tuple[Location, ColoredPiece]] = []
        for location in self._locations:
            piece = self._fields[location.y * self.width + location.x].piece
            if piece is not None and piece.color == color:
                result.append((location, piece))
        return result

    # -- Mutation / copying -------------------------------------------------------

    def put_piece(self, piece: ColoredPiece, location: Location, turn: int = 0) -> None:
        self._set(location, FieldContent.occupied(piece, turn))

    def clear(self, location: Location) -> None:
        self._set(location, EMPTY)

    def _set(self, location: Location, field: FieldContent) -> None:
        if not self.in_bounds(location):
            raise InvariantViolation(f"{location!r} is off the board")
        self._fields[location.y * self.width + location.x] = field

    def apply_step(self, step: Step) -> None:
        """Relocate the piece on ``step.from_loc``, stamping it as moved this turn."""
        piece = self._piece_to_move(step)
        self._set(step.to_loc, FieldContent.occupied(piece, self._turn + 1))
        self._set(step.from_loc, EMPTY)

    def apply_step_kind(self, step_kind: StepKind) -> None:
        """Apply one move and advance the turn counter."""
        if isinstance(step_kind, GoTo):
            self.apply_step(step_kind.step)
        elif isinstance(step_kind, Castle):
            # Both sources are validated up front so a castle is never half applied.
            self._piece_to_move(step_kind.king_step)
            self._piece_to_move(step_kind.rook_step)
            self.apply_step(step_kind.king_step)
            self.apply_step(step_kind.rook_step)
        elif isinstance(step_kind, Promote):
            pawn = self._piece_to_move(step_kind.step)
            promoted = ColoredPiece(step_kind.piece, pawn.color)
            promoted_field = FieldContent.occupied(promoted, self._turn + 1)
            self._set(step_kind.step.to_loc, promoted_field)
            self._set(step_kind.step.from_loc, EMPTY)
        else:
            raise TypeError(f"Unknown step kind: {step_kind!r}")
        self._turn += 1

    def _piece_to_move(self, step: Step) -> ColoredPiece:
        field = self.field_at(step.from_loc)
        if field is None or field.piece is None:
            raise InvariantViolation(f"Empty or non-existent field: {step.from_loc}")
        if not self.in_bounds(step.to_loc):
            raise InvariantViolation(f"Destination off the board: {step.to_loc!r}")
        return field.piece

    def copy(self) -> Board:
        board = Board.__new__(Board)
        board.width = self.width
        board.height = self.height
        board._fields = self._fields.copy()
        board._turn = self._turn
        board._locations = self._locations
        return board

    # -- Rendering ------------------------------------------------------------------

    def to_pretty_string(self, colored: bool = True) -> str:
        """Bordered text grid with rank 8 (the last rank) on top."""
        line = "-" * (self.width * 4 + 1)
        middle_line = "|---" * self.width + "|"
        rows = [line]
        for y in range(self.height - 1, -1, -1):
            cells = "".join(
                f"| {self._fields[y * self.width + x].to_pretty_string(colored)} "
                for x in range(self.width)
            )
            rows.append(f"{cells}|")
            if y != 0:
                rows.append(middle_line)
        rows.append(line)
        return "\n".join(rows)

    # -- Dunder helpers -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._turn == other._turn
            and self._fields == other._fields
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(self.height - 1, -1, -1):
            row = []
            for x in range(self.width):
                piece = self._fields[y * self.width + x].piece
                if piece is None:
                    row.append(".")
                elif piece.color == PieceColor.WHITE:
                    row.append(piece.kind.letter)
                else:
                    row.append(piece.kind.letter.lower())
            rows.append(f"{y + 1} {' '.join(row)}")
        rows.append("  " + " ".join(chr(ord("a") + x) for x in range(self.width)))
        return "\n".join(rows)
