"""Pseudo-legal and legal move generation, check and mate detection.

Legality is decided by trial application: every pseudo-legal candidate is
applied to a copy of the board and dropped if it leaves the mover's king
attacked. The board passed in is never mutated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rookery.core.enums import PieceColor, PieceKind
from rookery.core.errors import InvariantViolation
from rookery.core.evaluation import BasicEvaluation
from rookery.core.location import Location
from rookery.core.piece import UNBOUNDED, ColoredPiece, MoveCapability
from rookery.core.step import KING_FILE, Castle, GoTo, Promote, Step, StepKind

if TYPE_CHECKING:
    from rookery.core.board import Board

_LOGGER = logging.getLogger(__name__)

PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)


class StepComputer:
    """Generates moves for a given :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def evaluate_basic(self) -> BasicEvaluation:
        """Legal moves for the side to move plus check / mate / stalemate."""
        possible_moves = self.compute_steps()
        has_check = self.has_check()
        no_moves = not possible_moves
        return BasicEvaluation(
            has_check=has_check,
            has_checkmate=no_moves and has_check,
            has_stalemate=no_moves and not has_check,
            possible_moves=tuple(possible_moves),
        )

    def compute_steps(self) -> list[StepKind]:
        """All strictly legal moves for the side to move."""
        steps = self.extend_promotions(self.compute_simple_steps())
        steps.extend(self.castle_moves())
        return self.filter_check_steps(steps)

    def compute_simple_steps(self, color: PieceColor | None = None) -> list[StepKind]:
        """Pseudo-legal moves of *color* (default: side to move).

        Castling and promotion variants are not included.
        """
        if color is None:
            color = self._board.turn_color()
        steps: list[StepKind] = []
        for location, _piece in self._board.pieces(color):
            steps.extend(self.compute_field_steps(location, color))
        return steps

    def compute_field_steps(self, location: Location, color: PieceColor) -> list[GoTo]:
        """Pseudo-legal moves of the piece on *location* if it belongs to *color*."""
        field = self._board.field_at(location)
        if field is None or field.piece is None or field.piece.color != color:
            return []
        steps: list[GoTo] = []
        for cap in field.piece.capabilities():
            self._walk(location, field.piece, cap, steps)
        return steps

    # -- Check detection ----------------------------------------------------

    def has_check(
        self,
        color: PieceColor | None = None,
        steps: list[StepKind] | None = None,
    ) -> bool:
        """Is *color*'s king (default: side to move) attacked?

        *steps* may supply the opponent's pseudo-legal moves if the caller
        already has them.
        """
        if color is None:
            color = self._board.turn_color()
        king_location = self._board.find_king(color)
        if king_location is None:
            raise InvariantViolation(f"No {color.name} king on the board")
        if steps is None:
            steps = self.compute_simple_steps(color.invert())
        return any(step.target == king_location for step in steps)

    # -- Move list stages -----------------------------------------------------

    def extend_promotions(self, steps: list[StepKind]) -> list[StepKind]:
        """Replace pawn moves onto the last rank with one move per promotion kind."""
        board = self._board
        extended: list[StepKind] = []
        for step_kind in steps:
            if isinstance(step_kind, GoTo):
                piece = board[step_kind.step.from_loc].piece
                if (
                    piece is not None
                    and piece.kind == PieceKind.PAWN
                    and step_kind.target.y == self._last_rank(piece.color)
                ):
                    extended.extend(
                        Promote(step_kind.step, kind) for kind in PROMOTION_KINDS
                    )
                    continue
            extended.append(step_kind)
        return extended

    def castle_moves(self) -> list[Castle]:
        """Castles available to the side to move, ignoring attacked squares."""
        board = self._board
        color = board.turn_color()
        rank = self._home_rank(color)
        king_field = board.field_at_xy(KING_FILE, rank)
        if (
            king_field is None
            or king_field.piece != ColoredPiece(PieceKind.KING, color)
            or not king_field.is_unmoved
        ):
            return []

        castles: list[Castle] = []
        for kingside in (False, True):
            castle = Castle.for_side(
                color, kingside=kingside, width=board.width, height=board.height
            )
            rook_loc = castle.rook_step.from_loc
            if not board.contains_piece(rook_loc, (PieceKind.ROOK,), color):
                continue
            if not board.is_unmoved(rook_loc):
                continue
            low, high = sorted((KING_FILE, rook_loc.x))
            if all(board.is_empty(Location(x, rank)) for x in range(low + 1, high)):
                castles.append(castle)
        return castles

    def filter_check_steps(self, steps: list[StepKind]) -> list[StepKind]:
        """Drop moves that leave the mover's own king in check."""
        color = self._board.turn_color()
        legal: list[StepKind] = []
        for step_kind in steps:
            trial = self._board.copy()
            trial.apply_step_kind(step_kind)
            if not StepComputer(trial).has_check(color):
                legal.append(step_kind)
        _LOGGER.debug(
            "%s: %d of %d candidate moves are legal",
            color,
            len(legal),
            len(steps),
        )
        return legal

    # -- Internal helpers -----------------------------------------------------

    def _walk(
        self,
        origin: Location,
        piece: ColoredPiece,
        cap: MoveCapability,
        steps: list[GoTo],
    ) -> None:
        """Follow *cap* outward from *origin*, appending reachable targets."""
        board = self._board
        budget = cap.distance
        if (
            cap.first_move_distance is not None
            and origin.y == self._home_rank(piece.color, pawn=True)
        ):
            budget = cap.first_move_distance

        current = origin
        travelled = 0
        while budget == UNBOUNDED or travelled < budget:
            current = current.offset(cap.dx, cap.dy)
            field = board.field_at(current)
            if field is None:
                return
            if field.piece is not None:
                if (cap.can_take or cap.must_take) and field.piece.color != piece.color:
                    steps.append(GoTo(Step(origin, current)))
                return
            if cap.must_take:
                return
            steps.append(GoTo(Step(origin, current)))
            travelled += 1

    def _home_rank(self, color: PieceColor, pawn: bool = False) -> int:
        offset = 1 if pawn else 0
        if color == PieceColor.WHITE:
            return offset
        return self._board.height - 1 - offset

    def _last_rank(self, color: PieceColor) -> int:
        return self._board.height - 1 if color == PieceColor.WHITE else 0
