"""Tests for Board."""

import pytest

from rookery.core.board import Board
from rookery.core.enums import PieceColor, PieceKind
from rookery.core.errors import DecodeError, InvariantViolation
from rookery.core.location import Location
from rookery.core.piece import ColoredPiece
from rookery.core.step import Castle, GoTo, Promote, Step

WK = ColoredPiece(PieceKind.KING, PieceColor.WHITE)
WR = ColoredPiece(PieceKind.ROOK, PieceColor.WHITE)
WQ = ColoredPiece(PieceKind.QUEEN, PieceColor.WHITE)
BK = ColoredPiece(PieceKind.KING, PieceColor.BLACK)


def _loc(name: str) -> Location:
    return Location.decode(name)


class TestBoardStandard:
    def test_piece_count(self) -> None:
        board = Board.standard()
        assert len(board.pieces(PieceColor.WHITE)) == 16
        assert len(board.pieces(PieceColor.BLACK)) == 16

    def test_kings(self) -> None:
        board = Board.standard()
        assert board.find_king(PieceColor.WHITE) == _loc("e1")
        assert board.find_king(PieceColor.BLACK) == _loc("e8")

    def test_back_ranks(self) -> None:
        board = Board.standard()
        expected = "RNBQKBNR"
        for x, letter in enumerate(expected):
            white = board[Location(x, 0)].piece
            black = board[Location(x, 7)].piece
            assert white == ColoredPiece(PieceKind.decode(letter), PieceColor.WHITE)
            assert black == ColoredPiece(PieceKind.decode(letter), PieceColor.BLACK)

    def test_everything_unmoved_and_white_to_move(self) -> None:
        board = Board.standard()
        assert board.turn == 0
        assert board.turn_color() == PieceColor.WHITE
        for location, _piece in board.pieces(PieceColor.WHITE):
            assert board.is_unmoved(location)

    def test_empty_middle(self) -> None:
        board = Board.standard()
        for y in range(2, 6):
            for x in range(8):
                assert board.is_empty(Location(x, y))


class TestBoardDescription:
    def test_parse(self) -> None:
        board = Board.from_description("a1kw\na2rb\n\n  b1rb  \n")
        assert board[_loc("a1")].piece == WK
        assert board[_loc("a2")].piece == ColoredPiece(PieceKind.ROOK, PieceColor.BLACK)
        assert board[_loc("b1")].piece == ColoredPiece(PieceKind.ROOK, PieceColor.BLACK)
        assert len(board.pieces(PieceColor.BLACK)) == 2
        assert board.is_unmoved(_loc("a1"))

    def test_upper_case_tokens(self) -> None:
        board = Board.from_description("E1KW")
        assert board[_loc("e1")].piece == WK

    @pytest.mark.parametrize(
        "text",
        ["a1kx", "a1zw", "z", "a1", "?1kw", "a0kw"],
    )
    def test_malformed_token(self, text: str) -> None:
        with pytest.raises(DecodeError, match="Line 1"):
            Board.from_description(text)

    def test_error_names_line(self) -> None:
        with pytest.raises(DecodeError, match="Line 3"):
            Board.from_description("a1kw\nh8kb\na1qq")

    def test_off_board(self) -> None:
        with pytest.raises(DecodeError, match="off the board"):
            Board.from_description("i1kw")

    def test_round_trip(self) -> None:
        board = Board.standard()
        assert Board.from_description(board.to_description()) == board


class TestBoardAccess:
    def test_field_at_out_of_bounds(self) -> None:
        board = Board()
        assert board.field_at(Location(8, 0)) is None
        assert board.field_at_xy(-1, 3) is None
        assert board.field_at(Location(7, 7)) is not None

    def test_getitem_out_of_bounds(self) -> None:
        with pytest.raises(IndexError):
            Board()[Location(0, 8)]

    def test_contains_piece(self) -> None:
        board = Board.standard()
        assert board.contains_piece(_loc("a1"), (PieceKind.ROOK,), PieceColor.WHITE)
        assert not board.contains_piece(_loc("a1"), (PieceKind.ROOK,), PieceColor.BLACK)
        assert not board.contains_piece(_loc("a3"), (PieceKind.ROOK,), PieceColor.WHITE)
        assert not board.contains_piece(Location(9, 9), PieceKind, PieceColor.WHITE)

    def test_put_off_board_is_invariant_violation(self) -> None:
        with pytest.raises(InvariantViolation):
            Board().put_piece(WK, Location(8, 8))

    def test_rectangular_board(self) -> None:
        board = Board(5, 6)
        assert len(board.locations()) == 30
        assert board.locations()[0] == Location(0, 0)
        assert board.locations()[5] == Location(0, 1)


class TestBoardApply:
    def test_first_move_is_stamped_as_moved(self) -> None:
        board = Board.standard()
        board.apply_step_kind(GoTo(Step.of((6, 0), (5, 2))))
        assert board[_loc("f3")].turn == 1
        assert not board.is_unmoved(_loc("f3"))

    def test_turn_stamp_and_counter(self) -> None:
        board = Board.standard()
        board.apply_step_kind(GoTo(Step.of((4, 1), (4, 3))))
        board.apply_step_kind(GoTo(Step.of((4, 6), (4, 4))))
        assert board.turn == 2
        assert board.turn_color() == PieceColor.WHITE
        assert board[_loc("e5")].turn == 2
        assert not board.is_unmoved(_loc("e5"))
        assert board.is_empty(_loc("e7"))

    def test_apply_step_from_empty_square(self) -> None:
        board = Board.standard()
        with pytest.raises(InvariantViolation):
            board.apply_step(Step.of((4, 3), (4, 4)))

    def test_failed_apply_keeps_turn(self) -> None:
        board = Board.standard()
        with pytest.raises(InvariantViolation):
            board.apply_step_kind(GoTo(Step.of((4, 3), (4, 4))))
        assert board.turn == 0

    def test_castle_kingside(self) -> None:
        board = Board.from_description("e1kw\nh1rw\ne8kb")
        board.apply_step_kind(Castle.for_side(PieceColor.WHITE, kingside=True))
        assert board[_loc("g1")].piece == WK
        assert board[_loc("f1")].piece == WR
        assert board.is_empty(_loc("e1"))
        assert board.is_empty(_loc("h1"))
        assert board.turn == 1

    def test_castle_without_rook_is_not_half_applied(self) -> None:
        board = Board.from_description("e1kw\ne8kb")
        snapshot = board.copy()
        with pytest.raises(InvariantViolation):
            board.apply_step_kind(Castle.for_side(PieceColor.WHITE, kingside=False))
        assert board == snapshot

    def test_promotion(self) -> None:
        board = Board.from_description("a7pw\ne1kw\ne8kb")
        board.apply_step_kind(Promote(Step.of((0, 6), (0, 7)), PieceKind.QUEEN))
        assert board[_loc("a8")].piece == WQ
        assert board.is_empty(_loc("a7"))
        assert board.turn == 1

    def test_black_promotion_keeps_colour(self) -> None:
        board = Board.from_description("h2pb\ne1kw\ne8kb")
        board.apply_step_kind(GoTo(Step.of((4, 0), (3, 0))))
        board.apply_step_kind(Promote(Step.of((7, 1), (7, 0)), PieceKind.KNIGHT))
        assert board[_loc("h1")].piece == ColoredPiece(PieceKind.KNIGHT, PieceColor.BLACK)
        assert board[_loc("h1")].turn == 2


class TestBoardCopyAndRender:
    def test_copy_independence(self) -> None:
        board = Board.standard()
        copy = board.copy()
        assert copy == board
        copy.apply_step_kind(GoTo(Step.of((6, 0), (5, 2))))
        assert copy != board
        assert board[_loc("g1")].piece is not None
        assert board.turn == 0

    def test_pretty_string_plain(self) -> None:
        board = Board(1, 1)
        board.put_piece(WK, Location(0, 0))
        assert board.to_pretty_string(colored=False) == "-----\n| ♔ |\n-----"

    def test_pretty_string_layout(self) -> None:
        text = Board.standard().to_pretty_string(colored=False)
        lines = text.splitlines()
        assert lines[0] == "-" * 33
        assert lines[1].startswith("| ♜ | ♞ ")
        assert lines[2] == "|---" * 8 + "|"
        assert lines[-2].startswith("| ♖ | ♘ ")
        assert len(lines) == 17

    def test_pretty_string_colored(self) -> None:
        text = Board.standard().to_pretty_string()
        assert "\x1b[33m♔\x1b[0m" in text
        assert "\x1b[31m♚\x1b[0m" in text

    def test_repr(self) -> None:
        lines = repr(Board.standard()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[-1] == "  a b c d e f g h"
