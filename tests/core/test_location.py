"""Tests for Location, PieceColor/PieceKind letters and ColoredPiece."""

import pytest

from rookery.core.enums import PieceColor, PieceKind
from rookery.core.errors import DecodeError
from rookery.core.location import Location
from rookery.core.piece import CAPABILITIES, ColoredPiece


class TestLocationNotation:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a1", Location(0, 0)),
            ("e4", Location(4, 3)),
            ("h8", Location(7, 7)),
            ("B5", Location(1, 4)),
            ("a10", Location(0, 9)),
        ],
    )
    def test_decode(self, name: str, expected: Location) -> None:
        assert Location.decode(name) == expected

    def test_encode(self) -> None:
        assert Location(6, 7).encode() == "g8"
        assert str(Location(0, 0)) == "a1"

    def test_round_trip_all_squares(self) -> None:
        for x in range(8):
            for y in range(8):
                loc = Location(x, y)
                assert Location.decode(loc.encode()) == loc

    @pytest.mark.parametrize("name", ["", "a", "a0", "9a", "-1", "aa", "a-1", "a١"])
    def test_decode_rejects_malformed(self, name: str) -> None:
        with pytest.raises(DecodeError):
            Location.decode(name)

    def test_encode_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            Location(0, -1).encode()

    def test_offset(self) -> None:
        assert Location(4, 1).offset(0, 2) == Location(4, 3)
        assert Location(0, 0).offset(-1, 0) == Location(-1, 0)


class TestEnums:
    def test_invert(self) -> None:
        assert PieceColor.WHITE.invert() == PieceColor.BLACK
        assert PieceColor.BLACK.invert() == PieceColor.WHITE

    def test_color_decode_is_case_insensitive(self) -> None:
        assert PieceColor.decode("W") == PieceColor.WHITE
        assert PieceColor.decode("b") == PieceColor.BLACK

    def test_color_decode_rejects_unknown(self) -> None:
        with pytest.raises(DecodeError):
            PieceColor.decode("x")

    @pytest.mark.parametrize("kind", list(PieceKind))
    def test_kind_letter_round_trip(self, kind: PieceKind) -> None:
        assert PieceKind.decode(kind.letter) == kind
        assert PieceKind.decode(kind.letter.lower()) == kind

    def test_kind_decode_rejects_unknown(self) -> None:
        with pytest.raises(DecodeError):
            PieceKind.decode("z")


class TestColoredPiece:
    def test_str(self) -> None:
        assert str(ColoredPiece(PieceKind.KING, PieceColor.WHITE)) == "Kw"
        assert str(ColoredPiece(PieceKind.KNIGHT, PieceColor.BLACK)) == "Nb"

    def test_symbol(self) -> None:
        assert ColoredPiece(PieceKind.QUEEN, PieceColor.WHITE).symbol == "♕"
        assert ColoredPiece(PieceKind.QUEEN, PieceColor.BLACK).symbol == "♛"

    def test_black_capabilities_are_mirrored(self) -> None:
        white = ColoredPiece(PieceKind.PAWN, PieceColor.WHITE).capabilities()
        black = ColoredPiece(PieceKind.PAWN, PieceColor.BLACK).capabilities()
        assert [(c.dx, c.dy) for c in white] == [(0, 1), (1, 1), (-1, 1)]
        assert [(c.dx, c.dy) for c in black] == [(0, -1), (1, -1), (-1, -1)]

    def test_every_kind_has_capabilities(self) -> None:
        assert set(CAPABILITIES) == set(PieceKind)
