"""Tests for GameState."""

import pytest

from rookery.core.enums import PieceColor
from rookery.game.state import GameState


class TestGameState:
    def test_won(self) -> None:
        assert GameState.won(PieceColor.WHITE) is GameState.WHITE_WON
        assert GameState.won(PieceColor.BLACK) is GameState.BLACK_WON

    @pytest.mark.parametrize(
        ("state", "winner"),
        [
            (GameState.ONGOING, None),
            (GameState.STALEMATE, None),
            (GameState.WHITE_WON, PieceColor.WHITE),
            (GameState.BLACK_WON, PieceColor.BLACK),
        ],
    )
    def test_winner(self, state: GameState, winner: PieceColor | None) -> None:
        assert state.winner == winner

    def test_only_ongoing_is_not_terminal(self) -> None:
        assert [s for s in GameState if not s.is_terminal] == [GameState.ONGOING]
