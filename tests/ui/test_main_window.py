"""Tests for MainWindow game flow, menus and status reporting."""

from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QMessageBox

from rookery.core.location import Location
from rookery.core.step import GoTo, Step
from rookery.game.state import GameState
from rookery.settings import AppSettings
from rookery.ui.main_window import MainWindow


def _go(src: str, dst: str) -> GoTo:
    return GoTo(Step(Location.decode(src), Location.decode(dst)))


@pytest.fixture
def window() -> MainWindow:
    return MainWindow(AppSettings(log_file=None))


@pytest.fixture
def infos(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    shown: list[str] = []
    monkeypatch.setattr(
        QMessageBox,
        "information",
        lambda _parent, _title, text: shown.append(text),
    )
    return shown


class TestMainWindowPlay:
    def test_starts_with_white_to_move(self, window: MainWindow) -> None:
        assert window.header_text == "White to move"
        assert window.game.state is GameState.ONGOING
        assert len(window.board_view.board_scene._piece_items) == 32

    def test_legal_move_updates_header_and_highlights(self, window: MainWindow) -> None:
        state = window.play(_go("e2", "e4"))

        assert state is GameState.ONGOING
        assert window.header_text == "Black to move"
        assert window.status_text == "Played e2e4"
        assert len(window.board_view.board_scene._last_move_highlights) == 2

    def test_illegal_move_reported_in_status_bar(self, window: MainWindow) -> None:
        assert window.play(_go("e2", "e5")) is None
        assert window.status_text.startswith("Move failed: Illegal move e2e5")
        assert window.game.board.turn == 0

    def test_scene_signal_reaches_game(self, window: MainWindow) -> None:
        window.board_view.board_scene.step_made.emit(_go("g1", "f3"))
        assert window.game.board.turn == 1

    def test_check_is_shown_in_header(self, window: MainWindow) -> None:
        for src, dst in (("e2", "e4"), ("f7", "f6"), ("d1", "h5")):
            window.play(_go(src, dst))
        assert window.header_text == "Black to move (check)"


class TestMainWindowGameOver:
    def test_checkmate_ends_game(self, window: MainWindow, infos: list[str]) -> None:
        for src, dst in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            window.play(_go(src, dst))

        assert window.game.state is GameState.BLACK_WON
        assert window.header_text == "Black has won!"
        assert infos == ["Black has won!"]
        assert not window.board_view.board_scene._interactive

    def test_move_after_game_over_is_reported(
        self, window: MainWindow, infos: list[str]
    ) -> None:
        for src, dst in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            window.play(_go(src, dst))

        assert window.play(_go("a2", "a3")) is None
        assert "Game is over" in window.status_text

    def test_new_game_resets(self, window: MainWindow, infos: list[str]) -> None:
        window.play(_go("e2", "e4"))
        window._act_new_game.trigger()

        assert window.game.board.turn == 0
        assert window.game.last_step is None
        assert window.header_text == "White to move"
        assert window.board_view.board_scene._interactive
        assert window.board_view.board_scene._last_move_highlights == []


class TestMainWindowMenus:
    def test_flip_action(self, window: MainWindow) -> None:
        scene = window.board_view.board_scene
        assert not scene.is_flipped()
        window._act_flip.trigger()
        assert scene.is_flipped()

    def test_flip_from_settings(self) -> None:
        window = MainWindow(AppSettings(log_file=None, flip_board=True))
        assert window.board_view.board_scene.is_flipped()

    def test_coordinates_toggle(self, window: MainWindow) -> None:
        scene = window.board_view.board_scene
        window._act_coordinates.setChecked(False)
        assert all(not item.isVisible() for item in scene._coord_items)
        assert not window._settings.show_coordinates

    def test_legal_moves_toggle(self, window: MainWindow) -> None:
        scene = window.board_view.board_scene
        window._act_legal_moves.setChecked(False)
        scene.click(Location.decode("e2"))
        assert scene._legal_dot_items == []
        assert not window._settings.show_legal_moves
