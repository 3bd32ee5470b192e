"""MainWindow — top-level window assembling the board and game controls."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from rookery.core.errors import ChessError
from rookery.core.step import StepKind
from rookery.game.game import Game
from rookery.game.state import GameState
from rookery.settings import AppSettings
from rookery.ui.board.board_view import BoardView
from rookery.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Rookery."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Rookery")
        self.setMinimumSize(480, 540)
        self.resize(720, 780)

        self._settings = AppSettings() if settings is None else settings
        self._game = Game()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self._after_new_game()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def header_text(self) -> str:
        return self._header.text()

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._header = QLabel()
        self._header.setObjectName("header")
        root.addWidget(self._header)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_view.addAction(self._act_flip)

        self._act_coordinates = QAction("Show &Coordinates", self)
        self._act_coordinates.setCheckable(True)
        self._act_coordinates.toggled.connect(self._on_toggle_coordinates)
        self._menu_view.addAction(self._act_coordinates)

        self._act_legal_moves = QAction("Show &Legal Moves", self)
        self._act_legal_moves.setCheckable(True)
        self._act_legal_moves.toggled.connect(self._on_toggle_legal_moves)
        self._menu_view.addAction(self._act_legal_moves)

    def _connect_signals(self) -> None:
        self._board_view.step_made.connect(self._on_user_move)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_flipped(s.flip_board)
        self._act_coordinates.setChecked(s.show_coordinates)
        self._act_legal_moves.setChecked(s.show_legal_moves)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self) -> None:
        """Discard the current game and start from the initial position."""
        self._game = Game()
        _LOGGER.info("New game started")
        self._after_new_game()
        self._status_label.setText("New game started")

    def _after_new_game(self) -> None:
        """Sync UI after a new game starts."""
        scene = self._board_view.board_scene
        scene.set_board(self._game.board)
        scene.highlight_last_move(None)
        scene.set_interactive(True)
        self._update_header()

    # ── User actions ─────────────────────────────────────────────────────

    def play(self, step_kind: StepKind) -> GameState | None:
        """Apply *step_kind* to the current game and refresh the board.

        Rule violations are reported in the status bar; returns the new
        state, or ``None`` if the move was rejected.
        """
        try:
            state = self._game.apply_stepkind(step_kind)
        except ChessError as exc:
            self._status_label.setText(f"Move failed: {exc}")
            return None

        scene = self._board_view.board_scene
        scene.refresh()
        scene.highlight_last_move(step_kind)
        self._status_label.setText(f"Played {step_kind.encode()}")
        self._update_header()

        if state.is_terminal:
            self._on_game_over(state)
        return state

    def _on_user_move(self, step_kind: StepKind) -> None:
        """Handle a move from the board UI."""
        self.play(step_kind)

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())
        scene.highlight_last_move(self._game.last_step)

    def _on_toggle_coordinates(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._board_view.board_scene.set_show_coordinates(checked)

    def _on_toggle_legal_moves(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self._board_view.board_scene.set_show_legal_moves(checked)

    # ── Game state display ───────────────────────────────────────────────

    def _on_game_over(self, state: GameState) -> None:
        self._board_view.board_scene.set_interactive(False)
        text = self._game_over_text(state)
        self._status_label.setText(f"Game over: {text}")
        QMessageBox.information(self, "Game over", text)

    @staticmethod
    def _game_over_text(state: GameState) -> str:
        if state is GameState.STALEMATE:
            return "Game ended in stalemate!"
        winner = state.winner
        assert winner is not None
        return f"{str(winner).capitalize()} has won!"

    def _update_header(self) -> None:
        state = self._game.state
        if state.is_terminal:
            self._header.setText(self._game_over_text(state))
            return
        side = str(self._game.board.turn_color()).capitalize()
        check = " (check)" if self._game.evaluate().has_check else ""
        self._header.setText(f"{side} to move{check}")
