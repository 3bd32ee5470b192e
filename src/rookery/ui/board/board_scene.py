"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from rookery.core.enums import PieceColor
from rookery.core.location import Location
from rookery.core.step import Castle, Promote, StepKind
from rookery.core.step_computer import StepComputer
from rookery.ui.board.piece_item import PieceItem
from rookery.ui.dialogs.promotion_dialog import PromotionDialog
from rookery.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from rookery.core.board import Board


def move_squares(step_kind: StepKind) -> tuple[Location, Location]:
    """Origin and destination a user clicks to play *step_kind*.

    A castle is entered by moving the king onto its destination square.
    """
    step = step_kind.king_step if isinstance(step_kind, Castle) else step_kind.step
    return step.from_loc, step.to_loc


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Signals:
        step_made(StepKind): Emitted when the user completes a legal move
            with two clicks (origin, then destination).
    """

    step_made = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._width = 8
        self._height = 8
        self._flipped = False

        # Interaction state
        self._selected: Location | None = None
        self._legal_moves: tuple[StepKind, ...] = ()
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Location, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Location, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Display *board* (full redraw)."""
        resized = (board.width, board.height) != (self._width, self._height)
        self._board = board
        self._width, self._height = board.width, board.height
        if resized:
            self._draw_board()
        self.refresh()

    def refresh(self) -> None:
        """Re-read the board after it was mutated."""
        self._clear_selection()
        self._sync_pieces()
        self.highlight_check()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._clear_items(self._last_move_highlights)
        self._draw_board()
        if self._board is not None:
            self.refresh()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._board is not None:
            self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def highlight_last_move(self, step_kind: StepKind | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_items(self._last_move_highlights)
        if step_kind is None:
            return
        for location in move_squares(step_kind):
            rect = self._make_highlight(location, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    def highlight_check(self) -> None:
        """Highlight the king of the side to move if it is in check."""
        self._clear_items(self._check_items)
        if self._board is None:
            return
        color = self._board.turn_color()
        king = self._board.find_king(color)
        if king is None:
            return
        if StepComputer(self._board).has_check(color):
            rect = self._make_highlight(king, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("DejaVu Sans", max(9, t // 8))

        for y in range(self._height):
            for x in range(self._width):
                location = Location(x, y)
                col, row = self._visual_coords(location)
                is_dark = (x + y) % 2 == 0
                color = self._theme.dark_square if is_dark else self._theme.light_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[location] = rect

                label_color = (
                    self._theme.coord_dark if is_dark else self._theme.coord_light
                )
                # Rank numbers (left edge)
                if col == 0:
                    self._add_coord(str(y + 1), col * t + 2, row * t + 1, font, label_color)
                # File letters (bottom edge)
                if row == self._height - 1:
                    self._add_coord(
                        location.encode()[0],
                        col * t + t - 12,
                        row * t + t - 16,
                        font,
                        label_color,
                    )

        self.setSceneRect(0, 0, self._width * t, self._height * t)

    def _add_coord(self, text: str, px: float, py: float, font: QFont, color: QColor) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(px, py)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        for location in self._board.locations():
            piece = self._board[location].piece
            if piece is None:
                continue
            glyph_color = (
                self._theme.white_piece
                if piece.color == PieceColor.WHITE
                else self._theme.black_piece
            )
            item = PieceItem(piece, location, self.TILE, glyph_color)
            item.place(*self._visual_coords(location))
            self.addItem(item)
            self._piece_items[location] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)
        self.click(self._pos_to_location(event.scenePos()))
        super().mousePressEvent(event)

    def click(self, location: Location | None) -> StepKind | None:
        """Handle a click on *location* (``None`` = outside the board).

        The first click selects one of the mover's pieces, the second one
        plays the move if it is legal. Returns the emitted move, if any.
        """
        if self._board is None or location is None:
            self._clear_selection()
            return None

        if self._selected is not None:
            step_kind = self._find_legal_move(self._selected, location)
            if step_kind is not None:
                self._clear_selection()
                self.step_made.emit(step_kind)
                return step_kind

        piece = self._board[location].piece
        if piece is not None and piece.color == self._board.turn_color():
            self._select_square(location)
        else:
            self._clear_selection()
        return None

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, location: Location) -> None:
        self._clear_selection()
        self._selected = location

        rect = self._make_highlight(location, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._board is not None:
            self._legal_moves = tuple(StepComputer(self._board).compute_steps())
            if self._show_legal_moves:
                targets = {
                    dst
                    for src, dst in map(move_squares, self._legal_moves)
                    if src == location
                }
                for target in targets:
                    dot = self._make_highlight(target, self._theme.highlight_to)
                    self._legal_dot_items.append(dot)

    def _clear_selection(self) -> None:
        self._selected = None
        self._legal_moves = ()
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Move resolution ──────────────────────────────────────────────────

    def _find_legal_move(self, src: Location, dst: Location) -> StepKind | None:
        """Find the single legal move from *src* to *dst*.

        If multiple candidates exist (promotion), ask the user which piece to pick.
        """
        if self._board is None:
            return None
        if not self._legal_moves:
            self._legal_moves = tuple(StepComputer(self._board).compute_steps())

        candidates = [m for m in self._legal_moves if move_squares(m) == (src, dst)]
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        parent = self.views()[0] if self.views() else None
        kind = PromotionDialog.ask(self._board.turn_color(), parent)
        if kind is None:
            return None
        for step_kind in candidates:
            if isinstance(step_kind, Promote) and step_kind.piece == kind:
                return step_kind
        return None

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, location: Location) -> tuple[int, int]:
        """Board location -> visual (column, row)."""
        if self._flipped:
            return self._width - 1 - location.x, location.y
        return location.x, self._height - 1 - location.y

    def _pos_to_location(self, pos: QPointF) -> Location | None:
        """Scene position -> board location."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < self._width and 0 <= row < self._height):
            return None
        if self._flipped:
            return Location(self._width - 1 - col, row)
        return Location(col, self._height - 1 - row)

    def _make_highlight(self, location: Location, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        col, row = self._visual_coords(location)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
