"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from rookery.core.location import Location
from rookery.core.piece import ColoredPiece

_GLYPH_RATIO = 0.72


class PieceItem(QGraphicsSimpleTextItem):
    """A single piece drawn as its unicode symbol.

    Stores its logical *location* so the scene can map items back to squares.
    """

    def __init__(
        self,
        piece: ColoredPiece,
        location: Location,
        tile_size: int,
        color: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.location = location
        self._tile_size = tile_size

        font = QFont("DejaVu Sans")
        font.setPixelSize(int(tile_size * _GLYPH_RATIO))
        self.setFont(font)
        self.setBrush(QBrush(color))
        self.setPen(QPen(QColor(0, 0, 0, 90), 1.0))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    def place(self, column: int, row: int) -> None:
        """Center the glyph inside the visual cell ``(column, row)``."""
        t = self._tile_size
        bounds = self.boundingRect()
        self.setPos(
            column * t + (t - bounds.width()) / 2,
            row * t + (t - bounds.height()) / 2,
        )
