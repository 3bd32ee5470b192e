"""Visual theme constants and QSS styles for Rookery."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    last_move: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def terminal(cls) -> BoardTheme:
        """Dark squares with yellow / red pieces, like the text board."""
        return cls(
            light_square=QColor(90, 90, 90),
            dark_square=QColor(30, 30, 30),
            highlight_from=QColor(255, 255, 0, 90),
            highlight_to=QColor(255, 255, 255, 50),
            highlight_check=QColor(255, 0, 0, 120),
            last_move=QColor(120, 160, 255, 90),
            coord_light=QColor(160, 160, 160),
            coord_dark=QColor(200, 200, 200),
            white_piece=QColor(240, 200, 40),
            black_piece=QColor(220, 50, 50),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names fall back to the default."""
        factories = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Terminal": cls.terminal,
        }
        return factories.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Blue", "Terminal")

APP_STYLE = """
QMainWindow, QWidget {
    background-color: #2b2b2b;
    color: #e0e0e0;
}
QLabel#header {
    font-size: 16px;
    font-weight: bold;
    padding: 6px;
}
QStatusBar {
    color: #c0c0c0;
}
QPushButton {
    background-color: #3c3f41;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 4px 10px;
}
QPushButton:hover {
    background-color: #4b4f52;
}
"""
