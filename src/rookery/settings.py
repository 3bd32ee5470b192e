"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flip_board: bool = False

    # Logging
    log_file: str | None = "rookery.log"
    log_level: str = "DEBUG"
