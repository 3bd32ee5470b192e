"""Board coordinates and their algebraic notation.

``x`` runs along the files (a, b, c, ...) and ``y`` along the ranks
(1, 2, 3, ...), both 0-based::

    Location(0, 0) <-> "a1"
    Location(4, 3) <-> "e4"
    Location(7, 7) <-> "h8"
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from rookery.core.errors import DecodeError


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable board coordinate."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Location:
        """Location shifted by ``(dx, dy)``; may lie off the board."""
        return Location(self.x + dx, self.y + dy)

    # ── Notation ─────────────────────────────────────────────────────────

    def encode(self) -> str:
        """Algebraic name, e.g. ``Location(6, 7)`` -> ``'g8'``."""
        if not 0 <= self.x < len(ascii_lowercase) or self.y < 0:
            raise ValueError(f"Location {self!r} has no algebraic name")
        return f"{ascii_lowercase[self.x]}{self.y + 1}"

    @classmethod
    def decode(cls, name: str) -> Location:
        """Parse an algebraic name, e.g. ``'b5'`` -> ``Location(1, 4)``."""
        if len(name) < 2:
            raise DecodeError(f"Invalid location: {name!r}")
        file_char, rank_text = name[0].lower(), name[1:]
        if file_char not in ascii_lowercase:
            raise DecodeError(f"Invalid file letter in location: {name!r}")
        if not (rank_text.isascii() and rank_text.isdigit()) or int(rank_text) < 1:
            raise DecodeError(f"Invalid rank in location: {name!r}")
        return cls(ascii_lowercase.index(file_char), int(rank_text) - 1)

    def __str__(self) -> str:
        return self.encode()
