"""Move representations and their text notation.

``StepKind`` is the unit of legality checking, application and notation:

* ``GoTo``    - ordinary move or capture, ``"e2e4"``
* ``Promote`` - pawn reaching the last rank, ``"e7e8=Q"``
* ``Castle``  - king and rook relocated together, ``"O-O"`` / ``"O-O-O"``
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from rookery.core.enums import PieceColor, PieceKind
from rookery.core.errors import DecodeError
from rookery.core.location import Location

KING_FILE = 4

_COORDS_RE = re.compile(r"([a-z][0-9]+)([a-z][0-9]+)", re.IGNORECASE)
_PROMOTION_RE = re.compile(r"([a-z][0-9]+)([a-z][0-9]+)=([a-z])", re.IGNORECASE)
_KINGSIDE_TOKENS = frozenset({"O-O", "0-0"})
_QUEENSIDE_TOKENS = frozenset({"O-O-O", "0-0-0"})


@dataclass(frozen=True, slots=True)
class Step:
    """A single piece relocation."""

    from_loc: Location
    to_loc: Location

    @classmethod
    def of(cls, src: tuple[int, int], dst: tuple[int, int]) -> Step:
        """Build from ``(x, y)`` pairs, e.g. ``Step.of((4, 1), (4, 3))``."""
        return cls(Location(*src), Location(*dst))

    def encode(self) -> str:
        return f"{self.from_loc.encode()}{self.to_loc.encode()}"

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True, slots=True)
class GoTo:
    """Ordinary move or capture."""

    step: Step

    @property
    def target(self) -> Location:
        return self.step.to_loc

    def encode(self) -> str:
        return self.step.encode()

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True, slots=True)
class Promote:
    """Pawn move onto the last rank, replaced in place by *piece*."""

    step: Step
    piece: PieceKind

    @property
    def target(self) -> Location:
        return self.step.to_loc

    def encode(self) -> str:
        return f"{self.step.encode()}={self.piece.letter}"

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True, slots=True)
class Castle:
    """King and rook moved together."""

    king_step: Step
    rook_step: Step

    @classmethod
    def for_side(
        cls,
        color: PieceColor,
        *,
        kingside: bool,
        width: int = 8,
        height: int = 8,
    ) -> Castle:
        """Castle of *color* toward the kingside or queenside rook."""
        rank = 0 if color == PieceColor.WHITE else height - 1
        direction = 1 if kingside else -1
        rook_file = width - 1 if kingside else 0
        king_step = Step.of((KING_FILE, rank), (KING_FILE + 2 * direction, rank))
        rook_step = Step.of((rook_file, rank), (KING_FILE + direction, rank))
        return cls(king_step, rook_step)

    @property
    def is_queenside(self) -> bool:
        return self.rook_step.from_loc.x < self.king_step.from_loc.x

    @property
    def target(self) -> Location:
        """Square the king lands on."""
        return self.king_step.to_loc

    def encode(self) -> str:
        return "O-O-O" if self.is_queenside else "O-O"

    def __str__(self) -> str:
        return self.encode()


StepKind: TypeAlias = GoTo | Promote | Castle


def decode_step_kind(
    text: str,
    color: PieceColor,
    *,
    width: int = 8,
    height: int = 8,
) -> StepKind:
    """Parse move notation for the side *color*.

    Castling resolves to *color*'s back rank; both the letter ``O`` and the
    digit ``0`` spellings are accepted.
    """
    token = text.strip()
    castle_token = token.upper()
    if castle_token in _KINGSIDE_TOKENS:
        return Castle.for_side(color, kingside=True, width=width, height=height)
    if castle_token in _QUEENSIDE_TOKENS:
        return Castle.for_side(color, kingside=False, width=width, height=height)

    if "=" in token:
        match = _PROMOTION_RE.fullmatch(token)
        if match is None:
            raise DecodeError(f"Invalid promotion format: {text!r}")
        src, dst, kind = match.groups()
        step = Step(Location.decode(src), Location.decode(dst))
        return Promote(step, PieceKind.decode(kind))

    match = _COORDS_RE.fullmatch(token)
    if match is None:
        raise DecodeError(f"Invalid move format: {text!r}")
    src, dst = match.groups()
    return GoTo(Step(Location.decode(src), Location.decode(dst)))
