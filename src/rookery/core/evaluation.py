"""Snapshot of the position as seen by the side to move."""

from __future__ import annotations

from dataclasses import dataclass

from rookery.core.step import StepKind


@dataclass(frozen=True, slots=True)
class BasicEvaluation:
    """Legal moves and check status; recomputed after every move."""

    has_check: bool
    has_checkmate: bool
    has_stalemate: bool
    possible_moves: tuple[StepKind, ...]
