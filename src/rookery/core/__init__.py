"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from rookery.core import Board, StepComputer

    board = Board.standard()
    evaluation = StepComputer(board).evaluate_basic()
    for step_kind in evaluation.possible_moves:
        print(step_kind.encode())
"""

from rookery.core.board import Board
from rookery.core.enums import PieceColor, PieceKind
from rookery.core.errors import (
    ChessError,
    DecodeError,
    GameOverError,
    IllegalMoveError,
    InvariantViolation,
)
from rookery.core.evaluation import BasicEvaluation
from rookery.core.field import EMPTY, FieldContent
from rookery.core.location import Location
from rookery.core.piece import CAPABILITIES, UNBOUNDED, ColoredPiece, MoveCapability
from rookery.core.step import (
    Castle,
    GoTo,
    Promote,
    Step,
    StepKind,
    decode_step_kind,
)
from rookery.core.step_computer import PROMOTION_KINDS, StepComputer

__all__ = [
    # Enums
    "PieceColor",
    "PieceKind",
    # Errors
    "ChessError",
    "DecodeError",
    "GameOverError",
    "IllegalMoveError",
    "InvariantViolation",
    # Value types
    "CAPABILITIES",
    "EMPTY",
    "UNBOUNDED",
    "ColoredPiece",
    "FieldContent",
    "Location",
    "MoveCapability",
    # Moves
    "Castle",
    "GoTo",
    "Promote",
    "Step",
    "StepKind",
    "decode_step_kind",
    # Domain objects
    "BasicEvaluation",
    "Board",
    "PROMOTION_KINDS",
    "StepComputer",
]
