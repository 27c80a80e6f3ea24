# solochess/placement.py
# Finds a square for a piece so that it can capture onto a given target square.

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Optional

from .board import Board, Square
from .constants import PAWN_MIN_ROW
from .piece import PieceKind, source_offsets, symbol_of

placement_logger = logging.getLogger('placement')


@dataclass(frozen=True)
class PlacementCandidate:
    square: Square
    blocking_square: Optional[Square] = None


@dataclass(frozen=True)
class PlacementOutcome:
    success: bool
    square: Optional[Square] = None
    blocking_square: Optional[Square] = None


FAILED_PLACEMENT = PlacementOutcome(success=False)


def candidate_squares(board: Board, piece: PieceKind, target: Square) -> list[PlacementCandidate]:
    """
    Returns every square from which `piece` could capture onto `target`.
    The square must be on the board and empty, a pawn may not sit on the two
    back ranks, and a bishop's halfway square must be empty as well.
    """
    candidates = []
    for offset in source_offsets(piece):
        square = target.shifted(offset.d_row, offset.d_col)
        if not square.on_board() or not board.is_empty(square):
            continue
        if piece == PieceKind.PAWN and square.row < PAWN_MIN_ROW:
            continue
        if offset.blocking is not None:
            blocking_square = target.shifted(*offset.blocking)
            if not board.is_empty(blocking_square):
                continue
            candidates.append(PlacementCandidate(square, blocking_square))
        else:
            candidates.append(PlacementCandidate(square))
    return candidates


def place_around_square(board: Board, piece: PieceKind, target: Square,
                        rng: random.Random | None = None) -> PlacementOutcome:
    rng = rng or random
    candidates = candidate_squares(board, piece, target)
    if not candidates:
        placement_logger.debug(f"No square for {symbol_of(piece)} around ({target.row}, {target.col})")
        return FAILED_PLACEMENT

    chosen = rng.choice(candidates)
    board.place(piece, chosen.square)
    if chosen.blocking_square is not None:
        board.block(chosen.blocking_square)

    placement_logger.debug(
        f"{symbol_of(piece)} placed on ({chosen.square.row}, {chosen.square.col}) "
        f"to capture on ({target.row}, {target.col})")
    return PlacementOutcome(success=True, square=chosen.square, blocking_square=chosen.blocking_square)
