# solochess/piece.py
# Piece kinds and the movement rule table used to back-fill captures.
# Offsets are relative to the square being captured on: a piece standing at
# (target + offset) can capture onto the target.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class PieceKind(str, Enum):
    PAWN = "PAWN"
    KNIGHT = "KNIGHT"
    BISHOP = "BISHOP"
    ROOK = "ROOK"
    QUEEN = "QUEEN"
    KING = "KING"

    @property
    def symbol(self) -> str:
        return symbol_of(self)


PIECE_SYMBOLS = {
    PieceKind.PAWN: 'P',
    PieceKind.KNIGHT: 'N',
    PieceKind.BISHOP: 'B',
    PieceKind.ROOK: 'R',
    PieceKind.QUEEN: 'Q',
    PieceKind.KING: 'K',
}
SYMBOL_TO_KIND = {v: k for k, v in PIECE_SYMBOLS.items()}

PIECE_POOL = (PieceKind.PAWN, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.ROOK, PieceKind.QUEEN)
PIECE_POOL_WITH_KING = PIECE_POOL + (PieceKind.KING,)


def symbol_of(kind: PieceKind) -> str:
    return PIECE_SYMBOLS[kind]


def kind_from_symbol(symbol: str) -> PieceKind:
    try:
        return SYMBOL_TO_KIND[symbol.upper()]
    except KeyError:
        raise ValueError(f"Unknown piece symbol: {symbol!r}") from None


@dataclass(frozen=True)
class Offset:
    d_row: int
    d_col: int
    # Square relative to the target that must be empty for the move (bishops only).
    blocking: Optional[Tuple[int, int]] = None


_ADJACENT = [
    (0, 1), (1, 1), (1, 0), (1, -1),
    (0, -1), (-1, 1), (-1, 0), (-1, -1),
]

SOURCE_OFFSETS = {
    # pawn can only come from directly below
    PieceKind.PAWN: (Offset(-1, 0),),
    # bishop jumps two diagonally, passing over the halfway square
    PieceKind.BISHOP: (
        Offset(2, 2, (1, 1)), Offset(2, -2, (1, -1)),
        Offset(-2, 2, (-1, 1)), Offset(-2, -2, (-1, -1)),
    ),
    PieceKind.ROOK: tuple(Offset(dr, dc) for dr, dc in [(0, 1), (0, -1), (-1, 0), (1, 0)]),
    PieceKind.QUEEN: tuple(Offset(dr, dc) for dr, dc in _ADJACENT),
    PieceKind.KING: tuple(Offset(dr, dc) for dr, dc in _ADJACENT),
    PieceKind.KNIGHT: tuple(Offset(dr, dc) for dr, dc in [
        (-1, 2), (-1, -2), (1, 2), (1, -2),
        (2, -1), (-2, -1), (2, 1), (-2, 1),
    ]),
}


def source_offsets(kind: PieceKind) -> list[Offset]:
    """Returns the squares (relative to a target) a piece of this kind could capture from."""
    return list(SOURCE_OFFSETS[kind])
