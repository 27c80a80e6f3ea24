# solochess/board.py
from __future__ import annotations
import logging
from dataclasses import dataclass

from .constants import ROWS, COLS, EMPTY, BLOCKED, FEN_TRAILER
from .piece import PieceKind, symbol_of, kind_from_symbol

board_logger = logging.getLogger('board')


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    def on_board(self) -> bool:
        return 0 <= self.row < ROWS and 0 <= self.col < COLS

    def shifted(self, d_row: int, d_col: int) -> "Square":
        return Square(self.row + d_row, self.col + d_col)


class Board:
    """
    An 8x8 grid of cells. A cell is EMPTY, BLOCKED, or holds a PieceKind.
    Cells only ever change from EMPTY; nothing is removed once placed.
    """

    def __init__(self):
        self.board = []
        self.create_board()

    def create_board(self):
        self.board = [[EMPTY for _ in range(COLS)] for _ in range(ROWS)]

    def _check(self, square):
        if not square.on_board():
            raise ValueError(f"Square {square} is outside the board")

    def get_cell(self, square):
        self._check(square)
        return self.board[square.row][square.col]

    def get_piece(self, square):
        cell = self.get_cell(square)
        return cell if isinstance(cell, PieceKind) else None

    def is_empty(self, square):
        return self.get_cell(square) == EMPTY

    def is_blocked(self, square):
        return self.get_cell(square) == BLOCKED

    def place(self, piece, square):
        if not self.is_empty(square):
            raise ValueError(f"Cannot place {piece.value} on {square}: square is not empty")
        self.board[square.row][square.col] = piece
        board_logger.debug(f"Placed {symbol_of(piece)} on ({square.row}, {square.col})")

    def block(self, square):
        if not self.is_empty(square):
            raise ValueError(f"Cannot block {square}: square is not empty")
        self.board[square.row][square.col] = BLOCKED
        board_logger.debug(f"Blocked ({square.row}, {square.col})")

    def copy(self):
        new_board = Board()
        new_board.board = [row[:] for row in self.board]
        return new_board

    def occupied_squares(self):
        return [Square(r, c) for r in range(ROWS) for c in range(COLS)
                if isinstance(self.board[r][c], PieceKind)]

    def blocked_squares(self):
        return [Square(r, c) for r in range(ROWS) for c in range(COLS)
                if self.board[r][c] == BLOCKED]

    def count_pieces(self, kind=None):
        return sum(1 for sq in self.occupied_squares()
                   if kind is None or self.board[sq.row][sq.col] == kind)

    def to_text(self):
        """Renders the grid with the internal symbols, one row per line."""
        lines = []
        for row in self.board:
            lines.append(' '.join(symbol_of(cell) if isinstance(cell, PieceKind) else cell for cell in row))
        return '\n'.join(lines)

    def get_fen(self):
        # Blocked squares are written as empty, so they cannot be recovered from the FEN.
        rows = []
        for row in self.board:
            str_row, counter = '', 0
            for cell in row:
                if cell == EMPTY or cell == BLOCKED:
                    counter += 1
                    continue
                if counter:
                    str_row += str(counter)
                    counter = 0
                str_row += symbol_of(cell)
            if counter:
                str_row += str(counter)
            rows.append(str_row)
        return '/'.join(rows) + FEN_TRAILER

    @classmethod
    def create_board_from_fen(cls, fen_string):
        board = cls()
        placement = fen_string.strip().split(' ')[0]
        rows = placement.split('/')
        if len(rows) != ROWS:
            raise ValueError(f"Invalid FEN string: {fen_string!r} (expected {ROWS} rows)")
        for r, str_row in enumerate(rows):
            c = 0
            for ch in str_row:
                if ch.isdigit():
                    c += int(ch)
                    continue
                if c >= COLS:
                    raise ValueError(f"Invalid FEN string: {fen_string!r} (row {r} is too long)")
                board.board[r][c] = kind_from_symbol(ch)
                c += 1
            if c != COLS:
                raise ValueError(f"Invalid FEN string: {fen_string!r} (row {r} covers {c} squares)")
        return board
