# solochess/generator.py
# This file contains the solution builder: it grows a capture tree, places the
# surviving piece, then back-fills every root-to-leaf path with pieces that can
# capture their way back onto their parent's square.

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field

from .board import Board, Square
from .constants import ROWS, COLS, MAX_CAPTURES_PER_PIECE, MAX_PIECES
from .piece import PieceKind, PIECE_POOL, PIECE_POOL_WITH_KING, symbol_of
from .placement import place_around_square
from .tree import GameTree, TreeNode, generate_game_tree

generator_logger = logging.getLogger('generator')


class GenerationFailed(RuntimeError):
    """Raised when a leaf path could not be placed within the retry ceiling."""

    def __init__(self, leaf_id, attempts):
        super().__init__(f"Could not place the path to leaf {leaf_id} after {attempts} attempts")
        self.leaf_id = leaf_id
        self.attempts = attempts


@dataclass(frozen=True)
class Capture:
    node_id: int
    piece: PieceKind
    from_square: Square
    to_square: Square


@dataclass
class Solution:
    board: Board
    tree: GameTree
    has_king: bool
    captures: list[Capture] = field(default_factory=list)
    attempts: int = 0

    @property
    def survivor(self) -> TreeNode:
        return self.tree.root

    def get_fen(self) -> str:
        return self.board.get_fen()


class SolutionBuilder:
    def __init__(self, num_pieces, rng=None, max_captures_per_piece=MAX_CAPTURES_PER_PIECE,
                 max_attempts=None, has_king=None):
        if num_pieces < 1:
            raise ValueError(f"Number of pieces must be at least 1, got {num_pieces}")
        if num_pieces > MAX_PIECES:
            raise ValueError(f"Number of pieces cannot exceed {MAX_PIECES} squares, got {num_pieces}")
        if max_captures_per_piece < 1:
            raise ValueError(f"Captures per piece must be at least 1, got {max_captures_per_piece}")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"Retry ceiling must be at least 1, got {max_attempts}")
        self.num_pieces = num_pieces
        self.rng = rng or random.Random()
        self.tree_depth = max_captures_per_piece + 1
        self.max_attempts = max_attempts
        self.forced_has_king = has_king
        self.has_king = False
        self.available_pcs = PIECE_POOL
        self.board = None
        self.tree = None
        self.committed = set()
        self.captures = []
        self.total_attempts = 0

    def get_random_piece(self):
        return self.rng.choice(self.available_pcs)

    def build(self) -> Solution:
        if self.forced_has_king is None:
            self.has_king = self.rng.randint(0, 1) == 1
        else:
            self.has_king = bool(self.forced_has_king)
        self.available_pcs = PIECE_POOL_WITH_KING if self.has_king else PIECE_POOL

        self.board = Board()
        self.tree = generate_game_tree(self.num_pieces, self.tree_depth, self.rng)
        self.committed = set()
        self.captures = []
        self.total_attempts = 0

        leaf_nodes = self.tree.leaves()
        self._place_first_piece(force_king=self.has_king and leaf_nodes == [self.tree.root])

        for index, leaf in enumerate(leaf_nodes):
            if leaf.is_root:
                continue
            is_last_node = index == len(leaf_nodes) - 1
            self._place_path(leaf, force_king=self.has_king and is_last_node)

        generator_logger.debug(
            f"Solution ready: {self.num_pieces} pieces, king={self.has_king}, "
            f"{self.total_attempts} path attempts, FEN {self.board.get_fen()}")
        return Solution(board=self.board, tree=self.tree, has_king=self.has_king,
                        captures=list(self.captures), attempts=self.total_attempts)

    def _place_first_piece(self, force_king=False):
        root = self.tree.root
        square = Square(self.rng.randrange(ROWS), self.rng.randrange(COLS))
        piece = PieceKind.KING if force_king else self.get_random_piece()
        self.board.place(piece, square)
        root.piece, root.square = piece, square
        self.committed.add(root.id)
        generator_logger.debug(f"Surviving piece {symbol_of(piece)} on ({square.row}, {square.col})")

    def _place_path(self, leaf, force_king=False):
        # Ancestors placed for an earlier leaf keep their squares.
        pending = [n for n in self.tree.path_to_root(leaf) if n.id not in self.committed]
        attempts = 0
        while True:
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise GenerationFailed(leaf.id, attempts)
            attempts += 1
            self.total_attempts += 1

            placed = self._try_path(pending, leaf, force_king)
            if placed is not None:
                break
            generator_logger.debug(f"Leaf {leaf.id}: attempt {attempts} failed, retrying")

        scratch, assignments = placed
        self.board = scratch
        for node in pending:
            node.piece, node.square = assignments[node.id]
            self.committed.add(node.id)
            parent = self.tree.parent_of(node)
            self.captures.append(Capture(node.id, node.piece, node.square, parent.square))
        generator_logger.debug(f"Leaf {leaf.id}: path of {len(pending)} placed after {attempts} attempt(s)")

    def _try_path(self, pending, leaf, force_king):
        """Places every pending node on a scratch board; returns None if any placement fails."""
        scratch = self.board.copy()
        assignments = {}
        for node in pending:
            piece = PieceKind.KING if force_king and node is leaf else self.get_random_piece()
            parent = self.tree.parent_of(node)
            target = parent.square if parent.id in self.committed else assignments[parent.id][1]
            outcome = place_around_square(scratch, piece, target, self.rng)
            if not outcome.success:
                return None
            assignments[node.id] = (piece, outcome.square)
        return scratch, assignments


def generate_solution(num_of_pieces, rng=None, **options) -> Solution:
    return SolutionBuilder(num_of_pieces, rng=rng, **options).build()


def generate_position(num_of_pieces, rng=None, **options) -> Board:
    """Generates a solvable solo chess position with `num_of_pieces` pieces."""
    return generate_solution(num_of_pieces, rng=rng, **options).board
