"""Tests for candidate squares and placement around a target."""

import random

from solochess.board import Board, Square
from solochess.constants import BLOCKED
from solochess.piece import PieceKind
from solochess.placement import PlacementCandidate, candidate_squares, place_around_square


class TestCandidateSquares:
    """Tests for which squares can capture onto a target."""

    def test_bishop_on_empty_board(self):
        candidates = candidate_squares(Board(), PieceKind.BISHOP, Square(4, 4))
        assert set(candidates) == {
            PlacementCandidate(Square(6, 6), Square(5, 5)),
            PlacementCandidate(Square(6, 2), Square(5, 3)),
            PlacementCandidate(Square(2, 6), Square(3, 5)),
            PlacementCandidate(Square(2, 2), Square(3, 3)),
        }

    def test_bishop_needs_free_halfway_square(self):
        board = Board()
        board.place(PieceKind.PAWN, Square(5, 5))
        board.block(Square(3, 3))
        candidates = candidate_squares(board, PieceKind.BISHOP, Square(4, 4))
        assert {c.square for c in candidates} == {Square(6, 2), Square(2, 6)}

    def test_occupied_and_off_board_squares_are_skipped(self):
        board = Board()
        board.place(PieceKind.KNIGHT, Square(0, 1))
        candidates = candidate_squares(board, PieceKind.KING, Square(0, 0))
        assert {c.square for c in candidates} == {Square(1, 0), Square(1, 1)}
        assert all(c.blocking_square is None for c in candidates)

    def test_knight_in_corner(self):
        candidates = candidate_squares(Board(), PieceKind.KNIGHT, Square(7, 7))
        assert {c.square for c in candidates} == {Square(6, 5), Square(5, 6)}

    def test_pawn_comes_from_row_above_index(self):
        candidates = candidate_squares(Board(), PieceKind.PAWN, Square(5, 3))
        assert candidates == [PlacementCandidate(Square(4, 3))]

    def test_pawn_never_on_back_ranks(self):
        assert candidate_squares(Board(), PieceKind.PAWN, Square(2, 3)) == []
        assert candidate_squares(Board(), PieceKind.PAWN, Square(0, 3)) == []
        assert candidate_squares(Board(), PieceKind.PAWN, Square(3, 3)) == [PlacementCandidate(Square(2, 3))]

    def test_rook_in_rule_table_order(self):
        candidates = candidate_squares(Board(), PieceKind.ROOK, Square(3, 3))
        assert [c.square for c in candidates] == [Square(3, 4), Square(3, 2), Square(2, 3), Square(4, 3)]


class TestPlaceAroundSquare:
    """Tests for the random placement step."""

    def test_places_piece_on_a_candidate(self):
        board = Board()
        outcome = place_around_square(board, PieceKind.QUEEN, Square(4, 4), random.Random(3))
        assert outcome.success
        assert max(abs(outcome.square.row - 4), abs(outcome.square.col - 4)) == 1
        assert board.get_piece(outcome.square) == PieceKind.QUEEN
        assert board.blocked_squares() == []

    def test_bishop_blocks_halfway_square(self):
        board = Board()
        outcome = place_around_square(board, PieceKind.BISHOP, Square(4, 4), random.Random(5))
        assert outcome.success
        expected = Square((outcome.square.row + 4) // 2, (outcome.square.col + 4) // 2)
        assert outcome.blocking_square == expected
        assert board.get_cell(expected) == BLOCKED

    def test_failure_leaves_board_untouched(self):
        board = Board()
        board.place(PieceKind.ROOK, Square(1, 0))
        before = board.get_fen()
        outcome = place_around_square(board, PieceKind.PAWN, Square(1, 0), random.Random(0))
        assert not outcome.success
        assert outcome.square is None
        assert board.get_fen() == before

    def test_choice_is_spread_over_candidates(self):
        seen = set()
        for seed in range(200):
            outcome = place_around_square(Board(), PieceKind.KNIGHT, Square(4, 4), random.Random(seed))
            seen.add(outcome.square)
        assert len(seen) == 8
