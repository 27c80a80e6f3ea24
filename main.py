# main.py
# Command line entry point: generates solo chess puzzles and prints one FEN per line.

import argparse
import logging
import random
import sys

from solochess.constants import DEFAULT_NUM_PIECES, MAX_PIECES
from solochess.debug import setup_logging, add_debug_arguments
from solochess.generator import GenerationFailed, SolutionBuilder

logger = logging.getLogger('generator')


def make_solution_factory(args, rng):
    """Returns a callable producing a new Solution per call, restarting on a stuck path."""
    def next_solution():
        last_error = None
        for restart in range(args.max_restarts + 1):
            builder = SolutionBuilder(args.pieces, rng=rng, max_attempts=args.max_attempts, has_king=args.king)
            try:
                return builder.build()
            except GenerationFailed as e:
                last_error = e
                logger.warning(f"{e} (try {restart + 1} of {args.max_restarts + 1}).")
        raise last_error
    return next_solution


def build_parser():
    parser = argparse.ArgumentParser(description="Generate solvable solo chess positions.")
    parser.add_argument('--pieces', type=int, default=DEFAULT_NUM_PIECES, help='Number of pieces on the board.')
    parser.add_argument('--count', type=int, default=1, help='How many puzzles to generate.')
    parser.add_argument('--seed', type=int, default=None, help='Seed for a reproducible run.')
    parser.add_argument('--max-attempts', type=int, default=None,
                        help='Retry ceiling per capture path (default: retry forever).')
    parser.add_argument('--max-restarts', type=int, default=0,
                        help='Start a puzzle over this many times when a path hits the retry ceiling.')
    king = parser.add_mutually_exclusive_group()
    king.add_argument('--king', dest='king', action='store_true', default=None, help='Force a king to be the last piece.')
    king.add_argument('--no-king', dest='king', action='store_false', default=None, help='Generate without any king.')
    parser.add_argument('--print-board', action='store_true', help='Also print the board grid after each FEN.')
    parser.add_argument('--show', action='store_true', help='Open a pygame window to browse puzzles.')
    add_debug_arguments(parser)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args)

    if not 1 <= args.pieces <= MAX_PIECES:
        logger.error(f"Error: --pieces must be between 1 and {MAX_PIECES} (got {args.pieces}).")
        return 2
    if args.count < 1:
        logger.error(f"Error: --count must be at least 1 (got {args.count}).")
        return 2
    if args.max_attempts is not None and args.max_attempts < 1:
        logger.error(f"Error: --max-attempts must be at least 1 (got {args.max_attempts}).")
        return 2
    if args.max_restarts < 0:
        logger.error(f"Error: --max-restarts cannot be negative (got {args.max_restarts}).")
        return 2

    rng = random.Random(args.seed)
    next_solution = make_solution_factory(args, rng)

    if args.show:
        from solochess.viewer import PuzzleViewer
        try:
            PuzzleViewer(next_solution).run()
        except GenerationFailed as e:
            logger.error(f"Error: {e}")
            return 1
        return 0

    try:
        for i in range(args.count):
            solution = next_solution()
            print(solution.get_fen())
            if args.print_board:
                print(solution.board.to_text())
                print()
            logger.debug(f"Puzzle {i + 1}/{args.count} took {solution.attempts} path attempts.")
    except GenerationFailed as e:
        logger.error(f"Error: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
