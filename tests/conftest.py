"""
Shared pytest fixtures for solo chess generator tests.

Randomness is always injected through seeded random.Random instances so a
failing case can be replayed. Generation runs with a retry ceiling and moves
on to the next seed when a path gets stuck, since an unbounded run could hang
the test session.
"""

import logging
import os
import random

import pytest

# pygame must not try to open a real display during tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from solochess.generator import GenerationFailed, generate_solution  # noqa: E402

MAX_ATTEMPTS = 500
SEEDS_PER_CASE = 50


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_solution():
    """Returns a helper that generates a solution, skipping seeds whose paths get stuck."""

    def _make(num_pieces, seed=0, **options):
        options.setdefault("max_attempts", MAX_ATTEMPTS)
        for s in range(seed, seed + SEEDS_PER_CASE):
            try:
                return generate_solution(num_pieces, rng=random.Random(s), **options)
            except GenerationFailed:
                continue
        pytest.fail(f"No solution for {num_pieces} pieces in {SEEDS_PER_CASE} seeds")

    return _make


@pytest.fixture
def restore_root_logging():
    """Puts the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
