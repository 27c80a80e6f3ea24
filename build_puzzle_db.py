# build_puzzle_db.py
# Generates a set of solo chess puzzles and stores them in an SQLite database.

import argparse
import logging
import os
import random
import sqlite3
import time
from datetime import datetime

from solochess.constants import DB_FILENAME, DEFAULT_NUM_PIECES
from solochess.debug import setup_logging, add_debug_arguments
from solochess.generator import GenerationFailed, generate_solution

logger = logging.getLogger('generator')

CREATE_TABLE_SQL = '''
    CREATE TABLE IF NOT EXISTS puzzles (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        num_pieces INTEGER NOT NULL,
        has_king INTEGER NOT NULL,
        fen TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
'''


def create_database(db_name=DB_FILENAME, overwrite=False):
    """Opens (or creates) the puzzle database and makes sure the table exists."""
    if overwrite and os.path.exists(db_name):
        logger.info(f"Database '{db_name}' already exists. Deleting old file.")
        os.remove(db_name)
    conn = sqlite3.connect(db_name)
    conn.execute(CREATE_TABLE_SQL)
    conn.commit()
    return conn


def build_puzzle_set(conn, count, num_pieces, rng=None, max_attempts=None):
    """Generates `count` puzzles into `conn`. Returns how many were stored."""
    rng = rng or random.Random()
    start_time = time.time()
    to_insert = []
    skipped = 0
    for i in range(count):
        try:
            solution = generate_solution(num_pieces, rng=rng, max_attempts=max_attempts)
        except GenerationFailed as e:
            skipped += 1
            logger.warning(f"Puzzle {i + 1}/{count} skipped: {e}")
            continue
        to_insert.append((num_pieces, int(solution.has_king), solution.get_fen(),
                          datetime.now().isoformat(timespec='seconds')))

    conn.executemany('INSERT INTO puzzles (num_pieces, has_king, fen, created_at) VALUES (?, ?, ?, ?)', to_insert)
    conn.commit()
    logger.info(f"Inserted {len(to_insert)} puzzles ({skipped} skipped) in {time.time() - start_time:.2f}s.")
    return len(to_insert)


def load_puzzles(conn, num_pieces=None):
    cursor = conn.cursor()
    if num_pieces is None:
        cursor.execute('SELECT id, num_pieces, has_king, fen FROM puzzles ORDER BY id')
    else:
        cursor.execute('SELECT id, num_pieces, has_king, fen FROM puzzles WHERE num_pieces = ? ORDER BY id',
                       (num_pieces,))
    return [{'id': row[0], 'num_pieces': row[1], 'has_king': bool(row[2]), 'fen': row[3]}
            for row in cursor.fetchall()]


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Build a database of solo chess puzzles.")
    parser.add_argument('--db', type=str, default=DB_FILENAME, help='Path to the SQLite database file.')
    parser.add_argument('--count', type=int, default=100, help='Number of puzzles to generate.')
    parser.add_argument('--pieces', type=int, nargs='+', default=[DEFAULT_NUM_PIECES],
                        help='One or more piece counts; each gets --count puzzles.')
    parser.add_argument('--seed', type=int, default=None, help='Seed for a reproducible set.')
    parser.add_argument('--max-attempts', type=int, default=1000, help='Retry ceiling per capture path.')
    parser.add_argument('--overwrite', action='store_true', help='Delete an existing database first.')
    add_debug_arguments(parser)

    args = parser.parse_args()
    setup_logging(args)

    conn = create_database(args.db, overwrite=args.overwrite)
    rng = random.Random(args.seed)
    try:
        for num_pieces in args.pieces:
            logger.info(f"--- Generating {args.count} puzzles with {num_pieces} pieces ---")
            build_puzzle_set(conn, args.count, num_pieces, rng=rng, max_attempts=args.max_attempts)
    finally:
        conn.close()
    logger.info("Puzzle database complete. All changes have been saved.")
