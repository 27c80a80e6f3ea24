# solochess/constants.py
# This file defines constants used throughout the application, including
# viewer dimensions, colors, and the generation limits for solo chess puzzles.

import pygame

# --- Viewer Layout & Dimensions ---
SCREEN_WIDTH, SCREEN_HEIGHT = 640, 720
BOARD_SIZE = 640
BOARD_RECT = pygame.Rect(0, 0, BOARD_SIZE, BOARD_SIZE)
STATUS_PANEL_HEIGHT = SCREEN_HEIGHT - BOARD_SIZE
STATUS_PANEL_RECT = pygame.Rect(0, BOARD_SIZE, BOARD_SIZE, STATUS_PANEL_HEIGHT)

# --- Board Dimensions ---
ROWS, COLS = 8, 8
SQUARE_SIZE = BOARD_SIZE // COLS

# --- Colors ---
COLOR_BG = (50, 50, 50)
COLOR_PANEL_BG = (65, 65, 65)
COLOR_TEXT = (248, 248, 242)
COLOR_SQUARE_DARK = (55, 55, 55)
COLOR_SQUARE_LIGHT = (180, 180, 180)
COLOR_SQUARE_BLOCKED = (120, 60, 60)
COLOR_PIECE = (248, 248, 242)
COLOR_PIECE_OUTLINE = (20, 20, 20)
COLOR_KING_PIECE = (200, 180, 0)

# --- Cell Symbols ---
# '-' is a never-used square, '*' is empty but unavailable (a spent capture square).
EMPTY = '-'
BLOCKED = '*'

# --- Generation Limits ---
MAX_CAPTURES_PER_PIECE = 2
GAME_TREE_DEPTH = MAX_CAPTURES_PER_PIECE + 1
DEFAULT_NUM_PIECES = 16
MAX_PIECES = ROWS * COLS
# Pawns may not stand on the two back ranks (no promotion).
PAWN_MIN_ROW = 2

# --- FEN ---
# Side to move, castling, en passant and clocks are placeholders.
FEN_TRAILER = ' w KQkq - 0 1'

# --- Puzzle Database ---
DB_FILENAME = "solo_chess_puzzles.db"
