# solochess/viewer.py
# A small pygame window for looking at generated puzzles.

import logging
import pygame

from .constants import (SCREEN_WIDTH, SCREEN_HEIGHT, ROWS, COLS, SQUARE_SIZE, STATUS_PANEL_RECT,
                        COLOR_BG, COLOR_PANEL_BG, COLOR_TEXT, COLOR_SQUARE_DARK, COLOR_SQUARE_LIGHT,
                        COLOR_SQUARE_BLOCKED, COLOR_PIECE, COLOR_PIECE_OUTLINE, COLOR_KING_PIECE,
                        EMPTY, BLOCKED)
from .generator import GenerationFailed
from .piece import PieceKind, symbol_of

logger = logging.getLogger('generator')

PIECE_PADDING = 12
PIECE_OUTLINE = 2


def square_color(row, col, cell):
    if cell == BLOCKED:
        return COLOR_SQUARE_BLOCKED
    return COLOR_SQUARE_LIGHT if (row + col) % 2 == 0 else COLOR_SQUARE_DARK


def draw_piece(surface, row, col, piece, font):
    x = SQUARE_SIZE * col + SQUARE_SIZE // 2
    y = SQUARE_SIZE * row + SQUARE_SIZE // 2
    radius = SQUARE_SIZE // 2 - PIECE_PADDING
    fill = COLOR_KING_PIECE if piece == PieceKind.KING else COLOR_PIECE
    pygame.draw.circle(surface, COLOR_PIECE_OUTLINE, (x, y), radius + PIECE_OUTLINE)
    pygame.draw.circle(surface, fill, (x, y), radius)
    if font is not None:
        label = font.render(symbol_of(piece), True, COLOR_PIECE_OUTLINE)
        surface.blit(label, label.get_rect(center=(x, y)))


def draw_board(surface, board, font=None):
    """Draws every square of `board` onto `surface`; pieces get a letter when a font is given."""
    for r in range(ROWS):
        for c in range(COLS):
            cell = board.board[r][c]
            rect = pygame.Rect(c * SQUARE_SIZE, r * SQUARE_SIZE, SQUARE_SIZE, SQUARE_SIZE)
            pygame.draw.rect(surface, square_color(r, c, cell), rect)
            if cell != EMPTY and cell != BLOCKED:
                draw_piece(surface, r, c, cell, font)


class PuzzleViewer:
    """Shows one puzzle at a time. SPACE or N asks `next_solution` for another, ESC quits."""

    def __init__(self, next_solution):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Solo Chess Puzzle Generator")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 24)
        self.next_solution = next_solution
        self.solution = next_solution()
        self.running = True

    def run(self):
        try:
            while self.running:
                self.handle_events()
                self.draw()
                self.clock.tick(30)
        finally:
            pygame.quit()

    def show_next(self):
        """Swaps in a new puzzle; a stuck generation keeps the current one on screen."""
        try:
            self.solution = self.next_solution()
        except GenerationFailed as e:
            logger.warning(f"Keeping current puzzle: {e}")
            return False
        logger.info(f"New puzzle: {self.solution.get_fen()}")
        return True

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in (pygame.K_SPACE, pygame.K_n):
                    self.show_next()

    def draw(self):
        self.screen.fill(COLOR_BG)
        draw_board(self.screen, self.solution.board, self.font)
        pygame.draw.rect(self.screen, COLOR_PANEL_BG, STATUS_PANEL_RECT)
        fen_surf = self.small_font.render(self.solution.get_fen(), True, COLOR_TEXT)
        self.screen.blit(fen_surf, (STATUS_PANEL_RECT.left + 10, STATUS_PANEL_RECT.top + 10))
        info = f"Survivor: {symbol_of(self.solution.survivor.piece)}   SPACE: new puzzle   ESC: quit"
        info_surf = self.small_font.render(info, True, COLOR_TEXT)
        self.screen.blit(info_surf, (STATUS_PANEL_RECT.left + 10, STATUS_PANEL_RECT.top + 40))
        pygame.display.flip()
