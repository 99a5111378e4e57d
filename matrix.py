"""
Matrix: the board model. Holds the locked tiles and the falling tetromino.
This class handles:
  - Storing tile objects in a 2D matrix (row 0 is the bottom row)
  - Routing each Action to the falling piece
  - Locking a landed piece into place and clearing full rows
  - Spawning the next piece and detecting a board that has filled up
  - Painting the locked tiles, the falling piece and the grid lines
"""
import random

import numpy as np
import pygame

import settings
from action import Action
from point import Point
from tetromino import SHAPES, Tetromino


class Matrix:
    def __init__(self, rows=settings.ROWS, cols=settings.COLS, rng=None):
        self.grid_height = rows
        self.grid_width = cols
        self.rng = rng or random.Random()
        # 2D array of Tile or None
        self.tile_matrix = np.full((rows, cols), None)
        self.current_tetromino = None  # falling piece
        self.next_tetromino = None     # piece shown after the current one lands
        self.full = False
        self.score = 0
        self.cleared_lines = 0
        self.line_color = settings.COLOR_GRID_LINE

    def new_game(self):
        """
        Empty the board, reset the counters and spawn the first piece.
        """
        self.tile_matrix = np.full((self.grid_height, self.grid_width), None)
        self.full = False
        self.score = 0
        self.cleared_lines = 0
        self.next_tetromino = self.create_tetromino()
        self.spawn()

    def create_tetromino(self):
        return Tetromino(self.rng.choice(sorted(SHAPES)), self.grid_height, self.grid_width, self.rng)

    def spawn(self):
        """
        Make the next piece the falling one. If it lands on locked tiles
        the board is full.
        """
        self.current_tetromino = self.next_tetromino
        self.next_tetromino = self.create_tetromino()
        if not self.current_tetromino.fits(self):
            self.full = True

    def step_game(self, action):
        """
        Apply one action to the falling piece. Returns True when a DOWN step
        finds the piece resting on the floor or on locked tiles, meaning it
        has to be locked down.
        """
        piece = self.current_tetromino
        if piece is None or self.full:
            return False
        if action == Action.ROTATE_RIGHT:
            piece.rotate(self)
            return False
        moved = piece.move(action, self)
        return action == Action.DOWN and not moved

    def lock_down(self):
        """
        Copy the falling piece into the grid, clear any full rows, then spawn
        the next piece. A tile locked above the top row fills the board.
        """
        piece = self.current_tetromino
        if piece is None:
            return
        self.current_tetromino = None
        for pos, tile in piece.cells():
            if self.contains(pos.y, pos.x):
                self.tile_matrix[pos.y][pos.x] = tile
            else:
                # Locking outside => board is full
                self.full = True

        if self.full:
            return

        self.clear_full_rows()
        self.spawn()

    def clear_full_rows(self):
        """
        Remove every row that has no empty cell, shift the rows above it
        down by one and score the cleared lines. Returns the number cleared.
        """
        cleared = 0
        row = 0
        while row < self.grid_height:
            if None not in self.tile_matrix[row]:  # full row
                self.shift_down_above_row(row)
                cleared += 1
            else:
                row += 1
        self.cleared_lines += cleared
        # Multi-line clears are worth more
        self.score += 10 * cleared * cleared
        return cleared

    def shift_down_above_row(self, row_index):
        """
        Delete the row at row_index by shifting all rows above it down by one.
        """
        for r in range(row_index, self.grid_height - 1):
            self.tile_matrix[r] = self.tile_matrix[r + 1]
        # Empty out top row
        self.tile_matrix[self.grid_height - 1] = [None] * self.grid_width

    def is_full(self):
        return self.full

    def contains(self, row, col):
        """
        Return True if given row,col lies inside grid boundaries.
        """
        return 0 <= row < self.grid_height and 0 <= col < self.grid_width

    def is_occupied(self, row, col):
        """
        Return True if a cell is within bounds and contains a tile.
        """
        return self.contains(row, col) and self.tile_matrix[row][col] is not None

    def paint(self, surface, cell_size=settings.CELL_SIZE):
        """
        Draw all locked tiles, the falling piece and the grid lines.
        """
        for row in range(self.grid_height):
            for col in range(self.grid_width):
                tile = self.tile_matrix[row][col]
                if tile is not None:
                    tile.draw(surface, Point(col, row).to_rect(self.grid_height, cell_size))
        if self.current_tetromino is not None:
            self.current_tetromino.draw(surface, self.grid_height, cell_size)
        self.draw_grid_lines(surface, cell_size)

    def draw_grid_lines(self, surface, cell_size):
        width = self.grid_width * cell_size
        height = self.grid_height * cell_size
        # Vertical lines
        for x in range(cell_size, width, cell_size):
            pygame.draw.line(surface, self.line_color, (x, 0), (x, height - 1))
        # Horizontal lines
        for y in range(cell_size, height, cell_size):
            pygame.draw.line(surface, self.line_color, (0, y), (width - 1, y))
