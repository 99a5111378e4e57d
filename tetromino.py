"""
Tetromino: the falling piece, one of the seven shapes (I, O, Z, S, T, J, L).
Manages:
  - Shape initialization and tile placement in a square matrix
  - Position tracking on the board via its bottom-left reference cell
  - Movement (left, right, down) and clockwise rotation, each validated
    against the board walls and the tiles already locked in place
"""
import copy as cp          # copies of the reference cell for trial moves
import random              # random starting column
import numpy as np         # matrix storage and rotation

from action import Action
from point import Point
from tile import Tile

# (col, row) of the filled cells of each shape inside its n×n matrix
SHAPES = {
    'I': (4, [(1, 0), (1, 1), (1, 2), (1, 3)]),
    'O': (2, [(0, 0), (1, 0), (0, 1), (1, 1)]),
    'Z': (3, [(0, 1), (1, 1), (1, 2), (2, 2)]),
    'S': (3, [(1, 1), (2, 1), (0, 2), (1, 2)]),
    'T': (3, [(0, 1), (1, 1), (2, 1), (1, 0)]),
    'J': (3, [(0, 1), (1, 1), (2, 1), (2, 2)]),
    'L': (3, [(0, 2), (0, 1), (1, 1), (2, 1)]),
}

# Widest shape matrix; a narrower board cannot spawn every piece
MIN_COLS = max(n for n, _ in SHAPES.values())

# Cell offset of one move in each direction
MOVES = {
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
    Action.DOWN: (0, -1),
}


class Tetromino:
    def __init__(self, shape, grid_height, grid_width, rng=random):
        """
        Build an n×n tile matrix for `shape` and place the piece so that its
        bottom matrix row sits on the top row of the board, in a random column.
        """
        self.type = shape
        n, occupied_cells = SHAPES[shape]
        self.tile_matrix = np.full((n, n), None)
        for col_index, row_index in occupied_cells:
            self.tile_matrix[row_index][col_index] = Tile(shape)
        self.bottom_left_cell = Point(rng.randint(0, grid_width - n), grid_height - 1)

    def get_cell_position(self, row, col, origin=None):
        """
        Convert matrix indices (row, col) to an absolute board Point,
        relative to `origin` (defaults to the current bottom-left cell).
        """
        origin = origin or self.bottom_left_cell
        n = len(self.tile_matrix)
        return Point(origin.x + col, origin.y + (n - 1) - row)

    def cells(self, tile_matrix=None, origin=None):
        """Yield (Point, Tile) for every filled cell of the piece."""
        tile_matrix = self.tile_matrix if tile_matrix is None else tile_matrix
        n = len(tile_matrix)
        for r in range(n):
            for c in range(n):
                tile = tile_matrix[r][c]
                if tile is not None:
                    yield self.get_cell_position(r, c, origin), tile

    def fits(self, board, tile_matrix=None, origin=None):
        """
        True if every filled cell is within the walls and floor and not on a
        locked tile. Cells above the top row are allowed while the piece enters.
        """
        for pos, _ in self.cells(tile_matrix, origin):
            if pos.x < 0 or pos.x >= board.grid_width or pos.y < 0:
                return False
            if board.is_occupied(pos.y, pos.x):
                return False
        return True

    def move(self, action, board):
        """
        Attempt to move one cell left/right/down; return True if moved, else False.
        """
        dx, dy = MOVES[action]
        target = cp.copy(self.bottom_left_cell)
        target.translate(dx, dy)
        if not self.fits(board, origin=target):
            return False
        self.bottom_left_cell = target
        return True

    def rotate(self, board):
        """
        Attempt clockwise rotation; commit only if the rotated piece fits.
        """
        rotated = np.rot90(self.tile_matrix, -1)
        if not self.fits(board, tile_matrix=rotated):
            return False
        self.tile_matrix = rotated
        return True

    def draw(self, surface, rows, cell_size):
        """
        Draw each tile of the piece that is already inside the board.
        """
        for pos, tile in self.cells():
            if pos.y < rows:
                tile.draw(surface, pos.to_rect(rows, cell_size))
