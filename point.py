"""
Point: a cell coordinate on the game board (x = column, y = row counted
from the bottom). Used to place tetromino tiles and to map cells onto the
pixel rectangle they occupy in the window.
"""
import pygame


class Point:
    def __init__(self, x=0, y=0):
        self.x = x  # column
        self.y = y  # row, 0 is the bottom row

    def translate(self, dx, dy):
        """
        Shift the point by dx columns and dy rows.
        """
        self.x += dx
        self.y += dy

    def to_rect(self, rows, cell_size):
        """
        Return the pixel rectangle of this cell on a board of `rows` rows.
        Screen y grows downward, so the bottom row is drawn last.
        """
        left = self.x * cell_size
        top = (rows - 1 - self.y) * cell_size
        return pygame.Rect(left, top, cell_size, cell_size)

    def __eq__(self, other):
        return isinstance(other, Point) and (self.x, self.y) == (other.x, other.y)

    def __repr__(self):
        return f"Point({self.x}, {self.y})"
