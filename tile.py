"""
Tile: one filled cell of the board. A tile keeps the color of the tetromino
it came from and draws itself as a beveled square.
"""
import pygame


class Tile:
    # Thickness (in pixels) of the tile outline
    boundary_thickness = 1
    # How much lighter/darker the bevel edges are than the fill
    bevel = 40

    # Fill color for each tetromino shape
    color_map = {
        'I': (0, 240, 240),   # cyan
        'O': (240, 240, 0),   # yellow
        'Z': (240, 0, 0),     # red
        'S': (0, 240, 0),     # green
        'T': (160, 0, 240),   # purple
        'J': (0, 0, 240),     # blue
        'L': (240, 160, 0),   # orange
    }

    def __init__(self, shape):
        self.shape = shape
        # Unknown shapes fall back to gray
        self.background_color = Tile.color_map.get(shape, (128, 128, 128))
        self.highlight_color = tuple(min(255, c + Tile.bevel) for c in self.background_color)
        self.shadow_color = tuple(max(0, c - Tile.bevel) for c in self.background_color)
        self.box_color = (0, 0, 0)

    def draw(self, surface, rect):
        """
        Render the tile into the pixel rectangle `rect`.
        """
        pygame.draw.rect(surface, self.background_color, rect)
        # Light top/left edges, dark bottom/right edges
        pygame.draw.line(surface, self.highlight_color, rect.topleft, rect.topright)
        pygame.draw.line(surface, self.highlight_color, rect.topleft, rect.bottomleft)
        pygame.draw.line(surface, self.shadow_color, rect.bottomleft, rect.bottomright)
        pygame.draw.line(surface, self.shadow_color, rect.topright, rect.bottomright)
        pygame.draw.rect(surface, self.box_color, rect, Tile.boundary_thickness)

    def __repr__(self):
        return f"Tile({self.shape!r})"
