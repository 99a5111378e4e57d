"""
GamePanel: the drawing surface of the game pit.
Paints the board, the game data and the READY / GAMEOVER messages.
Painting only reads controller and board state.
"""
import pygame

import settings
from state import State


class GamePanel:
    def __init__(self, controller, cell_size=settings.CELL_SIZE):
        self.controller = controller
        self.cell_size = cell_size
        self.fonts = None  # created on first paint, pygame.font must be initialized

    def load_fonts(self):
        fonts = {}
        for key, (family, size, bold) in (("gameover", settings.FONT_GAMEOVER),
                                          ("instruction", settings.FONT_INSTRUCTION),
                                          ("data", settings.FONT_DATA)):
            if pygame.font.match_font(family, bold=bold) is None:
                print(f"Font '{family}' not found, using default font")
            # SysFont falls back to pygame's default font for unknown families
            fonts[key] = pygame.font.SysFont(family, size, bold=bold)
        return fonts

    @property
    def width(self):
        return self.controller.cols * self.cell_size

    @property
    def height(self):
        return self.controller.rows * self.cell_size

    def paint(self, surface):
        """
        Draw one frame: background, board, game data, then the state overlay.
        """
        if self.fonts is None:
            self.fonts = self.load_fonts()
        surface.fill(settings.COLOR_PIT)

        matrix = self.controller.matrix
        if matrix is None:
            return
        matrix.paint(surface, self.cell_size)

        # Game data
        self.draw_text(surface, f"Score: {matrix.score}", "data", settings.COLOR_DATA, (10, 10))
        self.draw_text(surface, f"Lines: {matrix.cleared_lines}", "data", settings.COLOR_DATA, (10, 30))

        state = self.controller.current_state
        if state == State.READY:
            self.draw_centered(surface, settings.MSG_START, "instruction",
                               settings.COLOR_INSTRUCTION, self.height // 4)
        elif state == State.GAMEOVER:
            self.draw_centered(surface, settings.MSG_GAMEOVER, "gameover",
                               settings.COLOR_GAMEOVER, self.height // 2)
            self.draw_centered(surface, settings.MSG_START, "instruction",
                               settings.COLOR_INSTRUCTION, self.height // 2 + 40)

    def draw_text(self, surface, text, font, color, position):
        surface.blit(self.fonts[font].render(text, True, color), position)

    def draw_centered(self, surface, text, font, color, y):
        image = self.fonts[font].render(text, True, color)
        surface.blit(image, image.get_rect(centerx=self.width // 2, centery=y))

    def contains(self, x, y):
        """
        Check if the pit contains the cell (x, y).
        """
        return 0 <= x < self.controller.cols and 0 <= y < self.controller.rows
