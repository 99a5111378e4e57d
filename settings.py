"""
Settings: named constants for the Snake game window, board and timing.
The entry point can override the board size and speed from the command line.
"""

# == Board ==
ROWS = 40          # number of rows of the game board (in cells)
COLS = 40          # number of columns of the game board (in cells)
CELL_SIZE = 16     # size of one cell (in pixels)

# == Window ==
TITLE = "Snake"
PIT_WIDTH = COLS * CELL_SIZE     # width (in pixels) of the game board
PIT_HEIGHT = ROWS * CELL_SIZE    # height (in pixels) of the game board

# == Timing ==
STEPS_PER_SEC = 6                      # number of game steps per second
STEP_IN_MSEC = 1000 // STEPS_PER_SEC   # step period in milliseconds
FRAMES_PER_SEC = 60                    # event loop polling rate

# == Colors (RGB) ==
COLOR_PIT = (64, 64, 64)          # dark gray background
COLOR_GRID_LINE = (80, 80, 80)
COLOR_GAMEOVER = (255, 0, 0)
COLOR_INSTRUCTION = (255, 0, 0)
COLOR_DATA = (255, 255, 255)

# == Fonts: (family, size, bold) ==
FONT_GAMEOVER = ("verdana", 30, True)
FONT_INSTRUCTION = ("dialog", 26, False)
FONT_DATA = ("monospace", 16, False)

# == Messages ==
MSG_START = "Push any key to start the game ..."
MSG_GAMEOVER = "GAME OVER!"
