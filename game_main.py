"""
Snake: main game logic and display.

This script:
  - Owns the game lifecycle state machine (INITIALIZED, READY, PLAYING, GAMEOVER)
  - Drives the board one step per timer tick and locks landed pieces
  - Routes arrow keys to the board while playing, any key to (re)start
  - Opens the game window and runs the pygame event loop

Uses:
  - pygame for the window, the step timer and keyboard events
  - Matrix as the board model, GamePanel to draw it
"""
import argparse
import sys

import pygame

import settings
from action import Action, action_for_key
from game_panel import GamePanel
from matrix import Matrix
from state import State, check_transition
from step_timer import StepTimer
from tetromino import MIN_COLS


class GameMain:
    def __init__(self, matrix_factory=Matrix, timer_factory=StepTimer, repaint=None,
                 rows=settings.ROWS, cols=settings.COLS, step_in_msec=settings.STEP_IN_MSEC):
        self.matrix_factory = matrix_factory
        self.timer_factory = timer_factory
        self.repaint = repaint or (lambda: None)
        self.rows = rows
        self.cols = cols
        self.step_in_msec = step_in_msec

        self.matrix = None
        self.step_timer = None
        # Current state of the game; None until init_game()
        self.current_state = None

    def _enter(self, operation):
        """Check that `operation` is legal now and return the state it leads to."""
        return check_transition(operation, self.current_state)

    def init_game(self):
        """
        One-time initialization: allocate the board and the step timer.
        """
        target = self._enter("init_game")
        self.matrix = self.matrix_factory(self.rows, self.cols)
        # The timer calls back into step_game at a constant rate
        self.step_timer = self.timer_factory(self.step_in_msec, self.step_game)
        self.current_state = target

    def new_game(self):
        """
        Per-game initialization: reset the board for a new round.
        """
        target = self._enter("new_game")
        self.matrix.new_game()
        self.current_state = target
        self.repaint()

    def start_game(self):
        """
        Start (or restart) play by starting the step timer.
        """
        target = self._enter("start_game")
        self.step_timer.start()
        self.current_state = target
        self.repaint()

    def stop_game(self):
        """
        Stop play, e.g. on game over.
        """
        target = self._enter("stop_game")
        self.step_timer.stop()
        self.current_state = target
        print(f"Game over: score {self.matrix.score}, {self.matrix.cleared_lines} lines")
        self.repaint()

    def step_game(self):
        """
        Run one step of the game. Fired by the step timer at constant rate.
        """
        self._enter("step_game")
        if self.matrix.step_game(Action.DOWN):
            self.matrix.lock_down()
        if self.matrix.is_full():
            self.stop_game()  # gameover
            return
        self.repaint()

    def key_pressed(self, action=None):
        """
        Handle one key press. `action` is the Action bound to the key,
        or None for any other key.
        """
        if self.current_state == State.READY:
            # Any key to start the game
            self.start_game()
        elif self.current_state == State.PLAYING:
            if action is not None:
                self.matrix.step_game(action)
                self.repaint()
        elif self.current_state == State.GAMEOVER:
            # Any key to re-start the game
            self.new_game()
            self.start_game()


def get_args(argv=None):
    parser = argparse.ArgumentParser("""Snake""")
    parser.add_argument("--rows", type=int, default=settings.ROWS)
    parser.add_argument("--cols", type=int, default=settings.COLS)
    parser.add_argument("--cell_size", type=int, default=settings.CELL_SIZE,
                        help="Size of a cell in pixels")
    parser.add_argument("--steps_per_sec", type=int, default=settings.STEPS_PER_SEC,
                        help="Game steps per second")
    args = parser.parse_args(argv)

    # The board must be at least as wide as the widest tetromino
    if args.cols < MIN_COLS:
        parser.error(f"--cols must be at least {MIN_COLS}")
    if args.rows < 1:
        parser.error("--rows must be at least 1")
    if args.cell_size < 1:
        parser.error("--cell_size must be at least 1")
    if args.steps_per_sec < 1:
        parser.error("--steps_per_sec must be at least 1")
    return args


def handle_event(main, event):
    """
    Dispatch one pygame event to the game. Returns False when the window
    was closed, True otherwise.
    """
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        main.key_pressed(action_for_key(event.key))
    elif main.step_timer.handles(event):
        main.step_timer.fire()
    return True


def run(opt):
    """
    Open the window and run the event loop until the window is closed.
    """
    pygame.init()
    screen = pygame.display.set_mode((opt.cols * opt.cell_size, opt.rows * opt.cell_size))
    pygame.display.set_caption(settings.TITLE)
    clock = pygame.time.Clock()

    dirty = [True]

    def request_repaint():
        dirty[0] = True

    main = GameMain(repaint=request_repaint, rows=opt.rows, cols=opt.cols,
                    step_in_msec=1000 // opt.steps_per_sec)
    main.init_game()
    main.new_game()
    panel = GamePanel(main, opt.cell_size)

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(main, event):
                running = False

        if dirty[0]:
            panel.paint(screen)
            pygame.display.flip()
            dirty[0] = False
        clock.tick(settings.FRAMES_PER_SEC)

    pygame.quit()
    return main


def main(argv=None):
    run(get_args(argv))
    sys.exit(0)


if __name__ == "__main__":
    main()
