"""
Action: directives sent to the board model, and the arrow-key mapping.
"""
from enum import Enum

import pygame


class Action(Enum):
    ROTATE_RIGHT = "rotate_right"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Arrow keys drive the falling piece; every other key is "any key"
KEY_ACTIONS = {
    pygame.K_UP: Action.ROTATE_RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
}


def action_for_key(key):
    """Return the Action bound to a pygame key code, or None for any other key."""
    return KEY_ACTIONS.get(key)
