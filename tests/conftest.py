import os

# Run pygame without a real display or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture
def pygame_init():
    pygame.init()
    yield
    pygame.quit()
