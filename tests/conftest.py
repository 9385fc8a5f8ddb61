# tests/conftest.py

"""Shared fixtures for the Pong tests."""

import os

# Run pygame without a window or an audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from src.pong.game_state import GameState  # noqa: E402


@pytest.fixture
def state():
    """A fresh match that has not been started."""
    return GameState()


@pytest.fixture
def running_state():
    """A fresh match that has already been started."""
    game_state = GameState()
    game_state.start()
    return game_state


@pytest.fixture
def pygame_fonts():
    """Initialise pygame's font module for tests that render text."""
    pygame.font.init()
    yield
    pygame.font.quit()
