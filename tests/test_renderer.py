# tests/test_renderer.py

"""Tests for drawing the match."""

import pygame
import pytest

from src.pong import constants
from src.pong.renderer import Renderer

WHITE = pygame.Color(*constants.WHITE)
BLACK = pygame.Color(*constants.BLACK)


@pytest.fixture
def screen():
    return pygame.Surface((constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT))


@pytest.fixture
def renderer(screen, pygame_fonts):
    return Renderer(screen)


def prompt_area_has_text(screen):
    """The prompt is drawn left of the ball around the middle of the screen."""
    return any(
        screen.get_at((x, y)) != BLACK
        for x in range(300, 385)
        for y in range(288, 312)
    )


class TestRenderer:
    """Test the Renderer class."""

    def test_draws_paddles_and_ball(self, renderer, screen, running_state):
        renderer.render(running_state)
        assert screen.get_at(running_state.left_paddle.position.center) == WHITE
        assert screen.get_at(running_state.right_paddle.position.center) == WHITE
        assert screen.get_at(running_state.ball.position.center) == WHITE

    def test_clears_background(self, renderer, screen, running_state):
        screen.fill(constants.WHITE)
        renderer.render(running_state)
        assert screen.get_at((5, 590)) == BLACK
        assert screen.get_at((100, 100)) == BLACK

    def test_prompt_shown_before_start(self, renderer, screen, state):
        renderer.render(state)
        assert prompt_area_has_text(screen)

    def test_prompt_hidden_once_running(self, renderer, screen, running_state):
        renderer.render(running_state)
        assert not prompt_area_has_text(screen)

    def test_scores_drawn_near_top(self, renderer, screen, running_state):
        running_state.score.left = 7
        renderer.render(running_state)
        assert any(
            screen.get_at((x, y)) != BLACK
            for x in range(constants.LEFT_SCORE_X, constants.LEFT_SCORE_X + 30)
            for y in range(10, constants.SCORE_BASELINE_Y)
        )

    def test_does_not_change_state(self, renderer, state):
        ball_before = state.ball.position.copy()
        paddle_before = state.left_paddle.position.copy()
        renderer.render(state)
        assert state.ball.position == ball_before
        assert state.left_paddle.position == paddle_before
        assert not state.started
