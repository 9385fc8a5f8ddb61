# pylint: disable=no-member
"""
Functionality for drawing a Pong match onto a pygame surface
"""

import pygame
from src.pong import constants
from src.pong.game_state import GameState


class Renderer:
    """
    Draws the game state. Drawing only reads the state, never changes it.
    """

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.score_font = pygame.font.SysFont(
            constants.FONT_NAME, constants.SCORE_FONT_SIZE, bold=True
        )
        self.prompt_font = pygame.font.SysFont(
            constants.FONT_NAME, constants.PROMPT_FONT_SIZE, bold=True
        )

    def render(self, state: GameState):
        """Render the current game state."""
        self.screen.fill(constants.BLACK)
        for paddle in state.paddles:
            pygame.draw.rect(self.screen, constants.WHITE, paddle.position)
        pygame.draw.rect(self.screen, constants.WHITE, state.ball.position)

        self._draw_score(state.score.left, constants.LEFT_SCORE_X)
        self._draw_score(state.score.right, constants.RIGHT_SCORE_X)

        if not state.started:
            prompt_surface = self.prompt_font.render(
                constants.START_PROMPT, True, constants.WHITE
            )
            self.screen.blit(
                prompt_surface,
                prompt_surface.get_rect(center=self.screen.get_rect().center),
            )

    def _draw_score(self, points: int, x: int):
        score_surface = self.score_font.render(str(points), True, constants.WHITE)
        # Scores sit on a common baseline like regular text
        position = score_surface.get_rect(bottomleft=(x, constants.SCORE_BASELINE_Y))
        self.screen.blit(score_surface, position)
