"""
State of a Pong match and the rules applied to it on every tick
"""

from typing import List
import pygame
from src.pong import constants
from src.pong.game_object import Paddle, Ball
from src.models.pong import MatchPhase, Score, Side, SoundEvent
from src.logger.logger import logger


class GameState:
    """
    Holds the paddles, the ball, the score and whether the match has started.
    All mutation happens on the game loop thread.
    """

    def __init__(self):
        self.board = pygame.Rect(0, 0, constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT)
        self.left_paddle = Paddle.new(Side.LEFT)
        self.right_paddle = Paddle.new(Side.RIGHT)
        self.ball = Ball.new()
        self.score = Score()
        self.phase = MatchPhase.NOT_STARTED

    @property
    def started(self) -> bool:
        """Whether the match is running"""
        return self.phase == MatchPhase.RUNNING

    @property
    def paddles(self) -> List[Paddle]:
        """Both paddles, left first"""
        return [self.left_paddle, self.right_paddle]

    def start(self) -> bool:
        """
        Start the match. Returns True only for the call that actually
        started it, later calls leave the match running and return False.
        """
        if self.started:
            return False
        self.phase = MatchPhase.RUNNING
        logger.info("Match started")
        return True

    def update(self) -> List[SoundEvent]:
        """
        Advance the match by one tick.

        Returns:
            list: sound events emitted during the tick, in order
        """
        events: List[SoundEvent] = []

        for paddle in self.paddles:
            paddle.update(self.board)
        self.ball.update(self.board)

        if self.ball.has_ball_hit_horizontal_walls(self.board):
            self.ball.velocity.y *= -1

        # No cooldown: a ball still overlapping a paddle bounces again next tick
        if self.ball.has_ball_hit_paddle(self.paddles):
            self.ball.velocity.x *= -1
            events.append(SoundEvent.HIT)
            logger.debug("Paddle hit at %s", self.ball.position.topleft)

        exit_side = self.ball.get_exit_side(self.board)
        if exit_side is not None:
            self.award_point(Side.RIGHT if exit_side == Side.LEFT else Side.LEFT)
            events.append(SoundEvent.SCORE)
            self.ball.reset()

        return events

    def award_point(self, side: Side):
        """
        Give a point to the player on the given side
        """
        if side == Side.LEFT:
            self.score.left += 1
        else:
            self.score.right += 1
        logger.info(
            "Point to %s player, score %d-%d",
            side.value,
            self.score.left,
            self.score.right,
        )
