# pylint: disable=no-member
"""
Functionality related to the paddles and the ball.
Positions are kept in pygame rectangles, which also provide the
clamping and overlap checks the game needs.
"""

from typing import List, Optional
from abc import ABC, abstractmethod
import pygame
from src.pong import constants
from src.models.pong import Velocity, Direction, Side


class GameObject(ABC):
    """
    Abstract class with methods to be implemented by various game objects.
    """

    def __init__(self, x: int, y: int, width: int, height: int):
        self.width = width
        self.height = height
        self.position = pygame.Rect(x, y, width, height)
        self.velocity = Velocity(x=0, y=0)

    @abstractmethod
    def update(self, screen_rect: pygame.Rect):
        """
        Update the game object's state
        """


class Paddle(GameObject):
    """
    Represents a paddle that stays at a fixed x and moves up and down
    """

    @staticmethod
    def new(side: Side) -> "Paddle":
        """
        Create a new paddle on the given side, vertically centred
        """
        if side == Side.LEFT:
            x = constants.PADDLE_MARGIN
        else:
            x = (
                constants.SCREEN_WIDTH - constants.PADDLE_MARGIN - constants.PADDLE_WIDTH
            )
        y = constants.SCREEN_HEIGHT // 2 - constants.PADDLE_HEIGHT // 2
        return Paddle(side, x, y)

    def __init__(
        self,
        side: Side,
        x: int,
        y: int,
        width: int = constants.PADDLE_WIDTH,
        height: int = constants.PADDLE_HEIGHT,
    ):
        super().__init__(x, y, width, height)
        self.side = side

    def move(self, direction: Direction):
        """
        Move essentially changes the velocity of the paddle so that it can
        move to another position in the next update
        """
        self.velocity.y = direction.value * constants.PADDLE_SPEED

    def update(self, screen_rect: pygame.Rect):
        """
        Updates the position of the paddle, keeping it inside the screen
        """
        self.position.y += int(self.velocity.y)
        self.position.clamp_ip(screen_rect)


class Ball(GameObject):
    """
    Represents the ball. It is square on screen as well as for
    collision detection.
    """

    @staticmethod
    def new() -> "Ball":
        """
        Create a new ball at the center of the screen, heading down and right
        """
        ball = Ball(0, 0)
        ball.velocity = Velocity(x=constants.BALL_SPEED, y=constants.BALL_SPEED)
        ball.reset()
        return ball

    def __init__(self, x: int, y: int, size: int = constants.BALL_SIZE):
        super().__init__(x, y, size, size)

    def reset(self):
        """
        Serves the ball again from the center of the screen.
        The direction is kept while the speed goes back to its initial value.
        """
        self.position.x = constants.SCREEN_WIDTH // 2 - self.width // 2
        self.position.y = constants.SCREEN_HEIGHT // 2 - self.height // 2

        speed = constants.BALL_SPEED
        self.velocity.x = speed if self.velocity.x > 0 else -speed
        self.velocity.y = speed if self.velocity.y > 0 else -speed

    def update(self, screen_rect: pygame.Rect):
        """
        Updates the position of the ball based on its velocity.
        The ball is allowed to leave the screen, that is how points are scored.
        """
        self.position.x += int(self.velocity.x)
        self.position.y += int(self.velocity.y)

    def has_ball_hit_horizontal_walls(self, screen_rect: pygame.Rect) -> bool:
        """
        Check if the ball has reached the top or bottom wall
        """
        return (
            self.position.y <= screen_rect.top
            or self.position.y >= screen_rect.bottom - self.height
        )

    def has_ball_hit_paddle(self, paddles: List[Paddle]) -> bool:
        """
        Check if the ball overlaps any of the paddles
        """
        return any(self.position.colliderect(paddle.position) for paddle in paddles)

    def get_exit_side(self, screen_rect: pygame.Rect) -> Optional[Side]:
        """
        Get the side through which the ball has left the screen, if any
        """
        if self.position.x < screen_rect.left:
            return Side.LEFT
        if self.position.x > screen_rect.right:
            return Side.RIGHT
        return None
