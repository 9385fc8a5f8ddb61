# pylint: disable=missing-class-docstring
"""
Models related to Pong games
"""
from enum import Enum
from pydantic import BaseModel


class Velocity(BaseModel):

    x: float
    y: float


class Direction(Enum):
    UP = -1
    DOWN = 1
    STAYPUT = 0


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


class MatchPhase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"


class SoundEvent(Enum):
    HIT = "hit"
    SCORE = "score"
    START = "start"


class Score(BaseModel):

    left: int = 0
    right: int = 0
