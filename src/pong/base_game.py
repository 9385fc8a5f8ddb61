"""
Common methods implemented by Pong games driven by a fixed-rate loop
"""

from abc import ABC, abstractmethod
from typing import List
from src.models.pong import SoundEvent


class BasePongGame(ABC):
    """
    Interface implemented by Pong games
    """

    @abstractmethod
    def handle_input(self) -> List[SoundEvent]:
        """Apply pending input events and return the sounds they triggered."""

    @abstractmethod
    def update(self) -> List[SoundEvent]:
        """Update game state and return the sounds emitted by the update."""

    @abstractmethod
    def render(self):
        """Render the current game state."""

    @abstractmethod
    def tick(self) -> bool:
        """Run one iteration of the game loop. Returns False once the game
        should stop."""

    @abstractmethod
    def close(self):
        """Close the Pygame window."""

    @abstractmethod
    def run(self):
        """Main game loop for human play"""
