# pylint: disable=no-member
"""
Maps keyboard events to paddle movement and the start of the match
"""

from typing import List
import pygame
from src.pong import constants
from src.pong.game_state import GameState
from src.models.pong import Direction, SoundEvent


class InputController:
    """
    Applies key presses and releases to the game state.
    Events are handled on the game loop thread, between two updates.
    """

    def __init__(self, state: GameState):
        self.state = state
        self.quit_requested = False
        self.key_bindings = {
            constants.KEY_LEFT_PADDLE_UP: (state.left_paddle, Direction.UP),
            constants.KEY_LEFT_PADDLE_DOWN: (state.left_paddle, Direction.DOWN),
            constants.KEY_RIGHT_PADDLE_UP: (state.right_paddle, Direction.UP),
            constants.KEY_RIGHT_PADDLE_DOWN: (state.right_paddle, Direction.DOWN),
        }

    def handle_event(self, event: pygame.event.Event) -> List[SoundEvent]:
        """
        Handle a single pygame event.

        Returns:
            list: sound events triggered by the input
        """
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return []

        if event.type == pygame.KEYDOWN:
            if event.key == constants.KEY_QUIT:
                self.quit_requested = True
            elif event.key == constants.KEY_START:
                if self.state.start():
                    return [SoundEvent.START]
            elif event.key in self.key_bindings:
                paddle, direction = self.key_bindings[event.key]
                paddle.move(direction)

        if event.type == pygame.KEYUP and event.key in self.key_bindings:
            paddle, _ = self.key_bindings[event.key]
            paddle.move(Direction.STAYPUT)

        return []

    def handle_events(self, events: List[pygame.event.Event]) -> List[SoundEvent]:
        """
        Handle a batch of events drained from the pygame event queue
        """
        sound_events: List[SoundEvent] = []
        for event in events:
            sound_events.extend(self.handle_event(event))
        return sound_events
