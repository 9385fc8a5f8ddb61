# pylint: disable=no-member
"""
Functionality for combining the various parts of the two player Pong game
"""
from typing import List
import pygame
from src.pong import constants
from src.pong.base_game import BasePongGame
from src.pong.game_state import GameState
from src.pong.input_controller import InputController
from src.pong.renderer import Renderer
from src.audio.playback import AudioPlayback
from src.audio.tone_synthesizer import build_sound_table, SOUND_FORMAT
from src.models.pong import SoundEvent
from src.logger.logger import logger


class PongGame(BasePongGame):
    """
    Two player Pong game with generated sound effects
    """

    def __init__(self, headless: bool = False, muted: bool = False):
        self.headless = headless
        # The mixer has to be opened in mono before pygame.init() opens a default one
        self.audio = AudioPlayback(build_sound_table(), SOUND_FORMAT, muted=muted)
        pygame.init()
        if not headless:
            self.screen = pygame.display.set_mode(
                (constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT)
            )
            pygame.display.set_caption(constants.SCREEN_CAPTION)
        else:
            # Draw onto an offscreen surface instead of a window
            self.screen = pygame.Surface(
                (constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT)
            )
        self.clock = pygame.time.Clock()

        self.state = GameState()
        self.input_controller = InputController(self.state)
        self.renderer = Renderer(self.screen)
        logger.info(
            "Opened %dx%d board, audio %s",
            constants.SCREEN_WIDTH,
            constants.SCREEN_HEIGHT,
            "enabled" if self.audio.enabled else "disabled",
        )

    def handle_input(self) -> List[SoundEvent]:
        """Apply pending input events and return the sounds they triggered."""
        return self.input_controller.handle_events(pygame.event.get())

    def update(self) -> List[SoundEvent]:
        """Update game state, only while the match is running."""
        if not self.state.started:
            return []
        return self.state.update()

    def render(self):
        """Render the current game state."""
        self.renderer.render(self.state)
        if not self.headless:
            pygame.display.flip()

    def tick(self) -> bool:
        """Run one iteration of the game loop: input, update, then draw."""
        self.audio.play_all(self.handle_input())
        if self.input_controller.quit_requested:
            return False
        self.audio.play_all(self.update())
        self.render()
        return True

    def close(self):
        """Close the Pygame window."""
        self.audio.close()
        pygame.quit()

    def run(self):
        """Main game loop for human play."""
        try:
            while self.tick():
                self.clock.tick(constants.FPS)
        finally:
            logger.info(
                "Final score %d-%d", self.state.score.left, self.state.score.right
            )
            self.close()
