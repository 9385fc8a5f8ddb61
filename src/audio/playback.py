# pylint: disable=no-member
"""
Best-effort playback of generated sounds through pygame's mixer.
Audio problems are logged and otherwise ignored so that they never
interrupt a game in progress.
"""

from typing import Dict, Iterable, Mapping
import pygame
from src.audio import constants
from src.logger.logger import logger
from src.models.audio import Sound, SoundFormat
from src.models.pong import SoundEvent


class AudioPlayback:
    """
    Plays sounds without blocking the caller. Each call uses whichever
    mixer channel is free, so overlapping sounds do not cut each other off.
    """

    def __init__(
        self,
        sounds: Mapping[SoundEvent, Sound],
        sound_format: SoundFormat = SoundFormat(),
        muted: bool = False,
    ):
        self.sounds = sounds
        self.sound_format = sound_format
        self.muted = muted
        self.enabled = False
        self._mixer_sounds: Dict[Sound, pygame.mixer.Sound] = {}
        self._owns_mixer = False
        if not muted:
            self.enabled = self._open_mixer()

    def _open_mixer(self) -> bool:
        """
        Open the mixer with the format the sounds were generated in.
        Returns whether the audio device is usable.
        """
        size = -self.sound_format.sample_size_bits
        if not self.sound_format.signed:
            size = self.sound_format.sample_size_bits
        expected = (self.sound_format.sample_rate, size, self.sound_format.channels)

        try:
            current = pygame.mixer.get_init()
            if current and current != expected:
                # pygame.init() may already have opened the mixer in stereo
                pygame.mixer.quit()
                current = None
            if not current:
                pygame.mixer.init(
                    frequency=self.sound_format.sample_rate,
                    size=size,
                    channels=self.sound_format.channels,
                    buffer=constants.MIXER_BUFFER_SIZE,
                    allowedchanges=0,
                )
                self._owns_mixer = True
        except pygame.error as e:
            logger.warning("Audio disabled, could not open the mixer: %s", e)
            return False

        logger.debug("Mixer opened with %s", pygame.mixer.get_init())
        return True

    def _get_mixer_sound(self, sound: Sound) -> pygame.mixer.Sound:
        if sound not in self._mixer_sounds:
            self._mixer_sounds[sound] = pygame.mixer.Sound(buffer=sound.data)
        return self._mixer_sounds[sound]

    def play(self, sound: Sound) -> bool:
        """
        Start playing the sound and return immediately.
        Returns False if the sound could not be played.
        """
        if not self.enabled:
            return False

        try:
            channel = self._get_mixer_sound(sound).play()
        except (pygame.error, ValueError) as e:
            logger.warning("Could not play %s sound: %s", sound.name, e)
            return False
        if channel is None:
            logger.debug("No free channel for %s sound", sound.name)
            return False
        return True

    def play_event(self, event: SoundEvent) -> bool:
        """
        Play the sound registered for a game event
        """
        sound = self.sounds.get(event)
        if sound is None:
            logger.warning("No sound registered for event %s", event.value)
            return False
        return self.play(sound)

    def play_all(self, events: Iterable[SoundEvent]):
        """
        Play every sound in the order the events were emitted
        """
        for event in events:
            self.play_event(event)

    def close(self):
        """Shut down the mixer if it was opened here."""
        if self._owns_mixer:
            pygame.mixer.quit()
            self._owns_mixer = False
        self.enabled = False
