"""
Functionality for generating simple sine wave beeps.
The sounds are synthesised once at startup so the game ships without
any audio assets.
"""

from types import MappingProxyType
from typing import Mapping
import numpy as np
from src.audio import constants
from src.models.audio import Sound, SoundFormat
from src.models.pong import SoundEvent

SOUND_FORMAT = SoundFormat()


def generate_tone(
    frequency: float, duration: float, name: str = "tone"
) -> Sound:
    """
    Generate a mono sine tone as 16-bit signed little-endian PCM.

    Args:
        frequency (float): pitch of the tone in Hz, must be positive
        duration (float): length of the tone in seconds; zero or negative
            durations give an empty buffer
        name (str): label used when logging the sound

    Returns:
        Sound: the generated buffer and its format
    """
    if frequency <= 0:
        raise ValueError(f"Invalid tone frequency: {frequency}")

    num_samples = max(0, round(duration * SOUND_FORMAT.sample_rate))
    indices = np.arange(num_samples, dtype=np.float64)
    angles = 2.0 * np.pi * indices * frequency / SOUND_FORMAT.sample_rate
    # astype truncates toward zero, matching a plain integer cast of each sample
    samples = (np.sin(angles) * constants.MAX_AMPLITUDE).astype("<i2")

    return Sound(name=name, data=samples.tobytes(), format=SOUND_FORMAT)


def build_sound_table() -> Mapping[SoundEvent, Sound]:
    """
    Generate the beeps played for each game event
    """
    tones = {
        SoundEvent.HIT: (constants.HIT_FREQUENCY, constants.HIT_DURATION),
        SoundEvent.SCORE: (constants.SCORE_FREQUENCY, constants.SCORE_DURATION),
        SoundEvent.START: (constants.START_FREQUENCY, constants.START_DURATION),
    }
    return MappingProxyType(
        {
            event: generate_tone(frequency, duration, event.value)
            for event, (frequency, duration) in tones.items()
        }
    )
