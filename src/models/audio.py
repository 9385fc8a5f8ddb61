# pylint: disable=missing-class-docstring
"""
Models related to generated sounds
"""
from pydantic import BaseModel, ConfigDict
from src.audio import constants


class SoundFormat(BaseModel):
    model_config = ConfigDict(frozen=True)

    sample_rate: int = constants.SAMPLE_RATE
    sample_size_bits: int = constants.SAMPLE_SIZE_BITS
    channels: int = constants.CHANNELS
    signed: bool = True
    little_endian: bool = True

    @property
    def frame_size(self) -> int:
        """Number of bytes in one frame (one sample per channel)"""
        return self.sample_size_bits // 8 * self.channels


class Sound(BaseModel):
    """
    Raw PCM data together with the format needed to play it back
    """

    model_config = ConfigDict(frozen=True)

    name: str
    data: bytes
    format: SoundFormat = SoundFormat()

    @property
    def num_frames(self) -> int:
        """Number of frames held in the buffer"""
        return len(self.data) // self.format.frame_size
