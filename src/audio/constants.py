"""
Constants related to sound synthesis and playback
"""

SAMPLE_RATE = 44100
SAMPLE_SIZE_BITS = 16
CHANNELS = 1
MAX_AMPLITUDE = 32767

# Mixer chunk size, small enough that beeps start without noticeable delay
MIXER_BUFFER_SIZE = 512

HIT_FREQUENCY = 440.0
HIT_DURATION = 0.1
SCORE_FREQUENCY = 523.25
SCORE_DURATION = 0.2
START_FREQUENCY = 659.25
START_DURATION = 0.1
