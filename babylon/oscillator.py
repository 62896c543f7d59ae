"""
Oscillators for Babylon presets
Three wavetable oscillators plus a white noise generator
"""

from dataclasses import dataclass

from .waveform import Waveform

NUM_OSCILLATORS = 3


@dataclass(frozen=True)
class Unison:
    voices: int  # The first voice is the original signal
    detune: float
    spread: float
    mix: float


@dataclass(frozen=True)
class Oscillator:
    """
    One oscillator. The third oscillator lacks some of the routing of the
    first two, since oscillators 1 and 2 can modulate it, but the file
    stores the same fields for all three.
    """
    enabled: bool
    waveform: Waveform
    invert: bool
    pan: float
    phase: float

    pitch: float
    fine_tuning: int
    semitone_tuning: int
    octave_tuning: int

    reverse: bool
    free_run: bool
    sync_all: bool
    volume: float
    unison: Unison

    # Amplitude, frequency and ring modulation
    am_enabled: bool
    am_amount: float
    fm_enabled: bool
    fm_amount: float
    rm_enabled: bool
    rm_amount: float


@dataclass(frozen=True)
class Noise:
    """White noise generator"""
    enabled: bool
    width: float
    pan: float
    volume: float
