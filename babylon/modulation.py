"""
Modulators for Babylon presets
LFOs, modulator envelopes, vibrato and the modulation matrix
"""

from dataclasses import dataclass

from .envelope import Envelope
from .waveform import Waveform

NUM_LFOS = 2
NUM_MOD_ENVELOPES = 2
MODULATION_MATRIX_SIZE = 8


@dataclass(frozen=True)
class Lfo:
    enabled: bool
    waveform: Waveform
    sync: bool
    invert: bool
    reverse: bool
    mono: bool
    free_run: bool
    frequency: float
    phase: float


@dataclass(frozen=True)
class ModulatorEnvelope:
    enabled: bool
    envelope: Envelope
    curve: float


@dataclass(frozen=True)
class Vibrato:
    enabled: bool
    attack: float
    delay: float
    frequency: float


@dataclass(frozen=True)
class MatrixItem:
    """One routing of the modulation matrix. Source and target are menu indexes."""
    source: int
    target: int
    amount: float

    def is_inert(self) -> bool:
        return self.amount == 0.0
