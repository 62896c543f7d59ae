"""
Effects for Babylon presets
Effect types, their modes and the per-effect parameter sets
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .envelope import Envelope
from .errors import UnknownEffectType
from .format_enum import FormatEnum
from .units import Ratio


class EffectType(FormatEnum):
    """
    Kinds of effects. Declaration order is the default processing order.
    """
    DISTORTION = 0
    LOFI = 1, 'LoFi'
    FILTER = 2
    CHORUS = 3
    EQUALIZER = 4
    DELAY = 5
    REVERB = 6

    @classmethod
    def _unknown_discriminant(cls, discriminant: int) -> Exception:
        return UnknownEffectType(discriminant)


class FilterMode(FormatEnum):
    LOW_PASS = 0, 'Low Pass'
    BAND_PASS = 1, 'Band Pass'
    HIGH_PASS = 2, 'High Pass'
    NOTCH = 3
    PEAK = 4


class FilterEffectMode(FormatEnum):
    """How the filter drive stage processes the signal"""
    OFF = 0
    SATURATION = 1
    OVERDRIVE = 2
    DISTORTION = 3
    BIT_RATE_REDUCTION = 4, 'Bit Rate Reduction'
    SAMPLE_RATE_REDUCTION = 5, 'Sample Rate Reduction'


class DelayFilterKind(Enum):
    OFF = 'Off'
    LOW_PASS = 'LP'
    HIGH_PASS = 'HP'
    BAND_PASS = 'BP'


class DelayFilterMode(FormatEnum):
    """
    Tone filter of the delay: a filter type and a frequency on one slider.

    The slider has 25 stops. The file stores the stop's position (0.0-1.0),
    so each discriminant is round(position * 1000) and the numbering has
    gaps. Do not renumber.
    """
    OFF = 0
    LOW_PASS_12000 = 42
    LOW_PASS_8000 = 83
    LOW_PASS_5000 = 125
    LOW_PASS_3000 = 167
    LOW_PASS_1500 = 208
    LOW_PASS_800 = 250
    LOW_PASS_400 = 292
    LOW_PASS_200 = 333
    HIGH_PASS_6000 = 375
    HIGH_PASS_4000 = 417
    HIGH_PASS_2000 = 458
    HIGH_PASS_1000 = 500
    HIGH_PASS_600 = 542
    HIGH_PASS_400 = 583
    HIGH_PASS_200 = 625
    HIGH_PASS_100 = 667
    BAND_PASS_3000 = 708
    BAND_PASS_2000 = 750
    BAND_PASS_1500 = 792
    BAND_PASS_1000 = 833
    BAND_PASS_800 = 875
    BAND_PASS_600 = 917
    BAND_PASS_400 = 958
    BAND_PASS_200 = 1000

    @classmethod
    def from_position(cls, position: float, default: 'DelayFilterMode') -> 'DelayFilterMode':
        """Soft lookup from the stored slider position"""
        scaled = position * 1000
        if not math.isfinite(scaled):
            return default
        return cls.from_or(round(scaled), default)

    @property
    def position(self) -> float:
        return self.discriminant / 1000.0

    @property
    def kind(self) -> DelayFilterKind:
        if self is DelayFilterMode.OFF:
            return DelayFilterKind.OFF
        return DelayFilterKind[self.name.rsplit('_', 1)[0]]

    @property
    def frequency(self) -> Optional[float]:
        """Cutoff or center frequency in Hz, None when the filter is off"""
        if self is DelayFilterMode.OFF:
            return None
        return float(self.name.rsplit('_', 1)[1])

    @property
    def display_name(self) -> str:
        if self is DelayFilterMode.OFF:
            return 'Off'
        return f"{self.kind.value} {self.frequency:g} Hz"


class Effect:
    """Anything that can be switched on and off in the effect rack"""

    def is_enabled(self) -> bool:
        return getattr(self, 'enabled', False)


@dataclass(frozen=True)
class Chorus(Effect):
    enabled: bool
    depth: float
    pre_delay: float
    ratio: float
    mix: float


@dataclass(frozen=True)
class Delay(Effect):
    enabled: bool
    ping_pong: bool
    feedback: float
    filter: float  # Slider position 0.0-1.0
    filter_mode: DelayFilterMode
    sync: bool
    time: float
    mix: float


@dataclass(frozen=True)
class Distortion(Effect):
    enabled: bool
    gain: float  # 0.0 to 1.0, shown as 0 to 10


@dataclass(frozen=True)
class Equalizer(Effect):
    enabled: bool
    high_gain: Ratio
    low_gain: Ratio
    mid_gain: Ratio


@dataclass(frozen=True)
class Filter(Effect):
    enabled: bool
    mode: FilterMode
    resonance: float
    cutoff_frequency: float
    key_tracking: float
    envelope: Envelope
    envelope_amount: float  # How much the envelope moves the cutoff
    effect_enabled: bool
    effect_mode: FilterEffectMode
    effect_amount: float


@dataclass(frozen=True)
class LoFi(Effect):
    enabled: bool
    bitrate: float
    sample_rate: float  # 0 to 10.0 in the plugin
    mix: float  # 0 to 10.0 in the plugin


@dataclass(frozen=True)
class Reverb(Effect):
    enabled: bool
    dampen: float
    filter: float
    room: float
    width: float
    mix: float
