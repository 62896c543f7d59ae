"""
Envelopes for Babylon presets
ADSR envelope shared by the amp, filter and modulator envelopes
"""

from dataclasses import dataclass
from enum import Enum

from .units import Ratio, Time


class EnvelopeCurve(Enum):
    """
    Named curve shapes offered by the envelope menus, with the value the
    preset file stores for each.
    """
    LINEAR = 0.000
    EXPONENTIAL_1 = 0.070
    EXPONENTIAL_2 = 0.133
    EXPONENTIAL_3 = 0.200
    EXPONENTIAL_4 = 0.267
    LOGARITHMIC_1 = 0.333
    LOGARITHMIC_2 = 0.400
    PLUCK_1 = 0.467
    PLUCK_2 = 0.533
    PLUCK_3 = 0.600
    DOUBLE_CURVE_1 = 0.667  # Exp to Log
    DOUBLE_CURVE_2 = 0.733  # Log to Exp

    def __str__(self) -> str:
        if self is EnvelopeCurve.DOUBLE_CURVE_1:
            return 'Double Curve 1: Exp > Log'
        if self is EnvelopeCurve.DOUBLE_CURVE_2:
            return 'Double Curve 2: Log > Exp'
        return self.name.replace('_', ' ').title()

    @classmethod
    def nearest(cls, value: float) -> 'EnvelopeCurve':
        """The curve whose stored value is closest to value"""
        return min(cls, key=lambda curve: abs(curve.value - value))


@dataclass(frozen=True)
class Envelope:
    attack: Time
    attack_curve: float
    decay: Time
    decay_falloff: float
    sustain: Ratio  # A percentage, not a time
    release: Time
    release_falloff: float

    def __str__(self) -> str:
        return (f"A {self.attack} D {self.decay} S {self.sustain} R {self.release} "
                f"(curves {self.attack_curve:g}/{self.decay_falloff:g}/{self.release_falloff:g})")


# The effect filter has no envelope of its own. It is given this
# out-of-range one so consumers can tell it apart from a real envelope.
NO_ENVELOPE = Envelope(
    attack=Time.from_seconds(-1.01),
    attack_curve=-1.0,
    decay=Time.from_seconds(-1.1),
    decay_falloff=-1.0,
    sustain=Ratio.zero(),
    release=Time.from_seconds(-1.1),
    release_falloff=-1.0,
)


def is_placeholder(envelope: Envelope) -> bool:
    return envelope == NO_ENVELOPE
