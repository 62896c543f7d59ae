"""
Units for Babylon preset values
Durations and ratios as small immutable value types
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Time:
    """
    A duration. Stored in milliseconds because that is the unit the
    preset file uses for every envelope stage.

    Negative values are representable; the effect filter uses them as a
    "no envelope" marker.
    """
    milliseconds: float

    @classmethod
    def from_milliseconds(cls, millis: float) -> 'Time':
        return cls(float(millis))

    @classmethod
    def from_seconds(cls, seconds: float) -> 'Time':
        return cls(float(seconds) * 1000.0)

    @property
    def seconds(self) -> float:
        return self.milliseconds / 1000.0

    def __str__(self) -> str:
        if abs(self.milliseconds) >= 1000.0:
            return f"{self.seconds:g} s"
        return f"{self.milliseconds:g} ms"


@dataclass(frozen=True)
class Ratio:
    """
    A dimensionless ratio, stored as a percentage.

    Babylon writes sustain levels and EQ gains as percentages, so
    Ratio.from_percent(0.9).percent == 0.9 exactly.
    """
    percent: float

    @classmethod
    def from_percent(cls, percent: float) -> 'Ratio':
        return cls(float(percent))

    @classmethod
    def from_fraction(cls, fraction: float) -> 'Ratio':
        return cls(float(fraction) * 100.0)

    @classmethod
    def zero(cls) -> 'Ratio':
        return cls(0.0)

    @property
    def fraction(self) -> float:
        return self.percent / 100.0

    def __str__(self) -> str:
        return f"{self.percent:g}%"
