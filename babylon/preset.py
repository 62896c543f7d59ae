"""
Babylon preset model
The fully decoded, read-only view of a .bab file
"""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from .effect import (
    Chorus, Delay, Distortion, Effect, EffectType, Equalizer, Filter, LoFi, Reverb,
)
from .envelope import Envelope
from .format_enum import FormatEnum
from .modulation import Lfo, MatrixItem, ModulatorEnvelope, Vibrato
from .oscillator import Noise, Oscillator

# Microtuning offsets are stored for one octave starting at A natural
TUNING_NOTES = ('A', 'A#', 'B', 'C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#')


class PortamentoMode(FormatEnum):
    POLY = 0
    LEGATO = 1
    LEGATO_NO_RETRIGGER = 2, 'Legato No Retrigger'
    PORTA = 3
    PORTA_POLY = 4, 'Porta Poly'


class MidiPlayMode(FormatEnum):
    NORMAL = 0
    CHEAT_1 = 1, 'Cheat 1'  # Mute off-key notes
    CHEAT_2 = 2, 'Cheat 2'  # Replace off-key notes


@dataclass(frozen=True)
class Tuning:
    transpose: float
    root_key: int
    scale: int
    custom_scale: int
    tunings: Tuple[float, ...]  # One octave of offsets, see TUNING_NOTES

    def offset(self, note: str) -> float:
        """Microtuning offset of a note name such as 'C#'"""
        try:
            return self.tunings[TUNING_NOTES.index(note)]
        except ValueError:
            raise KeyError(f"Unknown note name {note!r}") from None


@dataclass(frozen=True)
class Preset:
    name: str
    description: Optional[str]

    # 0.0 is -inf dB, 0.5 is 0 dB and 1.0 is +10 dB
    master_volume_normalized: float

    polyphony: int
    portamento_mode: PortamentoMode
    midi_play_mode: MidiPlayMode
    glide: float
    velocity_curve: float
    key_track_curve: float
    pitch_bend_range: float
    limit_enabled: bool  # Soft clip the output at 0 dB
    tuning: Tuning
    envelope: Envelope
    envelope_curve: float
    filter: Filter
    filter_envelope_curve: float

    # Oscillators
    oscillators: Tuple[Oscillator, ...]
    hard_sync: bool  # Oscillator 2 resets when oscillator 1 does
    noise: Noise

    # Modulators
    lfos: Tuple[Lfo, ...]
    mod_envelopes: Tuple[ModulatorEnvelope, ...]
    vibrato: Vibrato
    matrix: Tuple[MatrixItem, ...]

    # Effects
    effect_order: Tuple[EffectType, ...]
    chorus: Chorus
    delay: Delay
    distortion: Distortion
    equalizer: Equalizer
    effect_filter: Filter
    lofi: LoFi
    reverb: Reverb

    preset_id: Optional[int] = None
    preset_folder: Optional[int] = None

    def effect_position(self, effect_type: EffectType) -> Optional[int]:
        """Where in the processing order the effect runs"""
        try:
            return self.effect_order.index(effect_type)
        except ValueError:
            return None

    def effect(self, effect_type: EffectType) -> Effect:
        return {
            EffectType.DISTORTION: self.distortion,
            EffectType.LOFI: self.lofi,
            EffectType.FILTER: self.effect_filter,
            EffectType.CHORUS: self.chorus,
            EffectType.EQUALIZER: self.equalizer,
            EffectType.DELAY: self.delay,
            EffectType.REVERB: self.reverb,
        }[effect_type]

    def enabled_effects(self) -> List[EffectType]:
        """Enabled effects in processing order"""
        return [effect_type for effect_type in self.effect_order
                if self.effect(effect_type).is_enabled()]

    @classmethod
    def read_file(cls, path: Union[str, Path]) -> 'Preset':
        from .decoder import read_file
        return read_file(path)

    @classmethod
    def read_stream(cls, stream: BinaryIO, source: str = '<stream>') -> 'Preset':
        from .decoder import read_stream
        return read_stream(stream, source)

    @classmethod
    def from_bytes(cls, data: Union[bytes, str], source: str = '<memory>') -> 'Preset':
        from .decoder import read_bytes
        return read_bytes(data, source)

    from_string = from_bytes
