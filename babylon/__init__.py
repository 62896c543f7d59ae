"""
Babylon Preset - reader for Babylon synthesizer presets (.bab)
"""

__version__ = '0.1.0'

from .decoder import PresetDecoder, decode_bag, read_bytes, read_file, read_stream
from .effect import DelayFilterMode, EffectType, FilterEffectMode, FilterMode
from .envelope import NO_ENVELOPE, Envelope, EnvelopeCurve
from .errors import DecodeError, InvalidDataError, UnknownEffectType
from .params import ParameterBag, RawParam
from .preset import MidiPlayMode, PortamentoMode, Preset, Tuning
from .units import Ratio, Time
from .waveform import Waveform

__all__ = [
    'PresetDecoder', 'decode_bag', 'read_bytes', 'read_file', 'read_stream',
    'DelayFilterMode', 'EffectType', 'FilterEffectMode', 'FilterMode',
    'NO_ENVELOPE', 'Envelope', 'EnvelopeCurve',
    'DecodeError', 'InvalidDataError', 'UnknownEffectType',
    'ParameterBag', 'RawParam',
    'MidiPlayMode', 'PortamentoMode', 'Preset', 'Tuning',
    'Ratio', 'Time',
    'Waveform',
]
