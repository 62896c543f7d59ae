"""
Preset Decoder for Babylon
Builds a Preset from the raw parameters of a .bab file

Every parameter is taken out of the bag as it is read. Missing or
unreadable values fall back to Babylon's factory defaults, which are the
literal defaults below. The only way decoding fails after the container
has been read is an effect order slot naming an unknown effect.
"""

import logging
from pathlib import Path
from typing import BinaryIO, List, Union

from .compat import DelayFilterLayout, read_delay_filter
from .diagnostics import report_unrecognized
from .effect import (
    Chorus, Delay, Distortion, EffectType, Equalizer, Filter, FilterEffectMode, FilterMode,
    LoFi, Reverb,
)
from .envelope import NO_ENVELOPE, Envelope, EnvelopeCurve
from .extract import (
    extract_bool, extract_int, extract_milliseconds, extract_number, extract_percent,
    extract_uint,
)
from .format_enum import resolve_hard, resolve_soft
from .modulation import (
    MODULATION_MATRIX_SIZE, NUM_LFOS, NUM_MOD_ENVELOPES, Lfo, MatrixItem, ModulatorEnvelope,
    Vibrato,
)
from .oscillator import NUM_OSCILLATORS, Noise, Oscillator, Unison
from .params import ParameterBag
from .preset import MidiPlayMode, PortamentoMode, Preset, Tuning
from .waveform import Waveform

logger = logging.getLogger(__name__)

# Babylon's placeholder text for an empty Preset Info field
PRESET_INFO_DEFAULT = 'Preset Info'

# FilterCut is stored in hundredths of the displayed cutoff
FILTER_CUTOFF_SCALE = 100.0

# Microtuning parameter ids, one octave starting at A
TUNING_IDS = (
    'TuneA', 'TuneASharp', 'TuneB', 'TuneC', 'TuneCSharp', 'TuneD',
    'TuneDSharp', 'TuneE', 'TuneF', 'TuneFSharp', 'TuneG', 'TuneGSharp',
)

# Parameters Babylon writes that carry no meaning for the preset itself.
# They are consumed so they don't show up as unrecognized.
IGNORED_IDS = (
    'PCH',  # Changing it makes no difference in the plugin
)

DEFAULT_CURVE = EnvelopeCurve.EXPONENTIAL_1.value
DEFAULT_ENVELOPE_CURVE = 0.14


class PresetDecoder:
    """
    Turns one ParameterBag into a Preset.

    A decoder is single use: decoding consumes the bag.
    """

    def __init__(self, bag: ParameterBag):
        self.bag = bag

    def decode(self) -> Preset:
        bag = self.bag
        logger.debug("Decoding %s (%d parameters)", bag.source, len(bag))

        envelope = self._read_envelope('Env', '', '', attack_ms=2.0, decay_ms=150.0,
                                       sustain_percent=0.9, release_ms=4.0)
        filter_envelope = self._read_envelope('FilterEnv', 'Filter', '', attack_ms=2.0,
                                              decay_ms=150.0, sustain_percent=0.02,
                                              release_ms=23.0)

        preset = Preset(
            name=bag.preset_name,
            description=self._description(),
            master_volume_normalized=extract_number(bag, 'MainVol', 0.5),
            polyphony=extract_uint(bag, 'MaxVoices', 8),
            portamento_mode=resolve_soft(
                PortamentoMode,
                extract_uint(bag, 'PortaMode', PortamentoMode.POLY.discriminant),
                PortamentoMode.POLY),
            midi_play_mode=resolve_soft(
                MidiPlayMode,
                extract_uint(bag, 'MidiPlayMode', MidiPlayMode.NORMAL.discriminant),
                MidiPlayMode.NORMAL),
            glide=extract_number(bag, 'Glide', 30.0),
            velocity_curve=extract_number(bag, 'VeloCurve', 0.5),
            key_track_curve=extract_number(bag, 'KeyTrackCurve', 0.0),
            pitch_bend_range=extract_number(bag, 'PBRange', 2.0),
            limit_enabled=extract_bool(bag, 'LimitSwitch', False),
            tuning=self._read_tuning(),
            envelope=envelope,
            envelope_curve=extract_number(bag, 'EnvCurveType', DEFAULT_ENVELOPE_CURVE),
            filter=self._read_filter(filter_envelope),
            filter_envelope_curve=extract_number(bag, 'FilterEnvCurveType', DEFAULT_ENVELOPE_CURVE),

            oscillators=tuple(self._read_oscillator(index)
                              for index in range(1, NUM_OSCILLATORS + 1)),
            hard_sync=extract_bool(bag, 'OSCSync21', False),
            noise=self._read_noise(),

            lfos=tuple(self._read_lfo(index) for index in range(1, NUM_LFOS + 1)),
            mod_envelopes=tuple(self._read_mod_envelope(index)
                                for index in range(1, NUM_MOD_ENVELOPES + 1)),
            vibrato=self._read_vibrato(),
            matrix=tuple(self._read_matrix_item(index)
                         for index in range(1, MODULATION_MATRIX_SIZE + 1)),

            effect_order=self._read_effect_order(),
            chorus=self._read_chorus(),
            delay=self._read_delay(),
            distortion=Distortion(
                enabled=extract_bool(bag, 'DistSwitch', False),
                gain=extract_number(bag, 'DistGain', 0.2),
            ),
            equalizer=Equalizer(
                enabled=extract_bool(bag, 'EQSwitch', False),
                high_gain=extract_percent(bag, 'EQHigh', 0.5),
                low_gain=extract_percent(bag, 'EQLow', 0.5),
                mid_gain=extract_percent(bag, 'EQMid', 0.5),
            ),
            effect_filter=self._read_effect_filter(),
            lofi=LoFi(
                enabled=extract_bool(bag, 'LoFiSwitch', False),
                bitrate=extract_number(bag, 'LoFiBitRate', 1.0),
                sample_rate=extract_number(bag, 'LoFiSampleRate', 1.0),
                mix=extract_number(bag, 'LoFiMix', 1.0),
            ),
            reverb=self._read_reverb(),

            preset_id=bag.preset_id,
            preset_folder=bag.preset_folder,
        )

        for param_id in IGNORED_IDS:
            bag.remove(param_id)

        logger.debug("Decoded %s as '%s'", bag.source, preset.name)
        return preset

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------

    def _description(self):
        info = self.bag.preset_info
        if info == PRESET_INFO_DEFAULT:
            return None
        return info

    def _read_tuning(self) -> Tuning:
        bag = self.bag
        return Tuning(
            transpose=extract_number(bag, 'Transpose', 0.0),
            root_key=bag.root_key,
            scale=bag.scale,
            custom_scale=bag.custom_scale,
            tunings=tuple(extract_number(bag, param_id, 0.0) for param_id in TUNING_IDS),
        )

    def _read_envelope(self, env_prefix: str, curve_prefix: str, suffix: str, *,
                       attack_ms: float, decay_ms: float, sustain_percent: float,
                       release_ms: float) -> Envelope:
        """
        Read the seven fields of an envelope. Times are named
        <env_prefix>Attack<suffix>, curves <curve_prefix>AttCurveType<suffix>.
        """
        bag = self.bag
        return Envelope(
            attack=extract_milliseconds(bag, f'{env_prefix}Attack{suffix}', attack_ms),
            attack_curve=extract_number(bag, f'{curve_prefix}AttCurveType{suffix}', DEFAULT_CURVE),
            decay=extract_milliseconds(bag, f'{env_prefix}Decay{suffix}', decay_ms),
            decay_falloff=extract_number(bag, f'{curve_prefix}DecCurveType{suffix}', DEFAULT_CURVE),
            sustain=extract_percent(bag, f'{env_prefix}Sustain{suffix}', sustain_percent),
            release=extract_milliseconds(bag, f'{env_prefix}Release{suffix}', release_ms),
            release_falloff=extract_number(bag, f'{curve_prefix}RelCurveType{suffix}', DEFAULT_CURVE),
        )

    def _read_filter(self, envelope: Envelope) -> Filter:
        bag = self.bag
        return Filter(
            enabled=extract_bool(bag, 'FilterSwitch', False),
            mode=resolve_soft(
                FilterMode,
                extract_uint(bag, 'FilterType', FilterMode.LOW_PASS.discriminant),
                FilterMode.LOW_PASS),
            resonance=extract_number(bag, 'FilterRes', 0.0),
            cutoff_frequency=extract_number(bag, 'FilterCut', 1.0) * FILTER_CUTOFF_SCALE,
            key_tracking=extract_number(bag, 'FilterKey', 0.0),
            envelope=envelope,
            envelope_amount=extract_number(bag, 'FilterEnv', 0.0),
            effect_enabled=extract_bool(bag, 'FilterDriveSwitch', False),
            effect_mode=resolve_soft(
                FilterEffectMode,
                extract_uint(bag, 'FilterDriveType', FilterEffectMode.OFF.discriminant),
                FilterEffectMode.OFF),
            effect_amount=extract_number(bag, 'FilterDrive', 0.5),
        )

    # ------------------------------------------------------------------
    # Oscillators
    # ------------------------------------------------------------------

    def _read_oscillator(self, index: int) -> Oscillator:
        bag = self.bag

        def param(name: str) -> str:
            return f'OSC{name}_{index}'

        return Oscillator(
            enabled=extract_bool(bag, param('Switch'), index == 1),
            waveform=self._read_waveform(param('WaveType')),
            invert=extract_bool(bag, param('Invert'), False),
            pan=extract_number(bag, param('Pan'), 0.5),
            phase=extract_number(bag, param('Phase'), 0.0),
            pitch=extract_number(bag, param('Pitch'), 0.0),
            fine_tuning=extract_int(bag, param('Fine'), 0),
            semitone_tuning=extract_int(bag, param('Semi'), 0),
            octave_tuning=extract_int(bag, param('Octave'), 0),
            reverse=extract_bool(bag, param('Reverse'), False),
            free_run=extract_bool(bag, param('FreeRun'), False),
            sync_all=extract_bool(bag, param('SyncAll'), False),
            volume=extract_number(bag, param('Vol'), 0.294),
            unison=Unison(
                voices=extract_uint(bag, param('NumVoice'), 1),
                detune=extract_number(bag, param('Detune'), 0.2),
                spread=extract_number(bag, param('Spread'), 0.5),
                mix=extract_number(bag, param('UniMix'), 1.0),
            ),
            am_enabled=extract_bool(bag, param('AMSwitch'), False),
            am_amount=extract_number(bag, param('AM'), 0.0),
            fm_enabled=extract_bool(bag, param('FMSwitch'), False),
            fm_amount=extract_number(bag, param('FM'), 0.0),
            rm_enabled=extract_bool(bag, param('RMSwitch'), False),
            rm_amount=extract_number(bag, param('RM'), 0.0),
        )

    def _read_noise(self) -> Noise:
        bag = self.bag
        return Noise(
            enabled=extract_bool(bag, 'OSCSwitch_N', False),
            width=extract_number(bag, 'OSCWidth_N', 1.0),
            pan=extract_number(bag, 'OSCPan_N', 0.5),
            volume=extract_number(bag, 'OSCVol_N', 0.32),
        )

    def _read_waveform(self, param_id: str) -> Waveform:
        return resolve_soft(Waveform, extract_uint(self.bag, param_id, Waveform.SINE.discriminant),
                            Waveform.SINE)

    # ------------------------------------------------------------------
    # Modulators
    # ------------------------------------------------------------------

    def _read_lfo(self, index: int) -> Lfo:
        bag = self.bag
        return Lfo(
            enabled=extract_bool(bag, f'LFOSwitch_{index}', False),
            waveform=self._read_waveform(f'LFOWaveType_{index}'),
            sync=extract_bool(bag, f'LFOSync_{index}', True),
            invert=extract_bool(bag, f'LFOInvert_{index}', False),
            reverse=extract_bool(bag, f'LFOReverse_{index}', False),
            mono=extract_bool(bag, f'LFOMono_{index}', False),
            free_run=extract_bool(bag, f'LFOFreeRun_{index}', False),
            frequency=extract_number(bag, f'LFOFreq_{index}', 0.35),
            phase=extract_number(bag, f'LFOPhase_{index}', 0.0),
        )

    def _read_mod_envelope(self, index: int) -> ModulatorEnvelope:
        bag = self.bag
        return ModulatorEnvelope(
            enabled=extract_bool(bag, f'ModEnvSwitch_{index}', False),
            curve=extract_number(bag, f'ModEnvCurveType_{index}', DEFAULT_ENVELOPE_CURVE),
            envelope=self._read_envelope('ModEnv', 'Mod', f'_{index}', attack_ms=1.0,
                                         decay_ms=150.0, sustain_percent=0.9,
                                         release_ms=1.0),
        )

    def _read_vibrato(self) -> Vibrato:
        bag = self.bag
        return Vibrato(
            enabled=extract_bool(bag, 'VibSwitch', False),
            attack=extract_number(bag, 'VibAttack', 232.0),
            delay=extract_number(bag, 'VibDelay', 232.0),
            frequency=extract_number(bag, 'VibFrequency', 6.1),
        )

    def _read_matrix_item(self, index: int) -> MatrixItem:
        bag = self.bag
        # The first slot of a new preset routes source 7 to target 2
        first = index == 1
        return MatrixItem(
            source=extract_uint(bag, f'MatrixSource_{index}', 7 if first else 0),
            target=extract_uint(bag, f'MatrixTarget_{index}', 2 if first else 0),
            amount=extract_number(bag, f'MatrixAmount_{index}', 1.0 if first else 0.0),
        )

    # ------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------

    def _read_effect_order(self):
        """
        Resolve the seven order slots. An empty slot takes its own position.
        Raises UnknownEffectType for an ID that names no effect.
        """
        order: List[EffectType] = []
        for slot, effect_type_id in enumerate(self.bag.effect_order):
            if effect_type_id is None:
                effect_type_id = slot
            order.append(resolve_hard(EffectType, effect_type_id))
        if len(set(order)) != len(order):
            logger.warning("%s: effect order %s repeats an effect", self.bag.source,
                           [effect_type.discriminant for effect_type in order])
        return tuple(order)

    def _read_chorus(self) -> Chorus:
        bag = self.bag
        return Chorus(
            enabled=extract_bool(bag, 'ChorusSwitch', False),
            depth=extract_number(bag, 'ChorusDepth', 0.5),
            pre_delay=extract_number(bag, 'ChorusPdelay', 0.5),
            ratio=extract_number(bag, 'ChorusRatio', 0.5),
            mix=extract_number(bag, 'ChorusMix', 0.5),
        )

    def _read_delay(self) -> Delay:
        bag = self.bag
        filter_position, filter_mode = read_delay_filter(bag, DelayFilterLayout.detect(bag))
        return Delay(
            enabled=extract_bool(bag, 'DelaySwitch', False),
            ping_pong=extract_bool(bag, 'DelayMode', False),
            feedback=extract_number(bag, 'DelayFeed', 0.3),
            filter=filter_position,
            filter_mode=filter_mode,
            sync=extract_bool(bag, 'DelaySync', True),
            time=extract_number(bag, 'DelayTime', 0.17),
            mix=extract_number(bag, 'DelayMix', 0.2),
        )

    def _read_effect_filter(self) -> Filter:
        """
        The effect rack filter. Unlike the main filter it has no envelope,
        drive or key tracking, and its cutoff is stored unscaled.
        """
        bag = self.bag
        return Filter(
            enabled=extract_bool(bag, 'FXFilterSwitch', False),
            mode=resolve_soft(
                FilterMode,
                extract_uint(bag, 'FXFilterType', FilterMode.LOW_PASS.discriminant),
                FilterMode.LOW_PASS),
            resonance=extract_number(bag, 'FXFilterRes', 0.0),
            cutoff_frequency=extract_number(bag, 'FXFilterCut', 1.0),
            key_tracking=0.0,
            envelope=NO_ENVELOPE,
            envelope_amount=1.0,
            effect_enabled=False,
            effect_mode=FilterEffectMode.OFF,
            effect_amount=0.0,
        )

    def _read_reverb(self) -> Reverb:
        bag = self.bag
        return Reverb(
            enabled=extract_bool(bag, 'ReverbSwitch', False),
            dampen=extract_number(bag, 'ReverbDamp', 0.3),
            filter=extract_number(bag, 'ReverbLP', 0.0),
            room=extract_number(bag, 'ReverbRoom', 0.3),
            width=extract_number(bag, 'ReverbWidth', 0.8),
            mix=extract_number(bag, 'ReverbMix', 0.2),
        )


# ==============================================================================
# Entry points
# ==============================================================================

def decode_bag(bag: ParameterBag) -> Preset:
    """Decode a bag, then report whatever parameters were left unread"""
    preset = PresetDecoder(bag).decode()
    report_unrecognized(bag.source, bag.remaining())
    return preset


def read_bytes(data: Union[bytes, str], source: str = '<memory>') -> Preset:
    return decode_bag(ParameterBag.from_bytes(data, source))


def read_stream(stream: BinaryIO, source: str = '<stream>') -> Preset:
    return decode_bag(ParameterBag.from_stream(stream, source))


def read_file(path: Union[str, Path]) -> Preset:
    return decode_bag(ParameterBag.from_file(path))
