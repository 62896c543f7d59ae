"""
Babylon preset dump tool
Decodes .bab presets and prints a summary of each
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from . import __version__
from .decoder import read_file
from .errors import DecodeError
from .preferences import PreferencesManager
from .preset import TUNING_NOTES, Preset


def format_summary(preset: Preset, verbose: bool = False) -> List[str]:
    """Human-readable description of a preset, one string per line"""
    lines = [f"Name: {preset.name}"]
    if preset.description is not None:
        lines.append(f"Description: {preset.description}")
    lines.append(f"Polyphony: {preset.polyphony}  Portamento: {preset.portamento_mode}  "
                 f"Play mode: {preset.midi_play_mode}")

    for index, osc in enumerate(preset.oscillators, start=1):
        if osc.enabled:
            lines.append(f"  OSC {index}: {osc.waveform}  vol={osc.volume:.3f}  "
                         f"oct={osc.octave_tuning:+d} semi={osc.semitone_tuning:+d} "
                         f"fine={osc.fine_tuning:+d}  voices={osc.unison.voices}")
    if preset.noise.enabled:
        lines.append(f"  Noise: vol={preset.noise.volume:.3f}")

    order = []
    for effect_type in preset.effect_order:
        marker = '*' if preset.effect(effect_type).is_enabled() else ''
        order.append(f"{effect_type}{marker}")
    lines.append(f"Effects: {' > '.join(order)}")

    if verbose:
        lines.append(f"Envelope: {preset.envelope}")
        lines.append(f"Filter: {preset.filter.mode}  cutoff={preset.filter.cutoff_frequency:g}  "
                     f"res={preset.filter.resonance:g}  on={preset.filter.enabled}")
        lines.append(f"Filter envelope: {preset.filter.envelope}")
        for index, lfo in enumerate(preset.lfos, start=1):
            lines.append(f"LFO {index}: {lfo.waveform}  freq={lfo.frequency:g}  on={lfo.enabled}")
        for index, mod_env in enumerate(preset.mod_envelopes, start=1):
            lines.append(f"Mod envelope {index}: {mod_env.envelope}  on={mod_env.enabled}")
        for index, item in enumerate(preset.matrix, start=1):
            if not item.is_inert():
                lines.append(f"Matrix {index}: {item.source} -> {item.target} x {item.amount:g}")
        tuned = [f"{note}={preset.tuning.offset(note):g}" for note in TUNING_NOTES
                 if preset.tuning.offset(note)]
        if tuned or preset.tuning.transpose:
            lines.append(f"Tuning: transpose={preset.tuning.transpose:g} {' '.join(tuned)}")
        for effect_type in preset.effect_order:
            lines.append(f"  {effect_type}: {preset.effect(effect_type)}")
        lines.append(f"  Delay filter: {preset.delay.filter_mode}")

    return lines


def find_presets(folder: str, extension: str) -> List[Path]:
    return sorted(p for p in Path(folder).iterdir()
                  if p.is_file() and p.suffix.lower() == extension.lower())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='babylon-dump',
                                     description="Decode Babylon .bab presets and print a summary")
    parser.add_argument('files', nargs='*', help="Preset files to decode")
    parser.add_argument('--scan', metavar='DIR', default=None,
                        help="Decode every preset in DIR (default: the preferred preset folder)")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Print envelopes, modulators and every effect's settings")
    parser.add_argument('-q', '--quiet', action='store_true',
                        help="Hide warnings about unrecognized parameters")
    parser.add_argument('--config-dir', default=None, help="Use preferences from this directory")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def resolve_log_level(configured, verbose: bool = False) -> str:
    """Level name to log at; unknown names from the preferences file mean WARNING"""
    if verbose:
        return 'DEBUG'
    level = str(configured).upper()
    if not isinstance(logging.getLevelName(level), int):
        return 'WARNING'
    return level


def configure_logging(prefs: PreferencesManager, verbose: bool, quiet: bool):
    level = resolve_log_level(prefs.get('log_level', 'WARNING'), verbose)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    diagnostics_level = logging.NOTSET
    if quiet or not prefs.get('report_unrecognized', True):
        diagnostics_level = logging.ERROR
    logging.getLogger('babylon.diagnostics').setLevel(diagnostics_level)


def main(argv: Optional[List[str]] = None, out: TextIO = None) -> int:
    out = out or sys.stdout
    args = build_parser().parse_args(argv)
    prefs = PreferencesManager(config_dir=args.config_dir)
    configure_logging(prefs, args.verbose, args.quiet)

    paths = [Path(f) for f in args.files]
    if args.scan is not None or not paths:
        folder = args.scan or prefs.get_preset_folder()
        try:
            paths.extend(find_presets(folder, prefs.get('preset_extension', '.bab')))
        except OSError as e:
            print(f"Error: cannot scan {folder}: {e}", file=out)
            return 1

    failures = 0
    for path in paths:
        print(f"== {path}", file=out)
        try:
            preset = read_file(path)
        except (DecodeError, OSError) as e:
            print(f"Error: {e}", file=out)
            failures += 1
            continue
        for line in format_summary(preset, verbose=args.verbose):
            print(line, file=out)
        prefs.add_recent_file(str(path))

    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
