"""
Command-line tool tests
"""

import io
import shutil

import pytest

from babylon.cli import main, resolve_log_level


@pytest.fixture
def config_dir(tmp_path):
    return str(tmp_path / 'config')


def run(args, config_dir):
    out = io.StringIO()
    status = main(args + ['--config-dir', config_dir], out=out)
    return status, out.getvalue()


class TestDump:

    def test_summary(self, data_file, config_dir):
        status, output = run([data_file('legacy_lead.bab')], config_dir)

        assert status == 0
        assert 'Name: Legacy Lead' in output
        assert 'Description' not in output
        assert 'OSC 1: Sine FM A 5' in output
        assert 'Delay* > Reverb*' in output

    def test_verbose(self, data_file, config_dir):
        status, output = run([data_file('modern_pad.bab'), '--verbose'], config_dir)

        assert status == 0
        assert 'Description: Slow evolving pad' in output
        assert 'LFO 1: Sine AM 2' in output
        assert 'Delay filter: LP 200 Hz' in output
        assert 'C=0.25' in output

    def test_failure_sets_exit_status(self, tmp_path, data_file, config_dir):
        bad = tmp_path / 'bad.bab'
        bad.write_text('<PluginParamTree PresetName="Bad" PresetInfo="" FX_Order_0="42"/>')

        status, output = run([str(bad), data_file('legacy_lead.bab')], config_dir)

        assert status == 1
        assert 'Unknown effect type ID 42' in output
        assert 'Name: Legacy Lead' in output, "Remaining files are still decoded"

    def test_missing_file(self, tmp_path, config_dir):
        status, output = run([str(tmp_path / 'nope.bab')], config_dir)
        assert status == 1
        assert 'Error' in output

    def test_scan_directory(self, tmp_path, data_file, config_dir):
        folder = tmp_path / 'presets'
        folder.mkdir()
        shutil.copy(data_file('legacy_lead.bab'), folder / 'a.bab')
        shutil.copy(data_file('modern_pad.bab'), folder / 'b.bab')
        (folder / 'notes.txt').write_text('ignored')

        status, output = run(['--scan', str(folder), '--quiet'], config_dir)

        assert status == 0
        assert output.index('Legacy Lead') < output.index('Glass Pad')
        assert 'notes.txt' not in output

    def test_decoded_files_become_recent(self, data_file, config_dir):
        from babylon.preferences import PreferencesManager

        run([data_file('legacy_lead.bab')], config_dir)

        recent = PreferencesManager(config_dir=config_dir).get_recent_files()
        assert recent and recent[0].endswith('legacy_lead.bab')


class TestLogLevel:

    @pytest.mark.parametrize('configured,expected', [
        ('WARNING', 'WARNING'),
        ('debug', 'DEBUG'),
        ('LOUD', 'WARNING'),
        (None, 'WARNING'),
        (17, 'WARNING'),
    ])
    def test_preference_value(self, configured, expected):
        assert resolve_log_level(configured) == expected

    def test_verbose_wins(self):
        assert resolve_log_level('ERROR', verbose=True) == 'DEBUG'

    def test_bad_log_level_in_preferences(self, data_file, config_dir):
        """A preferences file with an unknown level still lets the tool run"""
        from babylon.preferences import PreferencesManager

        PreferencesManager(config_dir=config_dir).set('log_level', 'LOUD')
        status, output = run([data_file('legacy_lead.bab')], config_dir)

        assert status == 0
        assert 'Name: Legacy Lead' in output
