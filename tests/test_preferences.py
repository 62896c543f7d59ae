"""
Preferences tests, isolated in a temporary config directory
"""

import json
import logging

import pytest

from babylon.preferences import PreferencesManager


@pytest.fixture
def prefs(tmp_path):
    return PreferencesManager(config_dir=str(tmp_path / 'config'))


class TestPreferences:

    def test_defaults(self, prefs):
        assert prefs.get('preset_extension') == '.bab'
        assert prefs.get('log_level') == 'WARNING'
        assert prefs.get('report_unrecognized') is True
        assert prefs.get('recent_files') == []
        assert prefs.get('missing', 'fallback') == 'fallback'

    def test_set_persists(self, prefs, tmp_path):
        assert prefs.set('log_level', 'DEBUG')

        reloaded = PreferencesManager(config_dir=str(tmp_path / 'config'))
        assert reloaded.get('log_level') == 'DEBUG'

    def test_unknown_keys_are_kept(self, tmp_path):
        config = tmp_path / 'config'
        config.mkdir()
        (config / 'preferences.json').write_text(json.dumps({'theme': 'dark'}))

        prefs = PreferencesManager(config_dir=str(config))
        assert prefs.get('theme') == 'dark'
        assert prefs.get('preset_extension') == '.bab'

    def test_corrupt_file_falls_back(self, tmp_path, caplog):
        config = tmp_path / 'config'
        config.mkdir()
        (config / 'preferences.json').write_text('{not json')

        with caplog.at_level(logging.WARNING, logger='babylon.preferences'):
            prefs = PreferencesManager(config_dir=str(config))

        assert prefs.get('log_level') == 'WARNING'
        assert 'Error loading preferences' in caplog.text

    def test_recent_files(self, prefs, tmp_path):
        files = []
        for i in range(3):
            path = tmp_path / f'{i}.bab'
            path.write_text('')
            files.append(str(path))
            prefs.add_recent_file(str(path))

        assert prefs.get_recent_files() == list(reversed(files))

        prefs.add_recent_file(files[0])
        assert prefs.get_recent_files()[0] == files[0]
        assert len(prefs.get_recent_files()) == 3

    def test_recent_files_are_capped(self, prefs, tmp_path):
        prefs.set('max_recent_files', 2)
        for i in range(4):
            path = tmp_path / f'{i}.bab'
            path.write_text('')
            prefs.add_recent_file(str(path))

        assert len(prefs.get_recent_files()) == 2

    def test_deleted_recent_files_are_dropped(self, prefs, tmp_path):
        path = tmp_path / 'gone.bab'
        path.write_text('')
        prefs.add_recent_file(str(path))
        path.unlink()

        assert prefs.get_recent_files() == []

    def test_reset_to_defaults(self, prefs):
        prefs.set('log_level', 'ERROR')
        prefs.add_recent_file(__file__)
        prefs.reset_to_defaults()

        assert prefs.get('log_level') == 'WARNING'
        assert prefs.get_recent_files() == []

    def test_defaults_are_not_shared(self, tmp_path):
        """Changing one manager's recent files leaves the class defaults alone"""
        first = PreferencesManager(config_dir=str(tmp_path / 'a'))
        first.preferences['recent_files'].append('x')

        assert PreferencesManager.DEFAULT_PREFERENCES['recent_files'] == []

    def test_preset_folder_falls_back_to_cwd(self, prefs, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert prefs.get_preset_folder() == str(tmp_path)

        prefs.set('preset_folder', str(tmp_path / 'nowhere'))
        assert prefs.get_preset_folder() == str(tmp_path)

    def test_get_all_preferences_is_a_copy(self, prefs):
        all_prefs = prefs.get_all_preferences()
        all_prefs['log_level'] = 'DEBUG'
        assert prefs.get('log_level') == 'WARNING'
