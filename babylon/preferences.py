"""
Preferences Manager for Babylon Preset
Handles persistent user preferences for the preset inspection tool
Cross-platform support using platformdirs
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)


class PreferencesManager:
    """
    Manages application preferences with persistent storage.
    Preferences are stored in a JSON file in the platform-appropriate location.
    """

    APP_NAME = "Babylon Preset"
    APP_AUTHOR = "Babylon Preset"
    PREFS_FILENAME = "preferences.json"

    DEFAULT_PREFERENCES = {
        'preset_folder': None,  # None = current directory
        'preset_extension': '.bab',
        'log_level': 'WARNING',
        'report_unrecognized': True,  # Show warnings for parameters the reader doesn't know
        'recent_files': [],
        'max_recent_files': 10,
    }

    def __init__(self, config_dir: Optional[str] = None):
        """Initialize the preferences manager"""
        self.prefs_dir = config_dir or self._get_config_dir()
        self.prefs_file = os.path.join(self.prefs_dir, self.PREFS_FILENAME)
        self.preferences = self._load_preferences()

    def _get_config_dir(self) -> str:
        """Get the configuration directory (cross-platform)"""
        return user_config_dir(self.APP_NAME, self.APP_AUTHOR)

    @classmethod
    def _defaults(cls) -> Dict[str, Any]:
        prefs = dict(cls.DEFAULT_PREFERENCES)
        prefs['recent_files'] = []
        return prefs

    def _load_preferences(self) -> Dict[str, Any]:
        """Load preferences from file"""
        prefs = self._defaults()
        if not os.path.exists(self.prefs_file):
            return prefs
        try:
            with open(self.prefs_file, 'r', encoding='utf-8') as f:
                loaded_prefs = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Error loading preferences from %s: %s", self.prefs_file, e)
            return prefs
        if not isinstance(loaded_prefs, dict):
            logger.warning("Ignoring preferences file %s: not a JSON object", self.prefs_file)
            return prefs

        # Merge with defaults to ensure all keys exist
        prefs.update(loaded_prefs)
        return prefs

    def _save_preferences(self) -> bool:
        """Save preferences to file"""
        try:
            os.makedirs(self.prefs_dir, exist_ok=True)
            with open(self.prefs_file, 'w', encoding='utf-8') as f:
                json.dump(self.preferences, f, indent=2)
            return True
        except OSError as e:
            logger.warning("Error saving preferences to %s: %s", self.prefs_file, e)
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a preference value"""
        return self.preferences.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        """Set a preference value and save"""
        self.preferences[key] = value
        return self._save_preferences()

    def get_preset_folder(self) -> str:
        """Folder scanned when no files are named, falling back to the current directory"""
        folder = self.preferences.get('preset_folder')
        if folder and os.path.isdir(folder):
            return folder
        return os.getcwd()

    def add_recent_file(self, filepath: str) -> bool:
        """Add a file to the recent files list"""
        filepath = os.path.abspath(filepath)
        recent = list(self.preferences.get('recent_files', []))

        if filepath in recent:
            recent.remove(filepath)
        recent.insert(0, filepath)

        max_files = self.preferences.get('max_recent_files', 10)
        self.preferences['recent_files'] = recent[:max_files]
        return self._save_preferences()

    def get_recent_files(self) -> List[str]:
        """Get the list of recent files that still exist"""
        recent = [f for f in self.preferences.get('recent_files', []) if os.path.exists(f)]
        self.preferences['recent_files'] = recent
        return recent

    def clear_recent_files(self) -> bool:
        self.preferences['recent_files'] = []
        return self._save_preferences()

    def reset_to_defaults(self) -> bool:
        """Reset all preferences to defaults"""
        self.preferences = self._defaults()
        return self._save_preferences()

    def get_all_preferences(self) -> Dict[str, Any]:
        """Get all preferences"""
        return dict(self.preferences)
