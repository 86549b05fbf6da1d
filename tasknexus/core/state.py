
import json
import logging
from pathlib import Path
import sys

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {"todo_only": False}

class FilterSettings:
    _instance = None

    def __init__(self, config_path=None):
        # Determine config location (next to executable or in root)
        if config_path is not None:
             self.config_path = Path(config_path)
        elif getattr(sys, 'frozen', False):
             self.config_path = Path(sys.executable).parent / "tasknexus.json"
        else:
             self.config_path = Path("tasknexus.json").resolve()

        self._ensure_config()
        FilterSettings._instance = self

    @staticmethod
    def get_instance():
        if FilterSettings._instance is None:
            FilterSettings._instance = FilterSettings()
            logger.info(f"FilterSettings: Loaded {FilterSettings._instance.config_path}")
        return FilterSettings._instance

    @staticmethod
    def reset_instance():
        FilterSettings._instance = None

    def _ensure_config(self):
        """Create default config if missing."""
        if not self.config_path.exists():
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(DEFAULT_SETTINGS, f, indent=4)
            except OSError as e:
                logger.error(f"Failed to init {self.config_path.name}: {e}")

    def load(self):
        """Return all settings, with defaults for missing keys."""
        settings = dict(DEFAULT_SETTINGS)
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r') as f:
                    settings.update(json.load(f))
        except (OSError, ValueError) as e:
            logger.error(f"Error reading filter settings: {e}")
        return settings

    def get(self, key, default=None):
        return self.load().get(key, default)

    def set(self, key, value):
        """Update one setting. Returns False if the file could not be written."""
        try:
            current = self.load()
            current[key] = value
            with open(self.config_path, 'w') as f:
                json.dump(current, f, indent=4)
            return True
        except (OSError, TypeError) as e:
            logger.error(f"Error saving filter settings: {e}")
            return False
