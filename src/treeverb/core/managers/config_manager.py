# src/treeverb/core/managers/config_manager.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from treeverb.core.errors import ConfError
from treeverb.core.utils.path_utils import PathUtils
from treeverb.core.verb_registry import parse_verb_confs
from treeverb.model import VerbConf

logger = logging.getLogger(__name__)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merges override into a copy of base. The 'verbs' lists are concatenated, override first."""
    merged = dict(base)
    for key, value in override.items():
        if key == "verbs":
            merged[key] = list(value or []) + list(base.get(key) or [])
        elif isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """
    A singleton class to manage the application's configuration.
    It loads the packaged defaults and merges the user's conf file over them.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Loads the configuration from the files."""
        self._config: Dict[str, Any] = {}
        self._user_conf_path: Optional[Path] = None
        try:
            self.reset()
        except ConfError as e:
            # reported again by the app when it reloads at startup
            logger.error("Initial configuration load failed: %s", e)
        logger.debug("ConfigManager initialized.")

    @property
    def user_conf_path(self) -> Path:
        return self._user_conf_path or PathUtils.get_user_config_file()

    def use_user_conf(self, path: Optional[Path]) -> None:
        """Switches to another user conf file (e.g. given with --conf) and reloads."""
        self._user_conf_path = path
        self.reset()

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'debug.level'.
        """
        keys = key_path.split('.')
        value = self._config
        for key in keys:
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def get_verb_confs(self) -> List[VerbConf]:
        """Returns the configured verbs, user ones first. Raises ConfError on invalid entries."""
        return parse_verb_confs(self._config.get("verbs", []))

    def reset(self):
        """Resets the in-memory configuration from the settings.json and user conf files."""
        self._config = self._load_json(PathUtils.get_default_settings_file())
        user_conf_path = self.user_conf_path
        if user_conf_path.exists():
            self._config = _merge(self._config, self._load_json(user_conf_path))
            logger.info("User configuration merged from %s.", user_conf_path)
        else:
            logger.debug("No user configuration at %s.", user_conf_path)

    @staticmethod
    def _load_json(path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.warning("Configuration file not found at %s. Using empty config.", path)
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", path, e, exc_info=True)
            raise ConfError(f"Could not read configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfError(f"Configuration file {path} must hold a JSON object")
        return data


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()
