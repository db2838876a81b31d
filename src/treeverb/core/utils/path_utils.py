# src/treeverb/core/utils/path_utils.py
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_package_root() -> Path:
        """Returns the directory of the installed treeverb package."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_handlers_dir() -> Path:
        return PathUtils.get_package_root() / "core" / "handlers"

    @staticmethod
    def get_default_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_home_dir() -> Optional[Path]:
        """
        Returns the home directory of the current user, or None when it
        can't be determined (no HOME and no passwd entry).
        """
        try:
            return Path.home()
        except (RuntimeError, KeyError) as e:
            logger.debug("Could not determine home directory: %s", e)
            return None

    @staticmethod
    def get_user_config_dir() -> Path:
        """
        Returns the path to the user's config directory.
        (e.g., ~/.config/treeverb/)
        """
        home = PathUtils.get_home_dir() or Path(".")
        return home / ".config" / "treeverb"

    @staticmethod
    def get_user_config_file() -> Path:
        return PathUtils.get_user_config_dir() / "conf.json"

    @staticmethod
    def get_history_file() -> Path:
        """
        Returns the path to the prompt history file in the user's config directory.
        """
        return PathUtils.get_user_config_dir() / "history"
