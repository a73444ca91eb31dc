"""
Storage module for the local config file.

ARCHITECTURE NOTES:
- This module handles ALL file system operations for ~/.minimado-cli/
- main.py and identity.py call ConfigStore but don't know HOW it works
- The path is passed in, so tests point the store at a tmp directory

Single Responsibility: This file ONLY deals with persistence (saving/loading).
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .config import get_settings
from .models import UserConfig

logger = logging.getLogger(__name__)


class ConfigStore:
    """
    Reads and writes a single UserConfig JSON file.

    No locking: two processes saving at once means the last writer wins.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> UserConfig:
        """
        Load the config, or an empty one if the file is missing or broken.

        A corrupted file is logged, never raised: the CLI should still work
        and will simply ask for the user id again.
        """
        if not self.path.exists():
            return UserConfig()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return UserConfig.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error("Error reading config file %s: %s", self.path, e)
            return UserConfig()

    def save(self, config: UserConfig) -> bool:
        """
        Write the config as indented JSON, creating the directory if needed.

        Returns:
            True if the file was written, False otherwise (error is logged)
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(config.to_json(), encoding="utf-8")
        except OSError as e:
            logger.error("Error saving config file %s: %s", self.path, e)
            return False

        logger.debug("Saved config to %s", self.path)
        return True

    def reset(self) -> bool:
        """
        Delete the config file.

        Returns:
            True if a file was removed, False if there was nothing to delete

        Raises:
            OSError: If the file exists but cannot be removed
        """
        if not self.path.exists():
            return False
        self.path.unlink()
        return True


def default_store() -> ConfigStore:
    """Store pointing at the real per-user config path."""
    return ConfigStore(get_settings().config_path)
