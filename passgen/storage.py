"""
Preference storage for PassGen.

The only durable state is the show_password flag. The master secret and
the derived passwords are never written anywhere. Persistence is
best-effort: a missing or corrupt file loads as the default, and a failed
write is logged and ignored.
"""

import os
import json
import logging
from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict

from . import config

logger = logging.getLogger(__name__)


class ConfigFormatError(ValueError):
    """Raised internally when a config file parses but has the wrong shape."""


@dataclass
class Config:
    """Persisted user preferences."""
    show_password: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> 'Config':
        """
        Create from a decoded JSON value.

        Unknown keys are ignored and a missing show_password means False.

        Raises:
            ConfigFormatError: If data is not an object or show_password is not a bool
        """
        if not isinstance(data, dict):
            raise ConfigFormatError(f"expected a JSON object, got {type(data).__name__}")
        show_password = data.get('show_password', False)
        if not isinstance(show_password, bool):
            raise ConfigFormatError(
                f"show_password must be a boolean, got {type(show_password).__name__}"
            )
        return cls(show_password=show_password)


class ConfigManager:
    """Loads and saves the Config record."""

    def load(self) -> Config:
        raise NotImplementedError

    def save(self, config_record: Config) -> None:
        raise NotImplementedError


class FileConfigManager(ConfigManager):
    """Stores the Config record as a small JSON file."""

    def __init__(self, filepath: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            filepath: Path to the JSON file. Defaults to ~/.passgen/config.json
        """
        self.filepath = filepath or self.default_path()
        # Exception behind the most recent fallback, None after a clean load/save.
        self.last_error: Optional[Exception] = None

    @staticmethod
    def default_path() -> str:
        """Get the default path of the preferences file."""
        config_dir = os.path.join(os.path.expanduser("~"), config.CONFIG_DIR_NAME)
        return os.path.join(config_dir, config.CONFIG_FILE)

    def load(self) -> Config:
        """Read the preferences, falling back to defaults on any failure."""
        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
            config_record = Config.from_dict(data)
        except FileNotFoundError as e:
            logger.debug(f"No preferences file at {self.filepath}, using defaults")
            return self._fallback(e)
        except (OSError, ValueError, RecursionError) as e:
            # json.JSONDecodeError, UnicodeDecodeError and ConfigFormatError are ValueErrors;
            # deeply nested arrays or objects exhaust the decoder with RecursionError
            logger.warning(f"Ignoring unreadable preferences file {self.filepath}: {e}")
            return self._fallback(e)

        self.last_error = None
        return config_record

    def _fallback(self, error: Exception) -> Config:
        self.last_error = error
        return Config()

    def save(self, config_record: Config) -> None:
        """Write the preferences atomically. Failures are logged, never raised."""
        tmp_path = self.filepath + '.tmp'
        try:
            directory = os.path.dirname(self.filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(config_record.to_dict(), f, indent=2)

            # Atomic replace, fails if filepath is a directory
            os.replace(tmp_path, self.filepath)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving preferences file {self.filepath}: {e}")
            self.last_error = e
            if os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError as cleanup_error:
                    logger.debug(f"Could not remove {tmp_path}: {cleanup_error}")
            return

        self.last_error = None
        logger.debug(f"Saved preferences to {self.filepath}")


class MemoryConfigManager(ConfigManager):
    """Keeps the Config record in memory. Used by tests and headless runs."""

    def __init__(self, initial: Optional[Config] = None):
        self._stored = Config(**initial.to_dict()) if initial else None
        self.save_count = 0

    def load(self) -> Config:
        if self._stored is None:
            return Config()
        return Config(**self._stored.to_dict())

    def save(self, config_record: Config) -> None:
        self._stored = Config(**config_record.to_dict())
        self.save_count += 1
