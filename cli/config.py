"""Configuration management for the Strongbox CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from common.constants import DEFAULT_HOST, HOST_ENV_VAR, TIMEOUT_ENV_VAR
from common.logging_config import get_logger

logger = get_logger(__name__)


def _timeout_from_env() -> Optional[float]:
    value = os.environ.get(TIMEOUT_ENV_VAR)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {TIMEOUT_ENV_VAR}={value!r}")
        return None


class Config:
    """Manages CLI configuration stored in JSON file."""

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.strongbox/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    @staticmethod
    def defaults() -> dict:
        """Defaults, read from the environment at call time."""
        return {
            "host": os.environ.get(HOST_ENV_VAR, DEFAULT_HOST),
            "timeout": _timeout_from_env(),
        }

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / '.strongbox' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.defaults()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Config file unreadable, using defaults: {e}")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError:
                    logger.warning(f"Could not back up config to {backup_path}")
                return self.defaults()
        else:
            config = self.defaults()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError:
                logger.warning(f"Could not write default config to {self.config_path}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config: {e}")

    def get_token(self) -> Optional[str]:
        """
        Get the saved creation token.

        Returns:
            Token id or None if not set
        """
        return self.data.get('token')

    def set_token(self, token: str) -> None:
        """
        Set the creation token used by new-container and save to file.

        Args:
            token: Creation token id
        """
        self.data['token'] = token
        self.save()

    def get_host(self) -> str:
        return self.data.get('host') or DEFAULT_HOST

    def get_timeout(self) -> Optional[float]:
        """
        Get request timeout in seconds.

        Returns:
            Timeout value in seconds, or None for no timeout
        """
        return self.data.get('timeout')
