"""File-backed portfolio configuration store.

Holds the current PortfolioConfig as pretty-printed JSON. Reads never
fail: a missing, unreadable or malformed file yields the default
configuration so the preview always has something to render.
"""

import json
import logging
from pathlib import Path
from typing import Any

from folio.exceptions import ConfigValidationError, StorageError
from folio.models.portfolio import PortfolioConfig, default_config

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes the current portfolio configuration.

    Usage:
        store = ConfigStore(Path("training/config.json"))
        config = store.load()
        store.update({"theme": "dark"})
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: JSON file holding the configuration
        """
        self.path = Path(path)

    def load(self) -> PortfolioConfig:
        """Load the stored configuration, falling back to the default.

        Returns:
            Stored PortfolioConfig, or a fresh default configuration
        """
        if not self.path.exists():
            logger.debug("No stored configuration at %s, using default", self.path)
            return default_config()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            config = PortfolioConfig.from_dict(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ConfigValidationError) as e:
            logger.warning("Failed to load configuration from %s: %s (using default)", self.path, e)
            return default_config()

        logger.debug("Loaded configuration from %s", self.path)
        return config

    def save(self, config: PortfolioConfig) -> Path:
        """Write a configuration to the store.

        Args:
            config: Configuration to store

        Returns:
            Path to the written file

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(self.path, str(e)) from e

        logger.info("Saved configuration to %s", self.path)
        return self.path

    def update(self, overrides: dict[str, Any]) -> PortfolioConfig:
        """Merge top-level overrides into the stored configuration and save it.

        The merge is shallow: an override for "content" replaces the whole
        content object.

        Args:
            overrides: Top-level keys in serialized (camelCase) form

        Returns:
            The merged configuration

        Raises:
            ConfigValidationError: If the merged configuration is malformed
            StorageError: If the file cannot be written
        """
        merged = {**self.load().to_dict(), **overrides}
        config = PortfolioConfig.from_dict(merged)
        self.save(config)
        return config
