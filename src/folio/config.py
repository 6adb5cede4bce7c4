"""Folio configuration system.

Configuration is YAML-based with a few CLI overrides (--input, --output).
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.folio/config.yaml
3. ./folio.yaml

This is the tool's own configuration. The portfolio configuration being
rendered lives in the JSON store named by storage.config_path.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from folio.engine.animations import DEFAULT_STAGGER_CAP, DEFAULT_STAGGER_STEP

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class StorageConfig:
    """File-backed store locations.

    Attributes:
        config_path: JSON file holding the current portfolio configuration
        feedback_path: JSON file holding the feedback event log
    """

    config_path: str = "training/config.json"
    feedback_path: str = "training/feedback.json"


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        path: Rendered document path
        source_path: Optional path for the escaped source listing
    """

    path: str = "dist/index.html"
    source_path: str | None = None


@dataclass
class RenderSettings:
    """Document assembly settings.

    Attributes:
        title: Document <title>
        stagger_step: Delay added per section when staggering, in seconds
        stagger_cap: Maximum stagger delay, in seconds
    """

    title: str = "Portfolio Preview"
    stagger_step: float = DEFAULT_STAGGER_STEP
    stagger_cap: float = DEFAULT_STAGGER_CAP

    def __post_init__(self) -> None:
        """Validate render settings."""
        if not self.title or not self.title.strip():
            raise ValueError("Render title must not be empty")

        for name in ("stagger_step", "stagger_cap"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ValueError(f"{name} must be a number (got {value!r})")
            if value < 0:
                raise ValueError(f"{name} must not be negative (got {value})")


@dataclass
class FolioConfig:
    """Top-level Folio configuration.

    Attributes:
        storage: Portfolio config and feedback store paths
        output: Output paths
        render: Document assembly settings
    """

    storage: StorageConfig = field(default_factory=StorageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    render: RenderSettings = field(default_factory=RenderSettings)

    # Set when loaded from a file
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax, e.g. ${FOLIO_OUTPUT} -> value of FOLIO_OUTPUT.

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return _ENV_VAR_PATTERN.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.folio/config.yaml
    2. ./folio.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".folio" / "config.yaml",
        start_path / "folio.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return value


def load_config_from_dict(data: dict[str, Any]) -> FolioConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        FolioConfig instance

    Raises:
        ValueError: On malformed sections, invalid values or unset variables
    """
    data = substitute_env_vars(data)

    config = FolioConfig()

    if "storage" in data:
        storage_data = _section(data, "storage")
        config.storage = StorageConfig(
            config_path=storage_data.get("config_path", config.storage.config_path),
            feedback_path=storage_data.get("feedback_path", config.storage.feedback_path),
        )

    if "output" in data:
        output_data = _section(data, "output")
        config.output = OutputConfig(
            path=output_data.get("path", config.output.path),
            source_path=output_data.get("source_path"),
        )

    if "render" in data:
        render_data = _section(data, "render")
        config.render = RenderSettings(
            title=render_data.get("title", config.render.title),
            stagger_step=render_data.get("stagger_step", config.render.stagger_step),
            stagger_cap=render_data.get("stagger_cap", config.render.stagger_cap),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> FolioConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        FolioConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = FolioConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# Folio Configuration

# Store locations (JSON files shared with the editing UI)
storage:
  config_path: "training/config.json"      # Current portfolio configuration
  feedback_path: "training/feedback.json"  # Append-only feedback log

# Output settings
output:
  path: "dist/index.html"
  # source_path: "dist/index.source.txt"  # Escaped source listing

# Document assembly
render:
  title: "Portfolio Preview"
  stagger_step: 0.1  # Seconds added per section with staggered-reveal
  stagger_cap: 0.8   # Maximum stagger delay in seconds
'''
