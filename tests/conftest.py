"""Shared pytest fixtures for Folio tests.

Fixtures are organized by category:
- Path fixtures: sample portfolio files
- Configuration fixtures: portfolio configurations for the engine
- Store fixtures: file-backed stores in temporary directories
"""

from pathlib import Path
from typing import Any

import pytest

from folio.models import ContentBundle, PortfolioConfig, default_config
from folio.storage import ConfigStore, FeedbackLog
from tests.fixtures import load_portfolio

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def portfolios_dir(fixtures_dir: Path) -> Path:
    """Return the path to sample portfolio configurations."""
    return fixtures_dir / "portfolios"


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def default_portfolio() -> PortfolioConfig:
    """Return a fresh default portfolio configuration."""
    return default_config()


@pytest.fixture
def dark_contact_data() -> dict[str, Any]:
    """Return the dark hero + contact sample as decoded JSON."""
    return load_portfolio("dark_contact")


@pytest.fixture
def dark_contact_portfolio(dark_contact_data: dict[str, Any]) -> PortfolioConfig:
    """Return the dark hero + contact sample as a configuration."""
    return PortfolioConfig.from_dict(dark_contact_data)


@pytest.fixture
def partial_portfolio() -> PortfolioConfig:
    """Return a configuration whose content is only partially filled in."""
    return PortfolioConfig.from_dict(load_portfolio("partial_content"))


@pytest.fixture
def ada_content() -> ContentBundle:
    """Return content that only sets the person's name."""
    return ContentBundle.from_dict({"personalInfo": {"name": "Ada"}})


@pytest.fixture
def folio_yaml() -> dict[str, Any]:
    """Return a complete folio.yaml configuration as a dictionary."""
    return {
        "storage": {
            "config_path": "store/config.json",
            "feedback_path": "store/feedback.json",
        },
        "output": {
            "path": "site/index.html",
            "source_path": "site/index.source.txt",
        },
        "render": {
            "title": "Ada's Portfolio",
            "stagger_step": 0.2,
            "stagger_cap": 1.0,
        },
    }


@pytest.fixture
def editor_export_data() -> dict[str, Any]:
    """Return the editor export sample as decoded JSON."""
    return load_portfolio("editor_export")


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def config_store(tmp_path: Path) -> ConfigStore:
    """Return a configuration store backed by a temporary file."""
    return ConfigStore(tmp_path / "training" / "config.json")


@pytest.fixture
def feedback_log(tmp_path: Path) -> FeedbackLog:
    """Return a feedback log backed by a temporary file."""
    return FeedbackLog(tmp_path / "training" / "feedback.json")
