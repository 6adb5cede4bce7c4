"""Test fixtures for Folio.

Sample portfolio configurations (JSON, as written by the editing UI):
- portfolios/dark_contact.json: dark theme, contact listed before hero
- portfolios/partial_content.json: partial content with staggered sections
- portfolios/invalid_shape.json: every top-level field of the wrong type
- portfolios/editor_export.json: full editor export with ids, images and
  keys folio does not model
"""

import json
from pathlib import Path
from typing import Any

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Path to sample portfolio configurations
PORTFOLIOS_DIR = FIXTURES_DIR / "portfolios"

DARK_CONTACT_PATH = PORTFOLIOS_DIR / "dark_contact.json"
PARTIAL_CONTENT_PATH = PORTFOLIOS_DIR / "partial_content.json"
INVALID_SHAPE_PATH = PORTFOLIOS_DIR / "invalid_shape.json"
EDITOR_EXPORT_PATH = PORTFOLIOS_DIR / "editor_export.json"


def load_portfolio(name: str) -> dict[str, Any]:
    """Load a sample portfolio configuration as decoded JSON.

    Args:
        name: File name without the .json suffix

    Returns:
        Decoded configuration dictionary

    Raises:
        ValueError: If the sample doesn't exist
    """
    path = PORTFOLIOS_DIR / f"{name}.json"
    if not path.exists():
        raise ValueError(f"Sample portfolio not found: {name}")
    return json.loads(path.read_text(encoding="utf-8"))
