"""Append-only feedback log with reward scoring.

Each user interaction in the editor is appended to a JSON array on disk
and scored with a fixed reward table plus a few contextual bonuses. The
log is training data for later recommendation work; scoring is
deterministic and has no side effects.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from folio.exceptions import StorageError
from folio.models.portfolio import FeedbackEvent

logger = logging.getLogger(__name__)

REWARD_TABLE: dict[str, int] = {
    # Engagement
    "like": 5,
    "dislike": -3,
    "keep_theme": 1,
    "change_theme": -1,
    "keep_layout": 1,
    "change_layout": -1,
    "publish": 10,
    "abandon": -10,
    "save_config": 2,
    "edit": -1,
    # Component selection
    "add_component": 2,
    "remove_component": -1,
    "reorder_components": 1,
    # Animation and design
    "add_animation": 3,
    "remove_animation": -1,
    "change_animation": 1,
    "enable_hover_effects": 2,
    "disable_hover_effects": -1,
    # Theme and styling
    "apply_liquid_design": 4,
    "use_green_palette": 3,
    "improve_contrast": 5,
    "add_glass_effect": 2,
    "use_gradients": 2,
    # User experience
    "increase_accessibility": 5,
    "improve_readability": 4,
    "optimize_animations": 3,
    "reduce_motion": 2,
    # Preview interactions
    "preview_desktop": 1,
    "preview_tablet": 1,
    "preview_mobile": 1,
    "switch_view_mode": 1,
    # Recommendations
    "use_rl_recommendation": 3,
    "follow_ai_suggestion": 4,
    "customize_beyond_suggestions": 2,
}

RECOMMENDED_PAIRING_BONUS = 1
NAV_AND_HERO_BONUS = 2
ACCESSIBILITY_BONUS = 3


def _contains(value: Any, item: str) -> bool:
    return isinstance(value, list | tuple | str) and item in value


def calculate_reward(event: FeedbackEvent) -> int:
    """Score one feedback event.

    Unknown event names score 0 before bonuses. Bonuses:
    - +1 for the minimal theme paired with the fade-in animation
    - +2 when the reported config includes both navbar and hero
    - +3 when improvedContrast or betterReadability is reported

    Args:
        event: Feedback event

    Returns:
        Integer reward
    """
    reward = REWARD_TABLE.get(event.event, 0)
    details = event.details or {}

    if details.get("theme") == "minimal" and _contains(details.get("animations"), "fade-in"):
        reward += RECOMMENDED_PAIRING_BONUS

    config = details.get("config")
    components = config.get("components") if isinstance(config, dict) else None
    if _contains(components, "navbar") and _contains(components, "hero"):
        reward += NAV_AND_HERO_BONUS

    if details.get("improvedContrast") or details.get("betterReadability"):
        reward += ACCESSIBILITY_BONUS

    return reward


class FeedbackLog:
    """JSON-array feedback log on disk.

    Usage:
        log = FeedbackLog(Path("training/feedback.json"))
        reward = log.append(FeedbackEvent(event="like"))
    """

    def __init__(self, path: Path) -> None:
        """Initialize the log.

        Args:
            path: JSON file holding the event array
        """
        self.path = Path(path)

    def read_all(self) -> list[dict[str, Any]]:
        """Read every logged event.

        Returns:
            List of event dictionaries; empty if the file is missing or unreadable
        """
        if not self.path.exists():
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Failed to read feedback log %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Feedback log %s is not a JSON array, ignoring it", self.path)
            return []
        return data

    def append(self, event: FeedbackEvent) -> int:
        """Stamp, append and score one event.

        The timestamp is set to the current UTC time when the event has none.

        Args:
            event: Feedback event (its timestamp may be filled in)

        Returns:
            Reward for the event

        Raises:
            StorageError: If the log cannot be written
        """
        if not event.timestamp:
            event.timestamp = datetime.now(UTC).isoformat()

        entries = self.read_all()
        entries.append(event.to_dict())

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(self.path, str(e)) from e

        reward = calculate_reward(event)
        logger.info("Feedback logged: %s (reward %d)", event.event, reward)
        return reward
