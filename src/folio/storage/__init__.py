"""File-backed stores shared with the editing UI.

- config_store: current portfolio configuration (JSON)
- feedback: append-only feedback event log with reward scoring
"""

from folio.storage.config_store import ConfigStore
from folio.storage.feedback import REWARD_TABLE, FeedbackLog, calculate_reward

__all__ = [
    "REWARD_TABLE",
    "ConfigStore",
    "FeedbackLog",
    "calculate_reward",
]
