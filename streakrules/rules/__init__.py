# Rules Package
"""
Streak-triggered rule evaluation.

Results are recorded per rule in a bounded history; actions fire when
the run of identical trailing results reaches their threshold.
"""

from streakrules.rules.history_store import HistoryStore
from streakrules.rules.streak_detector import consecutive_hits, streak_length
from streakrules.rules.action_dispatcher import ActionDispatcher
from streakrules.rules.rule_processor import RuleProcessor

__all__ = [
    "HistoryStore",
    "consecutive_hits",
    "streak_length",
    "ActionDispatcher",
    "RuleProcessor",
]
