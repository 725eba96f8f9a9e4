# Models Package
"""
Pydantic models for typed data contracts.

Rules and action definitions belong to the caller; evaluation records
belong to the history store. All are immutable after creation.
"""

from streakrules.models.rule import ActionDefinition, Rule
from streakrules.models.evaluation import EvaluationRecord

__all__ = [
    "ActionDefinition",
    "Rule",
    "EvaluationRecord",
]
