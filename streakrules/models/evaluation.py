"""
Evaluation Records - Immutable History Entries

Created exactly once per run and owned by the history store.
"""

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class EvaluationRecord(BaseModel):
    """
    Outcome of one rule evaluation.

    Records are ordered by (timestamp, sequence_id); sequence_id breaks
    ties when two evaluations land on the same clock tick.
    """

    rule_id: str = Field(..., description="Identifier of the owning rule")
    result: bool = Field(..., description="Boolean outcome")
    timestamp: datetime = Field(..., description="Wall-clock creation time (UTC)")
    sequence_id: int = Field(..., ge=1, description="Store-wide monotonically increasing id")

    model_config = ConfigDict(frozen=True)

    @property
    def sort_key(self) -> Tuple[datetime, int]:
        return (self.timestamp, self.sequence_id)

    def __str__(self) -> str:
        return f"[{self.sequence_id}] [{self.timestamp:%H:%M:%S}] {self.result}"
