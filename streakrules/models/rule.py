"""
Rule Models - Caller-Owned Configuration

A Rule pairs an opaque expression with two ordered action lists and a
history bound. The engine only references rules; it never copies or
mutates them. History is keyed by rule_id, not by object identity.
"""

import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from streakrules.config.settings import get_settings


class ActionDefinition(BaseModel):
    """
    Static configuration of an action and its firing threshold.

    The action fires once the current run of identical outcomes is at
    least consecutive_hits long.
    """

    name: str = Field(..., min_length=1, description="Action name used in diagnostics")
    consecutive_hits: int = Field(default=1, ge=1, description="Minimum streak length before firing")
    action_type: Optional[str] = Field(None, description="Resolver key (defaults to name)")
    parameters: Dict[str, Any] = Field(default_factory=dict, description="Handler configuration")

    model_config = ConfigDict(frozen=True)

    @property
    def resolver_key(self) -> str:
        return self.action_type or self.name


class Rule(BaseModel):
    """
    A predicate plus true-branch and false-branch actions.

    max_history_required bounds how many results are retained for the
    rule, and therefore caps the longest streak that can be observed.
    A missing action list is treated as empty.
    """

    rule_id: str = Field(default_factory=lambda: uuid.uuid4().hex, description="Opaque rule identifier")
    name: str = Field(default="", description="Human-readable rule name")
    expression: Any = Field(None, description="Predicate consumed by the evaluator")
    true_actions: List[ActionDefinition] = Field(default_factory=list)
    false_actions: List[ActionDefinition] = Field(default_factory=list)
    max_history_required: int = Field(
        default_factory=lambda: get_settings().default_max_history,
        ge=1,
        description="Number of past results retained for this rule",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("true_actions", "false_actions", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return [] if v is None else v

    def actions_for(self, result: bool) -> List[ActionDefinition]:
        """Return the action list for an evaluation outcome."""
        return self.true_actions if result else self.false_actions

    @property
    def display_name(self) -> str:
        return self.name or self.rule_id
