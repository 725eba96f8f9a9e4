"""
Engine Contracts - Capabilities injected into the rule processor.

The processor knows nothing about expression languages or concrete
action types. Deployments plug in strategies that satisfy these
interfaces.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from streakrules.models.rule import ActionDefinition, Rule

T = TypeVar("T")

# handler(context, rule, definition)
ActionHandler = Callable[[Any, Rule, ActionDefinition], None]


class Evaluator(ABC, Generic[T]):
    """Evaluates a rule expression against a context."""

    @abstractmethod
    def evaluate(self, context: T, expression: Any) -> bool:
        """
        Evaluate an expression.

        Failures are raised to the caller of RuleProcessor.run and are
        never absorbed by the engine.
        """


class ActionResolver(ABC):
    """Maps an action definition to an executable handler."""

    @abstractmethod
    def resolve(self, definition: ActionDefinition) -> ActionHandler:
        """
        Return the handler for a definition.

        Raising here is allowed; the dispatcher reports the failure and
        moves on to the next action.
        """


class DiagnosticSink(ABC):
    """Receives action diagnostics from the dispatcher."""

    @abstractmethod
    def action_fired(self, rule: Rule, definition: ActionDefinition, hits: int) -> None:
        """An action met its threshold and is about to run."""

    @abstractmethod
    def action_failed(self, rule: Rule, definition: ActionDefinition, error: Exception) -> None:
        """Resolving or running an action raised."""
