"""
Action Dispatcher - Threshold-Gated Action Execution

Runs the actions of one branch (true or false) whose consecutive-hit
threshold is met by the current streak.

Failure isolation: an action that cannot be resolved or that raises is
reported to the diagnostic sink and skipped; the remaining actions and
later runs are unaffected. Nothing is retried.
"""

import logging
from typing import Any, List, Optional, Sequence

from streakrules.contracts.engine_contracts import ActionResolver, DiagnosticSink
from streakrules.models.evaluation import EvaluationRecord
from streakrules.models.rule import ActionDefinition, Rule
from streakrules.utils.structured_logging import LoggingDiagnostics

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """
    Resolves and invokes actions for a rule outcome.

    Holds no knowledge of concrete action types; handlers come from the
    injected resolver.
    """

    def __init__(
        self,
        resolver: ActionResolver,
        diagnostics: Optional[DiagnosticSink] = None,
    ):
        """
        Args:
            resolver: Maps action definitions to handlers
            diagnostics: Receives fired/failed events (defaults to logging)
        """
        self.resolver = resolver
        self.diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()

    def dispatch(
        self,
        context: Any,
        rule: Rule,
        action_definitions: Optional[Sequence[ActionDefinition]],
        consecutive_hits: Sequence[EvaluationRecord],
    ) -> List[str]:
        """
        Fire every action whose threshold is met, in list order.

        Args:
            context: Context passed through to handlers
            rule: Rule that produced the outcome
            action_definitions: Branch actions (None means no actions)
            consecutive_hits: Current streak, ascending

        Returns:
            Names of the actions that completed without error
        """
        if not action_definitions:
            return []

        hits = len(consecutive_hits)
        completed: List[str] = []

        for definition in action_definitions:
            if hits < definition.consecutive_hits:
                continue

            try:
                self.diagnostics.action_fired(rule, definition, hits)
                handler = self.resolver.resolve(definition)
                handler(context, rule, definition)
            except Exception as e:
                logger.debug(f"Action '{definition.name}' raised", exc_info=True)
                self._report_failure(rule, definition, e)
                continue

            completed.append(definition.name)

        return completed

    def _report_failure(self, rule: Rule, definition: ActionDefinition, error: Exception) -> None:
        try:
            self.diagnostics.action_failed(rule, definition, error)
        except Exception:
            logger.exception(
                f"Diagnostic sink failed while reporting action '{definition.name}': {error}"
            )
