"""
Rule Processor - Streak-Triggered Rule Evaluation

Run order for one (context, rule) call:
1. Evaluate the rule expression (failures propagate to the caller)
2. Record the result and prune the rule's history
3. Compute the streak of identical trailing results
4. Dispatch the branch actions whose threshold is met

Steps 2-3 run under the rule's history lock; step 4 runs outside it, on
the snapshot taken in step 3, so slow actions never block the store.
"""

import logging
from typing import Generic, List, Optional, TypeVar

from streakrules.contracts.engine_contracts import ActionResolver, DiagnosticSink, Evaluator
from streakrules.models.evaluation import EvaluationRecord
from streakrules.models.rule import Rule
from streakrules.rules.action_dispatcher import ActionDispatcher
from streakrules.rules.history_store import HistoryStore
from streakrules.rules.streak_detector import consecutive_hits
from streakrules.utils.logging_context import rule_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RuleProcessor(Generic[T]):
    """
    Evaluates rules against contexts and fires actions on streaks.

    State is process-local: one HistoryStore per processor unless a
    shared store is injected.
    """

    def __init__(
        self,
        evaluator: Evaluator[T],
        resolver: ActionResolver,
        history_store: Optional[HistoryStore] = None,
        diagnostics: Optional[DiagnosticSink] = None,
    ):
        """
        Args:
            evaluator: Evaluates rule expressions
            resolver: Maps action definitions to handlers
            history_store: Result history (a new store if omitted)
            diagnostics: Action diagnostic sink (logging if omitted)
        """
        self.evaluator = evaluator
        self.history_store = history_store if history_store is not None else HistoryStore()
        self.dispatcher = ActionDispatcher(resolver, diagnostics)

    def run(self, context: T, rule: Rule) -> None:
        """
        Evaluate a rule and fire the actions its current streak allows.

        Args:
            context: Value the expression is evaluated against
            rule: Rule to run

        Raises:
            Whatever the evaluator raises; nothing is recorded in that case.
        """
        with rule_context(rule.rule_id, rule.name):
            result = bool(self.evaluator.evaluate(context, rule.expression))

            _, history = self.history_store.record_and_snapshot(rule, result)
            hits = consecutive_hits(history, result)

            logger.debug(
                f"Rule {rule.display_name} evaluated {result} "
                f"(streak={len(hits)}, history={len(history)})"
            )

            self.dispatcher.dispatch(context, rule, rule.actions_for(result), hits)

    def history(self, rule: Rule) -> List[EvaluationRecord]:
        """Retained results for a rule, oldest first."""
        return self.history_store.history(rule)

    def reset(self, rule: Rule) -> None:
        """Forget a rule's history; its next run starts a new streak."""
        self.history_store.reset(rule)
