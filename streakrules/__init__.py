"""
streakrules - streak-triggered rule evaluation.

Evaluate a rule against a context, keep a bounded history of its
outcomes, and fire actions once the same outcome repeats enough times
in a row.
"""

from streakrules.models import ActionDefinition, EvaluationRecord, Rule
from streakrules.contracts import ActionResolver, DiagnosticSink, Evaluator
from streakrules.rules import ActionDispatcher, HistoryStore, RuleProcessor
from streakrules.providers import CallableEvaluator, RegistryActionResolver

__version__ = "0.1.0"

__all__ = [
    "ActionDefinition",
    "EvaluationRecord",
    "Rule",
    "ActionResolver",
    "DiagnosticSink",
    "Evaluator",
    "ActionDispatcher",
    "HistoryStore",
    "RuleProcessor",
    "CallableEvaluator",
    "RegistryActionResolver",
]
