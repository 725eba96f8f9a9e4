"""Capability interfaces consumed by the rule processor."""

from streakrules.contracts.engine_contracts import (
    ActionHandler,
    ActionResolver,
    DiagnosticSink,
    Evaluator,
)

__all__ = [
    "ActionHandler",
    "ActionResolver",
    "DiagnosticSink",
    "Evaluator",
]
