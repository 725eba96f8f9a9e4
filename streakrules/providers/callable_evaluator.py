"""Evaluator for rules whose expression is a plain predicate."""

from typing import Any, TypeVar

from streakrules.contracts.engine_contracts import Evaluator
from streakrules.utils.error_handling import ExpressionError

T = TypeVar("T")


class CallableEvaluator(Evaluator[T]):
    """Evaluates `expression(context)`.

    Exceptions raised by the predicate are not wrapped.
    """

    def evaluate(self, context: T, expression: Any) -> bool:
        if not callable(expression):
            raise ExpressionError(
                f"Expression of type {type(expression).__name__} is not callable"
            )
        return bool(expression(context))
