# Utils Package
"""
Cross-cutting utilities.

- error_handling.py: Exception taxonomy and error classification
- logging_context.py: Rule run context for log records
- structured_logging.py: JSON logging and the default diagnostic sink
"""

from streakrules.utils.error_handling import (
    StreakRulesError,
    ExpressionError,
    ActionResolutionError,
    RuleConfigurationError,
    classify_error,
)
from streakrules.utils.logging_context import (
    LoggingContext,
    RuleContextFilter,
    configure_logging,
    rule_context,
)
from streakrules.utils.structured_logging import (
    LoggingDiagnostics,
    StructuredLogger,
    get_logger,
)

__all__ = [
    "StreakRulesError",
    "ExpressionError",
    "ActionResolutionError",
    "RuleConfigurationError",
    "classify_error",
    "LoggingContext",
    "RuleContextFilter",
    "configure_logging",
    "rule_context",
    "LoggingDiagnostics",
    "StructuredLogger",
    "get_logger",
]
