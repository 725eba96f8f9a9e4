"""
Error Handling Utilities

Provides:
- Exception taxonomy for the rule engine
- Error classification for diagnostics

Evaluation failures propagate to the caller; resolution and action
failures are absorbed by the dispatcher and reported. Nothing is retried.
"""


class StreakRulesError(Exception):
    """Base class for engine errors."""
    pass


class ExpressionError(StreakRulesError):
    """Raised when a rule expression cannot be evaluated."""
    pass


class ActionResolutionError(StreakRulesError):
    """Raised when no handler can be produced for an action definition."""
    pass


class RuleConfigurationError(StreakRulesError):
    """Raised on invalid engine wiring (not model validation)."""
    pass


def classify_error(error: Exception) -> str:
    """
    Classify an error for diagnostics.
    
    Args:
        error: Exception to classify.
    
    Returns:
        Error category string.
    """
    if isinstance(error, ActionResolutionError):
        return "resolution"
    if isinstance(error, RuleConfigurationError):
        return "configuration"

    error_name = type(error).__name__.lower()
    error_msg = str(error).lower()
    
    # Timeout errors
    if "timeout" in error_name or "timed out" in error_msg:
        return "timeout"
    
    # Validation errors
    if "validation" in error_name or "invalid" in error_msg:
        return "validation"
    
    # Default
    return "unknown"
