"""
Logging Context - Rule Run Tracking

Binds the rule being processed and a per-run identifier to the current
execution context, so every log line emitted while a rule runs (engine,
resolver, action handlers) can be tied back to it.

Context vars are thread-safe and async-safe.
"""

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Dict, Iterator, Optional

from streakrules.config.settings import get_settings

# Context vars thread-safe
_rule_id: ContextVar[str] = ContextVar("rule_id", default="")
_rule_name: ContextVar[str] = ContextVar("rule_name", default="")
_run_id: ContextVar[str] = ContextVar("run_id", default="")


DEFAULT_LOG_FORMAT = (
    "[%(asctime)s] %(levelname)-8s "
    "[rule_id=%(rule_id)s] "
    "[rule=%(rule_name)s] "
    "[run_id=%(run_id)s] "
    "%(name)s: %(message)s"
)


class RuleContextFilter(logging.Filter):
    """Filter that adds rule context to log records.

    Adds the following fields to the LogRecord:
    - rule_id: identifier of the rule being processed
    - rule_name: human-readable rule name
    - run_id: identifier of the current run
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.rule_id = _rule_id.get() or "N/A"
        record.rule_name = _rule_name.get() or "N/A"
        record.run_id = _run_id.get() or "N/A"
        return True


class LoggingContext:
    """Accessors for the rule logging context."""

    @staticmethod
    def get_context() -> Dict[str, str]:
        """Return the current rule context.

        Returns:
            Dict with rule_id, rule_name and run_id
        """
        return {
            "rule_id": _rule_id.get(),
            "rule_name": _rule_name.get(),
            "run_id": _run_id.get(),
        }

    @staticmethod
    def get_run_id() -> str:
        return _run_id.get()

    @staticmethod
    def clear_context():
        """Clear all context vars."""
        _rule_id.set("")
        _rule_name.set("")
        _run_id.set("")


@contextmanager
def rule_context(rule_id: str, rule_name: str = "", run_id: Optional[str] = None) -> Iterator[str]:
    """Bind a rule run to the logging context for the duration of the block.

    Args:
        rule_id: Identifier of the rule
        rule_name: Rule name
        run_id: Run identifier (a new one is generated if omitted)

    Yields:
        The run identifier
    """
    run_id = run_id or f"run_{uuid.uuid4().hex[:12]}"
    tokens = (
        _rule_id.set(rule_id),
        _rule_name.set(rule_name),
        _run_id.set(run_id),
    )
    try:
        yield run_id
    finally:
        _run_id.reset(tokens[2])
        _rule_name.reset(tokens[1])
        _rule_id.reset(tokens[0])


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure the root logger with rule context.

    Args:
        level: Log level name (defaults to the configured log_level)
        log_format: Custom format (uses DEFAULT_LOG_FORMAT if omitted)
    """
    level = level or get_settings().log_level

    root_logger = logging.getLogger()

    # Replace existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(log_format or DEFAULT_LOG_FORMAT))
    handler.addFilter(RuleContextFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))
