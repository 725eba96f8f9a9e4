"""
Structured Logging - JSON log lines with rule context

Every entry carries the rule context bound by the processor
(rule_id, rule_name, run_id), so diagnostics from concurrent runs can be
told apart.

LoggingDiagnostics is the default diagnostic sink of the dispatcher.
"""

import json
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from streakrules.config.settings import get_settings
from streakrules.contracts.engine_contracts import DiagnosticSink
from streakrules.models.rule import ActionDefinition, Rule
from streakrules.utils.error_handling import classify_error
from streakrules.utils.logging_context import LoggingContext


class LogLevel(str, Enum):
    """Log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class StructuredLogger:
    """Logger that renders messages as JSON."""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def _format_message(self,
                        level: LogLevel,
                        message: str,
                        extra: Optional[Dict[str, Any]] = None) -> str:
        """Build a JSON log entry.

        Args:
            level: Log level
            message: Message
            extra: Additional payload

        Returns:
            JSON string
        """
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level.value,
            "logger": self.name,
            "message": message,
            "context": LoggingContext.get_context(),
        }

        if extra:
            log_entry["extra"] = extra

        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(self._format_message(LogLevel.DEBUG, message, extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(self._format_message(LogLevel.INFO, message, extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(self._format_message(LogLevel.WARNING, message, extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.error(self._format_message(LogLevel.ERROR, message, extra))


class LoggingDiagnostics(DiagnosticSink):
    """Diagnostic sink backed by the logging module.

    Emits "action fired" at INFO and "action failed" at ERROR, either as
    JSON (structured) or as plain text lines.
    """

    def __init__(self, name: str = "streakrules.diagnostics", structured: Optional[bool] = None):
        """
        Args:
            name: Logger name
            structured: JSON output; defaults to settings.structured_diagnostics
        """
        if structured is None:
            structured = get_settings().structured_diagnostics
        self.structured = structured
        self.logger = StructuredLogger(name)

    def action_fired(self, rule: Rule, definition: ActionDefinition, hits: int) -> None:
        if not self.structured:
            self.logger.logger.info(
                "'%s' fired (consecutive hits: %d / %d)",
                definition.name, hits, definition.consecutive_hits,
            )
            return

        self.logger.info(
            "action fired",
            {
                "event": "action_fired",
                "action": definition.name,
                "rule_id": rule.rule_id,
                "consecutive_hits": hits,
                "threshold": definition.consecutive_hits,
            },
        )

    def action_failed(self, rule: Rule, definition: ActionDefinition, error: Exception) -> None:
        if not self.structured:
            self.logger.logger.error("%s threw error: %s", definition.name, error)
            return

        self.logger.error(
            "action failed",
            {
                "event": "action_failed",
                "action": definition.name,
                "rule_id": rule.rule_id,
                "error": str(error),
                "error_type": type(error).__name__,
                "error_category": classify_error(error),
            },
        )


def get_logger(name: str) -> StructuredLogger:
    """Factory for StructuredLogger."""
    return StructuredLogger(name)
