"""Shared fixtures for the rule engine tests."""

from datetime import datetime, timedelta, timezone
from typing import List, Tuple

import pytest

from streakrules.config.settings import reload_settings
from streakrules.contracts.engine_contracts import DiagnosticSink
from streakrules.models.rule import ActionDefinition, Rule
from streakrules.providers.callable_evaluator import CallableEvaluator
from streakrules.providers.registry_resolver import RegistryActionResolver
from streakrules.rules.history_store import HistoryStore
from streakrules.rules.rule_processor import RuleProcessor


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> None:
        self.now = self.now + timedelta(seconds=seconds)


class RecordingDiagnostics(DiagnosticSink):
    """Diagnostic sink that keeps events in memory."""

    def __init__(self):
        self.fired: List[Tuple[str, int, int]] = []
        self.failed: List[Tuple[str, str]] = []

    def action_fired(self, rule, definition, hits):
        self.fired.append((definition.name, hits, definition.consecutive_hits))

    def action_failed(self, rule, definition, error):
        self.failed.append((definition.name, str(error)))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate tests from STREAKRULES_* variables in the environment."""
    for key in ("STREAKRULES_LOG_LEVEL", "STREAKRULES_DEFAULT_MAX_HISTORY", "STREAKRULES_STRUCTURED_DIAGNOSTICS"):
        monkeypatch.delenv(key, raising=False)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def store(clock):
    return HistoryStore(clock=clock)


@pytest.fixture
def diagnostics():
    return RecordingDiagnostics()


@pytest.fixture
def calls():
    """Handler invocations as (action name, context)."""
    return []


@pytest.fixture
def resolver(calls):
    resolver = RegistryActionResolver()

    def record_call(context, rule, definition):
        calls.append((definition.name, context))

    resolver.register("record", record_call)
    return resolver


@pytest.fixture
def processor(resolver, store, diagnostics):
    return RuleProcessor(CallableEvaluator(), resolver, history_store=store, diagnostics=diagnostics)


def make_rule(max_history: int = 3, true_actions=None, false_actions=None, name: str = "test-rule") -> Rule:
    """Rule whose expression returns the context itself."""
    return Rule(
        name=name,
        expression=lambda ctx: ctx,
        true_actions=true_actions,
        false_actions=false_actions,
        max_history_required=max_history,
    )


def record_action(name: str, hits: int = 1) -> ActionDefinition:
    return ActionDefinition(name=name, consecutive_hits=hits, action_type="record")


@pytest.fixture
def rule_factory():
    return make_rule


@pytest.fixture
def action_factory():
    return record_action
