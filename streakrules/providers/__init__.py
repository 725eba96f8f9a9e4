"""Bundled evaluator and resolver strategies."""

from streakrules.providers.callable_evaluator import CallableEvaluator
from streakrules.providers.registry_resolver import RegistryActionResolver

__all__ = ["CallableEvaluator", "RegistryActionResolver"]
