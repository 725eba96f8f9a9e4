"""
Registry Action Resolver

Maps action types to handler callables. An action definition resolves
through its action_type, or its name when no type is set.
"""

import importlib
import logging
from typing import Callable, Dict, List, Optional

from streakrules.contracts.engine_contracts import ActionHandler, ActionResolver
from streakrules.models.rule import ActionDefinition
from streakrules.utils.error_handling import ActionResolutionError, RuleConfigurationError

logger = logging.getLogger(__name__)


class RegistryActionResolver(ActionResolver):
    """
    Registry of action handlers.

    Example:
        resolver = RegistryActionResolver()

        @resolver.handler("notify")
        def notify(context, rule, definition):
            ...
    """

    def __init__(self, handlers: Optional[Dict[str, ActionHandler]] = None):
        self._handlers: Dict[str, ActionHandler] = {}
        for action_type, handler in (handlers or {}).items():
            self.register(action_type, handler)

    def register(self, action_type: str, handler: ActionHandler) -> None:
        """Register a handler for an action type."""
        if not callable(handler):
            raise RuleConfigurationError(f"Handler for '{action_type}' is not callable")
        if action_type in self._handlers:
            logger.warning(f"Overwriting existing handler registration: {action_type}")
        self._handlers[action_type] = handler
        logger.debug(f"Registered action handler: {action_type}")

    def unregister(self, action_type: str) -> None:
        if action_type in self._handlers:
            del self._handlers[action_type]
            logger.debug(f"Unregistered action handler: {action_type}")

    def handler(self, action_type: str) -> Callable[[ActionHandler], ActionHandler]:
        """Decorator form of register()."""
        def decorator(func: ActionHandler) -> ActionHandler:
            self.register(action_type, func)
            return func
        return decorator

    def resolve(self, definition: ActionDefinition) -> ActionHandler:
        key = definition.resolver_key
        handler = self._handlers.get(key)
        if handler is None:
            raise ActionResolutionError(
                f"No handler registered for action type '{key}'"
            )
        return handler

    def list_action_types(self) -> List[str]:
        """List all registered action types."""
        return list(self._handlers.keys())

    def load_from_module(self, module_path: str, handler_names: List[str]) -> None:
        """
        Register module-level functions as handlers, keyed by function name.

        Args:
            module_path: Python module path (e.g., 'myapp.actions')
            handler_names: Function names to load
        """
        module = importlib.import_module(module_path)
        for name in handler_names:
            func = getattr(module, name, None)
            if func is None:
                logger.warning(f"Handler not found in {module_path}: {name}")
                continue
            self.register(name, func)
