# src/treeverb/core/command_registry.py
import logging
from typing import Any, Callable, Dict

from treeverb.core.discovery import discover_handlers
from treeverb.core.verb_registry import BUILTIN_VERBS

logger = logging.getLogger(__name__)

# Built-in verb name -> handler, populated dynamically.
BuiltinRegistry: Dict[str, Callable[..., Any]] = {}


def register_builtin(name: str, handler: Callable[..., Any]) -> None:
    """Adds a built-in verb handler to the registry."""
    BuiltinRegistry[name] = handler
    logger.debug("Registered built-in '%s'", name)


def register_all_builtins() -> None:
    """Discovers all built-in handlers and registers them."""
    for name, handler in discover_handlers().items():
        if name not in BuiltinRegistry:
            register_builtin(name, handler)

    for name, *_ in BUILTIN_VERBS:
        if name not in BuiltinRegistry:
            logger.warning("No handler found for built-in verb '%s'", name)

    logger.debug("Successfully registered %d built-in handlers.", len(BuiltinRegistry))
