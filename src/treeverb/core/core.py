# src/treeverb/core/core.py
from __future__ import annotations

import logging

from treeverb.core.command_registry import BuiltinRegistry
from treeverb.core.parser import parse_invocation
from treeverb.core.xngine import VerbExecuteEngine

logger = logging.getLogger(__name__)

# Registration of the built-ins is done in app.py; the engine only
# keeps a reference to the registry, so it sees them once registered.
XNGINE = VerbExecuteEngine(
    builtin_registry=BuiltinRegistry,
    logger=logger,
)

execute_line = XNGINE.execute_line
execute_key = XNGINE.execute_key
execute_verb = XNGINE.execute_verb

__all__ = ["execute_line", "execute_key", "execute_verb", "parse_invocation"]
