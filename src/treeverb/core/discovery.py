# src/treeverb/core/discovery.py
import importlib.util
import logging
from typing import Any, Callable, Dict

from treeverb.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


def discover_handlers() -> Dict[str, Callable[..., Any]]:
    """
    Scans the handlers directory, loads every '*_handler.py' module and
    returns a map of built-in verb names to their 'handle_<name>' function.
    """
    discovered_handlers: Dict[str, Callable[..., Any]] = {}
    handlers_dir = PathUtils.get_handlers_dir()
    base_module_path = "treeverb.core.handlers"

    logger.debug("Scanning for handlers in: '%s'", handlers_dir)
    if not handlers_dir.is_dir():
        logger.warning("Handlers directory not found, skipping: %s", handlers_dir)
        return discovered_handlers

    for file_path in sorted(handlers_dir.glob("**/*_handler.py")):
        try:
            relative_path = file_path.relative_to(handlers_dir)
            module_name_parts = list(relative_path.parts)
            module_name_parts[-1] = file_path.stem
            module_name = f"{base_module_path}.{'.'.join(module_name_parts)}"

            spec = importlib.util.spec_from_file_location(module_name, file_path)
            if not spec or not spec.loader:
                raise ImportError(f"Could not create spec for {file_path}")

            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)

            for attr_name in dir(module):
                if attr_name.startswith("handle_"):
                    handler_func = getattr(module, attr_name)
                    if callable(handler_func):
                        verb_name = attr_name.replace("handle_", "", 1)
                        discovered_handlers[verb_name] = handler_func
                        logger.debug("Discovered built-in '%s'", verb_name)

        except Exception as e:
            logger.error("Failed to load handler module %s: %s", file_path.name, e, exc_info=True)

    return discovered_handlers
