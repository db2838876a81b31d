# src/treeverb/core/template.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Pattern

from treeverb.core.path_resolver import PathSource, path_from
from treeverb.core.replacement import build_replacement_map
from treeverb.core.verb_args import GROUP_PATTERN

logger = logging.getLogger(__name__)

DIRECTIVES = {
    "path-from-directory": PathSource.DIRECTORY,
    "path-from-parent": PathSource.PARENT,
}


def do_exec_replacement(m, replacement_map: Dict[str, str]) -> str:
    """
    Replaces one {name} or {name:directive} group of an execution pattern.

    Unknown names are left as they are and unknown directives are replaced
    with a visible marker, so that a bad verb gives a visibly wrong command
    instead of an error.
    """
    name, directive = m.group(1), m.group(2)
    value = replacement_map.get(name)
    if value is None:
        return "{%s}" % name
    if directive is None:
        return value
    source = DIRECTIVES.get(directive)
    if source is None:
        logger.warning("invalid format %r in placeholder %r", directive, m.group(0))
        return f'invalid format: "{directive}"'
    return path_from(source, value, replacement_map)


def expand(pattern: str, replacement_map: Dict[str, str]) -> str:
    return GROUP_PATTERN.sub(lambda m: do_exec_replacement(m, replacement_map), pattern)


def exec_tokens(
        execution: str,
        args_parser: Optional[Pattern[str]],
        file: Path,
        args: Optional[str],
        is_dir: Optional[bool] = None,
) -> List[str]:
    """
    Builds the tokens which can be used to launch an executable.

    The pattern is split on whitespace before the replacements, so a
    replacement containing spaces stays a single token.
    """
    replacement_map = build_replacement_map(args_parser, file, args, False, is_dir)
    return [expand(token, replacement_map) for token in execution.split()]


def shell_exec_string(
        execution: str,
        args_parser: Optional[Pattern[str]],
        file: Path,
        args: Optional[str],
        is_dir: Optional[bool] = None,
) -> str:
    """
    Builds a shell compatible command, with escaped paths.

    Tokens are rejoined with single spaces and kept as typed, so that
    e.g. './build.sh' isn't turned into a $PATH lookup.
    """
    replacement_map = build_replacement_map(args_parser, file, args, True, is_dir)
    return " ".join(expand(execution, replacement_map).split())
