# src/treeverb/core/replacement.py
from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Dict, Optional, Pattern

logger = logging.getLogger(__name__)


def escape_for_shell(path: Path) -> str:
    """Quotes a path so that a POSIX shell reads it back as a single word."""
    return shlex.quote(str(path))


def path_to_string(path: Path, for_shell: bool) -> str:
    if for_shell:
        return escape_for_shell(path)
    return str(path)


def build_replacement_map(
        args_parser: Optional[Pattern[str]],
        file: Path,
        args: Optional[str],
        for_shell: bool,
        is_dir: Optional[bool] = None,
) -> Dict[str, str]:
    """
    Builds the map used to replace the {placeholders} of an execution pattern.

    The 'file', 'parent' and 'directory' entries come from the selected path
    and are escaped when for_shell is set. The other entries come from the
    named groups of the arguments parser and are never escaped, as the user
    may type shell syntax in them.

    Args:
        args_parser: The compiled arguments regex of the verb, if any.
        file: The selected path.
        args: The raw argument text typed by the user.
        for_shell: Whether path entries must be escaped for a shell.
        is_dir: Whether the selection is a directory. Checked on disk when None.

    Returns:
        Dict[str, str]: placeholder name -> replacement.
    """
    parent = file.parent
    if parent == file:
        # no parent (e.g. '/'): we take the file itself
        parent = file
    if is_dir is None:
        is_dir = file.is_dir()

    file_str = path_to_string(file, for_shell)
    parent_str = path_to_string(parent, for_shell)
    replacements: Dict[str, str] = {
        "file": file_str,
        "parent": parent_str,
        "directory": file_str if is_dir else parent_str,
    }

    logger.debug("building replacement map, args_parser=%r args=%r", args_parser, args)
    if args_parser is not None:
        # empty args are needed when the parser only has optional groups
        m = args_parser.match(args or "")
        if m:
            for name, value in m.groupdict().items():
                if value is not None:
                    replacements[name] = value
    return replacements
