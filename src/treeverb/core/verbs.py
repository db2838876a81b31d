# src/treeverb/core/verbs.py
"""
Verbs are the engines of the commands, and apply
- to the selected file (external verbs, whose execution pattern usually
  contains {file}, {parent} or {directory})
- to the current app state (built-in verbs)
"""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Pattern

from pydantic import BaseModel, ConfigDict

from treeverb.core import template
from treeverb.core.errors import ConfError
from treeverb.core.keys import key_event_desc, parse_key
from treeverb.core.parser import VerbInvocation
from treeverb.core.replacement import build_replacement_map
from treeverb.core.verb_args import make_invocation_args_regex, match_error
from treeverb.model import SelectionType

logger = logging.getLogger(__name__)


class VerbKind(str, Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"


class Verb(BaseModel):
    """
    What makes a verb.

    There are two kinds of verb executions:
    - external programs or commands (cd, mkdir, user defined commands, etc.)
    - built in behaviors (focusing a path, going back, showing the help, etc.)
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: VerbKind
    invocation: VerbInvocation  # how the verb is supposed to be called
    key: Optional[str] = None
    key_desc: str = ""
    args_parser: Optional[Pattern[str]] = None
    shortcut: Optional[str] = None
    execution: str  # e.g. ":quit" or "less {file}"
    description: Optional[str] = None
    from_shell: bool = False  # must be launched from the parent shell (e.g. cd)
    leave_app: bool = True
    confirm: bool = False  # not used yet
    selection_condition: SelectionType = SelectionType.ANY

    @classmethod
    def create_external(
            cls,
            invocation_str: str,
            key: Optional[str],
            shortcut: Optional[str],
            execution: str,
            description: Optional[str] = None,
            from_shell: bool = False,
            leave_app: bool = True,
            confirm: bool = False,
    ) -> "Verb":
        """
        Builds a verb running an execution pattern.

        Raises ConfError when the invocation or the key is invalid.
        """
        invocation = VerbInvocation.from_str(invocation_str)
        args_parser = None
        if invocation.args is not None:
            try:
                args_parser = make_invocation_args_regex(invocation.args)
            except ConfError as e:
                raise ConfError.invalid_verb_invocation(invocation_str) from e
        key = parse_key(key)
        # enter on a directory keeps its default behavior
        selection_condition = SelectionType.FILE if key == "enter" else SelectionType.ANY
        return cls(
            kind=VerbKind.EXTERNAL,
            invocation=invocation,
            key=key,
            key_desc=key_event_desc(key),
            args_parser=args_parser,
            shortcut=shortcut,
            execution=execution,
            description=description,
            from_shell=from_shell,
            leave_app=leave_app,
            confirm=confirm,
            selection_condition=selection_condition,
        )

    @classmethod
    def create_builtin(
            cls,
            name: str,
            key: Optional[str],
            shortcut: Optional[str],
            description: str,
    ) -> "Verb":
        """Built-ins change the app state instead of running an execution pattern."""
        key = parse_key(key)
        return cls(
            kind=VerbKind.BUILTIN,
            invocation=VerbInvocation(name=name),
            key=key,
            key_desc=key_event_desc(key),
            shortcut=shortcut,
            execution=f":{name}",
            description=description,
        )

    @property
    def name(self) -> str:
        return self.invocation.name

    @property
    def is_builtin(self) -> bool:
        return self.kind is VerbKind.BUILTIN

    def match_error(self, invocation: VerbInvocation) -> Optional[str]:
        return match_error(self, invocation)

    def replacement_map(self, file: Path, args: Optional[str], for_shell: bool, is_dir: Optional[bool] = None):
        return build_replacement_map(self.args_parser, file, args, for_shell, is_dir)

    def exec_token(self, file: Path, args: Optional[str], is_dir: Optional[bool] = None) -> List[str]:
        return template.exec_tokens(self.execution, self.args_parser, file, args, is_dir)

    def shell_exec_string(self, file: Path, args: Optional[str], is_dir: Optional[bool] = None) -> str:
        return template.shell_exec_string(self.execution, self.args_parser, file, args, is_dir)
