# src/treeverb/core/xngine.py
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional

from treeverb.core.context.app_context import AppContext
from treeverb.core.errors import ProgramError
from treeverb.core.launcher import Launchable
from treeverb.core.parser import VerbInvocation, parse_invocation
from treeverb.core.utils.export_file import append_line
from treeverb.core.verb_registry import SearchKind
from treeverb.core.verbs import Verb
from treeverb.model import CmdResult

NEEDS_SHELL_FUNCTION = (
    "this verb needs treeverb to be launched through its shell function (`tv`)."
)


class DispatchKind(str, Enum):
    SHELL_EXPORT = "shell_export"
    DIRECT_EXECUTE = "direct_execute"
    BUILTIN = "builtin"


def dispatch_kind(verb: Verb) -> DispatchKind:
    if verb.is_builtin:
        return DispatchKind.BUILTIN
    if verb.from_shell:
        return DispatchKind.SHELL_EXPORT
    return DispatchKind.DIRECT_EXECUTE


class VerbExecuteEngine:
    """
    Executes verbs: built-ins are handed to their handler, external verbs
    are either exported to the parent shell or launched directly.

    Every failure is returned as a DISPLAY_ERROR result, nothing here
    ends the application by raising.
    """

    def __init__(
            self,
            *,
            builtin_registry: Dict[str, Callable[..., CmdResult]],
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self._builtins = builtin_registry
        self._log = logger or logging.getLogger(__name__)

    def execute_line(self, line: str, ctx: AppContext) -> CmdResult:
        """Parses a verb invocation typed by the user and executes the matching verb."""
        invocation = parse_invocation(line)
        if invocation is None:
            return CmdResult.keep()
        verb = ctx.verb_store.get(invocation.name) if ctx.verb_store else None
        if verb is None:
            search = ctx.verb_store.search(invocation.name) if ctx.verb_store else None
            if search is not None and search.kind is SearchKind.MANY:
                return CmdResult.display_error("Possible verbs: " + ", ".join(v.name for v in search.verbs))
            if search is None or search.verb is None:
                return CmdResult.display_error(f"No matching verb: {invocation.name}")
            verb = search.verb
        return self.execute_verb(verb, invocation, ctx)

    def execute_key(self, key: str, ctx: AppContext) -> Optional[CmdResult]:
        """Executes the verb bound to a key, if any applies to the selection."""
        verb = ctx.verb_store.key_verb(key, ctx.selection_is_dir) if ctx.verb_store else None
        if verb is None:
            return None
        return self.execute_verb(verb, VerbInvocation(name=verb.name), ctx)

    def execute_verb(self, verb: Verb, invocation: VerbInvocation, ctx: AppContext) -> CmdResult:
        err = verb.match_error(invocation)
        if err is not None:
            return CmdResult.display_error(err)
        kind = dispatch_kind(verb)
        self._log.debug("executing verb %r as %s", verb.name, kind.value)
        if kind is DispatchKind.BUILTIN:
            return self._execute_builtin(verb, invocation, ctx)
        return self.to_cmd_result(verb, ctx.selection, invocation.args, ctx, ctx.selection_is_dir)

    def _execute_builtin(self, verb: Verb, invocation: VerbInvocation, ctx: AppContext) -> CmdResult:
        handler = self._builtins.get(verb.name)
        if handler is None:
            self._log.error("no handler for built-in %r", verb.name)
            return CmdResult.display_error(f"No handler for built-in verb {verb.name!r}")
        return handler(invocation, ctx)

    def to_cmd_result(
            self,
            verb: Verb,
            file: Path,
            args: Optional[str],
            ctx: AppContext,
            is_dir: Optional[bool] = None,
    ) -> CmdResult:
        """
        Builds the result of a verb defined with an execution pattern.
        Calling this on a built-in doesn't make sense.
        """
        if verb.from_shell:
            return self._export_to_shell(verb, file, args, ctx, is_dir)
        try:
            launchable = Launchable.program(verb.exec_token(file, args, is_dir))
        except ProgramError as e:
            return CmdResult.display_error(str(e))
        if verb.leave_app:
            return CmdResult.launch(launchable)
        self._log.info("Executing not leaving, launchable %r", launchable)
        try:
            launchable.execute()
        except ProgramError as e:
            self._log.warning("launchable failed: %s", e)
            return CmdResult.display_error(str(e))
        return CmdResult.refresh_state(clear_cache=True)

    def _export_to_shell(
            self,
            verb: Verb,
            file: Path,
            args: Optional[str],
            ctx: AppContext,
            is_dir: Optional[bool],
    ) -> CmdResult:
        launch_args = ctx.launch_args
        if launch_args.cmd_export_path is not None:
            # the whole command is exported, the shell function runs it
            export_path = launch_args.cmd_export_path
            line = verb.shell_exec_string(file, args, is_dir)
        elif launch_args.file_export_path is not None:
            # older shell function: only the path is exported
            export_path = launch_args.file_export_path
            line = str(file)
        else:
            return CmdResult.display_error(NEEDS_SHELL_FUNCTION)
        try:
            append_line(export_path, line)
        except ProgramError as e:
            return CmdResult.display_error(str(e))
        return CmdResult.quit()

