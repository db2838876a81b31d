from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.application import get_app
from prompt_toolkit.completion import Completer
from prompt_toolkit.document import Document
from prompt_toolkit.filters import Condition
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings

from treeverb.core.command_registry import register_all_builtins
from treeverb.core.context.app_context import AppContext
from treeverb.core.core import execute_key, execute_line
from treeverb.core.errors import ConfError, ProgramError
from treeverb.core.keys import to_prompt_toolkit_keys
from treeverb.core.managers.completion_manager import CompletionManager
from treeverb.core.managers.config_manager import config_manager
from treeverb.core.parser import is_verb_input, parse_invocation
from treeverb.core.status import verb_status
from treeverb.core.utils.configure_logging import configure_logger
from treeverb.core.utils.path_utils import PathUtils
from treeverb.core.verb_registry import SearchKind, VerbStore
from treeverb.model import CmdResult, CmdResultKind, LaunchArgs

logger = logging.getLogger(__name__)

# Returned by the prompt when a verb key was hit instead of a line typed.
KEY_SENTINEL = "\x00key:"


class PromptToolkitCompleter(Completer):
    """
    A wrapper that uses the CompletionManager to generate suggestions
    in a way that prompt_toolkit expects.
    """

    def __init__(self, manager: CompletionManager):
        self.manager = manager

    def get_completions(self, document: Document, complete_event):
        yield from self.manager.generate_completions(document)


def parse_launch_args(argv: Optional[List[str]] = None) -> LaunchArgs:
    parser = argparse.ArgumentParser(
        prog="treeverb",
        description="Select files and run verbs on them.",
    )
    parser.add_argument("root", nargs="?", default=".", help="the directory to start in")
    parser.add_argument("--outcmd", dest="cmd_export_path", type=Path,
                        help="where to write the command the calling shell must run")
    parser.add_argument("-o", "--out", dest="file_export_path", type=Path,
                        help="where to write the produced path, if any")
    parser.add_argument("-c", "--cmd", dest="commands",
                        help="semicolon separated commands to execute on start")
    parser.add_argument("--conf", dest="conf_path", type=Path,
                        help="the configuration file to use instead of the default one")
    ns = parser.parse_args(argv)
    return LaunchArgs(
        root=Path(ns.root),
        cmd_export_path=ns.cmd_export_path,
        file_export_path=ns.file_export_path,
        commands=ns.commands,
        conf_path=ns.conf_path,
    )


def status_text(text: str, ctx: AppContext) -> str:
    """The status line for what is currently typed."""
    if not is_verb_input(text):
        return f"{ctx.selection}  h:{'y' if ctx.show_hidden else 'n'}"
    invocation = parse_invocation(text)
    if invocation is None:
        return "Type a verb name or shortcut"
    search = ctx.verb_store.search(invocation.name)
    if search.kind is SearchKind.NO_MATCH:
        return f"No matching verb: {invocation.name}"
    if search.kind is SearchKind.MANY:
        return "Possible verbs: " + ", ".join(v.name for v in search.verbs)
    return verb_status(search.verb, ctx.selection, invocation, ctx.selection_is_dir).message


def apply_cmd_result(result: CmdResult, ctx: AppContext) -> bool:
    """Applies a verb result to the application state. Returns False when the application must end."""
    kind = result.kind
    if kind is CmdResultKind.QUIT:
        return False
    if kind is CmdResultKind.LAUNCH:
        ctx.launch_at_end = result.launchable
        return False
    if kind is CmdResultKind.PRINT_PATH:
        ctx.exit_path = result.path
        return False
    if kind is CmdResultKind.POP_STATE:
        return ctx.back()
    if kind is CmdResultKind.NEW_ROOT:
        ctx.focus(result.path)
    elif kind is CmdResultKind.DISPLAY_ERROR:
        print(f"Error: {result.message}")
    elif kind is CmdResultKind.DISPLAY_HELP:
        print(result.message)
    elif kind is CmdResultKind.REFRESH_STATE and not ctx.selection.exists():
        # the selected file may have been moved or removed
        ctx.select(ctx.root)
    return True


def handle_input(line: str, ctx: AppContext) -> bool:
    """Handles one input line: a verb invocation or a path to select."""
    if line.startswith(KEY_SENTINEL):
        result = execute_key(line[len(KEY_SENTINEL):], ctx)
        return apply_cmd_result(result, ctx) if result else True
    if is_verb_input(line):
        return apply_cmd_result(execute_line(line, ctx), ctx)
    line = line.strip()
    if not line:
        return True
    path = Path(line).expanduser()
    if not path.is_absolute():
        path = ctx.root / path
    if not path.exists():
        print(f"Error: no such file: {path}")
        return True
    ctx.select(path)
    return True


def build_key_bindings(ctx: AppContext) -> KeyBindings:
    kb = KeyBindings()
    buffer_is_empty = Condition(lambda: not get_app().current_buffer.text)
    for verb in ctx.verb_store:
        if not verb.key:
            continue

        def trigger(event, key=verb.key):
            event.app.exit(result=KEY_SENTINEL + key)

        # enter keeps accepting the line when something is typed
        key_filter = buffer_is_empty if verb.key == "enter" else True
        kb.add(*to_prompt_toolkit_keys(verb.key), filter=key_filter)(trigger)
        logger.debug("bound %s to verb %s", verb.key, verb.name)
    return kb


def run_loop(ctx: AppContext) -> None:
    """The interactive loop, until a verb ends the application."""
    history_path = PathUtils.get_history_file()
    history_path.parent.mkdir(parents=True, exist_ok=True)
    history = FileHistory(str(history_path))
    completion_manager = CompletionManager(ctx)
    session = PromptSession(
        history=history,
        completer=PromptToolkitCompleter(completion_manager),
        complete_while_typing=True,
        key_bindings=build_key_bindings(ctx),
        bottom_toolbar=lambda: status_text(get_app().current_buffer.text, ctx),
    )
    while True:
        try:
            default_text = ctx.next_prompt_buffer or ""
            ctx.next_prompt_buffer = None
            line = session.prompt(f"{ctx.root}> ", default=default_text)
        except (EOFError, KeyboardInterrupt):
            break
        if not handle_input(line, ctx):
            break


def main(argv: Optional[List[str]] = None) -> int:
    """Entrypoint for running treeverb from the command line."""
    launch_args = parse_launch_args(argv)
    try:
        config_manager.use_user_conf(launch_args.conf_path)
        configure_logger(config_manager.get_nested("debug.level", "WARNING"))
        verb_store = VerbStore(config_manager.get_verb_confs())
    except ConfError as e:
        print(f"Bad configuration: {e}", file=sys.stderr)
        return 1

    register_all_builtins()
    ctx = AppContext(launch_args, verb_store)
    logger.info("Starting in %s with %d verbs", ctx.root, len(verb_store))

    running = True
    for command in (launch_args.commands or "").split(";"):
        if command.strip() and running:
            running = handle_input(command if is_verb_input(command) else command.strip(), ctx)
    if running:
        run_loop(ctx)

    if ctx.exit_path is not None:
        print(ctx.exit_path)
    if ctx.launch_at_end is not None:
        try:
            ctx.launch_at_end.execute()
        except ProgramError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
