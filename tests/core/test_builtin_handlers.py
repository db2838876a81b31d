# tests/core/test_builtin_handlers.py
from pathlib import Path

import pytest

from treeverb.core.command_registry import BuiltinRegistry, register_all_builtins
from treeverb.core.context.app_context import AppContext
from treeverb.core.discovery import discover_handlers
from treeverb.core.parser import VerbInvocation
from treeverb.core.verb_registry import BUILTIN_VERBS, VerbStore
from treeverb.core.xngine import VerbExecuteEngine
from treeverb.model import CmdResultKind, LaunchArgs, VerbConf


@pytest.fixture
def app_context(tmp_path):
    (tmp_path / "dir").mkdir()
    (tmp_path / "dir" / "file.txt").write_text("x")
    store = VerbStore([VerbConf(invocation="cd", execution="cd {directory}", from_shell=True)])
    return AppContext(LaunchArgs(root=tmp_path), store)


@pytest.fixture
def handlers():
    return discover_handlers()


def run(handlers, name, ctx):
    return handlers[name](VerbInvocation(name=name), ctx)


def test_every_builtin_has_a_handler(handlers):
    assert {name for name, *_ in BUILTIN_VERBS} <= set(handlers)


def test_register_all_builtins():
    register_all_builtins()
    assert "quit" in BuiltinRegistry


def test_quit(handlers, app_context):
    assert run(handlers, "quit", app_context).kind is CmdResultKind.QUIT


def test_focus_on_a_file_displays_its_directory(handlers, app_context):
    app_context.select(app_context.root / "dir" / "file.txt")
    result = run(handlers, "focus", app_context)
    assert result.kind is CmdResultKind.NEW_ROOT
    assert result.path == app_context.root / "dir"


def test_parent_and_back(handlers, app_context):
    root = app_context.root
    result = run(handlers, "parent", app_context)
    assert result.path == root.parent
    app_context.focus(result.path)
    assert run(handlers, "back", app_context).kind is CmdResultKind.POP_STATE
    assert app_context.back()
    assert app_context.root == root
    assert not app_context.back()


def test_parent_of_the_filesystem_root(handlers, app_context):
    app_context.root = Path("/")
    assert run(handlers, "parent", app_context).kind is CmdResultKind.KEEP


def test_toggle_hidden(handlers, app_context):
    result = run(handlers, "toggle_hidden", app_context)
    assert app_context.show_hidden
    assert result.kind is CmdResultKind.REFRESH_STATE
    assert result.clear_cache


def test_help_lists_the_verbs(handlers, app_context):
    result = run(handlers, "help", app_context)
    assert result.kind is CmdResultKind.DISPLAY_HELP
    assert "|cd|||`cd {directory}`" in result.message
    assert "|quit|q|ctrl-q|quit the application" in result.message
    assert "|**name**|**shortcut**|**key**|**description**" in result.message
    assert "## Launch Arguments" in result.message


def test_print_path_without_export_file(handlers, app_context):
    result = run(handlers, "print_path", app_context)
    assert result.kind is CmdResultKind.PRINT_PATH
    assert result.path == app_context.selection


def test_print_path_with_export_file(handlers, app_context, tmp_path):
    export_path = tmp_path / "out"
    app_context.launch_args.file_export_path = export_path
    assert run(handlers, "print_path", app_context).kind is CmdResultKind.QUIT
    assert export_path.read_text() == f"{app_context.selection}\n"


def test_engine_with_discovered_handlers(handlers, app_context):
    engine = VerbExecuteEngine(builtin_registry=handlers)
    assert engine.execute_line(":pp", app_context).kind is CmdResultKind.PRINT_PATH
    assert engine.execute_line(":q now", app_context).is_error
