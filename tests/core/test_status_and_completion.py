# tests/core/test_status_and_completion.py
from pathlib import Path

import pytest
from prompt_toolkit.document import Document

from treeverb.core.context.app_context import AppContext
from treeverb.core.managers.completion_manager import CompletionManager
from treeverb.core.parser import VerbInvocation
from treeverb.core.status import verb_status
from treeverb.core.verb_registry import VerbStore
from treeverb.core.verbs import Verb
from treeverb.model import LaunchArgs, VerbConf

CONFS = [
    VerbConf(invocation="mkdir {subpath}", shortcut="md", execution="/bin/mkdir -p {subpath:path-from-directory}"),
    VerbConf(invocation="mv {newpath}", execution="/bin/mv {file} {newpath:path-from-parent}",
             description="move the file"),
]


def test_status_of_a_verb_with_a_description():
    verb = Verb.create_external("mv {newpath}", None, None, "mv {file} {newpath}", description="move the file")
    status = verb_status(verb, Path("/a/b.txt"), VerbInvocation(name="mv", args="c.txt"), is_dir=False)
    assert not status.error
    assert status.message == "Hit *enter* to **mv**: move the file"


def test_status_previews_the_shell_command():
    verb = Verb.create_external("mkdir {subpath}", None, "md", "mkdir -p {subpath:path-from-directory}")
    status = verb_status(verb, Path("/a/b"), VerbInvocation(name="md", args="c d"), is_dir=True)
    assert status.message == "Hit *enter* to **mkdir**: `mkdir -p /a/b/c d`"


def test_status_of_bad_arguments_is_an_error():
    verb = Verb.create_external("mkdir {subpath}", None, "md", "mkdir -p {subpath}")
    status = verb_status(verb, Path("/a/b"), VerbInvocation(name="md"), is_dir=True)
    assert status.error
    assert status.message == "md {subpath}"


def test_status_with_a_very_long_argument():
    """Arguments longer than a file name are previewed, not looked up on disk."""
    verb = Verb.create_external("say {text}", None, None, "echo {text}")
    text = "x" * 300
    status = verb_status(verb, Path("/a/b.txt"), VerbInvocation(name="say", args=text), is_dir=False)
    assert not status.error
    assert status.message == f"Hit *enter* to **say**: `echo {text}`"


@pytest.fixture
def completion_manager(tmp_path):
    (tmp_path / "alpha.txt").write_text("a")
    (tmp_path / "another").mkdir()
    (tmp_path / ".hidden").write_text("h")
    ctx = AppContext(LaunchArgs(root=tmp_path), VerbStore(CONFS))
    return CompletionManager(ctx)


def completions(manager, text):
    return [c.text for c in manager.generate_completions(Document(text))]


def test_verb_name_completion(completion_manager):
    assert completions(completion_manager, ":m") == ["mkdir", "mv"]
    assert completions(completion_manager, " md") == ["mkdir"]
    assert completions(completion_manager, ":mv ") == []


def test_path_completion(completion_manager):
    assert completions(completion_manager, "a") == ["alpha.txt", "another/"]
    assert ".hidden" not in completions(completion_manager, "")
    assert completions(completion_manager, ".h") == [".hidden"]
    assert completions(completion_manager, "nowhere/x") == []
