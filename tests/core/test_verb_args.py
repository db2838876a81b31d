# tests/core/test_verb_args.py
import pytest

from treeverb.core.errors import ConfError
from treeverb.core.parser import VerbInvocation
from treeverb.core.verb_args import GROUP_PATTERN, make_invocation_args_regex
from treeverb.core.verbs import Verb


def external(invocation, execution="echo {file}"):
    return Verb.create_external(invocation, None, None, execution)


def test_group_pattern_captures_name_and_directive():
    m = GROUP_PATTERN.search("cp {newpath:path-from-parent}")
    assert m.group(1) == "newpath"
    assert m.group(2) == "path-from-parent"
    assert GROUP_PATTERN.search("{file}").group(2) is None


def test_args_regex_has_one_group_per_placeholder():
    regex = make_invocation_args_regex("{new}")
    assert regex.pattern == "^(?P<new>.+)$"
    assert regex.match("newname").group("new") == "newname"


def test_args_regex_drops_the_directive():
    regex = make_invocation_args_regex("{a:path-from-parent} to {b}")
    m = regex.match("x to y")
    assert m.groupdict() == {"a": "x", "b": "y"}


@pytest.mark.parametrize("bad", ["{a-b}", "{x} {x}", "{1st}"])
def test_invalid_invocation_is_a_conf_error(bad):
    """Placeholders which don't make valid group names can't be configured."""
    with pytest.raises(ConfError) as excinfo:
        make_invocation_args_regex(bad)
    assert bad in str(excinfo.value)


def test_create_external_reports_the_bad_invocation():
    with pytest.raises(ConfError):
        external("bad {a-b}")


def test_no_args_verb_without_args_is_ok():
    verb = external("rm")
    assert verb.match_error(VerbInvocation(name="rm")) is None


def test_no_args_verb_with_args_fails():
    verb = external("rm")
    assert verb.match_error(VerbInvocation(name="rm", args="now")) == "rm doesn't take arguments"


def test_args_verb_with_matching_args_is_ok():
    verb = external("mv {newpath}")
    assert verb.match_error(VerbInvocation(name="mv", args="../x")) is None


def test_args_verb_without_args_gives_the_usage():
    """The usage is written with the name the user typed."""
    verb = external("mkdir {subpath}")
    assert verb.match_error(VerbInvocation(name="md")) == "md {subpath}"


def test_args_verb_with_non_matching_args_gives_the_usage():
    verb = external("cp {src} {dst}")
    assert verb.match_error(VerbInvocation(name="cp", args="onlyone")) == "cp {src} {dst}"


def test_all_optional_args_match_no_args():
    """An empty argument text is tested, so an optional group may be omitted."""
    verb = external("go {target}?")
    assert verb.match_error(VerbInvocation(name="go")) is None
