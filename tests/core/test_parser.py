# tests/core/test_parser.py
from treeverb.core.parser import VerbInvocation, is_verb_input, parse_invocation


def test_parse_name_only():
    """A name without arguments has no argument text."""
    assert VerbInvocation.from_str("rm") == VerbInvocation(name="rm", args=None)


def test_parse_name_and_args():
    """Everything after the first whitespace run is the argument text."""
    invocation = VerbInvocation.from_str("rn newname")
    assert invocation.name == "rn"
    assert invocation.args == "newname"


def test_parse_keeps_inner_spaces_and_trims_the_end():
    invocation = VerbInvocation.from_str("mv  my new  name   ")
    assert invocation.args == "my new  name"


def test_parse_builtin_prefix():
    """A leading ':' marks a verb and isn't part of the name."""
    assert VerbInvocation.from_str(":quit") == VerbInvocation(name="quit")


def test_empty_args_are_none():
    assert VerbInvocation.from_str("cp   ").args is None


def test_to_string_for_name():
    """The usage string of a verb, as called by the user (e.g. with its shortcut)."""
    declared = VerbInvocation.from_str("mkdir {subpath}")
    assert declared.to_string_for_name("md") == "md {subpath}"
    assert VerbInvocation(name="rm").to_string_for_name("rm") == "rm"


def test_parse_invocation_from_input_line():
    """Only lines starting with a space or ':' are verb invocations."""
    assert parse_invocation(" cp ../backup") == VerbInvocation(name="cp", args="../backup")
    assert parse_invocation(":q") == VerbInvocation(name="q")
    assert parse_invocation("some/path") is None
    assert parse_invocation(":") is None
    assert parse_invocation("") is None
    assert is_verb_input(" rm")
    assert not is_verb_input("rm")
