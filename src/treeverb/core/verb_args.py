# src/treeverb/core/verb_args.py
"""
Argument validation: turns the placeholders a verb declares in its
invocation (e.g. 'mv {newpath}') into an anchored regex with one named
group per placeholder, and checks what the user typed against it.
"""
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Optional, Pattern

from treeverb.core.errors import ConfError
from treeverb.core.parser import VerbInvocation

if TYPE_CHECKING:
    from treeverb.core.verbs import Verb

logger = logging.getLogger(__name__)

# {name} or {name:directive}
GROUP_PATTERN = re.compile(r"\{([^{}:]+)(?::([^{}:]+))?\}")


def make_invocation_args_regex(spec: str) -> Pattern[str]:
    """
    Builds the regex matching the arguments of a verb.

    Raises ConfError when the result doesn't compile, e.g. because a
    placeholder name isn't a valid group name or is declared twice.
    """
    pattern = "^{}$".format(GROUP_PATTERN.sub(r"(?P<\1>.+)", spec))
    logger.debug("args pattern for %r = %r", spec, pattern)
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.error("Invalid verb invocation %r: %s", spec, e)
        raise ConfError.invalid_verb_invocation(spec) from e


def match_error(verb: "Verb", invocation: VerbInvocation) -> Optional[str]:
    """
    Assuming the verb has been matched, check whether the arguments are OK.

    Returns None when there's no problem, and the message to display
    otherwise.
    """
    if verb.args_parser is None:
        if invocation.args is None:
            return None
        return f"{invocation.name} doesn't take arguments"
    # empty args are tested too, so that a verb whose arguments are
    # all optional may be called without any
    if verb.args_parser.match(invocation.args or ""):
        return None
    return verb.invocation.to_string_for_name(invocation.name)
