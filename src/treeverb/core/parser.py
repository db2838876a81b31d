# src/treeverb/core/parser.py
from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

# A verb invocation as typed by the user: the name, then optionally
# some whitespace and the raw argument text.
INVOCATION_PATTERN = re.compile(r"^(?P<name>\S*)(?:\s+(?P<args>.*?))?\s*$", re.DOTALL)
# Prefixes which mark the start of a verb invocation in the input line.
VERB_PREFIXES = (" ", ":")


class VerbInvocation(BaseModel):
    """
    A verb name (or shortcut) followed by optional argument text.

    Used both for what the user typed and for how a verb declares
    its arguments, e.g. name='mv', args='{newpath}'.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    args: Optional[str] = None

    @classmethod
    def from_str(cls, text: str) -> "VerbInvocation":
        """
        Parses 'name', 'name args' or ':name args'. Empty argument text
        is normalized to None.
        """
        s = (text or "").lstrip(":").lstrip()
        m = INVOCATION_PATTERN.match(s)
        name = m.group("name") if m else ""
        args = m.group("args") if m else None
        return cls(name=name, args=args or None)

    def is_empty(self) -> bool:
        return not self.name

    def to_string_for_name(self, name: str) -> str:
        """Renders this invocation with another name, e.g. the usage for a shortcut."""
        if self.args:
            return f"{name} {self.args}"
        return name

    def __str__(self) -> str:
        return self.to_string_for_name(self.name)


def is_verb_input(line: str) -> bool:
    """Tells whether an input line holds a verb invocation rather than a path."""
    return bool(line) and line.startswith(VERB_PREFIXES)


def parse_invocation(line: str) -> Optional[VerbInvocation]:
    """
    Parses the raw input line into a VerbInvocation.

    Returns None when the line is not a verb invocation or names no verb.
    """
    if not is_verb_input(line):
        return None
    invocation = VerbInvocation.from_str(line)
    if invocation.is_empty():
        return None
    return invocation
