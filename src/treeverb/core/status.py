# src/treeverb/core/status.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from treeverb.core.parser import VerbInvocation
from treeverb.core.verbs import Verb


class Status(BaseModel):
    """A short message for the status line, in inline markdown."""
    message: str
    error: bool = False


def verb_status(verb: Verb, path: Path, invocation: VerbInvocation, is_dir: Optional[bool] = None) -> Status:
    """
    Tells what hitting enter would do: the usage of the verb when the
    arguments don't fit, else its description or the command it runs.
    """
    err = verb.match_error(invocation)
    if err is not None:
        return Status(message=err, error=True)
    if verb.description:
        return Status(message=f"Hit *enter* to **{verb.name}**: {verb.description}")
    command = verb.shell_exec_string(path, invocation.args, is_dir)
    return Status(message=f"Hit *enter* to **{verb.name}**: `{command}`")
