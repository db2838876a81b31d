# src/treeverb/core/launcher.py
from __future__ import annotations

import logging
import subprocess
from typing import List, Sequence

from treeverb.core.errors import ProgramError

logger = logging.getLogger(__name__)


class Launchable:
    """An external program, with its arguments, ready to be executed."""

    def __init__(self, exe: str, args: Sequence[str]):
        self.exe = exe
        self.args: List[str] = list(args)

    @classmethod
    def program(cls, tokens: Sequence[str]) -> "Launchable":
        """Raises ProgramError when there's nothing to launch."""
        if not tokens:
            raise ProgramError("Empty launch string")
        return cls(tokens[0], tokens[1:])

    def execute(self) -> None:
        """
        Runs the program and waits for it, without a shell in between.

        Raises ProgramError when the program can't be started or exits
        with a non-zero status.
        """
        logger.info("launching %s %s", self.exe, self.args)
        try:
            proc = subprocess.run([self.exe, *self.args], check=False)
        except FileNotFoundError as e:
            raise ProgramError(f"command not found: {self.exe}") from e
        except OSError as e:
            raise ProgramError(f"could not launch {self.exe}: {e}") from e
        if proc.returncode != 0:
            raise ProgramError(f"{self.exe} exited with code {proc.returncode}")

    def __eq__(self, other) -> bool:
        return isinstance(other, Launchable) and (self.exe, self.args) == (other.exe, other.args)

    def __repr__(self) -> str:
        return f"<Launchable exe={self.exe!r} args={self.args!r}>"
