# src/treeverb/core/errors.py
"""Error hierarchy

- ConfError: configuration faults, fatal at startup
- ProgramError: runtime faults, converted to a CmdResult by the dispatcher
"""


class ConfError(ValueError):
    """Raised when the verb configuration can't be turned into verbs."""

    @classmethod
    def invalid_verb_invocation(cls, invocation: str) -> "ConfError":
        return cls(f"Invalid verb invocation: {invocation!r}")

    @classmethod
    def invalid_key(cls, raw: str) -> "ConfError":
        return cls(f"Invalid key: {raw!r}")

    @classmethod
    def invalid_verb_conf(cls, details: str) -> "ConfError":
        return cls(f"Invalid verb configuration: {details}")


class ProgramError(RuntimeError):
    """Raised when launching a program or writing an export file fails."""
