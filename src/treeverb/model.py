# src/treeverb/model.py
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SelectionType(str, Enum):
    """Which kind of selected entry a verb applies to."""
    ANY = "any"
    FILE = "file"

    def accepts(self, is_dir: bool) -> bool:
        return self is SelectionType.ANY or not is_dir


class VerbConf(BaseModel):
    """A verb definition as written in settings.json or the user conf file."""
    model_config = ConfigDict(extra="forbid")

    invocation: str = Field(description="Name and declared arguments, e.g. 'mv {newpath}'.")
    execution: str = Field(description="Execution pattern, e.g. '/bin/mv {file} {newpath:path-from-parent}'.")
    key: Optional[str] = None
    shortcut: Optional[str] = None
    description: Optional[str] = None
    from_shell: bool = False
    leave_app: bool = True
    confirm: bool = False


class LaunchArgs(BaseModel):
    """Arguments given on launch, as parsed by argparse in app.py."""
    root: Path = Field(default_factory=Path.cwd)
    cmd_export_path: Optional[Path] = None
    file_export_path: Optional[Path] = None
    commands: Optional[str] = None
    conf_path: Optional[Path] = None


class CmdResultKind(str, Enum):
    KEEP = "keep"
    QUIT = "quit"
    LAUNCH = "launch"
    REFRESH_STATE = "refresh_state"
    DISPLAY_ERROR = "display_error"
    DISPLAY_HELP = "display_help"
    NEW_ROOT = "new_root"
    POP_STATE = "pop_state"
    PRINT_PATH = "print_path"


class CmdResult(BaseModel):
    """
    The outcome of a verb execution, a state change requested from the app.
    Only the fields relevant to the kind are set.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: CmdResultKind
    message: Optional[str] = None
    path: Optional[Path] = None
    clear_cache: bool = False
    launchable: Optional[Any] = None

    @classmethod
    def keep(cls) -> "CmdResult":
        return cls(kind=CmdResultKind.KEEP)

    @classmethod
    def quit(cls) -> "CmdResult":
        return cls(kind=CmdResultKind.QUIT)

    @classmethod
    def launch(cls, launchable: Any) -> "CmdResult":
        return cls(kind=CmdResultKind.LAUNCH, launchable=launchable)

    @classmethod
    def refresh_state(cls, clear_cache: bool = False) -> "CmdResult":
        return cls(kind=CmdResultKind.REFRESH_STATE, clear_cache=clear_cache)

    @classmethod
    def display_error(cls, message: str) -> "CmdResult":
        return cls(kind=CmdResultKind.DISPLAY_ERROR, message=message)

    @classmethod
    def display_help(cls, markdown: str) -> "CmdResult":
        return cls(kind=CmdResultKind.DISPLAY_HELP, message=markdown)

    @classmethod
    def new_root(cls, path: Path) -> "CmdResult":
        return cls(kind=CmdResultKind.NEW_ROOT, path=path)

    @classmethod
    def pop_state(cls) -> "CmdResult":
        return cls(kind=CmdResultKind.POP_STATE)

    @classmethod
    def print_path(cls, path: Path) -> "CmdResult":
        return cls(kind=CmdResultKind.PRINT_PATH, path=path)

    @property
    def is_error(self) -> bool:
        return self.kind is CmdResultKind.DISPLAY_ERROR
