# src/treeverb/core/context/app_context.py
import logging
from pathlib import Path
from typing import Any, List, Optional, TYPE_CHECKING

from treeverb.model import LaunchArgs

if TYPE_CHECKING:
    from treeverb.core.verb_registry import VerbStore

logger = logging.getLogger(__name__)


class AppContext:
    """
    Holds what the verbs need from the application: the launch arguments,
    the verb store, and the current selection in the tree.
    """

    def __init__(self, launch_args: Optional[LaunchArgs] = None, verb_store: Optional["VerbStore"] = None):
        self.launch_args = launch_args or LaunchArgs()
        self.verb_store = verb_store
        self.root: Path = self.launch_args.root.resolve()
        self.selection: Path = self.root
        self.show_hidden = False
        self.history: List[Path] = []
        self.next_prompt_buffer: Optional[str] = None
        # path printed on stdout when the application ends
        self.exit_path: Optional[Path] = None
        # program launched once the application has ended
        self.launch_at_end: Optional[Any] = None

    @property
    def selection_is_dir(self) -> bool:
        return self.selection.is_dir()

    @property
    def selected_directory(self) -> Path:
        """The selection when it's a directory, else its parent."""
        return self.selection if self.selection_is_dir else self.selection.parent

    def select(self, path: Path) -> None:
        """Selects a path, relative paths being taken from the current root."""
        if not path.is_absolute():
            path = self.root / path
        self.selection = path
        logger.debug("selection is now %s", path)

    def focus(self, path: Path) -> None:
        """Makes a directory the new root, remembering the previous one."""
        self.history.append(self.root)
        self.root = path
        self.selection = path

    def back(self) -> bool:
        """Goes back to the previous root. Returns False when there's none."""
        if not self.history:
            return False
        self.root = self.history.pop()
        self.selection = self.root
        return True

    def __repr__(self) -> str:
        return f"<AppContext root={self.root} selection={self.selection} verbs={len(self.verb_store or ())}>"
