# src/treeverb/core/managers/completion_manager.py
import logging
from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from treeverb.core.context.app_context import AppContext
from treeverb.core.parser import is_verb_input

logger = logging.getLogger(__name__)


class CompletionManager:
    """
    Generates completion suggestions: verb names and shortcuts when a verb
    invocation is being typed, entries of the displayed tree otherwise.
    """

    def __init__(self, app_context: AppContext):
        self.ctx = app_context

    def generate_completions(self, document: Document) -> Iterable[Completion]:
        text = document.text_before_cursor
        if is_verb_input(text):
            words = text.lstrip(": ").split()
            if len(words) > 1 or (words and text.endswith(" ")):
                return  # arguments are free text
            yield from self._get_verb_completions(words[0] if words else "")
            return
        yield from self._get_path_completions(text)

    def _get_verb_completions(self, prefix: str) -> Iterable[Completion]:
        seen = set()
        verbs = self.ctx.verb_store.applicable(self.ctx.selection_is_dir) if self.ctx.verb_store else []
        for verb in verbs:
            if verb.name in seen:
                continue
            seen.add(verb.name)
            if verb.name.startswith(prefix):
                yield Completion(verb.name, start_position=-len(prefix), display_meta=verb.description or verb.execution)
            elif verb.shortcut and verb.shortcut.startswith(prefix):
                yield Completion(verb.name, start_position=-len(prefix), display=f"{verb.shortcut} ({verb.name})")

    def _get_path_completions(self, text: str) -> Iterable[Completion]:
        typed = Path(text)
        if text.endswith("/") or not text:
            directory, prefix = typed, ""
        else:
            directory, prefix = typed.parent, typed.name
        if not directory.is_absolute():
            directory = self.ctx.root / directory
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.debug("no completion in %s: %s", directory, e)
            return
        for entry in entries:
            if entry.name.startswith(".") and not (self.ctx.show_hidden or prefix.startswith(".")):
                continue
            if entry.name.startswith(prefix):
                suffix = "/" if entry.is_dir() else ""
                yield Completion(entry.name + suffix, start_position=-len(prefix))
