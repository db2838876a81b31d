# src/treeverb/core/verb_registry.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from pydantic import ValidationError

from treeverb.core.errors import ConfError
from treeverb.core.verbs import Verb
from treeverb.model import VerbConf

logger = logging.getLogger(__name__)

# (name, key, shortcut, description) of the built-in verbs, in help order.
BUILTIN_VERBS: Tuple[Tuple[str, Optional[str], Optional[str], str], ...] = (
    ("back", None, None, "revert to the previous state (mapped to *esc*)"),
    ("focus", None, "goto", "display the directory (mapped to *enter*)"),
    ("help", "f1", "?", "display the help page"),
    ("parent", None, "p", "move to the parent directory"),
    ("print_path", None, "pp", "print path and leave"),
    ("quit", "ctrl-q", "q", "quit the application"),
    ("refresh", "f5", None, "refresh the displayed tree"),
    ("toggle_hidden", None, "h", "toggle showing hidden files"),
)


class SearchKind(str, Enum):
    NO_MATCH = "no_match"
    MATCH = "match"
    MANY = "many"


class PrefixSearchResult:
    """What matches a name being typed: nothing, exactly one verb, or several."""

    def __init__(self, kind: SearchKind, verbs: List[Verb]):
        self.kind = kind
        self.verbs = verbs

    @property
    def verb(self) -> Optional[Verb]:
        return self.verbs[0] if self.kind is SearchKind.MATCH else None

    def __repr__(self) -> str:
        return f"<PrefixSearchResult {self.kind.value} {[v.name for v in self.verbs]}>"


def verb_from_conf(conf: VerbConf) -> Verb:
    return Verb.create_external(
        conf.invocation,
        conf.key,
        conf.shortcut,
        conf.execution,
        description=conf.description,
        from_shell=conf.from_shell,
        leave_app=conf.leave_app,
        confirm=conf.confirm,
    )


def parse_verb_confs(raw_verbs: Iterable[dict]) -> List[VerbConf]:
    """Validates raw verb entries of the configuration, raising ConfError on bad ones."""
    confs = []
    for raw in raw_verbs or []:
        try:
            confs.append(VerbConf.model_validate(raw))
        except ValidationError as e:
            raise ConfError.invalid_verb_conf(f"{raw!r}: {e}") from e
    return confs


class VerbStore:
    """
    The ordered, read-only collection of all verbs.

    Configured verbs come first, so that they may shadow a built-in
    of the same name.
    """

    def __init__(self, verb_confs: Iterable[VerbConf] = ()):
        verbs = [verb_from_conf(conf) for conf in verb_confs]
        for name, key, shortcut, description in BUILTIN_VERBS:
            verbs.append(Verb.create_builtin(name, key, shortcut, description))
        self._verbs: Tuple[Verb, ...] = tuple(verbs)
        logger.debug("Verb store initialized with %d verbs.", len(self._verbs))

    @property
    def verbs(self) -> Tuple[Verb, ...]:
        return self._verbs

    def __iter__(self):
        return iter(self._verbs)

    def __len__(self) -> int:
        return len(self._verbs)

    def get(self, name: str) -> Optional[Verb]:
        """Finds a verb by exact name, then by exact shortcut."""
        for verb in self._verbs:
            if verb.name == name:
                return verb
        for verb in self._verbs:
            if verb.shortcut == name:
                return verb
        return None

    def search(self, prefix: str) -> PrefixSearchResult:
        """Finds the verbs whose name or shortcut starts with the given prefix."""
        exact = self.get(prefix)
        if exact is not None:
            return PrefixSearchResult(SearchKind.MATCH, [exact])
        candidates = []
        seen_names = set()
        for verb in self._verbs:
            if verb.name in seen_names:
                continue  # shadowed
            seen_names.add(verb.name)
            if verb.name.startswith(prefix) or (verb.shortcut or "").startswith(prefix):
                candidates.append(verb)
        if not candidates:
            return PrefixSearchResult(SearchKind.NO_MATCH, [])
        if len(candidates) == 1:
            return PrefixSearchResult(SearchKind.MATCH, candidates)
        return PrefixSearchResult(SearchKind.MANY, candidates)

    def key_verb(self, key: str, is_dir: bool) -> Optional[Verb]:
        """Returns the verb triggered by a key for the current selection."""
        for verb in self._verbs:
            if verb.key == key and verb.selection_condition.accepts(is_dir):
                return verb
        return None

    def applicable(self, is_dir: bool) -> List[Verb]:
        return [verb for verb in self._verbs if verb.selection_condition.accepts(is_dir)]
