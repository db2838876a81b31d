# src/treeverb/core/path_resolver.py
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Dict

from treeverb.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

# '~' alone or followed by a '/'
TILDE_PATTERN = re.compile(r"^~(/|$)")
# a segment which isn't '.' or '..', followed by '/..'
_PARENT_SEGMENT_PATTERN = re.compile(r"/[^/.\\]+/\.\.")


class PathSource(str, Enum):
    """The entry of the replacement map a relative path is anchored on."""
    DIRECTORY = "directory"
    PARENT = "parent"

    @property
    def replacement_map_key(self) -> str:
        return self.value


def path_from(source: PathSource, raw_input: str, replacement_map: Dict[str, str]) -> str:
    """
    Builds a usable path from what the user typed.

    - '/...' is used as is,
    - '~' or '~/...' is expanded with the user's home directory,
    - anything else is put behind the source entry of the map and normalized,
      so that the user can type paths with '../'.
    """
    if raw_input.startswith("/"):
        return raw_input
    m = TILDE_PATTERN.match(raw_input)
    if m:
        home = PathUtils.get_home_dir()
        if home is None:
            logger.warning("no home directory found, no expansion of ~ in %r", raw_input)
            return raw_input
        return f"{home}{m.group(1)}{raw_input[m.end():]}"
    anchor = replacement_map[source.replacement_map_key]
    return normalize_path(f"{anchor}/{raw_input}")


def normalize_path(path: str) -> str:
    """
    Removes the 'segment/..' parts of a path, textually.

    This doesn't look at the disk, so it's a little optimistic when
    symlinks are involved. A trailing slash is kept ('/a/b/../' -> '/a/'),
    and nothing collapses past the root ('/..' stays '/..').
    """
    while True:
        reduced = _PARENT_SEGMENT_PATTERN.sub("", path, count=1)
        if len(reduced) == len(path):
            return path
        path = reduced
