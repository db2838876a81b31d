# src/treeverb/core/keys.py
import re
from typing import Optional

from treeverb.core.errors import ConfError

NAMED_KEYS = {"enter", "tab", "backspace", "delete", "home", "end", "pageup", "pagedown"}
# ctrl-x, alt-x, f1..f12
_KEY_PATTERN = re.compile(r"^(?:(?P<mod>ctrl|alt)-(?P<char>[a-z0-9])|(?P<fn>f(?:[1-9]|1[0-2]))|(?P<named>[a-z]+))$")

# Mapping of our key names to prompt_toolkit key sequences.
_PT_NAMED = {
    "enter": ("c-m",),
    "tab": ("c-i",),
    "backspace": ("c-h",),
    "delete": ("delete",),
    "home": ("home",),
    "end": ("end",),
    "pageup": ("pageup",),
    "pagedown": ("pagedown",),
}


def parse_key(raw: Optional[str]) -> Optional[str]:
    """
    Normalizes a key name from the configuration, e.g. 'Ctrl-E' -> 'ctrl-e'.
    Returns None when no key is given, raises ConfError on unknown keys.
    """
    if raw is None or not raw.strip():
        return None
    key = raw.strip().lower().replace("+", "-")
    m = _KEY_PATTERN.match(key)
    if not m or (m.group("named") and m.group("named") not in NAMED_KEYS):
        raise ConfError.invalid_key(raw)
    return key


def key_event_desc(key: Optional[str]) -> str:
    """Human readable description of a key, as shown in the help page."""
    if not key:
        return ""
    if key.startswith(("ctrl-", "alt-")):
        mod, char = key.split("-", 1)
        return f"{mod}-{char}"
    return key


def to_prompt_toolkit_keys(key: str) -> tuple:
    """Converts a normalized key name into the key sequence prompt_toolkit expects."""
    if key.startswith("ctrl-"):
        return (f"c-{key[5:]}",)
    if key.startswith("alt-"):
        return ("escape", key[4:])
    if key in _PT_NAMED:
        return _PT_NAMED[key]
    return (key,)
