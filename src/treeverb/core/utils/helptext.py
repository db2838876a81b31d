# src/treeverb/core/utils/helptext.py
from __future__ import annotations

from typing import TYPE_CHECKING

from treeverb.core.managers.config_manager import config_manager

if TYPE_CHECKING:
    from treeverb.core.context.app_context import AppContext

HELP_INTRO = """
# Help

**treeverb** lets you select files and run commands on them.

**treeverb** is best used when launched as `tv`.
Type a path to select it, relative to the displayed root.

To execute a verb, type a space or `:` then the start of its name or shortcut.

## Verbs

"""

HELP_LAUNCH_ARGUMENTS = """
## Launch Arguments

Some options can be set on launch:
* `--outcmd <path>` : file where commands which must run in the shell are written
* `-o` or `--out <path>` : file where the selected path is written
* `-c` or `--cmd <commands>` : commands to run on launch, separated by `;`
* `--conf <path>` : use another configuration file
 (for the complete list, run `treeverb --help`)
"""

HELP_FLAGS = """
## Flags

Flags are displayed in the prompt:
* `h:y` or `h:n` : whether hidden files are shown

"""


def append_verbs_table(parts: list, ctx: "AppContext") -> None:
    parts.append("|-:\n")
    parts.append("|**name**|**shortcut**|**key**|**description**\n")
    parts.append("|-:|:-:|:-:|:-\n")
    for verb in ctx.verb_store or ():
        parts.append(f"|{verb.name}|{verb.shortcut or ''}|{verb.key_desc}|")
        if verb.description:
            parts.append(f"{verb.description}\n")
        else:
            parts.append(f"`{verb.execution}`\n")
    parts.append("|:-|-|-|:-\n")


def append_config_info(parts: list) -> None:
    parts.append(f" Verbs can be configured in {str(config_manager.user_conf_path)!r}.\n")


def build_markdown(ctx: "AppContext") -> str:
    """Builds the markdown displayed in the help page."""
    parts = [HELP_INTRO]
    append_verbs_table(parts, ctx)
    append_config_info(parts)
    parts.append(HELP_LAUNCH_ARGUMENTS)
    parts.append(HELP_FLAGS)
    return "".join(parts)
