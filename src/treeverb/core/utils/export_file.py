# src/treeverb/core/utils/export_file.py
import logging
from pathlib import Path

from treeverb.core.errors import ProgramError

logger = logging.getLogger(__name__)


def append_line(export_path: Path, line: str) -> None:
    """
    Appends one line to the file read by the shell function which launched us.

    Raises ProgramError when the file can't be written.
    """
    try:
        with open(export_path, "a", encoding="utf-8") as f:
            f.write(f"{line}\n")
    except OSError as e:
        logger.error("Could not write to export file %s: %s", export_path, e)
        raise ProgramError(f"Could not write to {export_path}: {e}") from e
    logger.info("Exported %r to %s", line, export_path)
