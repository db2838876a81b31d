# src/treeverb/core/handlers/export_handler.py
import logging

from treeverb.core.context.app_context import AppContext
from treeverb.core.errors import ProgramError
from treeverb.core.parser import VerbInvocation
from treeverb.core.utils.export_file import append_line
from treeverb.model import CmdResult

logger = logging.getLogger(__name__)


def handle_print_path(_invocation: VerbInvocation, ctx: AppContext) -> CmdResult:
    """
    Gives the selected path to the caller and leaves.

    When launched by the shell function the path goes to the export file,
    otherwise it's printed on stdout once the application has ended.
    """
    export_path = ctx.launch_args.file_export_path
    if export_path is None:
        return CmdResult.print_path(ctx.selection)
    try:
        append_line(export_path, str(ctx.selection))
    except ProgramError as e:
        return CmdResult.display_error(str(e))
    return CmdResult.quit()
