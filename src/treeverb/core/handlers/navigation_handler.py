# src/treeverb/core/handlers/navigation_handler.py
import logging

from treeverb.core.context.app_context import AppContext
from treeverb.core.parser import VerbInvocation
from treeverb.model import CmdResult

logger = logging.getLogger(__name__)


def handle_back(_invocation: VerbInvocation, _ctx: AppContext) -> CmdResult:
    return CmdResult.pop_state()


def handle_focus(_invocation: VerbInvocation, ctx: AppContext) -> CmdResult:
    """Displays the selected directory, or the parent of the selected file."""
    return CmdResult.new_root(ctx.selected_directory)


def handle_parent(_invocation: VerbInvocation, ctx: AppContext) -> CmdResult:
    parent = ctx.root.parent
    if parent == ctx.root:
        logger.debug("%s has no parent", ctx.root)
        return CmdResult.keep()
    return CmdResult.new_root(parent)


def handle_refresh(_invocation: VerbInvocation, _ctx: AppContext) -> CmdResult:
    return CmdResult.refresh_state(clear_cache=True)


def handle_toggle_hidden(_invocation: VerbInvocation, ctx: AppContext) -> CmdResult:
    ctx.show_hidden = not ctx.show_hidden
    logger.debug("show_hidden = %s", ctx.show_hidden)
    return CmdResult.refresh_state(clear_cache=True)
