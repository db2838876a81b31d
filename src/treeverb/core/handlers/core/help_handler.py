# src/treeverb/core/handlers/core/help_handler.py
from treeverb.core.context.app_context import AppContext
from treeverb.core.parser import VerbInvocation
from treeverb.core.utils.helptext import build_markdown
from treeverb.model import CmdResult


def handle_help(_invocation: VerbInvocation, ctx: AppContext) -> CmdResult:
    return CmdResult.display_help(build_markdown(ctx))
