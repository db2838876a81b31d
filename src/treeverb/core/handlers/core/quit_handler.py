# src/treeverb/core/handlers/core/quit_handler.py
from treeverb.core.context.app_context import AppContext
from treeverb.core.parser import VerbInvocation
from treeverb.model import CmdResult


def handle_quit(_invocation: VerbInvocation, _ctx: AppContext) -> CmdResult:
    """Signals the application to stop."""
    return CmdResult.quit()
