"""
dpip_lib.repl - Interactive route shell for dpip

This package contains:
- context: Session settings and prompt text
- completer: Grammar-aware tab completion
- shell: Command handling and the prompt loop
"""

from .context import ShellContext, get_prompt_text
from .completer import RouteCompleter
from .shell import handle_command, run_shell

__all__ = [
    'ShellContext',
    'get_prompt_text',
    'RouteCompleter',
    'handle_command',
    'run_shell',
]
