"""
Shell context and prompt utilities for the route shell.

This module contains:
- ShellContext: Session settings carried between commands
- get_prompt_text: Generates the prompt string from the session settings
"""

from dataclasses import dataclass
from typing import Any

from dpip_lib.route import Family


@dataclass
class ShellContext:
    """Session settings for the interactive route shell."""
    transport: Any  # SockoptClient, or any object with set()/get()
    family: Family = Family.UNSPEC
    verbose: bool = False
    table: bool = False
    last_result: int = 0


def get_prompt_text(ctx: ShellContext) -> str:
    """Generate the prompt string based on the session settings."""
    family = "" if ctx.family == Family.UNSPEC else f"({ctx.family.name.lower()})"
    failed = "!" if ctx.last_result != 0 else ""
    return f"dpip.route{family}{failed}> "
