"""
Interactive prompt utilities for the route shell.

Provides wrapper functions around prompt_toolkit for confirming
destructive operations.
"""

from typing import Optional

from prompt_toolkit import prompt


def prompt_yes_no(question: str, default: bool = False) -> Optional[bool]:
    """
    Prompt for yes/no confirmation.

    Args:
        question: Question to ask
        default: Default answer (True=yes, False=no)

    Returns:
        True for yes, False for no, None if cancelled
    """
    suffix = " [Y/n]" if default else " [y/N]"
    try:
        answer = prompt(f"{question}{suffix}: ").strip().lower()

        if not answer:
            return default

        return answer in ('y', 'yes')
    except (KeyboardInterrupt, EOFError):
        return None
