"""
Tab completion for the route shell.

This module provides grammar-aware route completion using prompt_toolkit.
"""

from prompt_toolkit.completion import Completer, Completion

from dpip_lib.route import ROUTE_COMMANDS
from dpip_lib.route.codec import PROTOCOL_KEYWORDS, SCOPE_KEYWORDS
from dpip_lib.route.parser import DEFAULT_PREFIX, FLAG_KEYWORDS, VALUE_KEYWORDS

from .context import ShellContext


SHELL_COMMANDS = ["help", "exit", "family", "verbose", "table"]
FAMILY_CHOICES = ["inet", "inet6", "any"]


class RouteCompleter(Completer):
    """Completer that follows the route grammar."""

    def __init__(self, ctx: ShellContext):
        self.ctx = ctx

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        words = text.split()

        # Determine what we're completing
        if not words or text.endswith(' '):
            completions = self.candidates(words)
            word = ""
        else:
            completions = self.candidates(words[:-1])
            word = words[-1].lower()

        for item in completions:
            if item.lower().startswith(word):
                yield Completion(item, start_position=-len(word))

    def candidates(self, words: list[str]) -> list[str]:
        """Get the words that may follow the given complete words."""
        if not words:
            return sorted(set(ROUTE_COMMANDS) | set(SHELL_COMMANDS))

        command = words[0].lower()
        if command == "family":
            return FAMILY_CHOICES if len(words) == 1 else []
        if ROUTE_COMMANDS.get(command) in (None, "flush"):
            return []

        args = words[1:]
        if args and args[-1] in VALUE_KEYWORDS:
            # Completing a keyword's value
            if args[-1] == "scope":
                return list(SCOPE_KEYWORDS.values())
            if args[-1] == "proto":
                return list(PROTOCOL_KEYWORDS.values())
            return []

        # Keywords already given are not offered again
        used = set()
        has_prefix = False
        i = 0
        while i < len(args):
            if args[i] in VALUE_KEYWORDS:
                used.add(args[i])
                i += 2
                continue
            if args[i] in FLAG_KEYWORDS:
                used.add(args[i])
            else:
                has_prefix = True
            i += 1

        completions = [k for k in list(VALUE_KEYWORDS) + list(FLAG_KEYWORDS) if k not in used]
        if not has_prefix:
            completions.append(DEFAULT_PREFIX)
        return completions
