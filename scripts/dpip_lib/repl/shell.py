"""
Interactive route shell.

Reads route commands with prompt_toolkit and runs each one against the
dataplane, keeping the family hint and output settings between commands.
"""

from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from dpip_lib.common import Colors, info, log, set_verbose, warn
from dpip_lib.common.prompts import prompt_yes_no
from dpip_lib.config import EDPVS_OK
from dpip_lib.route import Family, route_do_cmd, route_help

from .completer import FAMILY_CHOICES, RouteCompleter
from .context import ShellContext, get_prompt_text


SHELL_STYLE = Style.from_dict({
    "prompt": "ansicyan bold",
})

FAMILY_BY_NAME = {
    "inet": Family.INET,
    "inet6": Family.INET6,
    "any": Family.UNSPEC,
}


def _toggle(current: bool, args: list[str]) -> bool:
    if not args:
        return not current
    return args[0].lower() in ("on", "yes", "1", "true")


def handle_command(cmd: str, ctx: ShellContext) -> bool:
    """
    Handle a command. Returns False if should exit the shell.
    """
    parts = cmd.strip().split()
    if not parts:
        return True

    command = parts[0].lower()
    args = parts[1:]

    if command in ("exit", "quit"):
        return False

    if command in ("help", "?"):
        route_help()
        return True

    if command == "family":
        if not args or args[0].lower() not in FAMILY_CHOICES:
            warn(f"Usage: family {{ {' | '.join(FAMILY_CHOICES)} }}")
            return True
        ctx.family = FAMILY_BY_NAME[args[0].lower()]
        info(f"Address family: {args[0].lower()}")
        return True

    if command == "verbose":
        ctx.verbose = _toggle(ctx.verbose, args)
        set_verbose(ctx.verbose)
        info(f"Verbose: {'on' if ctx.verbose else 'off'}")
        return True

    if command == "table":
        ctx.table = _toggle(ctx.table, args)
        info(f"Table output: {'on' if ctx.table else 'off'}")
        return True

    if command == "flush" and not args:
        if not prompt_yes_no("Flush all routes from the dataplane?"):
            return True

    ctx.last_result = route_do_cmd(ctx.transport, command, args,
                                   family=ctx.family, verbose=ctx.verbose,
                                   table=ctx.table)
    if command == "flush" and ctx.last_result == EDPVS_OK:
        log("Routes flushed")
    return True


def run_shell(ctx: ShellContext) -> int:
    """Main shell loop."""
    print()
    print(f"{Colors.BOLD}dpip route shell{Colors.NC}")
    print("Type 'help' for route syntax, 'exit' to quit")
    print()

    history_file = Path.home() / ".dpip_history"
    session = PromptSession(
        history=FileHistory(str(history_file)),
        completer=RouteCompleter(ctx),
        style=SHELL_STYLE,
    )

    while True:
        try:
            cmd = session.prompt([("class:prompt", get_prompt_text(ctx))])
            if not handle_command(cmd, ctx):
                break
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

    return 0
