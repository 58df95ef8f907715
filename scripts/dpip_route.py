#!/usr/bin/env python3
"""
dpip-route - Manage DPVS dataplane routes

Runs a single route command, or an interactive route shell when no
command is given:

    dpip-route show
    dpip-route add 172.0.0.0/16 via 172.0.0.3 dev dpdk0
    dpip-route -6 show
    dpip-route
"""

import argparse
import sys
from typing import Optional

from dpip_lib.common import SockoptClient, set_verbose
from dpip_lib.config import EDPVS_OK, get_ipc_file, get_timeout
from dpip_lib.repl import ShellContext, run_shell
from dpip_lib.route import Family, route_do_cmd, route_help


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dpip-route",
        description="Manage DPVS dataplane routes",
        epilog="Run 'dpip-route help' for route syntax.",
    )
    family = parser.add_mutually_exclusive_group()
    family.add_argument("-4", dest="family", action="store_const", const=Family.INET,
                        help="Use IPv4 (default: derived from addresses)")
    family.add_argument("-6", dest="family", action="store_const", const=Family.INET6,
                        help="Use IPv6")
    parser.set_defaults(family=Family.UNSPEC)
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print the parsed route and sockopt diagnostics")
    parser.add_argument("-s", "--socket", default=None,
                        help="Dataplane IPC socket (default: $DPVS_IPC_FILE or /var/run/dpvs.ipc)")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Socket timeout in seconds (default: 30)")
    parser.add_argument("--table", action="store_true",
                        help="Render 'show' output as a table")
    parser.add_argument("command", nargs="?",
                        help="show | add | del | set | flush | help")
    parser.add_argument("args", nargs=argparse.REMAINDER,
                        help="Route description")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_verbose(args.verbose)

    if args.command == "help":
        route_help()
        return 0

    transport = SockoptClient(get_ipc_file(args.socket), timeout=get_timeout(args.timeout))

    if args.command is None:
        ctx = ShellContext(transport=transport, family=args.family,
                           verbose=args.verbose, table=args.table)
        result = run_shell(ctx)
    else:
        result = route_do_cmd(transport, args.command, args.args,
                              family=args.family, verbose=args.verbose,
                              table=args.table)

    return 0 if result == EDPVS_OK else 1


if __name__ == "__main__":
    sys.exit(main())
