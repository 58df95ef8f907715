"""
Route commands against the dataplane.

Maps the route verbs onto sockopt exchanges. Each command builds one
RouteSpec, performs at most one exchange and returns a DPVS result code.
"""

import sys
from typing import Protocol as TypingProtocol

from rich.console import Console

from dpip_lib.common import SockoptError, ResponseBuffer, error
from dpip_lib.config.constants import (
    EDPVS_INVAL,
    EDPVS_NOTSUPP,
    EDPVS_OK,
    SOCKOPT_GET_ROUTE_SHOW,
    SOCKOPT_SET_ROUTE_ADD,
    SOCKOPT_SET_ROUTE_DEL,
    SOCKOPT_SET_ROUTE_FLUSH,
    SOCKOPT_SET_ROUTE_SET,
)

from .dataclasses import Family, FamilyValue, RouteQueryResult, RouteSpec
from .formatter import render_route_table, route_dump
from .parser import parse_route_args
from .validation import RouteSpecError
from .wire import CorruptedResponseError, pack_route, unpack_route_array


ROUTE_USAGE = """\
Usage:
    dpip route { show | flush | help }
    dpip route { add | del | set } ROUTE
Parameters:
    ROUTE      := PREFIX [ via ADDR ] [ dev IFNAME ] [ OPTIONS ]
    PREFIX     := { ADDR/PLEN | ADDR | default }
    OPTIONS    := [ SCOPE | mtu MTU | src ADDR | tos TOS
                    | metric NUM | PROTOCOL | FLAGS ]
    SCOPE      := [ scope { host | kni_host | link | global | NUM } ]
    PROTOCOL   := [ proto { auto | boot | static | ra | NUM } ]
    FLAGS      := [ onlink | local ]
Examples:
    dpip route show
    dpip route add default via 10.0.0.1
    dpip route add 172.0.0.0/16 via 172.0.0.3 dev dpdk0
    dpip route add 192.168.0.0/24 dev dpdk0
    dpip route del 172.0.0.0/16
    dpip route set 172.0.0.0/16 via 172.0.0.1
    dpip route flush"""

# Accepted spellings for each canonical command
ROUTE_COMMANDS = {
    "show": "show",
    "add": "add",
    "del": "del",
    "delete": "del",
    "set": "set",
    "replace": "set",
    "flush": "flush",
}


class Transport(TypingProtocol):
    """What the adapter needs from a sockopt client."""

    def set(self, opt: int, payload: bytes = b"") -> None: ...

    def get(self, opt: int, payload: bytes = b"") -> ResponseBuffer: ...


def route_help() -> None:
    print(ROUTE_USAGE, file=sys.stderr)


class RouteAdapter:
    """Route operations over a sockopt transport."""

    def __init__(self, transport: Transport):
        self.transport = transport

    def add(self, route: RouteSpec) -> None:
        self.transport.set(SOCKOPT_SET_ROUTE_ADD, pack_route(route))

    def delete(self, route: RouteSpec) -> None:
        self.transport.set(SOCKOPT_SET_ROUTE_DEL, pack_route(route))

    def replace(self, route: RouteSpec) -> None:
        self.transport.set(SOCKOPT_SET_ROUTE_SET, pack_route(route))

    def flush(self) -> None:
        self.transport.set(SOCKOPT_SET_ROUTE_FLUSH, b"")

    def show(self, route: RouteSpec) -> RouteQueryResult:
        """
        Query routes matching a filter route.

        The response buffer is released before returning, whether or not
        it decodes.

        Raises:
            SockoptError: The exchange failed
            CorruptedResponseError: The response size does not match its count
        """
        with self.transport.get(SOCKOPT_GET_ROUTE_SHOW, pack_route(route)) as response:
            return unpack_route_array(response.data)


def route_do_cmd(transport: Transport, cmd: str, tokens: list[str],
                 family: FamilyValue = Family.UNSPEC, verbose: bool = False,
                 table: bool = False) -> int:
    """
    Run one route command.

    Args:
        transport: Sockopt client for the dataplane
        cmd: Command verb (see ROUTE_COMMANDS)
        tokens: Remaining command-line tokens
        family: Family hint (UNSPEC if none given)
        verbose: Print the parsed route before sending it
        table: Render show output as a table instead of route lines

    Returns:
        EDPVS_OK on success, otherwise a DPVS result code
    """
    command = ROUTE_COMMANDS.get(cmd)
    if command is None:
        error(f"unsupported route command: {cmd}")
        return EDPVS_NOTSUPP

    adapter = RouteAdapter(transport)

    try:
        if command == "flush":
            if tokens:
                error(f"too many arguments: {' '.join(tokens)}")
                return EDPVS_INVAL
            adapter.flush()
            return EDPVS_OK

        route = parse_route_args(command, tokens, family, verbose)

        if command == "add":
            adapter.add(route)
        elif command == "del":
            adapter.delete(route)
        elif command == "set":
            adapter.replace(route)
        else:
            result = adapter.show(route)
            if table:
                Console().print(render_route_table(result, title=f"Routes ({result.count})"))
            else:
                for r in result:
                    route_dump(r)
        return EDPVS_OK

    except RouteSpecError as e:
        error(str(e))
        return EDPVS_INVAL
    except CorruptedResponseError as e:
        error(str(e))
        return EDPVS_INVAL
    except SockoptError as e:
        error(str(e))
        return e.code
