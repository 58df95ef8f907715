"""
Route description parser.

Builds a RouteSpec from command-line tokens such as

    192.168.0.0/24 via 10.0.0.1 dev dpdk0 metric 10

and fills in defaults the user left out:

- prefix length: full family width unless given or the prefix is "default"
- family: taken from the first address parsed, IPv4 for a bare "default"
- scope: "host" with `local`, otherwise "link" (plus onlink) when there is
  no gateway and "global" when there is one
"""

from dataclasses import dataclass
from typing import Callable, Optional

from dpip_lib.common import debug

from .codec import text_to_protocol, text_to_scope
from .dataclasses import IFNAMSIZ, Family, FamilyValue, RouteFlag, RouteSpec, Scope
from .formatter import route_dump
from .validation import RouteSpecError, RouteSyntaxError, parse_address, parse_uint


DEFAULT_PREFIX = "default"


@dataclass
class _ParseState:
    route: RouteSpec
    prefix: Optional[str] = None


def _set_via(state: _ParseState, value: str) -> None:
    state.route.family, state.route.gateway = parse_address(state.route.family, value)


def _set_src(state: _ParseState, value: str) -> None:
    state.route.family, state.route.source = parse_address(state.route.family, value)


def _set_dev(state: _ParseState, value: str) -> None:
    # Truncate to what fits in the wire field, keeping whole characters
    state.route.interface_name = value.encode("utf-8")[:IFNAMSIZ - 1].decode("utf-8", "ignore")


def _set_tos(state: _ParseState, value: str) -> None:
    state.route.tos = parse_uint(value, "tos", 0xFF)


def _set_mtu(state: _ParseState, value: str) -> None:
    state.route.mtu = parse_uint(value, "mtu", 0xFFFFFFFF)


def _set_metric(state: _ParseState, value: str) -> None:
    state.route.metric = parse_uint(value, "metric", 0xFF)


def _set_scope(state: _ParseState, value: str) -> None:
    scope = text_to_scope(value)
    # NONE only marks "not set yet" while parsing
    if scope == Scope.NONE:
        raise RouteSyntaxError(f"invalid scope: {value}")
    state.route.scope = scope


def _set_proto(state: _ParseState, value: str) -> None:
    state.route.protocol = text_to_protocol(value)


def _set_local(state: _ParseState) -> None:
    state.route.scope = Scope.HOST


def _set_onlink(state: _ParseState) -> None:
    # onlink is derived from the gateway, never taken from the user
    pass


# Keywords that consume the following token
VALUE_KEYWORDS: dict[str, Callable[[_ParseState, str], None]] = {
    "via": _set_via,
    "dev": _set_dev,
    "tos": _set_tos,
    "mtu": _set_mtu,
    "scope": _set_scope,
    "src": _set_src,
    "metric": _set_metric,
    "proto": _set_proto,
}

# Keywords that stand alone
FLAG_KEYWORDS: dict[str, Callable[[_ParseState], None]] = {
    "onlink": _set_onlink,
    "local": _set_local,
}


def _scan(state: _ParseState, tokens: list[str]) -> None:
    pos = 0
    while pos < len(tokens):
        token = tokens[pos]
        if token in VALUE_KEYWORDS:
            if pos + 1 >= len(tokens):
                raise RouteSyntaxError(f"missing value for '{token}'")
            VALUE_KEYWORDS[token](state, tokens[pos + 1])
            pos += 2
        elif token in FLAG_KEYWORDS:
            FLAG_KEYWORDS[token](state)
            pos += 1
        elif state.prefix is None:
            state.prefix = token
            pos += 1
        else:
            raise RouteSyntaxError(f"too many arguments: '{token}' after prefix '{state.prefix}'")


def _resolve_prefix(route: RouteSpec, prefix: str) -> None:
    if prefix == DEFAULT_PREFIX:
        if route.family == Family.UNSPEC:
            route.family = Family.INET
        if route.family in (Family.INET, Family.INET6):
            route.destination = Family(route.family).zero()
        route.prefix_length = 0
        return

    address, sep, length = prefix.partition("/")
    route.family, route.destination = parse_address(route.family, address)
    if sep:
        route.prefix_length = parse_uint(length, "prefix length", route.family.width)
    else:
        route.prefix_length = route.family.width


def _infer_scope(route: RouteSpec) -> None:
    if route.scope != Scope.NONE:
        return
    if route.has_gateway:
        route.scope = Scope.GLOBAL
    else:
        route.scope = Scope.LINK
        route.flags |= RouteFlag.ONLINK


def parse_route_args(cmd: str, tokens: list[str], family: FamilyValue = Family.UNSPEC,
                     verbose: bool = False) -> RouteSpec:
    """
    Build a route from the tokens following a route command.

    Args:
        cmd: Canonical command ("show", "add", "del", "set")
        tokens: Remaining command-line tokens
        family: Family hint from the command line (UNSPEC if none)
        verbose: Print the finished route

    Returns:
        The canonical RouteSpec

    Raises:
        RouteSyntaxError: A token or value could not be parsed
        RouteSpecError: The route is incomplete or has an invalid family
    """
    state = _ParseState(route=RouteSpec(family=family))
    _scan(state, list(tokens))
    route = state.route

    if state.prefix is None:
        if cmd != "show":
            raise RouteSpecError("missing prefix")
        # Wildcard filter for show
        debug("no prefix given, showing all routes")
    else:
        _resolve_prefix(route, state.prefix)

        if route.family not in (Family.INET, Family.INET6):
            raise RouteSpecError("invalid family")

        _infer_scope(route)

    if verbose:
        route_dump(route)

    return route
