"""
dpip_lib.route - Route records and route commands for dpip.

This package contains:
- dataclasses: RouteSpec and the family/scope/protocol enumerations
- validation: Address and integer parsing, route exceptions
- codec: Keyword <-> code mapping for scope and protocol
- wire: Packed record format exchanged with the dataplane
- parser: Token parser with default inference
- formatter: Line and table rendering
- adapter: Route verbs mapped onto sockopt exchanges
"""

from .dataclasses import (
    Family,
    Scope,
    Protocol,
    RouteFlag,
    RouteSpec,
    RouteQueryResult,
)

from .validation import (
    RouteSpecError,
    RouteSyntaxError,
    parse_address,
    parse_uint,
)

from .codec import (
    scope_to_text,
    text_to_scope,
    protocol_to_text,
    text_to_protocol,
    flags_to_text,
    family_to_text,
)

from .wire import (
    CorruptedResponseError,
    pack_route,
    unpack_route,
    pack_route_array,
    unpack_route_array,
)

from .parser import parse_route_args
from .formatter import format_route, route_dump, render_route_table
from .adapter import ROUTE_COMMANDS, RouteAdapter, route_do_cmd, route_help

__all__ = [
    # Dataclasses
    'Family', 'Scope', 'Protocol', 'RouteFlag', 'RouteSpec', 'RouteQueryResult',
    # Validation
    'RouteSpecError', 'RouteSyntaxError', 'parse_address', 'parse_uint',
    # Codec
    'scope_to_text', 'text_to_scope', 'protocol_to_text', 'text_to_protocol',
    'flags_to_text', 'family_to_text',
    # Wire
    'CorruptedResponseError', 'pack_route', 'unpack_route',
    'pack_route_array', 'unpack_route_array',
    # Commands
    'parse_route_args', 'format_route', 'route_dump', 'render_route_table',
    'ROUTE_COMMANDS', 'RouteAdapter', 'route_do_cmd', 'route_help',
]
