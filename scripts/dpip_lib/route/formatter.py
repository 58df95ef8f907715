"""
Route rendering for dpip.

format_route() produces the stable one-line form scripts parse;
render_route_table() builds a rich table for interactive use.
"""

from typing import Iterable, Optional

from rich.table import Table

from .codec import family_to_text, flags_to_text, protocol_to_text, scope_to_text
from .dataclasses import Address, Family, FamilyValue, RouteSpec


def format_address(family: FamilyValue, address: Optional[Address]) -> str:
    """Render an address, falling back to the family's all-zero literal."""
    if address is not None and address.version == {Family.INET: 4, Family.INET6: 6}.get(family):
        return str(address)
    if family == Family.INET:
        return "0.0.0.0"
    return "::"


def format_route(route: RouteSpec) -> str:
    """Render a route as a single line. Never fails."""
    return (
        f"{family_to_text(route.family)} "
        f"{format_address(route.family, route.destination)}/{route.prefix_length} "
        f"via {format_address(route.family, route.gateway)} "
        f"src {format_address(route.family, route.source)} "
        f"dev {route.interface_name} "
        f"mtu {route.mtu} tos {route.tos} "
        f"scope {scope_to_text(route.scope)} "
        f"metric {route.metric} "
        f"proto {protocol_to_text(route.protocol)} "
        f"{flags_to_text(route.flags)}"
    )


def route_dump(route: RouteSpec) -> None:
    """Print a route line to stdout."""
    print(format_route(route))


def render_route_table(routes: Iterable[RouteSpec], title: str = "Routes") -> Table:
    """Build a rich table with one row per route, in the given order."""
    table = Table(title=title, show_lines=False)
    for column in ("Family", "Prefix", "Via", "Src", "Dev", "MTU", "TOS",
                   "Scope", "Metric", "Proto", "Flags"):
        table.add_column(column)

    for route in routes:
        table.add_row(
            family_to_text(route.family),
            f"{format_address(route.family, route.destination)}/{route.prefix_length}",
            format_address(route.family, route.gateway),
            format_address(route.family, route.source),
            route.interface_name,
            str(route.mtu),
            str(route.tos),
            scope_to_text(route.scope),
            str(route.metric),
            protocol_to_text(route.protocol),
            flags_to_text(route.flags).strip(),
        )
    return table
