"""
Wire format of the dataplane route record.

The record is a packed struct in native byte order:

    i32 af, 16s dst, u8 plen, 16s via, 16s src, 16s ifname,
    u32 mtu, u8 tos, u8 scope, u8 metric, u8 proto, u32 flags

Addresses occupy a 16-byte slot; IPv4 addresses use its first 4 bytes.
A show response is an i32 route count followed by that many records.
"""

import ipaddress
import struct
from typing import Optional

from .dataclasses import (
    IFNAMSIZ,
    Address,
    Family,
    FamilyValue,
    RouteFlag,
    RouteQueryResult,
    RouteSpec,
    family_from_code,
    protocol_from_code,
    scope_from_code,
)
from .validation import RouteSyntaxError


INET_ADDR_LEN = 16

ROUTE_RECORD = struct.Struct(f"=i{INET_ADDR_LEN}sB{INET_ADDR_LEN}s{INET_ADDR_LEN}s{IFNAMSIZ}sIBBBBI")
ROUTE_ARRAY_HEADER = struct.Struct("=i")


class CorruptedResponseError(Exception):
    """Raised when a show response does not match its declared route count."""

    def __init__(self, size: int, count: Optional[int]):
        self.size = size
        self.count = count
        super().__init__(f"corrupted response: {size} bytes for {count} routes")


def pack_address(address: Optional[Address]) -> bytes:
    if address is None:
        return bytes(INET_ADDR_LEN)
    return address.packed.ljust(INET_ADDR_LEN, b"\0")


def unpack_address(family: FamilyValue, raw: bytes) -> Optional[Address]:
    """Decode an address slot, or None when the family has no address form."""
    if family == Family.INET:
        return ipaddress.IPv4Address(raw[:4])
    if family == Family.INET6:
        return ipaddress.IPv6Address(raw)
    return None


def _check_range(name: str, value: int, maximum: int) -> int:
    if value < 0 or value > maximum:
        raise RouteSyntaxError(f"{name} out of range (0-{maximum}): {value}")
    return value


def pack_route(route: RouteSpec) -> bytes:
    """Encode a route as one fixed-size record."""
    ifname = route.interface_name.encode("utf-8")[:IFNAMSIZ - 1]
    return ROUTE_RECORD.pack(
        int(route.family),
        pack_address(route.destination),
        _check_range("prefix length", route.prefix_length, 128),
        pack_address(route.gateway),
        pack_address(route.source),
        ifname,
        _check_range("mtu", route.mtu, 0xFFFFFFFF),
        _check_range("tos", route.tos, 0xFF),
        _check_range("scope", int(route.scope), 0xFF),
        _check_range("metric", route.metric, 0xFF),
        _check_range("proto", int(route.protocol), 0xFF),
        int(route.flags),
    )


def unpack_route(raw: bytes) -> RouteSpec:
    """Decode one fixed-size record."""
    (af, dst, plen, via, src, ifname,
     mtu, tos, scope, metric, proto, flags) = ROUTE_RECORD.unpack(raw)
    family = family_from_code(af)
    return RouteSpec(
        family=family,
        destination=unpack_address(family, dst),
        prefix_length=plen,
        gateway=unpack_address(family, via),
        source=unpack_address(family, src),
        interface_name=ifname.split(b"\0", 1)[0].decode("utf-8", "replace"),
        mtu=mtu,
        tos=tos,
        scope=scope_from_code(scope),
        metric=metric,
        protocol=protocol_from_code(proto),
        flags=RouteFlag(flags),
    )


def unpack_route_array(data: bytes) -> RouteQueryResult:
    """
    Decode a show response.

    The size must be exactly the header plus the declared number of
    records; anything else raises CorruptedResponseError.
    """
    size = len(data)
    if size < ROUTE_ARRAY_HEADER.size:
        raise CorruptedResponseError(size, None)

    (count,) = ROUTE_ARRAY_HEADER.unpack_from(data)
    if count < 0 or size != ROUTE_ARRAY_HEADER.size + count * ROUTE_RECORD.size:
        raise CorruptedResponseError(size, count)

    routes = []
    for i in range(count):
        offset = ROUTE_ARRAY_HEADER.size + i * ROUTE_RECORD.size
        routes.append(unpack_route(data[offset:offset + ROUTE_RECORD.size]))
    return RouteQueryResult(count=count, routes=routes)


def pack_route_array(routes: list[RouteSpec]) -> bytes:
    """Encode routes the way the dataplane answers a show request."""
    return ROUTE_ARRAY_HEADER.pack(len(routes)) + b"".join(pack_route(r) for r in routes)
