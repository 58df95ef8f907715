"""
Route dataclasses for dpip.

These define the route record exchanged with the dataplane and the
enumerations used in its fields.
"""

import ipaddress
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Optional, Union


Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

IFNAMSIZ = 16  # Includes the trailing NUL on the wire


class Family(IntEnum):
    """Address family, using the Linux AF_* codes."""
    UNSPEC = 0
    INET = 2
    INET6 = 10

    @property
    def width(self) -> int:
        """Address width in bits (0 for UNSPEC)."""
        return {Family.INET: 32, Family.INET6: 128}.get(self, 0)

    def zero(self) -> Optional[Address]:
        """The family's all-zero address."""
        if self == Family.INET:
            return ipaddress.IPv4Address(0)
        if self == Family.INET6:
            return ipaddress.IPv6Address(0)
        return None


class Scope(IntEnum):
    NONE = 0  # Only while parsing
    HOST = 1
    KNI_HOST = 2
    LINK = 3
    GLOBAL = 4


class Protocol(IntEnum):
    AUTO = 0
    BOOT = 1
    STATIC = 2
    RA = 3
    REDIRECT = 4


class RouteFlag(IntFlag):
    ONLINK = 0x1


# Known codes are enum members, anything else stays a plain int
ScopeValue = Union[Scope, int]
ProtocolValue = Union[Protocol, int]
FamilyValue = Union[Family, int]


@dataclass
class RouteSpec:
    """A single route entry."""
    family: FamilyValue = Family.UNSPEC
    destination: Optional[Address] = None  # None until resolved
    prefix_length: int = 0
    gateway: Optional[Address] = None      # None or all-zero = no gateway
    source: Optional[Address] = None
    interface_name: str = ""
    mtu: int = 0
    tos: int = 0
    scope: ScopeValue = Scope.NONE
    metric: int = 0
    protocol: ProtocolValue = Protocol.AUTO
    flags: RouteFlag = RouteFlag(0)

    @property
    def onlink(self) -> bool:
        return bool(self.flags & RouteFlag.ONLINK)

    @property
    def has_gateway(self) -> bool:
        """True when a non-zero next hop is set."""
        return self.gateway is not None and int(self.gateway) != 0


@dataclass
class RouteQueryResult:
    """Routes returned by a show exchange, in received order."""
    count: int
    routes: list[RouteSpec] = field(default_factory=list)

    def __iter__(self):
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)


def family_from_code(code: int) -> FamilyValue:
    """Map a wire family code to a Family member, or keep the raw int."""
    try:
        return Family(code)
    except ValueError:
        return code


def scope_from_code(code: int) -> ScopeValue:
    """Map a wire scope code to a Scope member, or keep the raw int."""
    try:
        return Scope(code)
    except ValueError:
        return code


def protocol_from_code(code: int) -> ProtocolValue:
    """Map a wire protocol code to a Protocol member, or keep the raw int."""
    try:
        return Protocol(code)
    except ValueError:
        return code
