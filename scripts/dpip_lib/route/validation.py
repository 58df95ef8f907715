"""
Route validation for dpip.

Address and integer parsing used when building route records, plus the
exceptions raised when a route description is rejected.
"""

import ipaddress
from typing import Tuple

from .dataclasses import Address, Family, FamilyValue


class RouteSpecError(Exception):
    """Raised when a route description is semantically invalid."""
    pass


class RouteSyntaxError(RouteSpecError):
    """Raised when a route description cannot be parsed."""
    pass


def parse_address(family: FamilyValue, text: str) -> Tuple[Family, Address]:
    """
    Parse an address under a family.

    An UNSPEC family is resolved by trying IPv4 first, then IPv6.

    Args:
        family: Current family of the route being built
        text: Address text (e.g., "10.0.0.1", "2001:db8::1")

    Returns:
        Tuple of (resolved family, address)
    """
    try:
        if family == Family.INET:
            return Family.INET, ipaddress.IPv4Address(text)
        if family == Family.INET6:
            return Family.INET6, ipaddress.IPv6Address(text)
        if family == Family.UNSPEC:
            address = ipaddress.ip_address(text)
            if address.version == 4:
                return Family.INET, address
            return Family.INET6, address
    except ValueError:
        raise RouteSyntaxError(f"invalid address: {text}")

    raise RouteSpecError(f"invalid family: {family}")


def parse_uint(text: str, name: str, maximum: int) -> int:
    """Parse a non-negative decimal integer no greater than maximum."""
    if not text.isascii() or not text.isdigit():
        raise RouteSyntaxError(f"invalid {name}: {text}")
    value = int(text, 10)
    if value > maximum:
        raise RouteSyntaxError(f"{name} out of range (0-{maximum}): {text}")
    return value
