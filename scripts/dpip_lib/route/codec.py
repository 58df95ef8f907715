"""
Text codecs for route enumerations.

Scope and protocol codes map to fixed keywords; codes without a keyword
are written and read as decimal numerals.
"""

from .dataclasses import (
    Family,
    FamilyValue,
    Protocol,
    ProtocolValue,
    RouteFlag,
    Scope,
    ScopeValue,
    protocol_from_code,
    scope_from_code,
)
from .validation import RouteSyntaxError, parse_uint


SCOPE_KEYWORDS = {
    Scope.HOST: "host",
    Scope.KNI_HOST: "kni_host",
    Scope.LINK: "link",
    Scope.GLOBAL: "global",
}

PROTOCOL_KEYWORDS = {
    Protocol.AUTO: "auto",
    Protocol.BOOT: "boot",
    Protocol.STATIC: "static",
    Protocol.RA: "ra",
    Protocol.REDIRECT: "redirect",
}

FLAG_KEYWORDS = {
    RouteFlag.ONLINK: "onlink",
}

FAMILY_KEYWORDS = {
    Family.UNSPEC: "unspec",
    Family.INET: "inet",
    Family.INET6: "inet6",
}

_SCOPE_BY_TEXT = {text: code for code, text in SCOPE_KEYWORDS.items()}
_PROTOCOL_BY_TEXT = {text: code for code, text in PROTOCOL_KEYWORDS.items()}


def scope_to_text(scope: ScopeValue) -> str:
    if scope in SCOPE_KEYWORDS:
        return SCOPE_KEYWORDS[scope]
    return str(int(scope))


def text_to_scope(text: str) -> ScopeValue:
    """Parse a scope keyword or numeral. Raises RouteSyntaxError otherwise."""
    if text in _SCOPE_BY_TEXT:
        return _SCOPE_BY_TEXT[text]
    try:
        return scope_from_code(parse_uint(text, "scope", 255))
    except RouteSyntaxError:
        raise RouteSyntaxError(f"invalid scope: {text}")


def protocol_to_text(protocol: ProtocolValue) -> str:
    if protocol in PROTOCOL_KEYWORDS:
        return PROTOCOL_KEYWORDS[protocol]
    return str(int(protocol))


def text_to_protocol(text: str) -> ProtocolValue:
    """Parse a protocol keyword or numeral. Raises RouteSyntaxError otherwise."""
    if text in _PROTOCOL_BY_TEXT:
        return _PROTOCOL_BY_TEXT[text]
    try:
        return protocol_from_code(parse_uint(text, "proto", 255))
    except RouteSyntaxError:
        raise RouteSyntaxError(f"invalid proto: {text}")


def flags_to_text(flags: int) -> str:
    """Render flag keywords, each followed by a space."""
    return "".join(f"{text} " for flag, text in FLAG_KEYWORDS.items() if flags & flag)


def family_to_text(family: FamilyValue) -> str:
    return FAMILY_KEYWORDS.get(family, "unknown")
