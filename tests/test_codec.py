import pytest

from dpip_lib.route import (
    Family,
    Protocol,
    RouteFlag,
    RouteSyntaxError,
    Scope,
    family_to_text,
    flags_to_text,
    protocol_to_text,
    scope_to_text,
    text_to_protocol,
    text_to_scope,
)


def test_scope_keywords():

    assert scope_to_text(Scope.HOST) == 'host'
    assert scope_to_text(Scope.KNI_HOST) == 'kni_host'
    assert scope_to_text(Scope.LINK) == 'link'
    assert scope_to_text(Scope.GLOBAL) == 'global'

    assert text_to_scope('host') is Scope.HOST
    assert text_to_scope('kni_host') is Scope.KNI_HOST
    assert text_to_scope('link') is Scope.LINK
    assert text_to_scope('global') is Scope.GLOBAL


def test_protocol_keywords():

    expected = {
        Protocol.AUTO: 'auto',
        Protocol.BOOT: 'boot',
        Protocol.STATIC: 'static',
        Protocol.RA: 'ra',
        Protocol.REDIRECT: 'redirect',
    }

    for code, text in expected.items():
        assert protocol_to_text(code) == text
        assert text_to_protocol(text) is code


def test_known_codes_round_trip():

    for scope in Scope:
        assert text_to_scope(scope_to_text(scope)) == scope

    for protocol in Protocol:
        assert text_to_protocol(protocol_to_text(protocol)) == protocol


def test_unknown_codes_use_numerals():

    assert scope_to_text(200) == '200'
    assert protocol_to_text(42) == '42'

    # Unknown codes stay plain integers, distinguishable from the enums.

    scope = text_to_scope('200')
    assert scope == 200
    assert not isinstance(scope, Scope)

    protocol = text_to_protocol('42')
    assert protocol == 42
    assert not isinstance(protocol, Protocol)

    for code in (5, 17, 99, 255):
        assert text_to_scope(scope_to_text(code)) == code
        assert text_to_protocol(protocol_to_text(code)) == code


def test_numeral_of_known_code_maps_to_member():

    assert text_to_scope('3') is Scope.LINK
    assert text_to_protocol('2') is Protocol.STATIC


@pytest.mark.parametrize('text', ['bogus', '', '-1', '256', '1.5', 'HOST'])
def test_invalid_scope_text(text):

    with pytest.raises(RouteSyntaxError):
        text_to_scope(text)


@pytest.mark.parametrize('text', ['kernel', '', '-3', '1000', 'Static'])
def test_invalid_protocol_text(text):

    with pytest.raises(RouteSyntaxError):
        text_to_protocol(text)


def test_flags_text():

    assert flags_to_text(RouteFlag(0)) == ''
    assert flags_to_text(RouteFlag.ONLINK) == 'onlink '

    # Bits without a keyword are not rendered.

    assert flags_to_text(0x2) == ''
    assert flags_to_text(0x3) == 'onlink '


def test_family_text():

    assert family_to_text(Family.INET) == 'inet'
    assert family_to_text(Family.INET6) == 'inet6'
    assert family_to_text(Family.UNSPEC) == 'unspec'
    assert family_to_text(7) == 'unknown'
