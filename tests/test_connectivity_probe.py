import socket

from unittest import mock

import pytest

from ldap3 import ANONYMOUS, SIMPLE
from ldap3.core.exceptions import LDAPSocketOpenError

from ad_dc_finder import is_ldap_service
from ad_dc_finder.core import connectivity_probe


@pytest.fixture
def tcp(monkeypatch):
    create_connection = mock.MagicMock()
    monkeypatch.setattr(connectivity_probe.socket, 'create_connection', create_connection)
    return create_connection


@pytest.fixture
def ldap_binds(monkeypatch):
    """ Replace ldap3 connections. Each connection created pops its bind outcome from the list,
    where an exception instance is raised instead of returned.
    """
    outcomes = []
    connections = []

    class FakeConnection:

        def __init__(self, server, user=None, password=None, authentication=None):
            self.server = server
            self.user = user
            self.password = password
            self.authentication = authentication
            self.closed = True
            connections.append(self)

        def bind(self):
            outcome = outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            self.closed = False
            return outcome

        def unbind(self):
            self.closed = True

    monkeypatch.setattr(connectivity_probe, 'Connection', FakeConnection)
    return outcomes, connections


def test_empty_host_is_rejected_without_connecting(tcp, ldap_binds):
    assert is_ldap_service('', 389) is False
    assert is_ldap_service(None, 389) is False
    tcp.assert_not_called()


def test_tcp_failure_never_attempts_a_bind(tcp, ldap_binds):
    _, connections = ldap_binds
    tcp.side_effect = socket.timeout('timed out')
    assert is_ldap_service('dc01.example.com', 389) is False
    assert connections == []


def test_tcp_connect_uses_timeout(tcp, ldap_binds):
    outcomes, _ = ldap_binds
    outcomes.append(True)
    is_ldap_service('dc01.example.com', 389, connect_timeout=5)
    tcp.assert_called_once_with(('dc01.example.com', 389), timeout=5)


def test_successful_anonymous_bind_confirms(tcp, ldap_binds):
    outcomes, connections = ldap_binds
    outcomes.append(True)
    assert is_ldap_service('dc01.example.com', 389) is True
    assert len(connections) == 1
    assert connections[0].authentication == ANONYMOUS
    assert connections[0].closed


def test_rejected_bind_with_fake_credentials_still_confirms(tcp, ldap_binds):
    outcomes, connections = ldap_binds
    outcomes.extend([False, False])
    assert is_ldap_service('dc01.example.com', 389) is True
    assert [c.authentication for c in connections] == [ANONYMOUS, SIMPLE]
    assert connections[1].user == 'test@example.com'


@pytest.mark.parametrize('outcomes', [
    [LDAPSocketOpenError('unable to open socket')],
    [False, LDAPSocketOpenError('unable to open socket')],
    [False, ValueError('garbage reply')],
])
def test_bind_exceptions_mean_no_ldap(tcp, ldap_binds, outcomes):
    ldap_binds[0].extend(outcomes)
    assert is_ldap_service('dc01.example.com', 88) is False
