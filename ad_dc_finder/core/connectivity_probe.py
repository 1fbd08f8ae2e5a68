""" Checks for whether a host is running an LDAP service """
# Created in August 2021
#
# Author: Azaria Zornberg
#
# Copyright 2021 - 2021 Azaria Zornberg
#
# This file is part of ad_dc_finder
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import socket

from ldap3 import ANONYMOUS, NONE, SIMPLE, Connection, Server

from ad_dc_finder.environment.discovery.discovery_constants import (
    CONNECT_TIMEOUT_SECONDS,
    PROBE_BIND_PASSWORD,
    PROBE_BIND_USER,
)
from ad_dc_finder.environment.format_utils import format_ldap_uri
from ad_dc_finder import logging_utils


logger = logging_utils.get_logger()


def is_ldap_service(host: str, port: int, connect_timeout: float = CONNECT_TIMEOUT_SECONDS) -> bool:
    """ Check whether a host accepts TCP connections on a port and answers LDAP binds there.

    An anonymous bind is tried first. If the server rejects it, a simple bind with made up
    credentials is tried, which the server is expected to reject as well. Any reply to a bind,
    successful or not, is taken as confirmation that an LDAP server is listening.
    This is a best effort check. It does not verify that the server is a domain controller.
    :param host: The hostname or IP address to check.
    :param port: The port to check.
    :param connect_timeout: The number of seconds to wait for the TCP connection.
    :returns: True if the host answered an LDAP bind, False otherwise.
    """
    if not host:
        return False
    if not is_tcp_port_open(host, port, connect_timeout):
        return False
    return _answers_ldap_bind(host, port)


def is_tcp_port_open(host: str, port: int, connect_timeout: float = CONNECT_TIMEOUT_SECONDS) -> bool:
    try:
        with socket.create_connection((host, port), timeout=connect_timeout):
            return True
    except socket.error as sock_ex:
        logger.debug('Server %s was unreachable on port %s: %s', host, port, sock_ex)
    except Exception:
        logger.exception('Unexpected exception when checking connectivity to %s on port %s', host, port)
    return False


def _answers_ldap_bind(host: str, port: int) -> bool:
    ldap_uri = format_ldap_uri(host, port)
    # skip reading the root DSE, the bind alone tells us what we need
    server = Server(ldap_uri, get_info=NONE)
    try:
        if _bind(Connection(server, authentication=ANONYMOUS)):
            logger.debug('Anonymous bind to %s succeeded', ldap_uri)
            return True
        logger.debug('Anonymous bind to %s was rejected, trying a simple bind', ldap_uri)
        # the result doesn't matter, only that the server replied
        _bind(Connection(server, user=PROBE_BIND_USER, password=PROBE_BIND_PASSWORD, authentication=SIMPLE))
    except Exception as ex:
        logger.debug('Server %s did not answer an LDAP bind: %s', ldap_uri, ex)
        return False
    return True


def _bind(conn: Connection) -> bool:
    try:
        return bool(conn.bind())
    finally:
        if not conn.closed:
            conn.unbind()
