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

import enum

from typing import Optional

from ad_dc_finder.environment.discovery.discovery_constants import MAX_PORT
from ad_dc_finder.environment.format_utils import format_hostname_or_ip_and_port_to_uri
from ad_dc_finder.exceptions import InvalidDiscoveryParameterException


class DiscoveryMethod(enum.Enum):
    """ This enum maps the ways a domain controller can be found to the labels used when reporting them """
    DNS_SRV = 'DNS SRV'
    COMMON_NAME = 'Common Name'
    ENVIRONMENT = 'Environment'
    DNS_A_RECORD = 'DNS A Record'


class DiscoveredServer:
    """ A server that may be a domain controller, along with how it was found.

    Two servers are equal if they share a host and port, regardless of how they were discovered.
    Hostnames are compared without regard to case, as DNS names are case insensitive.
    """

    def __init__(self, host: str, port: int, method: DiscoveryMethod, ip: str = None):
        if not isinstance(method, DiscoveryMethod):
            raise InvalidDiscoveryParameterException('The discovery method must be a DiscoveryMethod, not {}'
                                                     .format(method))
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port <= MAX_PORT:
            raise InvalidDiscoveryParameterException('Port {} for host {} is not a valid TCP port'
                                                     .format(port, host))
        self._host = host
        self._port = port
        self._method = method
        self._ip = ip or None

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def method(self) -> DiscoveryMethod:
        return self._method

    @property
    def ip(self) -> Optional[str]:
        return self._ip

    @property
    def probe_address(self) -> str:
        """ The address to contact when checking the server. Records resolved from DNS A lookups are
        checked at their resolved address rather than at the name that was looked up.
        """
        return self._ip or self._host

    def _identity(self):
        return (self._host or '').lower(), self._port

    def __eq__(self, other):
        if not isinstance(other, DiscoveredServer):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self):
        return hash(self._identity())

    def __str__(self):
        return format_hostname_or_ip_and_port_to_uri(self._host, self._port)

    def __repr__(self):
        return 'DiscoveredServer(host={!r}, port={!r}, method={}, ip={!r})'.format(
            self._host, self._port, self._method.name, self._ip)
