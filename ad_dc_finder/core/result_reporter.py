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

import sys

from typing import Iterable, List, TextIO

from ad_dc_finder.core.discovered_server import DiscoveredServer
from ad_dc_finder.environment.format_utils import format_hostname_or_ip_and_port_to_uri, format_ldap_uri


RULE = '=' * 50

TROUBLESHOOTING_HINTS = [
    'Not connected to domain network',
    'DNS not configured properly',
    'Firewall blocking LDAP ports (389/636)',
    'Not running on domain-joined machine',
]


def deduplicate_servers(servers: Iterable[DiscoveredServer]) -> List[DiscoveredServer]:
    """ Drop repeated servers, keeping the first occurrence of each and the original order. """
    seen = set()
    unique_servers = []
    for server in servers:
        if server in seen:
            continue
        seen.add(server)
        unique_servers.append(server)
    return unique_servers


def build_example_command(server: DiscoveredServer) -> str:
    return 'ldapsearch -H {} -x -s base'.format(format_ldap_uri(server.host, server.port))


class ResultReporter:
    """ Writes the progress of a discovery run and its final summary as human readable text. """

    def __init__(self, output: TextIO = None):
        self.output = output if output is not None else sys.stdout

    def _write(self, line: str = ''):
        print(line, file=self.output)

    def announce_start(self, domain: str):
        self._write('Searching for Active Directory Domain Controllers...')
        self._write(RULE)
        self._write('Domain detected: {}'.format(domain or 'None'))
        self._write()

    def announce_method(self, number: int, description: str):
        self._write('Method {}: {}...'.format(number, description))

    def announce_found(self, server: DiscoveredServer, source: str = None):
        location = format_hostname_or_ip_and_port_to_uri(server.host, server.port)
        if server.ip:
            location = '{} ({})'.format(location, server.ip)
        source = source or server.method.value
        self._write('  + Found DC via {}: {}'.format(source, location))

    def report(self, servers: Iterable[DiscoveredServer]) -> List[DiscoveredServer]:
        """ Write the summary of a run.
        :param servers: Every confirmed server, possibly with repeats.
        :returns: The unique servers that were reported, in order.
        """
        unique_servers = deduplicate_servers(servers)
        self._write()
        self._write(RULE)
        self._write('RESULTS:')
        self._write(RULE)

        if not unique_servers:
            self._write('No Active Directory Domain Controllers found.')
            self._write()
            self._write('Possible reasons:')
            for hint in TROUBLESHOOTING_HINTS:
                self._write('  - {}'.format(hint))
            return unique_servers

        self._write('Found {} Domain Controller(s):'.format(len(unique_servers)))
        self._write()
        for index, server in enumerate(unique_servers, start=1):
            self._write('{}. {}'.format(index, format_hostname_or_ip_and_port_to_uri(server.host, server.port)))
            self._write('   Discovery Method: {}'.format(server.method.value))
            if server.ip:
                self._write('   IP Address: {}'.format(server.ip))
            self._write()

        self._write('You can test connectivity with:')
        self._write('  {}'.format(build_example_command(unique_servers[0])))
        return unique_servers
