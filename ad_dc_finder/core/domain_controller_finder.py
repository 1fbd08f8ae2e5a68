""" The top level flow for finding the domain controllers around this machine """
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

from typing import Callable, List, Mapping, TextIO

from ad_dc_finder.core.connectivity_probe import is_ldap_service
from ad_dc_finder.core.discovered_server import DiscoveredServer
from ad_dc_finder.core.result_reporter import ResultReporter
from ad_dc_finder.environment.discovery.candidate_generation import (
    generate_common_name_candidates,
    generate_dns_a_record_candidates,
    generate_dns_srv_candidates,
    generate_environment_candidates,
)
from ad_dc_finder.environment.discovery.discovery_constants import CONNECT_TIMEOUT_SECONDS
from ad_dc_finder.environment.discovery.domain_name_utils import find_local_domain_name
from ad_dc_finder.exceptions import InvalidDiscoveryParameterException
from ad_dc_finder import logging_utils


logger = logging_utils.get_logger()


class DomainControllerFinder:
    """ Runs each discovery strategy in turn, checks every candidate it produces, and reports the
    servers that answered.

    :param domain: The domain to search. If not specified, the local domain is detected.
    :param dns_nameservers: The nameservers to use for DNS lookups. If not specified, the system DNS
                            nameservers will be used.
    :param source_ip: The source IP to use for DNS queries.
    :param connect_timeout: The number of seconds to wait when connecting to each candidate.
    :param environ: The environment variables to read. Defaults to the process environment.
    :param output: Where to write progress and results. Defaults to stdout.
    :param probe: A function taking a host and port that returns whether an LDAP server is there.
                  Defaults to an LDAP bind check.
    """

    def __init__(self, domain: str = None, dns_nameservers: List[str] = None, source_ip: str = None,
                 connect_timeout: float = CONNECT_TIMEOUT_SECONDS, environ: Mapping[str, str] = None,
                 output: TextIO = None, probe: Callable[[str, int], bool] = None):
        if isinstance(connect_timeout, bool) or not isinstance(connect_timeout, (int, float)) \
                or connect_timeout <= 0:
            raise InvalidDiscoveryParameterException('The connect timeout must be a positive number of seconds, '
                                                     'not {}'.format(connect_timeout))
        self.domain = domain
        self.dns_nameservers = dns_nameservers
        self.source_ip = source_ip
        self.connect_timeout = connect_timeout
        self.environ = environ
        self.reporter = ResultReporter(output)
        self.probe = probe
        self.found_servers = []

    def find_domain_controllers(self) -> List[DiscoveredServer]:
        """ Run every discovery strategy, report the results, and return the unique servers found. """
        self.found_servers = []
        domain = self.domain or find_local_domain_name(self.environ)
        self.reporter.announce_start(domain)

        # only the environment can point us at a server without knowing the domain
        if domain:
            self.reporter.announce_method(1, 'Checking DNS SRV records')
            self._check_candidates(generate_dns_srv_candidates(domain, self.dns_nameservers, self.source_ip))

            self.reporter.announce_method(2, 'Checking common DC hostnames')
            self._check_candidates(generate_common_name_candidates(domain))

        self.reporter.announce_method(3, 'Checking environment variables')
        self._check_candidates(generate_environment_candidates(self.environ))

        if domain:
            self.reporter.announce_method(4, 'Checking DNS A records')
            self._check_candidates(generate_dns_a_record_candidates(domain, self.dns_nameservers, self.source_ip))

        return self.reporter.report(self.found_servers)

    def _check_candidates(self, candidates: List[DiscoveredServer]):
        for candidate in candidates:
            if self._is_ldap_service(candidate.probe_address, candidate.port):
                self.found_servers.append(candidate)
                self.reporter.announce_found(candidate)
            else:
                logger.debug('Discarding candidate %s found via %s', candidate, candidate.method.value)

    def _is_ldap_service(self, host: str, port: int) -> bool:
        if self.probe is not None:
            return self.probe(host, port)
        return is_ldap_service(host, port, self.connect_timeout)
