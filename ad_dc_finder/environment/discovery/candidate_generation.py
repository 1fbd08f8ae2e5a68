""" Strategies for building the list of servers that might be domain controllers.

Each strategy only gathers candidates. None of them contact the candidates; checking whether a
candidate is really an LDAP server is left to the caller.
"""
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

import os

from typing import List, Mapping

from ad_dc_finder.core.discovered_server import DiscoveredServer, DiscoveryMethod
from ad_dc_finder.environment.discovery.discovery_constants import (
    COMMON_DC_HOSTNAME_PREFIXES,
    DC_DNS_A_RECORD_FORMATS,
    DC_DNS_SRV_FORMATS,
    DEFAULT_LDAP_PORT,
    LDAP_SERVER_ENV_VAR,
    LOGON_SERVER_ENV_VAR,
)
from ad_dc_finder.environment.discovery.discovery_utils import (
    resolve_a_record_in_dns,
    resolve_srv_record_in_dns,
)
from ad_dc_finder.exceptions import InvalidDiscoveryParameterException
from ad_dc_finder import logging_utils


logger = logging_utils.get_logger()


def generate_dns_srv_candidates(domain: str, dns_nameservers: List[str] = None,
                                source_ip: str = None) -> List[DiscoveredServer]:
    """ Look up the service records that domain controllers register for a domain and turn each
    host and port they point to into a candidate.
    :param domain: The string dns name of the domain.
    :param dns_nameservers: The nameservers to use for DNS lookups. If not specified, the system DNS
                            nameservers will be used.
    :param source_ip: The source IP to use for DNS queries.
    :returns: A list of candidates, in the order the records were queried.
    """
    if not domain:
        return []
    candidates = []
    for srv_format in DC_DNS_SRV_FORMATS:
        record_name = srv_format.format(domain=domain)
        # a failed lookup comes back empty, so the remaining records are still queried
        for host, port, _, _ in resolve_srv_record_in_dns(record_name, dns_nameservers, source_ip):
            try:
                candidates.append(DiscoveredServer(host, port, DiscoveryMethod.DNS_SRV))
            except InvalidDiscoveryParameterException as ex:
                logger.info('Ignoring unusable SRV record in %s: %s', record_name, ex)
    logger.debug('Found %s SRV candidates for domain %s', len(candidates), domain)
    return candidates


def generate_common_name_candidates(domain: str) -> List[DiscoveredServer]:
    """ Build candidates from hostnames that are commonly given to domain controllers, plus the
    domain name itself, which AD registers for every controller.
    """
    if not domain:
        return []
    hosts = ['{}.{}'.format(prefix, domain) for prefix in COMMON_DC_HOSTNAME_PREFIXES]
    hosts.append(domain)
    unique_hosts = []
    for host in hosts:
        if host not in unique_hosts:
            unique_hosts.append(host)
    return [DiscoveredServer(host, DEFAULT_LDAP_PORT, DiscoveryMethod.COMMON_NAME) for host in unique_hosts]


def generate_environment_candidates(environ: Mapping[str, str] = None) -> List[DiscoveredServer]:
    """ Build candidates from the logon server that windows records for the current session, and
    from an explicitly configured LDAP server.
    """
    environ = os.environ if environ is None else environ
    candidates = []

    # windows reports the logon server as a UNC style name, e.g. \\DC01
    logon_server = environ.get(LOGON_SERVER_ENV_VAR, '').strip().lstrip('\\/')
    if logon_server:
        logger.debug('Found logon server %s in the environment', logon_server)
        candidates.append(DiscoveredServer(logon_server, DEFAULT_LDAP_PORT, DiscoveryMethod.ENVIRONMENT))

    ldap_server = environ.get(LDAP_SERVER_ENV_VAR, '').strip()
    if ldap_server:
        logger.debug('Found LDAP server %s in the environment', ldap_server)
        candidates.append(DiscoveredServer(ldap_server, DEFAULT_LDAP_PORT, DiscoveryMethod.ENVIRONMENT))
    return candidates


def generate_dns_a_record_candidates(domain: str, dns_nameservers: List[str] = None,
                                     source_ip: str = None) -> List[DiscoveredServer]:
    """ Resolve hostnames that commonly point at domain controllers. Each resolved address becomes a
    candidate that keeps the name that was looked up alongside the address.
    """
    if not domain:
        return []
    candidates = []
    for a_record_format in DC_DNS_A_RECORD_FORMATS:
        hostname = a_record_format.format(domain=domain)
        for address in resolve_a_record_in_dns(hostname, dns_nameservers, source_ip):
            candidates.append(DiscoveredServer(hostname, DEFAULT_LDAP_PORT, DiscoveryMethod.DNS_A_RECORD,
                                               ip=address))
    logger.debug('Found %s A record candidates for domain %s', len(candidates), domain)
    return candidates
