""" This module contains helper functions for looking up the DNS records that point at the domain
controllers of an Active Directory domain.
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

import dns.exception
import dns.resolver

from dns.rdatatype import A, SRV, RdataType
from typing import List

from ad_dc_finder.environment.discovery.discovery_constants import (
    DNS_TIMEOUT_SECONDS,
)
from ad_dc_finder import logging_utils


logger = logging_utils.get_logger()


def build_resolver(dns_nameservers: List[str] = None) -> dns.resolver.Resolver:
    """ Create a resolver using the system DNS configuration, optionally overriding the
    nameservers that it queries.
    """
    temp_resolver = dns.resolver.Resolver()
    temp_resolver.timeout = DNS_TIMEOUT_SECONDS
    temp_resolver.lifetime = DNS_TIMEOUT_SECONDS
    if dns_nameservers:
        logger.debug('Using the following nameservers for dns lookup instead of the default system ones %s',
                     dns_nameservers)
        temp_resolver.nameservers = dns_nameservers
    return temp_resolver


def resolve_srv_record_in_dns(record_name: str, dns_nameservers: List[str] = None, source_ip: str = None):
    """ Resolve a service record in DNS.

    Returns a list of tuples where each tuple is in the format (host, port, priority, weight)
    sorted by priority and then weight. Returns an empty list if the lookup fails.
    """
    # DNS queries are normally UDP. However, the best practices from microsoft for DNS are that
    # you use TCP if your result will be greater than 512 bytes. It states that DNS may truncate
    # results greater than 512 bytes.
    # If a record maps to a lot of results (like a service record for a large domain) then our
    # result can easily exceed 512 bytes, so we use tcp directly for lookups here, rather than
    # wait for udp to fail and then fallback.
    resolved_records = _resolve_record_in_dns(record_name, SRV, dns_nameservers, source_ip, tcp=True)

    # (host, port, priority, weight)
    record_tuples = [(record.target.to_text(omit_final_dot=True), record.port, record.priority, record.weight)
                     for record in resolved_records]
    # A lower priority value (closer to 0) means that a record should be preferred.
    # Weight is used to rank order records of equal priority, and a higher value weight (further
    # above 0) means that a record should be preferred.
    record_tuples = sorted(record_tuples, key=lambda record_tuple: (record_tuple[2], -1*record_tuple[3]))
    logger.debug('Records returned in SRV lookup for %s ordered by priority and weight: %s',
                 record_name, record_tuples)
    return record_tuples


def resolve_a_record_in_dns(record_name: str, dns_nameservers: List[str] = None, source_ip: str = None):
    """ Resolve a hostname to its ipv4 addresses in DNS. Returns an empty list if the lookup fails. """
    resolved_records = _resolve_record_in_dns(record_name, A, dns_nameservers, source_ip)
    addresses = [record.address for record in resolved_records]
    logger.debug('Addresses returned in A lookup for %s: %s', record_name, addresses)
    return addresses


def _resolve_record_in_dns(record_name: str, record_type: RdataType, dns_nameservers: List[str], source_ip: str,
                           tcp: bool = False):
    try:
        temp_resolver = build_resolver(dns_nameservers)
        return list(temp_resolver.resolve(record_name, record_type, tcp=tcp, source=source_ip))
    except dns.exception.DNSException as dns_ex:
        logger.info('Unable to query DNS for record %s due to: %s', record_name, dns_ex)
        return []
    except Exception as ex:
        logger.warning('Unexpected exception occurred when querying DNS for record %s: %s',
                       record_name, ex)
        return []
