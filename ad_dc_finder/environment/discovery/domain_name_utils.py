""" Helpers for working out which Active Directory domain the local machine belongs to """
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
import dns.name
import dns.resolver
import os
import socket

from functools import partial
from typing import Mapping, Optional

from ad_dc_finder.environment.discovery.discovery_constants import USER_DNS_DOMAIN_ENV_VAR
from ad_dc_finder.environment.format_utils import strip_domain_from_hostname
from ad_dc_finder import logging_utils


logger = logging_utils.get_logger()


def find_local_domain_name(environ: Mapping[str, str] = None) -> Optional[str]:
    """ Determine the DNS name of the domain that this machine belongs to.

    The system DNS domain suffix is checked first, then the domain of the logged on user as set
    by windows, and finally the domain portion of our fully qualified hostname.
    :param environ: The environment variables to read. Defaults to the process environment.
    :returns: The domain name, or None if no source provided one.
    """
    lookups = [
        ('the system DNS suffix', get_system_dns_domain),
        (USER_DNS_DOMAIN_ENV_VAR, partial(get_user_dns_domain, environ)),
        ('the local hostname', get_hostname_domain),
    ]
    for source, lookup_fn in lookups:
        domain = lookup_fn()
        if domain:
            logger.info('Found local domain %s from %s', domain, source)
            return domain
    logger.info('Unable to determine the local domain name')
    return None


def get_system_dns_domain() -> Optional[str]:
    """ Read the DNS domain suffix configured for this host. On POSIX systems this comes from the
    domain or search directives of resolv.conf, and on windows it comes from the registry.
    """
    try:
        system_resolver = dns.resolver.Resolver()
    except dns.exception.DNSException as dns_ex:
        logger.debug('Unable to read the system DNS configuration: %s', dns_ex)
        return None
    except Exception as ex:
        logger.warning('Unexpected exception occurred when reading the system DNS configuration: %s', ex)
        return None

    # an unset domain is the root name. fall back to the first search domain in that case
    domain_name = system_resolver.domain
    if (domain_name is None or domain_name == dns.name.root) and system_resolver.search:
        domain_name = system_resolver.search[0]
    if domain_name is None or domain_name == dns.name.root:
        return None
    return domain_name.to_text(omit_final_dot=True) or None


def get_user_dns_domain(environ: Mapping[str, str] = None) -> Optional[str]:
    environ = os.environ if environ is None else environ
    domain = environ.get(USER_DNS_DOMAIN_ENV_VAR, '').strip()
    return domain.lower() or None


def get_hostname_domain() -> Optional[str]:
    try:
        fqdn = socket.gethostname()
    except OSError as ex:
        logger.debug('Unable to read the local hostname: %s', ex)
        return None
    return strip_domain_from_hostname(fqdn)
