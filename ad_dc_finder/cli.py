""" Command line entry point for finding domain controllers """
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

import argparse
import logging
import sys

from typing import List

from ad_dc_finder.core.domain_controller_finder import DomainControllerFinder
from ad_dc_finder.environment.discovery.discovery_constants import CONNECT_TIMEOUT_SECONDS
from ad_dc_finder import logging_utils


logger = logging_utils.get_logger()

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='find-domain-controllers',
        description='Discover Active Directory Domain Controllers reachable from this machine using DNS '
                    'and LDAP connectivity checks.',
    )
    parser.add_argument('--domain', help='Domain to search instead of detecting the local domain')
    parser.add_argument('--dns-nameserver', dest='dns_nameservers', action='append', metavar='IP',
                        help='Nameserver to use for DNS lookups (can be repeated)')
    parser.add_argument('--source-ip', help='Source IP address for DNS queries')
    parser.add_argument('--connect-timeout', type=float, default=CONNECT_TIMEOUT_SECONDS, metavar='SECONDS',
                        help='Seconds to wait when connecting to each candidate (default: %(default)s)')
    parser.add_argument('--log-level', choices=LOG_LEVELS, default='WARNING', type=str.upper,
                        help='Diagnostic logging level, written to stderr (default: %(default)s)')
    return parser


def main(argv: List[str] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stderr, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging_utils.configure_log_level(args.log_level)

    try:
        finder = DomainControllerFinder(domain=args.domain, dns_nameservers=args.dns_nameservers,
                                        source_ip=args.source_ip, connect_timeout=args.connect_timeout)
        finder.find_domain_controllers()
    except Exception as ex:
        print('Unexpected error: {}'.format(ex))
        logger.debug('Discovery failed', exc_info=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
