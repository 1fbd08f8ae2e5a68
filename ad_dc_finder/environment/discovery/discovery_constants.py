""" Constants for discovering the domain controllers of an AD domain and the environment around it """
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

# SRV records registered by domain controllers, queried in this order
DC_DNS_SRV_FORMATS = [
    '_ldap._tcp.dc._msdcs.{domain}',
    '_ldap._tcp.{domain}',
    '_kerberos._tcp.{domain}',
    '_gc._tcp.{domain}',
]

# hostnames that are commonly given to domain controllers
COMMON_DC_HOSTNAME_PREFIXES = ['dc', 'dc1', 'dc2', 'ad', 'ldap', 'pdc', 'bdc']

DC_DNS_A_RECORD_FORMATS = [
    '_ldap.{domain}',
    'ldap.{domain}',
    'ad.{domain}',
]

# set by windows on domain-joined machines
USER_DNS_DOMAIN_ENV_VAR = 'USERDNSDOMAIN'
LOGON_SERVER_ENV_VAR = 'LOGONSERVER'
# not standard, but used by some ldap tooling
LDAP_SERVER_ENV_VAR = 'LDAPSERVER'

DEFAULT_LDAP_PORT = 389
MAX_PORT = 65535

CONNECT_TIMEOUT_SECONDS = 2
DNS_TIMEOUT_SECONDS = 10

# used only to get a reply out of servers that refuse anonymous binds
PROBE_BIND_USER = 'test@example.com'
PROBE_BIND_PASSWORD = 'test'
