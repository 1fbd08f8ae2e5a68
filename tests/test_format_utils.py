import pytest

from ad_dc_finder.environment.format_utils import (
    format_hostname_or_ip_and_port_to_uri,
    format_ldap_uri,
    strip_domain_from_hostname,
)


@pytest.mark.parametrize('host, port, expected', [
    ('dc01.example.com', 389, 'dc01.example.com:389'),
    ('10.0.0.5', 389, '10.0.0.5:389'),
    ('fd00::5', 389, '[fd00::5]:389'),
    ('dc01.example.com', None, 'dc01.example.com'),
])
def test_format_hostname_or_ip_and_port_to_uri(host, port, expected):
    assert format_hostname_or_ip_and_port_to_uri(host, port) == expected


def test_format_ldap_uri():
    assert format_ldap_uri('dc01.example.com', 3268) == 'ldap://dc01.example.com:3268'
    assert format_ldap_uri('fd00::5', 389) == 'ldap://[fd00::5]:389'


def test_strip_domain_from_hostname():
    assert strip_domain_from_hostname(' host1.corp.example.com ') == 'corp.example.com'
    assert strip_domain_from_hostname('host1') is None
    assert strip_domain_from_hostname('host1.') is None
