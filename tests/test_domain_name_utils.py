import dns.name
import dns.resolver
import pytest

from ad_dc_finder import find_local_domain_name
from ad_dc_finder.environment.discovery import domain_name_utils


class FakeSystemResolver:

    def __init__(self, domain='.', search=()):
        self.domain = dns.name.from_text(domain)
        self.search = [dns.name.from_text(name) for name in search]


@pytest.fixture
def system_dns(monkeypatch):
    def install(domain='.', search=(), error=None):
        def fake_resolver():
            if error is not None:
                raise error
            return FakeSystemResolver(domain, search)
        monkeypatch.setattr(domain_name_utils.dns.resolver, 'Resolver', fake_resolver)
    return install


@pytest.fixture
def hostname(monkeypatch):
    def install(name):
        monkeypatch.setattr(domain_name_utils.socket, 'gethostname', lambda: name)
    return install


def test_system_domain_suffix_comes_first(system_dns, hostname):
    system_dns('corp.example.com.')
    hostname('host1.other.example.com')
    assert find_local_domain_name({'USERDNSDOMAIN': 'USERS.EXAMPLE.COM'}) == 'corp.example.com'


def test_search_domain_is_used_when_no_domain_is_set(system_dns):
    system_dns(search=['search.example.com.'])
    assert domain_name_utils.get_system_dns_domain() == 'search.example.com'


def test_user_dns_domain_is_lower_cased(system_dns, hostname):
    system_dns()
    hostname('host1')
    assert find_local_domain_name({'USERDNSDOMAIN': 'CORP.EXAMPLE.COM'}) == 'corp.example.com'


def test_hostname_domain_is_last_resort(system_dns, hostname):
    system_dns(error=dns.resolver.NoResolverConfiguration())
    hostname('host1.corp.example.com')
    assert find_local_domain_name({}) == 'corp.example.com'


def test_nothing_found_returns_none(system_dns, hostname):
    system_dns()
    hostname('host1')
    assert find_local_domain_name({}) is None


def test_unexpected_resolver_errors_are_not_raised(system_dns):
    system_dns(error=RuntimeError('broken'))
    assert domain_name_utils.get_system_dns_domain() is None


@pytest.mark.parametrize('fqdn, domain', [
    ('host1.corp.example.com', 'corp.example.com'),
    ('host1.example.com.', 'example.com'),
    ('host1', None),
    ('', None),
])
def test_hostname_domain(hostname, fqdn, domain):
    hostname(fqdn)
    assert domain_name_utils.get_hostname_domain() == domain
