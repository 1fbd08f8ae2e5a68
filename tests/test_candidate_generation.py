import pytest

from ad_dc_finder import (
    DiscoveryMethod,
    generate_common_name_candidates,
    generate_dns_a_record_candidates,
    generate_dns_srv_candidates,
    generate_environment_candidates,
)


@pytest.mark.parametrize('domain', [None, ''])
def test_domain_strategies_produce_nothing_without_a_domain(fake_dns, domain):
    assert generate_dns_srv_candidates(domain) == []
    assert generate_common_name_candidates(domain) == []
    assert generate_dns_a_record_candidates(domain) == []
    assert fake_dns.queried == []


def test_environment_strategy_runs_without_a_domain():
    candidates = generate_environment_candidates({'LOGONSERVER': '\\\\DC01'})
    assert [c.host for c in candidates] == ['DC01']


def test_srv_queries_all_standard_records(fake_dns):
    generate_dns_srv_candidates('example.com')
    assert fake_dns.queried == [
        ('SRV', '_ldap._tcp.dc._msdcs.example.com'),
        ('SRV', '_ldap._tcp.example.com'),
        ('SRV', '_kerberos._tcp.example.com'),
        ('SRV', '_gc._tcp.example.com'),
    ]


def test_srv_candidates_keep_target_and_port(fake_dns):
    fake_dns.srv['_ldap._tcp.dc._msdcs.example.com'] = [('dc01.example.com', 389, 0, 100)]
    fake_dns.srv['_gc._tcp.example.com'] = [('dc02.example.com', 3268, 0, 100)]

    candidates = generate_dns_srv_candidates('example.com')

    assert [(c.host, c.port) for c in candidates] == [('dc01.example.com', 389), ('dc02.example.com', 3268)]
    assert all(c.method is DiscoveryMethod.DNS_SRV for c in candidates)


def test_failed_srv_query_does_not_stop_the_others(fake_dns):
    # the first three lookups fail and come back empty
    fake_dns.srv['_gc._tcp.example.com'] = [('dc01.example.com', 3268, 0, 0)]
    candidates = generate_dns_srv_candidates('example.com')
    assert [(c.host, c.port) for c in candidates] == [('dc01.example.com', 3268)]


def test_srv_records_with_unusable_ports_are_skipped(fake_dns):
    fake_dns.srv['_ldap._tcp.example.com'] = [('dc01.example.com', 0, 0, 0), ('dc02.example.com', 389, 0, 0)]
    candidates = generate_dns_srv_candidates('example.com')
    assert [c.host for c in candidates] == ['dc02.example.com']


def test_common_names_for_example_domain():
    candidates = generate_common_name_candidates('example.com')
    assert {c.host for c in candidates} == {
        'dc.example.com', 'dc1.example.com', 'dc2.example.com', 'ad.example.com',
        'ldap.example.com', 'pdc.example.com', 'bdc.example.com', 'example.com',
    }
    assert len(candidates) == 8
    assert all(c.port == 389 and c.method is DiscoveryMethod.COMMON_NAME for c in candidates)
    assert candidates[-1].host == 'example.com'


def test_environment_candidates_strip_unc_prefix():
    candidates = generate_environment_candidates({'LOGONSERVER': '\\\\DC01', 'LDAPSERVER': 'ldap.example.com'})
    assert [(c.host, c.port, c.method) for c in candidates] == [
        ('DC01', 389, DiscoveryMethod.ENVIRONMENT),
        ('ldap.example.com', 389, DiscoveryMethod.ENVIRONMENT),
    ]


def test_environment_candidates_ignore_missing_and_empty_values():
    assert generate_environment_candidates({}) == []
    assert generate_environment_candidates({'LOGONSERVER': '\\\\', 'LDAPSERVER': '  '}) == []


def test_environment_candidates_default_to_process_environment(monkeypatch):
    monkeypatch.delenv('LOGONSERVER', raising=False)
    monkeypatch.setenv('LDAPSERVER', 'dc09.example.com')
    assert [c.host for c in generate_environment_candidates()] == ['dc09.example.com']


def test_a_record_candidates_keep_hostname_and_address(fake_dns):
    fake_dns.a['ldap.example.com'] = ['10.0.0.5', '10.0.0.6']

    candidates = generate_dns_a_record_candidates('example.com')

    assert [q for q in fake_dns.queried] == [
        ('A', '_ldap.example.com'), ('A', 'ldap.example.com'), ('A', 'ad.example.com'),
    ]
    assert [(c.host, c.ip, c.port, c.method) for c in candidates] == [
        ('ldap.example.com', '10.0.0.5', 389, DiscoveryMethod.DNS_A_RECORD),
        ('ldap.example.com', '10.0.0.6', 389, DiscoveryMethod.DNS_A_RECORD),
    ]
    assert candidates[0].probe_address == '10.0.0.5'
