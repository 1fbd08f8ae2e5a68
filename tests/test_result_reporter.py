from ad_dc_finder import DiscoveredServer, DiscoveryMethod, ResultReporter, deduplicate_servers


def make_servers():
    return [
        DiscoveredServer('dc01.example.com', 389, DiscoveryMethod.DNS_SRV),
        DiscoveredServer('dc01.example.com', 389, DiscoveryMethod.COMMON_NAME),
        DiscoveredServer('ldap.example.com', 389, DiscoveryMethod.DNS_A_RECORD, ip='10.0.0.5'),
        DiscoveredServer('dc01.example.com', 389, DiscoveryMethod.DNS_SRV),
    ]


def test_deduplicate_keeps_first_occurrence_in_order():
    unique = deduplicate_servers(make_servers())
    assert [(s.host, s.method) for s in unique] == [
        ('dc01.example.com', DiscoveryMethod.DNS_SRV),
        ('ldap.example.com', DiscoveryMethod.DNS_A_RECORD),
    ]


def test_deduplicate_is_idempotent():
    once = deduplicate_servers(make_servers())
    assert deduplicate_servers(once) == once
    assert len(deduplicate_servers(once + once)) == len(once)


def test_report_with_no_servers_prints_hints(output):
    reported = ResultReporter(output).report([])
    text = output.getvalue()
    assert reported == []
    assert 'No Active Directory Domain Controllers found.' in text
    assert 'Firewall blocking LDAP ports (389/636)' in text
    assert 'Not running on domain-joined machine' in text
    assert 'ldapsearch' not in text


def test_report_lists_unique_servers(output):
    reported = ResultReporter(output).report(make_servers())
    text = output.getvalue()

    assert len(reported) == 2
    assert 'Found 2 Domain Controller(s):' in text
    assert '1. dc01.example.com:389\n   Discovery Method: DNS SRV\n' in text
    assert '2. ldap.example.com:389\n   Discovery Method: DNS A Record\n   IP Address: 10.0.0.5\n' in text
    assert 'ldapsearch -H ldap://dc01.example.com:389 -x -s base' in text
    assert 'Possible reasons' not in text


def test_progress_lines(output):
    reporter = ResultReporter(output)
    reporter.announce_start(None)
    reporter.announce_method(1, 'Checking DNS SRV records')
    reporter.announce_found(DiscoveredServer('ldap.example.com', 389, DiscoveryMethod.DNS_A_RECORD, ip='10.0.0.5'))
    lines = output.getvalue().splitlines()

    assert 'Domain detected: None' in lines
    assert 'Method 1: Checking DNS SRV records...' in lines
    assert '  + Found DC via DNS A Record: ldap.example.com:389 (10.0.0.5)' in lines
