import io

from types import SimpleNamespace

import pytest

from ad_dc_finder.environment.discovery import candidate_generation


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def fake_dns(monkeypatch):
    """ Replace DNS lookups made while generating candidates with canned answers.

    Tests fill in the returned dicts, keyed by the queried name. Unknown names resolve to nothing,
    the same way a failed lookup does.
    """
    srv_records = {}
    a_records = {}
    queried = []

    def fake_srv_lookup(record_name, dns_nameservers=None, source_ip=None):
        queried.append(('SRV', record_name))
        return list(srv_records.get(record_name, []))

    def fake_a_lookup(record_name, dns_nameservers=None, source_ip=None):
        queried.append(('A', record_name))
        return list(a_records.get(record_name, []))

    monkeypatch.setattr(candidate_generation, 'resolve_srv_record_in_dns', fake_srv_lookup)
    monkeypatch.setattr(candidate_generation, 'resolve_a_record_in_dns', fake_a_lookup)

    return SimpleNamespace(srv=srv_records, a=a_records, queried=queried)
