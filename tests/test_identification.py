"""Tests for console identification.

The probe sequence is ordered and short-circuiting: the first probe that
matches decides the version and later probes never run.
"""

import pytest
import requests

from bmc_viewer.exceptions import IdentificationError
from bmc_viewer.models import Target
from bmc_viewer.services import IdentificationService

from .fixtures import IDRAC6_URL, IDRAC7_URL, ILO_LOGIN_URL, SUPERMICRO_LOGIN_URL


@pytest.fixture
def service(transport):
    return IdentificationService(transport)


class TestProbeOrder:
    def test_idrac7_wins_over_idrac6(self, no_console, service, target):
        no_console.head(IDRAC7_URL, status_code=200)
        no_console.head(IDRAC6_URL, status_code=200)

        assert service.identify(target) == 7
        assert target.version == 7
        assert [r.url for r in no_console.request_history] == [IDRAC7_URL]

    def test_idrac6(self, no_console, service, target):
        no_console.head(IDRAC6_URL, status_code=200)

        assert service.identify(target) == 6
        assert no_console.call_count == 2

    def test_ilo_stops_before_supermicro(self, no_console, service, target):
        no_console.post(ILO_LOGIN_URL, status_code=200, cookies={"sessionKey": "k1"})
        no_console.post(SUPERMICRO_LOGIN_URL, status_code=200, cookies={"SID": "abc123"})

        assert service.identify(target) == 2
        assert target.session_key == "k1"
        assert target.session_cookie == ""
        assert target.username == "admin"
        assert not any(r.url == SUPERMICRO_LOGIN_URL for r in no_console.request_history)

    def test_probe_errors_fall_through(self, requests_mock, service, target):
        requests_mock.head(IDRAC7_URL, exc=requests.exceptions.ConnectTimeout)
        requests_mock.head(IDRAC6_URL, exc=requests.exceptions.SSLError)
        requests_mock.post(ILO_LOGIN_URL, exc=requests.exceptions.ConnectionError)
        requests_mock.post(SUPERMICRO_LOGIN_URL, status_code=200, cookies={"SID": "abc123"})

        assert service.identify(target) == 1


class TestSessions:
    def test_ilo_without_session_key_still_resolves(self, no_console, service, target):
        no_console.post(ILO_LOGIN_URL, status_code=200)

        assert service.identify(target) == 2
        assert target.session_key == ""

    def test_supermicro_sid_replaces_credentials(self, no_console, service, target):
        no_console.post(SUPERMICRO_LOGIN_URL, status_code=200, cookies={"SID": "abc123"})

        assert service.identify(target) == 1
        assert target.username == "abc123"
        assert target.password == "abc123"
        assert target.session_credential == "abc123"
        assert target.session_cookie == "SID=abc123"

    def test_supermicro_without_sid_keeps_credentials(self, no_console, service, target):
        no_console.post(SUPERMICRO_LOGIN_URL, status_code=200)

        assert service.identify(target) == 1
        assert target.username == "admin"
        assert target.password == "secret"
        assert target.session_cookie == ""

    def test_sessions_stay_on_their_target(self, no_console, service):
        no_console.post(ILO_LOGIN_URL, status_code=200, cookies={"sessionKey": "first"})
        no_console.post("https://other.example.com/json/login_session", status_code=200,
                        cookies={"sessionKey": "second"})
        no_console.head("https://other.example.com/software/avctKVMIOMac64.jar", status_code=404)
        no_console.head("https://other.example.com/software/jpcsc.jar", status_code=404)
        first = Target(host="bmc.example.com", username="u", password="p")
        second = Target(host="other.example.com", username="u", password="p")

        service.identify(first)
        service.identify(second)

        assert first.session_key == "first"
        assert second.session_key == "second"


class TestFailures:
    def test_no_console_matched(self, no_console, service, target):
        with pytest.raises(IdentificationError, match="bmc.example.com"):
            service.identify(target)

        assert target.version < 0
        assert no_console.call_count == 4

    def test_unreachable_host(self, requests_mock, service, target):
        for url in (IDRAC7_URL, IDRAC6_URL):
            requests_mock.head(url, exc=requests.exceptions.ConnectionError)
        for url in (ILO_LOGIN_URL, SUPERMICRO_LOGIN_URL):
            requests_mock.post(url, exc=requests.exceptions.ConnectionError)

        with pytest.raises(IdentificationError):
            service.identify(target)

        assert not target.is_resolved


class TestSuppliedVersion:
    @pytest.mark.parametrize("version", [1, 2, 6, 7])
    def test_known_version_skips_probing(self, requests_mock, service, version):
        target = Target(host="h", username="u", password="p", version=version)

        assert service.identify(target) == version
        assert requests_mock.call_count == 0

    def test_unknown_positive_version_returned_unchanged(self, requests_mock, service):
        target = Target(host="h", version=3)

        assert service.identify(target) == 3
        assert requests_mock.call_count == 0

    def test_custom_probe_list(self, requests_mock, transport, target):
        from bmc_viewer.strategies import SuperMicroStrategy

        requests_mock.post(SUPERMICRO_LOGIN_URL, status_code=200)
        service = IdentificationService(transport, probes=[SuperMicroStrategy(transport)])

        assert service.identify(target) == 1
        assert requests_mock.call_count == 1
