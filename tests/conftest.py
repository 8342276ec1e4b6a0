"""Shared fixtures for console identification tests."""

import pytest

from bmc_viewer.models import Target
from bmc_viewer.transport import ConsoleTransport

from .fixtures import HOST, IDRAC6_URL, IDRAC7_URL, ILO_LOGIN_URL, SUPERMICRO_LOGIN_URL


@pytest.fixture
def transport():
    """Real transport; requests_mock intercepts its session."""
    with ConsoleTransport(timeout=1) as t:
        yield t


@pytest.fixture
def target():
    return Target(host=HOST, username="admin", password="secret")


@pytest.fixture
def no_console(requests_mock):
    """Every probe answers 404."""
    requests_mock.head(IDRAC7_URL, status_code=404)
    requests_mock.head(IDRAC6_URL, status_code=404)
    requests_mock.post(ILO_LOGIN_URL, status_code=404)
    requests_mock.post(SUPERMICRO_LOGIN_URL, status_code=404)
    return requests_mock
