"""
Pytest configuration and shared fixtures.
"""

import sys
import uuid
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

sys.path.insert(0, str(Path(__file__).parent))

from fake_hawkular import FAKE_URL, ASGIAdapter, FakeHawkular  # noqa: E402

from hawkular import Client, Parameters  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env_for_tests(monkeypatch):
    """Clean environment variables for test isolation.

    Ensures tests never pick up connection settings of the machine running
    them by clearing every HAWKULAR_* environment variable.

    This fixture is applied automatically to all tests (autouse=True).
    """
    for name in ("TENANT", "URL", "HOST", "PORT", "PATH", "TOKEN", "VERIFY_TLS", "TIMEOUT"):
        monkeypatch.delenv(f"HAWKULAR_{name}", raising=False)


@pytest.fixture
def tenant_id():
    """Random tenant so every test starts from an empty namespace."""
    return uuid.uuid4().hex.upper()


@pytest.fixture
def fake_hawkular():
    """Fresh in-memory Hawkular server."""
    return FakeHawkular()


@pytest.fixture
def hawkular_session(fake_hawkular):
    """requests session routed to the fake server."""
    session = requests.Session()
    session.mount(FAKE_URL, ASGIAdapter(fake_hawkular.app))
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(hawkular_session, tenant_id):
    """Client bound to the fake server and a random tenant."""
    with Client(Parameters(tenant=tenant_id, url=FAKE_URL), session=hawkular_session) as c:
        yield c


@pytest.fixture
def mock_session():
    """MagicMock session answering 200 with an empty body by default."""
    session = MagicMock()
    response = MagicMock()
    response.status_code = 200
    response.content = b""
    response.headers = {}
    session.request.return_value = response
    return session


@pytest.fixture
def make_response():
    """Factory building mock responses for mock_session."""

    def _make(status_code: int, content: bytes = b"", headers: dict | None = None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        response.headers = headers or {}
        return response

    return _make
