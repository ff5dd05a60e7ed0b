"""Shared test fixtures for the CyberAudit Pro test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cyberaudit.app import create_app
from cyberaudit.catalog import NIST_CSF_CONTROLS, OWASP_TOP_10, AuditStatus
from cyberaudit.config import Settings
from cyberaudit.models import AuditItem, AuditStatusRecord, Vulnerability
from cyberaudit.store import audit_store


def _test_settings(**overrides) -> Settings:
    """Return settings suitable for testing."""
    values = {
        "environment": "development",
        "debug": True,
        "log_format": "console",
        "rate_limit_default": "1000/minute",
        "allowed_origins": "http://localhost:3000,http://localhost:5173",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    """Test settings."""
    return _test_settings()


@pytest.fixture
def app(settings):
    """Create a fresh FastAPI app for testing."""
    return create_app(settings)


@pytest.fixture
def anon_client(app):
    """HTTP test client that has not passed the login gate."""
    return TestClient(app)


@pytest.fixture
def client(anon_client):
    """HTTP test client with an open session."""
    resp = anon_client.post("/api/session/login", json={"username": "Admin User", "password": "anything"})
    assert resp.status_code == 200
    return anon_client


@pytest.fixture(autouse=True)
def reset_store():
    """Reset the global workspace before and after each test."""
    audit_store.reset()
    yield
    audit_store.reset()


@pytest.fixture
def make_items():
    """Build a catalog-ordered checklist with the given statuses.

    Statuses are applied to catalog controls in order; remaining controls
    stay Non-Compliant.
    """

    def _make(statuses: list[AuditStatus]) -> list[AuditItem]:
        items = []
        for i, control in enumerate(NIST_CSF_CONTROLS):
            status = statuses[i] if i < len(statuses) else AuditStatus.NON_COMPLIANT
            items.append(AuditItem.compose(control, AuditStatusRecord(control_id=control.id, status=status)))
        return items

    return _make


@pytest.fixture
def make_vuln():
    """Build a standalone vulnerability record."""
    counter = iter(range(1, 1000))

    def _make(likelihood: int = 3, impact: int = 3, name: str = OWASP_TOP_10[0]) -> Vulnerability:
        return Vulnerability(id=f"v{next(counter)}", name=name, likelihood=likelihood, impact=impact)

    return _make


@pytest.fixture
def sample_vulnerabilities():
    """Four worksheet rows whose highest score is last."""
    rows = [
        (OWASP_TOP_10[2], 2, 2),   # 4
        (OWASP_TOP_10[4], 2, 3),   # 6
        (OWASP_TOP_10[0], 3, 3),   # 9
        (OWASP_TOP_10[6], 5, 5),   # 25
    ]
    return [audit_store.add_vulnerability(name=n, likelihood=l, impact=i) for n, l, i in rows]


@pytest.fixture
def make_client():
    """Build a test client around an app created with overridden settings."""

    def _make(login: bool = True, **overrides) -> TestClient:
        test_client = TestClient(create_app(_test_settings(**overrides)))
        if login:
            test_client.post("/api/session/login")
        return test_client

    return _make
