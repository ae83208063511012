import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_audit(monkeypatch):
    """Replaces the browser audit with a stub returning the given violations or raising."""
    calls = []

    def install(violations=None, error=None):
        def _run_axe_audit(url):
            calls.append(url)
            if error is not None:
                raise error
            return violations or []
        monkeypatch.setattr("wcag_analysis.wcag_service.run_axe_audit", _run_axe_audit)
        return calls

    return install
