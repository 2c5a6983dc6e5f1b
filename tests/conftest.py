"""
Shared test fixtures for the school backend.
Each test gets its own GradeStore and app, so no state leaks between tests.
"""
import pytest

from school_backend.app import create_app
from school_backend.auth import issue_token
from school_backend.config import Config
from school_backend.store import GradeStore


@pytest.fixture
def settings():
    """Config with deterministic values for tests."""
    cfg = Config()
    cfg.update({
        "jwt_secret": "test-secret",
        "jwt_expires_hours": 2,
        "enable_csrf": False,
        "enforce_student_binding": False,
        "seed_demo_data": True,
        "audit_log_file": "",
    })
    return cfg


@pytest.fixture
def store():
    """A store seeded with the two demo records (g1, g2)."""
    return GradeStore.with_demo_data()


@pytest.fixture
def app(settings, store):
    app = create_app(settings, store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(settings):
    """Build Authorization headers for a role: auth_headers('admin')."""
    def _headers(role, user_id="test-user"):
        token = issue_token(user_id, role, settings)
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def sample_students():
    return [
        {"studentId": "S010", "name": "X", "rollNumber": "010", "class": "10-A", "subject": "Science"},
        {"studentId": "S011", "name": "Y", "rollNumber": "011", "class": "10-A", "subject": "Science"},
    ]
