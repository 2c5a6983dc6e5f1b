"""
Test: Token issuing, token validation and the CSRF header check.
"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from school_backend.auth import is_public_route, validate_token


class TestTestLogin:
    def test_default_role_is_admin(self, client, settings):
        resp = client.post("/api/auth/test-login", json={})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["success"] is True
        payload = validate_token(body["token"], settings)
        assert payload["role"] == "admin"
        assert payload["id"] == "test-user"

    @pytest.mark.parametrize("role", ["admin", "faculty", "student"])
    def test_valid_roles(self, client, role):
        resp = client.post("/api/auth/test-login", json={"role": role, "userId": "u1"})
        assert resp.status_code == 200

    def test_invalid_role(self, client):
        resp = client.post("/api/auth/test-login", json={"role": "parent"})
        assert resp.status_code == 400
        assert resp.get_json() == {"success": False, "message": "Invalid role"}

    def test_token_expires_in_two_hours(self, client, settings):
        token = client.post("/api/auth/test-login", json={"role": "faculty"}).get_json()["token"]
        payload = validate_token(token, settings)
        expires = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        remaining = expires - datetime.now(timezone.utc)
        assert timedelta(hours=1, minutes=59) < remaining <= timedelta(hours=2)

    def test_issued_token_works(self, client):
        token = client.post("/api/auth/test-login", json={"role": "faculty"}).get_json()["token"]
        resp = client.get("/api/grades", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200

    def test_me(self, client, auth_headers):
        resp = client.get("/api/auth/me", headers=auth_headers("student", "S001"))
        assert resp.get_json()["data"] == {"id": "S001", "role": "student"}


class TestValidateToken:
    def test_expired(self, settings):
        token = jwt.encode(
            {"id": "u", "role": "admin", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            settings.jwt_secret, algorithm="HS256",
        )
        assert validate_token(token, settings) is None

    def test_wrong_secret(self, settings):
        token = jwt.encode({"id": "u", "role": "admin"}, "other-secret", algorithm="HS256")
        assert validate_token(token, settings) is None

    def test_expired_token_rejected_by_api(self, client, settings):
        token = jwt.encode(
            {"id": "u", "role": "admin", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            settings.jwt_secret, algorithm="HS256",
        )
        resp = client.get("/api/grades", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401


class TestPublicRoutes:
    def test_public(self):
        assert is_public_route("/api/health")
        assert is_public_route("/api/auth/test-login")
        assert is_public_route("/api/navigation")

    def test_protected(self):
        assert not is_public_route("/api/grades")
        assert not is_public_route("/api/auth/me")


class TestCsrf:
    def test_disabled_by_default(self, client, auth_headers):
        resp = client.put("/api/grades/g1", json={"remarks": "x"}, headers=auth_headers("admin"))
        assert resp.status_code == 200

    def test_missing_header_rejected(self, client, auth_headers, settings):
        settings.enable_csrf = True
        resp = client.put("/api/grades/g1", json={"remarks": "x"}, headers=auth_headers("admin"))
        assert resp.status_code == 403
        assert resp.get_json() == {"success": False, "message": "CSRF token missing"}

    def test_header_accepted(self, client, auth_headers, settings):
        settings.enable_csrf = True
        headers = {**auth_headers("admin"), "X-CSRF-Token": "anything"}
        resp = client.put("/api/grades/g1", json={"remarks": "x"}, headers=headers)
        assert resp.status_code == 200

    def test_safe_methods_skip_check(self, client, auth_headers, settings):
        settings.enable_csrf = True
        resp = client.get("/api/grades", headers=auth_headers("admin"))
        assert resp.status_code == 200
