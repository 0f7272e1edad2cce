"""
Tests for the shared-password login and the bearer token gate.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from menuboard.auth.tokens import check_password, issue_token, verify_token
from menuboard.core.exceptions import AuthError
from tests.conftest import ADMIN_PASSWORD


class TestLogin:

    def test_correct_password_returns_token(self, client):
        res = client.post("/api/login", json={"password": ADMIN_PASSWORD})
        assert res.status_code == 200
        body = res.json()
        assert body["expires_in"] == 7200
        claims = verify_token(body["token"])
        assert claims["role"] == "admin"
        assert claims["exp"] - claims["iat"] == 7200

    def test_wrong_password(self, client):
        res = client.post("/api/login", json={"password": "nope"})
        assert res.status_code == 401
        assert res.json() == {"error": "Invalid password"}

    def test_missing_password(self, client):
        assert client.post("/api/login", json={}).status_code == 401

    def test_check_password(self):
        assert check_password(ADMIN_PASSWORD)
        assert not check_password("")
        assert not check_password(None)

    def test_token_works_on_protected_route(self, client):
        token = client.post("/api/login", json={"password": ADMIN_PASSWORD}).json()["token"]
        res = client.post("/api/sections", json={"name": "Mains"}, headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 200


class TestTokenGate:

    def _create_section(self, client, headers=None):
        return client.post("/api/sections", json={"name": "Mains"}, headers=headers or {})

    def test_missing_token(self, client):
        res = self._create_section(client)
        assert res.status_code == 401
        assert res.json() == {"error": "Token required"}
        assert client.get("/api/sections").json() == []

    def test_expired_token(self, client):
        token = issue_token(lifetime_seconds=-10)
        res = self._create_section(client, {"Authorization": f"Bearer {token}"})
        assert res.status_code == 401
        assert res.json() == {"error": "Token expired"}
        assert client.get("/api/sections").json() == []

    def test_malformed_token(self, client):
        res = self._create_section(client, {"Authorization": "Bearer not-a-jwt"})
        assert res.status_code == 403
        assert res.json() == {"error": "Invalid token"}
        assert client.get("/api/sections").json() == []

    def test_wrong_signature(self, client):
        token = jwt.encode(
            {"role": "admin", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "some-other-secret",
            algorithm="HS256",
        )
        res = self._create_section(client, {"Authorization": f"Bearer {token}"})
        assert res.status_code == 403

    def test_wrong_role(self, client):
        token = issue_token(role="guest")
        res = self._create_section(client, {"Authorization": f"Bearer {token}"})
        assert res.status_code == 403

    def test_bad_token_blocks_every_mutation(self, client, auth_headers, make_section, make_item):
        mains = make_section("Mains")
        item = make_item(mains["id"], "Burger", 5)
        name = client.post("/api/names", json={"name": "Burger"}, headers=auth_headers).json()
        bad = {"Authorization": f"Bearer {issue_token(lifetime_seconds=-1)}"}

        assert client.put(f"/api/sections/{mains['id']}", json={"name": "X"}, headers=bad).status_code == 401
        assert client.delete(f"/api/sections/{mains['id']}", headers=bad).status_code == 401
        assert client.put(f"/api/items/{item['id']}", json={"name": "X"}, headers=bad).status_code == 401
        assert client.delete(f"/api/items/{item['id']}", headers=bad).status_code == 401
        assert client.put(f"/api/names/{name['id']}", json={"name": "X"}, headers=bad).status_code == 401
        assert client.delete(f"/api/names/{name['id']}", headers=bad).status_code == 401

        menu = client.get("/api/menu").json()
        assert menu[0]["name"] == "Mains"
        assert menu[0]["items"][0]["name"] == "Burger"
        assert client.get("/api/names").json()[0]["name"] == "Burger"


class TestVerifyToken:

    def test_empty_token(self):
        with pytest.raises(AuthError) as exc:
            verify_token("")
        assert exc.value.status_code == 401

    def test_valid_token(self):
        assert verify_token(issue_token())["role"] == "admin"
