from datetime import timedelta

from app.core.security import create_access_token


class TestRegister:
    """POST /api/auth/register"""

    def test_register_user_success(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Bob", "email": "bob@example.com", "password": "password123"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Bob"
        assert data["email"] == "bob@example.com"
        assert "password" not in data
        assert "password_hash" not in data

    def test_register_duplicate_email(self, client, user_id):
        response = client.post(
            "/api/auth/register",
            json={"name": "Alice again", "email": "alice@example.com", "password": "password123"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    def test_register_short_password(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Bob", "email": "bob@example.com", "password": "123"},
        )
        assert response.status_code == 400

    def test_register_invalid_email(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Bob", "email": "not-an-email", "password": "password123"},
        )
        assert response.status_code == 422


class TestLogin:
    """POST /api/auth/login and GET /api/auth/me"""

    def test_login_and_use_token(self, client, user_id):
        response = client.post(
            "/api/auth/login",
            json={"email": "alice@example.com", "password": "secret123"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] > 0

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.status_code == 200
        assert me.json()["id"] == user_id

    def test_login_wrong_password(self, client, user_id):
        response = client.post(
            "/api/auth/login",
            json={"email": "alice@example.com", "password": "wrong-password"},
        )
        assert response.status_code == 401

    def test_login_unknown_email(self, client):
        response = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "secret123"},
        )
        assert response.status_code == 401


class TestBearerGate:
    """Token checks shared by every resource endpoint"""

    def test_missing_token(self, client):
        assert client.get("/api/auth/me").status_code == 401

    def test_malformed_token(self, client):
        response = client.get("/api/posts", headers={"Authorization": "Bearer not.a.jwt"})
        assert response.status_code == 401

    def test_wrong_scheme(self, client, user_id):
        token = create_access_token(user_id)
        response = client.get("/api/posts", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

    def test_expired_token(self, client, user_id):
        token = create_access_token(user_id, expires_delta=timedelta(minutes=-5))
        response = client.get("/api/posts", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_for_unknown_user(self, client, headers_for):
        response = client.get("/api/posts", headers=headers_for(999))
        assert response.status_code == 401
