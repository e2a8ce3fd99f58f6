"""
Tests for POST /api/admin/login.
"""
import pytest

from quiz_api import models


FAILED = {"success": False, "error": "Invalid credentials"}


@pytest.fixture
def users(db):
    admin = models.User(email="admin@example.com", password_hash="s3cret", role="admin")
    member = models.User(email="member@example.com", password_hash="s3cret", role="user")
    db.add_all([admin, member])
    db.commit()
    return {"admin": admin, "member": member}


class TestAdminLogin:

    def test_admin_login_success(self, client, users):
        response = client.post("/api/admin/login", json={
            "email": "admin@example.com",
            "password": "s3cret",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["user"]["email"] == "admin@example.com"
        assert body["user"]["role"] == "admin"
        assert body["user"]["password_hash"] == "s3cret"
        assert body["user"]["last_login"] is not None

    def test_last_login_is_persisted(self, client, db, users):
        client.post("/api/admin/login", json={"email": "admin@example.com", "password": "s3cret"})

        db.expire_all()
        assert db.get(models.User, users["admin"].id).last_login is not None

    @pytest.mark.parametrize("email,password", [
        ("admin@example.com", "wrong"),
        ("nobody@example.com", "s3cret"),
        ("member@example.com", "s3cret"),
    ])
    def test_mismatch_gives_same_401(self, client, users, email, password):
        response = client.post("/api/admin/login", json={"email": email, "password": password})

        assert response.status_code == 401
        assert response.json() == FAILED
