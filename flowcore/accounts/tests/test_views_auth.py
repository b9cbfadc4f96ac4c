import pytest
from rest_framework.test import APIClient

from accounts.services.token import TokenService


@pytest.mark.django_db
def test_signup_login_and_me():
    client = APIClient()
    r1 = client.post("/auth/signup/", {
        "name": "Ann", "email": "ann@example.com", "password": "secret1", "type": "manager",
    }, format="json")
    assert r1.status_code == 201, r1.content

    r2 = client.post("/auth/login/", {"email": "ann@example.com", "password": "secret1", "type": "manager"}, format="json")
    assert r2.status_code == 200, r2.content
    token = r2.json()["access_token"]

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    r3 = client.get("/auth/me/")
    assert r3.status_code == 200
    assert r3.json()["type"] == "manager"


@pytest.mark.django_db
def test_signup_duplicate_is_conflict(member):
    r = APIClient().post("/auth/signup/", {
        "name": "Dup", "email": member.email, "password": "secret1", "type": "member",
    }, format="json")
    assert r.status_code == 409
    assert r.json() == {"detail": "Email already exists"}


@pytest.mark.django_db
def test_login_role_mismatch_is_401(member):
    r = APIClient().post("/auth/login/", {"email": member.email, "password": "pass1234", "type": "ceo"}, format="json")
    assert r.status_code == 401
    assert r.json() == {"detail": "Invalid credentials"}


@pytest.mark.django_db
def test_protected_endpoint_requires_valid_bearer(config, member):
    client = APIClient()
    assert client.get("/auth/me/").status_code == 401

    client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
    r = client.get("/auth/me/")
    assert r.status_code == 401
    assert r.json() == {"detail": "Invalid or expired token"}

    reset = TokenService(config).issue_reset_token(member)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {reset}")
    assert client.get("/auth/me/").status_code == 401
