import time

import jwt
import pytest

from accounts.models import User
from accounts.services.auth import AuthService, FORGOT_PASSWORD_MESSAGE
from accounts.services.token import RESET_PURPOSE, TokenService
from core.errors import AuthenticationFailedError, ConflictError


@pytest.mark.django_db
def test_signup_returns_token_and_lowercases_email(config):
    result = AuthService(config).signup(name="Ann", email="Ann@Example.COM", password="secret1", role="member")

    user = User.objects.get()
    assert user.email == "ann@example.com"
    claims = TokenService(config).verify_access_token(result["access_token"])
    assert claims["sub"] == str(user.id)
    assert claims["type"] == "member"


@pytest.mark.django_db
def test_signup_duplicate_email_case_insensitive(config, member):
    with pytest.raises(ConflictError) as exc:
        AuthService(config).signup(name="X", email="MEMBER@example.com", password="secret1", role="member")
    assert exc.value.status_code == 409


@pytest.mark.django_db
@pytest.mark.parametrize("password,role", [
    ("wrong-pass", "member"),
    ("pass1234", "manager"),
])
def test_login_failures_are_indistinguishable(config, member, password, role):
    with pytest.raises(AuthenticationFailedError) as exc:
        AuthService(config).login(email=member.email, password=password, role=role)
    assert exc.value.message == "Invalid credentials"


@pytest.mark.django_db
def test_login_unknown_email(config):
    with pytest.raises(AuthenticationFailedError) as exc:
        AuthService(config).login(email="nobody@example.com", password="x", role="member")
    assert exc.value.message == "Invalid credentials"


@pytest.mark.django_db
def test_login_ok(config, manager):
    result = AuthService(config).login(email="Manager@example.com", password="pass1234", role="manager")
    assert result["message"] == "Login successfully"
    assert TokenService(config).verify_access_token(result["access_token"])["email"] == manager.email


def test_expired_and_tampered_tokens_rejected(config):
    now = int(time.time())
    expired = jwt.encode({"sub": "1", "iat": now - 100, "exp": now - 10}, config.jwt_secret, algorithm="HS256")
    forged = jwt.encode({"sub": "1", "iat": now, "exp": now + 60}, "other-secret", algorithm="HS256")
    tokens = TokenService(config)
    for token in (expired, forged, "not-a-token", ""):
        with pytest.raises(AuthenticationFailedError):
            tokens.verify_access_token(token)


@pytest.mark.django_db
def test_reset_token_is_not_an_access_token(config, member):
    tokens = TokenService(config)
    reset = tokens.issue_reset_token(member)
    with pytest.raises(AuthenticationFailedError):
        tokens.verify_access_token(reset)
    with pytest.raises(AuthenticationFailedError):
        tokens.verify_reset_token(tokens.issue_access_token(member))
    assert tokens.verify_reset_token(reset)["purpose"] == RESET_PURPOSE


@pytest.mark.django_db
def test_forgot_and_reset_password(config, member, mailoutbox):
    service = AuthService(config)
    assert service.forgot_password(email=member.email) == {"message": FORGOT_PASSWORD_MESSAGE}
    assert len(mailoutbox) == 1
    assert "reset-password?token=" in mailoutbox[0].body

    token = TokenService(config).issue_reset_token(member)
    service.reset_password(token=token, new_password="brand-new")
    member.refresh_from_db()
    assert member.check_password("brand-new")


@pytest.mark.django_db
def test_forgot_password_unknown_email_same_answer(config, mailoutbox):
    result = AuthService(config).forgot_password(email="ghost@example.com")
    assert result == {"message": FORGOT_PASSWORD_MESSAGE}
    assert mailoutbox == []


@pytest.mark.django_db
def test_reset_password_with_access_token_fails(config, member):
    token = TokenService(config).issue_access_token(member)
    with pytest.raises(AuthenticationFailedError):
        AuthService(config).reset_password(token=token, new_password="brand-new")
    member.refresh_from_db()
    assert member.check_password("pass1234")
