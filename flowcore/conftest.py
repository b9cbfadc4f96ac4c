import pytest
from rest_framework.test import APIClient

from accounts.models import User
from core.config import ServiceConfig


@pytest.fixture(autouse=True)
def test_settings(settings):
    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
    settings.JWT_SECRET = "test-secret"
    settings.APP_BASE_URL = "http://testserver"
    settings.FRONTEND_URL = "http://frontend.test"
    settings.STORAGE_UPLOAD_URL = "http://storage.test/upload"
    return settings


@pytest.fixture
def config():
    return ServiceConfig(
        jwt_secret="test-secret",
        app_base_url="http://testserver",
        frontend_url="http://frontend.test",
        storage_upload_url="http://storage.test/upload",
    )


def _user(email, role, name):
    return User.objects.create_user(email, "pass1234", name=name, role=role)


@pytest.fixture
def ceo(db):
    return _user("ceo@example.com", User.Role.CEO, "Carol CEO")


@pytest.fixture
def manager(db):
    return _user("manager@example.com", User.Role.MANAGER, "Max Manager")


@pytest.fixture
def member(db):
    return _user("member@example.com", User.Role.MEMBER, "Mia Member")


@pytest.fixture
def member2(db):
    return _user("member2@example.com", User.Role.MEMBER, "Noah Member")


@pytest.fixture
def api():
    """api(user) -> APIClient authenticated as user (anonymous when None)"""
    def _client(user=None):
        client = APIClient()
        if user is not None:
            client.force_authenticate(user=user)
        return client
    return _client
