"""
Pytest configuration and fixtures.
"""
import pytest
from django.conf import settings
import django
from django.core.management import call_command


def pytest_configure(config):
    """Configure Django settings for tests."""
    settings.DATABASES['default'] = {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'ATOMIC_REQUESTS': False,
    }
    django.setup()


@pytest.fixture(scope='session')
def django_db_setup(django_db_setup, django_db_blocker):
    """Set up test database with migrations."""
    with django_db_blocker.unblock():
        call_command('migrate', '--run-syncdb', verbosity=0)


@pytest.fixture
def api_client():
    """Return DRF API client."""
    from rest_framework.test import APIClient
    return APIClient()


def _create_user(email, role, entrepreneur=None, password='StrongPass123!', **extra):
    from apps.rbac.models import User
    return User.objects.create_user(
        email=email,
        password=password,
        name=email.split('@')[0].title(),
        role=role,
        entrepreneur=entrepreneur,
        **extra
    )


@pytest.fixture
def super_admin(db):
    """Create a super-admin."""
    return _create_user('admin@example.com', 'super-admin')


@pytest.fixture
def entrepreneur(db):
    """Create an entrepreneur (tenant A)."""
    return _create_user('owner@example.com', 'entrepreneur')


@pytest.fixture
def other_entrepreneur(db):
    """Create another entrepreneur (tenant B) for isolation tests."""
    return _create_user('other@example.com', 'entrepreneur')


@pytest.fixture
def collaborator(db, entrepreneur):
    """Create a collaborator of tenant A."""
    return _create_user('staff@example.com', 'collaborator', entrepreneur=entrepreneur)


@pytest.fixture
def customer(db, entrepreneur):
    """Create a customer of tenant A."""
    return _create_user('client@example.com', 'customer', entrepreneur=entrepreneur)


@pytest.fixture
def auth_client():
    """
    Return a factory building an API client authenticated as a user.

    Usage:
        client = auth_client(entrepreneur)
    """
    from rest_framework.test import APIClient
    from apps.rbac.services import AuthService

    def make_client(user):
        client = APIClient()
        token = AuthService.generate_jwt(user)
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        return client

    return make_client
