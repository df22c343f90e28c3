"""
Tests for IdentityContextMiddleware.

The identity is rebuilt from the stored user on every request, so changes to
a user row take effect without issuing a new token.
"""
import pytest
from rest_framework import status

from apps.rbac.models import User
from apps.rbac.services import AuthService


@pytest.mark.django_db
class TestIdentityContextMiddleware:
    """Test bearer token resolution."""

    def test_non_bearer_scheme_rejected(self, api_client, entrepreneur):
        api_client.credentials(HTTP_AUTHORIZATION='Basic b3duZXI6cGFzcw==')

        response = api_client.get('/v1/navigation')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response['WWW-Authenticate'] == 'Bearer'
        assert response.json()['error']['code'] == 'UNAUTHENTICATED'

    def test_garbage_token_rejected(self, api_client, db):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')

        response = api_client.get('/v1/navigation')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_public_paths_skip_resolution(self, api_client, db):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')

        response = api_client.get('/v1/public/price-tables')

        assert response.status_code == status.HTTP_200_OK

    def test_deactivated_user_loses_access(self, auth_client, entrepreneur):
        client = auth_client(entrepreneur)
        User.objects.filter(pk=entrepreneur.pk).update(is_active=False)

        response = client.get('/v1/navigation')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_deleted_user_loses_access(self, auth_client, entrepreneur):
        client = auth_client(entrepreneur)
        User.objects.filter(pk=entrepreneur.pk).delete()

        response = client.get('/v1/navigation')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_role_change_applies_to_existing_token(self, auth_client, other_entrepreneur, entrepreneur):
        client = auth_client(other_entrepreneur)
        User.objects.filter(pk=other_entrepreneur.pk).update(role='collaborator', entrepreneur=entrepreneur)

        response = client.get('/v1/navigation')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['role'] == 'collaborator'

    def test_member_of_inactive_entrepreneur_rejected(self, auth_client, collaborator, entrepreneur):
        client = auth_client(collaborator)
        User.objects.filter(pk=entrepreneur.pk).update(is_active=False)

        response = client.get('/v1/navigation')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unknown_stored_role_rejected(self, auth_client, customer):
        client = auth_client(customer)
        User.objects.filter(pk=customer.pk).update(role='owner')

        response = client.get('/v1/navigation')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestResolveIdentity:
    """Test AuthService.resolve_identity directly."""

    def test_entrepreneur_is_own_tenant(self, entrepreneur):
        identity, user = AuthService.resolve_identity(AuthService.generate_jwt(entrepreneur))

        assert user == entrepreneur
        assert identity.id == entrepreneur.id
        assert identity.tenant_id == entrepreneur.id

    def test_customer_tenant_is_parent(self, customer, entrepreneur):
        identity, _ = AuthService.resolve_identity(AuthService.generate_jwt(customer))

        assert identity.role.value == 'customer'
        assert identity.tenant_id == entrepreneur.id
