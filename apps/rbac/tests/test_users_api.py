"""
Tests for user management endpoints.

Users are self-scoped: super-admins manage every user, everyone else only
sees and edits their own row.
"""
import uuid

import pytest
from rest_framework import status

from apps.rbac.models import AuditLog, User


def new_user_payload(**overrides):
    data = {
        'email': 'new.member@example.com',
        'name': 'New Member',
        'password': 'StrongPass123!',
        'role': 'collaborator',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestUserList:
    """Test GET /v1/users/."""

    def test_super_admin_sees_everyone(self, auth_client, super_admin, entrepreneur, collaborator, customer):
        response = auth_client(super_admin).get('/v1/users/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 4

    def test_entrepreneur_sees_only_self(self, auth_client, entrepreneur, collaborator):
        response = auth_client(entrepreneur).get('/v1/users/')

        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == str(entrepreneur.id)

    def test_filter_by_entrepreneur(self, auth_client, super_admin, entrepreneur, collaborator, customer):
        response = auth_client(super_admin).get('/v1/users/', {'entrepreneur_id': str(entrepreneur.id)})

        assert {row['email'] for row in response.data['results']} == {'staff@example.com', 'client@example.com'}

    def test_filter_by_malformed_entrepreneur(self, auth_client, super_admin, collaborator):
        response = auth_client(super_admin).get('/v1/users/', {'entrepreneur_id': 'nope'})

        assert response.data['count'] == 0

    def test_filter_by_role(self, auth_client, super_admin, entrepreneur, other_entrepreneur):
        response = auth_client(super_admin).get('/v1/users/', {'role': 'entrepreneur'})

        assert response.data['count'] == 2

    def test_anonymous_rejected(self, api_client, db):
        response = api_client.get('/v1/users/')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestUserCreate:
    """Test POST /v1/users/."""

    def test_super_admin_creates_member(self, auth_client, super_admin, entrepreneur):
        response = auth_client(super_admin).post(
            '/v1/users/', new_user_payload(entrepreneur_id=str(entrepreneur.id)), format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['entrepreneur_id'] == str(entrepreneur.id)
        assert 'password' not in response.data

        user = User.objects.get(email='new.member@example.com')
        assert user.check_password('StrongPass123!')
        assert AuditLog.objects.filter(action='user.created', target_id=user.id).exists()

    def test_super_admin_creates_entrepreneur(self, auth_client, super_admin):
        response = auth_client(super_admin).post(
            '/v1/users/', new_user_payload(role='entrepreneur'), format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['entrepreneur_id'] is None

    def test_member_requires_entrepreneur(self, auth_client, super_admin):
        response = auth_client(super_admin).post('/v1/users/', new_user_payload(), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'INVALID_ARGUMENT'

    def test_member_of_non_entrepreneur_rejected(self, auth_client, super_admin, customer):
        response = auth_client(super_admin).post(
            '/v1/users/', new_user_payload(entrepreneur_id=str(customer.id)), format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'INVALID_ARGUMENT'

    def test_top_level_role_cannot_have_entrepreneur(self, auth_client, super_admin, entrepreneur):
        response = auth_client(super_admin).post(
            '/v1/users/',
            new_user_payload(role='entrepreneur', entrepreneur_id=str(entrepreneur.id)),
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_visitor_role_not_assignable(self, auth_client, super_admin):
        response = auth_client(super_admin).post(
            '/v1/users/', new_user_payload(role='visitor'), format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'VALIDATION_ERROR'

    def test_entrepreneur_cannot_create_users(self, auth_client, entrepreneur):
        response = auth_client(entrepreneur).post(
            '/v1/users/', new_user_payload(entrepreneur_id=str(entrepreneur.id)), format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not User.objects.filter(email='new.member@example.com').exists()

    def test_forbidden_before_validation(self, auth_client, customer):
        response = auth_client(customer).post('/v1/users/', {}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_duplicate_live_email_rejected(self, auth_client, super_admin, entrepreneur, customer):
        response = auth_client(super_admin).post(
            '/v1/users/',
            new_user_payload(email='Client@example.com', entrepreneur_id=str(entrepreneur.id)),
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'VALIDATION_ERROR'
        assert 'email' in response.data['details']

    def test_email_of_deleted_user_can_be_reused(self, auth_client, super_admin, entrepreneur, customer):
        client = auth_client(super_admin)
        assert client.delete(f'/v1/users/{customer.id}').status_code == status.HTTP_204_NO_CONTENT

        response = client.post(
            '/v1/users/',
            new_user_payload(email='client@example.com', role='customer', entrepreneur_id=str(entrepreneur.id)),
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['id'] != str(customer.id)
        assert User.objects.get(email='client@example.com').role == 'customer'
        assert User.objects_with_deleted.filter(email='client@example.com').count() == 2


@pytest.mark.django_db
class TestUserDetail:
    """Test GET/PATCH/DELETE /v1/users/{id}."""

    def test_read_self(self, auth_client, customer):
        response = auth_client(customer).get(f'/v1/users/{customer.id}')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == 'client@example.com'

    def test_other_user_is_not_found(self, auth_client, customer, entrepreneur):
        response = auth_client(customer).get(f'/v1/users/{entrepreneur.id}')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_missing_and_foreign_look_the_same(self, auth_client, customer, entrepreneur):
        client = auth_client(customer)

        foreign = client.get(f'/v1/users/{entrepreneur.id}')
        missing = client.get(f'/v1/users/{uuid.uuid4()}')

        assert foreign.data['error'] == missing.data['error']

    def test_malformed_id(self, auth_client, super_admin):
        response = auth_client(super_admin).get('/v1/users/not-a-uuid')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_own_name(self, auth_client, collaborator):
        response = auth_client(collaborator).patch(
            f'/v1/users/{collaborator.id}', {'name': 'Renamed'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Renamed'
        collaborator.refresh_from_db()
        assert collaborator.name == 'Renamed'

    def test_update_password(self, auth_client, api_client, collaborator):
        auth_client(collaborator).patch(
            f'/v1/users/{collaborator.id}', {'password': 'AnotherPass456!'}, format='json'
        )

        response = api_client.post(
            '/v1/auth/login',
            {'email': 'staff@example.com', 'password': 'AnotherPass456!'},
            format='json'
        )
        assert response.status_code == status.HTTP_200_OK

    def test_cannot_change_own_role(self, auth_client, customer):
        response = auth_client(customer).patch(
            f'/v1/users/{customer.id}', {'role': 'super-admin'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        customer.refresh_from_db()
        assert customer.role == 'customer'

    def test_same_role_is_accepted(self, auth_client, customer):
        response = auth_client(customer).patch(
            f'/v1/users/{customer.id}', {'role': 'customer', 'name': 'Same'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK

    def test_cannot_move_to_other_tenant(self, auth_client, collaborator, other_entrepreneur):
        response = auth_client(collaborator).patch(
            f'/v1/users/{collaborator.id}',
            {'entrepreneur_id': str(other_entrepreneur.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'INVALID_ARGUMENT'

    def test_cannot_update_other_user(self, auth_client, collaborator, customer):
        response = auth_client(collaborator).patch(
            f'/v1/users/{customer.id}', {'name': 'Hijacked'}, format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_duplicate_email_conflict(self, auth_client, collaborator, customer):
        response = auth_client(collaborator).patch(
            f'/v1/users/{collaborator.id}', {'email': 'client@example.com'}, format='json'
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_only_super_admin_deletes(self, auth_client, customer):
        response = auth_client(customer).delete(f'/v1/users/{customer.id}')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_super_admin_deletes_member(self, auth_client, super_admin, customer):
        response = auth_client(super_admin).delete(f'/v1/users/{customer.id}')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(pk=customer.pk).exists()
        assert User.objects_with_deleted.filter(pk=customer.pk).exists()
        assert AuditLog.objects.filter(action='user.deleted', target_id=customer.id).exists()

    def test_entrepreneur_with_dependents_not_deleted(self, auth_client, super_admin, entrepreneur, collaborator):
        response = auth_client(super_admin).delete(f'/v1/users/{entrepreneur.id}')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert User.objects.filter(pk=entrepreneur.pk).exists()
