"""
Tests for collaborator endpoints.
"""
import pytest
from rest_framework import status

from apps.collaborators.models import Collaborator


def collaborator_payload(**overrides):
    data = {
        'name': 'Ana Souza',
        'email': 'Ana@Example.com',
        'position': 'Designer',
        'department': 'Marketing',
        'skills': ['figma', 'branding'],
    }
    data.update(overrides)
    return data


@pytest.fixture
def staff_a(entrepreneur):
    return Collaborator.objects.create(
        entrepreneur=entrepreneur, name='Bruno', email='bruno@example.com',
        position='Developer', department='Engineering',
    )


@pytest.fixture
def staff_b(other_entrepreneur):
    return Collaborator.objects.create(
        entrepreneur=other_entrepreneur, name='Carla', email='carla@example.com',
        position='Sales', department='Sales',
    )


@pytest.mark.django_db
class TestCollaboratorCreate:
    """Test POST /v1/collaborators/."""

    def test_create(self, auth_client, entrepreneur):
        response = auth_client(entrepreneur).post('/v1/collaborators/', collaborator_payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['email'] == 'ana@example.com'
        assert response.data['skills'] == ['figma', 'branding']
        assert response.data['entrepreneur_id'] == str(entrepreneur.id)

    def test_duplicate_email_in_tenant_conflicts(self, auth_client, entrepreneur, staff_a):
        response = auth_client(entrepreneur).post(
            '/v1/collaborators/', collaborator_payload(email='bruno@example.com'), format='json'
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['code'] == 'CONFLICT'

    def test_same_email_in_other_tenant_is_fine(self, auth_client, other_entrepreneur, staff_a):
        response = auth_client(other_entrepreneur).post(
            '/v1/collaborators/', collaborator_payload(email='bruno@example.com'), format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_missing_position(self, auth_client, entrepreneur):
        payload = collaborator_payload()
        del payload['position']

        response = auth_client(entrepreneur).post('/v1/collaborators/', payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'position' in response.data['details']

    def test_customer_cannot_create(self, auth_client, customer):
        response = auth_client(customer).post('/v1/collaborators/', collaborator_payload(), format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestCollaboratorAccess:
    """Test reads, filters and tenant isolation."""

    def test_list_own_tenant(self, auth_client, entrepreneur, staff_a, staff_b):
        response = auth_client(entrepreneur).get('/v1/collaborators/')

        assert [row['id'] for row in response.data['results']] == [str(staff_a.id)]

    def test_collaborator_role_reads(self, auth_client, collaborator, staff_a, staff_b):
        response = auth_client(collaborator).get(f'/v1/collaborators/{staff_a.id}')

        assert response.status_code == status.HTTP_200_OK

    def test_collaborator_role_cannot_delete(self, auth_client, collaborator, staff_a):
        response = auth_client(collaborator).delete(f'/v1/collaborators/{staff_a.id}')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_search(self, auth_client, entrepreneur, staff_a):
        Collaborator.objects.create(
            entrepreneur=entrepreneur, name='Daniela', email='dani@example.com', position='Support',
        )

        response = auth_client(entrepreneur).get('/v1/collaborators/', {'search': 'dan'})

        assert [row['name'] for row in response.data['results']] == ['Daniela']

    def test_department_filter(self, auth_client, entrepreneur, staff_a):
        response = auth_client(entrepreneur).get('/v1/collaborators/', {'department': 'Sales'})

        assert response.data['count'] == 0

    def test_update_email_conflict(self, auth_client, entrepreneur, staff_a):
        other = Collaborator.objects.create(
            entrepreneur=entrepreneur, name='Eva', email='eva@example.com', position='Finance',
        )

        response = auth_client(entrepreneur).patch(
            f'/v1/collaborators/{other.id}', {'email': 'bruno@example.com'}, format='json'
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_update_keeps_unchanged_email(self, auth_client, entrepreneur, staff_a):
        response = auth_client(entrepreneur).put(
            f'/v1/collaborators/{staff_a.id}',
            {'name': 'Bruno Lima', 'email': 'bruno@example.com', 'position': 'Lead Developer'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['position'] == 'Lead Developer'

    def test_foreign_row_not_found(self, auth_client, entrepreneur, staff_b):
        response = auth_client(entrepreneur).put(
            f'/v1/collaborators/{staff_b.id}',
            {'name': 'X', 'email': 'x@example.com', 'position': 'X'},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
