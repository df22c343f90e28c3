"""
Tests for User and AuditLog models.
"""
import pytest
from django.test import RequestFactory

from apps.rbac.models import AuditLog, User


@pytest.mark.django_db
class TestUserModel:
    """Test User behaviour used by the authorization layer."""

    def test_create_user_hashes_password(self):
        user = User.objects.create_user(email='Person@Example.COM', password='StrongPass123!')

        assert user.email == 'Person@example.com'
        assert user.password_hash != 'StrongPass123!'
        assert user.check_password('StrongPass123!')
        assert user.role == 'customer'

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='StrongPass123!')

    def test_create_superuser(self):
        user = User.objects.create_superuser(email='root@example.com', password='StrongPass123!')

        assert user.role == 'super-admin'
        assert user.entrepreneur_id is None
        assert user.is_staff

    def test_tenant_id(self, super_admin, entrepreneur, collaborator):
        assert super_admin.tenant_id is None
        assert entrepreneur.tenant_id == entrepreneur.id
        assert collaborator.tenant_id == entrepreneur.id

    def test_only_super_admin_is_staff(self, entrepreneur):
        assert not entrepreneur.is_staff
        assert not entrepreneur.has_perm('rbac.view_user')

    def test_by_email(self, entrepreneur):
        assert User.objects.by_email('owner@EXAMPLE.com') == entrepreneur
        assert User.objects.by_email('missing@example.com') is None

    def test_soft_delete(self, customer):
        customer.delete()

        assert not User.objects.filter(pk=customer.pk).exists()
        assert User.objects_with_deleted.get(pk=customer.pk).is_deleted

    def test_entrepreneurs(self, entrepreneur, other_entrepreneur, collaborator):
        other_entrepreneur.is_active = False
        other_entrepreneur.save()

        assert list(User.objects.entrepreneurs()) == [entrepreneur]


@pytest.mark.django_db
class TestAuditLog:
    """Test audit trail writes."""

    def test_log_action_with_request(self, entrepreneur):
        request = RequestFactory().post(
            '/v1/collaborators/', HTTP_X_FORWARDED_FOR='203.0.113.7, 10.0.0.1', HTTP_USER_AGENT='pytest'
        )
        request.request_id = 'req-42'

        entry = AuditLog.log_action(
            action='collaborator.created',
            user=entrepreneur,
            entrepreneur_id=entrepreneur.id,
            target_type='Collaborator',
            diff={'fields': ['name']},
            request=request,
        )

        assert entry.ip_address == '203.0.113.7'
        assert entry.user_agent == 'pytest'
        assert entry.request_id == 'req-42'
        assert list(AuditLog.objects.for_entrepreneur(entrepreneur.id)) == [entry]

    def test_anonymous_user_is_not_recorded(self, db):
        from django.contrib.auth.models import AnonymousUser

        entry = AuditLog.log_action(action='user.login', user=AnonymousUser(), target_type='User')

        assert entry.user is None

    def test_failures_are_swallowed(self, db):
        entry = AuditLog.log_action(action='user.login', target_type='User', entrepreneur_id='not-a-uuid')

        assert entry is None
