"""
Tests for the tenant scope resolver.
"""
import uuid

import pytest

from apps.authz.identity import Identity
from apps.authz.policy import TENANT_KINDS
from apps.authz.scope import OwnerSource, Predicate, scope_for
from apps.authz.types import ResourceKind, Role

from apps.authz.tests.factories import (
    BUYER_A, ENTREPRENEUR_A, OWNER_A, STAFF_A, SUPER_ADMIN, VISITOR,
)


class TestPredicate:
    """Test in-memory predicate evaluation."""

    def test_all_and_none(self):
        assert Predicate.all().matches({'id': 1}) is True
        assert Predicate.none().matches({'id': 1}) is False
        assert Predicate.all().matches(None) is False

    def test_equals_compares_ids_by_value(self):
        owner = uuid.uuid4()
        predicate = Predicate.equals('entrepreneur_id', owner)

        assert predicate.matches({'entrepreneur_id': owner})
        assert predicate.matches({'entrepreneur_id': str(owner)})
        assert not predicate.matches({'entrepreneur_id': uuid.uuid4()})
        assert not predicate.matches({'name': 'no owner'})

    def test_equals_on_objects(self):
        class Row:
            entrepreneur_id = 7

        assert Predicate.equals('entrepreneur_id', 7).matches(Row())
        assert not Predicate.equals('entrepreneur_id', 8).matches(Row())

    def test_boolean_match_is_strict(self):
        predicate = Predicate.equals('is_active', True)

        assert predicate.matches({'is_active': True})
        assert not predicate.matches({'is_active': False})
        assert not predicate.matches({'is_active': 1})

    def test_equals_none_matches_nothing(self):
        assert Predicate.equals('entrepreneur_id', None) == Predicate.none()


class TestScopeFor:
    """Test scope_for() per role and kind style."""

    @pytest.mark.parametrize('kind', TENANT_KINDS)
    def test_super_admin_sees_all_tenants(self, kind):
        scope = scope_for(SUPER_ADMIN, kind)

        assert scope.predicate.matches_all
        assert scope.owner_source == OwnerSource.EXPLICIT

    @pytest.mark.parametrize('kind', TENANT_KINDS)
    def test_entrepreneur_is_implicit_owner(self, kind):
        scope = scope_for(OWNER_A, kind)

        assert scope.predicate == Predicate.equals('entrepreneur_id', ENTREPRENEUR_A)
        assert scope.owner_source == OwnerSource.IMPLICIT
        assert scope.owner_value == ENTREPRENEUR_A

    @pytest.mark.parametrize('identity', [STAFF_A, BUYER_A])
    def test_members_see_their_tenant(self, identity):
        scope = scope_for(identity, ResourceKind.COLLABORATOR)

        assert scope.predicate == Predicate.equals('entrepreneur_id', ENTREPRENEUR_A)
        assert scope.owner_source == OwnerSource.NOT_APPLICABLE

    def test_member_without_tenant_sees_nothing(self):
        orphan = Identity(id=uuid.uuid4(), role=Role.COLLABORATOR, tenant_id=None)

        assert scope_for(orphan, ResourceKind.PAYMENT_GATEWAY).predicate.matches_nothing

    def test_visitor_sees_no_tenant_rows(self):
        assert scope_for(VISITOR, ResourceKind.WHATSAPP_INSTANCE).predicate.matches_nothing

    def test_price_tables(self):
        admin_scope = scope_for(SUPER_ADMIN, ResourceKind.PRICE_TABLE)
        visitor_scope = scope_for(VISITOR, ResourceKind.PRICE_TABLE)

        assert admin_scope.predicate.matches_all
        assert admin_scope.owner_source == OwnerSource.UNOWNED
        assert visitor_scope.predicate == Predicate.equals('is_active', True)
        assert visitor_scope.owner_source == OwnerSource.UNOWNED

    def test_users_see_themselves(self):
        scope = scope_for(STAFF_A, ResourceKind.USER)

        assert scope.predicate.matches({'id': STAFF_A.id})
        assert not scope.predicate.matches({'id': ENTREPRENEUR_A})
        assert scope_for(SUPER_ADMIN, ResourceKind.USER).predicate.matches_all
        assert scope_for(VISITOR, ResourceKind.USER).predicate.matches_nothing

    @pytest.mark.parametrize('identity,kind', [
        (None, ResourceKind.COLLABORATOR),
        (SUPER_ADMIN, 'invoice'),
        (Identity(id=1, role='root', tenant_id=None), ResourceKind.COLLABORATOR),
    ])
    def test_never_raises(self, identity, kind):
        scope = scope_for(identity, kind)

        assert scope.predicate.matches_nothing


class TestCustomerScope:
    """Test rows shared between a tenant and one of its customers."""

    def test_customer_matches_own_rows(self):
        scope = scope_for(BUYER_A, ResourceKind.CUSTOMER_PLAN)

        assert scope.predicate == Predicate.equals('customer_id', BUYER_A.id)
        assert scope.owner_source == OwnerSource.NOT_APPLICABLE

    def test_staff_use_tenant_scope(self):
        assert scope_for(STAFF_A, ResourceKind.CUSTOMER_PLAN) == scope_for(STAFF_A, ResourceKind.ACCOUNTING_ENTRY)
        assert scope_for(OWNER_A, ResourceKind.CUSTOMER_PLAN).owner_source == OwnerSource.IMPLICIT
        assert scope_for(SUPER_ADMIN, ResourceKind.CUSTOMER_PLAN).owner_source == OwnerSource.EXPLICIT

    def test_customer_without_tenant_sees_nothing(self):
        orphan = Identity(id=uuid.uuid4(), role=Role.CUSTOMER, tenant_id=None)

        assert scope_for(orphan, ResourceKind.CUSTOMER_PLAN).predicate.matches_nothing

    def test_visitor_sees_nothing(self):
        assert scope_for(VISITOR, ResourceKind.CUSTOMER_PLAN).predicate.matches_nothing
