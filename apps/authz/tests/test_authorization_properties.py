"""
Property-based tests for the authorization core.

Covers tenant isolation, owner stamping on create, the re-parenting block on
update, totality of the policy table and determinism of denials.
"""
import uuid

from hypothesis import given, settings, strategies as st

from apps.authz.decisions import Allow, DenialReason, Deny
from apps.authz.facade import authorize
from apps.authz.identity import Identity
from apps.authz.policy import TENANT_KINDS, permits
from apps.authz.types import Operation, ResourceKind, Role

from apps.authz.tests.factories import MemoryStore


TENANT_KIND = st.sampled_from(TENANT_KINDS)
OPERATION = st.sampled_from(list(Operation))
ROLE = st.sampled_from(list(Role))
FIELD_VALUE = st.one_of(st.text(max_size=20), st.integers(), st.booleans(), st.none())


@st.composite
def two_tenants(draw):
    """
    A store with two entrepreneurs and one row of kind for each.

    Returns (store, kind, tenant_a, tenant_b, row_a, row_b).
    """
    store = MemoryStore()
    kind = draw(TENANT_KIND)
    tenant_a = store.add(ResourceKind.USER, role='entrepreneur', entrepreneur_id=None, is_active=True)
    tenant_b = store.add(ResourceKind.USER, role='entrepreneur', entrepreneur_id=None, is_active=True)
    row_a = store.add(kind, name=draw(st.text(max_size=20)), entrepreneur_id=tenant_a['id'])
    row_b = store.add(kind, name=draw(st.text(max_size=20)), entrepreneur_id=tenant_b['id'])
    return store, kind, tenant_a, tenant_b, row_a, row_b


@st.composite
def tenant_identity(draw, tenant_id):
    role = draw(st.sampled_from([Role.ENTREPRENEUR, Role.COLLABORATOR, Role.CUSTOMER]))
    if role == Role.ENTREPRENEUR:
        return Identity(id=tenant_id, role=role, tenant_id=tenant_id)
    return Identity(id=uuid.uuid4(), role=role, tenant_id=tenant_id)


class TestTenantIsolation:
    """No non-admin identity can reach a row of another tenant."""

    @given(data=st.data(), operation=st.sampled_from([Operation.READ, Operation.UPDATE, Operation.DELETE]))
    @settings(max_examples=100)
    def test_foreign_rows_are_never_allowed(self, data, operation):
        store, kind, tenant_a, tenant_b, row_a, row_b = data.draw(two_tenants())
        identity = data.draw(tenant_identity(tenant_a['id']))

        decision = authorize(
            identity, kind, operation,
            candidate_row={'id': row_b['id'], 'name': 'changed'},
            load_row=store.load_row,
        )

        assert isinstance(decision, Deny)
        assert decision.reason in (DenialReason.NOT_FOUND, DenialReason.FORBIDDEN)

    @given(data=st.data())
    @settings(max_examples=100)
    def test_listing_predicate_excludes_other_tenants(self, data):
        store, kind, tenant_a, tenant_b, row_a, row_b = data.draw(two_tenants())
        identity = data.draw(tenant_identity(tenant_a['id']))

        decision = authorize(identity, kind, Operation.READ)

        if decision.allowed:
            assert decision.predicate.matches(row_a)
            assert not decision.predicate.matches(row_b)
        else:
            assert identity.role == Role.CUSTOMER


class TestCreationStamping:
    """Rows created by an entrepreneur always belong to that entrepreneur."""

    @given(
        data=st.data(),
        extra=st.dictionaries(st.sampled_from(['name', 'email', 'phone', 'department']), FIELD_VALUE),
        planted=st.dictionaries(
            st.sampled_from(['entrepreneur_id', 'entrepreneur', 'tenant_id', 'created_by_id', 'id']),
            st.one_of(st.uuids(), st.text(max_size=10), st.none()),
        ),
    )
    @settings(max_examples=100)
    def test_owner_and_creator_are_derived(self, data, extra, planted):
        store, kind, tenant_a, tenant_b, row_a, row_b = data.draw(two_tenants())
        identity = Identity(id=tenant_a['id'], role=Role.ENTREPRENEUR, tenant_id=tenant_a['id'])

        decision = authorize(
            identity, kind, Operation.CREATE,
            candidate_row={**extra, **planted}, load_row=store.load_row,
        )

        assert isinstance(decision, Allow)
        assert decision.final_row['entrepreneur_id'] == tenant_a['id']
        assert decision.final_row['created_by_id'] == tenant_a['id']
        assert 'id' not in decision.final_row
        assert 'entrepreneur' not in decision.final_row
        assert 'tenant_id' not in decision.final_row
        for key, value in extra.items():
            assert decision.final_row[key] == value


class TestReparentingBlock:
    """Updates never move a row to another owner, whoever asks."""

    @given(data=st.data(), alias=st.sampled_from(['entrepreneur_id', 'entrepreneur', 'tenant_id']))
    @settings(max_examples=100)
    def test_owner_change_is_rejected(self, data, alias):
        store, kind, tenant_a, tenant_b, row_a, row_b = data.draw(two_tenants())
        identity = data.draw(st.sampled_from([
            Identity(id=uuid.uuid4(), role=Role.SUPER_ADMIN, tenant_id=None),
            Identity(id=tenant_a['id'], role=Role.ENTREPRENEUR, tenant_id=tenant_a['id']),
        ]))

        decision = authorize(
            identity, kind, Operation.UPDATE,
            candidate_row={'id': row_a['id'], alias: tenant_b['id']},
            load_row=store.load_row,
        )

        assert decision == Deny(DenialReason.INVALID_ARGUMENT, 'Owner cannot be changed')


class TestPolicyTotality:
    """permits() answers every combination without raising."""

    @given(
        role=st.one_of(ROLE, st.text(max_size=12)),
        kind=st.one_of(st.sampled_from(list(ResourceKind)), st.text(max_size=12)),
        operation=st.one_of(OPERATION, st.text(max_size=12)),
    )
    def test_permits_is_total(self, role, kind, operation):
        result = permits(role, kind, operation)

        assert result in (True, False)
        if Role.coerce(role) is None:
            assert result is False


class TestIdempotentDenial:
    """Equal inputs give equal decisions."""

    @given(data=st.data(), role=ROLE, operation=OPERATION)
    @settings(max_examples=100)
    def test_repeated_calls_agree(self, data, role, operation):
        store, kind, tenant_a, tenant_b, row_a, row_b = data.draw(two_tenants())
        identity = Identity(
            id=tenant_a['id'] if role == Role.ENTREPRENEUR else uuid.uuid4(),
            role=role,
            tenant_id=tenant_a['id'] if role != Role.SUPER_ADMIN else None,
        )
        candidate = {'name': 'x'} if operation == Operation.CREATE else {'id': row_b['id']}

        first = authorize(identity, kind, operation, candidate_row=candidate, load_row=store.load_row)
        second = authorize(identity, kind, operation, candidate_row=candidate, load_row=store.load_row)

        assert first == second
