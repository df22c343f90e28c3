"""
In-memory storage and identities shared by the authorization core tests.
"""
import uuid

from apps.authz.identity import Identity
from apps.authz.types import ResourceKind, Role


ADMIN_ID = uuid.UUID('00000000-0000-0000-0000-000000000001')
ENTREPRENEUR_A = uuid.UUID('00000000-0000-0000-0000-00000000000a')
ENTREPRENEUR_B = uuid.UUID('00000000-0000-0000-0000-00000000000b')
COLLABORATOR_A = uuid.UUID('00000000-0000-0000-0000-0000000000ca')
CUSTOMER_A = uuid.UUID('00000000-0000-0000-0000-0000000000cc')
INACTIVE_ENTREPRENEUR = uuid.UUID('00000000-0000-0000-0000-0000000000de')

GATEWAY_A = uuid.UUID('10000000-0000-0000-0000-00000000000a')
GATEWAY_B = uuid.UUID('10000000-0000-0000-0000-00000000000b')
PRICE_ACTIVE = uuid.UUID('20000000-0000-0000-0000-000000000001')
PRICE_INACTIVE = uuid.UUID('20000000-0000-0000-0000-000000000002')
CUSTOMER_B = uuid.UUID('00000000-0000-0000-0000-0000000000cb')


def add_plan(store, owner, customer, **fields):
    """Add a customer plan row sold by owner to customer."""
    return store.add(
        ResourceKind.CUSTOMER_PLAN, entrepreneur_id=owner, customer_id=customer,
        created_by_id=owner, plan_type='3x', pay_status='pending', **fields
    )


class MemoryStore:
    """Dict-backed load_row collaborator."""

    def __init__(self):
        self.rows = {kind: {} for kind in ResourceKind}
        self.reads = []

    def add(self, kind, **row):
        row.setdefault('id', uuid.uuid4())
        self.rows[kind][str(row['id'])] = row
        return row

    def load_row(self, kind, row_id):
        self.reads.append((kind, row_id))
        row = self.rows[ResourceKind(kind)].get(str(row_id))
        return dict(row) if row is not None else None

    def has_dependents(self, user_id):
        for kind, rows in self.rows.items():
            for row in rows.values():
                if str(row.get('entrepreneur_id')) == str(user_id):
                    return True
                if str(row.get('customer_id')) == str(user_id):
                    return True
        return False


def build_store():
    store = MemoryStore()
    store.add(ResourceKind.USER, id=ADMIN_ID, role='super-admin', entrepreneur_id=None, is_active=True)
    store.add(ResourceKind.USER, id=ENTREPRENEUR_A, role='entrepreneur', entrepreneur_id=None, is_active=True)
    store.add(ResourceKind.USER, id=ENTREPRENEUR_B, role='entrepreneur', entrepreneur_id=None, is_active=True)
    store.add(ResourceKind.USER, id=INACTIVE_ENTREPRENEUR, role='entrepreneur', entrepreneur_id=None, is_active=False)
    store.add(ResourceKind.USER, id=COLLABORATOR_A, role='collaborator', entrepreneur_id=ENTREPRENEUR_A, is_active=True)
    store.add(ResourceKind.USER, id=CUSTOMER_A, role='customer', entrepreneur_id=ENTREPRENEUR_A, is_active=True)
    store.add(ResourceKind.USER, id=CUSTOMER_B, role='customer', entrepreneur_id=ENTREPRENEUR_B, is_active=True)

    store.add(
        ResourceKind.PAYMENT_GATEWAY, id=GATEWAY_A, name='Asaas A', gateway_type='asaas',
        entrepreneur_id=ENTREPRENEUR_A, created_by_id=ENTREPRENEUR_A,
    )
    store.add(
        ResourceKind.PAYMENT_GATEWAY, id=GATEWAY_B, name='Asaas B', gateway_type='asaas',
        entrepreneur_id=ENTREPRENEUR_B, created_by_id=ENTREPRENEUR_B,
    )
    store.add(ResourceKind.PRICE_TABLE, id=PRICE_ACTIVE, title='Basic', is_active=True)
    store.add(ResourceKind.PRICE_TABLE, id=PRICE_INACTIVE, title='Legacy', is_active=False)
    return store


SUPER_ADMIN = Identity(id=ADMIN_ID, role=Role.SUPER_ADMIN, tenant_id=None)
OWNER_A = Identity(id=ENTREPRENEUR_A, role=Role.ENTREPRENEUR, tenant_id=ENTREPRENEUR_A)
OWNER_B = Identity(id=ENTREPRENEUR_B, role=Role.ENTREPRENEUR, tenant_id=ENTREPRENEUR_B)
STAFF_A = Identity(id=COLLABORATOR_A, role=Role.COLLABORATOR, tenant_id=ENTREPRENEUR_A)
BUYER_A = Identity(id=CUSTOMER_A, role=Role.CUSTOMER, tenant_id=ENTREPRENEUR_A)
VISITOR = Identity.anonymous()

ALL_IDENTITIES = (SUPER_ADMIN, OWNER_A, OWNER_B, STAFF_A, BUYER_A, VISITOR)
