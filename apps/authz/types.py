"""
Shared vocabulary for the authorization core.

Roles, resource kinds and operations are closed enumerations. Every table in
this package is keyed by them, so adding a member here without updating the
policy and scope tables is caught by the startup validation in apps.py.
"""
from enum import Enum


class Role(str, Enum):
    """Roles an identity can hold."""

    SUPER_ADMIN = 'super-admin'
    ENTREPRENEUR = 'entrepreneur'
    COLLABORATOR = 'collaborator'
    CUSTOMER = 'customer'
    # Unauthenticated visitor of public pages. Never stored on a user row.
    VISITOR = 'visitor'

    @classmethod
    def assignable(cls):
        """Roles that may be stored on a user record."""
        return (cls.SUPER_ADMIN, cls.ENTREPRENEUR, cls.COLLABORATOR, cls.CUSTOMER)

    @classmethod
    def tenant_members(cls):
        """Roles that belong to exactly one entrepreneur."""
        return (cls.COLLABORATOR, cls.CUSTOMER)

    @classmethod
    def coerce(cls, value):
        """Return the Role for value, or None if value is not a declared role."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class ResourceKind(str, Enum):
    """Kinds of rows the dashboard stores."""

    PAYMENT_GATEWAY = 'payment_gateway'
    COLLABORATOR = 'collaborator'
    WHATSAPP_INSTANCE = 'whatsapp_instance'
    ACCOUNTING_ENTRY = 'accounting_entry'
    CUSTOMER_PLAN = 'customer_plan'
    PRICE_TABLE = 'price_table'
    USER = 'user'


class Operation(str, Enum):
    READ = 'read'
    CREATE = 'create'
    UPDATE = 'update'
    DELETE = 'delete'

    @classmethod
    def mutations(cls):
        return (cls.CREATE, cls.UPDATE, cls.DELETE)


# Column names shared by every tenant-scoped row.
OWNER_FIELD = 'entrepreneur_id'
CREATOR_FIELD = 'created_by_id'

# Customer a customer-scoped row was sold to.
CUSTOMER_FIELD = 'customer_id'

# Keys under which a caller might try to smuggle an owner value in.
OWNER_FIELD_ALIASES = (OWNER_FIELD, 'entrepreneur', 'tenant_id')

# Never accepted from the caller.
SYSTEM_FIELDS = ('id', 'created_at', 'updated_at', 'deleted_at')


def same_id(left, right):
    """
    Compare two identifiers by value.

    Ids travel as UUID objects, ints, or their string forms depending on
    whether they came from the ORM, a URL or a JSON body.
    """
    if left is None or right is None:
        return left is None and right is None
    return left == right or str(left) == str(right)
