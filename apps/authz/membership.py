"""
Tenant membership rules for user rows and the customers rows are sold to.

Shared by the mutation guard (user creation) and the role reassignment
operation. load_row is the same storage collaborator the guard uses.
"""
from apps.authz.exceptions import InvalidArgument
from apps.authz.types import ResourceKind, Role, same_id


def require_entrepreneur(load_row, entrepreneur_id):
    """
    Return the user row for entrepreneur_id, or raise InvalidArgument.

    The row must exist, hold the entrepreneur role and be active.
    """
    if entrepreneur_id in (None, ''):
        raise InvalidArgument('entrepreneur_id is required')

    row = load_row(ResourceKind.USER, entrepreneur_id)
    if (
        row is None
        or Role.coerce(row.get('role')) != Role.ENTREPRENEUR
        or not row.get('is_active', True)
    ):
        raise InvalidArgument('entrepreneur_id does not reference an active entrepreneur')
    return row


def validate_new_member(load_row, role, entrepreneur_id):
    """
    Check the role/tenant combination of a user about to be created.

    Returns:
        The owner id to store (None for top-level roles)
    """
    role = Role.coerce(role)
    if role is None or role not in Role.assignable():
        raise InvalidArgument('role must be one of: ' + ', '.join(r.value for r in Role.assignable()))

    if role in Role.tenant_members():
        owner = require_entrepreneur(load_row, entrepreneur_id)
        return owner['id']

    if entrepreneur_id not in (None, ''):
        raise InvalidArgument(f"A user with role '{role.value}' cannot belong to an entrepreneur")
    return None


def resolve_reassigned_owner(load_row, target, new_role, requested_entrepreneur_id=None):
    """
    Work out the entrepreneur_id a user keeps after a role change.

    Members keep their existing entrepreneur; a different requested one is
    refused. A top-level user moving into a member role needs an explicit,
    valid entrepreneur other than itself.
    """
    if new_role not in Role.tenant_members():
        return None

    current = target.get('entrepreneur_id')
    if current is not None:
        if requested_entrepreneur_id not in (None, '') and not same_id(current, requested_entrepreneur_id):
            raise InvalidArgument('Tenant membership cannot be changed')
        return current

    if same_id(requested_entrepreneur_id, target.get('id')):
        raise InvalidArgument('A user cannot belong to itself')
    owner = require_entrepreneur(load_row, requested_entrepreneur_id)
    return owner['id']


def require_customer(load_row, customer_id, entrepreneur_id):
    """
    Return the user row for customer_id, or raise InvalidArgument.

    The row must be an active customer of entrepreneur_id.
    """
    if customer_id in (None, ''):
        raise InvalidArgument('customer_id is required')

    row = load_row(ResourceKind.USER, customer_id)
    if (
        row is None
        or Role.coerce(row.get('role')) != Role.CUSTOMER
        or not same_id(row.get('entrepreneur_id'), entrepreneur_id)
        or not row.get('is_active', True)
    ):
        raise InvalidArgument('customer_id does not reference an active customer of this entrepreneur')
    return row
