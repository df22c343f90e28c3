"""
Role policy table.

Static, declarative mapping from role to resource kind to the operations the
role may perform. Scoping (which rows) is handled separately by
apps.authz.scope; this table only answers "may this role do this at all".
"""
from types import MappingProxyType

from apps.authz.exceptions import PolicyConfigurationError
from apps.authz.types import Operation, ResourceKind, Role

CRUD = frozenset(Operation)
READ_ONLY = frozenset({Operation.READ})
READ_UPDATE = frozenset({Operation.READ, Operation.UPDATE})
NONE = frozenset()

TENANT_KINDS = (
    ResourceKind.PAYMENT_GATEWAY,
    ResourceKind.COLLABORATOR,
    ResourceKind.WHATSAPP_INSTANCE,
    ResourceKind.ACCOUNTING_ENTRY,
)

# Tenant rows that also name the customer they belong to. Staff see them like
# any tenant row; a customer sees only its own.
CUSTOMER_KINDS = (
    ResourceKind.CUSTOMER_PLAN,
)

OWNED_KINDS = TENANT_KINDS + CUSTOMER_KINDS


def _row(tenant_ops, price_table_ops, user_ops, customer_ops=None):
    row = {kind: tenant_ops for kind in TENANT_KINDS}
    for kind in CUSTOMER_KINDS:
        row[kind] = tenant_ops if customer_ops is None else customer_ops
    row[ResourceKind.PRICE_TABLE] = price_table_ops
    row[ResourceKind.USER] = user_ops
    return MappingProxyType(row)


ROLE_POLICY = MappingProxyType({
    Role.SUPER_ADMIN: _row(CRUD, CRUD, CRUD),
    Role.ENTREPRENEUR: _row(CRUD, READ_ONLY, READ_UPDATE),
    Role.COLLABORATOR: _row(READ_ONLY, READ_ONLY, READ_UPDATE),
    Role.CUSTOMER: _row(NONE, READ_ONLY, READ_UPDATE, customer_ops=READ_ONLY),
    Role.VISITOR: _row(NONE, READ_ONLY, NONE),
})

# Roles whose scope yields a concrete owner for new tenant rows. Super-admin
# supplies the owner explicitly, entrepreneurs are their own owner.
OWNER_DERIVING_ROLES = frozenset({Role.SUPER_ADMIN, Role.ENTREPRENEUR})


def permits(role, kind, operation, policy=ROLE_POLICY):
    """
    Return True if role may perform operation on kind.

    Pure and total: anything outside the declared enumerations is refused.
    """
    role = Role.coerce(role)
    try:
        kind = ResourceKind(kind)
        operation = Operation(operation)
    except ValueError:
        return False
    if role is None:
        return False
    return operation in policy.get(role, {}).get(kind, NONE)


def validate_policy(policy=ROLE_POLICY):
    """
    Check that the policy table is total and consistent.

    Raises:
        PolicyConfigurationError: On a missing role or kind, an unknown
            operation, or a mutation grant on a tenant kind to a role that
            cannot derive an owner for the row
    """
    for role in Role:
        if role not in policy:
            raise PolicyConfigurationError(f"Policy has no entry for role '{role.value}'")

        grants = policy[role]
        for kind in ResourceKind:
            if kind not in grants:
                raise PolicyConfigurationError(
                    f"Policy for role '{role.value}' has no entry for '{kind.value}'"
                )
            for operation in grants[kind]:
                if not isinstance(operation, Operation):
                    raise PolicyConfigurationError(
                        f"Unknown operation {operation!r} for "
                        f"'{role.value}' on '{kind.value}'"
                    )

        for kind in OWNED_KINDS:
            mutations = set(grants[kind]) & set(Operation.mutations())
            if mutations and role not in OWNER_DERIVING_ROLES:
                raise PolicyConfigurationError(
                    f"Role '{role.value}' cannot own '{kind.value}' rows "
                    f"but is granted {sorted(op.value for op in mutations)}"
                )

    unknown_roles = [key for key in policy if Role.coerce(key) is None]
    if unknown_roles:
        raise PolicyConfigurationError(f"Policy has unknown roles: {unknown_roles}")
