"""
Tenant scope resolver.

Maps (identity, resource kind) to a visibility predicate plus the rule for
stamping the owner of new rows. Never raises: a scope that cannot be derived
collapses to the empty predicate.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from apps.authz.exceptions import PolicyConfigurationError
from apps.authz.types import CUSTOMER_FIELD, OWNER_FIELD, ResourceKind, Role, same_id


class ScopeStyle(str, Enum):
    TENANT = 'tenant'
    GLOBAL = 'global'
    SELF = 'self'
    CUSTOMER = 'customer'


KIND_SCOPES = {
    ResourceKind.PAYMENT_GATEWAY: ScopeStyle.TENANT,
    ResourceKind.COLLABORATOR: ScopeStyle.TENANT,
    ResourceKind.WHATSAPP_INSTANCE: ScopeStyle.TENANT,
    ResourceKind.ACCOUNTING_ENTRY: ScopeStyle.TENANT,
    ResourceKind.CUSTOMER_PLAN: ScopeStyle.CUSTOMER,
    ResourceKind.PRICE_TABLE: ScopeStyle.GLOBAL,
    ResourceKind.USER: ScopeStyle.SELF,
}


class OwnerSource(str, Enum):
    """How the owner of a new row is determined."""

    EXPLICIT = 'explicit'
    IMPLICIT = 'implicit'
    NOT_APPLICABLE = 'not_applicable'
    UNOWNED = 'unowned'


@dataclass(frozen=True)
class Predicate:
    """
    Row filter: match everything, nothing, or rows where field equals value.

    Storage backends translate it (see apps.core.repositories); in-memory
    callers use matches().
    """

    kind: str
    field: Optional[str] = None
    value: Any = None

    ALL = 'all'
    NOTHING = 'none'
    EQUALS = 'eq'

    @classmethod
    def all(cls):
        return cls(cls.ALL)

    @classmethod
    def none(cls):
        return cls(cls.NOTHING)

    @classmethod
    def equals(cls, field, value):
        if value is None:
            return cls.none()
        return cls(cls.EQUALS, field, value)

    @property
    def matches_all(self):
        return self.kind == self.ALL

    @property
    def matches_nothing(self):
        return self.kind == self.NOTHING

    def matches(self, row):
        if row is None or self.matches_nothing:
            return False
        if self.matches_all:
            return True
        if isinstance(row, dict):
            if self.field not in row:
                return False
            actual = row[self.field]
        else:
            if not hasattr(row, self.field):
                return False
            actual = getattr(row, self.field)
        if isinstance(self.value, bool) or isinstance(actual, bool):
            return actual is self.value
        return same_id(actual, self.value)


@dataclass(frozen=True)
class Scope:
    predicate: Predicate
    owner_source: OwnerSource
    owner_value: Any = None


def _tenant_scope(identity):
    if identity.role == Role.SUPER_ADMIN:
        return Scope(Predicate.all(), OwnerSource.EXPLICIT)
    if identity.role == Role.ENTREPRENEUR and identity.id is not None:
        return Scope(
            Predicate.equals(OWNER_FIELD, identity.id),
            OwnerSource.IMPLICIT,
            identity.id,
        )
    if identity.role in Role.tenant_members() and identity.tenant_id is not None:
        return Scope(
            Predicate.equals(OWNER_FIELD, identity.tenant_id),
            OwnerSource.NOT_APPLICABLE,
        )
    return Scope(Predicate.none(), OwnerSource.NOT_APPLICABLE)


def _global_scope(identity):
    if identity.role == Role.SUPER_ADMIN:
        return Scope(Predicate.all(), OwnerSource.UNOWNED)
    return Scope(Predicate.equals('is_active', True), OwnerSource.UNOWNED)


def _self_scope(identity):
    if identity.role == Role.SUPER_ADMIN:
        return Scope(Predicate.all(), OwnerSource.NOT_APPLICABLE)
    if identity.role == Role.VISITOR or identity.id is None:
        return Scope(Predicate.none(), OwnerSource.NOT_APPLICABLE)
    return Scope(Predicate.equals('id', identity.id), OwnerSource.NOT_APPLICABLE)


def _customer_scope(identity):
    if identity.role != Role.CUSTOMER:
        return _tenant_scope(identity)
    if identity.id is None or identity.tenant_id is None:
        return Scope(Predicate.none(), OwnerSource.NOT_APPLICABLE)
    return Scope(Predicate.equals(CUSTOMER_FIELD, identity.id), OwnerSource.NOT_APPLICABLE)


_RESOLVERS = {
    ScopeStyle.TENANT: _tenant_scope,
    ScopeStyle.GLOBAL: _global_scope,
    ScopeStyle.SELF: _self_scope,
    ScopeStyle.CUSTOMER: _customer_scope,
}


def scope_for(identity, kind) -> Scope:
    """
    Resolve the visibility predicate and owner rule for identity on kind.

    Args:
        identity: Identity of the caller
        kind: ResourceKind

    Returns:
        Scope
    """
    nothing = Scope(Predicate.none(), OwnerSource.NOT_APPLICABLE)
    if identity is None or Role.coerce(getattr(identity, 'role', None)) is None:
        return nothing
    try:
        style = KIND_SCOPES[ResourceKind(kind)]
    except (KeyError, ValueError):
        return nothing
    return _RESOLVERS[style](identity)


def validate_scopes(kind_scopes=KIND_SCOPES):
    """Raise PolicyConfigurationError unless every kind has a scope style."""
    for kind in ResourceKind:
        style = kind_scopes.get(kind)
        if style not in _RESOLVERS:
            raise PolicyConfigurationError(f"No scope style declared for '{kind.value}'")
