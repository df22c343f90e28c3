"""
Resource mutation guard.

Validates a proposed create/update/delete (or single read) against the policy
and the caller's scope, and produces the finalized row storage should write.
The guard reads storage through load_row(kind, id) but never writes.
"""
import logging

from apps.authz.exceptions import Forbidden, InvalidArgument, NotFound
from apps.authz.membership import require_customer, require_entrepreneur, validate_new_member
from apps.authz.policy import permits
from apps.authz.scope import KIND_SCOPES, OwnerSource, ScopeStyle, scope_for
from apps.authz.types import (
    CREATOR_FIELD, CUSTOMER_FIELD, OWNER_FIELD, OWNER_FIELD_ALIASES, SYSTEM_FIELDS,
    Operation, ResourceKind, Role, same_id,
)

logger = logging.getLogger(__name__)

_MISSING = object()

# Fields that keep their stored value whatever the caller sends on update.
PINNED_FIELDS = ('id', CREATOR_FIELD, 'created_at')


def _owner_candidates(row):
    """Yield (alias, value) for every owner alias present in row."""
    for alias in OWNER_FIELD_ALIASES:
        value = row.get(alias, _MISSING)
        if value is not _MISSING:
            yield alias, value


class MutationGuard:
    """
    Check mutations of one resource kind against the caller's scope.

    Args:
        load_row: Callable (kind, id) -> dict or None. Must not return
            soft-deleted rows.
    """

    def __init__(self, load_row):
        self.load_row = load_row

    def guard(self, identity, kind, operation, candidate_row=None):
        """
        Validate the operation and return the finalized row.

        Raises:
            Forbidden: Role may not perform operation on kind
            NotFound: Target row missing or outside the caller's scope
            InvalidArgument: Missing id, bad owner, or forbidden field change
        """
        kind = ResourceKind(kind)
        operation = Operation(operation)

        if not permits(identity.role, kind, operation):
            raise Forbidden()

        candidate = dict(candidate_row or {})
        scope = scope_for(identity, kind)

        if operation == Operation.CREATE:
            return self._finalize_create(identity, kind, scope, candidate)

        existing = self._load_visible(kind, scope, candidate)

        if operation == Operation.UPDATE:
            return self._finalize_update(kind, existing, candidate)
        return existing

    def _load_visible(self, kind, scope, candidate):
        row_id = candidate.get('id')
        if row_id in (None, ''):
            raise InvalidArgument('id is required')

        existing = self.load_row(kind, row_id)
        if existing is None or not scope.predicate.matches(existing):
            raise NotFound()
        return dict(existing)

    def _finalize_create(self, identity, kind, scope, candidate):
        for name in SYSTEM_FIELDS + (CREATOR_FIELD,):
            candidate.pop(name, None)

        style = KIND_SCOPES[kind]

        if kind == ResourceKind.USER:
            requested = self._requested_owner(candidate)
            candidate[OWNER_FIELD] = validate_new_member(
                self.load_row, candidate.get('role'), requested
            )
            return candidate

        if scope.owner_source == OwnerSource.UNOWNED:
            self._requested_owner(candidate)
            return candidate

        if style not in (ScopeStyle.TENANT, ScopeStyle.CUSTOMER):
            raise InvalidArgument(f"Cannot create '{kind.value}' rows")

        if scope.owner_source == OwnerSource.IMPLICIT:
            self._requested_owner(candidate)
            owner_id = scope.owner_value
        elif scope.owner_source == OwnerSource.EXPLICIT:
            requested = self._requested_owner(candidate)
            owner_id = require_entrepreneur(self.load_row, requested)['id']
        else:
            raise InvalidArgument('No owner can be derived for the new row')

        if style == ScopeStyle.CUSTOMER:
            customer = require_customer(self.load_row, candidate.get(CUSTOMER_FIELD), owner_id)
            candidate[CUSTOMER_FIELD] = customer['id']

        candidate[OWNER_FIELD] = owner_id
        candidate[CREATOR_FIELD] = identity.id
        return candidate

    @staticmethod
    def _requested_owner(candidate):
        """Pop every owner alias from candidate and return the first non-empty value."""
        requested = None
        for alias, value in list(_owner_candidates(candidate)):
            candidate.pop(alias)
            if requested is None and value not in (None, ''):
                requested = value
        return requested

    def _finalize_update(self, kind, existing, candidate):
        stored_owner = existing.get(OWNER_FIELD)
        for alias, value in list(_owner_candidates(candidate)):
            if not same_id(value, stored_owner):
                logger.warning(
                    "Rejected attempt to change row owner",
                    extra={'kind': kind.value, 'row_id': str(existing.get('id'))}
                )
                raise InvalidArgument('Owner cannot be changed')
            candidate.pop(alias)

        if KIND_SCOPES[kind] == ScopeStyle.CUSTOMER and CUSTOMER_FIELD in candidate:
            if not same_id(candidate[CUSTOMER_FIELD], existing.get(CUSTOMER_FIELD)):
                raise InvalidArgument('Customer cannot be changed')
            candidate.pop(CUSTOMER_FIELD)

        if kind == ResourceKind.USER and 'role' in candidate:
            if Role.coerce(candidate['role']) != Role.coerce(existing.get('role')):
                raise InvalidArgument('Role changes must use the role reassignment operation')

        for name in SYSTEM_FIELDS + PINNED_FIELDS:
            candidate.pop(name, None)

        final_row = {**existing, **candidate}
        for name in PINNED_FIELDS:
            if name in existing:
                final_row[name] = existing[name]
        return final_row
