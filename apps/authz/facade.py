"""
Authorization facade.

Single entry point the API layer calls before any storage access:

    decision = authorize(request.identity, ResourceKind.COLLABORATOR,
                         Operation.CREATE, candidate_row=data, load_row=load_row)
    if not decision.allowed:
        decision.raise_for_denial()
    repository.create(decision.final_row)
"""
import logging

from apps.authz.decisions import Allow, Deny, DenialReason
from apps.authz.exceptions import (
    AuthorizationError, Forbidden, InvalidArgument, NotFound, Unauthenticated,
)
from apps.authz.guard import MutationGuard
from apps.authz.membership import resolve_reassigned_owner
from apps.authz.policy import permits
from apps.authz.scope import scope_for
from apps.authz.types import Operation, ResourceKind, Role
from apps.core.logging import SecurityLogger

logger = logging.getLogger(__name__)

# Roles whose rows other rows point at: entrepreneurs own tenants, customers
# hold plans.
DEPENDENT_HOLDING_ROLES = (Role.ENTREPRENEUR, Role.CUSTOMER)


def _no_rows(kind, row_id):
    return None


def _deny(identity, kind, operation, error):
    decision = Deny.from_error(error)
    SecurityLogger.log_authorization_denied(
        user_id=getattr(identity, 'id', None),
        role=getattr(getattr(identity, 'role', None), 'value', None),
        resource_kind=getattr(kind, 'value', kind),
        operation=getattr(operation, 'value', operation),
        reason=decision.reason.value,
    )
    return decision


def authorize(identity, kind, operation, candidate_row=None, load_row=None):
    """
    Decide whether identity may perform operation on kind.

    Args:
        identity: Resolved Identity, or None when no credential was presented
        kind: ResourceKind
        operation: Operation
        candidate_row: Proposed row (create), changes plus id (update), or
            {'id': ...} (delete, single read). None for a listing read.
        load_row: Callable (kind, id) -> dict or None

    Returns:
        Allow or Deny. Never raises for authorization failures.
    """
    if identity is None:
        return _deny(identity, kind, operation, Unauthenticated())

    try:
        kind = ResourceKind(kind)
        operation = Operation(operation)
    except ValueError:
        return _deny(identity, kind, operation, Forbidden('Unknown resource or operation'))

    scope = scope_for(identity, kind)

    try:
        if operation == Operation.READ and (candidate_row is None or candidate_row.get('id') is None):
            if not permits(identity.role, kind, operation):
                raise Forbidden()
            return Allow(predicate=scope.predicate)

        guard = MutationGuard(load_row or _no_rows)
        final_row = guard.guard(identity, kind, operation, candidate_row)
    except AuthorizationError as e:
        return _deny(identity, kind, operation, e)

    return Allow(final_row=final_row, predicate=scope.predicate)


def authorize_role_change(identity, user_id, new_role, entrepreneur_id=None,
                          load_row=None, has_dependents=None):
    """
    Decide a role reassignment.

    Only super-admins may reassign roles. Tenant membership is re-derived:
    top-level roles drop their entrepreneur, members keep theirs, an
    entrepreneur who still owns members or tenant rows cannot be demoted and
    a customer who still holds plans keeps the customer role.

    Args:
        identity: Caller identity
        user_id: Target user id
        new_role: Requested role value
        entrepreneur_id: Owner for a top-level user becoming a member
        load_row: Callable (kind, id) -> dict or None
        has_dependents: Callable (user_id) -> bool

    Returns:
        Allow(final_row={'id', 'role', 'entrepreneur_id'}) or Deny
    """
    kind = ResourceKind.USER
    operation = Operation.UPDATE
    load_row = load_row or _no_rows

    if identity is None:
        return _deny(identity, kind, operation, Unauthenticated())

    try:
        if identity.role != Role.SUPER_ADMIN:
            raise Forbidden('Only super-admins can change roles')

        target = load_row(kind, user_id)
        if target is None:
            raise NotFound()

        role = Role.coerce(new_role)
        if role is None or role not in Role.assignable():
            raise InvalidArgument('role must be one of: ' + ', '.join(r.value for r in Role.assignable()))

        current_role = Role.coerce(target.get('role'))
        if current_role in DEPENDENT_HOLDING_ROLES and role != current_role:
            if has_dependents is not None and has_dependents(target['id']):
                raise InvalidArgument(f"User with role '{current_role.value}' still owns users or records")

        owner_id = resolve_reassigned_owner(load_row, target, role, entrepreneur_id)
    except AuthorizationError as e:
        return _deny(identity, kind, operation, e)

    logger.info(
        "Role change authorized",
        extra={
            'user_id': str(target['id']),
            'from_role': target.get('role'),
            'to_role': role.value,
        }
    )
    return Allow(
        final_row={'id': target['id'], 'role': role.value, 'entrepreneur_id': owner_id},
        predicate=scope_for(identity, kind).predicate,
    )


__all__ = ['authorize', 'authorize_role_change', 'Allow', 'Deny', 'DenialReason']
