"""
Identity context: who is calling, in which role, on behalf of which tenant.

The resolver turns a raw credential into an immutable Identity. It is wired to
two collaborators supplied by the transport layer:

- decode_credential(raw) -> user id, raising Unauthenticated when the
  credential is malformed, expired or forged
- load_user(user_id) -> user record (dict) or None

The identity is always rebuilt from the stored user record, never from claims
carried inside the credential, so a role change is effective immediately.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from apps.authz.exceptions import Unauthenticated
from apps.authz.types import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """
    The calling identity for one request.

    Attributes:
        id: User id (None only for the anonymous visitor)
        role: Role of the user
        tenant_id: Owning entrepreneur id. Equal to id for an entrepreneur,
            the parent entrepreneur for collaborators and customers, and None
            for super-admins (all tenants) and visitors (no tenant).
    """

    id: Any
    role: Role
    tenant_id: Any = None

    @classmethod
    def anonymous(cls) -> 'Identity':
        """Identity used by public endpoints that accept unauthenticated visitors."""
        return cls(id=None, role=Role.VISITOR, tenant_id=None)

    @property
    def is_super_admin(self) -> bool:
        return self.role == Role.SUPER_ADMIN

    @property
    def is_anonymous(self) -> bool:
        return self.role == Role.VISITOR


UserLoader = Callable[[Any], Optional[Dict[str, Any]]]


def identity_from_user_record(record: Dict[str, Any], load_user: UserLoader) -> Identity:
    """
    Build an Identity from a stored user record.

    Fails closed: any record that does not describe exactly one valid identity
    raises Unauthenticated instead of being defaulted to a weaker role.

    Args:
        record: Mapping with at least id, role, entrepreneur_id and is_active
        load_user: Loader used to check the parent entrepreneur

    Returns:
        Identity

    Raises:
        Unauthenticated: If the record is inactive, has no recognised role,
            or its tenant link is missing, dangling or inconsistent
    """
    user_id = record.get('id')
    if user_id is None:
        raise Unauthenticated('User record has no id')

    if not record.get('is_active', True):
        raise Unauthenticated('User account is inactive')

    role = Role.coerce(record.get('role'))
    if role is None or role not in Role.assignable():
        logger.warning(
            "Rejecting identity with unrecognised role",
            extra={'user_id': str(user_id), 'role': record.get('role')}
        )
        raise Unauthenticated('User role is not recognised')

    entrepreneur_id = record.get('entrepreneur_id')

    if role in (Role.SUPER_ADMIN, Role.ENTREPRENEUR):
        if entrepreneur_id is not None:
            raise Unauthenticated('Top-level user must not belong to a tenant')
        tenant_id = user_id if role == Role.ENTREPRENEUR else None
        return Identity(id=user_id, role=role, tenant_id=tenant_id)

    # Collaborators and customers must hang off a live entrepreneur.
    if entrepreneur_id is None:
        raise Unauthenticated('Tenant member has no owning entrepreneur')

    parent = load_user(entrepreneur_id)
    if (
        parent is None
        or Role.coerce(parent.get('role')) != Role.ENTREPRENEUR
        or not parent.get('is_active', True)
    ):
        logger.warning(
            "Rejecting identity with dangling tenant link",
            extra={'user_id': str(user_id), 'entrepreneur_id': str(entrepreneur_id)}
        )
        raise Unauthenticated('Owning entrepreneur is not valid')

    return Identity(id=user_id, role=role, tenant_id=parent['id'])


class IdentityResolver:
    """Resolve raw credentials into identities."""

    def __init__(self, decode_credential: Callable[[str], Any], load_user: UserLoader):
        self.decode_credential = decode_credential
        self.load_user = load_user

    def resolve(self, raw_credential: Optional[str]) -> Identity:
        """
        Resolve a raw credential.

        Args:
            raw_credential: Credential string supplied by the transport layer

        Returns:
            Identity

        Raises:
            Unauthenticated: On any failure, including a missing credential
        """
        if not raw_credential:
            raise Unauthenticated('Credential required')

        user_id = self.decode_credential(raw_credential)
        if user_id is None:
            raise Unauthenticated('Credential does not name a user')

        record = self.load_user(user_id)
        if record is None:
            raise Unauthenticated('User not found')

        return identity_from_user_record(record, self.load_user)
