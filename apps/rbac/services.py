"""
Authentication and user services.

Implements:
- AuthService: JWT issue/decode, identity resolution, login
- UserService: role reassignment
"""
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

import jwt
from django.conf import settings
from django.db import transaction

from apps.authz.facade import authorize_role_change
from apps.authz.exceptions import Unauthenticated
from apps.authz.identity import Identity, IdentityResolver
from apps.authz.types import ResourceKind
from apps.core.logging import SecurityLogger
from apps.core.repositories import ScopedRepository, has_dependents, load_row
from apps.rbac.models import AuditLog, User

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service for authentication operations: JWT and identity resolution.
    """

    @classmethod
    def generate_jwt(cls, user: User) -> str:
        """
        Generate JWT token for a user.

        Role and entrepreneur claims are informational only. Every request
        rebuilds the identity from the stored user row.

        Args:
            user: User instance

        Returns:
            JWT token string
        """
        payload = {
            'user_id': str(user.id),
            'email': user.email,
            'role': user.role,
            'entrepreneur_id': str(user.entrepreneur_id) if user.entrepreneur_id else None,
            'exp': datetime.utcnow() + timedelta(hours=getattr(settings, 'JWT_EXPIRATION_HOURS', 24)),
            'iat': datetime.utcnow(),
        }

        token = jwt.encode(
            payload,
            settings.JWT_SECRET_KEY,
            algorithm=getattr(settings, 'JWT_ALGORITHM', 'HS256')
        )

        return token

    @classmethod
    def decode_credential(cls, token: str) -> Any:
        """
        Decode a bearer token and return the user id it names.

        Raises:
            Unauthenticated: If the token is expired, forged or malformed
        """
        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET_KEY,
                algorithms=[getattr(settings, 'JWT_ALGORITHM', 'HS256')]
            )
        except jwt.ExpiredSignatureError:
            raise Unauthenticated('Token has expired')
        except jwt.InvalidTokenError:
            raise Unauthenticated('Invalid token')

        return payload.get('user_id')

    @classmethod
    def load_user_record(cls, user_id) -> Optional[Dict[str, Any]]:
        """Load the stored user row as a dict, or None if it does not exist."""
        return load_row(ResourceKind.USER, user_id)

    @classmethod
    def resolve_identity(cls, token: str) -> Tuple[Identity, User]:
        """
        Resolve a bearer token into the caller's identity and user.

        Raises:
            Unauthenticated: If the token or the stored user is not valid
        """
        resolver = IdentityResolver(cls.decode_credential, cls.load_user_record)
        identity = resolver.resolve(token)

        user = User.objects.filter(pk=identity.id).first()
        if user is None:
            raise Unauthenticated('User not found')
        return identity, user

    @classmethod
    def login(cls, email: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Authenticate user and return JWT token.

        Args:
            email: User email
            password: User password

        Returns:
            Dict with user and token, or None if authentication failed
        """
        user = User.objects.by_email(email)
        if user is None:
            # Hash once so unknown emails take as long as wrong passwords
            User().set_password(password)
            return None

        if not user.is_active or not user.check_password(password):
            return None

        user.update_last_login()
        token = cls.generate_jwt(user)

        AuditLog.log_action(
            action='user.login',
            user=user,
            entrepreneur_id=user.tenant_id,
            target_type='User',
            target_id=user.id,
            metadata={'email': user.email}
        )

        return {
            'user': user,
            'token': token,
        }


class UserService:
    """
    Service for user operations that go beyond plain CRUD.
    """

    @classmethod
    def change_role(cls, identity: Identity, user_id, new_role: str,
                    entrepreneur_id=None, actor: User = None, request=None) -> User:
        """
        Reassign a user's role and re-derive its tenant membership.

        Args:
            identity: Caller identity (must be super-admin)
            user_id: Target user id
            new_role: Requested role value
            entrepreneur_id: Owner when a top-level user becomes a member
            actor: Calling user, for the audit trail
            request: HTTP request, for the audit trail

        Returns:
            Updated User

        Raises:
            AuthorizationError: If the reassignment is denied
        """
        with transaction.atomic():
            decision = authorize_role_change(
                identity,
                user_id,
                new_role,
                entrepreneur_id=entrepreneur_id,
                load_row=load_row,
                has_dependents=has_dependents,
            )
            if not decision.allowed:
                decision.raise_for_denial()

            before = load_row(ResourceKind.USER, user_id)
            changes = {
                'role': decision.final_row['role'],
                'entrepreneur_id': decision.final_row['entrepreneur_id'],
            }
            user = ScopedRepository(ResourceKind.USER).update(decision.predicate, user_id, changes)

        SecurityLogger.log_role_changed(
            actor_id=identity.id,
            user_id=user.id,
            from_role=before['role'],
            to_role=user.role,
            ip_address=AuditLog._get_client_ip(request) if request is not None else None,
        )

        AuditLog.log_action(
            action='user.role_changed',
            user=actor,
            entrepreneur_id=user.tenant_id,
            target_type='User',
            target_id=user.id,
            diff={
                'role': [before['role'], user.role],
                'entrepreneur_id': [
                    str(before['entrepreneur_id']) if before['entrepreneur_id'] else None,
                    str(user.entrepreneur_id) if user.entrepreneur_id else None,
                ],
            },
            request=request,
        )

        return user
