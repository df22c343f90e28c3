"""
Identity context middleware.

Resolves the bearer token on every API request into request.identity
(apps.authz.identity.Identity) and request.user.
"""
import logging
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

from apps.authz.exceptions import Unauthenticated
from apps.core.exceptions import error_payload
from apps.core.logging import SecurityLogger
from apps.rbac.services import AuthService

logger = logging.getLogger(__name__)


class IdentityContextMiddleware(MiddlewareMixin):
    """
    Attach the caller's identity to the request.

    - No Authorization header: request.identity is None and the view decides
      (every protected view answers 401 through the authorization facade)
    - Valid bearer token: request.identity and request.user are set
    - Any other Authorization header: 401 immediately

    Public endpoints (login, health, public listings) skip resolution.
    """

    PUBLIC_PATHS = [
        '/v1/auth/login',
        '/v1/health',
        '/v1/public/',
        '/schema',
        '/admin/',
    ]

    def process_request(self, request):
        request.identity = None

        if self._is_public_path(request.path):
            return None

        auth_header = request.headers.get('Authorization', '')
        if not auth_header:
            return None

        if not auth_header.startswith('Bearer '):
            return self._error_response(request, 'Authorization header must use the Bearer scheme')

        token = auth_header[len('Bearer '):].strip()
        try:
            identity, user = AuthService.resolve_identity(token)
        except Unauthenticated as e:
            SecurityLogger.log_event(
                'invalid_credential',
                level='info',
                path=request.path,
                ip_address=request.META.get('REMOTE_ADDR'),
                reason=e.message,
            )
            return self._error_response(request, e.message)

        request.identity = identity
        request.user = user

        logger.debug(
            f"Identity resolved: {identity.role.value}",
            extra={
                'request_id': getattr(request, 'request_id', None),
                'user_id': str(identity.id),
            }
        )
        return None

    def _is_public_path(self, path):
        """Check if path is public and doesn't require authentication."""
        return any(path.startswith(public_path) for public_path in self.PUBLIC_PATHS)

    def _error_response(self, request, message):
        response = JsonResponse(
            error_payload(Unauthenticated.code, message, getattr(request, 'request_id', None)),
            status=401
        )
        response['WWW-Authenticate'] = 'Bearer'
        return response
