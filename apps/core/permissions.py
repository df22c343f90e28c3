"""
DRF permission classes.

Role and tenant checks live in apps.authz and run inside the views; the
classes here only make sure an identity was resolved at all.
"""
import logging
from rest_framework.permissions import BasePermission

from apps.authz.exceptions import Unauthenticated

logger = logging.getLogger(__name__)


class HasIdentity(BasePermission):
    """
    Require an identity resolved by IdentityContextMiddleware.

    Raises Unauthenticated instead of returning False so that the response
    uses the same error payload as denials from the authorization facade.
    """

    def has_permission(self, request, view):
        if getattr(request, 'identity', None) is None:
            logger.debug(
                "Request without identity rejected",
                extra={
                    'view': view.__class__.__name__,
                    'path': request.path,
                    'request_id': getattr(request, 'request_id', None),
                }
            )
            raise Unauthenticated()
        return True
