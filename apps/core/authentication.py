"""
Custom DRF authentication classes.
"""
from rest_framework.authentication import BaseAuthentication


class MiddlewareAuthentication(BaseAuthentication):
    """
    DRF authentication class that uses the user set by IdentityContextMiddleware.

    The middleware resolves the bearer token and sets request.user and
    request.identity; this class simply hands that user to DRF.
    """

    def authenticate(self, request):
        """
        Return the user from the middleware if present.

        Returns:
            tuple: (user, None) if user is authenticated, None otherwise
        """
        django_request = request._request

        user = getattr(django_request, 'user', None)
        if user is not None and user.is_authenticated and getattr(django_request, 'identity', None) is not None:
            return (user, None)

        return None

    def authenticate_header(self, request):
        return 'Bearer'
