"""
Custom exception handling for DRF.

Every error response carries the request id. Authorization failures raised
by apps.authz are rendered as {"error": {"code", "message"}, "request_id"}.
"""
import logging
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from django_ratelimit.exceptions import Ratelimited
from django.http import JsonResponse

from apps.authz.exceptions import AuthorizationError

logger = logging.getLogger(__name__)

RATE_LIMIT_RETRY_AFTER = 60


def error_payload(code, message, request_id=None):
    payload = {'error': {'code': code, 'message': message}}
    if request_id:
        payload['request_id'] = request_id
    return payload


def _log_rate_limit(request):
    from apps.core.logging import SecurityLogger

    ip_address = request.META.get('REMOTE_ADDR', 'unknown')
    email = None
    data = getattr(request, 'data', None)
    if isinstance(data, dict):
        email = data.get('email')

    SecurityLogger.log_rate_limit_exceeded(
        endpoint=request.path,
        ip_address=ip_address,
        user_email=email,
        limit='Rate limit exceeded'
    )


def ratelimit_view(request, exception):
    """
    View for django-ratelimit to return 429 instead of 403.

    Used as RATELIMIT_VIEW when a decorator is applied with block=True.
    """
    _log_rate_limit(request)

    response = JsonResponse(
        error_payload(
            'RATE_LIMIT_EXCEEDED',
            'Rate limit exceeded. Please try again later.',
            getattr(request, 'request_id', None),
        ),
        status=429
    )
    response['Retry-After'] = str(RATE_LIMIT_RETRY_AFTER)
    return response


def custom_exception_handler(exc, context):
    """
    Exception handler that logs errors and returns a consistent format.
    """
    request = context.get('request')
    request_id = getattr(request, 'request_id', None) if request else None

    if isinstance(exc, Ratelimited):
        if request is not None:
            _log_rate_limit(request)
        response = Response(
            error_payload('RATE_LIMIT_EXCEEDED', 'Rate limit exceeded. Please try again later.', request_id),
            status=status.HTTP_429_TOO_MANY_REQUESTS
        )
        response['Retry-After'] = str(RATE_LIMIT_RETRY_AFTER)
        return response

    if isinstance(exc, AuthorizationError):
        logger.info(
            f"Authorization error: {exc.code}",
            extra={
                'request_id': request_id,
                'path': request.path if request else None,
                'method': request.method if request else None,
            }
        )
        response = Response(error_payload(exc.code, exc.message, request_id), status=exc.status_code)
        if exc.status_code == 401:
            response['WWW-Authenticate'] = 'Bearer'
        return response

    if isinstance(exc, DashboardException):
        logger.warning(
            f"Dashboard exception: {exc.__class__.__name__}",
            extra={'request_id': request_id, 'details': exc.details}
        )
        return Response(error_payload(exc.code, exc.message, request_id), status=exc.status_code)

    response = exception_handler(exc, context)

    if response is None:
        logger.error(
            f"Unhandled API exception: {exc.__class__.__name__}",
            extra={
                'request_id': request_id,
                'path': request.path if request else None,
                'method': request.method if request else None,
            },
            exc_info=True
        )
        return Response(
            error_payload('INTERNAL_ERROR', 'An unexpected error occurred', request_id),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    logger.warning(
        f"API exception: {exc.__class__.__name__}",
        extra={
            'exception': str(exc),
            'request_id': request_id,
            'path': request.path if request else None,
        }
    )

    if request_id and isinstance(response.data, dict):
        response.data['request_id'] = request_id

    return response


class DashboardException(Exception):
    """Base exception for dashboard errors outside the authorization core."""

    code = 'ERROR'
    status_code = 400

    def __init__(self, message, details=None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(DashboardException):
    """Raised when login fails."""
    code = 'AUTHENTICATION_FAILED'
    status_code = 401


class ConflictError(DashboardException):
    """Raised when a write would violate a uniqueness or dependency rule."""
    code = 'CONFLICT'
    status_code = 409
