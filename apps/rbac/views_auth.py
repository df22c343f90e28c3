"""
Authentication REST API views.

Implements endpoints for:
- Login
- Logout
- Token refresh
- Current user profile
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from django_ratelimit.decorators import ratelimit
from django.utils.decorators import method_decorator
from drf_spectacular.utils import extend_schema, OpenApiExample
from drf_spectacular.types import OpenApiTypes

from apps.core.exceptions import AuthenticationError, RATE_LIMIT_RETRY_AFTER, error_payload
from apps.core.logging import SecurityLogger
from apps.core.navigation import menu_for_role
from apps.core.permissions import HasIdentity
from apps.core.scoped_views import validation_error_response
from apps.rbac.models import AuditLog
from apps.rbac.serializers import LoginSerializer, UserProfileSerializer, UserSerializer
from apps.rbac.services import AuthService


@extend_schema(
    tags=['Authentication'],
    summary='Login',
    description='''
Authenticate with email and password and receive a JWT.

**No authentication required** - this is a public endpoint.

**Rate limits**:
- 5 requests/minute per IP address
- 10 requests/hour per email address
    ''',
    request=LoginSerializer,
    responses={
        200: OpenApiTypes.OBJECT,
        401: OpenApiTypes.OBJECT,
        429: OpenApiTypes.OBJECT,
    },
    auth=[],
    examples=[
        OpenApiExample(
            'Login Request',
            value={
                'email': 'owner@example.com',
                'password': 'SecurePass123!'
            },
            request_only=True
        ),
        OpenApiExample(
            'Invalid Credentials',
            value={
                'error': {'code': 'AUTHENTICATION_FAILED', 'message': 'Invalid email or password'}
            },
            response_only=True,
            status_codes=['401']
        ),
    ]
)
@method_decorator(ratelimit(key='ip', rate='5/m', method='POST', block=False), name='dispatch')
@method_decorator(ratelimit(key='post:email', rate='10/h', method='POST', block=False), name='dispatch')
class LoginView(APIView):
    """
    POST /v1/auth/login

    Authenticate user and return JWT token.
    """
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        """Login user."""
        if getattr(request, 'limited', False):
            ip_address = request.META.get('REMOTE_ADDR', 'unknown')
            email = request.data.get('email', 'unknown') if isinstance(request.data, dict) else 'unknown'

            SecurityLogger.log_rate_limit_exceeded(
                endpoint='/v1/auth/login',
                ip_address=ip_address,
                user_email=email,
                limit='5/min per IP or 10/hour per email'
            )

            response = Response(
                error_payload(
                    'RATE_LIMIT_EXCEEDED',
                    'Rate limit exceeded. Please try again later.',
                    getattr(request, 'request_id', None),
                ),
                status=status.HTTP_429_TOO_MANY_REQUESTS
            )
            response['Retry-After'] = str(RATE_LIMIT_RETRY_AFTER)
            return response

        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer, request)

        result = AuthService.login(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password']
        )

        if not result:
            SecurityLogger.log_failed_login(
                email=serializer.validated_data['email'],
                ip_address=request.META.get('REMOTE_ADDR', 'unknown'),
                user_agent=request.META.get('HTTP_USER_AGENT', 'unknown'),
                reason='Invalid credentials'
            )
            raise AuthenticationError('Invalid email or password')

        return Response(
            {
                'user': UserSerializer(result['user']).data,
                'token': result['token'],
                'message': 'Login successful'
            },
            status=status.HTTP_200_OK
        )


@extend_schema(
    tags=['Authentication'],
    summary='Logout',
    description='JWTs are stateless; the client discards its token. The logout is recorded in the audit log.',
    request=None,
    responses={200: OpenApiTypes.OBJECT, 401: OpenApiTypes.OBJECT},
)
class LogoutView(APIView):
    """
    POST /v1/auth/logout
    """
    permission_classes = [HasIdentity]

    def post(self, request):
        """Logout user."""
        AuditLog.log_action(
            action='user.logout',
            user=request.user,
            entrepreneur_id=request.identity.tenant_id,
            target_type='User',
            target_id=request.user.id,
            request=request
        )
        return Response({'message': 'Logout successful'}, status=status.HTTP_200_OK)


@extend_schema(
    tags=['Authentication'],
    summary='Refresh JWT token',
    description='Return a new JWT with a fresh expiration for the current user.',
    request=None,
    responses={200: OpenApiTypes.OBJECT, 401: OpenApiTypes.OBJECT},
)
class RefreshTokenView(APIView):
    """
    POST /v1/auth/refresh-token
    """
    permission_classes = [HasIdentity]

    def post(self, request):
        """Refresh token."""
        token = AuthService.generate_jwt(request.user)
        return Response(
            {
                'token': token,
                'message': 'Token refreshed successfully'
            },
            status=status.HTTP_200_OK
        )


@extend_schema(
    tags=['Authentication'],
    summary='Get current user profile',
    description='Profile of the authenticated user with its resolved tenant and dashboard menu.',
    responses={200: UserProfileSerializer, 401: OpenApiTypes.OBJECT},
)
class UserProfileView(APIView):
    """
    GET /v1/auth/me
    """
    permission_classes = [HasIdentity]

    def get(self, request):
        """Get user profile."""
        data = UserProfileSerializer(request.user).data
        data['navigation'] = menu_for_role(request.identity.role)
        return Response(data, status=status.HTTP_200_OK)
