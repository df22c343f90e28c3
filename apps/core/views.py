"""
Core API views.
"""
import logging

from django.core.cache import cache
from django.db import connection
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.navigation import menu_for_role
from apps.core.permissions import HasIdentity

logger = logging.getLogger(__name__)


def _probe_database():
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")


def _probe_cache():
    cache.set('health_check', 'ok', timeout=10)
    if cache.get('health_check') != 'ok':
        raise RuntimeError("Unable to read test key")


HEALTH_PROBES = (
    ('database', _probe_database),
    ('cache', _probe_cache),
)

_HEALTH_SCHEMA = {
    'type': 'object',
    'properties': {
        'status': {'type': 'string'},
        'database': {'type': 'string'},
        'cache': {'type': 'string'},
        'errors': {'type': 'array', 'items': {'type': 'string'}},
    }
}


class HealthCheckView(APIView):
    """
    Liveness of the database and cache.

    GET /v1/health/ answers 200 when every probe passes and 503 otherwise.
    Runs without authentication so load balancers can call it.
    """
    authentication_classes = []
    permission_classes = []

    @extend_schema(
        summary="Health check",
        responses={200: _HEALTH_SCHEMA, 503: _HEALTH_SCHEMA},
        auth=[],
    )
    def get(self, request):
        report = {'status': 'healthy'}
        errors = []

        for name, probe in HEALTH_PROBES:
            try:
                probe()
            except Exception as e:
                logger.error(f"{name} health check failed", exc_info=True)
                report[name] = 'unhealthy'
                errors.append(f"{name.title()}: {e}")
            else:
                report[name] = 'healthy'

        if errors:
            report['status'] = 'unhealthy'
            report['errors'] = errors
            return Response(report, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response(report)


class NavigationView(APIView):
    """
    Dashboard menu for the caller's role.

    GET /v1/navigation
    """
    permission_classes = [HasIdentity]

    @extend_schema(
        summary="Navigation menu",
        description="Sidebar entries for the caller's role. Entries are hints; endpoints authorize independently.",
        responses={
            200: {
                'type': 'object',
                'properties': {
                    'role': {'type': 'string'},
                    'items': {'type': 'array', 'items': {'type': 'object'}},
                }
            }
        },
        tags=['Navigation'],
    )
    def get(self, request):
        role = request.identity.role
        return Response({'role': role.value, 'items': menu_for_role(role)})
