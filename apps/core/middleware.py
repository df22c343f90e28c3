"""
Core middleware for request processing.
"""
import threading
import uuid
import logging
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

_local = threading.local()


class RequestIDMiddleware(MiddlewareMixin):
    """
    Attach a unique request_id to each request for tracing.

    An incoming X-Request-ID header is reused; the id is echoed back in the
    response and added to log records by LoggingFilter.
    """

    def process_request(self, request):
        request_id = request.META.get('HTTP_X_REQUEST_ID') or str(uuid.uuid4())
        request.request_id = request_id
        _local.request_id = request_id

    def process_response(self, request, response):
        if hasattr(request, 'request_id'):
            response['X-Request-ID'] = request.request_id
        _local.request_id = None
        return response


class LoggingFilter(logging.Filter):
    """
    Add the current request_id to log records.
    """

    def filter(self, record):
        request_id = getattr(_local, 'request_id', None)
        if request_id and not hasattr(record, 'request_id'):
            record.request_id = request_id
        return True
