"""
Structured logging: JSON formatter, PII masking and security events.
"""
import json
import logging
import re
import traceback
from datetime import datetime, timezone as dt_timezone
from django.utils import timezone
import sentry_sdk


class PIIMasker:
    """
    Mask sensitive data before it reaches the logs.
    """

    PHONE_PATTERN = re.compile(r'\+?\d{10,15}')
    EMAIL_PATTERN = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b')
    JWT_PATTERN = re.compile(r'eyJ[A-Za-z0-9_\-]+\.eyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+')
    SECRET_PATTERN = re.compile(
        r'(api[_-]?key|token|public[_-]?key|secret|password|bearer)["\']?\s*[:=]\s*["\']?([^"\'\s,}]+)',
        re.IGNORECASE
    )

    SENSITIVE_FIELDS = {
        'password', 'password_hash',
        'token', 'access_token', 'refresh_token', 'public_key',
        'api_key', 'secret', 'authorization',
    }

    @classmethod
    def mask_phone(cls, text):
        if not isinstance(text, str):
            return text
        return cls.PHONE_PATTERN.sub(lambda m: m.group(0)[:3] + '*' * (len(m.group(0)) - 3), text)

    @classmethod
    def mask_email(cls, text):
        if not isinstance(text, str):
            return text

        def mask_match(match):
            username, _, domain = match.group(0).partition('@')
            if len(username) > 1:
                username = username[0] + '*' * (len(username) - 1)
            return f"{username}@{domain}"

        return cls.EMAIL_PATTERN.sub(mask_match, text)

    @classmethod
    def mask_secrets(cls, text):
        if not isinstance(text, str):
            return text
        return cls.SECRET_PATTERN.sub(r'\1: ********', text)

    @classmethod
    def mask_text(cls, text):
        """Apply all masking patterns to text."""
        if not isinstance(text, str):
            return text
        text = cls.JWT_PATTERN.sub('[REDACTED_JWT]', text)
        text = cls.mask_secrets(text)
        text = cls.mask_email(text)
        return cls.mask_phone(text)

    @classmethod
    def mask_dict(cls, data):
        """Recursively mask sensitive data in dictionaries."""
        if not isinstance(data, dict):
            return data

        masked = {}
        for key, value in data.items():
            if str(key).lower() in cls.SENSITIVE_FIELDS:
                masked[key] = '********' if value else value
            elif isinstance(value, dict):
                masked[key] = cls.mask_dict(value)
            elif isinstance(value, list):
                masked[key] = [
                    cls.mask_dict(item) if isinstance(item, dict) else cls.mask_text(item)
                    for item in value
                ]
            else:
                masked[key] = cls.mask_text(value)
        return masked


# LogRecord attributes that are not user supplied context.
_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'request_id',
}


class JSONFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging.
    Includes request_id when available and masks PII in every field.
    """

    def format(self, record):
        log_data = {
            'timestamp': datetime.now(dt_timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': PIIMasker.mask_text(record.getMessage()),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if hasattr(record, 'request_id'):
            log_data['request_id'] = record.request_id

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': PIIMasker.mask_text(str(record.exc_info[1])),
                'traceback': [
                    PIIMasker.mask_text(line)
                    for line in traceback.format_exception(*record.exc_info)
                ],
            }

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith('_'):
                continue
            masked_value = PIIMasker.mask_dict(value) if isinstance(value, dict) else PIIMasker.mask_text(value)
            try:
                json.dumps(masked_value)
                log_data[key] = masked_value
            except (TypeError, ValueError):
                log_data[key] = PIIMasker.mask_text(str(value))

        return json.dumps(log_data)


class MaskingFormatter(logging.Formatter):
    """Plain-text formatter that masks PII in the rendered line."""

    def format(self, record):
        return PIIMasker.mask_text(super().format(record))


class SecurityLogger:
    """
    Centralized logging of security events.

    Every event goes to the 'security' logger with structured context.
    Critical events are also sent to Sentry for alerting.
    """

    CRITICAL_EVENTS = {
        'suspicious_activity',
        'role_changed',
    }

    @staticmethod
    def log_event(event_type: str, level: str = 'warning', **context):
        """
        Log a security event with structured data.

        Args:
            event_type: Type of security event (e.g. 'failed_login')
            level: Log level ('info', 'warning', 'error', 'critical')
            **context: Additional context (ip_address, user_id, ...)
        """
        logger = logging.getLogger('security')

        log_data = {
            'event_type': event_type,
            'timestamp': timezone.now().isoformat(),
        }
        log_data.update(context)
        log_data = PIIMasker.mask_dict(log_data)

        log_method = getattr(logger, level, logger.warning)
        log_method(f"Security event: {event_type}", extra=log_data)

        if event_type in SecurityLogger.CRITICAL_EVENTS:
            sentry_sdk.capture_message(
                f"Critical security event: {event_type}",
                level='error',
                extras=log_data
            )

    @staticmethod
    def log_failed_login(email: str, ip_address: str, user_agent: str = None, reason: str = None):
        SecurityLogger.log_event(
            'failed_login',
            level='warning',
            email=email,
            ip_address=ip_address,
            user_agent=user_agent,
            reason=reason
        )

    @staticmethod
    def log_authorization_denied(user_id=None, role: str = None, resource_kind: str = None,
                                 operation: str = None, reason: str = None):
        """
        Log a denied authorization decision.

        Args:
            user_id: Caller id (None for anonymous callers)
            role: Caller role
            resource_kind: Resource kind the caller tried to touch
            operation: read, create, update or delete
            reason: Denial reason code
        """
        SecurityLogger.log_event(
            'authorization_denied',
            level='info' if reason == 'NOT_FOUND' else 'warning',
            user_id=str(user_id) if user_id is not None else None,
            role=role,
            resource_kind=resource_kind,
            operation=operation,
            reason=reason
        )

    @staticmethod
    def log_role_changed(actor_id, user_id, from_role: str, to_role: str, ip_address: str = None):
        SecurityLogger.log_event(
            'role_changed',
            level='warning',
            actor_id=str(actor_id),
            user_id=str(user_id),
            from_role=from_role,
            to_role=to_role,
            ip_address=ip_address
        )

    @staticmethod
    def log_rate_limit_exceeded(endpoint: str, ip_address: str, user_email: str = None, limit: str = None):
        SecurityLogger.log_event(
            'rate_limit_exceeded',
            level='warning',
            endpoint=endpoint,
            ip_address=ip_address,
            user_email=user_email,
            limit=limit
        )
