from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
import logging
import sys

logger = logging.getLogger(__name__)

JWT_KEY_HINT = "Generate a strong key with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = 'Core'

    def ready(self):
        """
        Validate security configuration before the application serves requests.

        Management commands other than runserver skip the checks so that
        migrations and shell sessions work with partial configuration.
        """
        if 'gunicorn' not in sys.argv[0] and len(sys.argv) > 1 and sys.argv[1] not in ('runserver', 'test'):
            return

        self._validate_jwt_configuration()
        self._validate_encryption_configuration()

        logger.info("Startup security validations passed")

    def _validate_jwt_configuration(self):
        jwt_secret = getattr(settings, 'JWT_SECRET_KEY', None)

        if not jwt_secret:
            raise ImproperlyConfigured(f"JWT_SECRET_KEY must be set in environment variables. {JWT_KEY_HINT}")

        if len(jwt_secret) < 32:
            raise ImproperlyConfigured(
                f"JWT_SECRET_KEY must be at least 32 characters long. "
                f"Current length: {len(jwt_secret)}. {JWT_KEY_HINT}"
            )

        if jwt_secret == settings.SECRET_KEY:
            raise ImproperlyConfigured(f"JWT_SECRET_KEY must be different from SECRET_KEY. {JWT_KEY_HINT}")

        unique_chars = len(set(jwt_secret))
        if unique_chars < 16:
            raise ImproperlyConfigured(
                f"JWT_SECRET_KEY has insufficient entropy. "
                f"Found only {unique_chars} unique characters, need at least 16. {JWT_KEY_HINT}"
            )

    def _validate_encryption_configuration(self):
        from apps.core.encryption import validate_encryption_key

        encryption_key = getattr(settings, 'ENCRYPTION_KEY', None)
        if not encryption_key:
            logger.warning(
                "ENCRYPTION_KEY is not set. Payment gateway credentials cannot be stored."
            )
            return

        try:
            validate_encryption_key(encryption_key)
        except ValueError as e:
            raise ImproperlyConfigured(f"ENCRYPTION_KEY is invalid: {e}")
