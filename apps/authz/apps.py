from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured
import logging

logger = logging.getLogger(__name__)


class AuthzConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.authz'
    verbose_name = 'Authorization'

    def ready(self):
        """
        Validate the role policy and scope tables at startup.

        A role or resource kind without an entry would otherwise surface as
        a silent denial at request time.
        """
        from apps.authz.exceptions import PolicyConfigurationError
        from apps.authz.policy import validate_policy
        from apps.authz.scope import validate_scopes

        try:
            validate_policy()
            validate_scopes()
        except PolicyConfigurationError as e:
            raise ImproperlyConfigured(f"Authorization policy is invalid: {e}") from e

        logger.info("Authorization policy validated")
