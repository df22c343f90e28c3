from django.apps import AppConfig


class CollaboratorsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.collaborators'
    verbose_name = 'Collaborators'
