from django.apps import AppConfig


class PersistenceConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'infrastructure.persistence'
    label = 'persistence'
    verbose_name = 'FabDash'

    def ready(self):
        # Stored files of deleted uploads
        from . import signals  # noqa: F401

        # Dashboard broadcasts on model changes
        from presentation.websocket import signals  # noqa: F401
