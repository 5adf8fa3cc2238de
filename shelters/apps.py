from django.apps import AppConfig


class SheltersConfig(AppConfig):
    """Shelters and the dogs they house."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'shelters'
    verbose_name = 'Dog shelters'

    def ready(self):
        # Cache invalidation hooks on Dog writes
        from . import signals  # noqa: F401
