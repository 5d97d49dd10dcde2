from django.apps import AppConfig


class LimitsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.limits'
    label = 'limits'
    verbose_name = 'Purchase limits'

    def ready(self):
        """Import signals when app is ready."""
        import apps.limits.signals  # noqa: F401
