import time

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """
    Configuration for Core application

    This app contains:
        - Organization model (multi-tenancy)
        - Organization management API
        - Health check endpoint
        - Uniform API error format
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = 'Core'

    # Process start (monotonic clock), for the health check uptime
    started_at = None

    def ready(self):
        self.started_at = time.monotonic()
