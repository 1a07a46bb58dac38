from django.apps import AppConfig


class PipelinesConfig(AppConfig):

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.pipelines'
    verbose_name = 'Sales Pipelines'
