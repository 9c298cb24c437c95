from django.apps import AppConfig


class StoresConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.stores'
    label = 'stores'
    verbose_name = 'Stores'

    def ready(self):
        from .interfaces import admin  # noqa: F401
