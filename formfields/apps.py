from django.apps import AppConfig


class FormfieldsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'formfields'
    verbose_name = 'Form Fields'

    def ready(self):
        """Register the built-in field types when the app is ready"""
        from . import types  # noqa: F401
