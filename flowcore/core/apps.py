from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    verbose_name = 'Core (config, errors, notifications)'

    def ready(self):
        from django.core.signals import setting_changed
        from core.config import reset_config

        setting_changed.connect(reset_config, dispatch_uid="core.reset_config")
