# registrations/apps.py

from django.apps import AppConfig


class RegistrationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "registrations"
    verbose_name = "Registration Forms & Applications"

    def ready(self):
        """
        Import signal handlers when the app is ready.
        """
        import registrations.signals  # noqa: F401
