from django.apps import AppConfig


class AuthConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hr_records.apps.auth'
    label = 'custom_auth'
    verbose_name = 'User accounts'
