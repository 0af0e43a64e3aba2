from django.apps import AppConfig


class AuditConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hr_records.apps.audit'
    verbose_name = 'Audit trail'
