from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hr_records.apps.employees'
    verbose_name = 'Employees'
