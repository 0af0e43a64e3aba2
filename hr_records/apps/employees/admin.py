from django.contrib import admin

from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ('employee_id', 'first_name', 'last_name', 'department', 'job_title', 'employment_status')
    list_filter = ('department', 'employment_status', 'employment_type')
    search_fields = ('employee_id', 'first_name', 'last_name', 'email')
    readonly_fields = ('employee_id', 'created_at', 'created_by', 'updated_at', 'updated_by')
