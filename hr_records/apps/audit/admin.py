from django.contrib import admin

from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ('occurred_at', 'action_type', 'subject_type', 'subject_id', 'actor_name')
    list_filter = ('action_type', 'subject_type')
    search_fields = ('subject_id', 'actor_name', 'actor_id')
    ordering = ('-occurred_at', '-id')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
