from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('username', 'user_id', 'full_name', 'email', 'role_level', 'is_active')
    list_filter = ('role_level', 'is_active')
    search_fields = ('username', 'user_id', 'full_name', 'email')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('HR records', {'fields': ('user_id', 'full_name', 'role_level', 'created_by', 'updated_by')}),
    )
