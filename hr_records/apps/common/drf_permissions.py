"""
Django REST Framework permission classes for the ADMIN / HR / USER roles
"""
from rest_framework import permissions


def role_of(user):
    if not user or not user.is_authenticated:
        return None
    return getattr(user, 'effective_role', None)


class IsRoleAdmin(permissions.BasePermission):
    """Only administrators (ADMIN)"""
    message = 'Only administrators can perform this action'

    def has_permission(self, request, view):
        return role_of(request.user) == 'ADMIN'


class IsAdminOrHR(permissions.BasePermission):
    """Administrators and HR staff"""
    message = 'Only administrators and HR can perform this action'

    def has_permission(self, request, view):
        return role_of(request.user) in ('ADMIN', 'HR')


class IsAdminOrHROrReadOnly(IsAdminOrHR):
    """
    Any authenticated user may read; only ADMIN and HR may write.
    """
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return super().has_permission(request, view)
