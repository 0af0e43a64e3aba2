"""
Filterset definitions for the audit API.

Uses ``django_filters`` to allow clients to filter audit log entries by
subject, actor, action type and time range.
"""

import django_filters
from .models import AuditLog


class AuditLogFilter(django_filters.FilterSet):
    class Meta:
        model = AuditLog
        fields = {
            "subject_type": ["exact"],
            "subject_id": ["exact"],
            "actor_id": ["exact"],
            "action_type": ["exact"],
            "occurred_at": ["gte", "lte"],
        }
