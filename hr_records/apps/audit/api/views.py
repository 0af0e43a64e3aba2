"""
API views for the audit app.

``AuditLogViewSet`` is a read-only, filterable view over the whole audit
trail for administrators.  ``AuditHistoryMixin`` adds an ``audit-logs``
route to the viewsets of tracked records.
"""
from django.conf import settings
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from hr_records.apps.audit.application.services import AuditQueryService
from hr_records.apps.audit.application.timeline import render
from hr_records.apps.audit.domain.value_objects import SubjectType
from hr_records.apps.audit.filters import AuditLogFilter
from hr_records.apps.audit.models import AuditLog
from hr_records.apps.common.drf_permissions import IsRoleAdmin
from hr_records.apps.common.pagination import parse_page_params
from .serializers import AuditEntrySerializer, AuditLogSerializer, TimelineRowSerializer


class AuditLogViewSet(viewsets.ReadOnlyModelViewSet):
    """API endpoint that allows audit logs to be viewed."""

    queryset = AuditLog.objects.all()
    serializer_class = AuditLogSerializer
    permission_classes = [IsAuthenticated, IsRoleAdmin]
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_class = AuditLogFilter
    ordering_fields = ["occurred_at", "actor_name", "action_type"]
    ordering = ["-occurred_at", "-id"]


class AuditHistoryMixin:
    """
    Adds ``GET <record>/{pk}/audit-logs/?page=&limit=`` to a record viewset.

    The response carries the raw entries, the rendered change timeline and
    a ``pagination`` block.
    """
    audit_subject_type = SubjectType.EMPLOYEE

    def get_audit_query_service(self):
        return AuditQueryService()

    @action(detail=True, methods=['get'], url_path='audit-logs')
    def audit_logs(self, request, pk=None):
        subject = self.get_object()
        try:
            page, limit = parse_page_params(request.query_params, getattr(settings, 'AUDIT_LOG_PAGE_SIZE', 10))
        except ValueError:
            return Response({'error': 'page and limit must be positive integers'}, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_audit_query_service().list_entries(
            subject.pk, page=page, page_size=limit, subject_type=self.audit_subject_type
        )
        return Response({
            'audit_logs': AuditEntrySerializer(result.entries, many=True).data,
            'timeline': TimelineRowSerializer(render(result.entries), many=True).data,
            'pagination': {
                'total': result.total_count,
                'page': result.page,
                'limit': result.page_size,
                'pages': result.pages,
            },
        })
