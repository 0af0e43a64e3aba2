import logging

from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from hr_records.apps.audit.api.views import AuditHistoryMixin
from hr_records.apps.audit.domain.exceptions import InvalidActorError, PersistenceError
from hr_records.apps.audit.domain.value_objects import SubjectType
from hr_records.apps.common.drf_permissions import IsAdminOrHROrReadOnly
from hr_records.apps.common.pagination import page_count, parse_page_params
from hr_records.apps.employees.application.services import EmployeeApplicationService
from hr_records.apps.employees.models import Employee
from .serializers import EmployeeSerializer, EmployeeUpdateSerializer

logger = logging.getLogger(__name__)


class EmployeeViewSet(
    AuditHistoryMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for employee records.

    Employees are never deleted; every create and update is recorded in the
    audit trail.
    """
    queryset = Employee.objects.all()
    serializer_class = EmployeeSerializer
    permission_classes = [IsAuthenticated, IsAdminOrHROrReadOnly]
    audit_subject_type = SubjectType.EMPLOYEE

    def get_service(self):
        return EmployeeApplicationService()

    def get_serializer_class(self):
        if self.action in ('update', 'partial_update'):
            return EmployeeUpdateSerializer
        return super().get_serializer_class()

    def list(self, request, *args, **kwargs):
        try:
            page, limit = parse_page_params(request.query_params)
        except ValueError:
            return Response({'error': 'page and limit must be positive integers'}, status=status.HTTP_400_BAD_REQUEST)

        employees, total = self.get_service().list_employees(
            search=request.query_params.get('search', ''),
            department=request.query_params.get('department'),
            status=request.query_params.get('status'),
            page=page,
            page_size=limit,
        )
        return Response({
            'employees': EmployeeSerializer(employees, many=True).data,
            'pagination': {
                'total': total,
                'page': page,
                'limit': limit,
                'pages': page_count(total, limit),
            },
        })

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            result = self.get_service().hire_employee(serializer.validated_data, request.user)
        except InvalidActorError as exc:
            return Response({'error': str(exc)}, status=status.HTTP_403_FORBIDDEN)
        except PersistenceError:
            logger.exception("Error creating employee")
            return Response({'error': 'Failed to create employee'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(EmployeeSerializer(result.record).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        employee = self.get_object()
        serializer = self.get_serializer(employee, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        try:
            result = self.get_service().update_employee(employee.pk, serializer.validated_data, request.user)
        except InvalidActorError as exc:
            return Response({'error': str(exc)}, status=status.HTTP_403_FORBIDDEN)
        except PersistenceError:
            logger.exception("Error updating employee %s", employee.pk)
            return Response({'error': 'Failed to update employee'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        if not result.changed:
            return Response({'message': 'No changes detected'})
        return Response(EmployeeSerializer(result.record).data)
