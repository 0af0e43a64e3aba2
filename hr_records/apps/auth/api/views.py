import logging

from django.core.exceptions import ValidationError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from hr_records.apps.audit.api.views import AuditHistoryMixin
from hr_records.apps.audit.domain.exceptions import InvalidActorError, PersistenceError
from hr_records.apps.audit.domain.value_objects import SubjectType
from hr_records.apps.auth.application.services import UserApplicationService
from hr_records.apps.auth.models import User
from hr_records.apps.common.drf_permissions import IsAdminOrHR, role_of
from hr_records.apps.common.pagination import page_count, parse_page_params
from .serializers import PasswordResetSerializer, UserSerializer, UserUpdateSerializer

logger = logging.getLogger(__name__)


def _error(message, code):
    return Response({'error': message}, status=code)


class UserViewSet(AuditHistoryMixin, viewsets.ModelViewSet):
    """
    ViewSet for user accounts.

    Listing is limited to ADMIN and HR; per-account rules (who may change
    whom) are enforced by ``UserApplicationService``.
    """
    queryset = User.objects.all().order_by('id')
    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated]
    audit_subject_type = SubjectType.USER

    def get_service(self):
        return UserApplicationService()

    def get_permissions(self):
        if self.action in ('list', 'create', 'destroy', 'audit_logs'):
            self.permission_classes = [IsAuthenticated, IsAdminOrHR]
        else:
            self.permission_classes = [IsAuthenticated]
        return super().get_permissions()

    def get_queryset(self):
        qs = super().get_queryset()
        if getattr(self, 'swagger_fake_view', False):
            return qs
        user = self.request.user
        if self.action in ('retrieve', 'update', 'partial_update', 'reset_password'):
            if role_of(user) not in ('ADMIN', 'HR'):
                return qs.filter(pk=user.pk)
        return qs

    def get_serializer_class(self):
        if self.action in ('update', 'partial_update'):
            return UserUpdateSerializer
        if self.action == 'reset_password':
            return PasswordResetSerializer
        return super().get_serializer_class()

    def list(self, request, *args, **kwargs):
        try:
            page, limit = parse_page_params(request.query_params)
        except ValueError:
            return _error('page and limit must be positive integers', status.HTTP_400_BAD_REQUEST)

        users, total = self.get_service().list_users(
            search=request.query_params.get('search', ''),
            role=request.query_params.get('role'),
            page=page,
            page_size=limit,
        )
        return Response({
            'users': UserSerializer(users, many=True).data,
            'pagination': {'total': total, 'page': page, 'limit': limit, 'pages': page_count(total, limit)},
        })

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        password = data.pop('password', '')
        try:
            result = self.get_service().create_user(data, password, request.user)
        except ValidationError as exc:
            return _error(exc.messages[0], status.HTTP_400_BAD_REQUEST)
        except InvalidActorError as exc:
            return _error(str(exc), status.HTTP_403_FORBIDDEN)
        except PersistenceError:
            logger.exception("Error creating user")
            return _error('Failed to create user', status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(UserSerializer(result.record).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        user = self.get_object()
        serializer = self.get_serializer(user, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        try:
            result = self.get_service().update_user(user.pk, serializer.validated_data, request.user)
        except ValidationError as exc:
            return _error(exc.messages[0], status.HTTP_400_BAD_REQUEST)
        except InvalidActorError as exc:
            return _error(str(exc), status.HTTP_403_FORBIDDEN)
        except PersistenceError:
            logger.exception("Error updating user %s", user.pk)
            return _error('Failed to update user', status.HTTP_500_INTERNAL_SERVER_ERROR)
        if not result.changed:
            return Response({'message': 'No changes detected'})
        return Response(UserSerializer(result.record).data)

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()
        try:
            self.get_service().delete_user(user.pk, request.user)
        except ValidationError as exc:
            return _error(exc.messages[0], status.HTTP_400_BAD_REQUEST)
        except InvalidActorError as exc:
            return _error(str(exc), status.HTTP_403_FORBIDDEN)
        except PersistenceError:
            logger.exception("Error deleting user %s", user.pk)
            return _error('Failed to delete user', status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['post'], url_path='reset-password')
    def reset_password(self, request, pk=None):
        user = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            self.get_service().reset_password(user.pk, serializer.validated_data['password'], request.user)
        except ValidationError as exc:
            return _error(exc.messages[0], status.HTTP_400_BAD_REQUEST)
        return Response({'message': 'Password reset successfully'})
