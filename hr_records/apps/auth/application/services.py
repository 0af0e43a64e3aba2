"""
Service layer for user accounts.

Creates, updates and deletions are recorded in the audit trail with
``subject_type="user"``.  Role rules:

* only ADMIN creates or deletes accounts and changes ``role_level``;
* only ADMIN modifies ADMIN accounts;
* HR modifies USER accounts and its own;
* USER modifies only its own account;
* ``is_active`` is changed by ADMIN and HR only.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from django.core.exceptions import PermissionDenied, ValidationError

from hr_records.apps.audit.application.services import AuditRecordBuilder
from hr_records.apps.audit.domain.entities import MutationResult
from hr_records.apps.audit.domain.snapshots import snapshot_of
from hr_records.apps.audit.domain.value_objects import ActionType, Actor, SubjectType
from hr_records.apps.auth.domain.repositories import UserRepository
from hr_records.apps.auth.infrastructure.repositories import UserRepositoryImpl
from hr_records.apps.auth.models import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

SELF_EDITABLE_FIELDS = ('full_name', 'email')


class UserApplicationService:
    def __init__(
        self,
        user_repository: Optional[UserRepository] = None,
        audit_builder: Optional[AuditRecordBuilder] = None,
    ):
        self.user_repository = user_repository or UserRepositoryImpl()
        self.audit_builder = audit_builder or AuditRecordBuilder()

    def list_users(
        self, search: str = "", role: Optional[str] = None, page: int = 1, page_size: int = 10
    ) -> Tuple[List[User], int]:
        return self.user_repository.list_paginated(
            offset=(page - 1) * page_size, limit=page_size, search=search, role=role
        )

    def get_user(self, user_id: int) -> User:
        return self.user_repository.get_by_id(user_id)

    def create_user(self, data: Dict[str, Any], password: str, acting_user) -> MutationResult:
        actor = Actor.from_user(acting_user)
        if not acting_user.is_admin:
            raise PermissionDenied("Only administrators can create user accounts")
        if data.get('email') and self.user_repository.email_in_use(data['email']):
            raise ValidationError("Email already in use by another user")
        self._check_password(password)

        user = User(**data)
        user.set_password(password)
        user.created_by = actor.id
        user.updated_by = actor.id
        user = self.user_repository.create(user)

        entry = self.audit_builder.build(
            user.pk, ActionType.CREATE, {}, snapshot_of(SubjectType.USER, user), actor,
            subject_type=SubjectType.USER,
        )
        logger.info("User %s created by %s", user.username, actor)
        return MutationResult(record=user, audit_entry=entry)

    def update_user(self, user_id: int, changes: Dict[str, Any], acting_user) -> MutationResult:
        actor = Actor.from_user(acting_user)
        user = self.user_repository.get_by_id(user_id)
        self._check_can_modify(acting_user, user, changes)

        email = changes.get('email')
        if email and self.user_repository.email_in_use(email, exclude_id=user.pk):
            raise ValidationError("Email already in use by another user")

        old_snapshot = snapshot_of(SubjectType.USER, user)
        for field in self._editable_fields(acting_user):
            if field in changes:
                setattr(user, field, changes[field])

        if not self.audit_builder.changed_fields(
            ActionType.UPDATE, old_snapshot, snapshot_of(SubjectType.USER, user)
        ):
            logger.info("No changes detected for user %s", user.username)
            return MutationResult(record=user, audit_entry=None, changed=False)

        user.updated_by = actor.id
        user = self.user_repository.update(user)
        entry = self.audit_builder.build(
            user.pk, ActionType.UPDATE, old_snapshot, snapshot_of(SubjectType.USER, user), actor,
            subject_type=SubjectType.USER,
        )
        return MutationResult(record=user, audit_entry=entry)

    def delete_user(self, user_id: int, acting_user) -> MutationResult:
        actor = Actor.from_user(acting_user)
        if not acting_user.is_admin:
            raise PermissionDenied("Only administrators can delete user accounts")
        user = self.user_repository.get_by_id(user_id)
        if user.pk == acting_user.pk:
            raise ValidationError("You cannot delete your own account")

        subject_id = user.pk
        old_snapshot = snapshot_of(SubjectType.USER, user)
        self.user_repository.delete(user)
        entry = self.audit_builder.build(
            subject_id, ActionType.DELETE, old_snapshot, {}, actor,
            subject_type=SubjectType.USER,
        )
        logger.info("User %s deleted by %s", old_snapshot.get('username'), actor)
        return MutationResult(record=user, audit_entry=entry)

    def reset_password(self, user_id: int, password: str, acting_user) -> User:
        """The password never enters a snapshot, so no audit entry is written."""
        Actor.from_user(acting_user)
        user = self.user_repository.get_by_id(user_id)
        if not acting_user.is_admin and acting_user.pk != user.pk:
            raise PermissionDenied("You can only reset your own password")
        self._check_password(password)
        user.set_password(password)
        user = self.user_repository.update(user)
        logger.info("Password reset for user %s by %s", user.username, acting_user.get_username())
        return user

    def _check_password(self, password: str):
        if not password:
            raise ValidationError("Password is required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    def _check_can_modify(self, acting_user, user: User, changes: Dict[str, Any]):
        is_self = acting_user.pk == user.pk
        if 'role_level' in changes and changes['role_level'] != user.role_level and not acting_user.is_admin:
            raise PermissionDenied("Only administrators can change role levels")
        if user.is_admin and not acting_user.is_admin:
            raise PermissionDenied("Only administrators can modify administrator accounts")
        if acting_user.is_hr and not is_self and user.role_level != User.RoleLevel.USER:
            raise PermissionDenied("HR can only modify regular user accounts")
        if not acting_user.is_admin and not acting_user.is_hr and not is_self:
            raise PermissionDenied("You can only update your own account")

    def _editable_fields(self, acting_user):
        if acting_user.is_admin:
            return SELF_EDITABLE_FIELDS + ('is_active', 'role_level')
        if acting_user.is_hr:
            return SELF_EDITABLE_FIELDS + ('is_active',)
        return SELF_EDITABLE_FIELDS
