"""
Service layer for employee records.

Every create and update goes through ``AuditRecordBuilder`` so the change
shows up in the employee's history.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from hr_records.apps.audit.application.services import AuditRecordBuilder
from hr_records.apps.audit.domain.entities import MutationResult
from hr_records.apps.audit.domain.snapshots import EMPLOYEE_FIELDS, snapshot_of
from hr_records.apps.audit.domain.value_objects import ActionType, Actor, SubjectType
from hr_records.apps.employees.domain.repositories import EmployeeRepository
from hr_records.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl
from hr_records.apps.employees.models import Employee

logger = logging.getLogger(__name__)

# Set once at creation; updates never touch them.
IMMUTABLE_FIELDS = frozenset({
    'employee_id', 'date_of_birth', 'hire_date',
    'created_at', 'created_by', 'updated_at', 'updated_by',
})
EDITABLE_FIELDS = tuple(field for field in EMPLOYEE_FIELDS if field not in IMMUTABLE_FIELDS)


class EmployeeApplicationService:
    def __init__(
        self,
        employee_repository: Optional[EmployeeRepository] = None,
        audit_builder: Optional[AuditRecordBuilder] = None,
    ):
        self.employee_repository = employee_repository or EmployeeRepositoryImpl()
        self.audit_builder = audit_builder or AuditRecordBuilder()

    def list_employees(
        self,
        search: str = "",
        department: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        page_size: int = 10,
    ) -> Tuple[List[Employee], int]:
        return self.employee_repository.list_paginated(
            offset=(page - 1) * page_size,
            limit=page_size,
            search=search,
            department=department,
            status=status,
        )

    def get_employee(self, employee_id: int) -> Employee:
        return self.employee_repository.get_by_id(employee_id)

    def hire_employee(self, data: Dict[str, Any], user) -> MutationResult:
        """
        Create an employee record.

        Args:
            data: validated employee attributes
            user: the user performing the change

        Returns:
            MutationResult with the new employee and its CREATE entry
        """
        actor = Actor.from_user(user)
        employee = Employee(**data)
        employee.created_by = actor.id
        employee.updated_by = actor.id
        employee = self.employee_repository.create(employee)

        entry = self.audit_builder.build(
            employee.pk,
            ActionType.CREATE,
            {},
            snapshot_of(SubjectType.EMPLOYEE, employee),
            actor,
            subject_type=SubjectType.EMPLOYEE,
        )
        logger.info("Employee %s created by %s", employee.employee_id, actor)
        return MutationResult(record=employee, audit_entry=entry)

    def update_employee(self, employee_id: int, changes: Dict[str, Any], user) -> MutationResult:
        """
        Update an employee record.

        Only editable fields are applied.  When nothing actually changes the
        record is not saved and ``changed`` is ``False``.
        """
        actor = Actor.from_user(user)
        employee = self.employee_repository.get_by_id(employee_id)
        old_snapshot = snapshot_of(SubjectType.EMPLOYEE, employee)

        for field, value in changes.items():
            if field in EDITABLE_FIELDS:
                setattr(employee, field, value)

        if not self.audit_builder.changed_fields(
            ActionType.UPDATE, old_snapshot, snapshot_of(SubjectType.EMPLOYEE, employee)
        ):
            logger.info("No changes detected for employee %s", employee.employee_id)
            return MutationResult(record=employee, audit_entry=None, changed=False)

        employee.updated_by = actor.id
        employee = self.employee_repository.update(employee)

        # The employee row is already saved here; a failing audit write
        # propagates but does not undo it.
        entry = self.audit_builder.build(
            employee.pk,
            ActionType.UPDATE,
            old_snapshot,
            snapshot_of(SubjectType.EMPLOYEE, employee),
            actor,
            subject_type=SubjectType.EMPLOYEE,
        )
        return MutationResult(record=employee, audit_entry=entry)
