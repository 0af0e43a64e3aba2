import datetime
from decimal import Decimal

import pytest

from hr_records.apps.audit.application.services import AuditRecordBuilder
from hr_records.apps.audit.domain.exceptions import InvalidActorError, PersistenceError
from hr_records.apps.audit.models import AuditLog
from hr_records.apps.employees.application.services import EmployeeApplicationService
from hr_records.apps.employees.models import Employee


def employee_data(**overrides):
    data = {
        'first_name': 'Bart',
        'last_name': 'Simpson',
        'email': 'bart@example.com',
        'date_of_birth': datetime.date(1990, 4, 1),
        'department': 'Sales',
        'job_title': 'Clerk',
        'hire_date': datetime.date(2022, 1, 10),
        'current_salary': Decimal('42000.00'),
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestEmployeeApplicationService:
    def test_hire_employee(self, hr_user):
        result = EmployeeApplicationService().hire_employee(employee_data(), hr_user)

        employee = result.record
        assert isinstance(employee, Employee)
        assert employee.employee_id.startswith('EMP')
        assert employee.created_by == str(hr_user.pk)
        assert result.audit_entry.action_type == 'CREATE'
        assert 'first_name' in result.audit_entry.edited_fields
        assert 'updated_at' not in result.audit_entry.edited_fields
        assert AuditLog.objects.filter(subject_id=str(employee.pk)).count() == 1

    def test_employee_ids_are_sequential(self, hr_user):
        service = EmployeeApplicationService()
        first = service.hire_employee(employee_data(), hr_user).record
        second = service.hire_employee(employee_data(email='lisa@example.com'), hr_user).record
        assert first.employee_id == 'EMP0001'
        assert second.employee_id == 'EMP0002'

    def test_update_employee_records_changes(self, employee, hr_user):
        result = EmployeeApplicationService().update_employee(
            employee.pk, {'department': 'Marketing', 'job_title': 'Software Engineer'}, hr_user
        )

        assert result.changed
        assert result.audit_entry.edited_fields == ['department']
        assert result.audit_entry.old_values == {'department': 'Engineering'}
        assert result.audit_entry.new_values == {'department': 'Marketing'}
        assert result.audit_entry.actor_name == 'hr'
        employee.refresh_from_db()
        assert employee.department == 'Marketing'
        assert employee.updated_by == str(hr_user.pk)

    def test_update_without_changes_is_a_noop(self, employee, hr_user):
        result = EmployeeApplicationService().update_employee(
            employee.pk, {'department': employee.department}, hr_user
        )

        assert not result.changed
        assert result.audit_entry is None
        assert AuditLog.objects.count() == 0
        employee.refresh_from_db()
        assert employee.updated_by == 'seed'

    @pytest.mark.parametrize('salary', [50000, Decimal('50000'), Decimal('50000.004')])
    def test_same_salary_written_differently_is_a_noop(self, employee, hr_user, salary):
        result = EmployeeApplicationService().update_employee(employee.pk, {'current_salary': salary}, hr_user)

        assert not result.changed
        assert AuditLog.objects.count() == 0

    def test_salary_change_is_recorded_rounded(self, employee, hr_user):
        result = EmployeeApplicationService().update_employee(employee.pk, {'current_salary': 61000}, hr_user)

        assert result.audit_entry.old_values == {'current_salary': '50000.00'}
        assert result.audit_entry.new_values == {'current_salary': '61000.00'}

    def test_hire_records_salary_as_stored(self, hr_user):
        result = EmployeeApplicationService().hire_employee(employee_data(current_salary=Decimal(40000)), hr_user)

        assert result.audit_entry.new_values['current_salary'] == '40000.00'

    def test_immutable_fields_are_ignored(self, employee, hr_user):
        result = EmployeeApplicationService().update_employee(
            employee.pk, {'date_of_birth': datetime.date(2000, 1, 1), 'employee_id': 'EMP9999'}, hr_user
        )

        assert not result.changed
        employee.refresh_from_db()
        assert employee.date_of_birth == datetime.date(1990, 5, 17)

    def test_anonymous_actor_rejected(self, employee):
        from django.contrib.auth.models import AnonymousUser

        with pytest.raises(InvalidActorError):
            EmployeeApplicationService().update_employee(employee.pk, {'city': 'Shelbyville'}, AnonymousUser())
        employee.refresh_from_db()
        assert employee.city == 'Springfield'

    def test_audit_failure_propagates_after_save(self, employee, hr_user, mocker):
        builder = AuditRecordBuilder()
        mocker.patch.object(builder.audit_repository, 'add', side_effect=PersistenceError('down'))
        service = EmployeeApplicationService(audit_builder=builder)

        with pytest.raises(PersistenceError):
            service.update_employee(employee.pk, {'city': 'Shelbyville'}, hr_user)
        employee.refresh_from_db()
        assert employee.city == 'Shelbyville'

    def test_list_employees_filters(self, hr_user):
        service = EmployeeApplicationService()
        service.hire_employee(employee_data(), hr_user)
        service.hire_employee(employee_data(first_name='Lisa', email='lisa@example.com', department='Research'), hr_user)

        employees, total = service.list_employees(department='Research')
        assert total == 1
        assert employees[0].first_name == 'Lisa'

        employees, total = service.list_employees(search='bart')
        assert total == 1

        employees, total = service.list_employees(page=2, page_size=1)
        assert total == 2
        assert len(employees) == 1
