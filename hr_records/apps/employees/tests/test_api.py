import datetime

import pytest
from django.urls import reverse
from rest_framework import status

from hr_records.apps.audit.models import AuditLog
from hr_records.apps.employees.models import Employee
from tests.fixtures.factories import EmployeeFactory


def new_employee_payload(**overrides):
    payload = {
        'first_name': 'Bart',
        'last_name': 'Simpson',
        'email': 'bart@example.com',
        'date_of_birth': '1990-04-01',
        'department': 'Sales',
        'job_title': 'Clerk',
        'hire_date': '2022-01-10',
        'current_salary': '42000.00',
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestEmployeeAPI:

    def test_list_requires_authentication(self, api_client):
        response = api_client.get(reverse('employee-list'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_with_pagination(self, api_client, regular_user):
        EmployeeFactory.create_batch(3)
        api_client.force_authenticate(user=regular_user)

        response = api_client.get(reverse('employee-list'), {'limit': 2})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['employees']) == 2
        assert response.data['pagination'] == {'total': 3, 'page': 1, 'limit': 2, 'pages': 2}

    def test_list_rejects_bad_page(self, api_client, regular_user):
        api_client.force_authenticate(user=regular_user)
        response = api_client.get(reverse('employee-list'), {'page': 'zero'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_by_hr(self, api_client, hr_user):
        api_client.force_authenticate(user=hr_user)

        response = api_client.post(reverse('employee-list'), new_employee_payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['employee_id'] == 'EMP0001'
        employee = Employee.objects.get()
        log = AuditLog.objects.get(subject_id=str(employee.pk))
        assert log.action_type == 'CREATE'
        assert log.actor_name == 'hr'

    def test_create_denied_for_regular_user(self, api_client, regular_user):
        api_client.force_authenticate(user=regular_user)
        response = api_client.post(reverse('employee-list'), new_employee_payload(), format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Employee.objects.count() == 0

    def test_create_rejects_future_birth_date(self, api_client, hr_user):
        api_client.force_authenticate(user=hr_user)
        tomorrow = (datetime.date.today() + datetime.timedelta(days=1)).isoformat()
        response = api_client.post(
            reverse('employee-list'), new_employee_payload(date_of_birth=tomorrow), format='json'
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'date_of_birth' in response.data

    def test_create_rejects_missing_required_fields(self, api_client, hr_user):
        api_client.force_authenticate(user=hr_user)
        response = api_client.post(reverse('employee-list'), {'first_name': 'Bart'}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'department' in response.data

    def test_partial_update_records_change(self, api_client, admin_user, employee):
        api_client.force_authenticate(user=admin_user)

        response = api_client.patch(
            reverse('employee-detail', args=[employee.pk]), {'job_title': 'Team Lead'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['job_title'] == 'Team Lead'
        log = AuditLog.objects.get(subject_id=str(employee.pk))
        assert log.action_type == 'UPDATE'
        assert log.edited_fields == ['job_title']
        assert log.old_values == {'job_title': 'Software Engineer'}

    def test_update_without_changes(self, api_client, admin_user, employee):
        api_client.force_authenticate(user=admin_user)

        response = api_client.patch(
            reverse('employee-detail', args=[employee.pk]), {'city': employee.city}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'message': 'No changes detected'}
        assert AuditLog.objects.count() == 0

    def test_date_of_birth_cannot_be_changed(self, api_client, admin_user, employee):
        api_client.force_authenticate(user=admin_user)

        response = api_client.patch(
            reverse('employee-detail', args=[employee.pk]), {'date_of_birth': '1980-01-01'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        employee.refresh_from_db()
        assert employee.date_of_birth == datetime.date(1990, 5, 17)

    def test_update_denied_for_regular_user(self, api_client, regular_user, employee):
        api_client.force_authenticate(user=regular_user)
        response = api_client.patch(
            reverse('employee-detail', args=[employee.pk]), {'city': 'Shelbyville'}, format='json'
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_not_allowed(self, api_client, admin_user, employee):
        api_client.force_authenticate(user=admin_user)
        response = api_client.delete(reverse('employee-detail', args=[employee.pk]))
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert Employee.objects.filter(pk=employee.pk).exists()

    def test_audit_logs_endpoint(self, api_client, hr_user, employee):
        api_client.force_authenticate(user=hr_user)
        url = reverse('employee-detail', args=[employee.pk])
        api_client.patch(url, {'city': 'Shelbyville'}, format='json')
        api_client.patch(url, {'city': 'Capital City', 'job_title': 'Lead'}, format='json')

        response = api_client.get(reverse('employee-audit-logs', args=[employee.pk]), {'limit': 1})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['pagination'] == {'total': 2, 'page': 1, 'limit': 1, 'pages': 2}
        (latest,) = response.data['audit_logs']
        assert latest['edited_fields'] == ['city', 'job_title']
        timeline = response.data['timeline']
        assert [row['field'] for row in timeline] == ['City', 'Job title']
        assert timeline[0]['old_value'] == 'Shelbyville'
        assert timeline[1]['editor'] == ''

    def test_audit_logs_rejects_bad_limit(self, api_client, hr_user, employee):
        api_client.force_authenticate(user=hr_user)
        response = api_client.get(reverse('employee-audit-logs', args=[employee.pk]), {'limit': 0})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
