import datetime

from django.utils import timezone
from rest_framework.test import APITestCase

from hr_records.apps.audit.models import AuditLog
from hr_records.apps.auth.models import User


class AuditLogAPITest(APITestCase):

    @classmethod
    def setUpTestData(cls):
        cls.admin = User.objects.create_user(username='admin', password='password', role_level=User.RoleLevel.ADMIN)
        cls.hr = User.objects.create_user(username='hr', password='password', role_level=User.RoleLevel.HR)

        log1 = AuditLog.objects.create(
            subject_id='1', action_type='CREATE', edited_fields=['first_name'],
            new_values={'first_name': 'Bart'}, actor_id=str(cls.admin.pk), actor_name='admin',
        )
        log2 = AuditLog.objects.create(
            subject_id='1', action_type='UPDATE', edited_fields=['email'],
            old_values={'email': 'a@x.com'}, new_values={'email': 'b@x.com'},
            actor_id=str(cls.hr.pk), actor_name='hr',
        )
        log3 = AuditLog.objects.create(
            subject_type='user', subject_id=str(cls.hr.pk), action_type='DELETE',
            edited_fields=['username'], old_values={'username': 'x'},
            actor_id=str(cls.admin.pk), actor_name='admin',
        )
        AuditLog.objects.filter(id=log1.id).update(occurred_at=timezone.make_aware(datetime.datetime(2025, 1, 1, 12)))
        AuditLog.objects.filter(id=log2.id).update(occurred_at=timezone.make_aware(datetime.datetime(2025, 1, 2, 12)))
        AuditLog.objects.filter(id=log3.id).update(occurred_at=timezone.make_aware(datetime.datetime(2025, 1, 3, 12)))

    def setUp(self):
        self.client.force_authenticate(user=self.admin)

    def test_list_audit_logs(self):
        response = self.client.get('/api/audit/logs/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['count'], 3)
        self.assertEqual(response.data['results'][0]['action_type'], 'DELETE')
        self.assertEqual(response.data['pagination']['total'], 3)

    def test_filter_by_actor(self):
        response = self.client.get(f'/api/audit/logs/?actor_id={self.hr.pk}')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['results'][0]['actor_name'], 'hr')

    def test_filter_by_subject(self):
        response = self.client.get('/api/audit/logs/?subject_type=employee&subject_id=1')
        self.assertEqual(response.data['count'], 2)

    def test_filter_by_occurred_at_gte(self):
        response = self.client.get('/api/audit/logs/?occurred_at__gte=2025-01-02T00:00:00Z')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['count'], 2)

    def test_sorting_ascending(self):
        response = self.client.get('/api/audit/logs/?ordering=occurred_at')
        self.assertEqual(response.data['results'][0]['action_type'], 'CREATE')

    def test_retrieve(self):
        log = AuditLog.objects.get(action_type='UPDATE')
        response = self.client.get(f'/api/audit/logs/{log.id}/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['edited_fields'], ['email'])

    def test_read_only(self):
        response = self.client.post('/api/audit/logs/', {'subject_id': '1'}, format='json')
        self.assertEqual(response.status_code, 405)

    def test_hr_denied(self):
        self.client.force_authenticate(user=self.hr)
        response = self.client.get('/api/audit/logs/')
        self.assertEqual(response.status_code, 403)

    def test_anonymous_denied(self):
        self.client.force_authenticate(user=None)
        response = self.client.get('/api/audit/logs/')
        self.assertEqual(response.status_code, 401)
