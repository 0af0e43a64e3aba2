import random
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from hr_records.apps.employees.application.services import EmployeeApplicationService
from hr_records.apps.employees.models import Employee

FIRST_NAMES = [
    'Ada', 'Alan', 'Grace', 'Linus', 'Margaret', 'Dennis', 'Barbara', 'Ken',
    'Frances', 'Edsger', 'Radia', 'John', 'Katherine', 'Donald', 'Hedy', 'Tim',
]
LAST_NAMES = [
    'Lovelace', 'Turing', 'Hopper', 'Torvalds', 'Hamilton', 'Ritchie', 'Liskov',
    'Thompson', 'Allen', 'Dijkstra', 'Perlman', 'McCarthy', 'Johnson', 'Knuth',
]

JOB_TITLES_BY_DEPARTMENT = {
    'Engineering': ['Software Engineer', 'Backend Developer', 'DevOps Engineer', 'QA Engineer', 'Technical Lead'],
    'Marketing': ['Marketing Specialist', 'Content Writer', 'Brand Manager'],
    'HR': ['HR Specialist', 'Recruiter', 'HR Manager'],
    'Finance': ['Accountant', 'Financial Analyst', 'Payroll Specialist'],
    'Sales': ['Sales Representative', 'Account Executive', 'Sales Manager'],
    'Operations': ['Operations Manager', 'Project Manager', 'Business Analyst'],
    'Customer Support': ['Support Representative', 'Support Team Lead'],
    'Product': ['Product Manager', 'UX Designer', 'Product Analyst'],
    'Legal': ['Legal Counsel', 'Paralegal', 'Compliance Officer'],
}

WORK_LOCATIONS = ['Headquarters', 'Remote', 'Branch Office', 'Satellite Office']
COUNTRIES = ['United States', 'Canada', 'United Kingdom', 'Germany', 'Australia']
RELATIONSHIPS = ['Spouse', 'Parent', 'Sibling', 'Friend']


class Command(BaseCommand):
    help = 'Creates sample employee records, each with its CREATE audit entry'

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=25, help='Number of employees to create')
        parser.add_argument(
            '--username',
            help='Account recorded as the creator (defaults to the first superuser)',
        )

    def handle(self, *args, **options):
        if options['count'] < 1:
            raise CommandError('--count must be 1 or greater')
        actor = self._actor(options.get('username'))
        service = EmployeeApplicationService()

        self.stdout.write(f"Seeding {options['count']} employees as {actor.get_username()}...")
        for _ in range(options['count']):
            result = service.hire_employee(self._employee_data(), actor)
            self.stdout.write(f"  {result.record}")

        self.stdout.write(self.style.SUCCESS(f"Created {options['count']} employees."))

    def _actor(self, username):
        User = get_user_model()
        if username:
            try:
                return User.objects.get(username=username)
            except User.DoesNotExist:
                raise CommandError(f"User '{username}' does not exist")
        actor = User.objects.filter(is_superuser=True).order_by('id').first()
        if actor is None:
            raise CommandError('No superuser found; create one or pass --username')
        return actor

    def _employee_data(self):
        first_name = random.choice(FIRST_NAMES)
        last_name = random.choice(LAST_NAMES)
        department = random.choice(list(JOB_TITLES_BY_DEPARTMENT))
        today = timezone.localdate()
        handle = f"{first_name}.{last_name}".lower()
        return {
            'first_name': first_name,
            'last_name': last_name,
            'email': f"{handle}{random.randint(1, 999)}@example.com",
            'phone_number': f"555-{random.randint(1000, 9999)}",
            'date_of_birth': today - timedelta(days=random.randint(22 * 365, 60 * 365)),
            'street': f"{random.randint(1, 999)} Main Street",
            'city': 'Springfield',
            'country': random.choice(COUNTRIES),
            'postal_code': f"{random.randint(10000, 99999)}",
            'emergency_name': f"{random.choice(FIRST_NAMES)} {last_name}",
            'emergency_relationship': random.choice(RELATIONSHIPS),
            'emergency_phone_number': f"555-{random.randint(1000, 9999)}",
            'department': department,
            'job_title': random.choice(JOB_TITLES_BY_DEPARTMENT[department]),
            'employment_type': random.choice(Employee.EmploymentType.values),
            'hire_date': today - timedelta(days=random.randint(0, 10 * 365)),
            'current_salary': Decimal(random.randrange(40000, 160000, 500)),
            'work_location': random.choice(WORK_LOCATIONS),
            'work_email': f"{handle}@company.example",
            'employment_status': random.choice(Employee.EmploymentStatus.values),
        }
