import datetime
from decimal import Decimal

import factory
from factory.django import DjangoModelFactory

from hr_records.apps.auth.models import User
from hr_records.apps.employees.models import Employee


class UserFactory(DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f'user{n}')
    email = factory.LazyAttribute(lambda o: f'{o.username}@example.com')
    full_name = factory.Faker('name')
    role_level = User.RoleLevel.USER
    password = factory.django.Password('password123')


class AdminFactory(UserFactory):
    role_level = User.RoleLevel.ADMIN


class HRFactory(UserFactory):
    role_level = User.RoleLevel.HR


class EmployeeFactory(DjangoModelFactory):
    class Meta:
        model = Employee

    employee_id = factory.Sequence(lambda n: f'EMP{n + 1:04d}')
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    email = factory.LazyAttribute(lambda o: f'{o.first_name}.{o.last_name}@example.com'.lower())
    date_of_birth = datetime.date(1990, 5, 17)
    city = 'Springfield'
    country = 'United States'
    department = 'Engineering'
    job_title = 'Software Engineer'
    employment_type = Employee.EmploymentType.FULL_TIME
    hire_date = datetime.date(2020, 3, 1)
    current_salary = Decimal('50000.00')
    employment_status = Employee.EmploymentStatus.ACTIVE
    created_by = 'seed'
    updated_by = 'seed'
