import pytest
from rest_framework.test import APIClient

from tests.fixtures.factories import AdminFactory, EmployeeFactory, HRFactory, UserFactory


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return AdminFactory(username='admin')


@pytest.fixture
def hr_user(db):
    return HRFactory(username='hr')


@pytest.fixture
def regular_user(db):
    return UserFactory(username='user')


@pytest.fixture
def employee(db):
    return EmployeeFactory()
