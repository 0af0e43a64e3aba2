import datetime

import pytest
from django.core.exceptions import ValidationError

from hr_records.apps.employees.validators import add_years, validate_date_of_birth, validate_hire_date

TODAY = datetime.date(2024, 6, 15)


def test_date_of_birth_in_future_rejected():
    with pytest.raises(ValidationError):
        validate_date_of_birth(datetime.date(2024, 6, 16), today=TODAY)


def test_date_of_birth_today_accepted():
    validate_date_of_birth(TODAY, today=TODAY)


def test_hire_date_within_a_year_accepted():
    validate_hire_date(datetime.date(2025, 6, 15), today=TODAY)


def test_hire_date_beyond_a_year_rejected():
    with pytest.raises(ValidationError):
        validate_hire_date(datetime.date(2025, 6, 16), today=TODAY)


def test_add_years_leap_day():
    assert add_years(datetime.date(2024, 2, 29), 1) == datetime.date(2025, 2, 28)
