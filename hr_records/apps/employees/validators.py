from datetime import date

from django.core.exceptions import ValidationError


def add_years(value: date, years: int) -> date:
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        # 29 February
        return value.replace(year=value.year + years, day=28)


def validate_date_of_birth(value: date, today: date = None):
    """Date of birth cannot lie in the future."""
    today = today or date.today()
    if value > today:
        raise ValidationError("Date of birth cannot be in the future")


def validate_hire_date(value: date, today: date = None):
    """Hire date at most one year ahead."""
    today = today or date.today()
    if value > add_years(today, 1):
        raise ValidationError("Hire date cannot be more than 1 year in the future")
