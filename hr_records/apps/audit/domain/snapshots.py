"""
Record snapshots.

A snapshot is the flat, JSON-ready view of one record at one instant.  Each
record kind declares the fields it may carry; a snapshot holding anything
else is rejected so that a typo in a field name fails loudly instead of
silently producing a diff nobody can read.
"""
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterator, Optional

from django.conf import settings
from django.core.exceptions import FieldDoesNotExist
from django.db import models

from .exceptions import UnknownFieldError
from .value_objects import SubjectType

EMPLOYEE_FIELDS = (
    'employee_id',
    'first_name',
    'last_name',
    'email',
    'phone_number',
    'date_of_birth',
    # Address
    'street',
    'city',
    'state',
    'postal_code',
    'country',
    # Emergency contact
    'emergency_name',
    'emergency_relationship',
    'emergency_phone_number',
    # Employment info
    'department',
    'job_title',
    'employment_type',
    'hire_date',
    'current_salary',
    'reporting_manager_id',
    'work_location',
    'work_email',
    'work_phone',
    'employment_status',
    # Metadata
    'created_at',
    'created_by',
    'updated_at',
    'updated_by',
)

# Password and last_login are never part of the audit trail.
USER_FIELDS = (
    'user_id',
    'username',
    'email',
    'full_name',
    'role_level',
    'is_active',
    'date_joined',
    'created_by',
    'updated_at',
    'updated_by',
)

FIELDS_BY_KIND = {
    SubjectType.EMPLOYEE: EMPLOYEE_FIELDS,
    SubjectType.USER: USER_FIELDS,
}


def bookkeeping_fields() -> frozenset:
    """Fields tracking "last modified" metadata, excluded from change reports."""
    return frozenset(getattr(settings, 'AUDIT_BOOKKEEPING_FIELDS', ('updated_at', 'updated_by')))


def to_json_value(value: Any, model_field=None) -> Any:
    """
    Convert a model attribute to the value stored in a snapshot.

    Numbers bound for a ``DecimalField`` are rounded to its ``decimal_places``
    first, so the snapshot matches what the database will hold.
    """
    if (
        isinstance(model_field, models.DecimalField)
        and isinstance(value, (int, float, Decimal))
        and not isinstance(value, bool)
        and Decimal(value).is_finite()
    ):
        value = model_field.to_python(value).quantize(Decimal(1).scaleb(-model_field.decimal_places))
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


class Snapshot(Mapping):
    """Immutable field-name to value mapping for one record kind."""

    def __init__(self, kind, values: Optional[Mapping] = None):
        self.kind = SubjectType(kind)
        values = dict(values or {})
        unknown = set(values) - set(FIELDS_BY_KIND[self.kind])
        if unknown:
            raise UnknownFieldError(self.kind.value, unknown)
        self._values: Dict[str, Any] = values

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return f"Snapshot({self.kind.value!r}, {self._values!r})"


def _model_field(instance, name):
    meta = getattr(instance, '_meta', None)
    if meta is None:
        return None
    try:
        return meta.get_field(name)
    except FieldDoesNotExist:
        return None


def snapshot_of(kind, instance) -> Snapshot:
    """Take a snapshot of a model instance using the fields declared for ``kind``."""
    kind = SubjectType(kind)
    return Snapshot(kind, {
        field: to_json_value(getattr(instance, field), _model_field(instance, field))
        for field in FIELDS_BY_KIND[kind]
        if hasattr(instance, field)
    })
