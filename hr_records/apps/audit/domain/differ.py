"""
Change-set differ.

Compares two snapshots field by field.  Values are compared by content:
nested dicts and lists are equal when their canonical JSON forms match, and
dates are reduced to the calendar day first so a time-of-day or a different
serialization of the same day is not reported as a change.
"""
import json
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone as dt_timezone
from typing import Any, Set

from django.core.serializers.json import DjangoJSONEncoder
from django.utils import timezone
from django.utils.dateparse import parse_datetime

ABSENT = object()

DATETIME_PREFIX = re.compile(r'^\d{4}-\d{2}-\d{2}[T ]')


def calendar_day(value: datetime) -> str:
    if timezone.is_aware(value):
        value = value.astimezone(dt_timezone.utc)
    return value.date().isoformat()


def normalize(value: Any) -> Any:
    """Reduce date-like values to their ``YYYY-MM-DD`` calendar day."""
    if isinstance(value, datetime):
        return calendar_day(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str) and DATETIME_PREFIX.match(value):
        try:
            parsed = parse_datetime(value)
        except ValueError:
            parsed = None
        if parsed is not None:
            return calendar_day(parsed)
    return value


def canonical(value: Any) -> str:
    """Canonical serialized form used for deep equality."""
    return json.dumps(value, sort_keys=True, cls=DjangoJSONEncoder)


def values_equal(old: Any, new: Any) -> bool:
    if old is ABSENT or new is ABSENT:
        return old is new
    old, new = normalize(old), normalize(new)
    if type(old) is type(new) and old == new:
        return True
    try:
        return canonical(old) == canonical(new)
    except (TypeError, ValueError):
        # Not JSON-serializable; compare by value.
        return old == new


def diff(old_snapshot: Mapping, new_snapshot: Mapping) -> Set[str]:
    """
    Names of the fields of ``new_snapshot`` whose value differs from
    ``old_snapshot``.  A field missing from ``old_snapshot`` always counts
    as changed.
    """
    return {
        key for key, value in new_snapshot.items()
        if not values_equal(old_snapshot.get(key, ABSENT), value)
    }
