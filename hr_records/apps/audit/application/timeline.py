"""
Timeline reconstruction.

Turns a page of audit entries into the rows of a change log table:
a creation is summarised in a single row, every other entry expands to one
row per edited field.  Only the first row of a group carries the date,
action and editor columns.
"""
import json
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Iterator, Optional

from django.core.serializers.json import DjangoJSONEncoder
from django.utils import timezone

from hr_records.apps.audit.domain.snapshots import bookkeeping_fields
from hr_records.apps.audit.domain.value_objects import ActionType

NOT_AVAILABLE = 'N/A'
DATE_FORMAT = '%Y-%m-%d %H:%M'


@dataclass(frozen=True)
class TimelineRow:
    date: str
    action: str
    editor: str
    field: str = ''
    old_value: str = ''
    new_value: str = ''
    summary: str = ''

    def as_dict(self):
        return asdict(self)


def field_label(name: str) -> str:
    """``address.postal_code`` -> ``Address > Postal code``"""
    segments = []
    for segment in name.split('.'):
        segment = segment.replace('_', ' ').strip()
        segments.append(segment[:1].upper() + segment[1:])
    return ' > '.join(segments)


def display_value(values: Optional[dict], name: str) -> str:
    """A missing value is ``N/A``; a stored ``None`` shows as ``null``."""
    if not isinstance(values, dict) or name not in values:
        return NOT_AVAILABLE
    value = values[name]
    if value is None or isinstance(value, (dict, list, bool)):
        return json.dumps(value, sort_keys=True, cls=DjangoJSONEncoder)
    return str(value)


def format_date(value: Any) -> str:
    if value is None:
        return ''
    if hasattr(value, 'strftime'):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.strftime(DATE_FORMAT)
    return str(value)


def _rows(entry) -> Iterator[TimelineRow]:
    date = format_date(getattr(entry, 'occurred_at', None))
    action = getattr(entry, 'action_type', None) or NOT_AVAILABLE
    editor = getattr(entry, 'actor_name', None) or NOT_AVAILABLE

    if action == ActionType.CREATE:
        subject = getattr(entry, 'subject_type', None) or 'employee'
        yield TimelineRow(date=date, action=action, editor=editor, summary=f"Initial {subject} record created")
        return

    excluded = bookkeeping_fields()
    fields = [name for name in (getattr(entry, 'edited_fields', None) or []) if name not in excluded]
    old_values = getattr(entry, 'old_values', None)
    new_values = getattr(entry, 'new_values', None)
    for index, name in enumerate(fields):
        first = index == 0
        yield TimelineRow(
            date=date if first else '',
            action=action if first else '',
            editor=editor if first else '',
            field=field_label(name),
            old_value=display_value(old_values, name),
            new_value=display_value(new_values, name),
        )


class Timeline:
    """Restartable view over the rows of a sequence of entries."""

    def __init__(self, entries: Iterable):
        self.entries = tuple(entries)

    def __iter__(self) -> Iterator[TimelineRow]:
        for entry in self.entries:
            yield from _rows(entry)

    def as_list(self):
        return [row.as_dict() for row in self]


def render(entries: Iterable) -> Timeline:
    return Timeline(entries)
