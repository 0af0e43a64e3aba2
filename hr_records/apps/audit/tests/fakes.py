import uuid
from dataclasses import replace
from datetime import timedelta

from django.utils import timezone

from hr_records.apps.audit.domain.exceptions import PersistenceError
from hr_records.apps.audit.domain.repositories import AuditRepository


class InMemoryAuditRepository(AuditRepository):
    """Audit store kept in a list; entries get increasing timestamps."""

    def __init__(self, fail=False):
        self.entries = []
        self.fail = fail
        self._clock = timezone.now()

    def add(self, entry):
        if self.fail:
            raise PersistenceError("store unavailable")
        self._clock += timedelta(seconds=1)
        stored = replace(entry, id=uuid.uuid4(), occurred_at=self._clock)
        self.entries.append(stored)
        return stored

    def list_for_subject(self, subject_type, subject_id, offset, limit):
        matching = [
            e for e in self.entries
            if e.subject_type == subject_type and e.subject_id == str(subject_id)
        ]
        matching.sort(key=lambda e: e.occurred_at, reverse=True)
        return matching[offset:offset + limit], len(matching)
