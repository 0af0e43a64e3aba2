import logging
from typing import List, Tuple

from django.db import DatabaseError

from hr_records.apps.audit.domain.entities import AuditEntry
from hr_records.apps.audit.domain.exceptions import PersistenceError
from hr_records.apps.audit.domain.repositories import AuditRepository
from hr_records.apps.audit.models import AuditLog

logger = logging.getLogger(__name__)


class AuditRepositoryImpl(AuditRepository):
    """
    Audit store backed by the Django ORM.
    """
    def add(self, entry: AuditEntry) -> AuditEntry:
        try:
            log = AuditLog.objects.create(
                subject_type=entry.subject_type,
                subject_id=str(entry.subject_id),
                action_type=entry.action_type,
                edited_fields=list(entry.edited_fields),
                old_values=dict(entry.old_values),
                new_values=dict(entry.new_values),
                actor_id=entry.actor_id,
                actor_name=entry.actor_name,
            )
        except DatabaseError as exc:
            logger.error(
                "Failed to write audit entry for %s %s: %s",
                entry.subject_type, entry.subject_id, exc,
            )
            raise PersistenceError(f"Could not store audit entry for {entry.subject_type} {entry.subject_id}") from exc
        return log.to_entry()

    def list_for_subject(
        self, subject_type: str, subject_id: str, offset: int, limit: int
    ) -> Tuple[List[AuditEntry], int]:
        queryset = AuditLog.objects.filter(subject_type=subject_type, subject_id=str(subject_id))
        total = queryset.count()
        logs = queryset.order_by('-occurred_at', '-id')[offset:offset + limit]
        return [log.to_entry() for log in logs], total
