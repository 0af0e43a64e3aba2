"""
Service layer of the audit trail.

``AuditRecordBuilder`` turns a before/after pair of snapshots into an audit
entry and stores it; ``AuditQueryService`` pages through a subject's
history for display.
"""
import logging
from collections.abc import Mapping
from typing import List, Optional

from hr_records.apps.audit.domain.differ import diff
from hr_records.apps.audit.domain.entities import AuditEntry, AuditPage
from hr_records.apps.audit.domain.exceptions import InvalidActorError
from hr_records.apps.audit.domain.repositories import AuditRepository
from hr_records.apps.audit.domain.snapshots import bookkeeping_fields
from hr_records.apps.audit.domain.value_objects import ActionType, Actor, SubjectType
from hr_records.apps.audit.infrastructure.repositories import AuditRepositoryImpl

logger = logging.getLogger(__name__)


class AuditRecordBuilder:
    """Builds and persists audit entries for record mutations."""

    def __init__(self, audit_repository: Optional[AuditRepository] = None):
        self.audit_repository = audit_repository or AuditRepositoryImpl()

    def changed_fields(self, action, old_snapshot: Mapping, new_snapshot: Mapping) -> List[str]:
        """
        Fields an entry for this mutation would report, in display order.

        CREATE reports every field of the new snapshot, DELETE every field of
        the old one, UPDATE only the fields whose values differ.  Bookkeeping
        fields are never reported.
        """
        action = ActionType(action)
        excluded = bookkeeping_fields()
        if action == ActionType.CREATE:
            candidates = list(new_snapshot)
        elif action == ActionType.DELETE:
            candidates = list(old_snapshot)
        else:
            changed = diff(old_snapshot, new_snapshot)
            candidates = [key for key in new_snapshot if key in changed]
        return [field for field in candidates if field not in excluded]

    def build(
        self,
        subject_id,
        action,
        old_snapshot: Mapping,
        new_snapshot: Mapping,
        actor: Optional[Actor],
        subject_type=SubjectType.EMPLOYEE,
    ) -> Optional[AuditEntry]:
        """
        Build the audit entry for one mutation and hand it to the store.

        Returns ``None`` for an update that changed nothing.  Raises
        ``InvalidActorError`` when the change cannot be attributed and lets
        ``PersistenceError`` from the store propagate.
        """
        if actor is None or not actor.id:
            raise InvalidActorError(f"Cannot record a change to {subject_type} {subject_id} without an actor.")

        action = ActionType(action)
        subject_type = SubjectType(subject_type)
        old_snapshot = old_snapshot or {}
        new_snapshot = new_snapshot or {}
        edited_fields = self.changed_fields(action, old_snapshot, new_snapshot)

        if action == ActionType.UPDATE and not edited_fields:
            logger.info("No changes detected for %s %s, skipping audit entry", subject_type.value, subject_id)
            return None

        if action == ActionType.CREATE:
            old_values, new_values = {}, {field: new_snapshot[field] for field in edited_fields}
        elif action == ActionType.DELETE:
            old_values, new_values = {field: old_snapshot[field] for field in edited_fields}, {}
        else:
            old_values = {field: old_snapshot[field] for field in edited_fields if field in old_snapshot}
            new_values = {field: new_snapshot[field] for field in edited_fields}

        entry = self.audit_repository.add(AuditEntry(
            subject_type=subject_type.value,
            subject_id=str(subject_id),
            action_type=action.value,
            edited_fields=edited_fields,
            old_values=old_values,
            new_values=new_values,
            actor_id=actor.id,
            actor_name=actor.name,
        ))
        logger.info(
            "Audit entry %s recorded: %s %s %s by %s (%d field(s))",
            entry.id, action.value, subject_type.value, subject_id, actor.name, len(edited_fields),
        )
        return entry


class AuditQueryService:
    """Read side of the audit trail."""

    def __init__(self, audit_repository: Optional[AuditRepository] = None):
        self.audit_repository = audit_repository or AuditRepositoryImpl()

    def list_entries(self, subject_id, page: int = 1, page_size: int = 10,
                     subject_type=SubjectType.EMPLOYEE) -> AuditPage:
        """One page of a subject's entries, newest first."""
        if page < 1:
            raise ValueError("page must be 1 or greater")
        if page_size < 1:
            raise ValueError("page_size must be 1 or greater")
        entries, total = self.audit_repository.list_for_subject(
            SubjectType(subject_type).value, str(subject_id), (page - 1) * page_size, page_size
        )
        return AuditPage(entries=entries, total_count=total, page=page, page_size=page_size)
