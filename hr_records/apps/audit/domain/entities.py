import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID


@dataclass(frozen=True)
class AuditEntry:
    """
    One immutable history record describing a single mutation.

    ``id`` and ``occurred_at`` are assigned by the audit store when the
    entry is persisted.
    """
    subject_id: str
    action_type: str
    edited_fields: List[str]
    old_values: Dict[str, Any]
    new_values: Dict[str, Any]
    actor_id: str
    actor_name: str
    subject_type: str = 'employee'
    id: Optional[UUID] = None
    occurred_at: Optional[datetime] = None


@dataclass(frozen=True)
class AuditPage:
    entries: List[AuditEntry]
    total_count: int
    page: int
    page_size: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0


@dataclass(frozen=True)
class MutationResult:
    """Outcome of an audited mutation: the record and the entry it produced."""
    record: Any
    audit_entry: Optional[AuditEntry]
    changed: bool = True
