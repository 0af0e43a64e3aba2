from abc import ABC, abstractmethod
from typing import List, Tuple

from .entities import AuditEntry


class AuditRepository(ABC):
    """
    Abstract audit store.

    Stores entries keyed by the subject they describe and returns them
    newest first.
    """
    @abstractmethod
    def add(self, entry: AuditEntry) -> AuditEntry:
        """Persist ``entry``, assigning its ``id`` and ``occurred_at``."""

    @abstractmethod
    def list_for_subject(
        self, subject_type: str, subject_id: str, offset: int, limit: int
    ) -> Tuple[List[AuditEntry], int]:
        """One slice of a subject's entries, newest first, and the total count."""
