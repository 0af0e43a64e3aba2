"""
Errors raised by the audit trail.

Suppressing a no-op update is not an error: ``AuditRecordBuilder.build``
returns ``None`` for it.
"""


class AuditError(Exception):
    """Base class for audit trail failures."""


class InvalidActorError(AuditError):
    """The mutation has no attributable actor, so no entry can be built."""


class PersistenceError(AuditError):
    """The audit store failed to durably write an entry."""


class ImmutableEntryError(AuditError):
    """An attempt was made to modify or delete a stored audit entry."""


class UnknownFieldError(ValueError):
    """A snapshot was given a field its record kind does not declare."""

    def __init__(self, kind, fields):
        self.kind = kind
        self.fields = sorted(fields)
        super().__init__(f"Unknown {kind} field(s): {', '.join(self.fields)}")
