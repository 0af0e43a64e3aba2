"""
Models for storing audit log entries.

Every audited mutation of an employee or a user account leaves one
``AuditLog`` row: the acting user, the fields judged changed and their
values before and after the change.  Rows are append-only.
"""
import uuid

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils import timezone

from .domain.entities import AuditEntry
from .domain.exceptions import ImmutableEntryError
from .domain.value_objects import ActionType, SubjectType


class AuditLog(models.Model):
    """A record of a single mutation of a tracked record."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    subject_type = models.CharField(max_length=20, choices=SubjectType.choices, default=SubjectType.EMPLOYEE)
    subject_id = models.CharField(max_length=100)
    occurred_at = models.DateTimeField(default=timezone.now, editable=False)
    action_type = models.CharField(max_length=10, choices=ActionType.choices)

    edited_fields = models.JSONField(default=list, blank=True)
    old_values = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    new_values = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)

    actor_id = models.CharField(max_length=100)
    actor_name = models.CharField(max_length=150)

    class Meta:
        db_table = 'audit_log'
        ordering = ['-occurred_at', '-id']
        indexes = [
            models.Index(fields=['subject_type', 'subject_id', 'occurred_at'], name='audit_log_subject_9e2c71_idx'),
            models.Index(fields=['action_type'], name='audit_log_action__4b7d10_idx'),
            models.Index(fields=['actor_id'], name='audit_log_actor_i_a53f08_idx'),
        ]
        verbose_name = 'Audit Log'
        verbose_name_plural = 'Audit Logs'

    def __str__(self):
        return f"{self.get_action_type_display()} {self.subject_type} {self.subject_id} by {self.actor_name} at {self.occurred_at}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableEntryError("Audit log entries cannot be modified.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableEntryError("Audit log entries cannot be deleted.")

    def to_entry(self) -> AuditEntry:
        return AuditEntry(
            id=self.id,
            subject_type=self.subject_type,
            subject_id=self.subject_id,
            occurred_at=self.occurred_at,
            action_type=self.action_type,
            edited_fields=list(self.edited_fields or []),
            old_values=dict(self.old_values or {}),
            new_values=dict(self.new_values or {}),
            actor_id=self.actor_id,
            actor_name=self.actor_name,
        )
