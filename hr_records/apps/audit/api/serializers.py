from rest_framework import serializers

from hr_records.apps.audit.models import AuditLog


class AuditLogSerializer(serializers.ModelSerializer):
    """
    Serializer for the AuditLog model.
    """
    class Meta:
        model = AuditLog
        fields = [
            'id', 'subject_type', 'subject_id', 'occurred_at', 'action_type',
            'edited_fields', 'old_values', 'new_values', 'actor_id', 'actor_name',
        ]
        read_only_fields = fields


class AuditEntrySerializer(serializers.Serializer):
    """Serializes ``AuditEntry`` objects returned by the audit store."""
    id = serializers.UUIDField()
    subject_type = serializers.CharField()
    subject_id = serializers.CharField()
    occurred_at = serializers.DateTimeField()
    action_type = serializers.CharField()
    edited_fields = serializers.ListField(child=serializers.CharField())
    old_values = serializers.DictField()
    new_values = serializers.DictField()
    actor_id = serializers.CharField()
    actor_name = serializers.CharField()


class TimelineRowSerializer(serializers.Serializer):
    date = serializers.CharField()
    action = serializers.CharField()
    editor = serializers.CharField()
    field = serializers.CharField(allow_blank=True)
    old_value = serializers.CharField(allow_blank=True)
    new_value = serializers.CharField(allow_blank=True)
    summary = serializers.CharField(allow_blank=True)
