import uuid

import django.core.serializers.json
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('subject_type', models.CharField(choices=[('employee', 'Employee'), ('user', 'User')], default='employee', max_length=20)),
                ('subject_id', models.CharField(max_length=100)),
                ('occurred_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('action_type', models.CharField(choices=[('CREATE', 'Create'), ('UPDATE', 'Update'), ('DELETE', 'Delete')], max_length=10)),
                ('edited_fields', models.JSONField(blank=True, default=list)),
                ('old_values', models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('new_values', models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('actor_id', models.CharField(max_length=100)),
                ('actor_name', models.CharField(max_length=150)),
            ],
            options={
                'verbose_name': 'Audit Log',
                'verbose_name_plural': 'Audit Logs',
                'db_table': 'audit_log',
                'ordering': ['-occurred_at', '-id'],
                'indexes': [
                    models.Index(fields=['subject_type', 'subject_id', 'occurred_at'], name='audit_log_subject_9e2c71_idx'),
                    models.Index(fields=['action_type'], name='audit_log_action__4b7d10_idx'),
                    models.Index(fields=['actor_id'], name='audit_log_actor_i_a53f08_idx'),
                ],
            },
        ),
    ]
