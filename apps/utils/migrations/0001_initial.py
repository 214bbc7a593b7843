# apps/utils/migrations/0001_initial.py

from django.db import migrations, models
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content_type', models.CharField(db_index=True, max_length=100, verbose_name='Model Type')),
                ('object_id', models.CharField(db_index=True, max_length=100, verbose_name='Object ID')),
                ('object_repr', models.CharField(max_length=200, verbose_name='Object Representation')),
                ('action', models.CharField(choices=[('CREATE', 'Created'), ('UPDATE', 'Updated'), ('DELETE', 'Deleted')], db_index=True, max_length=10, verbose_name='Action')),
                ('changes', models.JSONField(blank=True, default=dict, help_text="Dictionary of field changes: {'field_name': {'old': 'value', 'new': 'value'}}", verbose_name='Changes')),
                ('user_id', models.CharField(blank=True, db_index=True, max_length=50, null=True, verbose_name='User ID')),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Timestamp')),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True, verbose_name='IP Address')),
                ('request_path', models.CharField(blank=True, max_length=255, verbose_name='Request Path')),
            ],
            options={
                'verbose_name': 'Audit Log',
                'verbose_name_plural': 'Audit Logs',
                'ordering': ['-timestamp'],
                'indexes': [models.Index(fields=['content_type', 'object_id'], name='utils_audit_content_5e6f3a_idx')],
            },
        ),
    ]
