# apps/fees/migrations/0001_initial.py

from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FeeStructure',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(db_index=True, editable=False, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(editable=False, verbose_name='Updated At')),
                ('created_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Created By ID')),
                ('updated_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Updated By ID')),
                ('created_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Created From IP')),
                ('updated_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Updated From IP')),
                ('class_level', models.CharField(db_index=True, help_text='e.g. JSS1', max_length=50, verbose_name='Class Level')),
                ('department', models.CharField(blank=True, max_length=100, null=True, verbose_name='Department')),
                ('academic_year', models.CharField(help_text='e.g. 2024/2025', max_length=20, verbose_name='Academic Year')),
                ('term', models.CharField(choices=[('first', 'First Term'), ('second', 'Second Term'), ('third', 'Third Term'), ('all', 'All Terms')], max_length=10, verbose_name='Term')),
                ('amount', models.PositiveIntegerField(verbose_name='Amount')),
                ('description', models.TextField(blank=True, null=True, verbose_name='Description')),
                ('bank_account_number', models.CharField(max_length=30, verbose_name='Bank Account Number')),
                ('bank_name', models.CharField(max_length=100, verbose_name='Bank Name')),
            ],
            options={
                'verbose_name': 'Fee Structure',
                'verbose_name_plural': 'Fee Structures',
                'ordering': ['class_level', '-created_at'],
            },
        ),
    ]
