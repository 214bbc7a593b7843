# apps/accounts/migrations/0001_initial.py

import django.core.validators
from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(db_index=True, editable=False, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(editable=False, verbose_name='Updated At')),
                ('created_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Created By ID')),
                ('updated_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Updated By ID')),
                ('created_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Created From IP')),
                ('updated_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Updated From IP')),
                ('unique_id', models.CharField(help_text='Login identifier issued at approval, e.g. STU250001', max_length=20, unique=True, verbose_name='Unique ID')),
                ('surname', models.CharField(max_length=100, verbose_name='Surname')),
                ('first_name', models.CharField(max_length=100, verbose_name='First Name')),
                ('middle_name', models.CharField(blank=True, max_length=100, null=True, verbose_name='Middle Name')),
                ('role', models.CharField(choices=[('super_admin', 'Super Administrator'), ('management', 'Management'), ('staff', 'Staff'), ('student', 'Student')], db_index=True, default='student', max_length=20, verbose_name='Role')),
                ('email', models.EmailField(blank=True, max_length=254, null=True, verbose_name='Email')),
                ('phone', models.CharField(blank=True, max_length=20, null=True, validators=[django.core.validators.RegexValidator(message="Phone number must be entered in the format: '+2348012345678'.", regex='^\\+?\\d[\\d\\s-]{6,18}$')], verbose_name='Phone')),
                ('address', models.TextField(blank=True, null=True, verbose_name='Address')),
                ('profile_image', models.CharField(blank=True, max_length=255, null=True, verbose_name='Profile Image URL')),
                ('class_level', models.CharField(blank=True, max_length=50, null=True, verbose_name='Class Level')),
                ('department', models.CharField(blank=True, max_length=100, null=True, verbose_name='Department')),
                ('bank_account_number', models.CharField(blank=True, max_length=30, null=True, verbose_name='Bank Account Number')),
                ('bank_name', models.CharField(blank=True, max_length=100, null=True, verbose_name='Bank Name')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
            ],
            options={
                'verbose_name': 'User',
                'verbose_name_plural': 'Users',
                'ordering': ['-created_at'],
            },
        ),
    ]
