# apps/registrations/migrations/0001_initial.py

from django.db import migrations, models
import django.db.models.deletion
import registrations.utils
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='RegistrationForm',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(db_index=True, editable=False, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(editable=False, verbose_name='Updated At')),
                ('created_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Created By ID')),
                ('updated_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Updated By ID')),
                ('created_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Created From IP')),
                ('updated_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Updated From IP')),
                ('title', models.CharField(max_length=200, verbose_name='Title')),
                ('description', models.TextField(blank=True, null=True, verbose_name='Description')),
                ('file', models.FileField(max_length=255, upload_to=registrations.utils.registration_form_path, verbose_name='Form File')),
                ('form_type', models.CharField(help_text='Who the form is for, e.g. student or staff', max_length=50, verbose_name='Form Type')),
                ('is_active', models.BooleanField(db_index=True, default=True, verbose_name='Active')),
                ('uploaded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='uploaded_forms', to='accounts.user', verbose_name='Uploaded By')),
            ],
            options={
                'verbose_name': 'Registration Form',
                'verbose_name_plural': 'Registration Forms',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='RegistrationApplication',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(db_index=True, editable=False, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(editable=False, verbose_name='Updated At')),
                ('created_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Created By ID')),
                ('updated_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Updated By ID')),
                ('created_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Created From IP')),
                ('updated_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Updated From IP')),
                ('applicant_name', models.CharField(max_length=200, verbose_name='Applicant Name')),
                ('applicant_email', models.EmailField(blank=True, max_length=254, null=True, verbose_name='Applicant Email')),
                ('applicant_phone', models.CharField(max_length=20, verbose_name='Applicant Phone')),
                ('application_type', models.CharField(choices=[('student_nursery', 'Student - Nursery'), ('student_primary', 'Student - Primary'), ('student_jss', 'Student - Junior Secondary'), ('student_sss', 'Student - Senior Secondary'), ('staff_teaching', 'Staff - Teaching'), ('staff_non_teaching', 'Staff - Non-Teaching')], db_index=True, max_length=30, verbose_name='Application Type')),
                ('document', models.FileField(help_text='PDF, JPG or PNG, at most 10MB', max_length=255, upload_to=registrations.utils.application_document_path, verbose_name='Uploaded Document')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], db_index=True, default='pending', max_length=20, verbose_name='Status')),
                ('review_notes', models.TextField(blank=True, null=True, verbose_name='Review Notes')),
                ('reviewed_at', models.DateTimeField(blank=True, null=True, verbose_name='Reviewed At')),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reviewed_applications', to='accounts.user', verbose_name='Reviewed By')),
                ('generated_user', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='source_application', to='accounts.user', verbose_name='Generated User')),
            ],
            options={
                'verbose_name': 'Registration Application',
                'verbose_name_plural': 'Registration Applications',
                'ordering': ['-created_at'],
            },
        ),
    ]
