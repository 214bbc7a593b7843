# apps/academics/migrations/0001_initial.py

import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import uuid


BASE_FIELDS = [
    ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
    ('created_at', models.DateTimeField(db_index=True, editable=False, verbose_name='Created At')),
    ('updated_at', models.DateTimeField(editable=False, verbose_name='Updated At')),
    ('created_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Created By ID')),
    ('updated_by_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Updated By ID')),
    ('created_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Created From IP')),
    ('updated_from_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='Updated From IP')),
]


def base_fields():
    return [(name, field.clone()) for name, field in BASE_FIELDS]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SchoolClass',
            fields=base_fields() + [
                ('name', models.CharField(help_text='e.g. JSS1 A', max_length=100, verbose_name='Class Name')),
                ('level', models.CharField(db_index=True, help_text='e.g. JSS1', max_length=50, verbose_name='Level')),
                ('department', models.CharField(blank=True, max_length=100, null=True, verbose_name='Department')),
                ('academic_year', models.CharField(help_text='e.g. 2024/2025', max_length=20, verbose_name='Academic Year')),
            ],
            options={
                'verbose_name': 'Class',
                'verbose_name_plural': 'Classes',
                'ordering': ['level', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Subject',
            fields=base_fields() + [
                ('name', models.CharField(max_length=100, verbose_name='Subject Name')),
                ('code', models.CharField(blank=True, max_length=20, null=True, verbose_name='Subject Code')),
                ('school_class', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='subjects', to='academics.schoolclass', verbose_name='Class')),
                ('teacher', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='subjects', to='accounts.user', verbose_name='Teacher')),
            ],
            options={
                'verbose_name': 'Subject',
                'verbose_name_plural': 'Subjects',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Timetable',
            fields=base_fields() + [
                ('day_of_week', models.CharField(choices=[('Monday', 'Monday'), ('Tuesday', 'Tuesday'), ('Wednesday', 'Wednesday'), ('Thursday', 'Thursday'), ('Friday', 'Friday'), ('Saturday', 'Saturday')], db_index=True, max_length=10, verbose_name='Day')),
                ('start_time', models.TimeField(verbose_name='Start Time')),
                ('end_time', models.TimeField(verbose_name='End Time')),
                ('school_class', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='timetable_entries', to='academics.schoolclass', verbose_name='Class')),
                ('subject', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='timetable_entries', to='academics.subject', verbose_name='Subject')),
                ('teacher', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='timetable_entries', to='accounts.user', verbose_name='Teacher')),
            ],
            options={
                'verbose_name': 'Timetable Entry',
                'verbose_name_plural': 'Timetable Entries',
                'ordering': ['day_of_week', 'start_time'],
            },
        ),
        migrations.CreateModel(
            name='Result',
            fields=base_fields() + [
                ('academic_year', models.CharField(db_index=True, max_length=20, verbose_name='Academic Year')),
                ('term', models.CharField(choices=[('first', 'First Term'), ('second', 'Second Term'), ('third', 'Third Term'), ('all', 'All Terms')], db_index=True, max_length=10, verbose_name='Term')),
                ('test_score', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(40)], verbose_name='Test Score')),
                ('exam_score', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(60)], verbose_name='Exam Score')),
                ('total_score', models.PositiveSmallIntegerField(verbose_name='Total Score')),
                ('grade', models.CharField(max_length=2, verbose_name='Grade')),
                ('remarks', models.TextField(blank=True, null=True, verbose_name='Remarks')),
                ('entered_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='entered_results', to='accounts.user', verbose_name='Entered By')),
                ('school_class', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='results', to='academics.schoolclass', verbose_name='Class')),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='results', to='accounts.user', verbose_name='Student')),
                ('subject', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='results', to='academics.subject', verbose_name='Subject')),
            ],
            options={
                'verbose_name': 'Result',
                'verbose_name_plural': 'Results',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddConstraint(
            model_name='result',
            constraint=models.UniqueConstraint(fields=('student', 'subject', 'academic_year', 'term'), name='unique_result_per_student_subject_term'),
        ),
    ]
