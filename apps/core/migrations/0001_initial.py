# apps/core/migrations/0001_initial.py

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
            name='SiteSetting',
            fields=base_fields() + [
                ('key', models.CharField(max_length=100, unique=True, verbose_name='Key')),
                ('value', models.TextField(blank=True, verbose_name='Value')),
                ('description', models.TextField(blank=True, null=True, verbose_name='Description')),
            ],
            options={
                'verbose_name': 'Site Setting',
                'verbose_name_plural': 'Site Settings',
                'ordering': ['key'],
            },
        ),
        migrations.CreateModel(
            name='Alumni',
            fields=base_fields() + [
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('graduation_year', models.CharField(max_length=10, verbose_name='Graduation Year')),
                ('profile_image', models.CharField(blank=True, max_length=255, null=True, verbose_name='Profile Image URL')),
                ('description', models.TextField(blank=True, null=True, verbose_name='Description')),
                ('achievement', models.TextField(blank=True, null=True, verbose_name='Achievement')),
                ('profession', models.CharField(blank=True, max_length=200, null=True, verbose_name='Profession')),
                ('is_visible', models.BooleanField(db_index=True, default=True, verbose_name='Visible')),
            ],
            options={
                'verbose_name': 'Alumnus',
                'verbose_name_plural': 'Alumni',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='FeaturedTeacher',
            fields=base_fields() + [
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('position', models.CharField(blank=True, max_length=100, null=True, verbose_name='Position')),
                ('department', models.CharField(blank=True, max_length=100, null=True, verbose_name='Department')),
                ('specialization', models.CharField(blank=True, max_length=200, null=True, verbose_name='Specialization')),
                ('subject', models.CharField(blank=True, max_length=100, null=True, verbose_name='Subject')),
                ('qualification', models.CharField(blank=True, max_length=200, null=True, verbose_name='Qualification')),
                ('profile_image', models.CharField(blank=True, max_length=255, null=True, verbose_name='Profile Image URL')),
                ('description', models.TextField(blank=True, null=True, verbose_name='Description')),
                ('years_of_experience', models.PositiveSmallIntegerField(blank=True, null=True, verbose_name='Years of Experience')),
                ('is_visible', models.BooleanField(db_index=True, default=True, verbose_name='Visible')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='featured_profiles', to='accounts.user', verbose_name='Staff Account')),
            ],
            options={
                'verbose_name': 'Featured Teacher',
                'verbose_name_plural': 'Featured Teachers',
                'ordering': ['-created_at'],
            },
        ),
    ]
