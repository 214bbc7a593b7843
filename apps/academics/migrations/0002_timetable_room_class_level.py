# apps/academics/migrations/0002_timetable_room_class_level.py

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('academics', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='timetable',
            name='room',
            field=models.CharField(blank=True, max_length=50, null=True, verbose_name='Room'),
        ),
        migrations.AddField(
            model_name='timetable',
            name='class_level',
            field=models.CharField(blank=True, db_index=True, max_length=50, null=True, verbose_name='Class Level'),
        ),
    ]
