# core/services.py

"""
Core Services

- Bulk site-setting updates
- Alumni and featured-teacher profiles for the public site
"""

from django.db import transaction
import logging

from accounts.models import User, Role
from core.models import SiteSetting, Alumni, FeaturedTeacher
from utils.exceptions import ValidationError, NotFound

logger = logging.getLogger(__name__)


# =============================================================================
# SITE SETTINGS
# =============================================================================

class SiteSettingService:

    @staticmethod
    @transaction.atomic
    def bulk_upsert(items):
        """
        Apply a list of {key, value} pairs; all or nothing.

        Values are stored as strings, JSON booleans become "true"/"false".
        """
        if not isinstance(items, list) or not items:
            raise ValidationError("Invalid input", errors={'settings': "Provide a non-empty list of {key, value}."})

        updated = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise ValidationError("Invalid input", errors={f'settings[{index}]': "Expected an object."})
            key = item.get('key')
            value = item.get('value')
            if not isinstance(key, str) or not key.strip():
                raise ValidationError("Invalid input", errors={f'settings[{index}].key': "This field is required."})
            if value is None:
                raise ValidationError("Invalid input", errors={f'settings[{index}].value': "This field is required."})

            if isinstance(value, bool):
                value = 'true' if value else 'false'
            updated.append(SiteSetting.upsert(key.strip(), str(value), description=item.get('description')))

        return updated


# =============================================================================
# PUBLIC PROFILES
# =============================================================================

class ProfileService:
    """Create/update/delete for the simple public profile models."""

    ALUMNI_FIELDS = {
        'name': 'name',
        'graduationYear': 'graduation_year',
        'profileImage': 'profile_image',
        'description': 'description',
        'achievement': 'achievement',
        'profession': 'profession',
        'isVisible': 'is_visible',
    }

    TEACHER_FIELDS = {
        'userId': 'user_id',
        'name': 'name',
        'position': 'position',
        'department': 'department',
        'specialization': 'specialization',
        'subject': 'subject',
        'qualification': 'qualification',
        'profileImage': 'profile_image',
        'description': 'description',
        'yearsOfExperience': 'years_of_experience',
        'isVisible': 'is_visible',
    }

    MODELS = {
        'alumni': (Alumni, ALUMNI_FIELDS, ('name', 'graduationYear')),
        'featured_teacher': (FeaturedTeacher, TEACHER_FIELDS, ('name',)),
    }

    @classmethod
    def _apply(cls, instance, data, field_map):
        for key, field in field_map.items():
            if key not in data:
                continue
            value = data[key]
            if field == 'is_visible' and not isinstance(value, bool):
                raise ValidationError("Invalid input", errors={key: "Must be true or false."})
            if field == 'years_of_experience' and value is not None:
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    raise ValidationError("Invalid input", errors={key: "Enter a whole number of years."})
            if field == 'user_id' and value is not None:
                if not User.objects.filter(pk=value, role=Role.STAFF).exists():
                    raise ValidationError("Invalid input", errors={key: "Select a staff account."})
            setattr(instance, field, value)

    @classmethod
    def create(cls, kind, data):
        model, field_map, required = cls.MODELS[kind]
        missing = [key for key in required if not str(data.get(key) or '').strip()]
        if missing:
            raise ValidationError(
                "Missing required fields",
                errors={key: "This field is required." for key in missing},
            )

        instance = model()
        cls._apply(instance, data, field_map)
        instance.full_clean()
        instance.save()
        logger.info(f"Created {model._meta.verbose_name} '{instance}'")
        return instance

    @classmethod
    def update(cls, kind, pk, data):
        model, field_map, required = cls.MODELS[kind]
        instance = model.objects.filter(pk=pk).first()
        if instance is None:
            raise NotFound(f"{model._meta.verbose_name.capitalize()} not found")

        blanked = [key for key in required if key in data and not str(data.get(key) or '').strip()]
        if blanked:
            raise ValidationError("Invalid input", errors={key: "This field may not be blank." for key in blanked})

        cls._apply(instance, data, field_map)
        instance.full_clean()
        instance.save()
        logger.info(f"Updated {model._meta.verbose_name} '{instance}'")
        return instance

    @classmethod
    def delete(cls, kind, pk):
        model = cls.MODELS[kind][0]
        instance = model.objects.filter(pk=pk).first()
        if instance is None:
            raise NotFound(f"{model._meta.verbose_name.capitalize()} not found")
        instance.delete()
        logger.info(f"Deleted {model._meta.verbose_name} {pk}")
