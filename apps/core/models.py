# core/models.py

from django.db import models
import logging

from accounts.models import User
from utils.models import BaseModel

logger = logging.getLogger(__name__)

RESULTS_RELEASED_KEY = 'results_released'


# =============================================================================
# SITE SETTING MODEL
# =============================================================================

class SiteSetting(BaseModel):
    """
    Key/value store for school-wide configuration and flags.

    Values are always strings; booleans are stored as "true"/"false".
    Settings are read on every request so a change applies on the next
    fetch.
    """

    key = models.CharField("Key", max_length=100, unique=True)
    value = models.TextField("Value", blank=True)
    description = models.TextField("Description", blank=True, null=True)

    class Meta:
        verbose_name = "Site Setting"
        verbose_name_plural = "Site Settings"
        ordering = ['key']

    def __str__(self):
        return f"{self.key} = {self.value}"

    # -------------------------------------------------------------------------
    # LOOKUP HELPERS
    # -------------------------------------------------------------------------

    @classmethod
    def get_value(cls, key, default=None):
        setting = cls.objects.filter(key=key).first()
        return setting.value if setting else default

    @classmethod
    def upsert(cls, key, value, description=None):
        """Create or update a setting; returns the saved instance."""
        setting = cls.objects.filter(key=key).first()
        if setting is None:
            setting = cls(key=key, value=value, description=description)
            setting.save()
            logger.info(f"Created site setting {key}")
            return setting

        setting.value = value
        update_fields = ['value']
        if description is not None:
            setting.description = description
            update_fields.append('description')
        setting.save(update_fields=update_fields)
        logger.info(f"Updated site setting {key}")
        return setting

    @classmethod
    def results_released(cls):
        return (cls.get_value(RESULTS_RELEASED_KEY, 'false') or '').strip().lower() == 'true'

    def to_dict(self):
        return {
            'id': str(self.id),
            'key': self.key,
            'value': self.value,
            'description': self.description,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }


# =============================================================================
# ALUMNI MODEL
# =============================================================================

class Alumni(BaseModel):
    name = models.CharField("Name", max_length=200)
    graduation_year = models.CharField("Graduation Year", max_length=10)
    profile_image = models.CharField("Profile Image URL", max_length=255, blank=True, null=True)
    description = models.TextField("Description", blank=True, null=True)
    achievement = models.TextField("Achievement", blank=True, null=True)
    profession = models.CharField("Profession", max_length=200, blank=True, null=True)
    is_visible = models.BooleanField("Visible", default=True, db_index=True)

    class Meta:
        verbose_name = "Alumnus"
        verbose_name_plural = "Alumni"
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.graduation_year})"

    def to_dict(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'graduationYear': self.graduation_year,
            'profileImage': self.profile_image,
            'description': self.description,
            'achievement': self.achievement,
            'profession': self.profession,
            'isVisible': self.is_visible,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }


# =============================================================================
# FEATURED TEACHER MODEL
# =============================================================================

class FeaturedTeacher(BaseModel):
    user = models.ForeignKey(
        User,
        verbose_name="Staff Account",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='featured_profiles'
    )
    name = models.CharField("Name", max_length=200)
    position = models.CharField("Position", max_length=100, blank=True, null=True)
    department = models.CharField("Department", max_length=100, blank=True, null=True)
    specialization = models.CharField("Specialization", max_length=200, blank=True, null=True)
    subject = models.CharField("Subject", max_length=100, blank=True, null=True)
    qualification = models.CharField("Qualification", max_length=200, blank=True, null=True)
    profile_image = models.CharField("Profile Image URL", max_length=255, blank=True, null=True)
    description = models.TextField("Description", blank=True, null=True)
    years_of_experience = models.PositiveSmallIntegerField("Years of Experience", blank=True, null=True)
    is_visible = models.BooleanField("Visible", default=True, db_index=True)

    class Meta:
        verbose_name = "Featured Teacher"
        verbose_name_plural = "Featured Teachers"
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def to_dict(self):
        return {
            'id': str(self.id),
            'userId': str(self.user_id) if self.user_id else None,
            'name': self.name,
            'position': self.position,
            'department': self.department,
            'specialization': self.specialization,
            'subject': self.subject,
            'qualification': self.qualification,
            'profileImage': self.profile_image,
            'description': self.description,
            'yearsOfExperience': self.years_of_experience,
            'isVisible': self.is_visible,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
