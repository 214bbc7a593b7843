# notices/models.py

from django.db import models
from django.utils import timezone
import logging

from accounts.models import User, Role
from utils.models import BaseModel

logger = logging.getLogger(__name__)


# =============================================================================
# CHOICES
# =============================================================================

class TargetAudience(models.TextChoices):
    ALL = 'all', 'All (Staff & Students)'
    STAFF = 'staff', 'Staff Only'
    STUDENTS = 'students', 'Students Only'


class NoticePriority(models.TextChoices):
    NORMAL = 'normal', 'Normal'
    HIGH = 'high', 'High (Urgent)'


# Audiences each role may read
ROLE_AUDIENCES = {
    Role.SUPER_ADMIN: (TargetAudience.ALL, TargetAudience.STAFF, TargetAudience.STUDENTS),
    Role.MANAGEMENT: (TargetAudience.ALL, TargetAudience.STAFF, TargetAudience.STUDENTS),
    Role.STAFF: (TargetAudience.ALL, TargetAudience.STAFF),
    Role.STUDENT: (TargetAudience.ALL, TargetAudience.STUDENTS),
}


# =============================================================================
# NOTICE
# =============================================================================

class NoticeQuerySet(models.QuerySet):

    def published(self):
        return self.filter(is_published=True)

    def unexpired(self, now=None):
        now = now or timezone.now()
        return self.filter(models.Q(expires_at__isnull=True) | models.Q(expires_at__gt=now))

    def for_role(self, role):
        audiences = ROLE_AUDIENCES.get(role, ROLE_AUDIENCES[Role.STUDENT])
        return self.filter(target_audience__in=audiences)


class Notice(BaseModel):
    title = models.CharField("Title", max_length=200)
    content = models.TextField("Content")
    target_audience = models.CharField(
        "Target Audience",
        max_length=20,
        choices=TargetAudience.choices,
        db_index=True
    )
    priority = models.CharField(
        "Priority",
        max_length=10,
        choices=NoticePriority.choices,
        default=NoticePriority.NORMAL
    )
    is_published = models.BooleanField("Published", default=True, db_index=True)
    published_by = models.ForeignKey(
        User,
        verbose_name="Published By",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notices'
    )
    expires_at = models.DateTimeField("Expires At", null=True, blank=True)

    objects = NoticeQuerySet.as_manager()

    class Meta:
        verbose_name = "Notice"
        verbose_name_plural = "Notices"
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.target_audience})"

    @property
    def is_expired(self):
        return self.expires_at is not None and self.expires_at <= timezone.now()

    def is_visible_to(self, user):
        if user is None or not self.is_published or self.is_expired:
            return False
        audiences = ROLE_AUDIENCES.get(user.role, ROLE_AUDIENCES[Role.STUDENT])
        return self.target_audience in audiences

    def to_dict(self):
        return {
            'id': str(self.id),
            'title': self.title,
            'content': self.content,
            'targetAudience': self.target_audience,
            'priority': self.priority,
            'isPublished': self.is_published,
            'publishedBy': str(self.published_by_id) if self.published_by_id else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'expiresAt': self.expires_at.isoformat() if self.expires_at else None,
        }
