# notices/services.py

from django.utils import timezone
from django.utils.dateparse import parse_datetime, parse_date
from datetime import datetime, time
import logging

from notices.models import Notice, TargetAudience, NoticePriority
from utils.exceptions import ValidationError, NotFound

logger = logging.getLogger(__name__)


def visible_notices_for(user):
    """Published, unexpired notices the user's role may read, newest first."""
    return (
        Notice.objects
        .published()
        .unexpired()
        .for_role(user.role)
        .order_by('-created_at')
    )


def _parse_expiry(value):
    if value in (None, ''):
        return None
    parsed = parse_datetime(value) if isinstance(value, str) else None
    if parsed is None and isinstance(value, str):
        day = parse_date(value)
        if day is not None:
            parsed = datetime.combine(day, time.max)
    if parsed is None:
        raise ValidationError("Invalid input", errors={'expiresAt': "Enter a valid date/time."})
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


class NoticeService:

    @staticmethod
    def create(data, published_by):
        title = (data.get('title') or '').strip()
        content = (data.get('content') or '').strip()
        target_audience = data.get('targetAudience')
        priority = data.get('priority') or NoticePriority.NORMAL

        errors = {}
        if not title:
            errors['title'] = "This field is required."
        if not content:
            errors['content'] = "This field is required."
        if target_audience not in TargetAudience.values:
            errors['targetAudience'] = "Select a valid audience."
        if priority not in NoticePriority.values:
            errors['priority'] = "Select a valid priority."
        if errors:
            raise ValidationError("Invalid input", errors=errors)

        is_published = data.get('isPublished', True)
        if not isinstance(is_published, bool):
            raise ValidationError("Invalid input", errors={'isPublished': "Must be true or false."})

        notice = Notice.objects.create(
            title=title,
            content=content,
            target_audience=target_audience,
            priority=priority,
            is_published=is_published,
            expires_at=_parse_expiry(data.get('expiresAt')),
            published_by=published_by,
        )
        logger.info(f"Notice '{notice.title}' published to {notice.target_audience} by {published_by.unique_id}")
        return notice

    @staticmethod
    def delete(notice_id):
        notice = Notice.objects.filter(pk=notice_id).first()
        if notice is None:
            raise NotFound("Notice not found")
        notice.delete()
        logger.info(f"Notice {notice_id} deleted")
