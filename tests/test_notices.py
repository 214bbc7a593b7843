# tests/test_notices.py

from datetime import timedelta

import pytest
from django.utils import timezone

from notices.models import Notice, TargetAudience
from notices.services import visible_notices_for

pytestmark = pytest.mark.django_db


@pytest.fixture
def notices(manager):
    def _notice(title, audience, **extra):
        return Notice.objects.create(
            title=title,
            content=f"{title} content",
            target_audience=audience,
            published_by=manager,
            **extra,
        )

    return {
        'all': _notice("Resumption", TargetAudience.ALL),
        'staff': _notice("Staff meeting", TargetAudience.STAFF),
        'students': _notice("Sports day", TargetAudience.STUDENTS),
        'draft': _notice("Draft", TargetAudience.ALL, is_published=False),
        'expired': _notice("Old news", TargetAudience.ALL, expires_at=timezone.now() - timedelta(days=1)),
    }


def titles(queryset):
    return {notice.title for notice in queryset}


def test_visibility_by_role(notices, manager, staff_member, student, super_admin):
    assert titles(visible_notices_for(student)) == {"Resumption", "Sports day"}
    assert titles(visible_notices_for(staff_member)) == {"Resumption", "Staff meeting"}
    assert titles(visible_notices_for(manager)) == {"Resumption", "Staff meeting", "Sports day"}
    assert titles(visible_notices_for(super_admin)) == {"Resumption", "Staff meeting", "Sports day"}


def test_instance_visibility_matches_queryset(notices, staff_member, student):
    assert notices['students'].is_visible_to(student)
    assert not notices['students'].is_visible_to(staff_member)
    assert not notices['draft'].is_visible_to(student)
    assert notices['expired'].is_expired
    assert not notices['expired'].is_visible_to(student)
    assert not notices['all'].is_visible_to(None)


def test_future_expiry_is_still_visible(manager, student):
    Notice.objects.create(
        title="Exam week",
        content="Bring pencils",
        target_audience=TargetAudience.STUDENTS,
        expires_at=timezone.now() + timedelta(days=3),
        published_by=manager,
    )
    assert titles(visible_notices_for(student)) == {"Exam week"}


def test_notice_list_requires_session(api, notices, student):
    assert api.get('/api/notices').status_code == 401

    api.login(student)
    response = api.get('/api/notices')
    assert response.status_code == 200
    assert {item['title'] for item in response.json()} == {"Resumption", "Sports day"}


def test_management_publishes_notice(api, manager, student):
    api.login(manager)
    response = api.post('/api/notices', {
        'title': "Fees deadline",
        'content': "Pay before Friday",
        'targetAudience': 'students',
        'priority': 'high',
        'expiresAt': (timezone.now() + timedelta(days=7)).isoformat(),
    })

    assert response.status_code == 201
    body = response.json()
    assert body['priority'] == 'high'
    assert body['publishedBy'] == str(manager.pk)

    api.login(student)
    assert [item['title'] for item in api.get('/api/notices').json()] == ["Fees deadline"]


@pytest.mark.parametrize('payload, field', [
    ({'content': "x", 'targetAudience': 'all'}, 'title'),
    ({'title': "x", 'content': "x", 'targetAudience': 'parents'}, 'targetAudience'),
    ({'title': "x", 'content': "x", 'targetAudience': 'all', 'priority': 'urgent'}, 'priority'),
    ({'title': "x", 'content': "x", 'targetAudience': 'all', 'expiresAt': 'next week'}, 'expiresAt'),
])
def test_invalid_notices_are_rejected(api, manager, payload, field):
    api.login(manager)
    response = api.post('/api/notices', payload)
    assert response.status_code == 400
    assert field in response.json()['errors']


def test_staff_cannot_publish_or_delete(api, notices, staff_member):
    api.login(staff_member)
    assert api.post('/api/notices', {'title': "x", 'content': "x", 'targetAudience': 'all'}).status_code == 403
    assert api.delete(f"/api/notices/{notices['all'].pk}").status_code == 403


def test_delete_notice(api, notices, super_admin):
    api.login(super_admin)
    assert api.delete(f"/api/notices/{notices['staff'].pk}").status_code == 200
    assert not Notice.objects.filter(pk=notices['staff'].pk).exists()
    assert api.delete(f"/api/notices/{notices['staff'].pk}").status_code == 404
