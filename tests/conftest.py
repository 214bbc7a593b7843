# tests/conftest.py

import json

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from accounts.models import Role
from accounts.services import UserManagementService

PDF_BYTES = b'%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n'
PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 32


# =============================================================================
# ENVIRONMENT
# =============================================================================

@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / 'uploads')
    return settings.MEDIA_ROOT


# =============================================================================
# USERS
# =============================================================================

@pytest.fixture
def make_user(db):
    def _make(role=Role.STUDENT, surname='Doe', first_name='Jane', **extra):
        return UserManagementService.create_user(
            surname=surname,
            first_name=first_name,
            role=role,
            **extra,
        )
    return _make


@pytest.fixture
def super_admin(make_user):
    return make_user(Role.SUPER_ADMIN, surname='Administrator', first_name='Super', email='admin@example.com')


@pytest.fixture
def manager(make_user):
    return make_user(Role.MANAGEMENT, surname='Manager', first_name='Musa')


@pytest.fixture
def staff_member(make_user):
    return make_user(Role.STAFF, surname='Teacher', first_name='Tunde', department='Science')


@pytest.fixture
def student(make_user):
    return make_user(Role.STUDENT, surname='Student', first_name='Sade', class_level='JSS1')


# =============================================================================
# HTTP
# =============================================================================

class ApiClient:
    """Thin JSON wrapper around Django's test client."""

    def __init__(self, client):
        self.client = client

    def get(self, url, params=None):
        return self.client.get(url, params or {})

    def post(self, url, payload=None):
        return self.client.post(url, data=json.dumps(payload or {}), content_type='application/json')

    def patch(self, url, payload=None):
        return self.client.patch(url, data=json.dumps(payload or {}), content_type='application/json')

    def delete(self, url):
        return self.client.delete(url)

    def upload(self, url, data):
        return self.client.post(url, data=data)

    def login(self, user, password=None):
        response = self.post('/api/auth/login', {
            'uniqueId': user.unique_id,
            'password': password if password is not None else user.surname,
        })
        assert response.status_code == 200, response.content
        return response

    def logout(self):
        return self.post('/api/auth/logout')


@pytest.fixture
def api(client):
    return ApiClient(client)


# =============================================================================
# UPLOADS
# =============================================================================

@pytest.fixture
def pdf_file():
    def _make(name='birth certificate.pdf', content=PDF_BYTES, content_type='application/pdf'):
        return SimpleUploadedFile(name, content, content_type=content_type)
    return _make


@pytest.fixture
def png_file():
    return SimpleUploadedFile('passport.png', PNG_BYTES, content_type='image/png')
