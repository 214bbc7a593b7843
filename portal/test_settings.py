# portal/test_settings.py

"""
Settings for the test suite: in-memory SQLite, local-memory mail and
synchronous credential e-mails.
"""

import os
import tempfile

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')

from portal.settings import *  # noqa: E402,F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
CREDENTIAL_EMAIL_ASYNC = False

MEDIA_ROOT = tempfile.mkdtemp(prefix='portal-test-media-')

SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
ALLOWED_HOSTS = ['testserver', 'localhost']

LOGGING['root']['level'] = 'WARNING'  # noqa: F405
