# registrations/utils.py

"""
Registration Utility Functions

Pure helpers for uploaded files:
- Collision-resistant storage names
- Content type / extension / signature checks

NO DATABASE WRITES. For the intake and review workflow, see
registrations/services.py
"""

from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.utils.text import get_valid_filename
import os
import secrets
import time
import logging

from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# ALLOWED DOCUMENTS
# =============================================================================

ALLOWED_UPLOAD_TYPES = {
    'application/pdf': ('.pdf',),
    'image/jpeg': ('.jpg', '.jpeg'),
    'image/png': ('.png',),
}

FILE_SIGNATURES = {
    'application/pdf': (b'%PDF',),
    'image/jpeg': (b'\xff\xd8\xff',),
    'image/png': (b'\x89PNG\r\n\x1a\n',),
}


def get_upload_max_bytes():
    return getattr(settings, 'UPLOAD_MAX_BYTES', 10 * 1024 * 1024)


def validate_upload(uploaded_file, field='document'):
    """
    Check an uploaded file is a PDF, JPEG or PNG of at most 10MB.

    The declared content type, the extension and the leading bytes
    must all agree.

    Raises:
        ValidationError: naming ``field`` in its errors
    """
    if uploaded_file is None:
        raise ValidationError(
            f"{field.capitalize()} is required",
            errors={field: "Upload a PDF, JPEG or PNG file."},
        )

    content_type = (getattr(uploaded_file, 'content_type', '') or '').split(';')[0].strip().lower()
    extension = os.path.splitext(uploaded_file.name or '')[1].lower()

    allowed_extensions = ALLOWED_UPLOAD_TYPES.get(content_type)
    if allowed_extensions is None or extension not in allowed_extensions:
        raise ValidationError(
            "File type not allowed",
            errors={field: "File type not allowed. Allowed types: PDF, JPG, PNG"},
        )

    max_bytes = get_upload_max_bytes()
    if uploaded_file.size > max_bytes:
        raise ValidationError(
            "File too large",
            errors={field: f"File size must be less than {max_bytes // (1024 * 1024)}MB"},
        )

    uploaded_file.seek(0)
    head = uploaded_file.read(16)
    uploaded_file.seek(0)
    if not any(head.startswith(signature) for signature in FILE_SIGNATURES[content_type]):
        logger.warning(f"Rejected upload {uploaded_file.name}: content does not match {content_type}")
        raise ValidationError(
            "File content does not match its type",
            errors={field: "The file content does not match its type."},
        )


# =============================================================================
# STORAGE NAMES
# =============================================================================

def build_upload_name(original_name):
    """
    ``{timestamp}-{random}-{originalName}`` with the original name sanitised.

    Example:
        "birth cert.pdf" → "1718000000000-482913377-birth_cert.pdf"
    """
    timestamp = int(time.time() * 1000)
    random_part = secrets.randbelow(10 ** 9)
    try:
        safe_name = get_valid_filename(os.path.basename(original_name or 'upload'))
    except SuspiciousFileOperation:
        safe_name = 'upload'
    return f"{timestamp}-{random_part}-{safe_name}"


def application_document_path(instance, filename):
    return f"applications/{build_upload_name(filename)}"


def registration_form_path(instance, filename):
    return f"forms/{build_upload_name(filename)}"
