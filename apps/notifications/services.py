# notifications/services.py

"""
Credential e-mail dispatch.

Delivery is a single best-effort attempt: no retry, no queue and no
durable record of pending mail. A failed send is logged and reported
as ``False``; it never propagates to the caller.
"""

from concurrent.futures import ThreadPoolExecutor
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.db import transaction
from django.template.loader import render_to_string
import logging

logger = logging.getLogger(__name__)

CREDENTIALS_SUBJECT = "Application Approved - Login Details"

_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix='credential-mail')


# =============================================================================
# SEND
# =============================================================================

def send_credentials(to_email, applicant_name, unique_id, password):
    """
    E-mail login details to a newly approved applicant.

    Args:
        to_email: Recipient address
        applicant_name: Name used in the greeting
        unique_id: Login ID
        password: Password (the surname)

    Returns:
        bool: True if the mail relay accepted the message
    """
    context = {
        'applicant_name': applicant_name,
        'unique_id': unique_id,
        'password': password,
        'login_url': settings.PORTAL_LOGIN_URL,
        'school_name': settings.PORTAL_SCHOOL_NAME,
    }

    try:
        text_body = render_to_string('notifications/credentials_email.txt', context)
        html_body = render_to_string('notifications/credentials_email.html', context)

        message = EmailMultiAlternatives(
            subject=CREDENTIALS_SUBJECT,
            body=text_body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[to_email],
        )
        message.attach_alternative(html_body, 'text/html')
        sent = message.send(fail_silently=False)
    except Exception:
        logger.exception(f"Failed to send login details to {to_email}")
        return False

    if sent:
        logger.info(f"Login details for {unique_id} sent to {to_email}")
        return True

    logger.warning(f"Mail backend accepted no message for {to_email}")
    return False


# =============================================================================
# DISPATCH
# =============================================================================

def dispatch_credentials(to_email, applicant_name, unique_id, password):
    """
    Send login details once the surrounding transaction commits.

    With CREDENTIAL_EMAIL_ASYNC on, the send runs on a background thread
    so the approval response does not wait on the mail relay. Nothing is
    sent if the transaction rolls back.
    """

    def _send():
        if getattr(settings, 'CREDENTIAL_EMAIL_ASYNC', True):
            _executor.submit(send_credentials, to_email, applicant_name, unique_id, password)
        else:
            send_credentials(to_email, applicant_name, unique_id, password)

    transaction.on_commit(_send)
    logger.info(f"Queued login details for {unique_id} to {to_email}")
