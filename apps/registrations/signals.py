# registrations/signals.py

"""
Registration Signals

Keeps uploaded files in step with their rows.
"""

from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver
import logging

from registrations.models import RegistrationForm, RegistrationApplication

logger = logging.getLogger(__name__)


def _remove_stored_file(field_file):
    if not field_file or not field_file.name:
        return
    storage, name = field_file.storage, field_file.name

    def _delete():
        try:
            storage.delete(name)
            logger.info(f"Removed uploaded file {name}")
        except OSError as e:
            logger.warning(f"Could not delete uploaded file {name}: {e}")

    transaction.on_commit(_delete)


@receiver(post_delete, sender=RegistrationForm)
def registration_form_post_delete(sender, instance, **kwargs):
    _remove_stored_file(instance.file)


@receiver(post_delete, sender=RegistrationApplication)
def registration_application_post_delete(sender, instance, **kwargs):
    _remove_stored_file(instance.document)
