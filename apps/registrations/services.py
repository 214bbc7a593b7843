# registrations/services.py

"""
Registration Services

Workflows with database writes:
- Application intake (validation + document storage)
- Application review (approve / reject) with row locking
- Blank registration form management

For pure file helpers, see registrations/utils.py
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import transaction
from django.utils import timezone
import logging

from accounts.models import User, phone_validator
from accounts.services import UserManagementService
from accounts.utils import split_applicant_name
from notifications.services import dispatch_credentials
from registrations.models import (
    RegistrationApplication,
    RegistrationForm,
    ApplicationStatus,
    ApplicationType,
)
from registrations.utils import validate_upload
from utils.exceptions import ValidationError, NotFound, Conflict, DependencyError

logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION WORKFLOW SERVICE
# =============================================================================

class RegistrationApplicationService:
    """Intake and review of registration applications."""

    @staticmethod
    def submit(*, applicant_name, applicant_phone, application_type, document, applicant_email=None):
        """
        Store a new pending application.

        Raises:
            ValidationError: missing/malformed fields or unacceptable document
        """
        applicant_name = ' '.join((applicant_name or '').split())
        applicant_phone = (applicant_phone or '').strip()
        applicant_email = (applicant_email or '').strip() or None
        application_type = (application_type or '').strip()

        errors = {}
        if not applicant_name:
            errors['applicantName'] = "This field is required."
        elif len(applicant_name.split()) < 2:
            errors['applicantName'] = "Enter at least a first name and a surname."
        elif len(applicant_name) > RegistrationApplication._meta.get_field('applicant_name').max_length:
            errors['applicantName'] = "Name is too long."
        else:
            name_parts = zip(('first_name', 'middle_name', 'surname'), split_applicant_name(applicant_name))
            if any(part and len(part) > User._meta.get_field(field).max_length for field, part in name_parts):
                errors['applicantName'] = "Each part of the name must be at most 100 characters."

        if not applicant_phone:
            errors['applicantPhone'] = "This field is required."
        else:
            try:
                phone_validator(applicant_phone)
            except DjangoValidationError as e:
                errors['applicantPhone'] = e.messages[0]

        if not application_type:
            errors['applicationType'] = "This field is required."
        elif application_type not in ApplicationType.values:
            errors['applicationType'] = "Select a valid application type."

        if applicant_email:
            try:
                validate_email(applicant_email)
            except DjangoValidationError:
                errors['applicantEmail'] = "Enter a valid email address."

        if errors:
            raise ValidationError("Invalid input", errors=errors)

        if document is None:
            raise ValidationError("Document is required", errors={'document': "Upload a PDF, JPG or PNG file."})
        validate_upload(document, field='document')

        application = RegistrationApplication(
            applicant_name=applicant_name,
            applicant_email=applicant_email,
            applicant_phone=applicant_phone,
            application_type=application_type,
            status=ApplicationStatus.PENDING,
        )
        try:
            application.document.save(document.name, document, save=False)
        except OSError as e:
            logger.error(f"Could not store application document {document.name}: {e}", exc_info=True)
            raise DependencyError("Could not store the uploaded document")
        application.save()

        logger.info(
            f"Registration application received: {application.applicant_name} "
            f"({application.application_type}) -> {application.document.name}"
        )
        return application

    @staticmethod
    def _lock_pending(application_id):
        application = (
            RegistrationApplication.objects
            .select_for_update()
            .filter(pk=application_id)
            .first()
        )
        if application is None:
            raise NotFound("Application not found")
        if not application.is_pending:
            raise Conflict(f"Application has already been {application.status}")
        return application

    @staticmethod
    @transaction.atomic
    def approve(application_id, reviewer, notes=None):
        """
        Approve a pending application and create the applicant's account.

        The user insert and the application update commit together. The
        credentials e-mail goes out only after commit and its outcome
        never affects the approval.

        Returns:
            dict: {'user', 'credentials': {'username', 'password'}, 'email_queued'}
        """
        application = RegistrationApplicationService._lock_pending(application_id)

        first_name, middle_name, surname = split_applicant_name(application.applicant_name)
        role = application.granted_role

        user = UserManagementService.create_user(
            surname=surname,
            first_name=first_name,
            middle_name=middle_name,
            role=role,
            email=application.applicant_email,
            phone=application.applicant_phone,
        )

        application.status = ApplicationStatus.APPROVED
        application.reviewed_by = reviewer
        application.review_notes = notes
        application.generated_user = user
        application.reviewed_at = timezone.now()
        application.save()

        email_queued = False
        if application.applicant_email:
            dispatch_credentials(
                application.applicant_email,
                application.applicant_name,
                user.unique_id,
                user.surname,
            )
            email_queued = True

        logger.info(
            f"Application {application.pk} approved by "
            f"{reviewer.unique_id if reviewer else 'system'}: created {role} {user.unique_id}"
        )

        return {
            'user': user,
            'credentials': {
                'username': user.unique_id,
                'password': user.surname,
            },
            'email_queued': email_queued,
        }

    @staticmethod
    @transaction.atomic
    def reject(application_id, reviewer, notes=None):
        application = RegistrationApplicationService._lock_pending(application_id)

        application.status = ApplicationStatus.REJECTED
        application.reviewed_by = reviewer
        application.review_notes = notes
        application.reviewed_at = timezone.now()
        application.save()

        logger.info(
            f"Application {application.pk} rejected by "
            f"{reviewer.unique_id if reviewer else 'system'}"
        )
        return application


# =============================================================================
# REGISTRATION FORM SERVICE
# =============================================================================

class RegistrationFormService:
    """Downloadable blank registration forms."""

    UPDATABLE_FIELDS = {
        'title': 'title',
        'description': 'description',
        'formType': 'form_type',
        'isActive': 'is_active',
    }

    @staticmethod
    def create(*, title, form_type, file, description=None, uploaded_by=None):
        title = (title or '').strip()
        form_type = (form_type or '').strip()

        errors = {}
        if not title:
            errors['title'] = "This field is required."
        if not form_type:
            errors['formType'] = "This field is required."
        if errors:
            raise ValidationError("Invalid input", errors=errors)

        if file is None:
            raise ValidationError("File is required", errors={'file': "Upload a PDF, JPG or PNG file."})
        validate_upload(file, field='file')

        form = RegistrationForm(
            title=title,
            description=(description or '').strip() or None,
            form_type=form_type,
            uploaded_by=uploaded_by,
        )
        try:
            form.file.save(file.name, file, save=False)
        except OSError as e:
            logger.error(f"Could not store registration form {file.name}: {e}", exc_info=True)
            raise DependencyError("Could not store the uploaded file")
        form.save()

        logger.info(f"Registration form '{form.title}' uploaded as {form.file.name}")
        return form

    @staticmethod
    def update(form_id, data):
        form = RegistrationForm.objects.filter(pk=form_id).first()
        if form is None:
            raise NotFound("Form not found")

        changed = []
        for key, field in RegistrationFormService.UPDATABLE_FIELDS.items():
            if key not in data:
                continue
            value = data[key]
            if field == 'is_active':
                if not isinstance(value, bool):
                    raise ValidationError("Invalid input", errors={key: "Must be true or false."})
            elif field in ('title', 'form_type') and not (isinstance(value, str) and value.strip()):
                raise ValidationError("Invalid input", errors={key: "This field may not be blank."})
            setattr(form, field, value)
            changed.append(field)

        if changed:
            form.save(update_fields=changed)
            logger.info(f"Registration form {form.pk} updated: {', '.join(changed)}")
        return form

    @staticmethod
    def delete(form_id):
        form = RegistrationForm.objects.filter(pk=form_id).first()
        if form is None:
            raise NotFound("Form not found")
        form.delete()
        logger.info(f"Registration form {form_id} deleted")
