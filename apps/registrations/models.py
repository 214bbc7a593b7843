# registrations/models.py

from django.db import models
from django.urls import reverse
import os
import logging

from accounts.models import User, Role
from utils.models import BaseModel
from registrations.utils import application_document_path, registration_form_path

logger = logging.getLogger(__name__)


# =============================================================================
# CHOICES
# =============================================================================

class ApplicationStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'


class ApplicationType(models.TextChoices):
    STUDENT_NURSERY = 'student_nursery', 'Student - Nursery'
    STUDENT_PRIMARY = 'student_primary', 'Student - Primary'
    STUDENT_JSS = 'student_jss', 'Student - Junior Secondary'
    STUDENT_SSS = 'student_sss', 'Student - Senior Secondary'
    STAFF_TEACHING = 'staff_teaching', 'Staff - Teaching'
    STAFF_NON_TEACHING = 'staff_non_teaching', 'Staff - Non-Teaching'

    @property
    def role(self):
        """Portal role granted when an application of this type is approved."""
        return APPLICATION_TYPE_ROLES[self]


APPLICATION_TYPE_ROLES = {
    ApplicationType.STUDENT_NURSERY: Role.STUDENT,
    ApplicationType.STUDENT_PRIMARY: Role.STUDENT,
    ApplicationType.STUDENT_JSS: Role.STUDENT,
    ApplicationType.STUDENT_SSS: Role.STUDENT,
    ApplicationType.STAFF_TEACHING: Role.STAFF,
    ApplicationType.STAFF_NON_TEACHING: Role.STAFF,
}


# =============================================================================
# REGISTRATION FORM (downloadable blank forms)
# =============================================================================

class RegistrationForm(BaseModel):
    title = models.CharField("Title", max_length=200)
    description = models.TextField("Description", blank=True, null=True)
    file = models.FileField("Form File", upload_to=registration_form_path, max_length=255)
    form_type = models.CharField(
        "Form Type",
        max_length=50,
        help_text="Who the form is for, e.g. student or staff"
    )
    is_active = models.BooleanField("Active", default=True, db_index=True)
    uploaded_by = models.ForeignKey(
        User,
        verbose_name="Uploaded By",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='uploaded_forms'
    )

    class Meta:
        verbose_name = "Registration Form"
        verbose_name_plural = "Registration Forms"
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def file_url(self):
        return reverse('registrations:form_file', args=[os.path.basename(self.file.name)])

    def to_dict(self):
        return {
            'id': str(self.id),
            'title': self.title,
            'description': self.description,
            'fileUrl': self.file_url,
            'formType': self.form_type,
            'isActive': self.is_active,
            'uploadedBy': str(self.uploaded_by_id) if self.uploaded_by_id else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }


# =============================================================================
# REGISTRATION APPLICATION
# =============================================================================

class RegistrationApplication(BaseModel):
    """
    An admission or employment application awaiting review.

    pending → approved (terminal, links the generated user)
    pending → rejected (terminal)
    """

    # -------------------------------------------------------------------------
    # APPLICANT
    # -------------------------------------------------------------------------

    applicant_name = models.CharField("Applicant Name", max_length=200)
    applicant_email = models.EmailField("Applicant Email", blank=True, null=True)
    applicant_phone = models.CharField("Applicant Phone", max_length=20)
    application_type = models.CharField(
        "Application Type",
        max_length=30,
        choices=ApplicationType.choices,
        db_index=True
    )
    document = models.FileField(
        "Uploaded Document",
        upload_to=application_document_path,
        max_length=255,
        help_text="PDF, JPG or PNG, at most 10MB"
    )

    # -------------------------------------------------------------------------
    # REVIEW
    # -------------------------------------------------------------------------

    status = models.CharField(
        "Status",
        max_length=20,
        choices=ApplicationStatus.choices,
        default=ApplicationStatus.PENDING,
        db_index=True
    )
    reviewed_by = models.ForeignKey(
        User,
        verbose_name="Reviewed By",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviewed_applications'
    )
    review_notes = models.TextField("Review Notes", blank=True, null=True)
    generated_user = models.OneToOneField(
        User,
        verbose_name="Generated User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='source_application'
    )
    reviewed_at = models.DateTimeField("Reviewed At", null=True, blank=True)

    class Meta:
        verbose_name = "Registration Application"
        verbose_name_plural = "Registration Applications"
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.applicant_name} - {self.get_application_type_display()} ({self.status})"

    @property
    def is_pending(self):
        return self.status == ApplicationStatus.PENDING

    @property
    def granted_role(self):
        return ApplicationType(self.application_type).role

    @property
    def document_url(self):
        return reverse('registrations:application_document', args=[self.id])

    def to_dict(self):
        return {
            'id': str(self.id),
            'applicantName': self.applicant_name,
            'applicantEmail': self.applicant_email,
            'applicantPhone': self.applicant_phone,
            'applicationType': self.application_type,
            'uploadedDocumentUrl': self.document_url,
            'status': self.status,
            'reviewedBy': str(self.reviewed_by_id) if self.reviewed_by_id else None,
            'reviewNotes': self.review_notes,
            'generatedUserId': str(self.generated_user_id) if self.generated_user_id else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'reviewedAt': self.reviewed_at.isoformat() if self.reviewed_at else None,
        }
