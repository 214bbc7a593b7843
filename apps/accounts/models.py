# accounts/models.py

from django.db import models
from django.core.validators import RegexValidator
import logging

from utils.models import BaseModel

logger = logging.getLogger(__name__)


# =============================================================================
# VALIDATORS
# =============================================================================

phone_validator = RegexValidator(
    regex=r'^\+?\d[\d\s-]{6,18}$',
    message="Phone number must be entered in the format: '+2348012345678'."
)


# =============================================================================
# ROLES
# =============================================================================

class Role(models.TextChoices):
    SUPER_ADMIN = 'super_admin', 'Super Administrator'
    MANAGEMENT = 'management', 'Management'
    STAFF = 'staff', 'Staff'
    STUDENT = 'student', 'Student'


ROLE_ID_PREFIXES = {
    Role.SUPER_ADMIN: 'ADM',
    Role.MANAGEMENT: 'MGT',
    Role.STAFF: 'STF',
    Role.STUDENT: 'STU',
}


# =============================================================================
# USER MODEL
# =============================================================================

class User(BaseModel):
    """
    Portal account.

    There is no separate credential column: the surname is the password
    and is compared case-insensitively, so renaming a user changes their
    password.
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------

    unique_id = models.CharField(
        "Unique ID",
        max_length=20,
        unique=True,
        help_text="Login identifier issued at approval, e.g. STU250001"
    )
    surname = models.CharField("Surname", max_length=100)
    first_name = models.CharField("First Name", max_length=100)
    middle_name = models.CharField("Middle Name", max_length=100, blank=True, null=True)
    role = models.CharField(
        "Role",
        max_length=20,
        choices=Role.choices,
        default=Role.STUDENT,
        db_index=True
    )

    # -------------------------------------------------------------------------
    # CONTACT
    # -------------------------------------------------------------------------

    email = models.EmailField("Email", blank=True, null=True)
    phone = models.CharField("Phone", max_length=20, blank=True, null=True, validators=[phone_validator])
    address = models.TextField("Address", blank=True, null=True)
    profile_image = models.CharField("Profile Image URL", max_length=255, blank=True, null=True)

    # -------------------------------------------------------------------------
    # PLACEMENT
    # -------------------------------------------------------------------------

    class_level = models.CharField("Class Level", max_length=50, blank=True, null=True)
    department = models.CharField("Department", max_length=100, blank=True, null=True)

    # -------------------------------------------------------------------------
    # BANK DETAILS (staff payroll)
    # -------------------------------------------------------------------------

    bank_account_number = models.CharField("Bank Account Number", max_length=30, blank=True, null=True)
    bank_name = models.CharField("Bank Name", max_length=100, blank=True, null=True)

    is_active = models.BooleanField("Active", default=True)

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.full_name()} ({self.unique_id})"

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------

    def full_name(self):
        parts = [self.first_name, self.middle_name, self.surname]
        return ' '.join(part for part in parts if part)

    def check_password(self, raw_password):
        """Surname-as-password, case-insensitive."""
        if raw_password is None or not self.surname:
            return False
        return raw_password.lower() == self.surname.lower()

    @property
    def is_authenticated(self):
        return True

    def to_dict(self):
        return {
            'id': str(self.id),
            'uniqueId': self.unique_id,
            'surname': self.surname,
            'firstName': self.first_name,
            'middleName': self.middle_name,
            'role': self.role,
            'email': self.email,
            'phone': self.phone,
            'address': self.address,
            'profileImage': self.profile_image,
            'classLevel': self.class_level,
            'department': self.department,
            'bankAccountNumber': self.bank_account_number,
            'bankName': self.bank_name,
            'isActive': self.is_active,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
