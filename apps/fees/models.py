# fees/models.py

from django.db import models
import logging

from academics.models import Term
from utils.models import BaseModel

logger = logging.getLogger(__name__)


# =============================================================================
# FEE STRUCTURE MODEL
# =============================================================================

class FeeStructure(BaseModel):
    """Published school fees for a class level, with the bank account to pay into"""

    # -------------------------------------------------------------------------
    # APPLICABILITY
    # -------------------------------------------------------------------------

    class_level = models.CharField("Class Level", max_length=50, db_index=True, help_text="e.g. JSS1")
    department = models.CharField("Department", max_length=100, blank=True, null=True)
    academic_year = models.CharField("Academic Year", max_length=20, help_text="e.g. 2024/2025")
    term = models.CharField("Term", max_length=10, choices=Term.choices)

    # -------------------------------------------------------------------------
    # AMOUNT AND PAYMENT DETAILS
    # -------------------------------------------------------------------------

    amount = models.PositiveIntegerField("Amount")
    description = models.TextField("Description", blank=True, null=True)
    bank_account_number = models.CharField("Bank Account Number", max_length=30)
    bank_name = models.CharField("Bank Name", max_length=100)

    class Meta:
        verbose_name = "Fee Structure"
        verbose_name_plural = "Fee Structures"
        ordering = ['class_level', '-created_at']

    def __str__(self):
        return f"{self.class_level} - {self.get_term_display()} {self.academic_year}: {self.amount}"

    def to_dict(self):
        return {
            'id': str(self.id),
            'classLevel': self.class_level,
            'department': self.department,
            'amount': self.amount,
            'description': self.description,
            'bankAccountNumber': self.bank_account_number,
            'bankName': self.bank_name,
            'academicYear': self.academic_year,
            'term': self.term,
        }
