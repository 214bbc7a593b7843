# hr/models.py

from django.db import models
import logging

from accounts.models import User
from utils.models import BaseModel

logger = logging.getLogger(__name__)


class PayrollStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'


# =============================================================================
# PAYROLL RECORD MODEL
# =============================================================================

class PayrollRecord(BaseModel):
    """
    One salary payment to a staff member.

    A record is written each time payroll is processed; nothing stops the
    same staff member being processed twice in a month.
    """

    staff = models.ForeignKey(
        User,
        verbose_name="Staff Member",
        on_delete=models.PROTECT,
        related_name='payroll_records'
    )
    amount = models.PositiveIntegerField("Amount", default=0)
    month = models.CharField("Month", max_length=20, help_text="Full month name, e.g. January")
    year = models.CharField("Year", max_length=4)
    status = models.CharField(
        "Status",
        max_length=20,
        choices=PayrollStatus.choices,
        default=PayrollStatus.PENDING,
        db_index=True
    )

    processed_by = models.ForeignKey(
        User,
        verbose_name="Processed By",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='processed_payrolls'
    )
    processed_at = models.DateTimeField("Processed At", null=True, blank=True)

    class Meta:
        verbose_name = "Payroll Record"
        verbose_name_plural = "Payroll Records"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['staff', 'year', 'month']),
        ]

    def __str__(self):
        return f"{self.staff.unique_id} - {self.month} {self.year} ({self.get_status_display()})"

    def to_dict(self):
        return {
            'id': str(self.id),
            'staffId': str(self.staff_id),
            'amount': self.amount,
            'month': self.month,
            'year': self.year,
            'status': self.status,
            'processedBy': str(self.processed_by_id) if self.processed_by_id else None,
            'processedAt': self.processed_at.isoformat() if self.processed_at else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
