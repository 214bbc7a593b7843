# hr/services.py

"""
HR Services

Payroll processing with database writes.
For period and amount helpers, see hr/utils.py
"""

from django.db import transaction
from django.utils import timezone
import logging

from accounts.models import User, Role
from hr.models import PayrollRecord, PayrollStatus
from hr.utils import get_payroll_period, parse_payroll_amount
from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# PAYROLL PROCESSING SERVICE
# =============================================================================

class PayrollProcessingService:

    @staticmethod
    @transaction.atomic
    def process(staff_id, amount=0, processed_by=None):
        """
        Record a completed payroll payment for the current month.

        Args:
            staff_id: id of a staff account
            amount: whole amount paid, defaults to 0
            processed_by: the user running payroll

        Returns:
            PayrollRecord
        """
        if not staff_id:
            raise ValidationError("Missing required fields", errors={'staffId': "This field is required."})

        staff = User.objects.filter(pk=staff_id).first()
        if staff is None or staff.role != Role.STAFF:
            raise ValidationError("Invalid input", errors={'staffId': "Select a staff account."})

        amount = parse_payroll_amount(amount)
        now = timezone.localtime()
        month, year = get_payroll_period(now)

        if PayrollRecord.objects.filter(staff=staff, month=month, year=year).exists():
            logger.warning(f"Payroll for {staff.unique_id} already processed for {month} {year}; recording again")

        record = PayrollRecord.objects.create(
            staff=staff,
            amount=amount,
            month=month,
            year=year,
            status=PayrollStatus.COMPLETED,
            processed_by=processed_by,
            processed_at=now,
        )

        logger.info(
            f"Processed payroll for {staff.unique_id}: {amount} ({month} {year}) "
            f"by {processed_by.unique_id if processed_by else 'system'}"
        )
        return record
