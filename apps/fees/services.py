# fees/services.py

"""
Fee Services

Fee structure publishing with database writes.
"""

from django.db import transaction
import logging

from academics.models import Term
from fees.models import FeeStructure
from utils.exceptions import ValidationError, NotFound
from utils.utils import require_fields, parse_int

logger = logging.getLogger(__name__)


# =============================================================================
# FEE STRUCTURE SERVICE
# =============================================================================

class FeeStructureService:

    @staticmethod
    @transaction.atomic
    def create(data):
        """
        Publish a fee structure.

        Required: classLevel, amount, bankAccountNumber, bankName,
        academicYear, term.
        """
        require_fields(data, ['classLevel', 'amount', 'bankAccountNumber', 'bankName', 'academicYear', 'term'])

        amount = parse_int(data['amount'], 'amount')
        if amount < 0:
            raise ValidationError("Invalid input", errors={'amount': "Amount cannot be negative."})

        term = data['term']
        if term not in Term.values:
            raise ValidationError("Invalid input", errors={'term': "Select a valid term."})

        fee = FeeStructure(
            class_level=str(data['classLevel']).strip(),
            department=(data.get('department') or '').strip() or None,
            amount=amount,
            description=(data.get('description') or '').strip() or None,
            bank_account_number=str(data['bankAccountNumber']).strip(),
            bank_name=str(data['bankName']).strip(),
            academic_year=str(data['academicYear']).strip(),
            term=term,
        )
        fee.full_clean()
        fee.save()

        logger.info(f"Published fee structure {fee}")
        return fee

    @staticmethod
    def delete(fee_id):
        fee = FeeStructure.objects.filter(pk=fee_id).first()
        if fee is None:
            raise NotFound("Fee structure not found")
        fee.delete()
        logger.info(f"Deleted fee structure {fee_id}")
