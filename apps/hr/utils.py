# hr/utils.py
"""
Utility functions for hr app
Payroll period and amount helpers. NO DATABASE WRITES.
"""

import calendar

from utils.exceptions import ValidationError


def get_payroll_period(moment):
    """
    (month, year) labels for a payroll run at ``moment``.

    Examples:
        2025-03-14 → ('March', '2025')
    """
    return calendar.month_name[moment.month], str(moment.year)


def parse_payroll_amount(value):
    """Whole, non-negative amount; missing means 0."""
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        raise ValidationError("Invalid input", errors={'amount': "Enter a whole number."})
    try:
        amount = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid input", errors={'amount': "Enter a whole number."})
    if amount < 0:
        raise ValidationError("Invalid input", errors={'amount': "Amount cannot be negative."})
    return amount
