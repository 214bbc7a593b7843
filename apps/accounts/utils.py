# accounts/utils.py

"""
Accounts Utility Functions

Pure utility functions for account operations:
- Two-digit year handling
- Unique ID format generation (logic only, not creation)
- Applicant name splitting

NO DATABASE WRITES - Only calculations and formatting.
For workflows with DB writes, see accounts/services.py
"""

import re
import logging

from accounts.models import Role, ROLE_ID_PREFIXES
from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

UNIQUE_ID_SEQUENCE_DIGITS = 4
UNIQUE_ID_MAX_SEQUENCE = 10 ** UNIQUE_ID_SEQUENCE_DIGITS - 1


# =============================================================================
# YEAR UTILITIES
# =============================================================================

def get_year_suffix(year):
    """
    Two-digit year suffix used in unique IDs.

    Examples:
        2024 → "24"
        2099 → "99"
        2100 → "00"
    """
    return f"{year % 100:02d}"


# =============================================================================
# UNIQUE ID FORMAT
# =============================================================================

def build_unique_id_prefix(role, year):
    """
    Build unique ID prefix WITHOUT touching database.

    Examples:
        build_unique_id_prefix('student', 2025) → "STU25"
        build_unique_id_prefix('super_admin', 2024) → "ADM24"
    """
    try:
        role_prefix = ROLE_ID_PREFIXES[Role(role)]
    except ValueError:
        raise ValidationError(f"Unknown role: {role}", errors={'role': "Select a valid role."})
    return f"{role_prefix}{get_year_suffix(year)}"


def format_unique_id(prefix, sequence):
    return f"{prefix}{sequence:0{UNIQUE_ID_SEQUENCE_DIGITS}d}"


def unique_id_pattern(prefix):
    """Regex matching IDs issued under ``prefix`` by the sequence generator."""
    return rf'^{re.escape(prefix)}\d{{{UNIQUE_ID_SEQUENCE_DIGITS}}}$'


def parse_unique_id_sequence(unique_id, prefix):
    """Trailing sequence number of an ID, or None if it is not one of ours."""
    if not unique_id.startswith(prefix):
        return None
    tail = unique_id[len(prefix):]
    if len(tail) != UNIQUE_ID_SEQUENCE_DIGITS or not tail.isdigit():
        return None
    return int(tail)


# =============================================================================
# NAME HANDLING
# =============================================================================

def split_applicant_name(full_name):
    """
    Split an applicant's full name into (first_name, middle_name, surname).

    The first token is the first name, the last token the surname and
    anything in between becomes the middle name.

    Examples:
        "Jane Doe" → ("Jane", None, "Doe")
        "Aisha Bello Yusuf" → ("Aisha", "Bello", "Yusuf")
    """
    parts = (full_name or '').split()
    if len(parts) < 2:
        raise ValidationError(
            "Please enter both first name and surname",
            errors={'applicantName': "Enter at least a first name and a surname."},
        )
    first_name = parts[0]
    surname = parts[-1]
    middle_name = ' '.join(parts[1:-1]) or None
    return first_name, middle_name, surname
