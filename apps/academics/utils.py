# academics/utils.py
"""
Utility functions for academics app
Grade derivation and score checks. No database access.
"""

from datetime import time
import logging

from academics.models import MAX_TEST_SCORE, MAX_EXAM_SCORE
from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# GRADING
# =============================================================================

# (minimum total, grade), highest first
GRADE_BOUNDARIES = (
    (70, 'A'),
    (60, 'B'),
    (50, 'C'),
    (40, 'D'),
    (30, 'E'),
)
FAIL_GRADE = 'F'


def grade_for_total(total):
    """
    Letter grade for a total score.

    Examples:
        75 → 'A', 70 → 'A', 69 → 'B', 30 → 'E', 29 → 'F'
    """
    for minimum, grade in GRADE_BOUNDARIES:
        if total >= minimum:
            return grade
    return FAIL_GRADE


def validate_scores(test_score, exam_score):
    """Raise ValidationError unless 0 <= test <= 40 and 0 <= exam <= 60."""
    errors = {}
    if not 0 <= test_score <= MAX_TEST_SCORE:
        errors['testScore'] = f"Test score must be between 0 and {MAX_TEST_SCORE}."
    if not 0 <= exam_score <= MAX_EXAM_SCORE:
        errors['examScore'] = f"Exam score must be between 0 and {MAX_EXAM_SCORE}."
    if errors:
        raise ValidationError("Invalid input", errors=errors)


def compute_result(test_score, exam_score):
    """(total, grade) for a validated pair of component scores."""
    validate_scores(test_score, exam_score)
    total = test_score + exam_score
    return total, grade_for_total(total)


# =============================================================================
# TIMETABLE HELPERS
# =============================================================================

def parse_clock_time(value, field):
    """Parse 'HH:MM' (or 'HH:MM:SS') into a time."""
    if isinstance(value, str):
        parts = value.strip().split(':')
        if len(parts) in (2, 3) and all(part.isdigit() for part in parts):
            hour, minute = int(parts[0]), int(parts[1])
            second = int(parts[2]) if len(parts) == 3 else 0
            if 0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60:
                return time(hour, minute, second)
    raise ValidationError("Invalid input", errors={field: "Enter a time as HH:MM."})
