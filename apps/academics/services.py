# academics/services.py

"""
Academics Services

Workflows with database writes:
- Classes, subjects and timetable entries
- Result recording (server-derived totals and grades)
- Result visibility for students (release gate)

For grading and parsing helpers, see academics/utils.py
"""

from django.db import transaction
import logging

from accounts.models import User, Role
from academics.models import SchoolClass, Subject, Timetable, Result, Term, DayOfWeek
from academics.utils import compute_result, parse_clock_time
from core.models import SiteSetting
from utils.exceptions import ValidationError, NotFound
from utils.utils import require_fields, parse_int

logger = logging.getLogger(__name__)


def _get_or_invalid(model, pk, field, **filters):
    """Fetch a referenced row or raise ValidationError naming ``field``."""
    if pk in (None, ''):
        return None
    instance = model.objects.filter(pk=pk, **filters).first()
    if instance is None:
        raise ValidationError("Invalid input", errors={field: f"Unknown {model._meta.verbose_name.lower()}."})
    return instance


# =============================================================================
# CLASS & SUBJECT SERVICE
# =============================================================================

class CurriculumService:

    @staticmethod
    def create_class(data):
        require_fields(data, ['name', 'level', 'academicYear'])
        school_class = SchoolClass.objects.create(
            name=str(data['name']).strip(),
            level=str(data['level']).strip(),
            department=(data.get('department') or '').strip() or None,
            academic_year=str(data['academicYear']).strip(),
        )
        logger.info(f"Created class {school_class}")
        return school_class

    @staticmethod
    def create_subject(data):
        require_fields(data, ['name'])
        subject = Subject.objects.create(
            name=str(data['name']).strip(),
            code=(data.get('code') or '').strip() or None,
            school_class=_get_or_invalid(SchoolClass, data.get('classId'), 'classId'),
            teacher=_get_or_invalid(User, data.get('teacherId'), 'teacherId', role=Role.STAFF),
        )
        logger.info(f"Created subject {subject}")
        return subject


# =============================================================================
# TIMETABLE SERVICE
# =============================================================================

class TimetableService:

    @staticmethod
    def create_entry(data, created_by):
        require_fields(data, ['dayOfWeek', 'startTime', 'endTime'])

        day = str(data['dayOfWeek']).strip().capitalize()
        if day not in DayOfWeek.values:
            raise ValidationError("Invalid input", errors={'dayOfWeek': "Select a valid day."})

        start_time = parse_clock_time(data['startTime'], 'startTime')
        end_time = parse_clock_time(data['endTime'], 'endTime')
        if end_time <= start_time:
            raise ValidationError("Invalid input", errors={'endTime': "End time must be after start time."})

        teacher_id = data.get('teacherId')
        if not teacher_id and created_by.role == Role.STAFF:
            teacher_id = created_by.id

        school_class = _get_or_invalid(SchoolClass, data.get('classId'), 'classId')
        class_level = str(data.get('classLevel') or '').strip() or None
        if class_level is None and school_class is not None:
            class_level = school_class.level

        entry = Timetable.objects.create(
            subject=_get_or_invalid(Subject, data.get('subjectId'), 'subjectId'),
            teacher=_get_or_invalid(User, teacher_id, 'teacherId', role=Role.STAFF),
            school_class=school_class,
            day_of_week=day,
            start_time=start_time,
            end_time=end_time,
            room=str(data.get('room') or '').strip() or None,
            class_level=class_level,
        )
        logger.info(f"Created timetable entry {entry}")
        return entry

    @staticmethod
    def delete_entry(entry_id):
        entry = Timetable.objects.filter(pk=entry_id).first()
        if entry is None:
            raise NotFound("Timetable entry not found")
        entry.delete()
        logger.info(f"Deleted timetable entry {entry_id}")


# =============================================================================
# RESULT SERVICE
# =============================================================================

class ResultService:

    @staticmethod
    @transaction.atomic
    def record(data, entered_by):
        """
        Create or correct a student's result for a subject and term.

        Any client-sent totalScore/grade is ignored; both are derived
        from the component scores.

        Returns:
            tuple: (result, created)
        """
        require_fields(data, ['studentId', 'subjectId', 'academicYear', 'term'])

        term = data['term']
        if term not in Term.values:
            raise ValidationError("Invalid input", errors={'term': "Select a valid term."})

        test_score = parse_int(data.get('testScore'), 'testScore')
        exam_score = parse_int(data.get('examScore'), 'examScore')
        total_score, grade = compute_result(test_score, exam_score)

        student = _get_or_invalid(User, data['studentId'], 'studentId', role=Role.STUDENT)
        subject = _get_or_invalid(Subject, data['subjectId'], 'subjectId')
        school_class = _get_or_invalid(SchoolClass, data.get('classId'), 'classId')

        result, created = Result.objects.update_or_create(
            student=student,
            subject=subject,
            academic_year=str(data['academicYear']).strip(),
            term=term,
            defaults={
                'school_class': school_class,
                'test_score': test_score,
                'exam_score': exam_score,
                'total_score': total_score,
                'grade': grade,
                'remarks': (data.get('remarks') or '').strip() or None,
                'entered_by': entered_by,
            },
        )

        logger.info(
            f"{'Recorded' if created else 'Corrected'} result for {student.unique_id} in {subject.name} "
            f"({term} {result.academic_year}): {total_score} {grade} by {entered_by.unique_id}"
        )
        return result, created

    @staticmethod
    def results_for(viewer, student_id=None, filters=None):
        """
        Results a viewer may see.

        Students only ever get their own rows, and only once results are
        released; everyone else may filter freely.
        """
        results = Result.objects.select_related('subject', 'student').order_by('-created_at')

        if viewer.role == Role.STUDENT:
            if not SiteSetting.results_released():
                return results.none()
            results = results.filter(student=viewer)
        elif student_id:
            results = results.filter(student_id=student_id)

        for key, field in (('subjectId', 'subject_id'), ('term', 'term'), ('academicYear', 'academic_year')):
            value = (filters or {}).get(key)
            if value:
                results = results.filter(**{field: value})

        return results

    @staticmethod
    def slip_for(viewer, student_id=None, academic_year=None, term=None):
        """
        (student, results, released) for a result slip.

        Students get their own slip; admins may request any student's.
        """
        if viewer.role == Role.STUDENT:
            student = viewer
            released = SiteSetting.results_released()
        else:
            if not student_id:
                raise ValidationError("Invalid input", errors={'studentId': "This field is required."})
            student = User.objects.filter(pk=student_id, role=Role.STUDENT).first()
            if student is None:
                raise NotFound("Student not found")
            released = True

        results = Result.objects.select_related('subject').filter(student=student).order_by('subject__name')
        if academic_year:
            results = results.filter(academic_year=academic_year)
        if term:
            results = results.filter(term=term)

        if not released:
            results = results.none()
        return student, list(results), released
