# academics/models.py

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
import logging

from accounts.models import User
from utils.models import BaseModel

logger = logging.getLogger(__name__)

MAX_TEST_SCORE = 40
MAX_EXAM_SCORE = 60


# =============================================================================
# CHOICES
# =============================================================================

class Term(models.TextChoices):
    FIRST = 'first', 'First Term'
    SECOND = 'second', 'Second Term'
    THIRD = 'third', 'Third Term'
    ALL = 'all', 'All Terms'


class DayOfWeek(models.TextChoices):
    MONDAY = 'Monday', 'Monday'
    TUESDAY = 'Tuesday', 'Tuesday'
    WEDNESDAY = 'Wednesday', 'Wednesday'
    THURSDAY = 'Thursday', 'Thursday'
    FRIDAY = 'Friday', 'Friday'
    SATURDAY = 'Saturday', 'Saturday'


# =============================================================================
# SCHOOL CLASS MODEL
# =============================================================================

class SchoolClass(BaseModel):
    name = models.CharField("Class Name", max_length=100, help_text="e.g. JSS1 A")
    level = models.CharField("Level", max_length=50, db_index=True, help_text="e.g. JSS1")
    department = models.CharField("Department", max_length=100, blank=True, null=True)
    academic_year = models.CharField("Academic Year", max_length=20, help_text="e.g. 2024/2025")

    class Meta:
        verbose_name = "Class"
        verbose_name_plural = "Classes"
        ordering = ['level', 'name']

    def __str__(self):
        return f"{self.name} ({self.academic_year})"

    def to_dict(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'level': self.level,
            'department': self.department,
            'academicYear': self.academic_year,
        }


# =============================================================================
# SUBJECT MODEL
# =============================================================================

class Subject(BaseModel):
    name = models.CharField("Subject Name", max_length=100)
    code = models.CharField("Subject Code", max_length=20, blank=True, null=True)
    school_class = models.ForeignKey(
        SchoolClass,
        verbose_name="Class",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='subjects'
    )
    teacher = models.ForeignKey(
        User,
        verbose_name="Teacher",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='subjects'
    )

    class Meta:
        verbose_name = "Subject"
        verbose_name_plural = "Subjects"
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.code})" if self.code else self.name

    def to_dict(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'code': self.code,
            'classId': str(self.school_class_id) if self.school_class_id else None,
            'teacherId': str(self.teacher_id) if self.teacher_id else None,
        }


# =============================================================================
# TIMETABLE MODEL
# =============================================================================

class Timetable(BaseModel):
    subject = models.ForeignKey(
        Subject,
        verbose_name="Subject",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='timetable_entries'
    )
    teacher = models.ForeignKey(
        User,
        verbose_name="Teacher",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='timetable_entries'
    )
    school_class = models.ForeignKey(
        SchoolClass,
        verbose_name="Class",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='timetable_entries'
    )
    day_of_week = models.CharField("Day", max_length=10, choices=DayOfWeek.choices, db_index=True)
    start_time = models.TimeField("Start Time")
    end_time = models.TimeField("End Time")
    room = models.CharField("Room", max_length=50, blank=True, null=True)
    class_level = models.CharField("Class Level", max_length=50, blank=True, null=True, db_index=True)

    class Meta:
        verbose_name = "Timetable Entry"
        verbose_name_plural = "Timetable Entries"
        ordering = ['day_of_week', 'start_time']

    def __str__(self):
        return f"{self.day_of_week} {self.start_time:%H:%M}-{self.end_time:%H:%M} {self.subject or ''}".strip()

    def to_dict(self):
        return {
            'id': str(self.id),
            'subjectId': str(self.subject_id) if self.subject_id else None,
            'teacherId': str(self.teacher_id) if self.teacher_id else None,
            'classId': str(self.school_class_id) if self.school_class_id else None,
            'dayOfWeek': self.day_of_week,
            'startTime': self.start_time.strftime('%H:%M') if self.start_time else None,
            'endTime': self.end_time.strftime('%H:%M') if self.end_time else None,
            'room': self.room,
            'classLevel': self.class_level,
        }


# =============================================================================
# RESULT MODEL
# =============================================================================

class Result(BaseModel):
    """
    A student's score in one subject for one term.

    total_score and grade are always derived from the two component
    scores when the result is recorded.
    """

    student = models.ForeignKey(
        User,
        verbose_name="Student",
        on_delete=models.CASCADE,
        related_name='results'
    )
    subject = models.ForeignKey(
        Subject,
        verbose_name="Subject",
        on_delete=models.CASCADE,
        related_name='results'
    )
    school_class = models.ForeignKey(
        SchoolClass,
        verbose_name="Class",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='results'
    )
    academic_year = models.CharField("Academic Year", max_length=20, db_index=True)
    term = models.CharField("Term", max_length=10, choices=Term.choices, db_index=True)

    test_score = models.PositiveSmallIntegerField(
        "Test Score",
        validators=[MinValueValidator(0), MaxValueValidator(MAX_TEST_SCORE)]
    )
    exam_score = models.PositiveSmallIntegerField(
        "Exam Score",
        validators=[MinValueValidator(0), MaxValueValidator(MAX_EXAM_SCORE)]
    )
    total_score = models.PositiveSmallIntegerField("Total Score")
    grade = models.CharField("Grade", max_length=2)
    remarks = models.TextField("Remarks", blank=True, null=True)

    entered_by = models.ForeignKey(
        User,
        verbose_name="Entered By",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='entered_results'
    )

    class Meta:
        verbose_name = "Result"
        verbose_name_plural = "Results"
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['student', 'subject', 'academic_year', 'term'],
                name='unique_result_per_student_subject_term'
            ),
        ]

    def __str__(self):
        return f"{self.student.unique_id} - {self.subject.name} ({self.term} {self.academic_year}): {self.grade}"

    def to_dict(self):
        return {
            'id': str(self.id),
            'studentId': str(self.student_id),
            'subjectId': str(self.subject_id),
            'subjectName': self.subject.name if self.subject_id else None,
            'classId': str(self.school_class_id) if self.school_class_id else None,
            'academicYear': self.academic_year,
            'term': self.term,
            'testScore': self.test_score,
            'examScore': self.exam_score,
            'totalScore': self.total_score,
            'grade': self.grade,
            'remarks': self.remarks,
            'enteredBy': str(self.entered_by_id) if self.entered_by_id else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
