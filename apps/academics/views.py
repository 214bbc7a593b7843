# academics/views.py

from django.http import JsonResponse, HttpResponse
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods
from io import BytesIO
import logging

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.lib.enums import TA_CENTER

from accounts.decorators import login_required_api, role_required
from accounts.models import Role
from academics.models import SchoolClass, Subject, Timetable, Term
from academics.services import CurriculumService, TimetableService, ResultService
from core.models import SiteSetting
from utils.utils import parse_json_body, parse_filters

logger = logging.getLogger(__name__)

STAFF_AND_ADMIN = (Role.SUPER_ADMIN, Role.MANAGEMENT, Role.STAFF)


# =============================================================================
# CLASSES
# =============================================================================

@require_http_methods(["GET", "POST"])
@login_required_api
def classes(request):
    if request.method == 'POST':
        return _create_class(request)

    school_classes = SchoolClass.objects.all().order_by('level', 'name')
    level = request.GET.get('level', '').strip()
    if level:
        school_classes = school_classes.filter(level=level)
    return JsonResponse([school_class.to_dict() for school_class in school_classes], safe=False)


@role_required(Role.SUPER_ADMIN, Role.MANAGEMENT)
def _create_class(request):
    school_class = CurriculumService.create_class(parse_json_body(request))
    return JsonResponse(school_class.to_dict(), status=201)


# =============================================================================
# SUBJECTS
# =============================================================================

@require_http_methods(["GET", "POST"])
@login_required_api
def subjects(request):
    if request.method == 'POST':
        return _create_subject(request)

    subject_list = Subject.objects.all().order_by('name')
    teacher_id = request.GET.get('teacherId', '').strip()
    if teacher_id:
        subject_list = subject_list.filter(teacher_id=teacher_id)
    return JsonResponse([subject.to_dict() for subject in subject_list], safe=False)


@role_required(*STAFF_AND_ADMIN)
def _create_subject(request):
    subject = CurriculumService.create_subject(parse_json_body(request))
    return JsonResponse(subject.to_dict(), status=201)


# =============================================================================
# TIMETABLE
# =============================================================================

@require_http_methods(["GET", "POST"])
@login_required_api
def timetable(request):
    if request.method == 'POST':
        return _create_timetable_entry(request)

    entries = Timetable.objects.all().order_by('day_of_week', 'start_time')
    teacher_id = request.GET.get('teacherId', '').strip()
    if teacher_id:
        entries = entries.filter(teacher_id=teacher_id)
    class_level = request.GET.get('classLevel', '').strip()
    if class_level:
        entries = entries.filter(class_level=class_level)
    return JsonResponse([entry.to_dict() for entry in entries], safe=False)


@role_required(*STAFF_AND_ADMIN)
def _create_timetable_entry(request):
    entry = TimetableService.create_entry(parse_json_body(request), created_by=request.portal_user)
    return JsonResponse(entry.to_dict(), status=201)


@require_http_methods(["DELETE"])
@role_required(*STAFF_AND_ADMIN)
def timetable_detail(request, pk):
    TimetableService.delete_entry(pk)
    return JsonResponse({'message': "Timetable entry deleted"})


# =============================================================================
# RESULTS
# =============================================================================

@require_http_methods(["GET", "POST"])
@login_required_api
def results(request):
    if request.method == 'POST':
        return _record_result(request)

    filters = parse_filters(request, ['studentId', 'subjectId', 'term', 'academicYear'])
    result_list = ResultService.results_for(
        request.portal_user,
        student_id=filters['studentId'],
        filters=filters,
    )
    return JsonResponse([result.to_dict() for result in result_list], safe=False)


@role_required(*STAFF_AND_ADMIN)
def _record_result(request):
    result, created = ResultService.record(parse_json_body(request), entered_by=request.portal_user)
    return JsonResponse(result.to_dict(), status=201 if created else 200)


# =============================================================================
# EXPORT VIEWS - RESULT SLIP
# =============================================================================

@require_GET
@role_required(Role.STUDENT, Role.SUPER_ADMIN, Role.MANAGEMENT)
def export_result_slip_pdf(request):
    """Result slip for one student as PDF"""

    filters = parse_filters(request, ['studentId', 'academicYear', 'term'])
    student, result_list, released = ResultService.slip_for(
        request.portal_user,
        student_id=filters['studentId'],
        academic_year=filters['academicYear'],
        term=filters['term'],
    )

    if not released:
        return JsonResponse(
            {'message': "Results have not been released yet", 'released': False},
            status=403,
        )

    school_name = SiteSetting.get_value('school_name', 'School Portal')

    # Create PDF
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=36,
        leftMargin=36,
        topMargin=36,
        bottomMargin=24,
    )

    elements = []

    # Styles
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'SlipTitle',
        parent=styles['Heading1'],
        fontSize=20,
        textColor=colors.HexColor('#D90429'),
        spaceAfter=6,
        alignment=TA_CENTER,
    )
    subtitle_style = ParagraphStyle(
        'SlipSubtitle',
        parent=styles['Normal'],
        fontSize=10,
        textColor=colors.grey,
        spaceAfter=16,
        alignment=TA_CENTER,
    )

    elements.append(Paragraph(school_name, title_style))

    period_text = "Result Slip"
    if filters['term']:
        period_text += f" | {dict(Term.choices).get(filters['term'], filters['term'])}"
    if filters['academicYear']:
        period_text += f" | {filters['academicYear']}"
    elements.append(Paragraph(period_text, subtitle_style))

    details = (
        f"<b>Name:</b> {student.full_name()}<br/>"
        f"<b>ID:</b> {student.unique_id}<br/>"
        f"<b>Class:</b> {student.class_level or 'N/A'}"
    )
    elements.append(Paragraph(details, styles['Normal']))
    elements.append(Spacer(1, 0.2 * inch))

    # Table data
    data = [['#', 'Subject', 'Term', 'Year', 'Test (40)', 'Exam (60)', 'Total', 'Grade']]
    for idx, result in enumerate(result_list, start=1):
        data.append([
            str(idx),
            result.subject.name[:30],
            result.get_term_display(),
            result.academic_year,
            str(result.test_score),
            str(result.exam_score),
            str(result.total_score),
            result.grade,
        ])

    table = Table(data, colWidths=[
        0.4 * inch,  # #
        2.0 * inch,  # Subject
        1.0 * inch,  # Term
        0.9 * inch,  # Year
        0.8 * inch,  # Test
        0.8 * inch,  # Exam
        0.6 * inch,  # Total
        0.6 * inch,  # Grade
    ])
    table.setStyle(TableStyle([
        # Header
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#D90429')),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, 0), 9),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 8),

        # Data rows
        ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 1), (-1, -1), 9),
        ('ALIGN', (4, 1), (-1, -1), 'CENTER'),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#F5F5F5')]),

        # Grid
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    elements.append(table)

    if result_list:
        average = sum(result.total_score for result in result_list) / len(result_list)
        elements.append(Spacer(1, 0.3 * inch))
        elements.append(Paragraph(
            f"<b>Subjects:</b> {len(result_list)}<br/><b>Average:</b> {average:.1f}",
            styles['Normal'],
        ))

    # Build PDF
    doc.build(elements)
    pdf = buffer.getvalue()
    buffer.close()

    logger.info(f"{request.portal_user.unique_id} downloaded result slip for {student.unique_id}")

    response = HttpResponse(content_type='application/pdf')
    filename = f"result_slip_{student.unique_id}_{timezone.now().strftime('%Y%m%d_%H%M%S')}.pdf"
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    response.write(pdf)
    return response
