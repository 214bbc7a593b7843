# hr/views.py

from django.http import JsonResponse, HttpResponse
from django.views.decorators.http import require_GET, require_POST
from django.db.models import Sum
from datetime import datetime
import logging

# Excel imports
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from accounts.decorators import role_required, ADMIN_ROLES
from hr.models import PayrollRecord, PayrollStatus
from hr.services import PayrollProcessingService
from utils.utils import parse_json_body, parse_filters

logger = logging.getLogger(__name__)


def _filtered_payroll(request):
    filters = parse_filters(request, ['staffId', 'month', 'year', 'status'])
    records = PayrollRecord.objects.select_related('staff', 'processed_by').order_by('-created_at')

    if filters['staffId']:
        records = records.filter(staff_id=filters['staffId'])
    if filters['month']:
        records = records.filter(month__iexact=filters['month'])
    if filters['year']:
        records = records.filter(year=filters['year'])
    if filters['status']:
        records = records.filter(status=filters['status'])

    return records, filters


# =============================================================================
# PAYROLL VIEWS
# =============================================================================

@require_GET
@role_required(*ADMIN_ROLES)
def payroll_list(request):
    records, _ = _filtered_payroll(request)
    return JsonResponse([record.to_dict() for record in records], safe=False)


@require_POST
@role_required(*ADMIN_ROLES)
def process_payroll(request):
    data = parse_json_body(request)
    record = PayrollProcessingService.process(
        data.get('staffId'),
        amount=data.get('amount', 0),
        processed_by=request.portal_user,
    )
    return JsonResponse(record.to_dict(), status=201)


# =============================================================================
# EXPORT VIEWS
# =============================================================================

@require_GET
@role_required(*ADMIN_ROLES)
def export_payroll_excel(request):
    """Export payroll records to Excel with filters applied"""

    records, filters = _filtered_payroll(request)

    # Create workbook
    wb = Workbook()
    ws = wb.active
    ws.title = "Payroll"

    # Define styles
    header_fill = PatternFill(start_color="D90429", end_color="D90429", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF", size=12)
    header_alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)

    border_style = Border(
        left=Side(style='thin', color='000000'),
        right=Side(style='thin', color='000000'),
        top=Side(style='thin', color='000000'),
        bottom=Side(style='thin', color='000000')
    )

    # Title row
    ws.merge_cells('A1:H1')
    title_cell = ws['A1']
    title_cell.value = "Payroll Report"
    title_cell.font = Font(bold=True, size=16, color="D90429")
    title_cell.alignment = Alignment(horizontal="center", vertical="center")

    # Subtitle with date and filters
    ws.merge_cells('A2:H2')
    subtitle_cell = ws['A2']
    filter_text = f"Generated on: {datetime.now().strftime('%Y-%m-%d %H:%M')}"
    if filters['month']:
        filter_text += f" | Month: {filters['month']}"
    if filters['year']:
        filter_text += f" | Year: {filters['year']}"
    if filters['status']:
        filter_text += f" | Status: {dict(PayrollStatus.choices).get(filters['status'], filters['status'])}"

    subtitle_cell.value = filter_text
    subtitle_cell.font = Font(size=10, italic=True)
    subtitle_cell.alignment = Alignment(horizontal="center")

    ws.append([])  # Empty row

    # Headers
    headers = ['#', 'Staff ID', 'Full Name', 'Month', 'Year', 'Amount', 'Status', 'Processed At']

    ws.append(headers)
    header_row = ws[4]

    for cell in header_row:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment
        cell.border = border_style

    # Data rows
    for idx, record in enumerate(records, start=1):
        ws.append([
            idx,
            record.staff.unique_id,
            record.staff.full_name(),
            record.month,
            record.year,
            record.amount,
            record.get_status_display(),
            record.processed_at.strftime('%Y-%m-%d %H:%M') if record.processed_at else '',
        ])

        current_row = ws.max_row
        for cell in ws[current_row]:
            cell.border = border_style
            cell.alignment = Alignment(vertical="center", wrap_text=True)
        ws[f'F{current_row}'].number_format = '#,##0'

    # Adjust column widths
    column_widths = {
        'A': 5, 'B': 14, 'C': 28, 'D': 12, 'E': 8, 'F': 14, 'G': 12, 'H': 18
    }

    for col, width in column_widths.items():
        ws.column_dimensions[col].width = width

    # Summary at bottom
    summary_row = ws.max_row + 2
    ws[f'A{summary_row}'] = 'Records:'
    ws[f'B{summary_row}'] = records.count()
    ws[f'A{summary_row}'].font = Font(bold=True)
    ws[f'B{summary_row}'].font = Font(bold=True)

    ws[f'A{summary_row + 1}'] = 'Total Paid:'
    ws[f'B{summary_row + 1}'] = records.filter(status=PayrollStatus.COMPLETED).aggregate(total=Sum('amount'))['total'] or 0
    ws[f'B{summary_row + 1}'].number_format = '#,##0'
    ws[f'A{summary_row + 1}'].font = Font(bold=True)

    # Freeze panes (header row)
    ws.freeze_panes = 'A5'

    logger.info(f"{request.portal_user.unique_id} exported {records.count()} payroll records")

    # Create response
    response = HttpResponse(
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    filename = f"payroll_{datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    response['Content-Disposition'] = f'attachment; filename="{filename}"'

    wb.save(response)
    return response
