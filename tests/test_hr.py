# tests/test_hr.py

import io
from datetime import datetime

import pytest
from django.utils import timezone
from openpyxl import load_workbook

from hr.models import PayrollRecord, PayrollStatus
from hr.services import PayrollProcessingService
from hr.utils import get_payroll_period, parse_payroll_amount
from utils.exceptions import ValidationError

pytestmark = pytest.mark.django_db


def test_payroll_period_labels():
    assert get_payroll_period(datetime(2025, 3, 14)) == ('March', '2025')
    assert get_payroll_period(datetime(2024, 12, 31)) == ('December', '2024')


def test_payroll_amount_parsing():
    assert parse_payroll_amount(None) == 0
    assert parse_payroll_amount('150000') == 150000
    with pytest.raises(ValidationError):
        parse_payroll_amount(-5)
    with pytest.raises(ValidationError):
        parse_payroll_amount('lots')
    with pytest.raises(ValidationError):
        parse_payroll_amount(True)


def test_process_creates_completed_record(manager, staff_member):
    record = PayrollProcessingService.process(staff_member.pk, amount=120000, processed_by=manager)

    now = timezone.localtime()
    assert record.status == PayrollStatus.COMPLETED
    assert record.amount == 120000
    assert record.month == now.strftime('%B')
    assert record.year == str(now.year)
    assert record.processed_by == manager
    assert record.processed_at is not None


def test_amount_defaults_to_zero(manager, staff_member):
    assert PayrollProcessingService.process(staff_member.pk, processed_by=manager).amount == 0


def test_only_staff_are_paid(manager, student):
    with pytest.raises(ValidationError):
        PayrollProcessingService.process(student.pk, amount=1000, processed_by=manager)
    with pytest.raises(ValidationError):
        PayrollProcessingService.process(None, processed_by=manager)


def test_duplicate_processing_is_recorded_with_warning(manager, staff_member, caplog):
    PayrollProcessingService.process(staff_member.pk, amount=1000, processed_by=manager)
    with caplog.at_level('WARNING', logger='hr.services'):
        PayrollProcessingService.process(staff_member.pk, amount=1000, processed_by=manager)

    assert PayrollRecord.objects.filter(staff=staff_member).count() == 2
    assert 'already processed' in caplog.text


def test_payroll_endpoints_are_for_admins(api, staff_member):
    api.login(staff_member)
    assert api.get('/api/payroll').status_code == 403
    assert api.post('/api/payroll/process', {'staffId': str(staff_member.pk), 'amount': 10}).status_code == 403
    assert api.get('/api/payroll/export').status_code == 403


def test_process_and_list_payroll(api, manager, staff_member):
    api.login(manager)
    response = api.post('/api/payroll/process', {'staffId': str(staff_member.pk), 'amount': 95000})

    assert response.status_code == 201
    body = response.json()
    assert body['status'] == 'completed'
    assert body['processedBy'] == str(manager.pk)

    listed = api.get('/api/payroll').json()
    assert [item['id'] for item in listed] == [body['id']]
    assert api.get('/api/payroll', {'status': 'pending'}).json() == []


def test_process_rejects_non_staff(api, manager, student):
    api.login(manager)
    response = api.post('/api/payroll/process', {'staffId': str(student.pk)})
    assert response.status_code == 400
    assert 'staffId' in response.json()['errors']


def test_payroll_export_workbook(api, super_admin, staff_member):
    PayrollProcessingService.process(staff_member.pk, amount=50000, processed_by=super_admin)
    PayrollProcessingService.process(staff_member.pk, amount=25000, processed_by=super_admin)

    api.login(super_admin)
    response = api.get('/api/payroll/export')

    assert response.status_code == 200
    assert response['Content-Type'] == 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    assert 'payroll_' in response['Content-Disposition']

    sheet = load_workbook(io.BytesIO(response.content)).active
    assert sheet['A1'].value == "Payroll Report"
    assert [cell.value for cell in sheet[4]][:3] == ['#', 'Staff ID', 'Full Name']
    assert sheet['B5'].value == staff_member.unique_id
    assert sheet['A8'].value == 'Records:'
    assert sheet['B8'].value == 2
    assert sheet['B9'].value == 75000
