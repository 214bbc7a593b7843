# tests/test_registrations.py

import os
import re
import smtplib

import pytest
from django.core import mail
from django.core.files.storage import FileSystemStorage

from accounts.models import Role, User
from notifications import services as notification_services
from notifications.services import send_credentials, CREDENTIALS_SUBJECT
from registrations.models import RegistrationApplication, RegistrationForm, ApplicationStatus
from registrations.services import RegistrationApplicationService
from registrations.utils import build_upload_name

pytestmark = pytest.mark.django_db

APPLICATIONS_URL = '/api/registration-applications'
FORMS_URL = '/api/registration-forms'


def submit(api, document, **overrides):
    data = {
        'applicantName': 'Jane Doe',
        'applicantPhone': '+2348012345678',
        'applicantEmail': 'jane@example.com',
        'applicationType': 'student_jss',
        'document': document,
    }
    data.update(overrides)
    return api.upload(APPLICATIONS_URL, {key: value for key, value in data.items() if value is not None})


@pytest.fixture
def application(api, pdf_file):
    response = submit(api, pdf_file())
    assert response.status_code == 201, response.content
    return RegistrationApplication.objects.get(pk=response.json()['id'])


# =============================================================================
# INTAKE
# =============================================================================

def test_public_submission_is_stored_pending(api, pdf_file):
    response = submit(api, pdf_file())

    assert response.status_code == 201
    body = response.json()
    assert body['status'] == ApplicationStatus.PENDING
    assert body['applicantName'] == 'Jane Doe'

    application = RegistrationApplication.objects.get(pk=body['id'])
    assert re.fullmatch(r'applications/\d+-\d+-birth_certificate\.pdf', application.document.name)
    assert os.path.exists(application.document.path)


def test_png_documents_are_accepted(api, png_file):
    assert submit(api, png_file).status_code == 201


@pytest.mark.parametrize('field, value', [
    ('applicantName', ''),
    ('applicantName', 'Madonna'),
    ('applicantName', 'Jane ' + 'D' * 101),
    ('applicantName', 'Jane ' + 'Doe ' * 50 + 'Smith'),
    ('applicantPhone', ''),
    ('applicationType', 'student_university'),
    ('applicantEmail', 'not-an-email'),
])
def test_invalid_submissions_are_rejected(api, pdf_file, field, value):
    response = submit(api, pdf_file(), **{field: value})

    assert response.status_code == 400
    assert field in response.json()['errors']
    assert not RegistrationApplication.objects.exists()


def test_submission_without_document(api):
    response = submit(api, None)
    assert response.status_code == 400
    assert 'document' in response.json()['errors']


def test_disallowed_file_type(api, pdf_file):
    document = pdf_file(name='notes.txt', content=b'hello', content_type='text/plain')
    response = submit(api, document)

    assert response.status_code == 400
    assert response.json()['message'] == "File type not allowed"


def test_content_must_match_declared_type(api, pdf_file):
    document = pdf_file(name='fake.pdf', content=b'MZ\x90\x00 not a pdf')
    response = submit(api, document)

    assert response.status_code == 400
    assert response.json()['message'] == "File content does not match its type"


def test_oversized_document(api, pdf_file, settings):
    settings.UPLOAD_MAX_BYTES = 16
    response = submit(api, pdf_file())

    assert response.status_code == 400
    assert response.json()['message'] == "File too large"


def test_more_than_one_document(api, pdf_file):
    response = api.upload(APPLICATIONS_URL, {
        'applicantName': 'Jane Doe',
        'applicantPhone': '+2348012345678',
        'applicationType': 'student_jss',
        'document': [pdf_file(), pdf_file(name='second.pdf')],
    })
    assert response.status_code == 400


def test_storage_failure_stores_nothing(api, pdf_file, monkeypatch):
    def broken_save(self, name, content):
        raise OSError("disk full")

    monkeypatch.setattr(FileSystemStorage, '_save', broken_save)
    response = submit(api, pdf_file())

    assert response.status_code == 500
    assert response.json()['message'] == "Could not store the uploaded document"
    assert not RegistrationApplication.objects.exists()


def test_upload_names_are_sanitised():
    name = build_upload_name('../../etc/my passport.png')
    assert re.fullmatch(r'\d+-\d+-my_passport\.png', name)


# =============================================================================
# REVIEW
# =============================================================================

def test_listing_is_for_reviewers(api, application, student, manager):
    assert api.get(APPLICATIONS_URL).status_code == 401

    api.login(student)
    assert api.get(APPLICATIONS_URL).status_code == 403

    api.login(manager)
    response = api.get(APPLICATIONS_URL, {'status': 'pending'})
    assert response.status_code == 200
    assert [item['id'] for item in response.json()] == [str(application.pk)]
    assert api.get(APPLICATIONS_URL, {'status': 'approved'}).json() == []


def test_approval_creates_student_and_emails_credentials(
    api, application, super_admin, django_capture_on_commit_callbacks
):
    api.login(super_admin)
    with django_capture_on_commit_callbacks(execute=True):
        response = api.post(f'{APPLICATIONS_URL}/{application.pk}/approve', {'reviewNotes': 'Welcome'})

    assert response.status_code == 200
    body = response.json()
    assert re.fullmatch(r'STU\d{2}\d{4}', body['credentials']['username'])
    assert body['credentials']['password'] == 'Doe'
    assert body['emailQueued'] is True

    user = User.objects.get(unique_id=body['credentials']['username'])
    assert user.role == Role.STUDENT
    assert (user.first_name, user.middle_name, user.surname) == ('Jane', None, 'Doe')
    assert user.email == 'jane@example.com'

    application.refresh_from_db()
    assert application.status == ApplicationStatus.APPROVED
    assert application.generated_user == user
    assert application.reviewed_by == super_admin
    assert application.review_notes == 'Welcome'
    assert application.reviewed_at is not None

    assert len(mail.outbox) == 1
    message = mail.outbox[0]
    assert message.subject == CREDENTIALS_SUBJECT
    assert message.to == ['jane@example.com']
    assert user.unique_id in message.body
    assert 'Doe' in message.body


def test_approved_applicant_can_log_in(api, application, super_admin):
    api.login(super_admin)
    credentials = api.post(f'{APPLICATIONS_URL}/{application.pk}/approve').json()['credentials']
    api.logout()

    response = api.post('/api/auth/login', {'uniqueId': credentials['username'], 'password': 'doe'})
    assert response.status_code == 200
    assert response.json()['user']['role'] == Role.STUDENT


def test_staff_application_grants_staff_role(api, pdf_file, super_admin):
    application_id = submit(
        api, pdf_file(), applicantName='Aisha Bello Yusuf', applicationType='staff_teaching'
    ).json()['id']

    api.login(super_admin)
    body = api.post(f'{APPLICATIONS_URL}/{application_id}/approve').json()

    assert body['user']['role'] == Role.STAFF
    assert body['user']['middleName'] == 'Bello'
    assert re.fullmatch(r'STF\d{6}', body['credentials']['username'])
    assert body['credentials']['password'] == 'Yusuf'


def test_approval_without_email_sends_nothing(
    api, pdf_file, super_admin, django_capture_on_commit_callbacks
):
    application_id = submit(api, pdf_file(), applicantEmail=None).json()['id']

    api.login(super_admin)
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        body = api.post(f'{APPLICATIONS_URL}/{application_id}/approve').json()

    assert body['emailQueued'] is False
    assert callbacks == []
    assert mail.outbox == []


def test_application_is_reviewed_only_once(api, application, super_admin):
    api.login(super_admin)
    assert api.post(f'{APPLICATIONS_URL}/{application.pk}/approve').status_code == 200

    assert api.post(f'{APPLICATIONS_URL}/{application.pk}/approve').status_code == 409
    assert api.post(f'{APPLICATIONS_URL}/{application.pk}/reject').status_code == 409
    assert User.objects.filter(role=Role.STUDENT).count() == 1


def test_reject_creates_no_user(api, application, super_admin):
    api.login(super_admin)
    response = api.post(f'{APPLICATIONS_URL}/{application.pk}/reject', {'reviewNotes': 'Incomplete'})

    assert response.status_code == 200
    assert response.json()['application']['status'] == ApplicationStatus.REJECTED
    assert not User.objects.filter(role=Role.STUDENT).exists()


def test_management_cannot_approve(api, application, manager):
    api.login(manager)
    assert api.post(f'{APPLICATIONS_URL}/{application.pk}/approve').status_code == 403

    application.refresh_from_db()
    assert application.is_pending


def test_approving_missing_application(api, super_admin):
    api.login(super_admin)
    response = api.post(f'{APPLICATIONS_URL}/6f1c1a52-4a7e-4d61-9bb0-4d7f1c2a9e10/approve')
    assert response.status_code == 404


def test_approval_rolls_back_when_user_creation_fails(application, super_admin, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("database went away")

    monkeypatch.setattr(
        'registrations.services.UserManagementService.create_user', staticmethod(explode)
    )

    with pytest.raises(RuntimeError):
        RegistrationApplicationService.approve(application.pk, reviewer=super_admin)

    application.refresh_from_db()
    assert application.is_pending
    assert application.generated_user is None


def test_mail_failure_does_not_undo_approval(
    api, application, super_admin, monkeypatch, django_capture_on_commit_callbacks
):
    def refuse(self, fail_silently=False):
        raise smtplib.SMTPException("relay down")

    monkeypatch.setattr(notification_services.EmailMultiAlternatives, 'send', refuse)

    api.login(super_admin)
    with django_capture_on_commit_callbacks(execute=True):
        response = api.post(f'{APPLICATIONS_URL}/{application.pk}/approve')

    assert response.status_code == 200
    application.refresh_from_db()
    assert application.status == ApplicationStatus.APPROVED
    assert mail.outbox == []


def test_send_credentials_reports_outcome(monkeypatch):
    assert send_credentials('jane@example.com', 'Jane Doe', 'STU250001', 'Doe') is True
    assert 'STU250001' in mail.outbox[0].alternatives[0][0]

    def refuse(self, fail_silently=False):
        raise smtplib.SMTPException("relay down")

    monkeypatch.setattr(notification_services.EmailMultiAlternatives, 'send', refuse)
    assert send_credentials('jane@example.com', 'Jane Doe', 'STU250001', 'Doe') is False


# =============================================================================
# DOCUMENTS
# =============================================================================

def test_application_document_is_served_to_reviewers_only(api, application, student, manager):
    url = f'{APPLICATIONS_URL}/{application.pk}/document'
    assert api.get(url).status_code == 401

    api.login(student)
    assert api.get(url).status_code == 403

    api.login(manager)
    response = api.get(url)
    assert response.status_code == 200
    assert response['Content-Type'] == 'application/pdf'
    assert b''.join(response.streaming_content).startswith(b'%PDF')


def test_application_documents_are_not_public(api, application):
    name = os.path.basename(application.document.name)
    assert api.get(f'/uploads/applications/{name}').status_code == 404
    assert api.get(f'/uploads/forms/{name}').status_code == 404


# =============================================================================
# BLANK REGISTRATION FORMS
# =============================================================================

@pytest.fixture
def registration_form(api, super_admin, pdf_file):
    api.login(super_admin)
    response = api.upload(FORMS_URL, {
        'title': 'JSS Admission Form',
        'formType': 'student',
        'description': 'Fill and submit with a passport photo',
        'file': pdf_file(name='jss form.pdf'),
    })
    assert response.status_code == 201, response.content
    api.logout()
    return RegistrationForm.objects.get(pk=response.json()['id'])


def test_public_can_list_and_download_active_forms(api, registration_form):
    forms = api.get(FORMS_URL).json()
    assert [form['title'] for form in forms] == ['JSS Admission Form']

    response = api.get(forms[0]['fileUrl'])
    assert response.status_code == 200
    assert b''.join(response.streaming_content).startswith(b'%PDF')


def test_only_super_admin_uploads_forms(api, manager, pdf_file):
    api.login(manager)
    response = api.upload(FORMS_URL, {'title': 'X', 'formType': 'staff', 'file': pdf_file()})
    assert response.status_code == 403


def test_deactivated_forms_are_hidden_from_public(api, registration_form, super_admin):
    api.login(super_admin)
    response = api.patch(f'{FORMS_URL}/{registration_form.pk}', {'isActive': False})
    assert response.status_code == 200
    assert response.json()['isActive'] is False

    assert len(api.get(FORMS_URL, {'all': 'true'}).json()) == 1

    api.logout()
    assert api.get(FORMS_URL).json() == []
    assert api.get(FORMS_URL, {'all': 'true'}).status_code == 403


def test_form_update_validates_fields(api, registration_form, super_admin):
    api.login(super_admin)
    assert api.patch(f'{FORMS_URL}/{registration_form.pk}', {'isActive': 'no'}).status_code == 400
    assert api.patch(f'{FORMS_URL}/{registration_form.pk}', {'title': '  '}).status_code == 400


def test_deleting_form_removes_file(
    api, registration_form, super_admin, django_capture_on_commit_callbacks
):
    path = registration_form.file.path
    assert os.path.exists(path)

    api.login(super_admin)
    with django_capture_on_commit_callbacks(execute=True):
        response = api.delete(f'{FORMS_URL}/{registration_form.pk}')

    assert response.status_code == 200
    assert not RegistrationForm.objects.exists()
    assert not os.path.exists(path)
