# tests/test_accounts.py

import re

import pytest
from django.utils import timezone

from accounts.models import Role, User
from accounts.navigation import get_navigation, resolve_route, ROLE_NAVIGATION
from accounts.services import UniqueIDGenerationService, UserManagementService
from accounts.utils import (
    get_year_suffix,
    build_unique_id_prefix,
    split_applicant_name,
)
from utils.exceptions import ValidationError, Conflict

pytestmark = pytest.mark.django_db


# =============================================================================
# UNIQUE IDS
# =============================================================================

def test_year_suffix_is_always_two_digits():
    assert get_year_suffix(2024) == '24'
    assert get_year_suffix(2005) == '05'
    assert get_year_suffix(2100) == '00'
    assert get_year_suffix(2125) == '25'
    assert build_unique_id_prefix(Role.STUDENT, 2101) == 'STU01'


def test_unique_id_prefix_per_role():
    assert build_unique_id_prefix(Role.STUDENT, 2025) == 'STU25'
    assert build_unique_id_prefix(Role.STAFF, 2025) == 'STF25'
    assert build_unique_id_prefix(Role.MANAGEMENT, 2025) == 'MGT25'
    assert build_unique_id_prefix(Role.SUPER_ADMIN, 2024) == 'ADM24'


def test_unknown_role_has_no_prefix():
    with pytest.raises(ValidationError):
        build_unique_id_prefix('janitor', 2025)


def test_unique_ids_are_sequential_per_prefix():
    first = UniqueIDGenerationService.generate_unique_id(Role.STUDENT, year=2025)
    assert first == 'STU250001'

    UserManagementService.create_user(surname='Doe', first_name='Jane', unique_id=first)
    assert UniqueIDGenerationService.generate_unique_id(Role.STUDENT, year=2025) == 'STU250002'

    # Other roles and years keep their own sequence
    assert UniqueIDGenerationService.generate_unique_id(Role.STAFF, year=2025) == 'STF250001'
    assert UniqueIDGenerationService.generate_unique_id(Role.STUDENT, year=2026) == 'STU260001'


def test_hand_issued_ids_do_not_break_the_sequence():
    UserManagementService.create_user(
        surname='Administrator', first_name='Super', role=Role.SUPER_ADMIN, unique_id='ADM24001'
    )
    assert UniqueIDGenerationService.generate_unique_id(Role.SUPER_ADMIN, year=2024) == 'ADM240001'


def test_created_user_gets_generated_id(make_user):
    user = make_user(Role.STAFF, surname='Bello', first_name='Aisha')
    assert re.fullmatch(r'STF\d{2}\d{4}', user.unique_id)


def test_exhausted_sequence_is_a_conflict(make_user):
    make_user(unique_id='STU259999')
    with pytest.raises(Conflict):
        UniqueIDGenerationService.generate_unique_id(Role.STUDENT, year=2025)

    # Out-of-format IDs never feed the sequence
    make_user(surname='Long', first_name='Tail', unique_id='STU2510000')
    with pytest.raises(Conflict):
        UniqueIDGenerationService.generate_unique_id(Role.STUDENT, year=2025)


def test_exhausted_sequence_blocks_user_creation(api, super_admin, make_user):
    year_suffix = get_year_suffix(timezone.now().year)
    make_user(unique_id=f'STU{year_suffix}9999')

    api.login(super_admin)
    response = api.post('/api/users', {'surname': 'Okafor', 'firstName': 'Chidi', 'role': Role.STUDENT})

    assert response.status_code == 409
    assert not User.objects.filter(surname='Okafor').exists()


def test_concurrently_taken_id_is_reissued_once(make_user, monkeypatch):
    taken = make_user(surname='First', first_name='Ada')
    issued = iter([taken.unique_id, 'STU990042'])
    monkeypatch.setattr(
        UniqueIDGenerationService, 'generate_unique_id', staticmethod(lambda role, year=None: next(issued))
    )
    # Let the duplicate reach the database as it would under a race
    monkeypatch.setattr(User, 'validate_unique', lambda self, exclude=None: None)

    user = UserManagementService.create_user(surname='Second', first_name='Bo')

    assert user.unique_id == 'STU990042'
    assert User.objects.filter(surname='Second').count() == 1


def test_duplicate_explicit_id_is_rejected(make_user):
    make_user(unique_id='STU240001')
    with pytest.raises(ValidationError):
        make_user(surname='Other', first_name='Person', unique_id='STU240001')


# =============================================================================
# NAME SPLITTING
# =============================================================================

def test_split_two_part_name():
    assert split_applicant_name('Jane Doe') == ('Jane', None, 'Doe')


def test_split_name_with_middle_names():
    assert split_applicant_name('  Aisha  Bello   Yusuf ') == ('Aisha', 'Bello', 'Yusuf')
    assert split_applicant_name('A B C D') == ('A', 'B C', 'D')


def test_single_token_name_is_rejected():
    with pytest.raises(ValidationError):
        split_applicant_name('Madonna')


# =============================================================================
# LOGIN / SESSION
# =============================================================================

def test_login_with_surname_is_case_insensitive(api, student):
    response = api.post('/api/auth/login', {'uniqueId': student.unique_id, 'password': 'sTuDeNt'})

    assert response.status_code == 200
    body = response.json()
    assert body['message'] == "Login successful"
    assert body['user']['uniqueId'] == student.unique_id
    assert body['defaultRoute'] == '/dashboard'
    assert [item['label'] for item in body['navigation']] == [
        "Dashboard", "Notices", "My Results", "Fee Payment Info",
    ]


def test_login_wrong_password(api, student):
    response = api.post('/api/auth/login', {'uniqueId': student.unique_id, 'password': 'Wrong'})
    assert response.status_code == 401
    assert response.json()['message'] == "Invalid credentials"


def test_login_unknown_id(api):
    response = api.post('/api/auth/login', {'uniqueId': 'STU990001', 'password': 'Doe'})
    assert response.status_code == 401
    assert response.json()['message'] == "Invalid credentials"


def test_login_missing_fields(api):
    response = api.post('/api/auth/login', {'uniqueId': 'STU990001'})
    assert response.status_code == 400
    assert 'password' in response.json()['errors']


def test_inactive_account_cannot_log_in(api, make_user):
    user = make_user(surname='Sleepy', first_name='Sam', is_active=False)
    response = api.post('/api/auth/login', {'uniqueId': user.unique_id, 'password': 'Sleepy'})
    assert response.status_code == 403
    assert response.json()['message'] == "Account is inactive"

    # Reported regardless of the password given
    response = api.post('/api/auth/login', {'uniqueId': user.unique_id, 'password': 'Wrong'})
    assert response.status_code == 403
    assert response.json()['message'] == "Account is inactive"


def test_login_rotates_session_key(api, student):
    api.login(student)
    first = api.client.cookies['portal_session'].value

    api.login(student)
    second = api.client.cookies['portal_session'].value

    assert first != second


def test_me_requires_session(api):
    response = api.get('/api/auth/me')
    assert response.status_code == 401


def test_me_returns_user_and_navigation(api, staff_member):
    api.login(staff_member)
    response = api.get('/api/auth/me')

    assert response.status_code == 200
    body = response.json()
    assert body['user']['role'] == Role.STAFF
    assert body['navigation'][0] == {'label': "Dashboard", 'path': '/dashboard'}


def test_me_after_user_removed_clears_session(api, student):
    api.login(student)
    User.objects.filter(pk=student.pk).delete()

    response = api.get('/api/auth/me')
    assert response.status_code == 401
    assert response.json()['message'] == "User not found"


def test_logout_is_idempotent(api, student):
    api.login(student)

    assert api.logout().status_code == 200
    assert api.logout().status_code == 200
    assert api.get('/api/auth/me').status_code == 401


def test_deactivated_user_loses_access(api, student):
    api.login(student)
    student.is_active = False
    student.save()

    assert api.get('/api/notices').status_code == 401
    response = api.get('/api/auth/me')
    assert response.status_code == 403


# =============================================================================
# NAVIGATION
# =============================================================================

def test_every_role_has_a_menu_starting_at_dashboard():
    for role in Role.values:
        menu = get_navigation(role)
        assert menu[0] == ("Dashboard", '/dashboard')


def test_unknown_role_falls_back_to_student_menu():
    assert get_navigation('visitor') == ROLE_NAVIGATION[Role.STUDENT]


def test_management_menu_order():
    labels = [label for label, _ in get_navigation(Role.MANAGEMENT)]
    assert labels == [
        "Dashboard", "Payroll", "Notices", "Fee Management", "Staff List", "Results Control",
    ]


def test_resolve_route(student, staff_member):
    assert resolve_route(None, '/dashboard') == (False, '/login')
    assert resolve_route(student, '/dashboard/results') == (True, None)
    assert resolve_route(student, '/dashboard/payroll') == (False, '/dashboard')
    assert resolve_route(staff_member, '/dashboard/timetable/') == (True, None)


def test_route_check_endpoint(api, manager):
    assert api.get('/api/navigation/resolve', {'path': '/dashboard/payroll'}).json() == {
        'path': '/dashboard/payroll', 'allowed': False, 'redirect': '/login',
    }

    api.login(manager)
    assert api.get('/api/navigation/resolve', {'path': '/dashboard/payroll'}).json()['allowed'] is True
    assert api.get('/api/navigation/resolve', {'path': '/dashboard/forms'}).json()['redirect'] == '/dashboard'


def test_navigation_endpoint(api, super_admin):
    assert api.get('/api/navigation').status_code == 401

    api.login(super_admin)
    body = api.get('/api/navigation').json()
    assert body['role'] == Role.SUPER_ADMIN
    assert len(body['navigation']) == 8


# =============================================================================
# USERS
# =============================================================================

def test_user_listing_is_admin_only(api, student, manager):
    api.login(student)
    assert api.get('/api/users').status_code == 403

    api.login(manager)
    response = api.get('/api/users', {'role': Role.STUDENT})
    assert response.status_code == 200
    assert [user['uniqueId'] for user in response.json()] == [student.unique_id]


def test_only_super_admin_creates_users(api, manager, super_admin):
    payload = {'surname': 'Okafor', 'firstName': 'Chidi', 'role': Role.STAFF, 'department': 'Arts'}

    api.login(manager)
    assert api.post('/api/users', payload).status_code == 403

    api.login(super_admin)
    response = api.post('/api/users', payload)
    assert response.status_code == 201
    body = response.json()
    assert re.fullmatch(r'STF\d{6}', body['uniqueId'])
    assert body['department'] == 'Arts'


def test_create_user_rejects_unknown_role(api, super_admin):
    api.login(super_admin)
    response = api.post('/api/users', {'surname': 'X', 'firstName': 'Y', 'role': 'janitor'})
    assert response.status_code == 400


def test_staff_and_student_lists(api, staff_member, student, make_user):
    make_user(surname='Other', first_name='Kid', class_level='JSS2')
    api.login(staff_member)

    staff = api.get('/api/users/staff').json()
    assert [user['uniqueId'] for user in staff] == [staff_member.unique_id]

    jss1 = api.get('/api/users/students', {'classLevel': 'JSS1'}).json()
    assert [user['uniqueId'] for user in jss1] == [student.unique_id]


def test_students_cannot_list_staff(api, student):
    api.login(student)
    assert api.get('/api/users/staff').status_code == 403


def test_staff_updates_own_bank_details(api, staff_member, make_user):
    colleague = make_user(Role.STAFF, surname='Colleague', first_name='Kemi')
    api.login(staff_member)

    response = api.patch(f'/api/users/{staff_member.pk}/bank-details', {
        'bankAccountNumber': '0123456789',
        'bankName': 'First Bank',
    })
    assert response.status_code == 200
    assert response.json()['bankName'] == 'First Bank'

    staff_member.refresh_from_db()
    assert staff_member.bank_account_number == '0123456789'

    assert api.patch(f'/api/users/{colleague.pk}/bank-details', {'bankName': 'X'}).status_code == 403


def test_malformed_json_is_a_client_error(api, super_admin):
    api.login(super_admin)
    response = api.client.post('/api/users', data='{not json', content_type='application/json')
    assert response.status_code == 400
    assert response.json()['message'] == "Invalid JSON data"
