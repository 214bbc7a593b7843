# accounts/views.py

from django.http import JsonResponse
from django.middleware.csrf import get_token
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST, require_http_methods
import logging

from accounts.decorators import login_required_api, role_required
from accounts.models import User, Role
from accounts.navigation import navigation_as_dicts, resolve_route, DEFAULT_ROUTE
from accounts.services import AuthenticationService, UserManagementService
from utils.exceptions import ValidationError, AuthorizationError
from utils.utils import parse_json_body, require_fields

logger = logging.getLogger(__name__)


# =============================================================================
# AUTHENTICATION
# =============================================================================

@require_GET
@ensure_csrf_cookie
def csrf_view(request):
    """Hand the SPA a CSRF token (also set as cookie)."""
    return JsonResponse({'csrfToken': get_token(request)})


@require_POST
def login_view(request):
    data = parse_json_body(request)

    unique_id = data.get('uniqueId')
    password = data.get('password')
    if not isinstance(unique_id, str) or not isinstance(password, str) or not unique_id or not password:
        raise ValidationError(
            "Invalid input",
            errors={
                key: "This field is required."
                for key in ('uniqueId', 'password')
                if not isinstance(data.get(key), str) or not data.get(key)
            },
        )

    user = AuthenticationService.login(request, unique_id.strip(), password)

    return JsonResponse({
        'message': "Login successful",
        'user': user.to_dict(),
        'navigation': navigation_as_dicts(user.role),
        'defaultRoute': DEFAULT_ROUTE,
    })


@require_GET
def me_view(request):
    user = AuthenticationService.get_current_user(request)
    return JsonResponse({
        'user': user.to_dict(),
        'navigation': navigation_as_dicts(user.role),
        'defaultRoute': DEFAULT_ROUTE,
    })


@require_POST
def logout_view(request):
    AuthenticationService.logout(request)
    return JsonResponse({'message': "Logged out successfully"})


@require_GET
@login_required_api
def navigation_view(request):
    role = request.portal_user.role
    return JsonResponse({
        'role': role,
        'navigation': navigation_as_dicts(role),
        'defaultRoute': DEFAULT_ROUTE,
    })


@require_GET
def route_check_view(request):
    """Whether the current session may open a dashboard path, and where to go if not."""
    path = request.GET.get('path', '').strip()
    if not path:
        raise ValidationError("Invalid input", errors={'path': "This field is required."})

    allowed, redirect = resolve_route(request.portal_user, path)
    return JsonResponse({'path': path, 'allowed': allowed, 'redirect': redirect})


# =============================================================================
# USERS
# =============================================================================

@require_http_methods(["GET", "POST"])
def users_collection(request):
    if request.method == 'POST':
        return _create_user(request)
    return _list_users(request)


@role_required(Role.SUPER_ADMIN, Role.MANAGEMENT)
def _list_users(request):
    users = User.objects.all().order_by('-created_at')

    role = request.GET.get('role', '').strip()
    if role:
        if role not in Role.values:
            raise ValidationError(f"Unknown role: {role}", errors={'role': "Select a valid role."})
        users = users.filter(role=role)

    return JsonResponse([user.to_dict() for user in users], safe=False)


@role_required(Role.SUPER_ADMIN)
def _create_user(request):
    data = parse_json_body(request)
    require_fields(data, ['surname', 'firstName'])

    user = UserManagementService.create_user_from_payload(data)
    return JsonResponse(user.to_dict(), status=201)


@require_GET
@role_required(Role.SUPER_ADMIN, Role.MANAGEMENT, Role.STAFF)
def staff_list(request):
    staff = User.objects.filter(role=Role.STAFF).order_by('-created_at')
    return JsonResponse([user.to_dict() for user in staff], safe=False)


@require_GET
@role_required(Role.SUPER_ADMIN, Role.MANAGEMENT, Role.STAFF)
def student_list(request):
    students = User.objects.filter(role=Role.STUDENT).order_by('-created_at')

    class_level = request.GET.get('classLevel', '').strip()
    if class_level:
        students = students.filter(class_level=class_level)

    return JsonResponse([user.to_dict() for user in students], safe=False)


@require_http_methods(["PATCH"])
@login_required_api
def update_bank_details(request, pk):
    viewer = request.portal_user
    if str(viewer.id) != str(pk) and viewer.role not in (Role.SUPER_ADMIN, Role.MANAGEMENT):
        raise AuthorizationError("You can only update your own bank details")

    data = parse_json_body(request)
    user = UserManagementService.update_bank_details(
        pk,
        bank_account_number=data.get('bankAccountNumber'),
        bank_name=data.get('bankName'),
    )
    return JsonResponse(user.to_dict())
