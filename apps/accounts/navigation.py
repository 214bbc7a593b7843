# accounts/navigation.py

"""
Role-based dashboard navigation.

A static table maps each role to its ordered menu. The same table
decides which dashboard paths a role may open; everything outside the
table redirects to the landing route.
"""

from accounts.models import Role

LOGIN_ROUTE = '/login'
DEFAULT_ROUTE = '/dashboard'


# =============================================================================
# MENU TABLE
# =============================================================================

ROLE_NAVIGATION = {
    Role.SUPER_ADMIN: (
        ("Dashboard", '/dashboard'),
        ("Registration Forms", '/dashboard/forms'),
        ("Applications", '/dashboard/applications'),
        ("User Management", '/dashboard/users'),
        ("Notices", '/dashboard/notices'),
        ("Alumni", '/dashboard/alumni'),
        ("Teachers", '/dashboard/teachers-manage'),
        ("Settings", '/dashboard/settings'),
    ),
    Role.MANAGEMENT: (
        ("Dashboard", '/dashboard'),
        ("Payroll", '/dashboard/payroll'),
        ("Notices", '/dashboard/notices'),
        ("Fee Management", '/dashboard/fees'),
        ("Staff List", '/dashboard/staff'),
        ("Results Control", '/dashboard/results-control'),
    ),
    Role.STAFF: (
        ("Dashboard", '/dashboard'),
        ("Timetable", '/dashboard/timetable'),
        ("My Subjects", '/dashboard/subjects'),
        ("Enter Results", '/dashboard/results'),
        ("Bank Details", '/dashboard/bank'),
        ("Notices", '/dashboard/notices'),
    ),
    Role.STUDENT: (
        ("Dashboard", '/dashboard'),
        ("Notices", '/dashboard/notices'),
        ("My Results", '/dashboard/results'),
        ("Fee Payment Info", '/dashboard/fees'),
    ),
}


def get_navigation(role):
    """Ordered (label, path) menu for a role; unknown roles get the student menu."""
    try:
        return ROLE_NAVIGATION[Role(role)]
    except ValueError:
        return ROLE_NAVIGATION[Role.STUDENT]


def navigation_as_dicts(role):
    return [{'label': label, 'path': path} for label, path in get_navigation(role)]


def allowed_paths(role):
    return {path for _, path in get_navigation(role)}


def resolve_route(user, path):
    """
    Decide whether ``user`` may open dashboard ``path``.

    Returns:
        tuple: (allowed, redirect) where redirect is None when allowed,
        the login route for anonymous users and the landing route when
        the path is not on the user's menu.
    """
    if user is None:
        return False, LOGIN_ROUTE

    normalized = path.rstrip('/') or '/'
    if normalized in allowed_paths(user.role):
        return True, None
    return False, DEFAULT_ROUTE
