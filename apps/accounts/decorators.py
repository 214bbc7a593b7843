# accounts/decorators.py

from functools import wraps
import logging

from accounts.models import Role
from utils.exceptions import Unauthenticated, AuthorizationError

logger = logging.getLogger(__name__)

ADMIN_ROLES = (Role.SUPER_ADMIN, Role.MANAGEMENT)


def login_required_api(view_func):
    """Reject anonymous requests with a 401 JSON response."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if getattr(request, 'portal_user', None) is None:
            raise Unauthenticated()
        return view_func(request, *args, **kwargs)

    return _wrapped


def role_required(*roles):
    """
    Allow only signed-in users holding one of ``roles``.

    Usage:
        @role_required(Role.SUPER_ADMIN, Role.MANAGEMENT)
        def payroll_list(request): ...
    """
    allowed = {str(role) for role in roles}

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            user = getattr(request, 'portal_user', None)
            if user is None:
                raise Unauthenticated()
            if user.role not in allowed:
                logger.warning(
                    f"{user.unique_id} ({user.role}) denied access to {request.method} {request.path}"
                )
                raise AuthorizationError()
            return view_func(request, *args, **kwargs)

        return _wrapped

    return decorator
