# utils/exceptions.py

"""
Portal error taxonomy.

Services raise these; ApiExceptionMiddleware turns them into JSON
responses using the status code carried by each class.
"""


class PortalError(Exception):
    """Base class for all portal errors."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def as_dict(self):
        payload = {'message': self.message}
        if self.errors:
            payload['errors'] = self.errors
        return payload


class ValidationError(PortalError):
    status_code = 400
    default_message = "Invalid input"


class AuthenticationError(PortalError):
    status_code = 401
    default_message = "Not authenticated"


class InvalidCredentials(AuthenticationError):
    default_message = "Invalid credentials"


class Unauthenticated(AuthenticationError):
    default_message = "Not authenticated"


class AccountInactive(PortalError):
    status_code = 403
    default_message = "Account is inactive"


class AuthorizationError(PortalError):
    status_code = 403
    default_message = "You do not have permission to perform this action"


class NotFound(PortalError):
    status_code = 404
    default_message = "Not found"


class Conflict(PortalError):
    status_code = 409
    default_message = "Conflict"


class DependencyError(PortalError):
    status_code = 500
    default_message = "Server error"
