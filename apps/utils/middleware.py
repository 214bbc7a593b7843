# utils/middleware.py

import json
import logging

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404, JsonResponse

from utils.context import set_request_context, clear_request_context, get_client_ip
from utils.exceptions import PortalError

logger = logging.getLogger(__name__)


class AuditContextMiddleware:
    """
    Middleware to capture request context for audit logging.

    Must run after PortalUserMiddleware so the signed-in user is known.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        set_request_context(
            user=getattr(request, 'portal_user', None),
            ip_address=get_client_ip(request),
            request_path=request.path,
        )

        try:
            response = self.get_response(request)
        finally:
            # Always clear context after request
            clear_request_context()

        return response


class ApiExceptionMiddleware:
    """
    Translate exceptions raised by views into short JSON messages.

    PortalError subclasses carry their own status code. Django's own
    validation/lookup errors are mapped to 400/404. Anything else is
    logged with its stack trace and reported as a generic 500.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, PortalError):
            if exception.status_code >= 500:
                logger.error(f"{request.method} {request.path} failed: {exception.message}", exc_info=exception)
            else:
                logger.info(f"{request.method} {request.path} -> {exception.status_code}: {exception.message}")
            return JsonResponse(exception.as_dict(), status=exception.status_code)

        if isinstance(exception, DjangoValidationError):
            errors = exception.message_dict if hasattr(exception, 'error_dict') else exception.messages
            return JsonResponse({'message': "Invalid input", 'errors': errors}, status=400)

        if isinstance(exception, json.JSONDecodeError):
            return JsonResponse({'message': "Invalid JSON data"}, status=400)

        if isinstance(exception, (ObjectDoesNotExist, Http404)):
            return JsonResponse({'message': "Not found"}, status=404)

        if isinstance(exception, PermissionDenied):
            return JsonResponse({'message': "You do not have permission to perform this action"}, status=403)

        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return JsonResponse({'message': "Server error"}, status=500)
