# accounts/middleware.py

import logging

from accounts.services import AuthenticationService

logger = logging.getLogger(__name__)


class PortalUserMiddleware:
    """
    Attach the signed-in portal user to the request as ``request.portal_user``.

    Must run after SessionMiddleware. Anonymous requests, sessions bound to
    a removed user and deactivated accounts all get ``None``.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.portal_user = AuthenticationService.get_session_user(request)
        return self.get_response(request)
