# notices/views.py

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
import logging

from accounts.decorators import login_required_api, role_required, ADMIN_ROLES
from notices.services import NoticeService, visible_notices_for
from utils.utils import parse_json_body

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
@login_required_api
def notices(request):
    if request.method == 'POST':
        return _create_notice(request)

    visible = visible_notices_for(request.portal_user)
    return JsonResponse([notice.to_dict() for notice in visible], safe=False)


@role_required(*ADMIN_ROLES)
def _create_notice(request):
    notice = NoticeService.create(parse_json_body(request), published_by=request.portal_user)
    return JsonResponse(notice.to_dict(), status=201)


@require_http_methods(["DELETE"])
@role_required(*ADMIN_ROLES)
def notice_detail(request, pk):
    NoticeService.delete(pk)
    return JsonResponse({'message': "Notice deleted"})
