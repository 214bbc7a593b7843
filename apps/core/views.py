# core/views.py

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
import logging

from accounts.decorators import role_required
from accounts.models import Role
from core.models import SiteSetting, Alumni, FeaturedTeacher
from core.services import SiteSettingService, ProfileService
from utils.utils import parse_json_body, parse_bool

logger = logging.getLogger(__name__)


# =============================================================================
# SITE SETTINGS
# =============================================================================

@require_http_methods(["GET", "POST"])
def site_settings(request):
    if request.method == 'POST':
        return _update_site_settings(request)

    settings_list = SiteSetting.objects.all().order_by('key')
    return JsonResponse([setting.to_dict() for setting in settings_list], safe=False)


@role_required(Role.SUPER_ADMIN, Role.MANAGEMENT)
def _update_site_settings(request):
    data = parse_json_body(request)
    updated = SiteSettingService.bulk_upsert(data.get('settings'))
    logger.info(
        f"{request.portal_user.unique_id} updated settings: "
        f"{', '.join(setting.key for setting in updated)}"
    )
    return JsonResponse([setting.to_dict() for setting in updated], safe=False)


# =============================================================================
# PUBLIC PROFILES
# =============================================================================

def _visible_for(request, queryset):
    """Visible rows only, unless a super admin asks for ?all=true."""
    viewer = request.portal_user
    if parse_bool(request.GET.get('all')) and viewer is not None and viewer.role == Role.SUPER_ADMIN:
        return queryset
    return queryset.filter(is_visible=True)


@require_http_methods(["GET", "POST"])
def alumni_collection(request):
    if request.method == 'POST':
        return _create_profile(request, 'alumni')

    alumni = _visible_for(request, Alumni.objects.all().order_by('-created_at'))
    return JsonResponse([alum.to_dict() for alum in alumni], safe=False)


@require_http_methods(["GET", "POST"])
def featured_teacher_collection(request):
    if request.method == 'POST':
        return _create_profile(request, 'featured_teacher')

    teachers = _visible_for(request, FeaturedTeacher.objects.all().order_by('-created_at'))
    return JsonResponse([teacher.to_dict() for teacher in teachers], safe=False)


@role_required(Role.SUPER_ADMIN)
def _create_profile(request, kind):
    instance = ProfileService.create(kind, parse_json_body(request))
    return JsonResponse(instance.to_dict(), status=201)


@require_http_methods(["PATCH", "DELETE"])
@role_required(Role.SUPER_ADMIN)
def alumni_detail(request, pk):
    if request.method == 'DELETE':
        ProfileService.delete('alumni', pk)
        return JsonResponse({'message': "Alumni deleted"})
    return JsonResponse(ProfileService.update('alumni', pk, parse_json_body(request)).to_dict())


@require_http_methods(["PATCH", "DELETE"])
@role_required(Role.SUPER_ADMIN)
def featured_teacher_detail(request, pk):
    if request.method == 'DELETE':
        ProfileService.delete('featured_teacher', pk)
        return JsonResponse({'message': "Featured teacher deleted"})
    return JsonResponse(ProfileService.update('featured_teacher', pk, parse_json_body(request)).to_dict())
