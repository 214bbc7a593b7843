# fees/views.py

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
import logging

from accounts.decorators import login_required_api, role_required, ADMIN_ROLES
from fees.models import FeeStructure
from fees.services import FeeStructureService
from utils.utils import parse_json_body

logger = logging.getLogger(__name__)


# =============================================================================
# FEE STRUCTURE VIEWS
# =============================================================================

@require_http_methods(["GET", "POST"])
@login_required_api
def fee_structures(request):
    if request.method == 'POST':
        return _create_fee_structure(request)

    fees = FeeStructure.objects.all()
    class_level = request.GET.get('classLevel', '').strip()
    if class_level:
        fees = fees.filter(class_level=class_level)
    return JsonResponse([fee.to_dict() for fee in fees], safe=False)


@role_required(*ADMIN_ROLES)
def _create_fee_structure(request):
    fee = FeeStructureService.create(parse_json_body(request))
    return JsonResponse(fee.to_dict(), status=201)


@require_http_methods(["DELETE"])
@role_required(*ADMIN_ROLES)
def fee_structure_detail(request, pk):
    FeeStructureService.delete(pk)
    return JsonResponse({'message': "Fee structure deleted"})
