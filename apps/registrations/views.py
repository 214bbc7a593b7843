# registrations/views.py

from django.http import JsonResponse, FileResponse
from django.core.files.storage import default_storage
from django.views.decorators.http import require_GET, require_POST, require_http_methods
import mimetypes
import os
import logging

from accounts.decorators import role_required
from accounts.models import Role
from registrations.models import RegistrationForm, RegistrationApplication, ApplicationStatus
from registrations.services import RegistrationApplicationService, RegistrationFormService
from utils.exceptions import ValidationError, NotFound, AuthorizationError
from utils.utils import parse_json_body, parse_bool

logger = logging.getLogger(__name__)


# =============================================================================
# REGISTRATION FORMS
# =============================================================================

@require_http_methods(["GET", "POST"])
def registration_forms(request):
    if request.method == 'POST':
        return _create_registration_form(request)

    forms = RegistrationForm.objects.all().order_by('-created_at')

    if parse_bool(request.GET.get('all')):
        viewer = request.portal_user
        if viewer is None or viewer.role != Role.SUPER_ADMIN:
            raise AuthorizationError()
    else:
        forms = forms.filter(is_active=True)

    return JsonResponse([form.to_dict() for form in forms], safe=False)


@role_required(Role.SUPER_ADMIN)
def _create_registration_form(request):
    form = RegistrationFormService.create(
        title=request.POST.get('title'),
        description=request.POST.get('description'),
        form_type=request.POST.get('formType'),
        file=request.FILES.get('file'),
        uploaded_by=request.portal_user,
    )
    return JsonResponse(form.to_dict(), status=201)


@require_http_methods(["PATCH", "DELETE"])
@role_required(Role.SUPER_ADMIN)
def registration_form_detail(request, pk):
    if request.method == 'DELETE':
        RegistrationFormService.delete(pk)
        return JsonResponse({'message': "Form deleted"})

    form = RegistrationFormService.update(pk, parse_json_body(request))
    return JsonResponse(form.to_dict())


@require_GET
def registration_form_file(request, filename):
    """Public download of a blank registration form."""
    name = f"forms/{filename}"
    if not RegistrationForm.objects.filter(file=name).exists():
        raise NotFound("File not found")

    if not default_storage.exists(name):
        raise NotFound("File not found")

    content_type = mimetypes.guess_type(name)[0] or 'application/octet-stream'
    return FileResponse(default_storage.open(name, 'rb'), content_type=content_type)


# =============================================================================
# REGISTRATION APPLICATIONS
# =============================================================================

@require_http_methods(["GET", "POST"])
def registration_applications(request):
    if request.method == 'POST':
        return _submit_application(request)
    return _list_applications(request)


def _submit_application(request):
    if len(request.FILES.getlist('document')) > 1:
        raise ValidationError("Upload exactly one document", errors={'document': "Upload exactly one document."})

    application = RegistrationApplicationService.submit(
        applicant_name=request.POST.get('applicantName'),
        applicant_phone=request.POST.get('applicantPhone'),
        applicant_email=request.POST.get('applicantEmail'),
        application_type=request.POST.get('applicationType'),
        document=request.FILES.get('document'),
    )
    return JsonResponse(application.to_dict(), status=201)


@role_required(Role.SUPER_ADMIN, Role.MANAGEMENT)
def _list_applications(request):
    applications = RegistrationApplication.objects.all().order_by('-created_at')

    status = request.GET.get('status', '').strip()
    if status:
        if status not in ApplicationStatus.values:
            raise ValidationError(f"Unknown status: {status}", errors={'status': "Select a valid status."})
        applications = applications.filter(status=status)

    return JsonResponse([application.to_dict() for application in applications], safe=False)


@require_POST
@role_required(Role.SUPER_ADMIN)
def approve_application(request, pk):
    data = parse_json_body(request)
    outcome = RegistrationApplicationService.approve(
        pk,
        reviewer=request.portal_user,
        notes=data.get('reviewNotes'),
    )
    return JsonResponse({
        'message': "Application approved",
        'user': outcome['user'].to_dict(),
        'credentials': outcome['credentials'],
        'emailQueued': outcome['email_queued'],
    })


@require_POST
@role_required(Role.SUPER_ADMIN)
def reject_application(request, pk):
    data = parse_json_body(request)
    application = RegistrationApplicationService.reject(
        pk,
        reviewer=request.portal_user,
        notes=data.get('reviewNotes'),
    )
    return JsonResponse({
        'message': "Application rejected",
        'application': application.to_dict(),
    })


@require_GET
@role_required(Role.SUPER_ADMIN, Role.MANAGEMENT)
def application_document(request, pk):
    """Stream an applicant's document to a reviewer."""
    application = RegistrationApplication.objects.filter(pk=pk).first()
    if application is None or not application.document:
        raise NotFound("Application not found")

    try:
        handle = application.document.open('rb')
    except FileNotFoundError:
        raise NotFound("File not found")

    filename = os.path.basename(application.document.name)
    content_type = mimetypes.guess_type(filename)[0] or 'application/octet-stream'
    logger.info(f"{request.portal_user.unique_id} opened document of application {application.pk}")
    return FileResponse(handle, content_type=content_type, filename=filename)
