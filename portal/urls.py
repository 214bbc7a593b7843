"""
URL configuration for the school portal.

Every business area lives in its own app and mounts its JSON endpoints
under ``/api/``. Uploaded blank registration forms are served from
``/uploads/forms/``; applicant documents are never served publicly.
"""
from django.urls import path, include

urlpatterns = [
    # Accounts app - login, session, users, navigation
    path('api/', include(('accounts.urls', 'accounts'), namespace='accounts')),

    # Registrations app - blank forms, applications, approval workflow, uploads
    path('', include(('registrations.urls', 'registrations'), namespace='registrations')),

    # Notices app
    path('api/', include(('notices.urls', 'notices'), namespace='notices')),

    # Academics app - classes, subjects, timetable, results
    path('api/', include(('academics.urls', 'academics'), namespace='academics')),

    # HR app - payroll
    path('api/', include(('hr.urls', 'hr'), namespace='hr')),

    # Fees app - fee structures
    path('api/', include(('fees.urls', 'fees'), namespace='fees')),

    # Core app - site settings, alumni, featured teachers
    path('api/', include(('core.urls', 'core'), namespace='core')),
]
