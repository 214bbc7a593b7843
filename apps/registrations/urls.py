# registrations/urls.py

from django.urls import path
from . import views

app_name = 'registrations'

urlpatterns = [
    # Blank registration forms
    path('api/registration-forms', views.registration_forms, name='forms'),
    path('api/registration-forms/<uuid:pk>', views.registration_form_detail, name='form_detail'),
    path('uploads/forms/<str:filename>', views.registration_form_file, name='form_file'),

    # Applications
    path('api/registration-applications', views.registration_applications, name='applications'),
    path('api/registration-applications/<uuid:pk>/approve', views.approve_application, name='approve_application'),
    path('api/registration-applications/<uuid:pk>/reject', views.reject_application, name='reject_application'),
    path('api/registration-applications/<uuid:pk>/document', views.application_document, name='application_document'),
]
